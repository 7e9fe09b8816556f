"""Game session wiring the deck engine to player scoring."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from . import cards
from .cards import Card
from .deck import Deck
from .rules import SET_SIZE, is_set
from .scoreboard import HighScore, Players

__all__ = [
    "GameConfig",
    "GameNotStartedError",
    "CheckResult",
    "NoSetResult",
    "GameSession",
]

logger = logging.getLogger(__name__)


class GameNotStartedError(RuntimeError):
    """Raised when a game operation is attempted before ``start``."""


class CheckResult(str, Enum):
    """Outcome of claiming a set."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    WRONG_COUNT = "wrong_count"
    GAME_OVER = "game_over"


class NoSetResult(str, Enum):
    """Outcome of declaring that the table holds no set."""

    SET_PRESENT = "set_present"
    CARDS_ADDED = "cards_added"
    REDEALT = "redealt"
    GAME_OVER = "game_over"


@dataclass(slots=True)
class GameConfig:
    """Runtime configuration for a Set session."""

    shape_counts: Sequence[object] = cards.SHAPE_COUNTS
    shapes: Sequence[object] = cards.SHAPES
    shadings: Sequence[object] = cards.SHADINGS
    colors: Sequence[object] = cards.COLORS
    initial_deal: int = 12
    max_table: int = 15
    max_players: int = 4
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.initial_deal < SET_SIZE:
            raise ValueError("initial_deal must be at least 3")
        if self.max_table < self.initial_deal:
            raise ValueError("max_table cannot be smaller than initial_deal")
        if self.max_players <= 0:
            raise ValueError("max_players must be positive")


@dataclass(slots=True)
class GameSession:
    """Explicit owner of the deck, the players and the high score."""

    config: GameConfig = field(default_factory=GameConfig)
    deck: Deck = field(init=False)
    players: Players | None = field(default=None, init=False)
    high_score: HighScore = field(default_factory=HighScore, init=False)
    hint_number: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.deck = Deck(
            self.config.shape_counts,
            self.config.shapes,
            self.config.shadings,
            self.config.colors,
            seed=self.config.seed,
        )

    @property
    def in_progress(self) -> bool:
        return self.players is not None

    def _require_players(self) -> Players:
        if self.players is None:
            raise GameNotStartedError("no game in progress; call start() first")
        return self.players

    @property
    def is_over(self) -> bool:
        """``True`` when no further set can be claimed."""

        if self.deck.is_exhausted:
            return True
        return not self.deck.deal_pile and not self.deck.set_exists()

    def start(self, num_players: int) -> List[Card]:
        """Begin a new game: fresh scores, shuffled deck, initial deal."""

        if num_players <= 0 or num_players > self.config.max_players:
            raise ValueError(f"number of players must be between 1 and {self.config.max_players}")
        self.players = Players(num_players)
        self.hint_number = 0
        self.deck.shuffle()
        dealt = self.deck.deal(self.config.initial_deal)
        logger.info("started game for %d player(s) with %d cards on the table", num_players, len(dealt))
        return dealt

    def select_player(self, index: int) -> None:
        self._require_players().select(index)

    def _refill(self) -> List[Card]:
        if self.deck.deal_pile and len(self.deck.dealt) < self.config.initial_deal:
            return self.deck.deal(SET_SIZE)
        return []

    def check_set(self, indices: Sequence[int] | None = None) -> CheckResult:
        """Score a claimed set, taken from ``deck.choices`` when omitted."""

        players = self._require_players()
        selection = list(self.deck.choices if indices is None else indices)
        if len(selection) != SET_SIZE:
            return CheckResult.WRONG_COUNT

        self.deck.validate_indices(selection)
        claimed = [self.deck.dealt[index] for index in selection]
        if not is_set(claimed):
            score = players.record_miss()
            self.deck.choices = []
            logger.info("player %d missed a set (score %d)", players.chosen, score)
            return CheckResult.INCORRECT

        self.deck.pick(selection)
        self._refill()
        score = players.record_set()
        self.hint_number = 0
        logger.info("player %d found a set (score %d)", players.chosen, score)
        if self.is_over:
            logger.info("game over after %d set(s)", players.sets_found)
            return CheckResult.GAME_OVER
        return CheckResult.CORRECT

    def no_set(self) -> NoSetResult:
        """Handle a claim that the table holds no set."""

        self._require_players()
        if self.deck.set_exists():
            return NoSetResult.SET_PRESENT

        if len(self.deck.dealt) < self.config.max_table:
            if self.deck.deal_pile:
                self.deck.deal(SET_SIZE)
                return NoSetResult.CARDS_ADDED
            logger.info("no set left and the deal pile is empty")
            return NoSetResult.GAME_OVER

        self.deck.return_dealt()
        self.deck.deal(self.config.initial_deal)
        logger.info("table full without a set; redealt %d cards", len(self.deck.dealt))
        return NoSetResult.REDEALT

    def hint(self) -> Card | None:
        """Reveal one card of the first available set, cycling through it."""

        self._require_players()
        found = self.deck.set_exists()
        if not found:
            return None
        card = found[self.hint_number]
        self.hint_number = (self.hint_number + 1) % SET_SIZE
        return card

    def quit(self) -> Players | None:
        """End the current game, folding its scores into the high score."""

        finished = self.players
        if self.high_score.update(finished):
            logger.info("new high score: %d", self.high_score.value)
        self.deck.reset()
        self.players = None
        self.hint_number = 0
        return finished
