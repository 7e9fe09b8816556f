"""Helpers for tracking player scores across Set games."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Players", "HighScore"]


@dataclass(slots=True)
class Players:
    """Mutable score tracker for one game session."""

    count: int
    scores: list[int] = field(init=False)
    chosen: int = field(default=0, init=False)
    sets_found: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count <= 0:
            raise ValueError("count must be a positive integer")
        self.scores = [0 for _ in range(self.count)]

    def select(self, index: int) -> None:
        """Make ``index`` the player claiming the next set."""

        if index < 0 or index >= self.count:
            raise ValueError("player index out of range")
        self.chosen = index

    def record_set(self) -> int:
        """Credit the chosen player with a valid set and return their score."""

        self.scores[self.chosen] += 1
        self.sets_found += 1
        return self.scores[self.chosen]

    def record_miss(self) -> int:
        """Penalise the chosen player for a wrong claim, never below zero."""

        if self.scores[self.chosen] > 0:
            self.scores[self.chosen] -= 1
        return self.scores[self.chosen]

    def best_score(self) -> int:
        return max(self.scores)

    def leaders(self) -> list[int]:
        """Return the indices of every player holding the best score."""

        best = self.best_score()
        return [idx for idx, score in enumerate(self.scores) if score == best]


@dataclass(slots=True)
class HighScore:
    """Best single-player score seen across finished games."""

    value: int = 0
    games_recorded: int = 0

    def update(self, players: Players | None) -> bool:
        """Fold ``players`` into the record and report whether it improved."""

        if players is None:
            return False
        self.games_recorded += 1
        best = players.best_score()
        if best > self.value:
            self.value = best
            return True
        return False
