"""Deck engine tracking the three card zones of a Set game."""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Sequence

from . import cards as cards_mod
from .cards import Card
from .rules import find_first_set

__all__ = ["InvalidIndexError", "Deck"]

logger = logging.getLogger(__name__)


class InvalidIndexError(IndexError):
    """Raised when indices do not address the currently dealt cards."""


class Deck:
    """Owns the deal pile, the dealt table and the discarded cards.

    Every card generated at construction lives in exactly one of the three
    zones for the lifetime of the deck. ``choices`` holds indices into
    ``dealt`` selected by a front-end and carries no game state.
    """

    def __init__(
        self,
        shape_counts: Iterable[object] = cards_mod.SHAPE_COUNTS,
        shapes: Iterable[object] = cards_mod.SHAPES,
        shadings: Iterable[object] = cards_mod.SHADINGS,
        colors: Iterable[object] = cards_mod.COLORS,
        *,
        seed: int | None = None,
    ) -> None:
        self.deal_pile: List[Card] = cards_mod.generate_card_space(shape_counts, shapes, shadings, colors)
        self.dealt: List[Card] = []
        self.discarded: List[Card] = []
        self.choices: List[int] = []
        self._rng = random.Random(seed)
        logger.debug("generated %d cards", len(self.deal_pile))

    @classmethod
    def canonical(cls, *, seed: int | None = None) -> "Deck":
        """Return a deck built from the standard 81-card domains."""

        return cls(seed=seed)

    @property
    def total(self) -> int:
        return len(self.deal_pile) + len(self.dealt) + len(self.discarded)

    @property
    def is_exhausted(self) -> bool:
        """``True`` once nothing is left on the table or in the pile."""

        return not self.dealt and not self.deal_pile

    def deal(self, quantity: int) -> List[Card]:
        """Move up to ``quantity`` cards from the pile tail onto the table.

        The deal is clamped to the cards remaining; callers detect a short
        deal from the length of the returned list.
        """

        if quantity < 0:
            raise ValueError("quantity must be non-negative")
        available = min(quantity, len(self.deal_pile))
        if available < quantity:
            logger.warning("requested %d cards but only %d remain in the deal pile", quantity, available)
        delivered = [self.deal_pile.pop() for _ in range(available)]
        self.dealt.extend(delivered)
        logger.debug("dealt %d card(s); %d left in pile", len(delivered), len(self.deal_pile))
        return delivered

    def validate_indices(self, indices: Sequence[int]) -> None:
        seen: set[int] = set()
        for index in indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidIndexError(f"invalid index {index!r}: not an integer")
            if index < 0 or index >= len(self.dealt):
                raise InvalidIndexError(f"invalid index {index}: {len(self.dealt)} card(s) dealt")
            if index in seen:
                raise InvalidIndexError(f"invalid index {index}: selected more than once")
            seen.add(index)

    def pick(self, indices: Sequence[int]) -> List[Card]:
        """Discard the dealt cards at ``indices`` and clear ``choices``.

        Indices are removed largest first so earlier removals do not shift the
        positions still to be removed. Nothing is moved if any index is invalid.
        """

        self.validate_indices(indices)
        picked: List[Card] = []
        for index in sorted(indices, reverse=True):
            card = self.dealt.pop(index)
            self.discarded.append(card)
            picked.append(card)
        self.choices = []
        logger.debug("picked %d card(s); %d discarded in total", len(picked), len(self.discarded))
        return picked

    def toggle_choice(self, index: int) -> List[int]:
        """Select or deselect the dealt card at ``index``."""

        self.validate_indices([index])
        if index in self.choices:
            self.choices.remove(index)
        else:
            self.choices.append(index)
        return self.choices

    def reset(self) -> None:
        """Put every card back into the deal pile without shuffling."""

        self.deal_pile = self.deal_pile + self.dealt + self.discarded
        self.dealt = []
        self.discarded = []
        self.choices = []

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Reset the deck and randomly permute the deal pile.

        Each draw takes a uniformly random card from those remaining.
        """

        self.reset()
        source = rng if rng is not None else self._rng
        remaining = self.deal_pile
        shuffled: List[Card] = []
        while remaining:
            shuffled.append(remaining.pop(source.randrange(len(remaining))))
        self.deal_pile = shuffled
        logger.debug("shuffled %d cards", len(shuffled))

    def return_dealt(self) -> int:
        """Slide the table back under the deal pile so fresh cards come next."""

        returned = len(self.dealt)
        self.deal_pile = self.dealt + self.deal_pile
        self.dealt = []
        self.choices = []
        logger.debug("returned %d dealt card(s) to the bottom of the pile", returned)
        return returned

    def set_exists(self) -> List[Card]:
        """Return the first set among the dealt cards, or an empty list."""

        found = find_first_set(self.dealt)
        return list(found) if found is not None else []
