"""Card abstractions and the card space generator for Set."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Number
from typing import Callable, Iterable, Iterator, List, Sequence

__all__ = [
    "SHAPE_COUNTS",
    "SHAPES",
    "SHADINGS",
    "COLORS",
    "Card",
    "iter_card_space",
    "generate_card_space",
    "format_cards",
]

logger = logging.getLogger(__name__)

SHAPE_COUNTS: tuple[int, ...] = (1, 2, 3)
SHAPES: tuple[str, ...] = ("rectangle", "diamond", "squiggle")
SHADINGS: tuple[str, ...] = ("solid", "striped", "empty")
COLORS: tuple[str, ...] = ("red", "blue", "green")


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single Set card. Never mutated once created."""

    shape_count: int
    shape: str
    shading: str
    color: str

    def attributes(self) -> tuple[object, object, object, object]:
        """Return the attribute values in column order."""

        return (self.shape_count, self.shape, self.shading, self.color)

    def label(self) -> str:
        """Create a display label suitable for hints and CLI output."""

        return f"{self.shape_count}x {self.color}, {self.shading}, {self.shape}"

    @property
    def code(self) -> str:
        return f"{self.shape_count}-{self.color}-{self.shading}-{self.shape}"

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a card written as ``count-color-shading-shape``."""

        parts = code.strip().lower().split("-")
        if len(parts) != 4:
            raise ValueError(f"invalid card code '{code}'")
        count, color, shading, shape = parts
        try:
            shape_count = int(count)
        except ValueError as exc:
            raise ValueError(f"invalid shape count in card code '{code}'") from exc
        return cls(shape_count=shape_count, shape=shape, shading=shading, color=color)


def _is_count(value: object) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _valid(values: Iterable[object], predicate: Callable[[object], bool]) -> list[object]:
    kept: list[object] = []
    for value in values:
        if predicate(value):
            kept.append(value)
        else:
            logger.debug("skipping invalid attribute value %r", value)
    return kept


def iter_card_space(
    shape_counts: Iterable[object],
    shapes: Iterable[object],
    shadings: Iterable[object],
    colors: Iterable[object],
) -> Iterator[Card]:
    """Yield one card per attribute combination.

    Shape counts vary slowest and colors fastest. Shape counts that are not
    numbers and names that are not strings are skipped.
    """

    counts = _valid(shape_counts, _is_count)
    shape_names = _valid(shapes, lambda v: isinstance(v, str))
    shading_names = _valid(shadings, lambda v: isinstance(v, str))
    color_names = _valid(colors, lambda v: isinstance(v, str))

    for shape_count in counts:
        for shape in shape_names:
            for shading in shading_names:
                for color in color_names:
                    yield Card(shape_count=shape_count, shape=shape, shading=shading, color=color)


def generate_card_space(
    shape_counts: Iterable[object] = SHAPE_COUNTS,
    shapes: Iterable[object] = SHAPES,
    shadings: Iterable[object] = SHADINGS,
    colors: Iterable[object] = COLORS,
) -> List[Card]:
    """Return a deterministic ordering of all cards for the given domains."""

    return list(iter_card_space(shape_counts, shapes, shadings, colors))


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(card.code for card in cards)
