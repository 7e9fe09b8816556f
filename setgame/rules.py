"""Rule helpers deciding whether three cards form a set."""

from __future__ import annotations

from itertools import combinations
from typing import Hashable, List, Sequence, Tuple

from .cards import Card

__all__ = ["is_same_or_diff", "is_set", "find_first_set", "find_all_sets"]

SET_SIZE = 3

Triple = Tuple[Card, Card, Card]


def _require_three(values: Sequence[object], what: str) -> None:
    if len(values) != SET_SIZE:
        raise ValueError(f"expected exactly {SET_SIZE} {what}, got {len(values)}")


def is_same_or_diff(values: Sequence[Hashable]) -> bool:
    """Return ``True`` when the three values are all equal or all different.

    Exactly two equal values and one different value is the only failing case.
    """

    _require_three(values, "values")
    first, second, third = values
    all_same = first == second and second == third
    all_diff = first != second and second != third and first != third
    return all_same or all_diff


def is_set(cards: Sequence[Card]) -> bool:
    """Return ``True`` when ``cards`` satisfy the rule on every attribute."""

    _require_three(cards, "cards")
    columns = zip(*(card.attributes() for card in cards))
    return all(is_same_or_diff(column) for column in columns)


def find_first_set(cards: Sequence[Card]) -> Triple | None:
    """Return the first valid triple in ascending index order, or ``None``."""

    for combo in combinations(cards, SET_SIZE):
        if is_set(combo):
            return combo
    return None


def find_all_sets(cards: Sequence[Card]) -> List[Triple]:
    """Return every valid triple in ascending index order.

    Brute force over C(n, 3) combinations; 21 cards is only 1330 checks.
    """

    return [combo for combo in combinations(cards, SET_SIZE) if is_set(combo)]
