from __future__ import annotations

from typing import Callable, Sequence

import pytest

from setgame.cards import Card
from setgame.deck import Deck


def _arrange_table(deck: Deck, table: Sequence[Card]) -> None:
    deck.reset()
    for card in table:
        deck.deal_pile.remove(card)
        deck.dealt.append(card)


@pytest.fixture
def arrange_table() -> Callable[[Deck, Sequence[Card]], None]:
    """Return a helper that resets a deck and lays ``table`` out in order."""

    return _arrange_table


@pytest.fixture
def deck() -> Deck:
    return Deck.canonical(seed=1234)
