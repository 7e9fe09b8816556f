"""Tests covering the deck zone bookkeeping."""

from __future__ import annotations

import random
from collections import Counter
from typing import Callable, Sequence

import pytest

from setgame import rules
from setgame.cards import Card, generate_card_space
from setgame.deck import Deck, InvalidIndexError


def _all_cards(deck: Deck) -> Counter:
    return Counter(deck.deal_pile + deck.dealt + deck.discarded)


def test_new_deck_starts_with_full_deal_pile(deck: Deck) -> None:
    assert len(deck.deal_pile) == 81
    assert deck.dealt == []
    assert deck.discarded == []
    assert deck.choices == []
    assert deck.total == 81


def test_custom_domains_build_product_sized_pile() -> None:
    deck = Deck([1, 2], ["oval"], ["solid", "empty"], ["red", "blue", "green"])

    assert len(deck.deal_pile) == 12


def test_deal_takes_cards_from_pile_tail(deck: Deck) -> None:
    expected = list(reversed(deck.deal_pile[-3:]))

    dealt = deck.deal(3)

    assert dealt == expected
    assert deck.dealt == expected
    assert len(deck.deal_pile) == 78
    assert dealt[0] == Card(3, "squiggle", "empty", "green")


def test_deal_21_then_set_exists(deck: Deck) -> None:
    deck.shuffle()
    deck.deal(21)

    assert len(deck.deal_pile) == 60
    assert len(deck.dealt) == 21
    found = deck.set_exists()
    assert len(found) == 3
    assert rules.is_set(found)


def test_deal_clamps_to_remaining_cards(deck: Deck) -> None:
    deck.deal(80)

    dealt = deck.deal(5)

    assert len(dealt) == 1
    assert deck.deal_pile == []
    assert len(deck.dealt) == 81
    assert deck.deal(3) == []


def test_deal_zero_and_negative(deck: Deck) -> None:
    assert deck.deal(0) == []
    with pytest.raises(ValueError):
        deck.deal(-1)


def test_pick_moves_cards_and_keeps_remaining_order(deck: Deck) -> None:
    dealt = deck.deal(6)
    deck.choices = [1, 4]

    picked = deck.pick([1, 4])

    assert picked == [dealt[4], dealt[1]]
    assert deck.discarded == [dealt[4], dealt[1]]
    assert deck.dealt == [dealt[0], dealt[2], dealt[3], dealt[5]]
    assert deck.choices == []
    assert deck.total == 81


def test_pick_first_three_cards(deck: Deck) -> None:
    deck.deal(21)

    deck.pick([0, 1, 2])

    assert len(deck.deal_pile) == 60
    assert len(deck.dealt) == 18
    assert len(deck.discarded) == 3


@pytest.mark.parametrize("indices", [[0, 1, 6], [-1, 0, 1], [2, 2, 3], [0, "1", 2]])
def test_pick_rejects_invalid_indices_without_mutation(deck: Deck, indices: list[object]) -> None:
    deck.deal(6)
    before = (list(deck.deal_pile), list(deck.dealt), list(deck.discarded))

    with pytest.raises(InvalidIndexError):
        deck.pick(indices)  # type: ignore[arg-type]

    assert (deck.deal_pile, deck.dealt, deck.discarded) == before


def test_invalid_index_error_is_an_index_error(deck: Deck) -> None:
    with pytest.raises(IndexError, match="invalid index"):
        deck.pick([0])


def test_toggle_choice_adds_and_removes(deck: Deck) -> None:
    deck.deal(3)

    assert deck.toggle_choice(2) == [2]
    assert deck.toggle_choice(0) == [2, 0]
    assert deck.toggle_choice(2) == [0]
    with pytest.raises(InvalidIndexError):
        deck.toggle_choice(3)


def test_reset_merges_zones_in_order(deck: Deck) -> None:
    deck.deal(6)
    deck.pick([0, 1, 2])
    pile, dealt, discarded = list(deck.deal_pile), list(deck.dealt), list(deck.discarded)

    deck.reset()

    assert deck.deal_pile == pile + dealt + discarded
    assert deck.dealt == []
    assert deck.discarded == []


def test_reset_twice_is_a_noop(deck: Deck) -> None:
    deck.deal(9)
    deck.pick([3, 4, 5])
    deck.reset()
    snapshot = list(deck.deal_pile)

    deck.reset()

    assert deck.deal_pile == snapshot


def test_shuffle_resets_and_permutes(deck: Deck) -> None:
    deck.deal(12)
    deck.pick([0, 5, 7])
    original = _all_cards(deck)

    deck.shuffle(random.Random(99))

    assert deck.dealt == []
    assert deck.discarded == []
    assert Counter(deck.deal_pile) == original
    assert deck.deal_pile != generate_card_space()


def test_shuffle_is_reproducible_with_seed() -> None:
    first = Deck.canonical(seed=7)
    second = Deck.canonical(seed=7)

    first.shuffle()
    second.shuffle()

    assert first.deal_pile == second.deal_pile


def test_return_dealt_puts_table_under_the_pile(deck: Deck) -> None:
    dealt = deck.deal(12)
    top_of_pile = deck.deal_pile[-1]

    returned = deck.return_dealt()

    assert returned == 12
    assert deck.dealt == []
    assert deck.deal_pile[:12] == dealt
    assert deck.deal(1) == [top_of_pile]
    assert deck.total == 81


def test_set_exists_returns_first_set_by_index(arrange_table: Callable[[Deck, Sequence[Card]], None]) -> None:
    deck = Deck.canonical()
    table = [
        Card(1, "rectangle", "solid", "red"),
        Card(2, "diamond", "striped", "blue"),
        Card(1, "rectangle", "solid", "blue"),
        Card(3, "squiggle", "empty", "green"),
        Card(1, "rectangle", "solid", "green"),
    ]
    arrange_table(deck, table)

    assert deck.set_exists() == [table[0], table[1], table[3]]
    assert deck.total == 81


def test_set_exists_empty_without_set(arrange_table: Callable[[Deck, Sequence[Card]], None]) -> None:
    deck = Deck.canonical()
    arrange_table(
        deck,
        [
            Card(1, "rectangle", "solid", "red"),
            Card(1, "rectangle", "solid", "blue"),
            Card(1, "rectangle", "striped", "green"),
        ],
    )

    assert deck.set_exists() == []
    assert Deck.canonical().set_exists() == []


def test_exhausted_only_when_table_and_pile_are_empty() -> None:
    deck = Deck([1], ["oval"], ["solid"], ["red", "blue", "green"])
    assert not deck.is_exhausted

    deck.deal(3)
    assert not deck.is_exhausted

    deck.pick([0, 1, 2])
    assert deck.is_exhausted
