"""Tests for cards, deck building and dealing."""
import random

import pytest

from scout.deck import Card, build_deck, deal
from scout.errors import ConfigurationError


def test_deck_sizes():
    assert len(build_deck(3)) == 36
    assert len(build_deck(4)) == 44
    assert len(build_deck(5)) == 45


def test_decks_have_distinct_pairs():
    for n in (3, 4, 5):
        deck = build_deck(n)
        assert len(set(deck)) == len(deck)
        assert all(c.up < c.down for c in deck)


def test_three_player_deck_values():
    values = {v for c in build_deck(3) for v in (c.up, c.down)}
    assert values == set(range(9))


def test_four_player_deck_drops_highest_pair():
    deck = build_deck(4)
    assert Card(8, 9) not in deck
    assert set(build_deck(5)) - set(deck) == {Card(8, 9)}


@pytest.mark.parametrize("n", [0, 2, 6])
def test_unsupported_player_count(n):
    with pytest.raises(ConfigurationError):
        build_deck(n)


@pytest.mark.parametrize("n,hand_size", [(3, 12), (4, 11), (5, 9)])
def test_deal_hand_sizes(n, hand_size):
    hands = deal(n, shuffle=True, rng=random.Random(n))
    assert [len(h) for h in hands] == [hand_size] * n
    dealt = [c for h in hands for c in h]
    assert len(dealt) == len(build_deck(n))
    assert set(dealt) == set(build_deck(n))


def test_unshuffled_deal_is_round_robin():
    deck = build_deck(3)
    hands = deal(3, shuffle=False)
    assert hands[0][:2] == (deck[0], deck[3])
    assert hands[1][0] == deck[1]
    assert hands[2][0] == deck[2]


def test_seeded_deal_is_reproducible():
    assert deal(4, rng=random.Random(7)) == deal(4, rng=random.Random(7))


def test_flip():
    assert Card(2, 7).flipped() == Card(7, 2)
    assert Card(2, 7).flipped().flipped() == Card(2, 7)


def test_flip_unknown_reverse():
    with pytest.raises(ValueError):
        Card(3).flipped()
