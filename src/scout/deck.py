"""
Scout deck: two-faced cards, one per unordered pair of distinct values.
3 players: values 0..8 (36 cards). 5 players: values 0..9 (45 cards).
4 players: the 5-player deck without the (8, 9) card (44 cards).
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

MIN_VALUE = 0
MAX_VALUE = 9
PLAYER_COUNTS = (3, 4, 5)


@dataclass(frozen=True)
class Card:
    """
    A card with a face-up value and the value printed on its reverse.

    ``down`` is None only for cards seen through a lookahead view, where the
    reverse face of a shown card is unknown to the acting player.
    """

    up: int
    down: Optional[int] = None

    def flipped(self) -> Card:
        if self.down is None:
            raise ValueError(f"Cannot flip {self}: reverse face unknown")
        return Card(self.down, self.up)

    def __str__(self) -> str:
        if self.down is None:
            return f"({self.up}, ?)"
        return f"({self.up}, {self.down})"

    def __repr__(self) -> str:
        return str(self)


def _pairs(top: int) -> list[Card]:
    return [Card(a, b) for b in range(MIN_VALUE, top + 1) for a in range(MIN_VALUE, b)]


def build_deck(player_count: int) -> list[Card]:
    """Build the unshuffled deck for a 3, 4 or 5 player round."""
    if player_count == 3:
        return _pairs(8)
    if player_count == 4:
        return [c for c in _pairs(MAX_VALUE) if c != Card(8, 9)]
    if player_count == 5:
        return _pairs(MAX_VALUE)
    raise ConfigurationError(
        f"Unsupported player_count {player_count}; expected 3, 4, or 5."
    )


def deal(
    player_count: int,
    shuffle: bool = True,
    rng: random.Random | None = None,
) -> list[tuple[Card, ...]]:
    """
    Deal the whole deck round-robin starting at player 0.
    Hands differ in size by at most one card.
    """
    deck = build_deck(player_count)
    if shuffle:
        if rng is None:
            rng = random.Random()
        rng.shuffle(deck)
    return [tuple(deck[p::player_count]) for p in range(player_count)]
