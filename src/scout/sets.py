"""
Set-rank table: every legal set shape mapped to an integer strength.

Ranks are assigned in generation order, so a later entry always beats an
earlier one:
- singles 0..9
- then for each size 2..9: straights (lowest base first), then flushes.
An ascending straight and its reverse share one rank. Anything not in the
table (including the empty set) has rank 0.
"""
from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from .deck import MAX_VALUE, MIN_VALUE

MAX_SET_SIZE = 9

SetMap = Mapping[tuple[int, ...], int]


def build_set_map() -> SetMap:
    """Enumerate all ranked sets; returns a read-only mapping."""
    table: dict[tuple[int, ...], int] = {}
    rank = 0

    for value in range(MIN_VALUE, MAX_VALUE + 1):
        rank += 1
        table[(value,)] = rank

    for size in range(2, MAX_SET_SIZE + 1):
        for base in range(MIN_VALUE, MAX_VALUE - size + 2):
            rank += 1
            straight = tuple(range(base, base + size))
            table[straight] = rank
            table[straight[::-1]] = rank
        for value in range(MIN_VALUE, MAX_VALUE + 1):
            rank += 1
            table[(value,) * size] = rank

    return MappingProxyType(table)


@lru_cache(maxsize=1)
def default_set_map() -> SetMap:
    """Shared table; it never changes, so one instance serves every game."""
    return build_set_map()


def set_rank(set_map: SetMap, values: Iterable[int]) -> int:
    return set_map.get(tuple(values), 0)


__all__ = ["MAX_SET_SIZE", "SetMap", "build_set_map", "default_set_map", "set_rank"]
