"""
Hand-strength heuristic: the fewest Show plays that empty a hand.

Only Shows are considered (no scouting), and the active set is ignored, so
this is an estimate of how "clean" a hand is rather than a game solver.
"""
from __future__ import annotations

import sys
from typing import Dict, Optional, Sequence

from .sets import SetMap

# Returned when no ranked range exists (values outside the rank table).
UNREACHABLE = sys.maxsize

TurnsCache = Dict[tuple[int, ...], int]


def turns_to_empty(
    hand: Sequence[int],
    set_map: SetMap,
    cache: Optional[TurnsCache] = None,
) -> int:
    """
    Minimum number of Shows needed to empty ``hand``.

    An empty hand takes 0 turns; a hand that is itself a ranked set takes 1.
    Otherwise every ranked contiguous range is removed in turn and the rest
    solved recursively. Results are memoised in ``cache`` keyed by the exact
    value sequence, so the cache must belong to a single search or strategy.
    """
    hand = tuple(hand)
    if not hand:
        return 0
    if hand in set_map:
        return 1
    if cache is None:
        cache = {}
    if hand in cache:
        return cache[hand]

    best = UNREACHABLE
    for start in range(len(hand)):
        for stop in range(start, len(hand)):
            if hand[start : stop + 1] not in set_map:
                # Longer ranges from the same start cannot be ranked either.
                break
            rest = turns_to_empty(hand[:start] + hand[stop + 1 :], set_map, cache)
            if rest != UNREACHABLE and rest + 1 < best:
                best = rest + 1
            if best == 2:
                # The whole hand is not a set, so 2 is the floor.
                cache[hand] = best
                return best

    cache[hand] = best
    return best


__all__ = ["UNREACHABLE", "TurnsCache", "turns_to_empty"]
