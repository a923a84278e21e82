"""
Player actions on a turn.

- Scout: take a card from one end of the active set into the hand,
  optionally flipped, at a given insertion index.
- Show: replace the active set with the inclusive hand range [start, stop].
- ScoutShow: a Scout immediately followed by a Show, once per round.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Scout:
    from_left: bool
    flip: bool
    insert_at: int

    def __str__(self) -> str:
        side = "left" if self.from_left else "right"
        flip = " flipped" if self.flip else ""
        return f"Scout {side}{flip} -> {self.insert_at}"


@dataclass(frozen=True)
class Show:
    start: int
    stop: int

    def __str__(self) -> str:
        return f"Show [{self.start}, {self.stop}]"


@dataclass(frozen=True)
class ScoutShow:
    from_left: bool
    flip: bool
    insert_at: int
    start: int
    stop: int

    @classmethod
    def combine(cls, scout: Scout, show: Show) -> ScoutShow:
        return cls(scout.from_left, scout.flip, scout.insert_at, show.start, show.stop)

    @property
    def scout(self) -> Scout:
        return Scout(self.from_left, self.flip, self.insert_at)

    @property
    def show(self) -> Show:
        return Show(self.start, self.stop)

    def __str__(self) -> str:
        return f"{self.scout}, then {self.show}"


Action = Union[Scout, Show, ScoutShow]


__all__ = ["Action", "Scout", "Show", "ScoutShow"]
