"""
Player-relative, information-restricted projection of a round.

The acting player is always index 0. The view holds that player's face-up
values only (never the reverse faces of their hand), the public active set,
and for every seat just score, hand size and scout-and-show eligibility.

The transitions below re-derive the engine rules from these fields alone, so
strategies can look ahead without access to hidden cards. A continued view
keeps the same acting player at index 0; terminal positions collapse to a
WIN/LOSS outcome for that player.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .actions import Action, Scout, Show, ScoutShow
from .deck import Card
from .errors import IllegalActionError


class Outcome(Enum):
    """Round result from the acting player's point of view (ties count as wins)."""

    WIN = "win"
    LOSS = "loss"


@dataclass(frozen=True)
class PlayerInfo:
    """Public information about one seat."""

    score: int
    hand_size: int
    can_scout_show: bool = True


@dataclass(frozen=True)
class GameView:
    hand: tuple[int, ...]
    active: tuple[Card, ...]
    players: tuple[PlayerInfo, ...]
    active_owner: int

    @property
    def me(self) -> PlayerInfo:
        return self.players[0]

    @property
    def active_values(self) -> tuple[int, ...]:
        return tuple(c.up for c in self.active)

    def _with_player(self, index: int, info: PlayerInfo) -> tuple[PlayerInfo, ...]:
        players = list(self.players)
        players[index] = info
        return tuple(players)

    def scout(self, from_left: bool, flip: bool, insert_at: int) -> GameView:
        if not self.active:
            raise IllegalActionError("Cannot scout: active set is empty")
        if not 0 <= insert_at <= len(self.hand):
            raise IllegalActionError(
                f"Scout insert index {insert_at} out of range 0..{len(self.hand)}"
            )
        card = self.active[0] if from_left else self.active[-1]
        active = self.active[1:] if from_left else self.active[:-1]
        if flip:
            if card.down is None:
                raise IllegalActionError(f"Cannot flip {card}: reverse face unknown")
            value = card.down
        else:
            value = card.up

        players = list(self.players)
        players[0] = replace(self.me, hand_size=self.me.hand_size + 1)
        owner = players[self.active_owner]
        players[self.active_owner] = replace(owner, score=owner.score + 1)
        return replace(
            self,
            hand=self.hand[:insert_at] + (value,) + self.hand[insert_at:],
            active=active,
            players=tuple(players),
        )

    def show(self, start: int, stop: int) -> GameView:
        if not 0 <= start <= stop < len(self.hand):
            raise IllegalActionError(
                f"Show range [{start}, {stop}] invalid for hand of {len(self.hand)}"
            )
        shown = self.hand[start : stop + 1]
        me = replace(
            self.me,
            score=self.me.score + len(self.active),
            hand_size=self.me.hand_size - len(shown),
        )
        return replace(
            self,
            hand=self.hand[:start] + self.hand[stop + 1 :],
            active=tuple(Card(v) for v in shown),
            players=self._with_player(0, me),
            active_owner=0,
        )

    def scout_show(
        self, from_left: bool, flip: bool, insert_at: int, start: int, stop: int
    ) -> GameView:
        if not self.me.can_scout_show:
            raise IllegalActionError("Scout and show already used this round")
        view = self.scout(from_left, flip, insert_at).show(start, stop)
        return replace(view, players=view._with_player(0, replace(view.me, can_scout_show=False)))

    def apply(self, action: Action) -> Union[GameView, Outcome]:
        """Apply ``action`` for the acting player and detect the end of the round."""
        if isinstance(action, Scout):
            view = self.scout(action.from_left, action.flip, action.insert_at)
        elif isinstance(action, Show):
            view = self.show(action.start, action.stop)
        elif isinstance(action, ScoutShow):
            view = self.scout_show(
                action.from_left, action.flip, action.insert_at, action.start, action.stop
            )
        else:
            raise TypeError(f"Unknown action type: {type(action).__name__}")
        return view._end_turn()

    def _end_turn(self) -> Union[GameView, Outcome]:
        if not self.hand:
            return self._outcome()
        nxt = 1 % len(self.players)
        if nxt == self.active_owner:
            owner = self.players[nxt]
            credited = replace(owner, score=owner.score + owner.hand_size)
            return replace(self, players=self._with_player(nxt, credited))._outcome()
        return self

    def _outcome(self) -> Outcome:
        scores = [p.score - p.hand_size for p in self.players]
        return Outcome.WIN if scores[0] == max(scores) else Outcome.LOSS

    def __str__(self) -> str:
        lines = []
        for i, p in enumerate(self.players):
            owner = " (active owner)" if i == self.active_owner else ""
            who = "You" if i == 0 else f"+{i}"
            lines.append(
                f"{who:>4}: score={p.score} cards={p.hand_size} "
                f"scoutshow={'yes' if p.can_scout_show else 'no'}{owner}"
            )
        lines.append("  Active set:" + "".join(f" {c}" for c in self.active))
        lines.append("        Hand: " + str(list(self.hand)))
        lines.append("     Indexes: " + str(list(range(len(self.hand)))))
        return "\n".join(lines)


__all__ = ["GameView", "Outcome", "PlayerInfo"]
