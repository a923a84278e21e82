"""
Authoritative round state and transitions: deal -> (scout | show | scoutshow)* -> score.

Every transition returns a new GameState; hands and the active set are
tuples, so earlier states stay valid and can be inspected after the fact.
A round ends when the acting player empties their hand, or when the turn
would pass to the player who owns the active set.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Union

from .actions import Action, Scout, Show, ScoutShow
from .deck import Card, deal
from .errors import IllegalActionError
from .legal import is_legal
from .sets import SetMap
from .view import GameView, PlayerInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Player:
    """One seat: hand, raw score, and whether scout-and-show is still available."""

    hand: tuple[Card, ...] = ()
    score: int = 0
    can_scout_show: bool = True


@dataclass(frozen=True)
class RoundOver:
    """Terminal result: the final state (after any credit) and adjusted scores."""

    state: GameState
    scores: tuple[int, ...]


@dataclass(frozen=True)
class GameState:
    players: tuple[Player, ...]
    active: tuple[Card, ...] = ()
    active_owner: int = 0
    turn: int = 0

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Player:
        return self.players[self.turn]

    def _with_player(self, index: int, player: Player) -> tuple[Player, ...]:
        players = list(self.players)
        players[index] = player
        return tuple(players)

    # ---- Transitions (no round-end detection) ----

    def scout(self, from_left: bool, flip: bool, insert_at: int) -> GameState:
        """Move an end card of the active set into the acting hand; +1 to the active owner."""
        if not self.active:
            raise IllegalActionError("Cannot scout: active set is empty")
        hand = self.current_player.hand
        if not 0 <= insert_at <= len(hand):
            raise IllegalActionError(
                f"Scout insert index {insert_at} out of range 0..{len(hand)}"
            )
        if from_left:
            card, active = self.active[0], self.active[1:]
        else:
            card, active = self.active[-1], self.active[:-1]
        if flip:
            card = card.flipped()

        players = list(self.players)
        players[self.turn] = replace(
            self.current_player, hand=hand[:insert_at] + (card,) + hand[insert_at:]
        )
        owner = players[self.active_owner]
        players[self.active_owner] = replace(owner, score=owner.score + 1)
        return replace(self, players=tuple(players), active=active)

    def show(self, start: int, stop: int) -> GameState:
        """Replace the active set with hand[start..stop]; score one point per replaced card."""
        player = self.current_player
        hand = player.hand
        if not 0 <= start <= stop < len(hand):
            raise IllegalActionError(
                f"Show range [{start}, {stop}] invalid for hand of {len(hand)}"
            )
        actor = replace(
            player,
            hand=hand[:start] + hand[stop + 1 :],
            score=player.score + len(self.active),
        )
        return replace(
            self,
            players=self._with_player(self.turn, actor),
            active=hand[start : stop + 1],
            active_owner=self.turn,
        )

    def scout_show(
        self, from_left: bool, flip: bool, insert_at: int, start: int, stop: int
    ) -> GameState:
        if not self.current_player.can_scout_show:
            raise IllegalActionError("Scout and show already used this round")
        state = self.scout(from_left, flip, insert_at).show(start, stop)
        actor = replace(state.current_player, can_scout_show=False)
        return replace(state, players=state._with_player(self.turn, actor))

    # ---- Turn resolution ----

    def apply(
        self, action: Action, set_map: SetMap | None = None
    ) -> Union[GameState, RoundOver]:
        """
        Apply ``action`` for the player to move and resolve the end of turn.
        Returns the next state, or RoundOver with final adjusted scores.

        Without ``set_map`` only index and eligibility preconditions are
        checked, so a Show need not outrank the active set. With ``set_map``
        the full rules are enforced and any illegal action raises
        IllegalActionError before a new state is built.
        """
        if set_map is not None and not is_legal(self.as_view(), action, set_map):
            raise IllegalActionError(f"Player {self.turn} chose illegal action {action}")
        if isinstance(action, Scout):
            state = self.scout(action.from_left, action.flip, action.insert_at)
        elif isinstance(action, Show):
            state = self.show(action.start, action.stop)
        elif isinstance(action, ScoutShow):
            state = self.scout_show(
                action.from_left, action.flip, action.insert_at, action.start, action.stop
            )
        else:
            raise TypeError(f"Unknown action type: {type(action).__name__}")
        logger.debug("Player %d: %s", self.turn, action)
        return state._end_turn()

    def _end_turn(self) -> Union[GameState, RoundOver]:
        if not self.current_player.hand:
            return self._finish()
        nxt = (self.turn + 1) % self.player_count
        if nxt == self.active_owner:
            # The owner of the active set is not penalised for the cards left in hand.
            owner = self.players[nxt]
            credited = replace(owner, score=owner.score + len(owner.hand))
            return replace(self, players=self._with_player(nxt, credited))._finish()
        return replace(self, turn=nxt)

    def _finish(self) -> RoundOver:
        scores = tuple(p.score - len(p.hand) for p in self.players)
        logger.debug("Round over after player %d; scores=%s", self.turn, scores)
        return RoundOver(state=self, scores=scores)

    # ---- Restricted projection ----

    def as_view(self, turn: int | None = None) -> GameView:
        """
        Rotate the table so ``turn`` (default: player to move) sits at index 0,
        exposing only that player's face-up values and public information.
        """
        if turn is None:
            turn = self.turn
        n = self.player_count
        order = [(turn + i) % n for i in range(n)]
        return GameView(
            hand=tuple(c.up for c in self.players[turn].hand),
            active=self.active,
            players=tuple(
                PlayerInfo(
                    score=self.players[p].score,
                    hand_size=len(self.players[p].hand),
                    can_scout_show=self.players[p].can_scout_show,
                )
                for p in order
            ),
            active_owner=(self.active_owner - turn) % n,
        )

    def __str__(self) -> str:
        lines = [f"Active set (owner {self.active_owner}):" + "".join(f" {c}" for c in self.active)]
        for i, p in enumerate(self.players):
            marker = "*" if i == self.turn else " "
            cards = "".join(f" {c}" for c in p.hand)
            lines.append(f"{marker} P{i} score={p.score} scoutshow={int(p.can_scout_show)}:{cards}")
        return "\n".join(lines)


def new_round(
    player_count: int,
    shuffle: bool = True,
    rng: random.Random | None = None,
) -> GameState:
    """Deal a fresh round. Raises ConfigurationError unless player_count is 3, 4 or 5."""
    hands = deal(player_count, shuffle=shuffle, rng=rng)
    logger.debug("New %d player round, hand sizes %s", player_count, [len(h) for h in hands])
    return GameState(players=tuple(Player(hand=h) for h in hands))


__all__ = ["GameState", "Player", "RoundOver", "new_round"]
