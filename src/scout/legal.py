"""
Legal moves for the acting player of a GameView.

- Scout: any end of a non-empty active set, flipped or not, inserted at any
  hand position 0..len(hand).
- Show: any contiguous hand range whose rank beats the active set.
- ScoutShow: every legal Scout, simulated on a scratch view, followed by
  every Show that is legal on the resulting hand. Only while the player
  still has scout-and-show and the active set is non-empty.
Enumeration never mutates the view.
"""
from __future__ import annotations

from .actions import Action, Scout, Show, ScoutShow
from .errors import IllegalActionError
from .sets import SetMap, set_rank
from .view import GameView


def legal_scouts(view: GameView) -> list[Scout]:
    if not view.active:
        return []
    scouts: list[Scout] = []
    for from_left in (True, False):
        card = view.active[0] if from_left else view.active[-1]
        for flip in (False, True):
            if flip and card.down is None:
                continue
            for insert_at in range(len(view.hand) + 1):
                scouts.append(Scout(from_left, flip, insert_at))
    return scouts


def legal_shows(view: GameView, set_map: SetMap) -> list[Show]:
    to_beat = set_rank(set_map, view.active_values)
    hand = view.hand
    shows: list[Show] = []
    for start in range(len(hand)):
        for stop in range(start, len(hand)):
            rank = set_map.get(hand[start : stop + 1], 0)
            if rank == 0:
                # Every prefix of a straight or flush is itself ranked.
                break
            if rank > to_beat:
                shows.append(Show(start, stop))
    return shows


def legal_scout_shows(view: GameView, set_map: SetMap) -> list[ScoutShow]:
    if not view.me.can_scout_show or not view.active:
        return []
    combos: list[ScoutShow] = []
    for scout in legal_scouts(view):
        scouted = view.scout(scout.from_left, scout.flip, scout.insert_at)
        for show in legal_shows(scouted, set_map):
            combos.append(ScoutShow.combine(scout, show))
    return combos


def legal_actions(view: GameView, set_map: SetMap) -> list[Action]:
    """All rules-legal actions for the acting player: scouts, shows, then scout-shows."""
    actions: list[Action] = []
    actions.extend(legal_scouts(view))
    actions.extend(legal_shows(view, set_map))
    actions.extend(legal_scout_shows(view, set_map))
    return actions


def _scout_is_legal(view: GameView, scout: Scout) -> bool:
    if not view.active or not 0 <= scout.insert_at <= len(view.hand):
        return False
    card = view.active[0] if scout.from_left else view.active[-1]
    return not scout.flip or card.down is not None


def _show_is_legal(view: GameView, show: Show, set_map: SetMap) -> bool:
    if not 0 <= show.start <= show.stop < len(view.hand):
        return False
    rank = set_rank(set_map, view.hand[show.start : show.stop + 1])
    return rank > set_rank(set_map, view.active_values)


def is_legal(view: GameView, action: Action, set_map: SetMap) -> bool:
    """
    Check a single action without enumerating everything.
    Agrees with ``action in legal_actions(view, set_map)``.
    """
    if isinstance(action, Scout):
        return _scout_is_legal(view, action)
    if isinstance(action, Show):
        return _show_is_legal(view, action, set_map)
    if isinstance(action, ScoutShow):
        if not view.me.can_scout_show or not _scout_is_legal(view, action.scout):
            return False
        try:
            scouted = view.scout(action.from_left, action.flip, action.insert_at)
        except IllegalActionError:
            return False
        return _show_is_legal(scouted, action.show, set_map)
    raise TypeError(f"Unknown action type: {type(action).__name__}")


__all__ = ["is_legal", "legal_actions", "legal_scout_shows", "legal_scouts", "legal_shows"]
