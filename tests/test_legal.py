"""Tests for legal-action enumeration."""
import random

from scout.actions import Scout, Show, ScoutShow
from scout.deck import Card
from scout.game import new_round
from scout.legal import is_legal, legal_actions, legal_scout_shows, legal_scouts, legal_shows
from scout.sets import default_set_map
from scout.view import GameView, PlayerInfo


def _view(hand, active, can_scout_show=False):
    return GameView(
        hand=tuple(hand),
        active=tuple(active),
        players=(PlayerInfo(0, len(hand), can_scout_show), PlayerInfo(0, 3), PlayerInfo(0, 3)),
        active_owner=1,
    )


def test_single_card_hand_weaker_than_active():
    view = _view([5], [Card(6, 7)])
    actions = legal_actions(view, default_set_map())
    assert len(actions) == 8
    assert all(isinstance(a, Scout) for a in actions)
    assert len(set(actions)) == 8


def test_single_card_hand_stronger_than_active():
    view = _view([8], [Card(6, 7)])
    actions = legal_actions(view, default_set_map())
    assert len([a for a in actions if isinstance(a, Scout)]) == 8
    assert [a for a in actions if isinstance(a, Show)] == [Show(0, 0)]


def test_scout_show_is_cross_product_of_scouts_and_shows():
    view = _view([5], [Card(6, 7)], can_scout_show=True)
    set_map = default_set_map()
    combos = legal_scout_shows(view, set_map)
    # Per side: [6,5] and [5,6] allow 3 shows each; [7,5] and [5,7] allow 2.
    assert len(combos) == 20
    assert ScoutShow(True, False, 0, 0, 1) in combos
    assert ScoutShow(True, True, 0, 0, 1) not in combos
    assert all(is_legal(view, a, set_map) for a in combos)
    assert len(legal_actions(view, set_map)) == 8 + 20


def test_no_scout_show_without_eligibility_or_active():
    set_map = default_set_map()
    assert legal_scout_shows(_view([5], [Card(6, 7)], can_scout_show=False), set_map) == []
    assert legal_scout_shows(_view([5], [], can_scout_show=True), set_map) == []


def test_opening_view_only_shows():
    state = new_round(3, rng=random.Random(5))
    view = state.as_view()
    actions = legal_actions(view, default_set_map())
    assert legal_scouts(view) == []
    assert all(isinstance(a, Show) for a in actions)
    # Every single card is a legal opening show.
    assert len(actions) >= len(view.hand)


def test_shows_must_beat_active_set():
    view = _view([3, 4, 4, 9], [Card(5, 1), Card(6, 1)])
    shows = legal_shows(view, default_set_map())
    assert Show(1, 2) in shows
    assert Show(0, 1) not in shows
    assert Show(3, 3) not in shows
    assert Show(0, 2) not in shows


def test_enumeration_does_not_mutate_view():
    view = _view([3, 4, 4, 9], [Card(5, 1), Card(6, 1)], can_scout_show=True)
    before = GameView(view.hand, view.active, view.players, view.active_owner)
    legal_actions(view, default_set_map())
    assert view == before


def test_is_legal_rejects():
    set_map = default_set_map()
    view = _view([3, 4, 4, 9], [Card(5, 1), Card(6, 1)])
    assert is_legal(view, Show(1, 2), set_map)
    assert not is_legal(view, Show(0, 1), set_map)
    assert not is_legal(view, Show(2, 9), set_map)
    assert not is_legal(view, Scout(True, False, 5), set_map)
    assert not is_legal(view, ScoutShow(True, False, 0, 0, 0), set_map)
    assert not is_legal(_view([3], [], True), Scout(True, False, 0), set_map)


def test_is_legal_agrees_with_enumeration():
    set_map = default_set_map()
    view = _view([3, 4, 4, 9, 2], [Card(5, 1), Card(6, 8)], can_scout_show=True)
    legal = set(legal_actions(view, set_map))
    candidates = [Scout(l, f, i) for l in (True, False) for f in (True, False) for i in range(7)]
    candidates += [Show(s, e) for s in range(6) for e in range(6)]
    candidates += [ScoutShow(True, f, i, s, e) for f in (True, False) for i in range(6) for s in range(6) for e in range(6)]
    for action in candidates:
        assert is_legal(view, action, set_map) == (action in legal)
