"""
Strategies: the decision interface and baseline implementations.

The ``Strategy`` protocol is the contract used by the round driver and the
evaluation harness: ``decide(view, set_map) -> Action | None``. Returning
None halts the round. Strategies only ever see a GameView, so any lookahead
goes through ``GameView.apply``.

Each instance owns its RNG and caches; use one instance per game.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol, Sequence

from .actions import Action, Scout, Show, ScoutShow
from .errors import IllegalActionError
from .legal import legal_actions
from .search import TurnsCache, turns_to_empty
from .sets import SetMap
from .view import GameView, Outcome


class Strategy(Protocol):
    """Stateful or stateless decision policy working on player views."""

    def decide(self, view: GameView, set_map: SetMap) -> Optional[Action]:
        """
        Choose an action for the acting player of ``view``, or None to halt.

        Implementations must only return actions that ``legal_actions`` would
        produce; the round driver rejects anything else.
        """


@dataclass
class RandomStrategy:
    """
    Baseline strategy that samples uniformly among legal actions.

    Usage:
        strategy = RandomStrategy(seed=42)
        action = strategy.decide(view, set_map)
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def decide(self, view: GameView, set_map: SetMap) -> Optional[Action]:
        actions = legal_actions(view, set_map)
        if not actions:
            return None
        return self._rng.choice(actions)


@dataclass
class ShowBiasedStrategy:
    """Random, but plays a Show or ScoutShow with probability ``show_bias`` when one exists."""

    seed: int | None = None
    show_bias: float = 0.75

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def decide(self, view: GameView, set_map: SetMap) -> Optional[Action]:
        actions = legal_actions(view, set_map)
        if not actions:
            return None
        shows = [a for a in actions if not isinstance(a, Scout)]
        if shows and self._rng.random() < self.show_bias:
            return self._rng.choice(shows)
        return self._rng.choice(actions)


@dataclass
class PrunedStrategy:
    """
    Random with one step of lookahead: take a guaranteed win if there is
    one, otherwise avoid actions that end the round in a loss.
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def decide(self, view: GameView, set_map: SetMap) -> Optional[Action]:
        actions = legal_actions(view, set_map)
        if not actions:
            return None
        outcomes = [(a, view.apply(a)) for a in actions]
        wins = [a for a, res in outcomes if res is Outcome.WIN]
        if wins:
            return self._rng.choice(wins)
        safe = [a for a, res in outcomes if res is not Outcome.LOSS]
        return self._rng.choice(safe or actions)


# Sort key for actions that lose the round outright; larger than any hand.
LOSS_PENALTY = 32


@dataclass
class RushStrategy:
    """
    Minimise the number of Shows needed to empty the hand after this action.
    Aggressive; weak against large sets played mid-round.
    """

    seed: int | None = None
    cache: TurnsCache = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def _key(self, view: GameView, action: Action, set_map: SetMap) -> int:
        result = view.apply(action)
        if result is Outcome.WIN:
            return 0
        if result is Outcome.LOSS:
            return LOSS_PENALTY
        return turns_to_empty(result.hand, set_map, self.cache) + 1

    def decide(self, view: GameView, set_map: SetMap) -> Optional[Action]:
        actions = legal_actions(view, set_map)
        if not actions:
            return None
        # Shuffle first: the stable sort then breaks ties at random.
        self._rng.shuffle(actions)
        actions.sort(key=lambda a: self._key(view, a, set_map))
        return actions[0]


def _flag(token: str) -> bool:
    if token not in ("0", "1"):
        raise ValueError(f"Expected 0 or 1, got {token!r}")
    return token == "1"


HUMAN_HELP = (
    "Enter one of:\n"
    "  scout [left] [flip] [index]\n"
    "  show [start] [stop]\n"
    "  scoutshow [left] [flip] [index]   (then the show range)\n"
    "  quit\n"
    "Flags are 1 (true) or 0 (false); show ranges are inclusive."
)


@dataclass
class HumanStrategy:
    """
    Strategy which asks a person for input.

    ``scout L F I`` scouts the left (L=1) or right end, flipped if F=1, into
    hand index I. ``show S E`` shows the inclusive range S..E; a single card
    is ``show 2 2``. ``scoutshow L F I`` scouts first, displays the resulting
    view, then asks for the show range (``S E`` or ``show S E``). ``quit``
    halts the round. Invalid or illegal input is reported and re-prompted.
    """

    input_fn: Callable[[str], str] = input
    output_fn: Callable[[str], None] = print

    def _read(self, prompt: str) -> List[str]:
        return self.input_fn(prompt).strip().lower().split()

    def _read_show(self, view: GameView) -> Show:
        self.output_fn(str(view))
        tokens = self._read("Select show action (finish scoutshow): ")
        if tokens and tokens[0] == "show":
            tokens = tokens[1:]
        if len(tokens) != 2:
            raise ValueError("Expected a show range: [start] [stop]")
        return Show(int(tokens[0]), int(tokens[1]))

    def _parse(self, tokens: Sequence[str], view: GameView) -> Action:
        command, args = tokens[0], tokens[1:]
        if command == "scout" and len(args) == 3:
            return Scout(_flag(args[0]), _flag(args[1]), int(args[2]))
        if command == "show" and len(args) == 2:
            return Show(int(args[0]), int(args[1]))
        if command == "scoutshow" and len(args) == 3:
            scout = Scout(_flag(args[0]), _flag(args[1]), int(args[2]))
            try:
                scouted = view.scout(scout.from_left, scout.flip, scout.insert_at)
            except IllegalActionError as exc:
                raise ValueError(str(exc)) from exc
            return ScoutShow.combine(scout, self._read_show(scouted))
        raise ValueError(f"Input not accepted: {' '.join(tokens)}")

    def decide(self, view: GameView, set_map: SetMap) -> Optional[Action]:
        legal = legal_actions(view, set_map)
        while True:
            self.output_fn(str(view))
            tokens = self._read("Select action: ")
            if not tokens:
                self.output_fn(HUMAN_HELP)
                continue
            if tokens[0] == "quit":
                return None
            try:
                action = self._parse(tokens, view)
            except ValueError as exc:
                self.output_fn(f"{exc}\n{HUMAN_HELP}")
                continue
            if action in legal:
                return action
            self.output_fn(f"Not a valid action: {action}")


STRATEGIES: Dict[str, Callable[..., Strategy]] = {
    "human": HumanStrategy,
    "random": RandomStrategy,
    "show": ShowBiasedStrategy,
    "pruned": PrunedStrategy,
    "rush": RushStrategy,
}


__all__ = [
    "HumanStrategy",
    "PrunedStrategy",
    "RandomStrategy",
    "RushStrategy",
    "STRATEGIES",
    "ShowBiasedStrategy",
    "Strategy",
]
