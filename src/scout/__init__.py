"""Scout card game engine: rules, player views, legal moves and strategies."""

__version__ = "0.1.0"

from .actions import Action, Scout, Show, ScoutShow
from .deck import Card, build_deck, deal
from .errors import ConfigurationError, IllegalActionError, RoundHalted
from .sets import SetMap, build_set_map, default_set_map, set_rank
from .view import GameView, Outcome, PlayerInfo
from .game import GameState, Player, RoundOver, new_round
from .legal import is_legal, legal_actions
from .search import UNREACHABLE, turns_to_empty
from .agents import (
    HumanStrategy,
    PrunedStrategy,
    RandomStrategy,
    RushStrategy,
    ShowBiasedStrategy,
    Strategy,
)
from .tournament import EvaluationConfig, evaluate, play_round, run
