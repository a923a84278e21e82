"""
Round driver and batch evaluation.

``play_round`` runs one round between a list of strategies, seat i being
strategies[i]. ``evaluate`` plays many independent rounds and counts, per
seat, how often that seat finished with the top score (ties are wins for
every tied seat). Rounds share nothing but the read-only rank table, so they
can be spread over worker processes.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from multiprocessing import Pool
from typing import Callable, List, Optional, Sequence

import numpy as np

from .actions import Action
from .agents import STRATEGIES, HumanStrategy, Strategy
from .errors import ConfigurationError, RoundHalted
from .game import GameState, RoundOver, new_round
from .sets import SetMap, default_set_map

logger = logging.getLogger(__name__)

# Called as ``factory(seed=...)``; every built-in strategy class qualifies.
StrategyFactory = Callable[..., Strategy]


def build_strategy(factory: StrategyFactory, seed: int) -> Strategy:
    """Instantiate a seat's strategy; HumanStrategy has no RNG and takes no seed."""
    if factory is HumanStrategy:
        return factory()
    return factory(seed=seed)


@dataclass
class RoundRecord:
    """Every state visited, the action taken from each, and the final result."""

    states: List[GameState] = field(default_factory=list)
    actions: List[Action] = field(default_factory=list)
    result: Optional[RoundOver] = None

    @property
    def scores(self) -> List[int]:
        if self.result is None:
            raise RuntimeError("round not finished")
        return list(self.result.scores)


def play_round(
    strategies: Sequence[Strategy],
    rng: random.Random | None = None,
    shuffle: bool = True,
    set_map: SetMap | None = None,
) -> RoundRecord:
    """
    Play a single round to completion.

    Raises RoundHalted (with the last valid state) if a strategy returns None,
    and IllegalActionError if a strategy returns an action the rules forbid.
    """
    if set_map is None:
        set_map = default_set_map()
    state = new_round(len(strategies), shuffle=shuffle, rng=rng)
    record = RoundRecord(states=[state])

    while True:
        view = state.as_view()
        action = strategies[state.turn].decide(view, set_map)
        if action is None:
            logger.warning("Player %d halted the round", state.turn)
            raise RoundHalted(state, f"Player {state.turn} halted the round")
        outcome = state.apply(action, set_map)
        record.actions.append(action)
        if isinstance(outcome, RoundOver):
            record.result = outcome
            return record
        state = outcome
        record.states.append(state)


def run(
    strategies: Sequence[Strategy],
    rng: random.Random | None = None,
    shuffle: bool = True,
    set_map: SetMap | None = None,
) -> List[int]:
    """Final scores aligned with ``strategies``; see ``play_round`` for errors."""
    return play_round(strategies, rng=rng, shuffle=shuffle, set_map=set_map).scores


def _scores_for_round(
    args: tuple[Sequence[StrategyFactory], int, Sequence[int], bool]
) -> List[int]:
    factories, deal_seed, seat_seeds, shuffle = args
    strategies = [build_strategy(make, s) for make, s in zip(factories, seat_seeds)]
    return run(strategies, rng=random.Random(deal_seed), shuffle=shuffle)


def tally_wins(score_rows: Sequence[Sequence[int]]) -> List[int]:
    """Per-seat count of rounds where that seat tied the round's maximum."""
    scores = np.asarray(score_rows, dtype=np.int64)
    if scores.size == 0:
        return []
    winners = scores == scores.max(axis=1, keepdims=True)
    return [int(n) for n in winners.sum(axis=0)]


def evaluate(
    factories: Sequence[StrategyFactory],
    n_rounds: int,
    seed: int | None = None,
    shuffle: bool = True,
    workers: int = 1,
) -> List[int]:
    """
    Play ``n_rounds`` independent rounds and return win counts per seat.

    ``factories`` build a fresh strategy for each round (a class works), so
    caches never leak between games. Each round draws its deal seed and one
    seed per seat from ``seed``, so equal seeds give equal results with any
    number of workers. With ``workers > 1`` rounds run on a process pool; the
    factories must then be picklable.
    """
    n = len(factories)
    if n not in (3, 4, 5):
        raise ConfigurationError(f"Unsupported player_count {n}; expected 3, 4, or 5.")
    rng = random.Random(seed)
    jobs = []
    for _ in range(n_rounds):
        deal_seed = rng.randrange(2**32)
        seat_seeds = [rng.randrange(2**32) for _ in range(n)]
        jobs.append((list(factories), deal_seed, seat_seeds, shuffle))

    if workers > 1:
        logger.info("Evaluating %d rounds on %d worker processes", n_rounds, workers)
        with Pool(processes=workers) as pool:
            rows = pool.map(_scores_for_round, jobs)
    else:
        rows = []
        for i, job in enumerate(jobs, start=1):
            rows.append(_scores_for_round(job))
            if i % 100 == 0:
                logger.info("Evaluated %d/%d rounds", i, n_rounds)

    wins = tally_wins(rows)
    return wins if wins else [0] * len(factories)


@dataclass
class EvaluationConfig:
    """Configuration for a batch evaluation run."""

    strategies: List[str] = field(default_factory=lambda: ["rush", "random", "random"])
    rounds: int = 100
    seed: int | None = None
    workers: int = 1
    shuffle: bool = True


def resolve_strategies(names: Sequence[str]) -> List[StrategyFactory]:
    try:
        return [STRATEGIES[name] for name in names]
    except KeyError as exc:
        raise ConfigurationError(
            f"Unknown strategy {exc.args[0]!r}; expected one of {sorted(STRATEGIES)}"
        ) from None


def run_evaluation(cfg: EvaluationConfig) -> List[int]:
    return evaluate(
        resolve_strategies(cfg.strategies),
        cfg.rounds,
        seed=cfg.seed,
        shuffle=cfg.shuffle,
        workers=cfg.workers,
    )


__all__ = [
    "EvaluationConfig",
    "RoundRecord",
    "StrategyFactory",
    "build_strategy",
    "evaluate",
    "play_round",
    "resolve_strategies",
    "run",
    "run_evaluation",
    "tally_wins",
]
