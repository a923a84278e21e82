"""
Command-line interface for playing and evaluating Scout strategies.

Usage examples (after installing in editable mode):

    scout play --players human random rush
    scout evaluate --players rush random pruned --rounds 500 --seed 1 --workers 4
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional

from .agents import STRATEGIES
from .errors import ConfigurationError, RoundHalted
from .tournament import (
    EvaluationConfig,
    build_strategy,
    resolve_strategies,
    run,
    run_evaluation,
)

logger = logging.getLogger(__name__)


def _add_players_argument(parser: argparse.ArgumentParser, default: list[str]) -> None:
    parser.add_argument(
        "--players",
        nargs="+",
        choices=sorted(STRATEGIES),
        default=default,
        help="Strategy for each seat, in seat order (3 to 5 seats).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for dealing and for every automated seat.",
    )
    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        help="Deal the deck in its unshuffled order.",
    )


def _add_play_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("play", help="Play a single round and print final scores.")
    _add_players_argument(parser, default=["human", "random", "random"])
    parser.set_defaults(func=_cmd_play)


def _cmd_play(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    deal_rng = random.Random(rng.randrange(2**32))
    strategies = [
        build_strategy(make, rng.randrange(2**32)) for make in resolve_strategies(args.players)
    ]
    try:
        scores = run(strategies, rng=deal_rng, shuffle=not args.no_shuffle)
    except RoundHalted as exc:
        print("Round halted. Last state:")
        print(exc.state)
        return 1
    for seat, (name, score) in enumerate(zip(args.players, scores)):
        print(f"P{seat} ({name}): {score}")
    return 0


def _add_evaluate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "evaluate",
        help="Play many rounds between automated strategies and count wins per seat.",
    )
    _add_players_argument(parser, default=["rush", "random", "random"])
    parser.add_argument(
        "--rounds",
        type=int,
        default=100,
        help="Number of rounds to play.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes; 1 plays rounds in this process.",
    )
    parser.set_defaults(func=_cmd_evaluate)


def _cmd_evaluate(args: argparse.Namespace) -> int:
    if "human" in args.players:
        raise ConfigurationError("The human strategy cannot be used in batch evaluation")
    cfg = EvaluationConfig(
        strategies=list(args.players),
        rounds=args.rounds,
        seed=args.seed,
        workers=args.workers,
        shuffle=not args.no_shuffle,
    )
    wins = run_evaluation(cfg)
    for seat, (name, n) in enumerate(zip(cfg.strategies, wins)):
        rate = n / cfg.rounds if cfg.rounds else 0.0
        print(f"P{seat} ({name}): {n} wins ({rate:.1%})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scout", description="Scout card game engine CLI.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_play_parser(subparsers)
    _add_evaluate_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    try:
        return args.func(args)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
