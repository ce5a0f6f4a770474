"""
Command-line entry point for the Space Games.

Usage:
    python -m spacegames
    python -m spacegames --interactive
    python -m spacegames --ship-one war --ship-two war --seed 7
    python -m spacegames --trials 1000 --seed 42
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .battle import MAX_FIGHT_ROUNDS, Battle
from .factories import FACTORIES, create_factory
from .spaceship import Spaceship
from .tournament import run_tournament

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spacegames",
        description="Race and fight two spaceships built by abstract factories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m spacegames --interactive
    python -m spacegames --ship-one pirate --ship-two pirate --seed 3
    python -m spacegames --trials 1000 --seed 42
        """,
    )

    # Contenders
    parser.add_argument(
        "--ship-one",
        choices=sorted(FACTORIES),
        default="pirate",
        help="Family of the first ship (default: pirate)",
    )
    parser.add_argument(
        "--ship-two",
        choices=sorted(FACTORIES),
        default="war",
        help="Family of the second ship (default: war)",
    )
    parser.add_argument(
        "--name-one",
        default="Nebuchadnezzar",
        help="Name of the first ship",
    )
    parser.add_argument(
        "--name-two",
        default="Nostromo",
        help="Name of the second ship",
    )

    # Simulation settings
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible runs",
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        default=MAX_FIGHT_ROUNDS,
        help=f"Fight round cap, reaching it is a draw (default: {MAX_FIGHT_ROUNDS})",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=0,
        help="Run a tournament of this many races and fights and print statistics",
    )

    # Output
    parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Wait for Enter between stages",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output (round-by-round log)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet mode (only show results)",
    )
    return parser


def run_games(args: argparse.Namespace) -> None:
    """Run one race and one fight, narrating as it goes."""

    def announce(message: str) -> None:
        if not args.quiet:
            print(message)

    def pause() -> None:
        if args.interactive:
            input()

    # The second ship's factory gets its own seed so mirror matches differ
    seed_two = None if args.seed is None else args.seed + 1
    ship_one = Spaceship(args.name_one, create_factory(args.ship_one, seed=args.seed))
    ship_two = Spaceship(args.name_two, create_factory(args.ship_two, seed=seed_two))

    announce("Welcome to the 76th Space Games...")
    pause()

    announce(f"First contender: {ship_one}")
    announce(f"Second contender: {ship_two}")
    pause()

    battle = Battle(ship_one, ship_two, max_fight_rounds=args.max_rounds)

    announce("Go!")
    pause()

    race = battle.race()
    if race.winner is not None:
        print(f"Please welcome the winner of the race: {race.winner}")
    else:
        print("The race ends in a draw")
    pause()

    announce("Let the deadly battle begin!")
    pause()

    fight = battle.fight()
    if fight.winner is not None:
        print(f"Please welcome the winner of the battle: {fight.winner}")
    else:
        print("The battle ends in a draw")
    pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_rounds < 1:
        parser.error("--max-rounds must be at least 1")
    if args.trials < 0:
        parser.error("--trials cannot be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.trials:
        logger.info("Running %d trials", args.trials)
        summary = run_tournament(
            args.ship_one,
            args.ship_two,
            trials=args.trials,
            seed=args.seed,
            max_fight_rounds=args.max_rounds,
        )
        print(summary.format_table())
    else:
        run_games(args)

    return 0

