"""
Repeated race and fight trials between two spaceship families.

Every trial builds a fresh pair of ships, races them, then makes them
fight. Per-trial seeds come from a single master seed so a whole
tournament is reproducible. Results are aggregated with numpy.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .battle import MAX_FIGHT_ROUNDS, Battle, BattleOutcome
from .factories import create_factory
from .spaceship import Spaceship


# Outcome codes used for counting
_OUTCOME_CODES = {
    BattleOutcome.SHIP_ONE_VICTORY: 0,
    BattleOutcome.SHIP_TWO_VICTORY: 1,
    BattleOutcome.DRAW: 2,
}


@dataclass
class TournamentSummary:
    """
    Aggregated tournament statistics.

    Attributes:
        ship_one_kind: Family of ship one.
        ship_two_kind: Family of ship two.
        trials: Number of trials run.
        race_wins: Race outcome counts (ship one, ship two, draws).
        fight_wins: Fight outcome counts (ship one, ship two, draws).
        mean_race_distance: Mean race distance (ship one, ship two).
        std_race_distance: Standard deviation of race distance (ship one, ship two).
        mean_fight_rounds: Mean number of rounds per fight.
    """
    ship_one_kind: str
    ship_two_kind: str
    trials: int
    race_wins: tuple[int, int, int]
    fight_wins: tuple[int, int, int]
    mean_race_distance: tuple[float, float]
    std_race_distance: tuple[float, float]
    mean_fight_rounds: float

    def format_table(self) -> str:
        """Render the summary as a plain-text table."""
        lines = [
            f"Tournament: {self.ship_one_kind} vs {self.ship_two_kind} ({self.trials} trials)",
            "=" * 60,
            f"{'':<22} {self.ship_one_kind:>12} {self.ship_two_kind:>12} {'draw':>10}",
            "-" * 60,
            f"{'Race wins':<22} {self.race_wins[0]:>12} {self.race_wins[1]:>12} {self.race_wins[2]:>10}",
            f"{'Fight wins':<22} {self.fight_wins[0]:>12} {self.fight_wins[1]:>12} {self.fight_wins[2]:>10}",
            f"{'Mean race distance':<22} {self.mean_race_distance[0]:>12.1f} {self.mean_race_distance[1]:>12.1f}",
            f"{'Std race distance':<22} {self.std_race_distance[0]:>12.1f} {self.std_race_distance[1]:>12.1f}",
            "-" * 60,
            f"Mean fight length: {self.mean_fight_rounds:.1f} rounds",
        ]
        return "\n".join(lines)


def _count_outcomes(codes: np.ndarray) -> tuple[int, int, int]:
    counts = np.bincount(codes, minlength=len(_OUTCOME_CODES))
    return int(counts[0]), int(counts[1]), int(counts[2])


def run_tournament(
    ship_one_kind: str,
    ship_two_kind: str,
    trials: int,
    seed: Optional[int] = None,
    max_fight_rounds: int = MAX_FIGHT_ROUNDS,
) -> TournamentSummary:
    """
    Run repeated races and fights between two families.

    Args:
        ship_one_kind: Family of ship one (e.g., 'pirate').
        ship_two_kind: Family of ship two (e.g., 'war').
        trials: Number of race+fight pairs to run.
        seed: Master seed for reproducible tournaments.
        max_fight_rounds: Round cap for each fight.

    Returns:
        Aggregated TournamentSummary.

    Raises:
        ValueError: If trials is less than 1.
        KeyError: If a family is not registered.
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    master = random.Random(seed)

    race_codes = np.empty(trials, dtype=np.int64)
    fight_codes = np.empty(trials, dtype=np.int64)
    distances = np.empty((trials, 2), dtype=np.int64)
    fight_rounds = np.empty(trials, dtype=np.int64)

    for i in range(trials):
        ship_one = Spaceship(ship_one_kind, create_factory(ship_one_kind, seed=master.getrandbits(64)))
        ship_two = Spaceship(ship_two_kind, create_factory(ship_two_kind, seed=master.getrandbits(64)))
        battle = Battle(ship_one, ship_two, max_fight_rounds=max_fight_rounds)

        race = battle.race()
        fight = battle.fight()

        race_codes[i] = _OUTCOME_CODES[race.outcome]
        fight_codes[i] = _OUTCOME_CODES[fight.outcome]
        distances[i] = (race.ship_one_distance, race.ship_two_distance)
        fight_rounds[i] = fight.rounds

    mean_distance = distances.mean(axis=0)
    std_distance = distances.std(axis=0)

    return TournamentSummary(
        ship_one_kind=ship_one_kind,
        ship_two_kind=ship_two_kind,
        trials=trials,
        race_wins=_count_outcomes(race_codes),
        fight_wins=_count_outcomes(fight_codes),
        mean_race_distance=(float(mean_distance[0]), float(mean_distance[1])),
        std_race_distance=(float(std_distance[0]), float(std_distance[1])),
        mean_fight_rounds=float(fight_rounds.mean()),
    )
