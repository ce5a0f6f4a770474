"""
Battle controller for the Space Games spacecraft simulator.

Runs the two contests between a pair of ships:
- Race: both ships fly a fixed number of rounds, the longest distance wins
- Fight: ships trade fire until at least one is destroyed

Outcomes are returned as result objects. A draw is a normal outcome with
no winner, never an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .spaceship import Spaceship

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

RACE_ROUNDS = 100

# Two photon guns can keep missing; the cap ends such a fight as a draw
MAX_FIGHT_ROUNDS = 10_000


class BattleOutcome(Enum):
    """Possible race and fight outcomes."""
    SHIP_ONE_VICTORY = "ship_one_victory"
    SHIP_TWO_VICTORY = "ship_two_victory"
    DRAW = "draw"


@dataclass
class RaceResult:
    """
    Result of a race.

    Attributes:
        outcome: Race outcome.
        winner: Winning ship, None on a draw.
        ship_one_distance: Total distance flown by ship one.
        ship_two_distance: Total distance flown by ship two.
        rounds: Number of rounds flown.
    """
    outcome: BattleOutcome
    winner: Optional[Spaceship]
    ship_one_distance: int
    ship_two_distance: int
    rounds: int

    @property
    def is_draw(self) -> bool:
        return self.outcome == BattleOutcome.DRAW


@dataclass
class FightRound:
    """
    One exchange of fire.

    Attributes:
        round_number: 1-based round index.
        ship_one_damage: Damage dealt by ship one this round.
        ship_two_damage: Damage dealt by ship two this round.
        ship_one_health: Ship one health after the round.
        ship_two_health: Ship two health after the round.
    """
    round_number: int
    ship_one_damage: int
    ship_two_damage: int
    ship_one_health: int
    ship_two_health: int


@dataclass
class FightResult:
    """
    Result of a fight.

    Attributes:
        outcome: Fight outcome.
        winner: Surviving ship, None on a draw.
        rounds: Number of rounds fought.
        ship_one_health: Final health of ship one.
        ship_two_health: Final health of ship two.
        history: Every round in order.
    """
    outcome: BattleOutcome
    winner: Optional[Spaceship]
    rounds: int
    ship_one_health: int
    ship_two_health: int
    history: list[FightRound] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.outcome == BattleOutcome.DRAW

    @property
    def hit_round_cap(self) -> bool:
        """True if the fight ended by the round cap with both ships alive."""
        return self.is_draw and self.ship_one_health > 0 and self.ship_two_health > 0


class Battle:
    """
    Runs races and fights between two ships.

    The battle holds references to the ships but does not own them. Fights
    change ship health and races drain energy, so a fresh pair of ships is
    needed for an independent rerun.
    """

    def __init__(
        self,
        ship_one: Spaceship,
        ship_two: Spaceship,
        race_rounds: int = RACE_ROUNDS,
        max_fight_rounds: int = MAX_FIGHT_ROUNDS,
    ):
        """
        Args:
            ship_one: First contender. Always moves and fires first.
            ship_two: Second contender.
            race_rounds: Number of rounds in a race.
            max_fight_rounds: Round cap for a fight.

        Raises:
            ValueError: If a round count is less than 1.
        """
        if race_rounds < 1:
            raise ValueError(f"race_rounds must be at least 1, got {race_rounds}")
        if max_fight_rounds < 1:
            raise ValueError(f"max_fight_rounds must be at least 1, got {max_fight_rounds}")

        self.ship_one = ship_one
        self.ship_two = ship_two
        self.race_rounds = race_rounds
        self.max_fight_rounds = max_fight_rounds

    def _pick_winner(self, one_wins: bool, two_wins: bool) -> tuple[BattleOutcome, Optional[Spaceship]]:
        if one_wins:
            return BattleOutcome.SHIP_ONE_VICTORY, self.ship_one
        if two_wins:
            return BattleOutcome.SHIP_TWO_VICTORY, self.ship_two
        return BattleOutcome.DRAW, None

    def race(self) -> RaceResult:
        """
        Race the two ships.

        Both ships move every round regardless of health. The ship with the
        strictly greater total distance wins; equal totals are a draw.

        Returns:
            RaceResult with both totals.
        """
        logger.info("Race started: %s vs %s", self.ship_one, self.ship_two)

        distance_one = 0
        distance_two = 0
        for round_number in range(1, self.race_rounds + 1):
            distance_one += self.ship_one.move()
            distance_two += self.ship_two.move()
            logger.debug("Race round %d: %d vs %d", round_number, distance_one, distance_two)

        outcome, winner = self._pick_winner(
            distance_one > distance_two,
            distance_two > distance_one,
        )
        logger.info("Race finished: %s (%d vs %d)", outcome.value, distance_one, distance_two)

        return RaceResult(
            outcome=outcome,
            winner=winner,
            ship_one_distance=distance_one,
            ship_two_distance=distance_two,
            rounds=self.race_rounds,
        )

    def fight(self) -> FightResult:
        """
        Fight to the death.

        Each round ship one fires at ship two, then ship two fires back. Both
        shots always happen; health is only checked before a round starts.
        The fight ends once either ship is at zero health or below, or when
        the round cap is reached.

        Returns:
            FightResult with the winner, or no winner if both ships were
            destroyed or the round cap ran out.
        """
        logger.info("Fight started: %s vs %s", self.ship_one, self.ship_two)

        history: list[FightRound] = []
        rounds = 0
        while self.ship_one.is_alive and self.ship_two.is_alive:
            if rounds >= self.max_fight_rounds:
                logger.warning(
                    "Fight stopped after %d rounds with both ships alive, declaring a draw",
                    rounds,
                )
                break

            rounds += 1
            damage_one = self.ship_one.shoot()
            self.ship_two.take_damage(damage_one)
            damage_two = self.ship_two.shoot()
            self.ship_one.take_damage(damage_two)

            history.append(FightRound(
                round_number=rounds,
                ship_one_damage=damage_one,
                ship_two_damage=damage_two,
                ship_one_health=self.ship_one.health,
                ship_two_health=self.ship_two.health,
            ))
            logger.debug(
                "Fight round %d: dealt %d/%d, health %d/%d",
                rounds, damage_one, damage_two,
                self.ship_one.health, self.ship_two.health,
            )

        outcome, winner = self._pick_winner(
            self.ship_one.is_alive and not self.ship_two.is_alive,
            self.ship_two.is_alive and not self.ship_one.is_alive,
        )
        logger.info("Fight finished after %d rounds: %s", rounds, outcome.value)

        return FightResult(
            outcome=outcome,
            winner=winner,
            rounds=rounds,
            ship_one_health=self.ship_one.health,
            ship_two_health=self.ship_two.health,
            history=history,
        )
