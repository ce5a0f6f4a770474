"""
Weapon systems for the Space Games spacecraft simulator.

Weapons produce damage each time they fire:
- LaserGun: weak but perfectly stable
- PhotonGun: long range, damage varies wildly and it can misfire

Random weapons own their generator so two ships never share a stream.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


# =============================================================================
# CONSTANTS
# =============================================================================

LASER_DAMAGE = 30
LASER_RANGE = 100

PHOTON_RANGE = 300
PHOTON_MIN_DAMAGE = 10
PHOTON_MAX_DAMAGE = 80    # Exclusive upper bound
PHOTON_MISS_CHANCE = 10   # Percent


@runtime_checkable
class Weapon(Protocol):
    """
    Interface for ship weapons.

    Attributes:
        max_range: Maximum distance between ships for a shot to be possible.
    """

    max_range: int

    def fire(self) -> int:
        """
        Fire the weapon once.

        Returns:
            Damage dealt (>= 0).
        """
        ...

    def is_in_range(self, distance: int) -> bool:
        ...


@dataclass(frozen=True)
class LaserGun:
    """Laser cannon with fixed damage per shot."""
    max_range: int = LASER_RANGE
    damage: int = LASER_DAMAGE

    def fire(self) -> int:
        return self.damage

    def is_in_range(self, distance: int) -> bool:
        """Check if a target at the given distance can be engaged."""
        return distance <= self.max_range


@dataclass
class PhotonGun:
    """
    Photon cannon with random damage and a chance to misfire.

    Attributes:
        max_range: Maximum engagement distance.
        rng: Generator owned by this gun.
    """
    max_range: int = PHOTON_RANGE
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def fire(self) -> int:
        """
        Fire the cannon.

        Rolls for a misfire first; a successful shot deals a uniform
        integer damage in [PHOTON_MIN_DAMAGE, PHOTON_MAX_DAMAGE).

        Returns:
            Damage dealt, 0 on a misfire.
        """
        if self.rng.randrange(0, 100) < PHOTON_MISS_CHANCE:
            return 0
        return self.rng.randrange(PHOTON_MIN_DAMAGE, PHOTON_MAX_DAMAGE)

    def is_in_range(self, distance: int) -> bool:
        """Check if a target at the given distance can be engaged."""
        return distance <= self.max_range
