"""
Engines for the Space Games spacecraft simulator.

An engine turns energy into distance, one simulation tick at a time:
- BaseEngine: spends its energy rate and covers one unit of distance
- PulseEngine: the base burn scaled by a fixed speed factor
- PhotonEngine: random consumption and random speed, may stall for a tick

Energy is always drawn through EnergySource.consume. A source that cannot
cover the request simply refuses it; the engine still reports its distance.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .energy import EnergySource


# =============================================================================
# CONSTANTS
# =============================================================================

BASE_ENERGY_RATE = 1
BASE_DISTANCE = 1

PULSE_SPEED_FACTOR = 5

PHOTON_ENERGY_RATE = 3
PHOTON_MAX_FACTOR = 10  # Exclusive upper bound for both random multipliers


@runtime_checkable
class Engine(Protocol):
    """
    Interface for ship engines.

    Attributes:
        energy_rate: Baseline energy drawn per move.
    """

    energy_rate: int

    def move(self, energy: EnergySource) -> int:
        """
        Fly for one tick.

        Args:
            energy: Source to draw energy from.

        Returns:
            Distance covered this tick.
        """
        ...


@dataclass
class BaseEngine:
    """Plain engine: burns its energy rate to cover a single unit."""
    energy_rate: int = BASE_ENERGY_RATE

    def move(self, energy: EnergySource) -> int:
        energy.consume(self.energy_rate)
        return BASE_DISTANCE


@dataclass
class PulseEngine(BaseEngine):
    """Pulse drive. Not fast, but every tick is the same."""
    speed_factor: int = PULSE_SPEED_FACTOR

    def move(self, energy: EnergySource) -> int:
        return super().move(energy) * self.speed_factor


@dataclass
class PhotonEngine:
    """
    Photon drive. Very unstable but potentially fast.

    Each move draws two independent multipliers in [0, PHOTON_MAX_FACTOR):
    one scales the energy burned, the other the distance covered.

    Attributes:
        energy_rate: Baseline energy per multiplier step.
        rng: Generator owned by this engine.
    """
    energy_rate: int = PHOTON_ENERGY_RATE
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def move(self, energy: EnergySource) -> int:
        """
        Fly for one tick with random burn and random speed.

        Args:
            energy: Source to draw energy from.

        Returns:
            Distance covered, possibly 0.
        """
        energy_factor = self.rng.randrange(0, PHOTON_MAX_FACTOR)
        energy.consume(self.energy_rate * energy_factor)

        speed_factor = self.rng.randrange(0, PHOTON_MAX_FACTOR)
        return self.energy_rate * speed_factor
