"""
Energy sources for the Space Games spacecraft simulator.

An energy source holds a remaining volume that engines draw from on every
move. Two variants are available:
- SolarEnergy: idealized unlimited supply, never drains
- PlasmaEnergy: finite supply, signals depletion by returning 0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


# =============================================================================
# CONSTANTS
# =============================================================================

SOLAR_VOLUME = 100
PLASMA_VOLUME = 100


@runtime_checkable
class EnergySource(Protocol):
    """
    Interface for anything an engine can draw energy from.

    Attributes:
        remaining: Energy left in the source (never negative).
    """

    remaining: int

    def consume(self, amount: int) -> int:
        """
        Draw energy from the source.

        Args:
            amount: Energy requested (>= 0).

        Returns:
            Energy remaining after consumption.
        """
        ...


@dataclass
class SolarEnergy:
    """Solar radiation collector. Treated as an endless supply."""
    remaining: int = SOLAR_VOLUME

    def consume(self, amount: int) -> int:
        return self.remaining

    @property
    def is_depleted(self) -> bool:
        return self.remaining == 0


@dataclass
class PlasmaEnergy:
    """
    Plasma reactor with a finite fuel volume.

    A request larger than what is left is refused: the volume stays as it
    was and 0 is returned so the caller can tell the source ran dry.
    """
    remaining: int = PLASMA_VOLUME

    def consume(self, amount: int) -> int:
        """
        Draw energy from the reactor.

        Args:
            amount: Energy requested (>= 0).

        Returns:
            Remaining volume, or 0 if the request could not be covered.
        """
        if self.remaining >= amount:
            self.remaining -= amount
            return self.remaining
        return 0

    @property
    def is_depleted(self) -> bool:
        """Check if the reactor has nothing left to give."""
        return self.remaining == 0
