"""
Spaceship factories for the Space Games spacecraft simulator.

Each factory describes one family of spacecraft: its starting health, its
type name and a matched set of parts (energy source, weapon, engine).
Adding a new family means adding a factory here and registering it in
FACTORIES; Spaceship and Battle do not change.

Families:
- PirateShipFactory: fragile, photon gun and photon engine (high variance)
- WarShipFactory: sturdy, laser gun and pulse engine (stable)
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, runtime_checkable

from .energy import EnergySource, PlasmaEnergy
from .engines import Engine, PhotonEngine, PulseEngine
from .weapons import LaserGun, PhotonGun, Weapon


# =============================================================================
# CONSTANTS
# =============================================================================

PIRATE_HEALTH = 200
PIRATE_TYPE_NAME = "pirate ship"

WAR_HEALTH = 500
WAR_TYPE_NAME = "warship"


@runtime_checkable
class SpaceshipFactory(Protocol):
    """
    Interface for a spaceship family.

    Attributes:
        health: Starting health of ships of this family.
        type_name: Human-readable family name.
    """

    health: int
    type_name: str

    def create_engine(self) -> Engine:
        ...

    def create_weapon(self) -> Weapon:
        ...

    def create_energy_source(self) -> EnergySource:
        ...


@dataclass
class SeededFactory:
    """
    Common seeding behaviour for factories that build random parts.

    A seeded factory hands every random part its own generator, seeded
    from a private stream, so equally seeded factories build identical
    ships while no two parts share a generator.

    Attributes:
        seed: Optional seed for reproducible parts.
    """
    seed: Optional[int] = None
    _seeds: random.Random = field(init=False, repr=False)

    def __post_init__(self):
        self._seeds = random.Random(self.seed)

    def _part_rng(self) -> random.Random:
        """Create a fresh generator for one part."""
        if self.seed is None:
            return random.Random()
        return random.Random(self._seeds.getrandbits(64))


@dataclass
class PirateShipFactory(SeededFactory):
    """Pirate ship: plasma reactor, photon gun, photon engine."""
    health: int = field(default=PIRATE_HEALTH, init=False)
    type_name: str = field(default=PIRATE_TYPE_NAME, init=False)

    def create_energy_source(self) -> EnergySource:
        return PlasmaEnergy()

    def create_weapon(self) -> Weapon:
        return PhotonGun(rng=self._part_rng())

    def create_engine(self) -> Engine:
        return PhotonEngine(rng=self._part_rng())


@dataclass
class WarShipFactory(SeededFactory):
    """Warship: plasma reactor, laser gun, pulse engine."""
    health: int = field(default=WAR_HEALTH, init=False)
    type_name: str = field(default=WAR_TYPE_NAME, init=False)

    def create_energy_source(self) -> EnergySource:
        return PlasmaEnergy()

    def create_weapon(self) -> Weapon:
        return LaserGun()

    def create_engine(self) -> Engine:
        return PulseEngine()


# =============================================================================
# FACTORY REGISTRY
# =============================================================================

FACTORIES: dict[str, Callable[..., SpaceshipFactory]] = {
    "pirate": PirateShipFactory,
    "war": WarShipFactory,
}


def create_factory(kind: str, seed: Optional[int] = None) -> SpaceshipFactory:
    """
    Create a factory for a spaceship family by name.

    Args:
        kind: Family identifier (e.g., 'pirate', 'war').
        seed: Optional seed for reproducible random parts.

    Returns:
        A configured factory.

    Raises:
        KeyError: If the family is not registered.
    """
    if kind not in FACTORIES:
        raise KeyError(f"Spaceship family '{kind}' not found in factory registry")
    return FACTORIES[kind](seed=seed)
