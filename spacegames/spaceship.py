"""
Spaceship assembled from a factory's matched set of parts.
"""

from __future__ import annotations

from .energy import EnergySource
from .engines import Engine
from .factories import SpaceshipFactory
from .weapons import Weapon


class Spaceship:
    """
    A spaceship built by a SpaceshipFactory.

    The ship copies health and type name from the factory and owns the
    parts the factory creates for it; parts are never shared between ships.

    Attributes:
        name: Ship name.
        type_name: Family name copied from the factory.
        health: Current health. May drop below zero; the ship is destroyed
            once it reaches zero or less.
    """

    def __init__(self, name: str, factory: SpaceshipFactory):
        """
        Build a ship from a factory.

        Args:
            name: Ship name.
            factory: Factory providing health, type name and parts.
        """
        self.name = name
        self.type_name = factory.type_name
        self.health = factory.health
        self._energy: EnergySource = factory.create_energy_source()
        self._weapon: Weapon = factory.create_weapon()
        self._engine: Engine = factory.create_engine()

    @property
    def energy(self) -> EnergySource:
        return self._energy

    @property
    def weapon(self) -> Weapon:
        return self._weapon

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def is_alive(self) -> bool:
        """Check if the ship still has health left."""
        return self.health > 0

    def shoot(self) -> int:
        """
        Fire the ship's weapon.

        Returns:
            Damage dealt.
        """
        return self._weapon.fire()

    def move(self) -> int:
        """
        Fly one tick using the ship's own energy source.

        Returns:
            Distance covered.
        """
        return self._engine.move(self._energy)

    def take_damage(self, amount: int) -> None:
        """
        Subtract damage from health. No floor at zero.

        Args:
            amount: Damage received.
        """
        self.health -= amount

    def __str__(self) -> str:
        return f'{self.type_name} "{self.name}"'

    def __repr__(self) -> str:
        return f"Spaceship(name={self.name!r}, type_name={self.type_name!r}, health={self.health})"
