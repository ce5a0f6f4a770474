"""
Tests for the spaceship factories module.

Run with: python -m pytest tests/test_factories.py -v
"""

import pytest

from spacegames.energy import PlasmaEnergy
from spacegames.engines import PhotonEngine, PulseEngine
from spacegames.factories import (
    FACTORIES,
    PirateShipFactory,
    SpaceshipFactory,
    WarShipFactory,
    create_factory,
)
from spacegames.weapons import LaserGun, PhotonGun


class TestPirateShipFactory:
    """Tests for the pirate family."""

    def test_family_values(self):
        factory = PirateShipFactory()
        assert factory.health == 200
        assert factory.type_name == "pirate ship"

    def test_parts(self):
        factory = PirateShipFactory()
        assert isinstance(factory.create_energy_source(), PlasmaEnergy)
        assert isinstance(factory.create_weapon(), PhotonGun)
        assert isinstance(factory.create_engine(), PhotonEngine)

    def test_parts_are_fresh(self):
        """Test that every call builds a new part."""
        factory = PirateShipFactory()
        assert factory.create_energy_source() is not factory.create_energy_source()
        assert factory.create_weapon() is not factory.create_weapon()

    def test_random_parts_get_own_generators(self):
        factory = PirateShipFactory(seed=1)
        weapon = factory.create_weapon()
        engine = factory.create_engine()
        assert weapon.rng is not engine.rng

    def test_seeded_factories_build_identical_parts(self):
        gun_a = PirateShipFactory(seed=21).create_weapon()
        gun_b = PirateShipFactory(seed=21).create_weapon()

        assert [gun_a.fire() for _ in range(100)] == [gun_b.fire() for _ in range(100)]

    def test_different_seeds_differ(self):
        gun_a = PirateShipFactory(seed=1).create_weapon()
        gun_b = PirateShipFactory(seed=2).create_weapon()

        assert [gun_a.fire() for _ in range(100)] != [gun_b.fire() for _ in range(100)]

    def test_satisfies_protocol(self):
        assert isinstance(PirateShipFactory(), SpaceshipFactory)


class TestWarShipFactory:
    """Tests for the warship family."""

    def test_family_values(self):
        factory = WarShipFactory()
        assert factory.health == 500
        assert factory.type_name == "warship"

    def test_parts(self):
        factory = WarShipFactory()
        assert isinstance(factory.create_energy_source(), PlasmaEnergy)
        assert isinstance(factory.create_weapon(), LaserGun)
        assert isinstance(factory.create_engine(), PulseEngine)

    def test_satisfies_protocol(self):
        assert isinstance(WarShipFactory(seed=3), SpaceshipFactory)


class TestFactoryRegistry:
    """Tests for looking up factories by family name."""

    def test_registered_families(self):
        assert set(FACTORIES) == {"pirate", "war"}

    @pytest.mark.parametrize("kind, factory_class", [
        ("pirate", PirateShipFactory),
        ("war", WarShipFactory),
    ])
    def test_create_factory(self, kind, factory_class):
        factory = create_factory(kind, seed=4)
        assert isinstance(factory, factory_class)
        assert factory.seed == 4

    def test_unknown_family(self):
        with pytest.raises(KeyError, match="not found"):
            create_factory("freighter")
