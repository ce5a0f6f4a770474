"""
Tests for the weapon systems module.

Run with: python -m pytest tests/test_weapons.py -v
"""

import random

import pytest

from spacegames.weapons import (
    LaserGun,
    PhotonGun,
    Weapon,
    PHOTON_MAX_DAMAGE,
    PHOTON_MIN_DAMAGE,
)


@pytest.fixture
def seeded_photon_gun() -> PhotonGun:
    """Create a photon gun with a fixed seed for reproducibility."""
    return PhotonGun(rng=random.Random(1234))


class TestLaserGun:
    """Tests for the LaserGun class."""

    def test_always_deals_thirty(self):
        laser = LaserGun()
        assert all(laser.fire() == 30 for _ in range(500))

    def test_max_range(self):
        assert LaserGun().max_range == 100

    def test_is_in_range(self):
        laser = LaserGun()
        assert laser.is_in_range(50)
        assert laser.is_in_range(100)
        assert not laser.is_in_range(101)

    def test_satisfies_protocol(self):
        assert isinstance(LaserGun(), Weapon)


class TestPhotonGun:
    """Tests for the PhotonGun class."""

    def test_max_range(self):
        assert PhotonGun().max_range == 300
        assert PhotonGun().is_in_range(300)
        assert not PhotonGun().is_in_range(301)

    def test_miss_rate(self, seeded_photon_gun):
        """Test that roughly one shot in ten misfires."""
        shots = [seeded_photon_gun.fire() for _ in range(10_000)]
        misses = sum(1 for damage in shots if damage == 0)

        assert misses / len(shots) == pytest.approx(0.10, abs=0.02)

    def test_damage_bounds(self, seeded_photon_gun):
        shots = [seeded_photon_gun.fire() for _ in range(5000)]
        hits = [damage for damage in shots if damage != 0]

        assert hits
        assert min(hits) >= PHOTON_MIN_DAMAGE == 10
        assert max(hits) < PHOTON_MAX_DAMAGE == 80

    def test_same_seed_same_shots(self):
        gun_a = PhotonGun(rng=random.Random(99))
        gun_b = PhotonGun(rng=random.Random(99))

        assert [gun_a.fire() for _ in range(100)] == [gun_b.fire() for _ in range(100)]

    def test_generators_are_per_instance(self):
        """Test that firing one gun does not disturb another gun's stream."""
        reference = PhotonGun(rng=random.Random(5))
        gun = PhotonGun(rng=random.Random(5))
        other = PhotonGun(rng=random.Random(6))

        expected = [reference.fire() for _ in range(50)]
        shots = []
        for _ in range(50):
            other.fire()
            shots.append(gun.fire())

        assert shots == expected

    def test_default_guns_do_not_share_generator(self):
        assert PhotonGun().rng is not PhotonGun().rng

    def test_does_not_use_module_random(self, monkeypatch):
        """Test that the global generator is never consulted."""
        def forbidden(*args, **kwargs):
            raise AssertionError("module-level random used")

        monkeypatch.setattr(random, "randrange", forbidden)
        monkeypatch.setattr(random, "randint", forbidden)

        gun = PhotonGun(rng=random.Random(1))
        for _ in range(20):
            gun.fire()

    def test_satisfies_protocol(self):
        assert isinstance(PhotonGun(), Weapon)
