"""Space Games: spaceships built by abstract factories race and fight."""

from .energy import (
    EnergySource,
    PlasmaEnergy,
    SolarEnergy,
)

from .weapons import (
    LaserGun,
    PhotonGun,
    Weapon,
)

from .engines import (
    BaseEngine,
    Engine,
    PhotonEngine,
    PulseEngine,
)

from .factories import (
    FACTORIES,
    PirateShipFactory,
    SpaceshipFactory,
    WarShipFactory,
    create_factory,
)

from .spaceship import Spaceship

from .battle import (
    Battle,
    BattleOutcome,
    FightResult,
    FightRound,
    RaceResult,
)

from .tournament import (
    TournamentSummary,
    run_tournament,
)

__all__ = [
    # Energy sources
    "EnergySource",
    "PlasmaEnergy",
    "SolarEnergy",
    # Weapons
    "LaserGun",
    "PhotonGun",
    "Weapon",
    # Engines
    "BaseEngine",
    "Engine",
    "PhotonEngine",
    "PulseEngine",
    # Factories
    "FACTORIES",
    "PirateShipFactory",
    "SpaceshipFactory",
    "WarShipFactory",
    "create_factory",
    # Ships
    "Spaceship",
    # Battle
    "Battle",
    "BattleOutcome",
    "FightResult",
    "FightRound",
    "RaceResult",
    # Tournament
    "TournamentSummary",
    "run_tournament",
]
