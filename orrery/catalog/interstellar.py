"""Interstellar visitor profiles and event timing constants.

Every visitor follows a hyperbolic trajectory.  Its eccentricity is derived
from a velocity factor drawn from ``velocity``:

    e = 1 + velocity_factor * eccentricity_scale + uniform(*eccentricity_jitter)

Perihelion and spawn distances are in AU.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Tuple

from orrery.catalog.comets import RGB
from orrery.catalog.stars import SpectralClass
from orrery.core.rng import SeededRandom


class InterstellarKind(enum.Enum):
    COMET = "interstellarComet"
    ROGUE_PLANET = "roguePlanet"
    ROGUE_BLACK_HOLE = "rogueBlackHole"
    PASSING_SYSTEM = "passingSystem"


@dataclass(frozen=True)
class InterstellarProfile:
    name: str
    description: str
    probability: float
    velocity: Tuple[float, float]
    eccentricity_scale: float
    eccentricity_jitter: Tuple[float, float]
    perihelion: Tuple[float, float]
    spawn_distance: Tuple[float, float] = (80.0, 150.0)
    mean_motion_scale: float = 0.00002


INTERSTELLAR_TYPES: Dict[InterstellarKind, InterstellarProfile] = {
    InterstellarKind.COMET: InterstellarProfile(
        name="Interstellar Comet",
        description="An icy body from another star system",
        probability=0.5,
        velocity=(1.2, 3.0),
        eccentricity_scale=0.5,
        eccentricity_jitter=(0.1, 0.5),
        perihelion=(0.5, 30.0),
    ),
    InterstellarKind.ROGUE_PLANET: InterstellarProfile(
        name="Rogue Planet",
        description="A planet wandering between stars",
        probability=0.3,
        velocity=(0.8, 2.0),
        eccentricity_scale=0.3,
        eccentricity_jitter=(0.05, 0.3),
        perihelion=(1.0, 30.0),
    ),
    InterstellarKind.ROGUE_BLACK_HOLE: InterstellarProfile(
        name="Rogue Black Hole",
        description="A stellar-mass black hole drifting through space",
        probability=0.05,
        velocity=(0.5, 1.5),
        eccentricity_scale=0.2,
        eccentricity_jitter=(0.05, 0.2),
        perihelion=(1.5, 60.0),
    ),
    InterstellarKind.PASSING_SYSTEM: InterstellarProfile(
        name="Passing Star System",
        description="Another star system passing through our neighborhood",
        probability=0.15,
        velocity=(0.3, 1.0),
        eccentricity_scale=0.15,
        eccentricity_jitter=(0.02, 0.1),
        perihelion=(40.0, 80.0),
        spawn_distance=(120.0, 180.0),
        mean_motion_scale=0.000015,
    ),
}


def select_interstellar_kind(rng: SeededRandom) -> InterstellarKind:
    entries = [(kind, profile.probability) for kind, profile in INTERSTELLAR_TYPES.items()]
    return rng.weighted(entries, InterstellarKind.COMET)


# Interstellar comets
COMET_SIZE = (0.5, 4.0)
COMET_COLORS = ("#aaddff", "#cceeff", "#88bbdd")
COMET_TAIL_COLOR: RGB = (150, 200, 255)
COMET_DUST_COLOR: RGB = (200, 180, 150)
COMET_TAIL_ACTIVATION_AU = 3.0


class RogueSubtype(enum.Enum):
    FROZEN = "frozen"
    GAS_GIANT = "gasGiant"
    ICE_GIANT = "iceGiant"


@dataclass(frozen=True)
class RogueSubtypeProfile:
    name: str
    colors: Tuple[str, ...]
    probability: float
    mass_per_size: float
    band_count: Tuple[int, int]
    has_bands: bool


ROGUE_SUBTYPES: Dict[RogueSubtype, RogueSubtypeProfile] = {
    RogueSubtype.FROZEN: RogueSubtypeProfile(
        name="Frozen World",
        colors=("#667788", "#556677", "#778899"),
        probability=0.4,
        mass_per_size=2.0,
        band_count=(2, 4),
        has_bands=False,
    ),
    RogueSubtype.GAS_GIANT: RogueSubtypeProfile(
        name="Gas Giant",
        colors=("#cc9966", "#aa7755", "#ddaa77", "#8877aa"),
        probability=0.35,
        mass_per_size=50.0,
        band_count=(4, 8),
        has_bands=True,
    ),
    RogueSubtype.ICE_GIANT: RogueSubtypeProfile(
        name="Ice Giant",
        colors=("#6699bb", "#5588aa", "#77aacc"),
        probability=0.25,
        mass_per_size=20.0,
        band_count=(2, 4),
        has_bands=True,
    ),
}

ROGUE_PLANET_SIZE = (4.0, 25.0)


def select_rogue_subtype(rng: SeededRandom) -> RogueSubtype:
    entries = [(subtype, profile.probability) for subtype, profile in ROGUE_SUBTYPES.items()]
    return rng.weighted(entries, RogueSubtype.FROZEN)


# Rogue black holes, mass in solar masses
BLACK_HOLE_MASS = (3.0, 50.0)
BLACK_HOLE_DISK_CHANCE = 0.3
BLACK_HOLE_DISK_COLORS = ("#ff6600", "#ffaa00", "#ff4400")


def black_hole_visual_radius(mass: float) -> float:
    return max(3.0, mass * 0.8)


@dataclass(frozen=True)
class PassingStarProfile:
    color: str
    temperature: int
    mass: float
    radius: float

    @property
    def visual_radius(self) -> float:
        return 8.0 + self.radius * 6.0


PASSING_STARS: Dict[SpectralClass, PassingStarProfile] = {
    SpectralClass.M: PassingStarProfile(color="#ffaa77", temperature=3200, mass=0.4, radius=0.5),
    SpectralClass.K: PassingStarProfile(color="#ffcc88", temperature=4500, mass=0.7, radius=0.8),
    SpectralClass.G: PassingStarProfile(color="#ffff99", temperature=5500, mass=1.0, radius=1.0),
    SpectralClass.F: PassingStarProfile(color="#ffffcc", temperature=6500, mass=1.3, radius=1.2),
}
PASSING_STAR_CLASSES: Tuple[SpectralClass, ...] = tuple(PASSING_STARS)
PASSING_PLANET_COUNT = (1, 5)
PASSING_PLANET_COLORS = ("#aa8866", "#6688aa", "#88aa66", "#cc9966", "#667788")
# Local orbits are shrunk so the whole system reads as one object on screen.
PASSING_ORBIT_SCALE = 0.15


@dataclass(frozen=True)
class EventConfig:
    """Timing and population limits for the interstellar event engine."""

    check_interval: float = 500.0
    base_probability: float = 0.002
    max_active_objects: int = 5
    max_passing_systems: int = 1
    despawn_distance: float = 200.0
    passing_despawn_factor: float = 1.5
    notification_capacity: int = 20
    event_log_capacity: int = 200
    perihelion_window: float = 0.1


EVENT_CONFIG = EventConfig()


__all__ = [
    "BLACK_HOLE_DISK_CHANCE",
    "BLACK_HOLE_DISK_COLORS",
    "BLACK_HOLE_MASS",
    "COMET_COLORS",
    "COMET_DUST_COLOR",
    "COMET_SIZE",
    "COMET_TAIL_ACTIVATION_AU",
    "COMET_TAIL_COLOR",
    "EVENT_CONFIG",
    "EventConfig",
    "INTERSTELLAR_TYPES",
    "InterstellarKind",
    "InterstellarProfile",
    "PASSING_ORBIT_SCALE",
    "PASSING_PLANET_COLORS",
    "PASSING_PLANET_COUNT",
    "PASSING_STARS",
    "PASSING_STAR_CLASSES",
    "PassingStarProfile",
    "ROGUE_PLANET_SIZE",
    "ROGUE_SUBTYPES",
    "RogueSubtype",
    "RogueSubtypeProfile",
    "black_hole_visual_radius",
    "select_interstellar_kind",
    "select_rogue_subtype",
]
