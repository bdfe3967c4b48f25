"""Entity records produced by the generators.

Orbits are stored in AU (``*_au``) alongside display units (``AU`` internal
units per astronomical unit).  Everything except the animation fields
(``current_angle``, ``trail``, ``selected``, star flares) is fixed at
generation time.
"""
from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from orrery.catalog.archetypes import Archetype
from orrery.catalog.comets import RGB, CometType
from orrery.catalog.interstellar import InterstellarKind, RogueSubtype
from orrery.catalog.moons import MoonType
from orrery.catalog.planets import GIANT_TYPES, PlanetType
from orrery.catalog.stars import SpectralClass
from orrery.math import physics
from orrery.math.physics import AU


def to_plain(value: Any) -> Any:
    """Convert records, enums and tuples into JSON-friendly values."""

    if isinstance(value, enum.Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {item.name: to_plain(getattr(value, item.name)) for item in fields(value)}
    if isinstance(value, dict):
        return {str(to_plain(key)): to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


@dataclass
class Flare:
    angle: float
    size: float
    life: float = 1.0


@dataclass
class Star:
    spectral_class: SpectralClass
    name: str
    full_name: str
    color: str
    temperature: float
    radius: float
    mass: float
    luminosity: float
    habitable_zone_inner: float
    habitable_zone_outer: float
    frost_line: float
    inner_limit: float
    next_flare: float = 0.0
    flares: List[Flare] = field(default_factory=list)
    is_preset: bool = False

    @property
    def visual_radius(self) -> float:
        # Real stars are drawn a size larger than generated ones.
        if self.is_preset:
            return 30.0 + self.radius * 3.0
        return 20.0 + self.radius * 2.0


@dataclass
class SecondaryStar:
    """Binary companion on a circular display orbit around the primary."""

    spectral_class: SpectralClass
    name: str
    full_name: str
    color: str
    temperature: float
    radius: float
    mass: float
    luminosity: float
    orbit_radius: float
    orbital_period: float
    angle: float

    @property
    def visual_radius(self) -> float:
        return 20.0 + self.radius * 2.0

    @property
    def orbit_radius_au(self) -> float:
        return self.orbit_radius / AU


@dataclass
class Crater:
    angle: float
    distance: float
    size: float


@dataclass
class SurfaceDetails:
    has_ice_caps: bool = False
    ice_caps_size: float = 0.0
    has_storm: bool = False
    storm_angle: float = 0.0
    storm_size: float = 0.0
    craters: List[Crater] = field(default_factory=list)
    band_count: int = 0
    cloud_coverage: float = 0.0

    @property
    def crater_count(self) -> int:
        return len(self.craters)


@dataclass
class Moon:
    index: int
    name: str
    moon_type: MoonType
    type_name: str
    color: str
    mass: Optional[float]
    radius: float
    visual_radius: float
    orbit_radius: float
    orbit_radius_au: float
    orbital_period: float
    angle: float
    eccentricity: float


@dataclass
class Trojan:
    lagrange_point: int
    offset_angle: float
    offset_radius: float
    size: float
    color: str


@dataclass
class Planet:
    index: int
    name: str
    planet_type: PlanetType
    type_name: str
    color: str
    radius: float
    mass: float
    orbit_radius_au: float
    eccentricity: float
    orbital_period: float
    orbital_velocity: float
    hill_sphere: float
    angle: float
    rotation_speed: float
    atmosphere: str
    composition: Dict[str, float]
    has_rings: bool
    has_bands: bool
    ring_color: RGB
    visual_radius: float
    temperature: int
    in_habitable_zone: bool
    beyond_frost_line: bool
    surface: SurfaceDetails = field(default_factory=SurfaceDetails)
    moons: List[Moon] = field(default_factory=list)
    trojans: List[Trojan] = field(default_factory=list)
    prominent_rings: bool = False
    spacing_factor: Optional[float] = None
    separation_repaired: bool = False
    current_angle: float = 0.0
    trail: List[Tuple[float, float]] = field(default_factory=list)
    selected: bool = False

    @property
    def orbit_radius(self) -> float:
        return self.orbit_radius_au * AU

    @property
    def is_giant(self) -> bool:
        return self.planet_type in GIANT_TYPES

    @property
    def escape_velocity(self) -> float:
        return physics.escape_velocity(self.mass, self.radius)

    @property
    def surface_gravity(self) -> float:
        return physics.surface_gravity(self.mass, self.radius)


class BeltKind(enum.Enum):
    ASTEROID = "asteroid"
    KUIPER = "kuiper"


@dataclass
class BeltBody:
    angle: float
    radius_au: float
    eccentricity: float
    size: float
    orbital_period: float
    color: str
    inclination: float = 0.0

    @property
    def radius(self) -> float:
        return self.radius_au * AU


@dataclass
class Belt:
    kind: BeltKind
    inner_au: float
    outer_au: float
    bodies: List[BeltBody] = field(default_factory=list)

    @property
    def inner_radius(self) -> float:
        return self.inner_au * AU

    @property
    def outer_radius(self) -> float:
        return self.outer_au * AU

    def __len__(self) -> int:
        return len(self.bodies)


@dataclass
class Comet:
    """Bound comet on an ellipse, distances in display units."""

    perihelion: float
    aphelion: float
    semi_major_axis: float
    eccentricity: float
    angle: float
    orbital_period: float
    inclination: float
    size: float
    comet_type: CometType
    type_name: str
    color: str
    tail_color: RGB
    dust_color: RGB
    volatility: float
    tail_brightness: float
    tail_activation_radius: float
    name: Optional[str] = None


@dataclass
class HyperbolicOrbit:
    """Unbound trajectory; ``semi_major_axis`` is negative, distances in AU."""

    semi_major_axis: float
    eccentricity: float
    perihelion: float
    perihelion_angle: float
    inclination: float
    mean_anomaly: float
    true_anomaly: float
    mean_motion: float
    spawn_distance: float


@dataclass
class InterstellarCometBody:
    size: float
    color: str
    tail_color: RGB
    dust_color: RGB
    tail_activation_radius: float
    volatility: float
    tail_brightness: float


@dataclass
class RoguePlanetBody:
    subtype: RogueSubtype
    subtype_name: str
    size: float
    visual_radius: float
    color: str
    mass: float
    has_bands: bool
    band_count: int


@dataclass
class RogueBlackHoleBody:
    mass: float
    visual_radius: float
    has_accretion_disk: bool
    disk_color: str


@dataclass
class PassingStar:
    name: str
    spectral_class: SpectralClass
    color: str
    temperature: int
    mass: float
    radius: float
    visual_radius: float


@dataclass
class PassingPlanet:
    index: int
    orbit_radius_local: float
    angle: float
    orbit_speed: float
    size: float
    color: str


@dataclass
class PassingSystemBody:
    star: PassingStar
    planets: List[PassingPlanet] = field(default_factory=list)


InterstellarBody = Union[
    InterstellarCometBody,
    RoguePlanetBody,
    RogueBlackHoleBody,
    PassingSystemBody,
]


@dataclass
class InterstellarObject:
    id: int
    kind: InterstellarKind
    type_name: str
    name: str
    orbit: HyperbolicOrbit
    body: InterstellarBody
    spawn_time: float = 0.0
    spawned: bool = True
    reached_perihelion: bool = False
    despawned: bool = False
    last_true_anomaly: Optional[float] = None

    @property
    def is_passing_system(self) -> bool:
        return self.kind is InterstellarKind.PASSING_SYSTEM


@dataclass
class SolarSystem:
    star: Star
    planets: List[Planet]
    archetype: Archetype
    archetype_name: str
    secondary_star: Optional[SecondaryStar] = None
    asteroid_belt: Optional[Belt] = None
    kuiper_belt: Optional[Belt] = None
    comets: List[Comet] = field(default_factory=list)
    is_preset: bool = False
    seed: Optional[Union[int, str]] = None

    def orbit_radii(self) -> List[float]:
        return [planet.orbit_radius_au for planet in self.planets]

    def moon_count(self) -> int:
        return sum(len(planet.moons) for planet in self.planets)

    def summary(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "star": self.star.name,
            "class": self.star.spectral_class.value,
            "archetype": self.archetype.value,
            "archetype_name": self.archetype_name,
            "binary": self.secondary_star is not None,
            "planets": [planet.name for planet in self.planets],
            "moons": self.moon_count(),
            "asteroid_belt": len(self.asteroid_belt) if self.asteroid_belt else 0,
            "kuiper_belt": len(self.kuiper_belt) if self.kuiper_belt else 0,
            "comets": len(self.comets),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "archetype": self.archetype.value,
            "archetype_name": self.archetype_name,
            "is_preset": self.is_preset,
            "star": to_plain(self.star),
            "secondary_star": to_plain(self.secondary_star),
            "planets": [to_plain(planet) for planet in self.planets],
            "asteroid_belt": to_plain(self.asteroid_belt),
            "kuiper_belt": to_plain(self.kuiper_belt),
            "comets": [to_plain(comet) for comet in self.comets],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


__all__ = [
    "Belt",
    "BeltBody",
    "BeltKind",
    "Comet",
    "Crater",
    "Flare",
    "HyperbolicOrbit",
    "InterstellarBody",
    "InterstellarCometBody",
    "InterstellarObject",
    "Moon",
    "PassingPlanet",
    "PassingStar",
    "PassingSystemBody",
    "Planet",
    "RogueBlackHoleBody",
    "RoguePlanetBody",
    "SecondaryStar",
    "SolarSystem",
    "Star",
    "SurfaceDetails",
    "Trojan",
    "to_plain",
]
