"""Planet type profiles and the zone-based type decision tree."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, FrozenSet, Tuple

from orrery.catalog.archetypes import ARCHETYPES, Archetype, ArchetypeFeatures
from orrery.core.rng import SeededRandom

if TYPE_CHECKING:  # pragma: no cover - only used for typing
    from orrery.generation.models import Star


class PlanetType(enum.Enum):
    GAS_GIANT = "gasGiant"
    ICE_GIANT = "iceGiant"
    TERRESTRIAL = "terrestrial"
    ROCKY = "rocky"
    LAVA_WORLD = "lavaWorld"
    ICE_WORLD = "iceWorld"
    OCEAN_WORLD = "oceanWorld"
    DWARF = "dwarf"


GIANT_TYPES: FrozenSet[PlanetType] = frozenset({PlanetType.GAS_GIANT, PlanetType.ICE_GIANT})
ROCKY_FAMILY: FrozenSet[PlanetType] = frozenset(
    {
        PlanetType.ROCKY,
        PlanetType.TERRESTRIAL,
        PlanetType.LAVA_WORLD,
        PlanetType.ICE_WORLD,
        PlanetType.DWARF,
    }
)


@dataclass(frozen=True)
class PlanetTypeProfile:
    name: str
    colors: Tuple[str, ...]
    radius: Tuple[float, float]
    mass: Tuple[float, float]
    atmosphere_chance: float
    atmosphere_types: Tuple[str, ...]
    moon_chance: float
    max_moons: int
    composition: Dict[str, float] = field(default_factory=dict)
    has_rings: bool = False
    has_bands: bool = False


PLANET_TYPES: Dict[PlanetType, PlanetTypeProfile] = {
    PlanetType.GAS_GIANT: PlanetTypeProfile(
        name="Gas Giant",
        colors=("#e8c48a", "#d4a574", "#c9956c", "#deb887", "#f4a460"),
        radius=(8.0, 15.0),
        mass=(50.0, 500.0),
        atmosphere_chance=1.0,
        atmosphere_types=("Hydrogen/Helium", "Hydrogen/Methane"),
        moon_chance=0.95,
        max_moons=12,
        composition={"hydrogen": 0.75, "helium": 0.24, "other": 0.01},
        has_rings=True,
        has_bands=True,
    ),
    PlanetType.ICE_GIANT: PlanetTypeProfile(
        name="Ice Giant",
        colors=("#7ec8e3", "#5dade2", "#85c1e9", "#48c9b0", "#73c6b6"),
        radius=(4.0, 8.0),
        mass=(10.0, 50.0),
        atmosphere_chance=1.0,
        atmosphere_types=("Hydrogen/Methane", "Hydrogen/Ammonia"),
        moon_chance=0.85,
        max_moons=8,
        composition={"hydrogen": 0.15, "helium": 0.15, "water": 0.35, "ammonia": 0.2, "methane": 0.15},
        has_rings=True,
    ),
    PlanetType.TERRESTRIAL: PlanetTypeProfile(
        name="Terrestrial",
        colors=("#5d9b9b", "#6b8e6b", "#7a9a7a", "#4a7c59", "#5f9ea0"),
        radius=(0.8, 2.0),
        mass=(0.5, 5.0),
        atmosphere_chance=0.7,
        atmosphere_types=("Nitrogen/Oxygen", "Nitrogen", "Carbon Dioxide", "None"),
        moon_chance=0.4,
        max_moons=3,
        composition={"rock": 0.7, "metal": 0.25, "water": 0.05},
    ),
    PlanetType.ROCKY: PlanetTypeProfile(
        name="Rocky",
        colors=("#a0a0a0", "#8b8b8b", "#9b9b9b", "#7a7a7a", "#b0a090"),
        radius=(0.3, 0.9),
        mass=(0.05, 0.8),
        atmosphere_chance=0.2,
        atmosphere_types=("Thin Carbon Dioxide", "Trace", "None"),
        moon_chance=0.2,
        max_moons=2,
        composition={"rock": 0.65, "metal": 0.35},
    ),
    PlanetType.LAVA_WORLD: PlanetTypeProfile(
        name="Lava World",
        colors=("#ff6b35", "#ff8c42", "#e55934", "#ff4500", "#dc143c"),
        radius=(0.5, 1.5),
        mass=(0.3, 3.0),
        atmosphere_chance=0.4,
        atmosphere_types=("Sulfur Dioxide", "Carbon Dioxide", "Vaporized Rock"),
        moon_chance=0.1,
        max_moons=1,
        composition={"rock": 0.5, "metal": 0.3, "volatiles": 0.2},
    ),
    PlanetType.ICE_WORLD: PlanetTypeProfile(
        name="Ice World",
        colors=("#e0ffff", "#b0e0e6", "#add8e6", "#87ceeb", "#afeeee"),
        radius=(0.4, 2.5),
        mass=(0.1, 4.0),
        atmosphere_chance=0.5,
        atmosphere_types=("Nitrogen", "Methane", "None"),
        moon_chance=0.3,
        max_moons=2,
        composition={"ice": 0.6, "rock": 0.35, "metal": 0.05},
    ),
    PlanetType.OCEAN_WORLD: PlanetTypeProfile(
        name="Ocean World",
        colors=("#1e90ff", "#4169e1", "#0077be", "#006994", "#0099cc"),
        radius=(0.8, 2.5),
        mass=(0.5, 6.0),
        atmosphere_chance=0.9,
        atmosphere_types=("Nitrogen/Oxygen", "Nitrogen/Water Vapor", "Carbon Dioxide"),
        moon_chance=0.5,
        max_moons=3,
        composition={"water": 0.7, "rock": 0.25, "metal": 0.05},
    ),
    PlanetType.DWARF: PlanetTypeProfile(
        name="Dwarf Planet",
        colors=("#c0c0c0", "#a9a9a9", "#d3d3d3", "#8b8989", "#cdc5bf"),
        radius=(0.1, 0.4),
        mass=(0.001, 0.05),
        atmosphere_chance=0.05,
        atmosphere_types=("Trace Nitrogen", "None"),
        moon_chance=0.15,
        max_moons=1,
        composition={"ice": 0.5, "rock": 0.45, "metal": 0.05},
    ),
}

_ALBEDO: Dict[PlanetType, float] = {
    PlanetType.ICE_WORLD: 0.6,
    PlanetType.GAS_GIANT: 0.5,
}


def albedo_for(planet_type: PlanetType) -> float:
    return _ALBEDO.get(planet_type, 0.3)


T = PlanetType

# Repeated entries weight a pool; each pick is still one uniform draw.
_SUPER_EARTH_HOT = (T.LAVA_WORLD, T.ROCKY)
_SUPER_EARTH_REST = (T.TERRESTRIAL, T.TERRESTRIAL, T.OCEAN_WORLD, T.ROCKY, T.ICE_WORLD)
_COMPACT_HOT = (T.LAVA_WORLD, T.ROCKY)
_COMPACT_REST = (T.ROCKY, T.TERRESTRIAL, T.ICE_WORLD, T.DWARF)
_INNER_HOT = (T.ROCKY, T.ROCKY, T.LAVA_WORLD)
_INNER_TEMPERATE = (T.TERRESTRIAL, T.TERRESTRIAL, T.OCEAN_WORLD, T.ROCKY)
_INNER_COOL = (T.ROCKY, T.ICE_WORLD, T.TERRESTRIAL)
_FROST_TRANSITION = (T.ICE_WORLD, T.ICE_WORLD, T.TERRESTRIAL, T.GAS_GIANT)
_OUTER_GIANTS = (T.GAS_GIANT, T.GAS_GIANT, T.ICE_GIANT, T.ICE_WORLD)
_OUTER_SMALL = (T.ICE_WORLD, T.ICE_WORLD, T.DWARF)
_FAR_GIANTS = (T.ICE_GIANT, T.ICE_GIANT, T.GAS_GIANT, T.ICE_WORLD)
_FAR_SMALL = (T.ICE_WORLD, T.DWARF, T.DWARF)
_DEEP = (T.DWARF, T.DWARF, T.ICE_WORLD)


def features_for(archetype: Archetype) -> ArchetypeFeatures:
    profile = ARCHETYPES.get(archetype)
    return profile.features if profile else ArchetypeFeatures()


def planet_type_for_distance(
    distance_au: float,
    star: "Star",
    archetype: Archetype,
    rng: SeededRandom,
) -> PlanetType:
    """Pick a planet type from the star's zones and the archetype's rules."""

    features = features_for(archetype)
    frost = star.frost_line
    hz_inner = star.habitable_zone_inner
    hz_outer = star.habitable_zone_outer

    if features.has_hot_jupiter and distance_au < 0.1:
        return T.GAS_GIANT

    if archetype is Archetype.SUPER_EARTH:
        pool = _SUPER_EARTH_HOT if distance_au < hz_inner * 0.5 else _SUPER_EARTH_REST
        return rng.choice(pool)

    if archetype is Archetype.COMPACT:
        pool = _COMPACT_HOT if distance_au < hz_inner * 0.3 else _COMPACT_REST
        return rng.choice(pool)

    if distance_au < frost * 0.5:
        if distance_au < star.inner_limit * 3:
            return T.LAVA_WORLD
        if distance_au < hz_inner:
            return rng.choice(_INNER_HOT)
        if distance_au <= hz_outer:
            return rng.choice(_INNER_TEMPERATE)
        return rng.choice(_INNER_COOL)

    if distance_au < frost * 1.5:
        return rng.choice(_FROST_TRANSITION)

    if distance_au < frost * 4:
        return rng.choice(_OUTER_GIANTS if features.outer_giant_zone else _OUTER_SMALL)

    if distance_au < frost * 8:
        return rng.choice(_FAR_GIANTS if features.outer_giant_zone else _FAR_SMALL)

    return rng.choice(_DEEP)


__all__ = [
    "GIANT_TYPES",
    "PLANET_TYPES",
    "PlanetType",
    "PlanetTypeProfile",
    "ROCKY_FAMILY",
    "albedo_for",
    "features_for",
    "planet_type_for_distance",
]
