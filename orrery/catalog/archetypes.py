"""System archetypes: weighted formation patterns."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Tuple

from orrery.core.rng import SeededRandom


class Archetype(enum.Enum):
    SOLAR_LIKE = "solarLike"
    HOT_JUPITER = "hotJupiter"
    SUPER_EARTH = "superEarth"
    COMPACT = "compact"
    SPARSE = "sparse"
    PRESET = "preset"


@dataclass(frozen=True)
class ArchetypeFeatures:
    has_hot_jupiter: bool = False
    inner_rocky_zone: bool = True
    outer_giant_zone: bool = False
    asteroid_belt: bool = False
    kuiper_belt: bool = False


@dataclass(frozen=True)
class ArchetypeProfile:
    name: str
    description: str
    probability: float
    planet_count: Tuple[int, int]
    features: ArchetypeFeatures


ARCHETYPES: Dict[Archetype, ArchetypeProfile] = {
    Archetype.SOLAR_LIKE: ArchetypeProfile(
        name="Solar System Type",
        description="Rocky inner planets, gas giants beyond frost line",
        probability=0.35,
        planet_count=(4, 10),
        features=ArchetypeFeatures(
            outer_giant_zone=True,
            asteroid_belt=True,
            kuiper_belt=True,
        ),
    ),
    Archetype.HOT_JUPITER: ArchetypeProfile(
        name="Hot Jupiter System",
        description="Gas giant very close to star, few other planets",
        probability=0.15,
        planet_count=(1, 4),
        features=ArchetypeFeatures(
            has_hot_jupiter=True,
            inner_rocky_zone=False,
            kuiper_belt=True,
        ),
    ),
    Archetype.SUPER_EARTH: ArchetypeProfile(
        name="Super-Earth System",
        description="Multiple large rocky planets, tightly packed",
        probability=0.25,
        planet_count=(3, 7),
        features=ArchetypeFeatures(kuiper_belt=True),
    ),
    Archetype.COMPACT: ArchetypeProfile(
        name="Compact Multi-Planet",
        description="Many small planets in tight orbits (like TRAPPIST-1)",
        probability=0.15,
        planet_count=(5, 8),
        features=ArchetypeFeatures(),
    ),
    Archetype.SPARSE: ArchetypeProfile(
        name="Sparse System",
        description="Few widely-spaced planets",
        probability=0.10,
        planet_count=(2, 4),
        features=ArchetypeFeatures(
            outer_giant_zone=True,
            asteroid_belt=True,
            kuiper_belt=True,
        ),
    ),
}


def select_archetype(rng: SeededRandom) -> Archetype:
    entries = [(archetype, profile.probability) for archetype, profile in ARCHETYPES.items()]
    return rng.weighted(entries, Archetype.SOLAR_LIKE)


__all__ = [
    "ARCHETYPES",
    "Archetype",
    "ArchetypeFeatures",
    "ArchetypeProfile",
    "select_archetype",
]
