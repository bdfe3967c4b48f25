"""Morgan-Keenan spectral classes and their parameter ranges."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Tuple

from orrery.core.rng import SeededRandom


class SpectralClass(enum.Enum):
    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"


@dataclass(frozen=True)
class StarClassProfile:
    name: str
    color: str
    temperature: Tuple[float, float]
    radius: Tuple[float, float]
    mass: Tuple[float, float]
    luminosity: Tuple[float, float]
    probability: float

    @property
    def mass_max(self) -> float:
        return self.mass[1]


STAR_CLASSES: Dict[SpectralClass, StarClassProfile] = {
    SpectralClass.O: StarClassProfile(
        name="O-Class (Blue Supergiant)",
        color="#9bb0ff",
        temperature=(30000.0, 50000.0),
        radius=(6.6, 15.0),
        mass=(16.0, 150.0),
        luminosity=(30000.0, 1000000.0),
        probability=0.00003,
    ),
    SpectralClass.B: StarClassProfile(
        name="B-Class (Blue Giant)",
        color="#aabfff",
        temperature=(10000.0, 30000.0),
        radius=(1.8, 6.6),
        mass=(2.1, 16.0),
        luminosity=(25.0, 30000.0),
        probability=0.13,
    ),
    SpectralClass.A: StarClassProfile(
        name="A-Class (White)",
        color="#cad7ff",
        temperature=(7500.0, 10000.0),
        radius=(1.4, 1.8),
        mass=(1.4, 2.1),
        luminosity=(5.0, 25.0),
        probability=0.6,
    ),
    SpectralClass.F: StarClassProfile(
        name="F-Class (Yellow-White)",
        color="#f8f7ff",
        temperature=(6000.0, 7500.0),
        radius=(1.15, 1.4),
        mass=(1.04, 1.4),
        luminosity=(1.5, 5.0),
        probability=3.0,
    ),
    SpectralClass.G: StarClassProfile(
        name="G-Class (Yellow)",
        color="#fff4ea",
        temperature=(5200.0, 6000.0),
        radius=(0.96, 1.15),
        mass=(0.8, 1.04),
        luminosity=(0.6, 1.5),
        probability=7.6,
    ),
    SpectralClass.K: StarClassProfile(
        name="K-Class (Orange)",
        color="#ffd2a1",
        temperature=(3700.0, 5200.0),
        radius=(0.7, 0.96),
        mass=(0.45, 0.8),
        luminosity=(0.08, 0.6),
        probability=12.1,
    ),
    SpectralClass.M: StarClassProfile(
        name="M-Class (Red Dwarf)",
        color="#ffcc6f",
        temperature=(2400.0, 3700.0),
        radius=(0.1, 0.7),
        mass=(0.08, 0.45),
        luminosity=(0.0001, 0.08),
        probability=76.45,
    ),
}

# Candidate classes for a binary companion, in draw order.
SECONDARY_CLASSES: Tuple[SpectralClass, ...] = (
    SpectralClass.K,
    SpectralClass.M,
    SpectralClass.G,
    SpectralClass.F,
)


def select_star_class(rng: SeededRandom) -> SpectralClass:
    """Weighted draw over the class table; G if rounding exhausts it."""

    entries = [(spectral, profile.probability) for spectral, profile in STAR_CLASSES.items()]
    return rng.weighted(entries, SpectralClass.G)


__all__ = [
    "SECONDARY_CLASSES",
    "STAR_CLASSES",
    "SpectralClass",
    "StarClassProfile",
    "select_star_class",
]
