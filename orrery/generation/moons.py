"""Moon generation inside a planet's Hill sphere."""
from __future__ import annotations

import math
from dataclasses import replace
from typing import List

from orrery.catalog.moons import ALL_MOON_TYPES, MOON_TYPES, MoonType
from orrery.catalog.planets import PlanetType
from orrery.core.rng import SeededRandom
from orrery.generation.models import Moon, Planet
from orrery.generation.names import moon_name
from orrery.math.physics import EARTH_MASSES_PER_SOLAR_MASS, TWO_PI

MOON_MASS = (0.0001, 0.01)
HILL_FRACTION = (0.02, 0.4)
MOON_SLOTS = 8
MIN_MOON_PERIOD = 5.0
MOON_PERIOD_SCALE = 10.0


def choose_moon_type(rng: SeededRandom, planet: Planet) -> MoonType:
    if planet.planet_type in (PlanetType.ICE_GIANT, PlanetType.ICE_WORLD):
        return MoonType.ICY if rng.next() < 0.7 else rng.choice(ALL_MOON_TYPES)
    if planet.planet_type is PlanetType.LAVA_WORLD:
        return MoonType.VOLCANIC if rng.next() < 0.5 else MoonType.ROCKY
    if planet.beyond_frost_line:
        return MoonType.ICY if rng.next() < 0.5 else rng.choice(ALL_MOON_TYPES)
    return rng.choice(ALL_MOON_TYPES)


def moon_orbit_au(hill_sphere: float, index: int) -> float:
    """Interpolate from 2% to 40% of the Hill sphere by slot; never beyond 40%."""

    low, high = HILL_FRACTION
    fraction = min(1.0, (index + 1) / MOON_SLOTS)
    return hill_sphere * (low + (high - low) * fraction)


def moon_period(orbit_au: float, planet_mass: float) -> float:
    planet_mass_solar = planet_mass / EARTH_MASSES_PER_SOLAR_MASS
    return max(MIN_MOON_PERIOD, math.sqrt(orbit_au ** 3 / planet_mass_solar) * MOON_PERIOD_SCALE)


def moon_display_radius(planet: Planet, index: int) -> float:
    return planet.visual_radius + 15.0 + index * 12.0


def generate_moon(rng: SeededRandom, planet: Planet, index: int) -> Moon:
    moon_type = choose_moon_type(rng, planet)
    profile = MOON_TYPES[moon_type]
    mass = rng.range(*MOON_MASS)
    orbit_au = moon_orbit_au(planet.hill_sphere, index)

    return Moon(
        index=index,
        name=moon_name(planet.name, index),
        moon_type=moon_type,
        type_name=profile.name,
        color=rng.choice(profile.colors),
        mass=mass,
        radius=rng.range(0.1, 0.4),
        visual_radius=rng.range(2.0, 5.0),
        orbit_radius=moon_display_radius(planet, index),
        orbit_radius_au=orbit_au,
        orbital_period=moon_period(orbit_au, planet.mass),
        angle=rng.range(0.0, TWO_PI),
        eccentricity=rng.range(0.0, 0.1),
    )


def rescale_moons(moons: List[Moon], hill_sphere: float, planet_mass: float) -> List[Moon]:
    """Copies of ``moons`` with AU radii and periods for a new Hill sphere."""

    rescaled = []
    for moon in moons:
        orbit_au = moon_orbit_au(hill_sphere, moon.index)
        rescaled.append(
            replace(moon, orbit_radius_au=orbit_au, orbital_period=moon_period(orbit_au, planet_mass))
        )
    return rescaled


__all__ = [
    "HILL_FRACTION",
    "choose_moon_type",
    "generate_moon",
    "moon_display_radius",
    "moon_orbit_au",
    "moon_period",
    "rescale_moons",
]
