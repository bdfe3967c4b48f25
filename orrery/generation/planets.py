"""Planet generation: type, physics, surface, moons, trojans and spacing repair."""
from __future__ import annotations

import math
from dataclasses import replace
from typing import List, Optional

from orrery.catalog.archetypes import Archetype
from orrery.catalog.comets import RGB
from orrery.catalog.planets import (
    GIANT_TYPES,
    PLANET_TYPES,
    PlanetType,
    PlanetTypeProfile,
    albedo_for,
    planet_type_for_distance,
)
from orrery.core.rng import SeededRandom
from orrery.generation.context import GenerationContext
from orrery.generation.models import Crater, Planet, Star, SurfaceDetails, Trojan
from orrery.generation.moons import generate_moon, rescale_moons
from orrery.generation.names import generate_name
from orrery.math import physics
from orrery.math.physics import TWO_PI

ICE_CAP_TYPES = (PlanetType.TERRESTRIAL, PlanetType.ROCKY, PlanetType.ICE_WORLD)
CRATERED_TYPES = (PlanetType.ROCKY, PlanetType.DWARF)
CLOUDY_TYPES = (PlanetType.TERRESTRIAL, PlanetType.OCEAN_WORLD)
ICE_CAP_MAX_TEMPERATURE = 300

TROJAN_MIN_MASS = 30.0
TROJAN_CHANCE = 0.6
TROJAN_COUNT = (15, 40)
TROJAN_COLORS = ("#666", "#777", "#888")

MAX_REPAIR_PASSES = 100


def max_eccentricity(orbit_au: float, star: Star) -> float:
    if orbit_au > star.frost_line * 5:
        return 0.3
    if orbit_au > star.frost_line:
        return 0.2
    return 0.1


def visual_radius_for(radius: float) -> float:
    return physics.clamp(4.0 + math.log(radius + 1.0) * 8.0, 4.0, 25.0)


def in_habitable_zone(orbit_au: float, star: Star) -> bool:
    return star.habitable_zone_inner <= orbit_au <= star.habitable_zone_outer


def planet_temperature(planet_type: PlanetType, orbit_au: float, star: Star) -> int:
    return physics.equilibrium_temperature(
        star.temperature, star.radius, orbit_au, albedo_for(planet_type)
    )


def ring_color(rng: SeededRandom) -> RGB:
    return (rng.int_range(150, 200), rng.int_range(150, 180), rng.int_range(130, 160))


def crater_count(rng: SeededRandom) -> int:
    return rng.int_range(3, 8)


def generate_craters(rng: SeededRandom, count: Optional[int] = None) -> List[Crater]:
    if count is None:
        count = crater_count(rng)
    return [
        Crater(
            angle=rng.range(0.0, TWO_PI),
            distance=rng.range(0.2, 0.7),
            size=rng.range(0.05, 0.15),
        )
        for _ in range(count)
    ]


def generate_surface(rng: SeededRandom, planet: Planet, profile: PlanetTypeProfile) -> SurfaceDetails:
    surface = SurfaceDetails()
    kind = planet.planet_type

    if kind in ICE_CAP_TYPES and planet.temperature < ICE_CAP_MAX_TEMPERATURE:
        surface.has_ice_caps = rng.next() < 0.6
        surface.ice_caps_size = rng.range(0.1, 0.3)

    if kind is PlanetType.GAS_GIANT and rng.next() < 0.4:
        surface.has_storm = True
        surface.storm_angle = rng.range(0.0, TWO_PI)
        surface.storm_size = rng.range(0.15, 0.35)

    if kind in CRATERED_TYPES:
        surface.craters = generate_craters(rng)

    if profile.has_bands or kind is PlanetType.GAS_GIANT:
        surface.band_count = rng.int_range(4, 12)

    if kind in CLOUDY_TYPES and planet.atmosphere != "None":
        surface.cloud_coverage = rng.range(0.1, 0.5)

    return surface


def generate_trojans(rng: SeededRandom) -> List[Trojan]:
    """L4/L5 swarm; the count is drawn first."""

    count = rng.int_range(*TROJAN_COUNT)
    return [
        Trojan(
            lagrange_point=4 if rng.next() < 0.5 else 5,
            offset_angle=rng.range(-0.12, 0.12),
            offset_radius=rng.range(-10.0, 10.0),
            size=rng.range(0.5, 1.5),
            color=rng.choice(TROJAN_COLORS),
        )
        for _ in range(count)
    ]


def generate_planet(
    context: GenerationContext,
    index: int,
    orbit_au: float,
    star: Star,
    archetype: Archetype,
    force_type: Optional[PlanetType] = None,
) -> Planet:
    rng = context.rng
    config = context.config
    planet_type = force_type or planet_type_for_distance(orbit_au, star, archetype, rng)
    profile = PLANET_TYPES[planet_type]

    mass = rng.range(*profile.mass)
    radius = rng.range(*profile.radius)
    eccentricity = rng.range(0.0, max_eccentricity(orbit_au, star))
    name = generate_name(rng)
    color = rng.choice(profile.colors)
    angle = rng.range(0.0, TWO_PI)
    rotation_speed = rng.range(0.001, 0.01)
    if rng.next() < profile.atmosphere_chance:
        atmosphere = rng.choice(profile.atmosphere_types)
    else:
        atmosphere = "None"
    has_rings = profile.has_rings and rng.next() < config.ring_chance

    planet = Planet(
        index=index,
        name=name,
        planet_type=planet_type,
        type_name=profile.name,
        color=color,
        radius=radius,
        mass=mass,
        orbit_radius_au=orbit_au,
        eccentricity=eccentricity,
        orbital_period=physics.orbital_period(orbit_au, star.mass),
        orbital_velocity=physics.orbital_velocity(orbit_au, star.mass),
        hill_sphere=physics.hill_sphere(orbit_au, mass, star.mass),
        angle=angle,
        rotation_speed=rotation_speed,
        atmosphere=atmosphere,
        composition=dict(profile.composition),
        has_rings=has_rings,
        has_bands=profile.has_bands,
        ring_color=ring_color(rng),
        visual_radius=visual_radius_for(radius),
        temperature=planet_temperature(planet_type, orbit_au, star),
        in_habitable_zone=in_habitable_zone(orbit_au, star),
        beyond_frost_line=orbit_au > star.frost_line,
        current_angle=angle,
    )
    planet.surface = generate_surface(rng, planet, profile)

    boost = 1.5 if planet.beyond_frost_line else 1.0
    if rng.next() < profile.moon_chance * boost:
        moon_count = rng.int_range(1, min(profile.max_moons, config.max_moons))
        planet.moons = [generate_moon(rng, planet, slot) for slot in range(moon_count)]

    if planet_type in GIANT_TYPES and mass > TROJAN_MIN_MASS and rng.next() < TROJAN_CHANCE:
        planet.trojans = generate_trojans(rng)

    return planet


def separation_ok(previous: Planet, candidate: Planet, star: Star) -> bool:
    required = physics.min_planet_separation(
        previous.orbit_radius_au,
        previous.mass,
        candidate.orbit_radius_au,
        candidate.mass,
        star.mass,
    )
    return candidate.orbit_radius_au - previous.orbit_radius_au >= required


def relocate(planet: Planet, orbit_au: float, star: Star) -> Planet:
    """Copy of ``planet`` at a new orbit with every orbit-derived field recomputed."""

    hill = physics.hill_sphere(orbit_au, planet.mass, star.mass)
    return replace(
        planet,
        orbit_radius_au=orbit_au,
        orbital_period=physics.orbital_period(orbit_au, star.mass),
        orbital_velocity=physics.orbital_velocity(orbit_au, star.mass),
        hill_sphere=hill,
        temperature=planet_temperature(planet.planet_type, orbit_au, star),
        in_habitable_zone=in_habitable_zone(orbit_au, star),
        beyond_frost_line=orbit_au > star.frost_line,
        moons=rescale_moons(planet.moons, hill, planet.mass),
    )


def repair_separation(previous: Planet, candidate: Planet, star: Star) -> Planet:
    """Return ``candidate`` pushed outward until it clears ten mutual Hill radii.

    Each pass moves it to ``previous + 1.2 * required`` for its current orbit.
    A heavy planet around a light star can still fall short after one pass
    because its own Hill sphere grows with the orbit, so passes repeat.
    """

    repaired = candidate
    for _ in range(MAX_REPAIR_PASSES):
        if separation_ok(previous, repaired, star):
            break
        required = physics.min_planet_separation(
            previous.orbit_radius_au,
            previous.mass,
            repaired.orbit_radius_au,
            repaired.mass,
            star.mass,
        )
        repaired = relocate(repaired, previous.orbit_radius_au + required * 1.2, star)
    if repaired is not candidate:
        repaired = replace(repaired, separation_repaired=True)
    return repaired


__all__ = [
    "MAX_REPAIR_PASSES",
    "crater_count",
    "generate_craters",
    "generate_planet",
    "generate_surface",
    "generate_trojans",
    "in_habitable_zone",
    "max_eccentricity",
    "planet_temperature",
    "relocate",
    "repair_separation",
    "ring_color",
    "separation_ok",
    "visual_radius_for",
]
