"""Primary and companion star generation."""
from __future__ import annotations

from orrery.catalog.stars import (
    SECONDARY_CLASSES,
    STAR_CLASSES,
    SpectralClass,
    select_star_class,
)
from orrery.core.rng import SeededRandom
from orrery.generation.models import SecondaryStar, Star
from orrery.generation.names import generate_name
from orrery.math import physics

FLARE_INTERVAL = (2000.0, 8000.0)


def generate_star(rng: SeededRandom) -> Star:
    spectral = select_star_class(rng)
    profile = STAR_CLASSES[spectral]

    temperature = rng.range(*profile.temperature)
    radius = rng.range(*profile.radius)
    mass = rng.range(*profile.mass)
    luminosity = rng.range(*profile.luminosity)
    hz_inner, hz_outer = physics.habitable_zone(luminosity)

    return Star(
        spectral_class=spectral,
        name=f"{generate_name(rng)} Star",
        full_name=profile.name,
        color=profile.color,
        temperature=round(temperature),
        radius=radius,
        mass=mass,
        luminosity=luminosity,
        habitable_zone_inner=hz_inner,
        habitable_zone_outer=hz_outer,
        frost_line=physics.frost_line(luminosity),
        inner_limit=physics.inner_limit(mass, radius),
        next_flare=rng.range(*FLARE_INTERVAL),
    )


def generate_secondary_star(rng: SeededRandom, primary: Star) -> SecondaryStar:
    """Companion drawn from K/M/G/F classes lighter than the primary.

    Only the class ceiling is compared with the primary's mass; when no class
    qualifies the companion is an M dwarf regardless.
    """

    candidates = [
        spectral for spectral in SECONDARY_CLASSES
        if STAR_CLASSES[spectral].mass_max < primary.mass
    ]
    spectral = rng.choice(candidates) or SpectralClass.M
    profile = STAR_CLASSES[spectral]

    temperature = rng.range(*profile.temperature)
    radius = rng.range(*profile.radius)
    mass = rng.range(profile.mass[0], min(profile.mass_max, primary.mass * 0.8))
    luminosity = rng.range(*profile.luminosity)

    return SecondaryStar(
        spectral_class=spectral,
        name=f"{generate_name(rng)} B",
        full_name=profile.name,
        color=profile.color,
        temperature=round(temperature),
        radius=radius,
        mass=mass,
        luminosity=luminosity,
        orbit_radius=rng.range(30.0, 60.0),
        orbital_period=rng.range(50.0, 200.0),
        angle=rng.range(0.0, physics.TWO_PI),
    )


__all__ = ["FLARE_INTERVAL", "generate_secondary_star", "generate_star"]
