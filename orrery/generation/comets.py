"""Bound comets on long ellipses."""
from __future__ import annotations

import math

from orrery.catalog.comets import ALL_COMET_TYPES, BASE_TAIL_ACTIVATION_AU, COMET_TYPES, CometType
from orrery.core.rng import SeededRandom
from orrery.generation.models import Comet, Star
from orrery.math.physics import AU, TWO_PI

# Display units.
PERIHELION_RANGE = (30.0, 100.0)
APHELION_RANGE = (400.0, 1000.0)


def tail_activation_radius(star: Star, comet_type: CometType) -> float:
    """Display distance inside which the tail is drawn."""

    base = BASE_TAIL_ACTIVATION_AU * math.sqrt(star.luminosity)
    return base * COMET_TYPES[comet_type].volatility * AU


def generate_comet(rng: SeededRandom, star: Star) -> Comet:
    perihelion = rng.range(*PERIHELION_RANGE)
    aphelion = rng.range(*APHELION_RANGE)
    comet_type = rng.choice(ALL_COMET_TYPES)
    profile = COMET_TYPES[comet_type]

    return Comet(
        perihelion=perihelion,
        aphelion=aphelion,
        semi_major_axis=(perihelion + aphelion) / 2.0,
        eccentricity=(aphelion - perihelion) / (aphelion + perihelion),
        angle=rng.range(0.0, TWO_PI),
        orbital_period=rng.range(100.0, 500.0),
        inclination=rng.range(-0.3, 0.3),
        size=rng.range(1.0, 3.0),
        comet_type=comet_type,
        type_name=profile.name,
        color=profile.color,
        tail_color=profile.tail_color,
        dust_color=profile.dust_color,
        volatility=profile.volatility,
        tail_brightness=profile.tail_brightness,
        tail_activation_radius=tail_activation_radius(star, comet_type),
    )


__all__ = ["APHELION_RANGE", "PERIHELION_RANGE", "generate_comet", "tail_activation_radius"]
