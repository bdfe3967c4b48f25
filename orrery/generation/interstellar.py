"""Visitors on hyperbolic trajectories: comets, rogue planets, black holes and passing systems.

Each visitor is seeded so that its first position query puts it at the drawn
spawn distance on the inbound leg.  The starting true anomaly comes from the
conic equation at that distance and is carried back to a mean anomaly through
the hyperbolic eccentric anomaly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from orrery.catalog import interstellar as catalog
from orrery.catalog.interstellar import (
    INTERSTELLAR_TYPES,
    InterstellarKind,
    InterstellarProfile,
    ROGUE_SUBTYPES,
    select_rogue_subtype,
)
from orrery.core.rng import SeededRandom
from orrery.generation.models import (
    HyperbolicOrbit,
    InterstellarCometBody,
    InterstellarObject,
    PassingPlanet,
    PassingStar,
    PassingSystemBody,
    RogueBlackHoleBody,
    RoguePlanetBody,
    Star,
)
from orrery.generation.names import generate_name
from orrery.math import physics
from orrery.math.physics import AU, TWO_PI


@dataclass(frozen=True)
class Approach:
    """Shape of an inbound hyperbola, distances in AU."""

    spawn_distance: float
    perihelion: float
    eccentricity: float
    perihelion_angle: float

    @property
    def semi_major_axis(self) -> float:
        return -self.perihelion / (self.eccentricity - 1.0)


def draw_approach(rng: SeededRandom, profile: InterstellarProfile) -> Approach:
    spawn_distance = rng.range(*profile.spawn_distance)
    perihelion = rng.range(*profile.perihelion)
    velocity_factor = rng.range(*profile.velocity)
    eccentricity = (
        1.0
        + velocity_factor * profile.eccentricity_scale
        + rng.range(*profile.eccentricity_jitter)
    )
    return Approach(
        spawn_distance=spawn_distance,
        perihelion=perihelion,
        eccentricity=eccentricity,
        perihelion_angle=rng.range(0.0, TWO_PI),
    )


def build_orbit(
    approach: Approach,
    star: Star,
    profile: InterstellarProfile,
    inclination: float,
) -> HyperbolicOrbit:
    a = approach.semi_major_axis
    e = approach.eccentricity
    true_anomaly = physics.true_anomaly_at_distance(a, e, approach.spawn_distance)
    eccentric = physics.eccentric_anomaly_from_true(true_anomaly, e)
    return HyperbolicOrbit(
        semi_major_axis=a,
        eccentricity=e,
        perihelion=physics.hyperbolic_perihelion(a, e),
        perihelion_angle=approach.perihelion_angle,
        inclination=inclination,
        mean_anomaly=physics.mean_anomaly_from_eccentric(eccentric, e),
        true_anomaly=true_anomaly,
        mean_motion=physics.hyperbolic_mean_motion(a, star.mass) * profile.mean_motion_scale,
        spawn_distance=approach.spawn_distance,
    )


def generate_interstellar_comet(
    rng: SeededRandom, star: Star, object_id: int, time: float = 0.0
) -> InterstellarObject:
    profile = INTERSTELLAR_TYPES[InterstellarKind.COMET]
    approach = draw_approach(rng, profile)
    name = f"I/{generate_name(rng)}"
    size = rng.range(*catalog.COMET_SIZE)
    color = rng.choice(catalog.COMET_COLORS)
    orbit = build_orbit(approach, star, profile, rng.range(-0.4, 0.4))
    body = InterstellarCometBody(
        size=size,
        color=color,
        tail_color=catalog.COMET_TAIL_COLOR,
        dust_color=catalog.COMET_DUST_COLOR,
        tail_activation_radius=catalog.COMET_TAIL_ACTIVATION_AU * star.luminosity ** 0.5 * AU,
        volatility=rng.range(0.8, 1.2),
        tail_brightness=rng.range(0.7, 1.3),
    )
    return InterstellarObject(
        id=object_id,
        kind=InterstellarKind.COMET,
        type_name=profile.name,
        name=name,
        orbit=orbit,
        body=body,
        spawn_time=time,
    )


def generate_rogue_planet(
    rng: SeededRandom, star: Star, object_id: int, time: float = 0.0
) -> InterstellarObject:
    profile = INTERSTELLAR_TYPES[InterstellarKind.ROGUE_PLANET]
    subtype = select_rogue_subtype(rng)
    sub = ROGUE_SUBTYPES[subtype]
    approach = draw_approach(rng, profile)
    size = rng.range(*catalog.ROGUE_PLANET_SIZE)
    name = f"Rogue-{generate_name(rng)}"
    color = rng.choice(sub.colors)
    orbit = build_orbit(approach, star, profile, rng.range(-0.3, 0.3))
    body = RoguePlanetBody(
        subtype=subtype,
        subtype_name=sub.name,
        size=size,
        visual_radius=max(4.0, size ** 0.5 * 3.0),
        color=color,
        mass=size * sub.mass_per_size,
        has_bands=sub.has_bands,
        band_count=rng.int_range(*sub.band_count),
    )
    return InterstellarObject(
        id=object_id,
        kind=InterstellarKind.ROGUE_PLANET,
        type_name=profile.name,
        name=name,
        orbit=orbit,
        body=body,
        spawn_time=time,
    )


def generate_rogue_black_hole(
    rng: SeededRandom, star: Star, object_id: int, time: float = 0.0
) -> InterstellarObject:
    profile = INTERSTELLAR_TYPES[InterstellarKind.ROGUE_BLACK_HOLE]
    approach = draw_approach(rng, profile)
    mass = rng.range(*catalog.BLACK_HOLE_MASS)
    name = f"BH-{rng.int_range(1000, 9999)}"
    orbit = build_orbit(approach, star, profile, rng.range(-0.2, 0.2))
    body = RogueBlackHoleBody(
        mass=mass,
        visual_radius=catalog.black_hole_visual_radius(mass),
        has_accretion_disk=rng.next() < catalog.BLACK_HOLE_DISK_CHANCE,
        disk_color=rng.choice(catalog.BLACK_HOLE_DISK_COLORS),
    )
    return InterstellarObject(
        id=object_id,
        kind=InterstellarKind.ROGUE_BLACK_HOLE,
        type_name=profile.name,
        name=name,
        orbit=orbit,
        body=body,
        spawn_time=time,
    )


def generate_passing_system(
    rng: SeededRandom, star: Star, object_id: int, time: float = 0.0
) -> InterstellarObject:
    profile = INTERSTELLAR_TYPES[InterstellarKind.PASSING_SYSTEM]
    approach = draw_approach(rng, profile)
    spectral = rng.choice(catalog.PASSING_STAR_CLASSES)
    star_profile = catalog.PASSING_STARS[spectral]

    planets = []
    orbit_au = 0.3
    for index in range(rng.int_range(*catalog.PASSING_PLANET_COUNT)):
        orbit_au *= rng.range(1.5, 2.5)
        planets.append(
            PassingPlanet(
                index=index,
                orbit_radius_local=orbit_au * AU * catalog.PASSING_ORBIT_SCALE,
                angle=rng.range(0.0, TWO_PI),
                orbit_speed=0.01 / orbit_au ** 0.5,
                size=rng.range(2.0, 6.0),
                color=rng.choice(catalog.PASSING_PLANET_COLORS),
            )
        )

    name = f"{generate_name(rng)} System"
    passing_star = PassingStar(
        name=generate_name(rng),
        spectral_class=spectral,
        color=star_profile.color,
        temperature=star_profile.temperature,
        mass=star_profile.mass,
        radius=star_profile.radius,
        visual_radius=star_profile.visual_radius,
    )
    orbit = build_orbit(approach, star, profile, rng.range(-0.15, 0.15))
    return InterstellarObject(
        id=object_id,
        kind=InterstellarKind.PASSING_SYSTEM,
        type_name=profile.name,
        name=name,
        orbit=orbit,
        body=PassingSystemBody(star=passing_star, planets=planets),
        spawn_time=time,
    )


Generator = Callable[[SeededRandom, Star, int, float], InterstellarObject]

GENERATORS: Dict[InterstellarKind, Generator] = {
    InterstellarKind.COMET: generate_interstellar_comet,
    InterstellarKind.ROGUE_PLANET: generate_rogue_planet,
    InterstellarKind.ROGUE_BLACK_HOLE: generate_rogue_black_hole,
    InterstellarKind.PASSING_SYSTEM: generate_passing_system,
}


def generate_interstellar(
    rng: SeededRandom,
    kind: InterstellarKind,
    star: Star,
    object_id: int,
    time: float = 0.0,
) -> InterstellarObject:
    return GENERATORS[kind](rng, star, object_id, time)


__all__ = [
    "Approach",
    "GENERATORS",
    "build_orbit",
    "draw_approach",
    "generate_interstellar",
    "generate_interstellar_comet",
    "generate_passing_system",
    "generate_rogue_black_hole",
    "generate_rogue_planet",
]
