"""Pure position queries: orbital elements plus a time value in, world coordinates out.

``time`` is simulation time, which already carries the time scale.  Nothing here
mutates an entity, so sampling the same time twice gives the same answer.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from pygame.math import Vector2

from orrery.generation.models import (
    BeltBody,
    Comet,
    InterstellarObject,
    Moon,
    PassingPlanet,
    Planet,
    SecondaryStar,
    Trojan,
)
from orrery.math import physics
from orrery.math.physics import AU, TWO_PI

PLANET_RATE = 0.005
MOON_RATE = 0.003
SECONDARY_RATE = 0.002
COMET_RATE = 0.001
BELT_RATE = 0.005
LAGRANGE_OFFSET = math.pi / 3.0


@dataclass
class OrbitSample:
    position: Vector2
    angle: float


@dataclass
class CometSample:
    position: Vector2
    angle: float
    distance: float


@dataclass
class InterstellarSample:
    """Position in display units; ``distance_au`` is the heliocentric range."""

    position: Vector2
    angle: float
    true_anomaly: float
    distance_au: float


def _orbit_angle(angle0: float, rate: float, time: float, period: float) -> float:
    return angle0 + time * rate / period * TWO_PI


def _polar(angle: float, radius: float) -> Vector2:
    return Vector2(math.cos(angle) * radius, math.sin(angle) * radius)


def planet_angle(planet: Planet, time: float) -> float:
    return _orbit_angle(planet.angle, PLANET_RATE, time, planet.orbital_period)


def planet_position(planet: Planet, time: float) -> OrbitSample:
    angle = planet_angle(planet, time)
    radius = planet.orbit_radius * (1.0 - planet.eccentricity * math.cos(angle))
    return OrbitSample(_polar(angle, radius), angle)


def moon_position(moon: Moon, parent: Vector2, time: float) -> OrbitSample:
    """Moon around ``parent``; the display orbit is relative to the planet."""

    angle = _orbit_angle(moon.angle, MOON_RATE, time, moon.orbital_period)
    radius = moon.orbit_radius * (1.0 - moon.eccentricity * math.cos(angle))
    return OrbitSample(parent + _polar(angle, radius), angle)


def secondary_star_position(star: SecondaryStar, time: float) -> OrbitSample:
    angle = _orbit_angle(star.angle, SECONDARY_RATE, time, star.orbital_period)
    return OrbitSample(_polar(angle, star.orbit_radius), angle)


def comet_position(comet: Comet, time: float) -> CometSample:
    angle = _orbit_angle(comet.angle, COMET_RATE, time, comet.orbital_period)
    e = comet.eccentricity
    radius = comet.semi_major_axis * (1.0 - e * e) / (1.0 + e * math.cos(angle))
    x = math.cos(angle) * radius
    y = math.sin(angle) * radius * math.cos(comet.inclination)
    position = Vector2(x, y)
    return CometSample(position, angle, position.length())


def tail_intensity(comet: Comet, distance: float) -> float:
    """0 outside the activation radius, rising to 1 at the star."""

    if comet.tail_activation_radius <= 0:
        return 0.0
    return max(0.0, 1.0 - distance / comet.tail_activation_radius)


def belt_body_position(body: BeltBody, time: float) -> OrbitSample:
    angle = _orbit_angle(body.angle, BELT_RATE, time, body.orbital_period)
    radius = body.radius * (1.0 - body.eccentricity * math.cos(angle))
    return OrbitSample(_polar(angle, radius), angle)


def trojan_position(trojan: Trojan, planet: Planet, time: float) -> Vector2:
    lead = LAGRANGE_OFFSET if trojan.lagrange_point == 4 else -LAGRANGE_OFFSET
    angle = planet_angle(planet, time) + lead + trojan.offset_angle
    return _polar(angle, planet.orbit_radius + trojan.offset_radius)


def interstellar_position(obj: InterstellarObject, time: float) -> InterstellarSample:
    """Sample a visitor's hyperbola ``time - spawn_time`` after it appeared."""

    orbit = obj.orbit
    elapsed = time - obj.spawn_time
    mean_anomaly = orbit.mean_anomaly + orbit.mean_motion * elapsed
    eccentric = physics.eccentric_anomaly_from_mean(mean_anomaly, orbit.eccentricity)
    true_anomaly = physics.true_anomaly_from_eccentric(eccentric, orbit.eccentricity)
    x, y, r, angle = physics.hyperbolic_position(
        orbit.semi_major_axis, orbit.eccentricity, true_anomaly, orbit.perihelion_angle
    )
    y *= math.cos(orbit.inclination)
    return InterstellarSample(Vector2(x * AU, y * AU), angle, true_anomaly, r)


def passing_planet_position(planet: PassingPlanet, center: Vector2, time: float) -> Vector2:
    angle = planet.angle + planet.orbit_speed * time
    return center + _polar(angle, planet.orbit_radius_local)


__all__ = [
    "CometSample",
    "InterstellarSample",
    "OrbitSample",
    "belt_body_position",
    "comet_position",
    "interstellar_position",
    "moon_position",
    "passing_planet_position",
    "planet_angle",
    "planet_position",
    "secondary_star_position",
    "tail_intensity",
    "trojan_position",
]
