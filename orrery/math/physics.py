"""Orbital physics helpers in normalised units.

Distances are in AU, stellar masses in solar masses, planet masses in Earth
masses and periods in days, so that Earth's year is 365 time units.  Display
coordinates use ``AU`` internal units per astronomical unit.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

AU = 200.0
EARTH_MASSES_PER_SOLAR_MASS = 333000.0
DAYS_PER_YEAR = 365.0
STABLE_MUTUAL_HILL_RADII = 10.0
TWO_PI = 2.0 * math.pi

# (period ratio, half-width as a fraction of the planet's orbit)
RESONANCES: Tuple[Tuple[float, float], ...] = (
    (4.0 / 1.0, 0.02),
    (3.0 / 1.0, 0.03),
    (5.0 / 2.0, 0.02),
    (7.0 / 3.0, 0.015),
    (2.0 / 1.0, 0.04),
)

NEWTON_ITERATIONS = 10
_ATANH_LIMIT = 1.0 - 1e-12
_MIN_CONIC_DENOMINATOR = 1e-12


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def orbital_period(semi_major_axis_au: float, star_mass: float) -> float:
    """Kepler's third law, period in days."""

    return math.sqrt(semi_major_axis_au ** 3 / star_mass) * DAYS_PER_YEAR


def orbital_velocity(distance_au: float, star_mass: float) -> float:
    return math.sqrt(star_mass / distance_au)


def hill_sphere(orbit_au: float, planet_mass_earth: float, star_mass: float) -> float:
    mass_ratio = planet_mass_earth / EARTH_MASSES_PER_SOLAR_MASS
    return orbit_au * (mass_ratio / (3.0 * star_mass)) ** (1.0 / 3.0)


def min_planet_separation(
    orbit_a_au: float,
    mass_a_earth: float,
    orbit_b_au: float,
    mass_b_earth: float,
    star_mass: float,
) -> float:
    """Separation needed for ten mutual Hill radii between two planets."""

    hill_a = hill_sphere(orbit_a_au, mass_a_earth, star_mass)
    hill_b = hill_sphere(orbit_b_au, mass_b_earth, star_mass)
    return (hill_a + hill_b) / 2.0 * STABLE_MUTUAL_HILL_RADII


def frost_line(luminosity: float) -> float:
    return 2.7 * math.sqrt(luminosity)


def inner_limit(star_mass: float, star_radius: float) -> float:
    return max(0.02, star_radius * 0.01)


def habitable_zone(luminosity: float) -> Tuple[float, float]:
    return math.sqrt(luminosity / 1.1), math.sqrt(luminosity / 0.53)


def escape_velocity(mass_earth: float, radius_earth: float) -> float:
    """Escape velocity relative to Earth's."""

    return math.sqrt(mass_earth / radius_earth)


def surface_gravity(mass_earth: float, radius_earth: float) -> float:
    return mass_earth / (radius_earth * radius_earth)


def equilibrium_temperature(
    star_temperature: float,
    star_radius: float,
    orbit_au: float,
    albedo: float,
) -> int:
    """Stefan-Boltzmann estimate; 215 solar radii per AU."""

    kelvin = (
        star_temperature
        * math.sqrt(star_radius / (2.0 * orbit_au * 215.0))
        * (1.0 - albedo) ** 0.25
    )
    return int(round(kelvin))


@dataclass(frozen=True)
class ResonanceGap:
    distance: float
    width: float

    def contains(self, radius_au: float) -> bool:
        return abs(radius_au - self.distance) < self.width


def resonance_gaps(planet_orbit_au: float) -> List[ResonanceGap]:
    """Mean-motion resonance bands, ``a = a_planet * ratio^(2/3)``."""

    return [
        ResonanceGap(
            distance=planet_orbit_au * ratio ** (2.0 / 3.0),
            width=planet_orbit_au * width,
        )
        for ratio, width in RESONANCES
    ]


# ---------------------------------------------------------------------------
# Hyperbolic trajectories (eccentricity > 1, negative semi-major axis)
# ---------------------------------------------------------------------------


def hyperbolic_perihelion(semi_major_axis: float, eccentricity: float) -> float:
    return abs(semi_major_axis) * (eccentricity - 1.0)


def velocity_at_infinity(semi_major_axis: float, star_mass: float) -> float:
    return math.sqrt(star_mass / abs(semi_major_axis))


def asymptote_angle(eccentricity: float) -> float:
    return math.acos(clamp(-1.0 / eccentricity, -1.0, 1.0))


def conic_radius(semi_major_axis: float, eccentricity: float, true_anomaly: float) -> float:
    semi_latus = abs(semi_major_axis) * (eccentricity * eccentricity - 1.0)
    denominator = max(1.0 + eccentricity * math.cos(true_anomaly), _MIN_CONIC_DENOMINATOR)
    return semi_latus / denominator


def hyperbolic_position(
    semi_major_axis: float,
    eccentricity: float,
    true_anomaly: float,
    perihelion_angle: float,
) -> Tuple[float, float, float, float]:
    """Return ``(x, y, r, angle)`` in the units of ``semi_major_axis``."""

    r = conic_radius(semi_major_axis, eccentricity, true_anomaly)
    angle = true_anomaly + perihelion_angle
    return r * math.cos(angle), r * math.sin(angle), r, angle


def hyperbolic_mean_motion(semi_major_axis: float, star_mass: float) -> float:
    a = abs(semi_major_axis)
    return math.sqrt(star_mass / (a * a * a))


def eccentric_anomaly_from_mean(
    mean_anomaly: float,
    eccentricity: float,
    iterations: int = NEWTON_ITERATIONS,
) -> float:
    """Solve ``M = e*sinh(H) - H`` with a fixed number of Newton steps."""

    # asinh(M/e) sits within a few percent of the root even for large |M|,
    # so a fixed iteration count converges without sinh overflow.
    anomaly = math.asinh(mean_anomaly / eccentricity)
    for _ in range(iterations):
        residual = eccentricity * math.sinh(anomaly) - anomaly - mean_anomaly
        slope = eccentricity * math.cosh(anomaly) - 1.0
        anomaly -= residual / slope
    return anomaly


def true_anomaly_from_eccentric(eccentric_anomaly: float, eccentricity: float) -> float:
    half_tan = math.sqrt((eccentricity + 1.0) / (eccentricity - 1.0)) * math.tanh(eccentric_anomaly / 2.0)
    return 2.0 * math.atan(half_tan)


def eccentric_anomaly_from_true(true_anomaly: float, eccentricity: float) -> float:
    argument = math.sqrt((eccentricity - 1.0) / (eccentricity + 1.0)) * math.tan(true_anomaly / 2.0)
    return 2.0 * math.atanh(clamp(argument, -_ATANH_LIMIT, _ATANH_LIMIT))


def mean_anomaly_from_eccentric(eccentric_anomaly: float, eccentricity: float) -> float:
    return eccentricity * math.sinh(eccentric_anomaly) - eccentric_anomaly


def true_anomaly_at_distance(semi_major_axis: float, eccentricity: float, distance: float) -> float:
    """Inbound (negative) true anomaly at which the conic reaches ``distance``."""

    semi_latus = abs(semi_major_axis) * (eccentricity * eccentricity - 1.0)
    cos_theta = (semi_latus / distance - 1.0) / eccentricity
    return -math.acos(clamp(cos_theta, -1.0, 1.0))


__all__ = [
    "AU",
    "DAYS_PER_YEAR",
    "EARTH_MASSES_PER_SOLAR_MASS",
    "NEWTON_ITERATIONS",
    "RESONANCES",
    "STABLE_MUTUAL_HILL_RADII",
    "TWO_PI",
    "ResonanceGap",
    "asymptote_angle",
    "clamp",
    "conic_radius",
    "eccentric_anomaly_from_mean",
    "eccentric_anomaly_from_true",
    "equilibrium_temperature",
    "escape_velocity",
    "frost_line",
    "habitable_zone",
    "hill_sphere",
    "hyperbolic_mean_motion",
    "hyperbolic_perihelion",
    "hyperbolic_position",
    "inner_limit",
    "mean_anomaly_from_eccentric",
    "min_planet_separation",
    "orbital_period",
    "orbital_velocity",
    "resonance_gaps",
    "surface_gravity",
    "true_anomaly_at_distance",
    "true_anomaly_from_eccentric",
    "velocity_at_infinity",
]
