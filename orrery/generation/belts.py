"""Asteroid belt gap scoring and Kuiper belt placement."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from orrery.catalog.planets import GIANT_TYPES, ROCKY_FAMILY
from orrery.core.rng import SeededRandom
from orrery.engine.logger import ChannelLogger
from orrery.generation.models import Belt, BeltBody, BeltKind, Planet, Star
from orrery.math import physics
from orrery.math.physics import TWO_PI

MIN_GAP_WIDTH = 0.3
GAP_HILL_MARGIN = 3.0
RESONANCE_NUDGE = 1.5

ASTEROID_COUNT = (150, 400)
ASTEROID_COLORS = ("#666", "#777", "#888", "#999", "#aaa")
KUIPER_COUNT = (200, 500)
KUIPER_COLORS = ("#556", "#667", "#778", "#889")


@dataclass(frozen=True)
class BeltGap:
    inner_au: float
    outer_au: float
    score: float

    @property
    def width(self) -> float:
        return self.outer_au - self.inner_au


def score_gap(inner: Planet, outer: Planet, star: Star) -> Optional[BeltGap]:
    """Score the space between two neighbours, ``None`` if it is too narrow."""

    gap_inner = inner.orbit_radius_au + inner.hill_sphere * GAP_HILL_MARGIN
    gap_outer = outer.orbit_radius_au - outer.hill_sphere * GAP_HILL_MARGIN
    width = gap_outer - gap_inner
    if width < MIN_GAP_WIDTH:
        return None

    score = width
    middle = (gap_inner + gap_outer) / 2.0
    score += max(0.0, 2.0 - abs(middle - star.frost_line))
    if inner.planet_type in ROCKY_FAMILY and outer.planet_type in GIANT_TYPES:
        score += 2.0
    return BeltGap(gap_inner, gap_outer, score)


def best_gap(planets: Sequence[Planet], star: Star) -> Optional[BeltGap]:
    best: Optional[BeltGap] = None
    for inner, outer in zip(planets, planets[1:]):
        gap = score_gap(inner, outer, star)
        if gap is None:
            continue
        if gap.score > (best.score if best else 0.0):
            best = gap
    return best


def _shepherd_gaps(planets: Sequence[Planet], gap: BeltGap) -> List[physics.ResonanceGap]:
    # The first planet past the gap shapes it, unless that is the innermost planet.
    for index, planet in enumerate(planets):
        if planet.orbit_radius_au > gap.outer_au:
            return physics.resonance_gaps(planet.orbit_radius_au) if index > 0 else []
    return []


def place_belt_radius(
    rng: SeededRandom,
    gap: BeltGap,
    resonances: Sequence[physics.ResonanceGap],
) -> float:
    """Draw a radius in ``gap``, pushed out of the first resonance band it lands in.

    The push is 1.5 band widths either way and happens before the clamp, so a
    body pushed past an edge of the gap ends exactly on that edge.
    """

    radius_au = rng.range(gap.inner_au, gap.outer_au)
    for resonance in resonances:
        if resonance.contains(radius_au):
            direction = -1.0 if rng.next() < 0.5 else 1.0
            radius_au += direction * resonance.width * RESONANCE_NUDGE
            break
    return physics.clamp(radius_au, gap.inner_au, gap.outer_au)


def generate_asteroid_belt(
    rng: SeededRandom,
    star: Star,
    planets: Sequence[Planet],
    log: Optional[ChannelLogger] = None,
) -> Optional[Belt]:
    """Fill the best-scoring gap, or return ``None`` when there is none."""

    if len(planets) < 2:
        return None
    gap = best_gap(planets, star)
    if gap is None:
        return None

    resonances = _shepherd_gaps(planets, gap)
    count = rng.int_range(*ASTEROID_COUNT)
    bodies: List[BeltBody] = []
    for _ in range(count):
        radius_au = place_belt_radius(rng, gap, resonances)
        bodies.append(
            BeltBody(
                angle=rng.range(0.0, TWO_PI),
                radius_au=radius_au,
                eccentricity=rng.range(0.0, 0.15),
                size=rng.range(0.5, 2.0),
                orbital_period=physics.orbital_period(radius_au, star.mass),
                color=rng.choice(ASTEROID_COLORS),
            )
        )

    if log is not None:
        log.debug(
            "Asteroid belt %.2f-%.2f AU (score %.2f, %d bodies)",
            gap.inner_au,
            gap.outer_au,
            gap.score,
            count,
        )
    return Belt(BeltKind.ASTEROID, gap.inner_au, gap.outer_au, bodies)


def generate_kuiper_belt(rng: SeededRandom, star: Star, last_orbit_au: float) -> Belt:
    inner_au = last_orbit_au * 1.3 + rng.range(2.0, 5.0)
    outer_au = inner_au + rng.range(10.0, 20.0)
    count = rng.int_range(*KUIPER_COUNT)
    bodies: List[BeltBody] = []
    for _ in range(count):
        radius_au = rng.range(inner_au, outer_au)
        bodies.append(
            BeltBody(
                angle=rng.range(0.0, TWO_PI),
                radius_au=radius_au,
                eccentricity=rng.range(0.0, 0.25),
                inclination=rng.range(0.0, 0.3),
                size=rng.range(0.3, 1.5),
                orbital_period=physics.orbital_period(radius_au, star.mass),
                color=rng.choice(KUIPER_COLORS),
            )
        )
    return Belt(BeltKind.KUIPER, inner_au, outer_au, bodies)


__all__ = [
    "BeltGap",
    "best_gap",
    "generate_asteroid_belt",
    "generate_kuiper_belt",
    "place_belt_radius",
    "score_gap",
]
