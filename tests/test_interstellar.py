"""Hyperbolic visitors and their generators."""
from __future__ import annotations

from dataclasses import replace

import pytest

from orrery.catalog.interstellar import INTERSTELLAR_TYPES, ROGUE_SUBTYPES, InterstellarKind
from orrery.catalog.stars import SpectralClass
from orrery.core.rng import SeededRandom
from orrery.generation.interstellar import GENERATORS, generate_interstellar
from orrery.generation.models import (
    InterstellarCometBody,
    PassingSystemBody,
    RogueBlackHoleBody,
    RoguePlanetBody,
    Star,
)
from orrery.math import physics
from orrery.world.positions import interstellar_position


def _sun() -> Star:
    inner, outer = physics.habitable_zone(1.0)
    return Star(
        spectral_class=SpectralClass.G,
        name="Test Star",
        full_name="G-Class (Yellow)",
        color="#fff4ea",
        temperature=5778,
        radius=1.0,
        mass=1.0,
        luminosity=1.0,
        habitable_zone_inner=inner,
        habitable_zone_outer=outer,
        frost_line=physics.frost_line(1.0),
        inner_limit=physics.inner_limit(1.0, 1.0),
    )


def test_every_kind_has_a_generator() -> None:
    assert set(GENERATORS) == set(InterstellarKind)


@pytest.mark.parametrize("kind", list(InterstellarKind))
@pytest.mark.parametrize("seed", [1, 2, 3, 17, 99])
def test_orbit_is_hyperbolic_and_inbound(kind: InterstellarKind, seed: int) -> None:
    obj = generate_interstellar(SeededRandom(seed), kind, _sun(), 1, time=0.0)
    orbit = obj.orbit
    profile = INTERSTELLAR_TYPES[kind]
    assert obj.kind is kind
    assert obj.type_name == profile.name
    assert orbit.eccentricity > 1.0
    assert orbit.semi_major_axis < 0.0
    assert orbit.true_anomaly < 0.0
    assert orbit.mean_anomaly < 0.0
    assert profile.perihelion[0] <= orbit.perihelion < profile.perihelion[1]
    low, high = profile.spawn_distance
    assert low <= orbit.spawn_distance < high


@pytest.mark.parametrize("kind", list(InterstellarKind))
@pytest.mark.parametrize("seed", [4, 5, 6])
def test_mean_anomaly_round_trip(kind: InterstellarKind, seed: int) -> None:
    obj = generate_interstellar(SeededRandom(seed), kind, _sun(), 1)
    orbit = obj.orbit
    eccentric = physics.eccentric_anomaly_from_mean(orbit.mean_anomaly, orbit.eccentricity)
    true_anomaly = physics.true_anomaly_from_eccentric(eccentric, orbit.eccentricity)
    assert true_anomaly == pytest.approx(orbit.true_anomaly, abs=1e-6)


@pytest.mark.parametrize("kind", list(InterstellarKind))
def test_first_sample_sits_at_spawn_distance(kind: InterstellarKind) -> None:
    obj = generate_interstellar(SeededRandom(12), kind, _sun(), 1, time=250.0)
    sample = interstellar_position(obj, 250.0)
    assert sample.distance_au == pytest.approx(obj.orbit.spawn_distance, rel=1e-6)
    assert sample.position.length() <= sample.distance_au * physics.AU * (1.0 + 1e-9)


def test_distance_grows_after_perihelion() -> None:
    obj = generate_interstellar(SeededRandom(21), InterstellarKind.COMET, _sun(), 1)
    orbit = obj.orbit
    perihelion_time = -orbit.mean_anomaly / orbit.mean_motion
    step = perihelion_time / 10.0
    previous = interstellar_position(obj, perihelion_time).distance_au
    assert previous == pytest.approx(orbit.perihelion, rel=1e-3)
    for index in range(1, 40):
        distance = interstellar_position(obj, perihelion_time + step * index).distance_au
        assert distance >= previous
        previous = distance


def test_position_depends_on_elapsed_time_only() -> None:
    obj = generate_interstellar(SeededRandom(8), InterstellarKind.ROGUE_PLANET, _sun(), 1)
    later = replace(obj, spawn_time=1000.0)
    first = interstellar_position(obj, 300.0)
    second = interstellar_position(later, 1300.0)
    assert first.distance_au == pytest.approx(second.distance_au)
    assert first.true_anomaly == pytest.approx(second.true_anomaly)


def test_bodies_match_kind() -> None:
    star = _sun()
    comet = generate_interstellar(SeededRandom(1), InterstellarKind.COMET, star, 1)
    assert isinstance(comet.body, InterstellarCometBody)
    assert comet.name.startswith("I/")

    rogue = generate_interstellar(SeededRandom(1), InterstellarKind.ROGUE_PLANET, star, 2)
    assert isinstance(rogue.body, RoguePlanetBody)
    assert rogue.body.subtype in ROGUE_SUBTYPES
    assert rogue.body.mass == pytest.approx(rogue.body.size * ROGUE_SUBTYPES[rogue.body.subtype].mass_per_size)
    assert rogue.name.startswith("Rogue-")

    hole = generate_interstellar(SeededRandom(1), InterstellarKind.ROGUE_BLACK_HOLE, star, 3)
    assert isinstance(hole.body, RogueBlackHoleBody)
    assert 3.0 <= hole.body.mass < 50.0
    assert hole.body.visual_radius == pytest.approx(max(3.0, hole.body.mass * 0.8))
    assert hole.name.startswith("BH-")

    passing = generate_interstellar(SeededRandom(1), InterstellarKind.PASSING_SYSTEM, star, 4)
    assert passing.is_passing_system
    assert isinstance(passing.body, PassingSystemBody)
    assert 1 <= len(passing.body.planets) <= 5
    assert passing.name.endswith(" System")
    radii = [planet.orbit_radius_local for planet in passing.body.planets]
    assert radii == sorted(radii)


def test_generation_is_deterministic() -> None:
    star = _sun()
    first = generate_interstellar(SeededRandom(31), InterstellarKind.PASSING_SYSTEM, star, 1)
    second = generate_interstellar(SeededRandom(31), InterstellarKind.PASSING_SYSTEM, star, 1)
    assert first == second
