"""Procedural and preset system generation."""
from __future__ import annotations

from typing import List

import pytest

from orrery.catalog.archetypes import ARCHETYPES, Archetype
from orrery.catalog.planets import PlanetType
from orrery.catalog.stars import SpectralClass
from orrery.config import GeneratorConfig
from orrery.core.rng import SeededRandom
from orrery.engine.logger import LoggerConfig, OrreryLogger
from orrery.generation.belts import (
    BeltGap,
    generate_asteroid_belt,
    generate_kuiper_belt,
    place_belt_radius,
)
from orrery.generation.context import GenerationContext
from orrery.generation.models import BeltKind, Star
from orrery.generation.moons import HILL_FRACTION, moon_orbit_au
from orrery.generation.names import generate_name, moon_name
from orrery.generation.planets import generate_planet, repair_separation, separation_ok
from orrery.generation.stars import generate_secondary_star, generate_star
from orrery.generation.system import generate_system, spacing_factor
from orrery.math import physics

SEEDS = range(1, 41)


class ScriptedRandom(SeededRandom):
    def __init__(self, values: List[float]) -> None:
        super().__init__(0)
        self.values = list(values)

    def next(self) -> float:
        return self.values.pop(0)


def _quiet_logger() -> OrreryLogger:
    return OrreryLogger(LoggerConfig.quiet(), configure_root=False)


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


def test_seed_42_is_reproducible() -> None:
    first = generate_system(42)
    second = generate_system(42, logger=_quiet_logger())
    assert first.orbit_radii() == second.orbit_radii()
    assert first.to_json() == second.to_json()


def test_string_seeds_are_reproducible() -> None:
    assert generate_system("vega drift").to_json() == generate_system("vega drift").to_json()
    assert generate_system("vega drift").to_json() != generate_system("vega drift 2").to_json()


@pytest.mark.parametrize("seed", SEEDS)
def test_hill_separation_and_monotonic_orbits(seed: int) -> None:
    system = generate_system(seed)
    star = system.star
    for inner, outer in zip(system.planets, system.planets[1:]):
        required = physics.min_planet_separation(
            inner.orbit_radius_au, inner.mass, outer.orbit_radius_au, outer.mass, star.mass
        )
        assert outer.orbit_radius_au - inner.orbit_radius_au >= required - 1e-12
        assert outer.orbit_radius_au > inner.orbit_radius_au


@pytest.mark.parametrize("seed", SEEDS)
def test_zone_flags_match_orbits(seed: int) -> None:
    system = generate_system(seed)
    star = system.star
    for planet in system.planets:
        in_zone = star.habitable_zone_inner <= planet.orbit_radius_au <= star.habitable_zone_outer
        assert planet.in_habitable_zone == in_zone
        assert planet.beyond_frost_line == (planet.orbit_radius_au > star.frost_line)
        assert planet.hill_sphere == pytest.approx(
            physics.hill_sphere(planet.orbit_radius_au, planet.mass, star.mass)
        )
        assert planet.orbital_period == pytest.approx(
            physics.orbital_period(planet.orbit_radius_au, star.mass)
        )


@pytest.mark.parametrize("seed", SEEDS)
def test_counts_follow_archetype_and_config(seed: int) -> None:
    system = generate_system(seed)
    profile = ARCHETYPES[system.archetype]
    low, high = profile.planet_count
    assert low <= len(system.planets) <= high
    assert system.archetype_name == profile.name
    assert 1 <= len(system.comets) <= 3
    if system.asteroid_belt is not None:
        assert profile.features.asteroid_belt
        assert len(system.planets) >= 3
    if system.kuiper_belt is not None:
        assert profile.features.kuiper_belt
        assert system.kuiper_belt.inner_au > system.planets[-1].orbit_radius_au


@pytest.mark.parametrize("seed", SEEDS)
def test_moons_stay_inside_hill_sphere(seed: int) -> None:
    system = generate_system(seed)
    for planet in system.planets:
        for moon in planet.moons:
            assert moon.orbit_radius_au <= planet.hill_sphere * HILL_FRACTION[1] + 1e-12
            assert moon.orbital_period >= 5.0


@pytest.mark.parametrize("seed", range(1, 16))
def test_compact_spacing_band(seed: int) -> None:
    system = generate_system(seed, archetype=Archetype.COMPACT)
    assert system.archetype is Archetype.COMPACT
    for planet in system.planets:
        assert 1.2 <= planet.spacing_factor < 1.5
    for inner, outer in zip(system.planets, system.planets[1:]):
        if not outer.separation_repaired:
            ratio = outer.orbit_radius_au / inner.orbit_radius_au
            assert 1.2 - 1e-9 <= ratio < 1.5


@pytest.mark.parametrize("seed", range(1, 11))
def test_hot_jupiter_leads(seed: int) -> None:
    system = generate_system(seed, archetype=Archetype.HOT_JUPITER)
    first = system.planets[0]
    assert first.planet_type is PlanetType.GAS_GIANT
    assert 0.03 <= first.orbit_radius_au < 0.08


def test_comet_count_follows_config() -> None:
    system = generate_system(7, config=GeneratorConfig(comet_count=(0, 0)))
    assert system.comets == []
    system = generate_system(7, config=GeneratorConfig(comet_count=(4, 4)))
    assert len(system.comets) == 4


def test_binary_companion_is_lighter_class_and_clears_orbits() -> None:
    config = GeneratorConfig(binary_star_chance=1.0)
    for seed in range(1, 11):
        system = generate_system(seed, config=config)
        secondary = system.secondary_star
        assert secondary is not None
        assert 30.0 <= secondary.orbit_radius < 60.0
        if system.archetype is not Archetype.HOT_JUPITER:
            assert system.planets[0].orbit_radius_au > secondary.orbit_radius_au


def test_secondary_falls_back_to_red_dwarf() -> None:
    primary = _sun()
    primary.mass = 0.1
    secondary = generate_secondary_star(SeededRandom(3), primary)
    assert secondary.spectral_class is SpectralClass.M


def test_star_derives_zones_from_luminosity() -> None:
    star = generate_star(SeededRandom(11))
    assert star.frost_line == pytest.approx(physics.frost_line(star.luminosity))
    assert star.habitable_zone_inner < star.habitable_zone_outer
    assert star.name.endswith(" Star")
    assert star.visual_radius == pytest.approx(20.0 + 2.0 * star.radius)
    assert 2000.0 <= star.next_flare < 8000.0


def test_spacing_factor_overrides_for_compact() -> None:
    star = _sun()
    rng = ScriptedRandom([0.0, 0.5])
    assert spacing_factor(rng, 0.5, star, Archetype.COMPACT) == pytest.approx(1.35)
    rng = ScriptedRandom([0.5])
    assert spacing_factor(rng, 0.5, star, Archetype.SOLAR_LIKE) == pytest.approx(1.6)
    rng = ScriptedRandom([0.0])
    assert spacing_factor(rng, 3.0, star, Archetype.SOLAR_LIKE) == pytest.approx(1.6)
    rng = ScriptedRandom([0.0])
    assert spacing_factor(rng, 20.0, star, Archetype.SOLAR_LIKE) == pytest.approx(1.8)


def test_repair_separation_is_pure() -> None:
    star = _sun()
    context = GenerationContext(SeededRandom(5))
    inner = generate_planet(context, 0, 5.0, star, Archetype.SOLAR_LIKE, force_type=PlanetType.GAS_GIANT)
    crowded = generate_planet(context, 1, 5.1, star, Archetype.SOLAR_LIKE, force_type=PlanetType.GAS_GIANT)
    assert not separation_ok(inner, crowded, star)

    repaired = repair_separation(inner, crowded, star)
    assert crowded.orbit_radius_au == 5.1
    assert crowded.separation_repaired is False
    assert repaired.separation_repaired is True
    assert separation_ok(inner, repaired, star)
    assert repaired.orbital_period == pytest.approx(physics.orbital_period(repaired.orbit_radius_au, 1.0))
    assert repaired.hill_sphere > crowded.hill_sphere
    for before, after in zip(crowded.moons, repaired.moons):
        assert after.orbit_radius_au == pytest.approx(moon_orbit_au(repaired.hill_sphere, after.index))
        assert after.name == before.name


def test_repair_leaves_separated_planets_alone() -> None:
    star = _sun()
    context = GenerationContext(SeededRandom(5))
    inner = generate_planet(context, 0, 1.0, star, Archetype.SOLAR_LIKE, force_type=PlanetType.ROCKY)
    outer = generate_planet(context, 1, 2.0, star, Archetype.SOLAR_LIKE, force_type=PlanetType.ROCKY)
    assert repair_separation(inner, outer, star) is outer


def test_asteroid_belt_needs_two_planets() -> None:
    star = _sun()
    context = GenerationContext(SeededRandom(8))
    planet = generate_planet(context, 0, 1.0, star, Archetype.SOLAR_LIKE)
    assert generate_asteroid_belt(SeededRandom(1), star, [planet]) is None
    assert generate_asteroid_belt(SeededRandom(1), star, []) is None


def test_asteroid_belt_fills_gap() -> None:
    star = _sun()
    context = GenerationContext(SeededRandom(8))
    rocky = generate_planet(context, 0, 1.0, star, Archetype.SOLAR_LIKE, force_type=PlanetType.ROCKY)
    giant = generate_planet(context, 1, 5.0, star, Archetype.SOLAR_LIKE, force_type=PlanetType.GAS_GIANT)
    belt = generate_asteroid_belt(SeededRandom(2), star, [rocky, giant])
    assert belt is not None
    assert belt.kind is BeltKind.ASTEROID
    assert belt.inner_au == pytest.approx(1.0 + 3.0 * rocky.hill_sphere)
    assert belt.outer_au == pytest.approx(5.0 - 3.0 * giant.hill_sphere)
    assert 150 <= len(belt) <= 400
    for body in belt.bodies:
        assert belt.inner_au <= body.radius_au <= belt.outer_au
        assert body.inclination == 0.0


def test_belt_radius_outside_resonances_is_one_draw() -> None:
    gap = BeltGap(2.0, 4.0, 1.0)
    band = physics.ResonanceGap(distance=3.0, width=0.1)
    rng = ScriptedRandom([0.25, 0.9])
    assert place_belt_radius(rng, gap, [band]) == pytest.approx(2.5)
    assert rng.values == [0.9]


def test_belt_radius_pushed_out_of_resonance() -> None:
    gap = BeltGap(2.0, 4.0, 1.0)
    band = physics.ResonanceGap(distance=3.0, width=0.1)
    inward = place_belt_radius(ScriptedRandom([0.5, 0.2]), gap, [band])
    outward = place_belt_radius(ScriptedRandom([0.5, 0.9]), gap, [band])
    assert inward == pytest.approx(3.0 - 0.15)
    assert outward == pytest.approx(3.0 + 0.15)


def test_belt_radius_push_is_clamped_to_gap() -> None:
    gap = BeltGap(2.0, 4.0, 1.0)
    outer_band = physics.ResonanceGap(distance=3.9, width=0.2)
    inner_band = physics.ResonanceGap(distance=2.1, width=0.2)
    assert place_belt_radius(ScriptedRandom([0.95, 0.7]), gap, [outer_band]) == 4.0
    assert place_belt_radius(ScriptedRandom([0.05, 0.1]), gap, [inner_band]) == 2.0


def test_asteroid_belt_none_when_gaps_are_tight() -> None:
    star = _sun()
    context = GenerationContext(SeededRandom(8))
    first = generate_planet(context, 0, 5.0, star, Archetype.SOLAR_LIKE, force_type=PlanetType.GAS_GIANT)
    second = generate_planet(context, 1, 5.2, star, Archetype.SOLAR_LIKE, force_type=PlanetType.GAS_GIANT)
    assert generate_asteroid_belt(SeededRandom(2), star, [first, second]) is None


def test_kuiper_belt_sits_beyond_last_planet() -> None:
    belt = generate_kuiper_belt(SeededRandom(4), _sun(), 30.0)
    assert 41.0 <= belt.inner_au < 44.0
    assert 10.0 <= belt.outer_au - belt.inner_au < 20.0
    assert all(belt.inner_au <= body.radius_au <= belt.outer_au for body in belt.bodies)


def test_names() -> None:
    assert generate_name(SeededRandom(1)) == generate_name(SeededRandom(1))
    assert moon_name("Kepar", 0) == "Kepar I"
    assert moon_name("Kepar", 11) == "Kepar XII"
    assert moon_name("Kepar", 12) == "Kepar 13"


def test_sol_preset_fidelity() -> None:
    system = generate_system("sol")
    assert system.is_preset
    assert system.archetype is Archetype.PRESET
    assert system.archetype_name == "Sol System"
    names = [planet.name for planet in system.planets]
    assert names == ["Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune"]
    assert system.orbit_radii() == sorted(system.orbit_radii())
    earth = system.planets[2]
    assert earth.eccentricity == 0.017
    assert [moon.name for moon in earth.moons] == ["Luna"]
    assert earth.moons[0].mass is None
    assert earth.in_habitable_zone
    jupiter = system.planets[4]
    assert 15 <= len(jupiter.trojans) <= 40
    assert system.secondary_star is None


def test_sol_preset_belts_and_comets() -> None:
    system = generate_system("Our System")
    asteroid = system.asteroid_belt
    assert asteroid is not None and len(asteroid) == 200
    assert all(2.1 <= body.radius_au <= 3.3 for body in asteroid.bodies)
    assert all(body.eccentricity == 0.0 for body in asteroid.bodies)
    kuiper = system.kuiper_belt
    assert kuiper is not None and len(kuiper) == 150
    assert [comet.name for comet in system.comets] == ["Halley's Comet", "Hale-Bopp"]
    halley = system.comets[0]
    assert halley.perihelion == pytest.approx(0.586 * physics.AU)
    assert halley.orbital_period == pytest.approx(physics.orbital_period((0.586 + 35.1) / 2.0, 1.0))


def test_preset_stars_draw_larger() -> None:
    sun = generate_system("sol").star
    assert sun.is_preset
    assert sun.visual_radius == pytest.approx(30.0 + 3.0 * sun.radius)
    generated = _sun()
    assert not generated.is_preset
    assert generated.visual_radius == pytest.approx(22.0)


def test_preset_cosmetics_are_seeded() -> None:
    assert generate_system("sol").to_json() == generate_system("sol").to_json()
    shouted = generate_system("SOL")
    assert [planet.name for planet in shouted.planets] == [planet.name for planet in generate_system("sol").planets]


def test_other_presets() -> None:
    trappist = generate_system("trappist")
    assert trappist.is_preset
    assert len(trappist.planets) == 7
    kepler = generate_system("kepler90")
    assert len(kepler.planets) == 8


def test_summary_and_serialisation() -> None:
    system = generate_system(42)
    summary = system.summary()
    assert summary["seed"] == 42
    assert summary["planets"] == [planet.name for planet in system.planets]
    data = system.to_dict()
    assert data["archetype"] == system.archetype.value
    assert len(data["planets"]) == len(system.planets)
    assert data["planets"][0]["planet_type"] == system.planets[0].planet_type.value
