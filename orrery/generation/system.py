"""System orchestrator: preset hydration or the full procedural pass."""
from __future__ import annotations

from typing import List, Optional, Tuple

from orrery.catalog.archetypes import ARCHETYPES, Archetype, select_archetype
from orrery.catalog.comets import COMET_TYPES, CometType
from orrery.catalog.moons import MOON_TYPES
from orrery.catalog.planets import GIANT_TYPES, PLANET_TYPES, PlanetType
from orrery.catalog.presets import (
    PresetBelt,
    PresetDatabase,
    PresetPlanet,
    SystemPreset,
    default_presets,
)
from orrery.config import GeneratorConfig
from orrery.core.rng import Seed, SeededRandom
from orrery.engine.logger import OrreryLogger
from orrery.generation.belts import generate_asteroid_belt, generate_kuiper_belt
from orrery.generation.comets import generate_comet, tail_activation_radius
from orrery.generation.context import GenerationContext
from orrery.generation.models import (
    Belt,
    BeltBody,
    BeltKind,
    Comet,
    Moon,
    Planet,
    SolarSystem,
    Star,
    SurfaceDetails,
)
from orrery.generation.moons import moon_orbit_au, moon_period
from orrery.generation.planets import (
    CLOUDY_TYPES,
    CRATERED_TYPES,
    ICE_CAP_MAX_TEMPERATURE,
    ICE_CAP_TYPES,
    TROJAN_MIN_MASS,
    crater_count,
    generate_craters,
    generate_planet,
    generate_trojans,
    in_habitable_zone,
    planet_temperature,
    repair_separation,
    ring_color,
    separation_ok,
    visual_radius_for,
)
from orrery.generation.stars import FLARE_INTERVAL, generate_secondary_star, generate_star
from orrery.math import physics
from orrery.math.physics import AU, TWO_PI

HOT_JUPITER_ORBIT = (0.03, 0.08)
HOT_JUPITER_CLEARANCE = 15.0
BINARY_CLEARANCE_AU = 0.5
ASTEROID_BELT_MIN_PLANETS = 3

# (frost-line multiple the current orbit must be under, spacing range)
ZONE_SPACING: Tuple[Tuple[float, Tuple[float, float]], ...] = (
    (0.5, (1.4, 1.8)),
    (2.0, (1.6, 2.2)),
)
OUTER_SPACING = (1.8, 2.5)
ARCHETYPE_SPACING = {
    Archetype.COMPACT: (1.2, 1.5),
    Archetype.SPARSE: (2.5, 4.0),
}

PRESET_ASTEROID_COLORS = ("#888", "#999", "#777", "#aaa")
PRESET_ASTEROID_SIZE = (0.5, 2.0)
PRESET_KUIPER_COLORS = ("#aaa", "#bbb", "#999", "#ccc")
PRESET_KUIPER_SIZE = (0.5, 2.5)
PRESET_COMET_TYPE = CometType.WATER_ICE
PRESET_COMET_SIZE = 2.0


def spacing_factor(rng: SeededRandom, orbit_au: float, star: Star, archetype: Archetype) -> float:
    """Growth factor for the next orbit.

    The zone draw always happens; compact and sparse systems then replace it
    with a second draw from their own range.
    """

    for multiple, bounds in ZONE_SPACING:
        if orbit_au < star.frost_line * multiple:
            factor = rng.range(*bounds)
            break
    else:
        factor = rng.range(*OUTER_SPACING)
    override = ARCHETYPE_SPACING.get(archetype)
    if override is not None:
        factor = rng.range(*override)
    return factor


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


def _preset_star(preset: SystemPreset, rng: SeededRandom) -> Star:
    data = preset.star
    return Star(
        spectral_class=data.spectral_class,
        name=data.name,
        full_name=data.full_name,
        color=data.color,
        temperature=data.temperature,
        radius=data.radius,
        mass=data.mass,
        luminosity=data.luminosity,
        habitable_zone_inner=data.habitable_zone_inner,
        habitable_zone_outer=data.habitable_zone_outer,
        frost_line=data.frost_line,
        inner_limit=data.inner_limit,
        next_flare=rng.range(*FLARE_INTERVAL),
        is_preset=True,
    )


def _preset_surface(rng: SeededRandom, data: PresetPlanet, temperature: int) -> SurfaceDetails:
    """Surface for a real planet: features come from data, only cosmetics are drawn."""

    kind = data.planet_type
    surface = SurfaceDetails(
        has_ice_caps=kind in ICE_CAP_TYPES and temperature < ICE_CAP_MAX_TEMPERATURE,
        ice_caps_size=rng.range(0.1, 0.3),
        has_storm=data.has_storm,
        storm_angle=rng.range(0.0, TWO_PI),
        storm_size=data.storm_size,
    )
    craters = crater_count(rng) if kind in CRATERED_TYPES else 0
    if data.has_bands:
        surface.band_count = rng.int_range(4, 12)
    if kind in CLOUDY_TYPES:
        surface.cloud_coverage = rng.range(0.1, 0.5)
    surface.craters = generate_craters(rng, craters)
    return surface


def _preset_moons(rng: SeededRandom, data: PresetPlanet, hill_sphere: float) -> List[Moon]:
    moons = []
    for index, moon in enumerate(data.moons):
        orbit_au = moon_orbit_au(hill_sphere, index)
        moons.append(
            Moon(
                index=index,
                name=moon.name,
                moon_type=moon.moon_type,
                type_name=MOON_TYPES[moon.moon_type].name,
                color=moon.color,
                mass=None,
                radius=moon.size,
                visual_radius=physics.clamp(moon.size * 10.0, 2.0, 5.0),
                orbit_radius=moon.orbit_radius,
                orbit_radius_au=orbit_au,
                orbital_period=moon_period(orbit_au, data.mass),
                angle=rng.range(0.0, TWO_PI),
                eccentricity=0.0,
            )
        )
    return moons


def _preset_planet(rng: SeededRandom, index: int, data: PresetPlanet, star: Star) -> Planet:
    orbit_au = data.orbit_radius_au
    temperature = planet_temperature(data.planet_type, orbit_au, star)
    hill = physics.hill_sphere(orbit_au, data.mass, star.mass)
    angle = rng.range(0.0, TWO_PI)

    planet = Planet(
        index=index,
        name=data.name,
        planet_type=data.planet_type,
        type_name=PLANET_TYPES[data.planet_type].name,
        color=data.color,
        radius=data.radius,
        mass=data.mass,
        orbit_radius_au=orbit_au,
        eccentricity=data.eccentricity,
        orbital_period=physics.orbital_period(orbit_au, star.mass),
        orbital_velocity=physics.orbital_velocity(orbit_au, star.mass),
        hill_sphere=hill,
        angle=angle,
        rotation_speed=rng.range(0.001, 0.01),
        atmosphere=data.atmosphere,
        composition=dict(data.composition),
        has_rings=data.has_rings,
        has_bands=data.has_bands,
        prominent_rings=data.prominent_rings,
        ring_color=ring_color(rng),
        visual_radius=visual_radius_for(data.radius),
        temperature=temperature,
        in_habitable_zone=in_habitable_zone(orbit_au, star),
        beyond_frost_line=orbit_au > star.frost_line,
        current_angle=angle,
    )
    planet.surface = _preset_surface(rng, data, temperature)
    planet.moons = _preset_moons(rng, data, hill)
    # Real giants always get their swarm; no probability gate.
    if data.planet_type in GIANT_TYPES and data.mass > TROJAN_MIN_MASS:
        planet.trojans = generate_trojans(rng)
    return planet


def _preset_belt(
    rng: SeededRandom,
    kind: BeltKind,
    data: Optional[PresetBelt],
    star: Star,
) -> Optional[Belt]:
    if data is None:
        return None
    if kind is BeltKind.ASTEROID:
        sizes, colors = PRESET_ASTEROID_SIZE, PRESET_ASTEROID_COLORS
    else:
        sizes, colors = PRESET_KUIPER_SIZE, PRESET_KUIPER_COLORS
    span = data.outer_radius - data.inner_radius
    bodies = []
    for _ in range(data.count):
        radius_au = data.inner_radius + rng.next() * span
        bodies.append(
            BeltBody(
                angle=rng.range(0.0, TWO_PI),
                radius_au=radius_au,
                eccentricity=0.0,
                size=rng.range(*sizes),
                orbital_period=physics.orbital_period(radius_au, star.mass),
                color=rng.choice(colors),
            )
        )
    return Belt(kind, data.inner_radius, data.outer_radius, bodies)


def _preset_comets(rng: SeededRandom, preset: SystemPreset, star: Star) -> List[Comet]:
    profile = COMET_TYPES[PRESET_COMET_TYPE]
    comets = []
    for data in preset.comets:
        semi_major_au = (data.perihelion + data.aphelion) / 2.0
        comets.append(
            Comet(
                perihelion=data.perihelion * AU,
                aphelion=data.aphelion * AU,
                semi_major_axis=semi_major_au * AU,
                eccentricity=data.eccentricity,
                angle=rng.range(0.0, TWO_PI),
                orbital_period=physics.orbital_period(semi_major_au, star.mass),
                inclination=0.0,
                size=PRESET_COMET_SIZE,
                comet_type=PRESET_COMET_TYPE,
                type_name=profile.name,
                color=profile.color,
                tail_color=profile.tail_color,
                dust_color=profile.dust_color,
                volatility=profile.volatility,
                tail_brightness=profile.tail_brightness,
                tail_activation_radius=tail_activation_radius(star, PRESET_COMET_TYPE),
                name=data.name,
            )
        )
    return comets


def generate_from_preset(preset: SystemPreset, rng: SeededRandom) -> SolarSystem:
    """Hydrate literal astronomical data into the generated entity shape.

    Which bodies exist and where they orbit is fixed by the preset; the stream
    only supplies cosmetics such as starting angles and belt scatter.
    """

    star = _preset_star(preset, rng)
    planets = [
        _preset_planet(rng, index, data, star) for index, data in enumerate(preset.planets)
    ]
    asteroid_belt = _preset_belt(rng, BeltKind.ASTEROID, preset.asteroid_belt, star)
    kuiper_belt = _preset_belt(rng, BeltKind.KUIPER, preset.kuiper_belt, star)
    comets = _preset_comets(rng, preset, star)
    return SolarSystem(
        star=star,
        planets=planets,
        archetype=Archetype.PRESET,
        archetype_name=preset.name,
        asteroid_belt=asteroid_belt,
        kuiper_belt=kuiper_belt,
        comets=comets,
        is_preset=True,
        seed=preset.seed,
    )


# ---------------------------------------------------------------------------
# Procedural pass
# ---------------------------------------------------------------------------


def _place_planets(
    context: GenerationContext,
    star: Star,
    archetype: Archetype,
    count: int,
    start_au: float,
) -> List[Planet]:
    rng = context.rng
    log = context.channel()
    profile = ARCHETYPES[archetype]
    planets: List[Planet] = []
    orbit_au = start_au

    first = 0
    if profile.features.has_hot_jupiter and count > 0:
        hot_orbit = rng.range(*HOT_JUPITER_ORBIT)
        hot_jupiter = generate_planet(
            context, 0, hot_orbit, star, archetype, force_type=PlanetType.GAS_GIANT
        )
        planets.append(hot_jupiter)
        orbit_au = hot_orbit + hot_jupiter.hill_sphere * HOT_JUPITER_CLEARANCE
        first = 1

    for index in range(first, count):
        factor = spacing_factor(rng, orbit_au, star, archetype)
        orbit_au *= factor
        planet = generate_planet(context, index, orbit_au, star, archetype)
        planet.spacing_factor = factor
        if planets and not separation_ok(planets[-1], planet, star):
            before = planet.orbit_radius_au
            planet = repair_separation(planets[-1], planet, star)
            orbit_au = planet.orbit_radius_au
            if log is not None:
                log.debug(
                    "Pushed %s from %.3f to %.3f AU to clear ten mutual Hill radii",
                    planet.name,
                    before,
                    orbit_au,
                )
        planets.append(planet)
    return planets


def generate_solar_system(
    context: GenerationContext,
    seed: Optional[Seed] = None,
    archetype: Optional[Archetype] = None,
    presets: Optional[PresetDatabase] = None,
) -> SolarSystem:
    """Build a complete system from ``context``.

    ``seed`` is only used to look up a named preset; the random stream in
    ``context`` is already seeded.  ``archetype`` forces a formation pattern
    instead of drawing one.
    """

    rng = context.rng
    config = context.config
    log = context.channel()

    database = presets if presets is not None else default_presets()
    preset = database.find(seed)
    if preset is not None:
        system = generate_from_preset(preset, rng)
        if log is not None:
            log.info("Loaded preset %s (%d planets)", preset.name, len(system.planets))
        return system

    star = generate_star(rng)
    secondary = None
    if rng.next() < config.binary_star_chance:
        secondary = generate_secondary_star(rng, star)

    if archetype is None or archetype not in ARCHETYPES:
        archetype = select_archetype(rng)
    profile = ARCHETYPES[archetype]
    planet_count = rng.int_range(*profile.planet_count)

    start_au = star.inner_limit * 2.0
    if secondary is not None:
        start_au = max(start_au, secondary.orbit_radius_au + BINARY_CLEARANCE_AU)
    planets = _place_planets(context, star, archetype, planet_count, start_au)

    asteroid_belt = None
    if profile.features.asteroid_belt and len(planets) >= ASTEROID_BELT_MIN_PLANETS:
        asteroid_belt = generate_asteroid_belt(rng, star, planets, log)

    kuiper_belt = None
    if profile.features.kuiper_belt and planets:
        kuiper_belt = generate_kuiper_belt(rng, star, planets[-1].orbit_radius_au)

    comets = [generate_comet(rng, star) for _ in range(rng.int_range(*config.comet_count))]

    system = SolarSystem(
        star=star,
        planets=planets,
        archetype=archetype,
        archetype_name=profile.name,
        secondary_star=secondary,
        asteroid_belt=asteroid_belt,
        kuiper_belt=kuiper_belt,
        comets=comets,
        seed=seed,
    )
    if log is not None:
        log.info(
            "Generated %s: %s class %s, %d planets, %d moons%s",
            star.name,
            profile.name,
            star.spectral_class.value,
            len(planets),
            system.moon_count(),
            ", binary" if secondary else "",
        )
    return system


def generate_system(
    seed: Seed,
    config: Optional[GeneratorConfig] = None,
    logger: Optional[OrreryLogger] = None,
    archetype: Optional[Archetype] = None,
) -> SolarSystem:
    """Seed a fresh stream and generate; the same seed always yields the same system."""

    context = GenerationContext.from_seed(seed, config, logger)
    return generate_solar_system(context, seed=seed, archetype=archetype)


__all__ = [
    "generate_from_preset",
    "generate_solar_system",
    "generate_system",
    "spacing_factor",
]
