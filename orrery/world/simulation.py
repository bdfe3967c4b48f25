"""Simulation state advanced once per tick."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from orrery.config import GeneratorConfig
from orrery.core.rng import Seed
from orrery.engine.logger import OrreryLogger, channel_of
from orrery.generation.context import GenerationContext
from orrery.generation.models import Flare, SolarSystem, Star
from orrery.generation.stars import FLARE_INTERVAL
from orrery.generation.system import generate_solar_system
from orrery.math.physics import TWO_PI
from orrery.world.events import EventEngine
from orrery.world.positions import planet_position

FLARE_SIZE = (0.3, 0.7)
FLARE_DECAY = 0.01


@dataclass
class SimulationState:
    system: SolarSystem
    context: GenerationContext
    events: EventEngine
    time: float = 0.0
    paused: bool = False
    trails_enabled: bool = False
    seed: Optional[Seed] = field(default=None)

    @property
    def config(self) -> GeneratorConfig:
        return self.context.config

    def tick(self) -> None:
        """Advance one frame of simulated time.

        Order: clock, event engine, star flares, planet angles and trails.
        Paused simulations do nothing.
        """

        if self.paused:
            return
        time_scale = self.config.time_scale
        self.time += time_scale
        self.events.update(self.system.star, self.time, time_scale)
        self._update_flares(self.system.star, time_scale)
        self._update_planets()

    def _update_flares(self, star: Star, time_scale: float) -> None:
        rng = self.context.rng
        star.next_flare -= time_scale
        if star.next_flare <= 0:
            star.flares.append(Flare(angle=rng.range(0.0, TWO_PI), size=rng.range(*FLARE_SIZE)))
            star.next_flare = rng.range(*FLARE_INTERVAL)
        for flare in star.flares:
            flare.life -= FLARE_DECAY * time_scale
        star.flares = [flare for flare in star.flares if flare.life > 0]

    def _update_planets(self) -> None:
        limit = self.config.trail_length
        for planet in self.system.planets:
            sample = planet_position(planet, self.time)
            planet.current_angle = sample.angle
            if self.trails_enabled:
                planet.trail.append((sample.position.x, sample.position.y))
                if len(planet.trail) > limit:
                    del planet.trail[: len(planet.trail) - limit]

    def regenerate(self, seed: Seed) -> SolarSystem:
        """Reseed, build a fresh system and drop every visitor."""

        self.context = GenerationContext.from_seed(seed, self.context.config, self.context.logger)
        self.system = generate_solar_system(self.context, seed=seed)
        self.events.clear()
        self.events.rng = self.context.rng
        self.time = 0.0
        self.paused = False
        self.seed = seed
        log = channel_of(self.context.logger, "simulation")
        if log is not None:
            log.info("Regenerated system from seed %r: %s", seed, self.system.star.name)
        return self.system


def create_simulation(
    seed: Seed,
    config: Optional[GeneratorConfig] = None,
    logger: Optional[OrreryLogger] = None,
) -> SimulationState:
    context = GenerationContext.from_seed(seed, config, logger)
    system = generate_solar_system(context, seed=seed)
    events = EventEngine(context.rng, logger=logger)
    return SimulationState(system=system, context=context, events=events, seed=seed)


__all__ = ["FLARE_DECAY", "FLARE_SIZE", "SimulationState", "create_simulation"]
