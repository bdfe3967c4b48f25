"""Explicit state threaded through every generator call."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from orrery.config import GeneratorConfig
from orrery.core.rng import Seed, SeededRandom
from orrery.engine.logger import ChannelLogger, OrreryLogger, channel_of


@dataclass
class GenerationContext:
    """Random stream, options and an optional logger for one generation pass.

    Tests swap in a scripted ``SeededRandom`` subclass to force branches.
    """

    rng: SeededRandom
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    logger: Optional[OrreryLogger] = None

    @classmethod
    def from_seed(
        cls,
        seed: Seed,
        config: Optional[GeneratorConfig] = None,
        logger: Optional[OrreryLogger] = None,
    ) -> "GenerationContext":
        return cls(SeededRandom(seed), config or GeneratorConfig(), logger)

    def channel(self, name: str = "generation") -> Optional[ChannelLogger]:
        return channel_of(self.logger, name)


__all__ = ["GenerationContext"]
