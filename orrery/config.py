"""Generator configuration read from ``settings.json``."""
from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Tuple

# camelCase settings key -> dataclass field
_KEY_MAP = {
    "minPlanets": "min_planets",
    "maxPlanets": "max_planets",
    "maxMoons": "max_moons",
    "asteroidBeltChance": "asteroid_belt_chance",
    "ringChance": "ring_chance",
    "binaryStarChance": "binary_star_chance",
    "baseOrbitRadius": "base_orbit_radius",
    "orbitSpacing": "orbit_spacing",
    "timeScale": "time_scale",
    "trailLength": "trail_length",
    "cometCount": "comet_count",
}


@dataclass(frozen=True)
class GeneratorConfig:
    """Flat generator options.

    Values are read where they are used and never range checked.
    ``min_planets``, ``max_planets``, ``asteroid_belt_chance``,
    ``base_orbit_radius`` and ``orbit_spacing`` are carried for the controls
    only: planet count and belts follow the archetype and placement follows
    Hill-sphere spacing.
    """

    min_planets: int = 3
    max_planets: int = 12
    max_moons: int = 8
    asteroid_belt_chance: float = 0.6
    ring_chance: float = 0.4
    binary_star_chance: float = 0.2
    base_orbit_radius: float = 80.0
    orbit_spacing: float = 60.0
    time_scale: float = 1.0
    trail_length: int = 50
    comet_count: Tuple[int, int] = (1, 3)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        config = cls()
        for key, value in data.items():
            config = config.updated(key, value)
        return config

    @classmethod
    def from_settings(cls, path: Path) -> "GeneratorConfig":
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            return cls()
        if not isinstance(data, dict):
            return cls()
        generator = data.get("generator", data)
        if not isinstance(generator, dict):
            return cls()
        return cls.from_dict(generator)

    def updated(self, key: str, value: Any) -> "GeneratorConfig":
        """Copy with one option replaced; unknown keys leave the config unchanged."""

        name = _KEY_MAP.get(key, key)
        if name not in _FIELD_NAMES:
            return self
        try:
            coerced = _coerce(name, value, getattr(self, name))
        except (TypeError, ValueError):
            return self
        return replace(self, **{name: coerced})

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for camel, name in _KEY_MAP.items():
            value = getattr(self, name)
            if name == "comet_count":
                value = {"min": value[0], "max": value[1]}
            data[camel] = value
        return data


_FIELD_NAMES = frozenset(item.name for item in fields(GeneratorConfig))


def _coerce(name: str, value: Any, current: Any) -> Any:
    if name == "comet_count":
        if isinstance(value, dict):
            return (int(value.get("min", current[0])), int(value.get("max", current[1])))
        low, high = value
        return (int(low), int(high))
    if isinstance(current, int):
        return int(value)
    return float(value)


__all__ = ["GeneratorConfig"]
