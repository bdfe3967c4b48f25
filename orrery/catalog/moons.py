"""Moon type profiles."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Tuple


class MoonType(enum.Enum):
    ROCKY = "rocky"
    ICY = "icy"
    VOLCANIC = "volcanic"
    CAPTURED = "captured"


@dataclass(frozen=True)
class MoonTypeProfile:
    name: str
    colors: Tuple[str, ...]


MOON_TYPES: Dict[MoonType, MoonTypeProfile] = {
    MoonType.ROCKY: MoonTypeProfile(
        name="Rocky Moon",
        colors=("#a0a0a0", "#909090", "#b0b0b0", "#808080"),
    ),
    MoonType.ICY: MoonTypeProfile(
        name="Icy Moon",
        colors=("#e8f4f8", "#d0e8f0", "#c0dce8", "#f0f8ff"),
    ),
    MoonType.VOLCANIC: MoonTypeProfile(
        name="Volcanic Moon",
        colors=("#ff8c42", "#ffa500", "#ff6b35", "#e55934"),
    ),
    MoonType.CAPTURED: MoonTypeProfile(
        name="Captured Asteroid",
        colors=("#696969", "#778899", "#556b2f", "#8b4513"),
    ),
}

# Catalog order, used for uniform picks.
ALL_MOON_TYPES: Tuple[MoonType, ...] = tuple(MOON_TYPES)


__all__ = ["ALL_MOON_TYPES", "MOON_TYPES", "MoonType", "MoonTypeProfile"]
