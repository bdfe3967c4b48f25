"""Comet composition profiles."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Tuple

RGB = Tuple[int, int, int]


class CometType(enum.Enum):
    WATER_ICE = "waterIce"
    CARBON_DIOXIDE = "carbonDioxide"
    METHANE = "methane"
    MIXED = "mixed"


@dataclass(frozen=True)
class CometTypeProfile:
    """``volatility`` scales the distance at which the tail switches on."""

    name: str
    color: str
    tail_color: RGB
    dust_color: RGB
    volatility: float
    tail_brightness: float


COMET_TYPES: Dict[CometType, CometTypeProfile] = {
    CometType.WATER_ICE: CometTypeProfile(
        name="Water Ice Comet",
        color="#aaddff",
        tail_color=(170, 220, 255),
        dust_color=(255, 220, 180),
        volatility=1.0,
        tail_brightness=1.0,
    ),
    CometType.CARBON_DIOXIDE: CometTypeProfile(
        name="CO2 Ice Comet",
        color="#ddddff",
        tail_color=(200, 200, 255),
        dust_color=(220, 200, 180),
        volatility=1.5,
        tail_brightness=0.8,
    ),
    CometType.METHANE: CometTypeProfile(
        name="Methane Ice Comet",
        color="#aaffdd",
        tail_color=(170, 255, 220),
        dust_color=(200, 220, 180),
        volatility=2.0,
        tail_brightness=0.6,
    ),
    CometType.MIXED: CometTypeProfile(
        name="Mixed Composition Comet",
        color="#ccddee",
        tail_color=(200, 220, 240),
        dust_color=(240, 220, 200),
        volatility=1.2,
        tail_brightness=0.9,
    ),
}

ALL_COMET_TYPES: Tuple[CometType, ...] = tuple(COMET_TYPES)

BASE_TAIL_ACTIVATION_AU = 2.5


__all__ = [
    "ALL_COMET_TYPES",
    "BASE_TAIL_ACTIVATION_AU",
    "COMET_TYPES",
    "CometType",
    "CometTypeProfile",
    "RGB",
]
