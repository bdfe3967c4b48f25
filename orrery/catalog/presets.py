"""Named real-system presets and their loader."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from orrery.catalog.moons import MoonType
from orrery.catalog.planets import PlanetType
from orrery.catalog.stars import SpectralClass

PRESET_DIRECTORY = Path(__file__).resolve().parents[1] / "assets" / "presets"


@dataclass(frozen=True)
class PresetStar:
    name: str
    spectral_class: SpectralClass
    full_name: str
    temperature: float
    mass: float
    radius: float
    luminosity: float
    color: str
    frost_line: float
    habitable_zone_inner: float
    habitable_zone_outer: float
    inner_limit: float

    @classmethod
    def from_dict(cls, data: Dict) -> "PresetStar":
        return cls(
            name=data["name"],
            spectral_class=SpectralClass(data.get("class", "G")),
            full_name=data.get("fullName", data["name"]),
            temperature=float(data["temperature"]),
            mass=float(data["mass"]),
            radius=float(data["radius"]),
            luminosity=float(data["luminosity"]),
            color=data.get("color", "#ffffff"),
            frost_line=float(data["frostLine"]),
            habitable_zone_inner=float(data["habitableZoneInner"]),
            habitable_zone_outer=float(data["habitableZoneOuter"]),
            inner_limit=float(data["innerLimit"]),
        )


@dataclass(frozen=True)
class PresetMoon:
    """Display orbit radius is in screen units around the planet."""

    name: str
    moon_type: MoonType
    orbit_radius: float
    size: float
    color: str

    @classmethod
    def from_dict(cls, data: Dict) -> "PresetMoon":
        return cls(
            name=data["name"],
            moon_type=MoonType(data.get("type", "rocky")),
            orbit_radius=float(data["orbitRadius"]),
            size=float(data.get("size", 0.1)),
            color=data.get("color", "#a0a0a0"),
        )


@dataclass(frozen=True)
class PresetPlanet:
    name: str
    planet_type: PlanetType
    orbit_radius_au: float
    radius: float
    mass: float
    eccentricity: float
    color: str
    atmosphere: str
    composition: Dict[str, float]
    has_rings: bool = False
    prominent_rings: bool = False
    has_bands: bool = False
    has_storm: bool = False
    storm_size: float = 0.2
    moons: Tuple[PresetMoon, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict) -> "PresetPlanet":
        return cls(
            name=data["name"],
            planet_type=PlanetType(data["type"]),
            orbit_radius_au=float(data["orbitRadiusAU"]),
            radius=float(data["radius"]),
            mass=float(data["mass"]),
            eccentricity=float(data.get("eccentricity", 0.0)),
            color=data.get("color", "#a0a0a0"),
            atmosphere=data.get("atmosphere", "None"),
            composition={str(k): float(v) for k, v in data.get("composition", {}).items()},
            has_rings=bool(data.get("hasRings", False)),
            prominent_rings=bool(data.get("prominentRings", False)),
            has_bands=bool(data.get("hasBands", False)),
            has_storm=bool(data.get("hasStorm", False)),
            storm_size=float(data.get("stormSize", 0.2)),
            moons=tuple(PresetMoon.from_dict(moon) for moon in data.get("moons", [])),
        )


@dataclass(frozen=True)
class PresetBelt:
    """Belt bounds in AU."""

    inner_radius: float
    outer_radius: float
    count: int
    color: str

    @classmethod
    def from_dict(cls, data: Optional[Dict], default_count: int) -> Optional["PresetBelt"]:
        if not data:
            return None
        return cls(
            inner_radius=float(data["innerRadius"]),
            outer_radius=float(data["outerRadius"]),
            count=int(data.get("count", default_count)),
            color=data.get("color", "#888888"),
        )


@dataclass(frozen=True)
class PresetComet:
    """Perihelion and aphelion in AU."""

    name: str
    perihelion: float
    aphelion: float
    eccentricity: float

    @classmethod
    def from_dict(cls, data: Dict) -> "PresetComet":
        return cls(
            name=data["name"],
            perihelion=float(data["perihelion"]),
            aphelion=float(data["aphelion"]),
            eccentricity=float(data["eccentricity"]),
        )


@dataclass(frozen=True)
class SystemPreset:
    name: str
    seed: str
    aliases: Tuple[str, ...]
    star: PresetStar
    planets: Tuple[PresetPlanet, ...]
    asteroid_belt: Optional[PresetBelt] = None
    kuiper_belt: Optional[PresetBelt] = None
    comets: Tuple[PresetComet, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict) -> "SystemPreset":
        seed = str(data["seed"]).lower()
        return cls(
            name=data.get("name", seed.title()),
            seed=seed,
            aliases=tuple(str(alias).lower() for alias in data.get("aliases", [])),
            star=PresetStar.from_dict(data["star"]),
            planets=tuple(PresetPlanet.from_dict(planet) for planet in data.get("planets", [])),
            asteroid_belt=PresetBelt.from_dict(data.get("asteroidBelt"), 200),
            kuiper_belt=PresetBelt.from_dict(data.get("kuiperBelt"), 150),
            comets=tuple(PresetComet.from_dict(comet) for comet in data.get("comets", [])),
        )


class PresetDatabase:
    """Loads named systems from JSON and matches seeds against them."""

    def __init__(self) -> None:
        self._presets: Dict[str, SystemPreset] = {}

    def __len__(self) -> int:
        return len(self._presets)

    def add(self, preset: SystemPreset) -> None:
        self._presets[preset.seed] = preset

    def load(self, path: Path) -> None:
        if not path.exists():
            return
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            return
        entries = data if isinstance(data, list) else [data]
        for entry in entries:
            try:
                preset = SystemPreset.from_dict(entry)
            except (KeyError, TypeError, ValueError):
                continue
            self.add(preset)

    def load_directory(self, directory: Path) -> None:
        if not directory.exists():
            return
        for path in sorted(directory.glob("*.json")):
            self.load(path)

    def get(self, seed: str) -> SystemPreset:
        return self._presets[seed]

    def all(self) -> Iterable[SystemPreset]:
        return list(self._presets.values())

    def names(self) -> List[Tuple[str, str]]:
        """``(seed, display name)`` pairs for a preset picker."""

        return [(preset.seed, preset.name) for preset in self._presets.values()]

    def find(self, seed: object) -> Optional[SystemPreset]:
        """Match a seed by preset key first, then by alias (case-insensitive)."""

        if not seed:
            return None
        normalized = str(seed).lower().strip()
        if normalized in self._presets:
            return self._presets[normalized]
        for preset in self._presets.values():
            if normalized in preset.aliases:
                return preset
        return None


_DEFAULT: Optional[PresetDatabase] = None


def default_presets() -> PresetDatabase:
    """Presets shipped with the package, loaded once."""

    global _DEFAULT
    if _DEFAULT is None:
        database = PresetDatabase()
        database.load_directory(PRESET_DIRECTORY)
        _DEFAULT = database
    return _DEFAULT


__all__ = [
    "PRESET_DIRECTORY",
    "PresetBelt",
    "PresetComet",
    "PresetDatabase",
    "PresetMoon",
    "PresetPlanet",
    "PresetStar",
    "SystemPreset",
    "default_presets",
]
