"""Syllable-based names for generated bodies."""
from __future__ import annotations

from orrery.core.rng import SeededRandom

NAME_PREFIXES = (
    "Kep", "Zan", "Vor", "Nix", "Tra", "Hel", "Cor", "Bel", "Aur", "Cyr",
    "Dra", "Ely", "Fal", "Gal", "Ion", "Jov", "Lyr", "Myr", "Neb", "Orb",
    "Pol", "Qua", "Rex", "Sol", "Tau", "Uma", "Vex", "Wyr", "Xen", "Zep",
)

NAME_MIDDLES = (
    "ar", "en", "ix", "on", "us", "ia", "or", "an", "el", "is",
    "os", "um", "ius", "era", "ova", "ith", "eon", "ala", "eri", "olo",
)

# Empty entries make a bare name the most common outcome.
NAME_SUFFIXES = (
    "", "", "", "", "-I", "-II", "-III", "-IV", "-V",
    " Prime", " Major", " Minor", " Alpha", " Beta", "-7", "-9",
)

ROMAN_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII")


def generate_name(rng: SeededRandom) -> str:
    """Three draws: prefix, middle, suffix."""

    prefix = rng.choice(NAME_PREFIXES)
    middle = rng.choice(NAME_MIDDLES)
    suffix = rng.choice(NAME_SUFFIXES)
    return f"{prefix}{middle}{suffix}"


def moon_name(planet_name: str, index: int) -> str:
    if 0 <= index < len(ROMAN_NUMERALS):
        return f"{planet_name} {ROMAN_NUMERALS[index]}"
    return f"{planet_name} {index + 1}"


__all__ = ["NAME_MIDDLES", "NAME_PREFIXES", "NAME_SUFFIXES", "generate_name", "moon_name"]
