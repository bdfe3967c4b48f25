"""Procedural planetary systems: generation, position queries and interstellar events."""
from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
