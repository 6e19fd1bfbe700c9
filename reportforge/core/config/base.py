"""
Section configuration classes for citations, shaping, authors and logging.

Each dataclass maps to one top-level section of reportforge.yaml.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CitationConfig:
    """Citation formatting configuration."""

    max_authors: int = 6  # Authors named before the et-al suffix
    et_al: str = " et. al."
    missing_year: str = "n.d."


@dataclass
class ShapingConfig:
    """Text shaping configuration."""

    enabled: bool = True


@dataclass
class AuthorsConfig:
    """Author collection configuration."""

    strict_cycles: bool = False  # Raise instead of warn on cyclic sub-events
    separator: str = ", "


@dataclass
class LoggingConfig:
    """Logging configuration section."""

    level: str = "INFO"
    file: Optional[str] = None
