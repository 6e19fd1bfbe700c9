"""
Main configuration class for ReportForge.

This module provides the Config dataclass that aggregates all sub-configs
and handles validation and dictionary round-tripping.

Configuration Hierarchy
-----------------------
    Config
    ├── CitationConfig     # Author limit, et-al suffix, missing-year text
    ├── ShapingConfig      # Whether author names are shaped for layout
    ├── AuthorsConfig      # Cycle handling, author line separator
    └── LoggingConfig      # Level and optional log file

Environment Variables
---------------------
String values may use ${VAR_NAME} or ${VAR_NAME:default} syntax; they are
expanded by expand_env_vars() when the config is built from a dict.

Usage Example
-------------
    config = load_config(Path("reportforge.yaml"))
    formatter = CitationFormatter(config.citation)
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Optional

from reportforge.core.config.base import (
    AuthorsConfig,
    CitationConfig,
    LoggingConfig,
    ShapingConfig,
)
from reportforge.core.exceptions import ConfigValidationError

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Main ReportForge configuration."""

    citation: CitationConfig = field(default_factory=CitationConfig)
    shaping: ShapingConfig = field(default_factory=ShapingConfig)
    authors: AuthorsConfig = field(default_factory=AuthorsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        max_authors = self.citation.max_authors
        if isinstance(max_authors, bool) or not isinstance(max_authors, int):
            raise ConfigValidationError(
                "citation.max_authors must be an integer",
                field="citation.max_authors",
                value=max_authors,
            )
        if max_authors < 1:
            raise ConfigValidationError(
                "citation.max_authors must be at least 1",
                field="citation.max_authors",
                value=max_authors,
            )
        level = self.logging.level
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"logging.level must be one of {sorted(VALID_LOG_LEVELS)}",
                field="logging.level",
                value=level,
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @staticmethod
    def _filter_fields(cls_type: Any, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Filter dict to only keys that match dataclass fields, handling None."""
        if not data:
            return {}
        valid_keys = {f.name for f in fields(cls_type)}
        return {k: v for k, v in data.items() if k in valid_keys}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        # Import here to avoid circular dependency
        from reportforge.core.config_loaders import expand_env_vars, parse_bool

        data = expand_env_vars(data or {})

        citation = CitationConfig(
            **cls._filter_fields(CitationConfig, data.get("citation"))
        )
        if isinstance(citation.max_authors, str):
            citation.max_authors = _parse_int(
                citation.max_authors, "citation.max_authors"
            )

        shaping = ShapingConfig(
            **cls._filter_fields(ShapingConfig, data.get("shaping"))
        )
        shaping.enabled = parse_bool(shaping.enabled, "shaping.enabled")

        authors = AuthorsConfig(
            **cls._filter_fields(AuthorsConfig, data.get("authors"))
        )
        authors.strict_cycles = parse_bool(
            authors.strict_cycles, "authors.strict_cycles"
        )

        return cls(
            citation=citation,
            shaping=shaping,
            authors=authors,
            logging=LoggingConfig(
                **cls._filter_fields(LoggingConfig, data.get("logging"))
            ),
        )


def _parse_int(value: str, field_name: str) -> int:
    """Parse an integer that arrived as a string (e.g. from env expansion)."""
    try:
        return int(value)
    except ValueError as e:
        raise ConfigValidationError(
            f"{field_name} must be an integer", field=field_name, value=value
        ) from e
