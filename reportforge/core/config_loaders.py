"""
Configuration Loading and Management Functions.

Handles loading, saving, and applying environment overrides to the
ReportForge configuration.

Configuration precedence: 1. Env vars, 2. YAML file, 3. Defaults

Environment overrides
---------------------
REPORTFORGE_LOG_LEVEL      logging.level
REPORTFORGE_MAX_AUTHORS    citation.max_authors
REPORTFORGE_STRICT_CYCLES  authors.strict_cycles ("1", "true", "yes")
"""

import os
import re
from pathlib import Path
from typing import Any, Optional, TYPE_CHECKING

import yaml

from reportforge.core.exceptions import ConfigValidationError
from reportforge.core.logging import get_logger

if TYPE_CHECKING:
    from reportforge.core.config import Config

logger = get_logger(__name__)

CONFIG_FILENAMES = ("reportforge.yaml", "config.yaml")
_TRUTHY = {"1", "true", "yes", "on"}


def expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in config values.

    Handles nested structures including:
    - Strings with ${VAR_NAME} or ${VAR_NAME:default} syntax
    - Nested dictionaries
    - Nested lists

    Args:
        value: Configuration value (string, dict, list, or primitive)

    Returns:
        Value with all environment variables expanded
    """
    if isinstance(value, str):
        pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

        def replace_env_var(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def parse_bool(value: Any, field_name: str) -> bool:
    """Read a boolean that may arrive as a string (YAML quoting, env expansion).

    Raises:
        ConfigValidationError: If value is neither a bool nor a string
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    raise ConfigValidationError(
        f"{field_name} must be true or false", field=field_name, value=value
    )


def _apply_env_overrides(config: "Config") -> "Config":
    """Apply environment variable overrides to configuration."""
    level = os.environ.get("REPORTFORGE_LOG_LEVEL")
    if level:
        config.logging.level = level.upper()

    max_authors = os.environ.get("REPORTFORGE_MAX_AUTHORS")
    if max_authors:
        try:
            config.citation.max_authors = int(max_authors)
        except ValueError as e:
            raise ConfigValidationError(
                "REPORTFORGE_MAX_AUTHORS must be an integer",
                field="citation.max_authors",
                value=max_authors,
            ) from e

    strict = os.environ.get("REPORTFORGE_STRICT_CYCLES")
    if strict:
        config.authors.strict_cycles = parse_bool(strict, "authors.strict_cycles")

    # Re-run validation on overridden values
    config.__post_init__()
    return config


def _find_config_file(base_path: Path) -> Optional[Path]:
    """Return the first known config filename present in base_path."""
    for filename in CONFIG_FILENAMES:
        candidate = base_path / filename
        if candidate.exists():
            return candidate
    return None


def load_config(
    config_path: Optional[Path] = None, base_path: Optional[Path] = None
) -> "Config":
    """
    Load configuration from YAML file with environment variable overrides.

    A missing or unreadable file falls back to defaults with a warning;
    values that parse but fail validation raise ConfigValidationError.

    Args:
        config_path: Path to config file. Defaults to reportforge.yaml in base_path.
        base_path: Directory searched when config_path is not given.

    Returns:
        Config object with all settings.
    """
    from reportforge.core.config import Config

    if config_path is None:
        config_path = _find_config_file(base_path or Path.cwd())
        if config_path is None:
            return _apply_env_overrides(Config())

    if not config_path.exists():
        logger.warning("Config file not found, using defaults", path=config_path)
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(
            "Could not load config, using defaults", path=config_path, error=e
        )
        return _apply_env_overrides(Config())

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Config file {config_path} must contain a mapping", value=data
        )

    return _apply_env_overrides(Config.from_dict(data))


def save_config(config: "Config", config_path: Path) -> None:
    """Save configuration to YAML file."""
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
