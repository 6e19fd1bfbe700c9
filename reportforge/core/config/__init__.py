"""
Configuration Management for ReportForge.

Configuration is a hierarchy of dataclasses that map to a YAML file, with
environment variable expansion for deployment-specific values.

    from reportforge.core.config import Config, load_config
    from reportforge.core.config import CitationConfig

    config = load_config()
    config.citation.max_authors
"""

from reportforge.core.config.base import (
    AuthorsConfig,
    CitationConfig,
    LoggingConfig,
    ShapingConfig,
)
from reportforge.core.config.config import Config
from reportforge.core.config_loaders import expand_env_vars, load_config, save_config

__all__ = [
    "Config",
    "CitationConfig",
    "ShapingConfig",
    "AuthorsConfig",
    "LoggingConfig",
    "expand_env_vars",
    "load_config",
    "save_config",
]
