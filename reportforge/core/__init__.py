"""
Core Infrastructure for ReportForge.

Architecture Position
---------------------
    CLI (outermost)
      └── Feature Modules (authors, citation)
            └── Domain + Shared (records, loader, text shaping)
                  └── **Core** (innermost - you are here)

Components
----------
**Configuration (config/)**
    Nested dataclasses with YAML persistence and ${VAR_NAME} expansion.

**Logging (logging.py)**
    Structured logging with context binding, rendered through rich.

**Exceptions (exceptions.py)**
    ReportForgeError hierarchy carrying error codes and fix suggestions.
"""

from reportforge.core.exceptions import (
    ConfigValidationError,
    EventCycleError,
    RecordValidationError,
    ReportForgeError,
)
from reportforge.core.logging import configure_logging, get_logger

__all__ = [
    "ReportForgeError",
    "EventCycleError",
    "RecordValidationError",
    "ConfigValidationError",
    "configure_logging",
    "get_logger",
]
