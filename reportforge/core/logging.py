"""
Structured Logging for ReportForge.

Every module logs through get_logger(__name__). Messages carry key=value
fields after the text, either bound to the logger or passed per call:

    logger = get_logger(__name__)
    logger.warning("Publication subtype not known", kind="Thesis")
    # Publication subtype not known | kind=Thesis

Console output goes to stderr through rich, so command output on stdout
stays clean.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "INFO"
    file_path: Optional[Path] = None
    console: bool = True


def _console_handler() -> logging.Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


class StructuredLogger:
    """Wraps a stdlib logger and appends key=value fields to messages."""

    def __init__(self, name: str, config: Optional[LogConfig] = None) -> None:
        self.logger = logging.getLogger(name)
        self.config = config or _default_config
        self._context: dict[str, Any] = {}
        self._setup_logger()

    def _setup_logger(self) -> None:
        level = getattr(logging, self.config.level.upper(), logging.INFO)
        self.logger.setLevel(level)

        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        handlers = []
        if self.config.console:
            handlers.append(_console_handler())
        if self.config.file_path:
            handlers.append(_file_handler(self.config.file_path))
        for handler in handlers:
            handler.setLevel(level)
            self.logger.addHandler(handler)

    def bind(self, **kwargs: Any) -> "StructuredLogger":
        """Attach fields to every subsequent message."""
        self._context.update(kwargs)
        return self

    def unbind(self, *keys: str) -> "StructuredLogger":
        """Drop bound fields."""
        for key in keys:
            self._context.pop(key, None)
        return self

    def _format_message(self, message: str, **kwargs: Any) -> str:
        fields = {**self._context, **kwargs}
        if not fields:
            return message
        return " | ".join([message] + [f"{k}={v}" for k, v in fields.items()])

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(self._format_message(message, **kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(self._format_message(message, **kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(self._format_message(message, **kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(self._format_message(message, **kwargs))


_default_config = LogConfig()
_loggers: dict[str, StructuredLogger] = {}


def get_logger(name: str, config: Optional[LogConfig] = None) -> StructuredLogger:
    """
    Get or create a structured logger.

    Args:
        name: Logger name (typically __name__).
        config: Configuration used when the logger is first created.

    Returns:
        Cached StructuredLogger for name.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, config)
    return _loggers[name]


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    console: bool = True,
) -> None:
    """
    Set the logging level and outputs for every ReportForge logger.

    Loggers already handed out by get_logger() are reconfigured in place;
    later ones pick up the same settings.
    """
    global _default_config
    _default_config = LogConfig(level=level, file_path=log_file, console=console)

    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
    for structured in _loggers.values():
        structured.config = _default_config
        structured._setup_logger()
