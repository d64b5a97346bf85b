"""Logger manager with coloured console output and optional JSON records.

The errno core never logs; this module configures logging for the
command-line tool and for anyone embedding it.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import datetime
import json
import logging
from logging import Handler, Logger, LogRecord, getLevelName
import sys
from typing import Any, ClassVar

import colorlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggerConfig:
    """Configuration for LoggerManager."""

    log_level: str = "WARNING"
    structured_logging: bool = False
    log_colors: dict[str, str] | None = None
    stream: Any = None

    DEFAULT_LOG_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    }

    def __post_init__(self) -> None:
        """Normalize and validate configuration."""
        self.log_level = self.log_level.upper()
        if not isinstance(getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        self.log_colors = self.log_colors or self.DEFAULT_LOG_COLORS


class StructuredFormatter(logging.Formatter):
    """Render each record as one JSON object."""

    def format(self, record: LogRecord) -> str:
        log_data = {
            "timestamp": datetime.datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
            "context": getattr(record, "context", {}),
        }
        return json.dumps(log_data, ensure_ascii=False, default=str)


class _ContextFilter(logging.Filter):
    """Attach the active context mapping to records that carry none."""

    def __init__(self) -> None:
        super().__init__()
        self.context: dict[str, Any] = {}

    def filter(self, record: LogRecord) -> bool:
        if self.context and not hasattr(record, "context"):
            record.context = dict(self.context)
        return True


class LoggerManager:
    """Configures one named logger with a single console handler."""

    def __init__(
        self,
        name: str | LoggerConfig = "linux_errno",
        config: LoggerConfig | None = None,
    ) -> None:
        """Initialize LoggerManager with a name and configuration."""
        if isinstance(name, LoggerConfig):
            config = name
            name = "linux_errno"
        self.name = name
        self.config = config or LoggerConfig()
        self._context_filter = _ContextFilter()
        self._handler = self._build_handler()
        self._logger = self._configure_logger()

    def get_logger(self) -> Logger:
        """Return the configured logger."""
        return self._logger

    def _build_handler(self) -> Handler:
        stream = self.config.stream or sys.stderr
        if self.config.structured_logging:
            handler: Handler = logging.StreamHandler(stream)
            handler.setFormatter(StructuredFormatter())
        else:
            handler = colorlog.StreamHandler(stream)
            handler.setFormatter(
                colorlog.ColoredFormatter(
                    "%(log_color)s[%(levelname)s] %(name)s: %(message)s",
                    log_colors=self.config.log_colors,
                )
            )
        handler.addFilter(self._context_filter)
        return handler

    def _configure_logger(self) -> Logger:
        """Replace any handler installed by a previous manager of the same name."""
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            if getattr(handler, "_linux_errno_managed", False):
                logger.removeHandler(handler)
        self._handler._linux_errno_managed = True  # type: ignore[attr-defined]
        logger.addHandler(self._handler)
        logger.setLevel(getLevelName(self.config.log_level))
        logger.propagate = False
        return logger

    @contextmanager
    def context(self, **context_kwargs: Any) -> Iterator[Logger]:
        """Attach ``context_kwargs`` to every record logged inside the block."""
        previous = self._context_filter.context
        self._context_filter.context = {**previous, **context_kwargs}
        try:
            yield self._logger
        finally:
            self._context_filter.context = previous

    def flush(self) -> None:
        """Flush the console handler."""
        self._handler.flush()
