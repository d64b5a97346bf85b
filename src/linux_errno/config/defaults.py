"""Explicit default settings for the lookup command."""

from __future__ import annotations

CLI_DEFAULTS: dict[str, object] = {
    "log_level": "WARNING",
    "structured_logging": False,
    "output": "text",
}
