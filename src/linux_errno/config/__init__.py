"""Configuration helpers for linux_errno."""

from __future__ import annotations

from .defaults import CLI_DEFAULTS
from .env import (
    TARGET_ARCH_ENV,
    configured_machine,
    load_environment,
    target_machine,
)

__all__ = [
    "CLI_DEFAULTS",
    "TARGET_ARCH_ENV",
    "configured_machine",
    "load_environment",
    "target_machine",
]
