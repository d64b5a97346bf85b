"""Loads target-architecture configuration from the environment."""

from __future__ import annotations

import os
from pathlib import Path
import platform

from dotenv import load_dotenv

TARGET_ARCH_ENV = "LINUX_ERRNO_TARGET_ARCH"
"""Overrides host detection with an explicit machine identifier."""


def load_environment(dotenv_path: str | Path | None = None) -> None:
    """Load `.env` files when available to seed the target override."""
    path = Path(dotenv_path) if dotenv_path else Path(".env")
    if path.exists():
        load_dotenv(dotenv_path=path)


def configured_machine() -> str | None:
    """Return the machine identifier set in the environment, if any."""
    value = os.getenv(TARGET_ARCH_ENV, "").strip()
    return value or None


def target_machine() -> str:
    """Return the machine identifier whose errno numbering is active."""
    return configured_machine() or platform.machine()


__all__ = [
    "TARGET_ARCH_ENV",
    "configured_machine",
    "load_environment",
    "target_machine",
]
