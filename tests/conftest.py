from __future__ import annotations

from collections.abc import Iterator
import io
import os
from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
sys.dont_write_bytecode = True
os.environ.setdefault("PYTHONDONTWRITEBYTECODE", "1")

from linux_errno.arch import TABLES  # noqa: E402
from linux_errno.config.env import TARGET_ARCH_ENV  # noqa: E402
from linux_errno.enums import Architecture  # noqa: E402
from linux_errno.table import ErrnoTable  # noqa: E402
from linux_errno.utilities.logger_manager import (  # noqa: E402
    LoggerConfig,
    LoggerManager,
)


@pytest.fixture
def clean_target_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove the target override for the test, restoring it afterwards."""
    monkeypatch.setenv(TARGET_ARCH_ENV, "placeholder")
    monkeypatch.delenv(TARGET_ARCH_ENV)
    yield


@pytest.fixture
def subprocess_env() -> dict[str, str]:
    """Environment for child interpreters that can import the package from src/."""
    env = dict(os.environ)
    env.pop(TARGET_ARCH_ENV, None)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = (
        str(SRC_ROOT) if not existing else os.pathsep.join([str(SRC_ROOT), existing])
    )
    return env


@pytest.fixture(params=list(Architecture), ids=lambda arch: arch.value)
def arch_table(request: pytest.FixtureRequest) -> tuple[Architecture, ErrnoTable]:
    arch = request.param
    return arch, TABLES[arch]


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger_manager(log_stream: io.StringIO) -> LoggerManager:
    return LoggerManager(
        "linux_errno.tests",
        LoggerConfig(log_level="DEBUG", structured_logging=True, stream=log_stream),
    )
