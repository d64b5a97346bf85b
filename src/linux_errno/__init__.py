"""Error numbers returned from Linux system calls.

On Linux, error numbers are architecture-specific. :mod:`linux_errno.arch`
provides the tables for every supported architecture; this module re-exports
the constants of the architecture the process targets, so
``linux_errno.EAGAIN`` is 11 on x86 and 35 on alpha.
"""

from __future__ import annotations

from linux_errno.enums import Architecture
from linux_errno.error import ERRNO_MAX, Error
from linux_errno.errors import UnsupportedArchitectureError
from linux_errno.ints import NonZero
from linux_errno.table import ErrnoSpec, ErrnoTable
from linux_errno.target import ARCHITECTURE, TABLE, name_for

__version__ = "1.0.0"

_EXPORTS = (
    "ARCHITECTURE",
    "ERRNO_MAX",
    "Architecture",
    "ErrnoSpec",
    "ErrnoTable",
    "Error",
    "NonZero",
    "TABLE",
    "UnsupportedArchitectureError",
    "name_for",
)

__all__ = [*_EXPORTS, *TABLE.names()]


def __getattr__(name: str) -> Error:
    constant = TABLE.get(name)
    if constant is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return constant


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(TABLE.names()))
