"""Exceptions raised by linux_errno."""

from __future__ import annotations


class UnsupportedArchitectureError(RuntimeError):
    """Raised when no errno table is known for a machine identifier."""

    def __init__(self, machine: str) -> None:
        self.machine = machine
        super().__init__(
            f"Unsupported architecture {machine!r}: Linux error numbers are "
            "architecture-specific and no table is defined for it."
        )


__all__ = ["UnsupportedArchitectureError"]
