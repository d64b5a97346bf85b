"""The validated Linux error number type."""

from __future__ import annotations

import ctypes
from typing import Any

from linux_errno.ints import CType, NonZero, bit_pattern, is_supported

ERRNO_MAX = 0xFFF
"""Largest error number the kernel hands back (``-4095 <= ret <= -1``)."""


class Error:
    """An error number returned from a Linux system call.

    Values are restricted to ``[1, 0xFFF]``. ``Error`` compares equal to
    plain ints, to the fixed-width ctypes integers in
    :data:`linux_errno.ints.SUPPORTED_TYPES` and to :class:`NonZero` values
    of those widths. Instances are only created through :meth:`new` and
    :meth:`new_unchecked`.
    """

    __slots__ = ("_errno",)

    _errno: int

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError("use Error.new() or Error.new_unchecked()")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError("Error is final and cannot be subclassed")

    @classmethod
    def new(cls, errno: int) -> Error | None:
        """Create an error from a raw error number.

        Returns ``None`` when ``errno`` is outside the permitted range
        ``[1, 0xFFF]``.
        """
        if isinstance(errno, bool) or not isinstance(errno, int):
            raise TypeError(f"errno must be an int, got {type(errno).__name__}")
        if errno < 1 or errno > ERRNO_MAX:
            return None
        return cls.new_unchecked(errno)

    @classmethod
    def new_unchecked(cls, errno: int) -> Error:
        """Create an error without checking the permitted range.

        The caller must ensure that ``0 < errno <= 0xFFF``. The check is an
        assertion only and is skipped under ``python -O``.
        """
        assert 0 < errno <= ERRNO_MAX, f"errno out of range: {errno}"
        err = object.__new__(cls)
        object.__setattr__(err, "_errno", errno)
        return err

    def get(self) -> int:
        """Return the error number as a plain int."""
        return self._errno

    def get_nonzero(self) -> NonZero:
        """Return the error number as a non-zero unsigned 16-bit integer."""
        return NonZero(self._errno, ctypes.c_uint16)

    def to(self, ctype: CType) -> Any:
        """Convert to a fixed-width ctypes integer. Lossless for every supported width."""
        return NonZero(self._errno, ctype).get()

    def to_nonzero(self, ctype: CType) -> NonZero:
        """Convert to a :class:`NonZero` of the given width."""
        return NonZero(self._errno, ctype)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Error is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Error is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Error):
            return self._errno == other._errno
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            return self._errno == other
        if isinstance(other, NonZero):
            return self._errno == other.bit_pattern()
        if is_supported(other):
            return self._errno == bit_pattern(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._errno)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self._errno < other._errno

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self._errno <= other._errno

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self._errno > other._errno

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self._errno >= other._errno

    def __int__(self) -> int:
        return self._errno

    def __index__(self) -> int:
        return self._errno

    def __bool__(self) -> bool:
        return True

    def __format__(self, format_spec: str) -> str:
        if format_spec and format_spec[-1] in "bdoxXn":
            return format(self._errno, format_spec)
        return format(repr(self), format_spec)

    def __repr__(self) -> str:
        from linux_errno.target import name_for

        name = name_for(self)
        if name is not None:
            return name
        return f"Error({self._errno})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (self._errno,))

    def __copy__(self) -> Error:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Error:
        return self


def _restore(errno: int) -> Error:
    return Error.new_unchecked(errno)


__all__ = ["ERRNO_MAX", "Error"]
