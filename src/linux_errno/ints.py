"""Fixed-width and non-zero integer representations used when matching errnos.

Python integers are unbounded, so the fixed-width integer types that syscall
wrappers hand back are modelled with the ``ctypes`` simple types.
"""

from __future__ import annotations

import ctypes
from typing import Any

CType = type[ctypes._SimpleCData]  # type: ignore[name-defined]

SUPPORTED_TYPES: tuple[CType, ...] = (
    ctypes.c_int16,
    ctypes.c_uint16,
    ctypes.c_int32,
    ctypes.c_uint32,
    ctypes.c_int64,
    ctypes.c_uint64,
    ctypes.c_ssize_t,
    ctypes.c_size_t,
)
"""Widths an ``Error`` compares against: 16/32/64-bit and pointer-sized."""


def is_supported(value: Any) -> bool:
    """Return True when ``value`` is an instance of a supported width."""
    return isinstance(value, SUPPORTED_TYPES)


def bits(ctype: CType) -> int:
    """Return the width of ``ctype`` in bits."""
    return ctypes.sizeof(ctype) * 8


def bit_pattern(value: Any) -> int:
    """Reinterpret a fixed-width value as an unsigned integer of its own width."""
    return int(value.value) & ((1 << bits(type(value))) - 1)


def _check_ctype(ctype: Any) -> CType:
    if not (isinstance(ctype, type) and issubclass(ctype, SUPPORTED_TYPES)):
        raise TypeError(f"unsupported integer width: {ctype!r}")
    return ctype


class NonZero:
    """A fixed-width integer that is never zero.

    Accepts either a ctypes value (``NonZero(c_int32(110))``) or a plain int
    plus its width (``NonZero(110, c_int32)``). The stored value is copied,
    so later mutation of the ctypes instance has no effect.
    """

    __slots__ = ("_ctype", "_value")

    _ctype: CType
    _value: int

    def __init__(self, value: Any, ctype: CType | None = None) -> None:
        if ctype is None:
            if not is_supported(value):
                raise TypeError(
                    f"NonZero needs a supported ctypes value, got {type(value).__name__}"
                )
            ctype = type(value)
            raw = int(value.value)
        else:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"NonZero value must be an int, got {type(value).__name__}")
            # Truncate the same way ctypes does on assignment.
            raw = int(_check_ctype(ctype)(value).value)
        if raw == 0:
            raise ValueError("NonZero value must not be zero")
        object.__setattr__(self, "_ctype", ctype)
        object.__setattr__(self, "_value", raw)

    @classmethod
    def new(cls, value: Any, ctype: CType | None = None) -> NonZero | None:
        """Return a ``NonZero`` or ``None`` when the value is zero."""
        try:
            return cls(value, ctype)
        except ValueError:
            return None

    @property
    def value(self) -> int:
        return self._value

    @property
    def ctype(self) -> CType:
        return self._ctype

    def get(self) -> Any:
        """Return the value as a fresh instance of its ctypes width."""
        return self._ctype(self._value)

    def bit_pattern(self) -> int:
        return self._value & ((1 << bits(self._ctype)) - 1)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NonZero):
            return self._ctype is other._ctype and self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"NonZero({self._ctype.__name__}({self._value}))"

    def __reduce__(self) -> tuple[Any, ...]:
        return (NonZero, (self._value, self._ctype))


__all__ = [
    "SUPPORTED_TYPES",
    "NonZero",
    "bit_pattern",
    "bits",
    "is_supported",
]
