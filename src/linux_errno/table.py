"""Declarative per-architecture errno tables with reverse lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from linux_errno.error import ERRNO_MAX, Error


@dataclass(frozen=True)
class ErrnoSpec:
    """One row of an architecture listing.

    Alias rows set ``alias_of`` and leave ``value`` as ``None``; the value is
    copied from the aliased row when the table is built.
    """

    name: str
    value: int | None
    description: str
    alias_of: str | None = None

    @classmethod
    def alias(cls, name: str, alias_of: str, description: str) -> ErrnoSpec:
        return cls(name, None, description, alias_of)


class ErrnoTable:
    """Closed set of named error numbers for one architecture.

    Rows keep their canonical listing order. When several names share a
    value, :meth:`name_for` returns the one declared first; later names
    remain reachable as constants but never win the reverse lookup.
    """

    __slots__ = ("name", "_constants", "_specs", "_names")

    name: str
    _constants: Mapping[str, Error]
    _specs: Mapping[str, ErrnoSpec]
    _names: Mapping[int, str]

    def __init__(self, name: str, specs: Iterable[ErrnoSpec | tuple[str, int, str]]) -> None:
        rows: dict[str, ErrnoSpec] = {}
        constants: dict[str, Error] = {}
        names: dict[int, str] = {}
        for item in specs:
            spec = item if isinstance(item, ErrnoSpec) else ErrnoSpec(*item)
            if spec.name in rows:
                raise ValueError(f"{name}: duplicate errno name {spec.name}")
            value = spec.value
            if spec.alias_of is not None:
                target = rows.get(spec.alias_of)
                if target is None:
                    raise ValueError(
                        f"{name}: {spec.name} aliases unknown errno {spec.alias_of}"
                    )
                value = target.value
                spec = ErrnoSpec(spec.name, value, spec.description, spec.alias_of)
            if value is None or not 0 < value <= ERRNO_MAX:
                raise ValueError(f"{name}: {spec.name} has invalid value {value!r}")
            rows[spec.name] = spec
            constants[spec.name] = Error.new_unchecked(value)
            names.setdefault(value, spec.name)

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "_specs", MappingProxyType(rows))
        object.__setattr__(self, "_constants", MappingProxyType(constants))
        object.__setattr__(self, "_names", MappingProxyType(names))

    def derive(self, name: str, specs: Iterable[ErrnoSpec | tuple[str, int, str]]) -> ErrnoTable:
        """Build a new table from this one.

        Rows naming an existing constant replace it in place; new names are
        appended after the inherited rows.
        """
        overrides: dict[str, ErrnoSpec] = {}
        for item in specs:
            spec = item if isinstance(item, ErrnoSpec) else ErrnoSpec(*item)
            overrides[spec.name] = spec
        rows = [overrides.pop(spec.name, spec) for spec in self._specs.values()]
        rows.extend(overrides.values())
        return ErrnoTable(name, rows)

    def name_for(self, err: Error) -> str | None:
        """Return the primary name of ``err`` in this table, or ``None``."""
        return self._names.get(err.get())

    def spec(self, name: str) -> ErrnoSpec:
        """Return the listing row for ``name``; raises ``KeyError`` if unknown."""
        return self._specs[name]

    def spec_for(self, err: Error) -> ErrnoSpec | None:
        """Return the row of the primary name for ``err``, or ``None``."""
        name = self.name_for(err)
        if name is None:
            return None
        return self._specs[name]

    def get(self, name: str) -> Error | None:
        return self._constants.get(name)

    def names(self) -> tuple[str, ...]:
        """All names, aliases included, in canonical order."""
        return tuple(self._constants)

    def specs(self) -> tuple[ErrnoSpec, ...]:
        return tuple(self._specs.values())

    def constants(self) -> Mapping[str, Error]:
        """Read-only name-to-constant mapping."""
        return self._constants

    def __getitem__(self, name: str) -> Error:
        return self._constants[name]

    def __getattr__(self, name: str) -> Error:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._constants[name]
        except KeyError:
            raise AttributeError(f"{self.name} has no errno {name}") from None

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrnoTable is immutable")

    def __contains__(self, name: object) -> bool:
        return name in self._constants

    def __iter__(self) -> Iterator[str]:
        return iter(self._constants)

    def __len__(self) -> int:
        return len(self._constants)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._constants))

    def __repr__(self) -> str:
        return f"<ErrnoTable {self.name} ({len(self)} names)>"


__all__ = ["ErrnoSpec", "ErrnoTable"]
