"""Helpers for the linux-errno command-line tool."""

from __future__ import annotations

from collections.abc import Iterable
import json

from linux_errno.enums import Architecture
from linux_errno.error import Error
from linux_errno.schema.records import ErrnoRecord
from linux_errno.table import ErrnoSpec, ErrnoTable
from linux_errno.target import resolve_architecture


def parse_architecture(value: str) -> Architecture:
    """Accept a family name (``powerpc``) or a machine identifier (``ppc64le``)."""
    try:
        return Architecture(value.strip().lower())
    except ValueError:
        return resolve_architecture(value)


def lookup(table: ErrnoTable, query: str) -> ErrnoSpec | None:
    """Resolve a numeric code or a symbolic name against ``table``.

    Numbers resolve to the primary name of the code; names resolve to their
    own row, aliases included.
    """
    text = query.strip()
    if text.isdecimal():
        err = Error.new(int(text))
        if err is None:
            return None
        return table.spec_for(err)
    name = text.upper()
    if name not in table:
        return None
    return table.spec(name)


def build_records(arch: Architecture, specs: Iterable[ErrnoSpec]) -> list[ErrnoRecord]:
    return [ErrnoRecord.from_spec(arch, spec) for spec in specs]


def render_text(records: Iterable[ErrnoRecord]) -> str:
    lines = []
    for record in records:
        line = f"{record.name} {record.code} {record.description}"
        if record.alias_of:
            line += f" (alias of {record.alias_of})"
        lines.append(line)
    return "\n".join(lines)


def render_json(records: Iterable[ErrnoRecord]) -> str:
    return json.dumps(
        [record.model_dump(mode="json") for record in records],
        indent=2,
        ensure_ascii=False,
    )
