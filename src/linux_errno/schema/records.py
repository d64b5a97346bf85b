"""Serialisable views of errno table rows."""

from __future__ import annotations

from pydantic import Field

from linux_errno.enums import Architecture
from linux_errno.error import ERRNO_MAX
from linux_errno.schema.base import TypedBaseModel
from linux_errno.table import ErrnoSpec


class ErrnoRecord(TypedBaseModel):
    """One named error number of one architecture, as emitted by the CLI."""

    arch: Architecture = Field(..., description="Architecture family of the table")
    name: str = Field(..., pattern=r"^E[A-Z0-9]+$", description="Symbolic errno name")
    code: int = Field(..., ge=1, le=ERRNO_MAX, description="Numeric error number")
    description: str = Field(..., description="Description from the kernel header")
    alias_of: str | None = Field(
        None, description="Name this entry aliases, when it is not the primary name"
    )

    @classmethod
    def from_spec(cls, arch: Architecture, spec: ErrnoSpec) -> ErrnoRecord:
        return cls(
            arch=arch,
            name=spec.name,
            code=spec.value,
            description=spec.description,
            alias_of=spec.alias_of,
        )
