"""Shared Pydantic base class with consistent configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TypedBaseModel(BaseModel):
    """Centralized base for every serialisable record.

    Records describe immutable table data, so every schema is frozen and
    rejects unknown fields.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
