"""Pydantic schemas for linux_errno."""

from __future__ import annotations

from .base import TypedBaseModel
from .records import ErrnoRecord

__all__ = ["ErrnoRecord", "TypedBaseModel"]
