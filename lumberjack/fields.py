"""Fields of a log message and the column information they carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FieldInfo:
    """Position of a field within a message and an optional column name."""

    field_index: int
    name: Optional[str] = None


@dataclass(frozen=True)
class Field:
    """One piece of text from a log message, tagged with its column."""

    field_info: FieldInfo
    text: str