"""Log messages and whole logs built from rows of text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from lumberjack.fields import Field, FieldInfo


@dataclass
class LogMessage:
    """A single log entry made of ordered fields."""

    fields: list[Field] = field(default_factory=list)

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> "LogMessage":
        """Build a message whose fields are numbered in the order given."""
        return cls(
            [Field(FieldInfo(index), text) for index, text in enumerate(texts)]
        )


@dataclass
class Log:
    """An ordered collection of log messages."""

    messages: list[LogMessage] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[str]]) -> "Log":
        """Build a log with one message per row of texts."""
        return cls([LogMessage.from_texts(row) for row in rows])