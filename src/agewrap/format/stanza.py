"""Generic header stanza as produced by the external header tokenizer."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Stanza:
    """One recipient stanza: ``-> tag args...`` followed by a decoded body."""

    tag: str
    args: tuple[str, ...] = field(default_factory=tuple)
    body: bytes = b""

    @classmethod
    def create(cls, tag: str, args: Sequence[str], body: bytes) -> "Stanza":
        return cls(tag=tag, args=tuple(args), body=bytes(body))


class ParseStatus(str, Enum):
    NOT_THIS_TYPE = "not_this_type"
    MALFORMED = "malformed"
    OK = "ok"


@dataclass(frozen=True, slots=True)
class ParseOutcome(Generic[T]):
    """Result of parsing a stanza with one recipient type's parser."""

    status: ParseStatus
    value: Optional[T] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK

    @classmethod
    def success(cls, value: T) -> "ParseOutcome[T]":
        return cls(status=ParseStatus.OK, value=value)

    @classmethod
    def not_this_type(cls) -> "ParseOutcome[T]":
        return cls(status=ParseStatus.NOT_THIS_TYPE)

    @classmethod
    def malformed(cls, reason: str) -> "ParseOutcome[T]":
        return cls(status=ParseStatus.MALFORMED, reason=reason)


__all__ = ["ParseOutcome", "ParseStatus", "Stanza"]
