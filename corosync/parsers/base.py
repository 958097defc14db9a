"""Parser interfaces and errors for corosync tool outputs."""

from __future__ import annotations

from enum import Enum

from corosync.models import Status


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    NUMERIC_RANGE = "numeric_range"


class ParserError(RuntimeError):
    """Raised when tool output cannot be parsed into a status record."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line


class NotFoundError(ParserError):
    """A required line, label or section is missing from the output."""

    kind = ErrorKind.NOT_FOUND


class NumericRangeError(ParserError):
    """A numeric token is not a valid unsigned 64-bit integer."""

    kind = ErrorKind.NUMERIC_RANGE

    def __init__(self, message: str, *, value: str, line: int | None = None) -> None:
        super().__init__(message, line=line)
        self.value = value


class BaseParser:
    """Base interface for corosync output parsers."""

    name: str = "base"

    def parse(self, ring_output: bytes | str, quorum_output: bytes | str) -> Status:
        raise NotImplementedError("Parsers must implement parse()")
