"""Parser registry for corosync tool outputs."""

from __future__ import annotations

from corosync.constants import DEFAULT_PARSER

from .base import BaseParser, ErrorKind, NotFoundError, NumericRangeError, ParserError
from .corosync import (
    CorosyncParser,
    parse_members,
    parse_node_id,
    parse_quorate,
    parse_quorum_votes,
    parse_ring_id_and_seq,
    parse_rings,
)

_PARSER_CLASSES: dict[str, type[BaseParser]] = {
    CorosyncParser.name: CorosyncParser,
}


def get_parser(name: str = DEFAULT_PARSER) -> BaseParser:
    normalized = (name or "").lower()
    if normalized not in _PARSER_CLASSES:
        raise ParserError(f"No parser registered for '{name}'")
    parser_cls = _PARSER_CLASSES[normalized]
    return parser_cls()


__all__ = [
    "BaseParser",
    "CorosyncParser",
    "ErrorKind",
    "NotFoundError",
    "NumericRangeError",
    "ParserError",
    "get_parser",
    "parse_members",
    "parse_node_id",
    "parse_quorate",
    "parse_quorum_votes",
    "parse_ring_id_and_seq",
    "parse_rings",
]
