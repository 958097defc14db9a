"""Public helpers for parsing corosync status."""

from __future__ import annotations

from .models import Member, QuorumVotes, RingInfo, Status
from .parsers import ErrorKind, NotFoundError, NumericRangeError, ParserError, get_parser


def parse(ring_output: bytes | str, quorum_output: bytes | str) -> Status:
    """Parse ``corosync-cfgtool -s`` and ``corosync-quorumtool -p`` output with the default parser."""

    return get_parser().parse(ring_output, quorum_output)


__all__ = [
    "ErrorKind",
    "Member",
    "NotFoundError",
    "NumericRangeError",
    "ParserError",
    "QuorumVotes",
    "RingInfo",
    "Status",
    "get_parser",
    "parse",
]
