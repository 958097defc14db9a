"""Parser for ``corosync-cfgtool -s`` and ``corosync-quorumtool -p`` output."""

from __future__ import annotations

import logging
from typing import Any

from corosync.constants import (
    DEFAULT_OUTPUT_ENCODING,
    EXPECTED_VOTES_LABEL,
    HIGHEST_EXPECTED_LABEL,
    LOCAL_MARKER,
    MEMBERSHIP_HEADER,
    MEMBERSHIP_ID_COLUMN,
    MEMBERSHIP_NAME_COLUMN,
    MEMBERSHIP_VOTES_COLUMN,
    NODE_ID_LABEL,
    OUTPUT_ENCODING_ENV_VAR,
    QUORATE_LABEL,
    QUORATE_TRUE,
    QUORUM_LABEL,
    RING_ADDRESS_KEY,
    RING_FAULTY_MARKER,
    RING_ID_LABEL,
    RING_ID_SEPARATOR,
    RING_MARKER,
    RING_STATUS_KEY,
    TOTAL_VOTES_LABEL,
)
from corosync.env import get_env
from corosync.models import Member, QuorumVotes, RingInfo, Status

from .base import BaseParser, NotFoundError, NumericRangeError, ParserError
from .text import find_labelled, parse_uint64, resolve_encoding, split_lines, trailing_token

logger = logging.getLogger("corosync.parser")

_VOTE_FIELDS = {
    "expected_votes": EXPECTED_VOTES_LABEL,
    "highest_expected": HIGHEST_EXPECTED_LABEL,
    "total_votes": TOTAL_VOTES_LABEL,
    "quorum": QUORUM_LABEL,
}


def parse_rings(ring_output: bytes | str, *, encoding: str = DEFAULT_OUTPUT_ENCODING) -> list[RingInfo]:
    """Extract every ``RING ID`` block in the order it was printed.

    A ring is faulty when its ``status`` line mentions FAULTY. Output without
    any ring block yields an empty list.
    """

    blocks: list[dict[str, Any]] = []
    for line in split_lines(ring_output, encoding):
        stripped = line.strip()
        if stripped.startswith(RING_MARKER):
            tokens = stripped[len(RING_MARKER) :].split()
            blocks.append({"number": tokens[0] if tokens else "", "address": "", "faulty": False})
            continue
        if not blocks:
            continue

        key, separator, value = stripped.partition("=")
        if not separator:
            continue
        key = key.strip()
        if key == RING_ADDRESS_KEY:
            blocks[-1]["address"] = value.strip()
        elif key == RING_STATUS_KEY:
            blocks[-1]["faulty"] = RING_FAULTY_MARKER in value

    logger.debug("Found %d ring(s) in ring status output", len(blocks))
    return [RingInfo(**block) for block in blocks]


def parse_node_id(quorum_output: bytes | str, *, encoding: str = DEFAULT_OUTPUT_ENCODING) -> str:
    found = find_labelled(split_lines(quorum_output, encoding), NODE_ID_LABEL)
    node_id = trailing_token(found[1]) if found else ""
    if not node_id:
        raise NotFoundError("could not find Node ID line", line=found[0] if found else None)
    return node_id


def parse_ring_id_and_seq(quorum_output: bytes | str, *, encoding: str = DEFAULT_OUTPUT_ENCODING) -> tuple[str, int]:
    """Split the ``Ring ID: <ringid>/<seq>`` value into its id and sequence."""

    found = find_labelled(split_lines(quorum_output, encoding), RING_ID_LABEL)
    if found is None:
        raise NotFoundError("could not find Ring ID line")

    line_number, value = found
    ring_id, separator, seq_token = value.partition(RING_ID_SEPARATOR)
    if not separator:
        raise NotFoundError("could not find Ring ID line", line=line_number)

    try:
        seq = parse_uint64(seq_token.strip())
    except ValueError as exc:
        raise NumericRangeError(
            f"could not parse seq number to uint64: {exc}", value=seq_token.strip(), line=line_number
        ) from exc
    return ring_id.strip(), seq


def parse_quorate(quorum_output: bytes | str, *, encoding: str = DEFAULT_OUTPUT_ENCODING) -> bool:
    found = find_labelled(split_lines(quorum_output, encoding), QUORATE_LABEL)
    if found is None:
        raise NotFoundError("could not find Quorate line")
    return trailing_token(found[1]) == QUORATE_TRUE


def parse_quorum_votes(quorum_output: bytes | str, *, encoding: str = DEFAULT_OUTPUT_ENCODING) -> QuorumVotes:
    """Read the four votequorum counters, which may appear in any order."""

    lines = split_lines(quorum_output, encoding)
    located = {field: find_labelled(lines, label) for field, label in _VOTE_FIELDS.items()}
    if any(found is None for found in located.values()):
        raise NotFoundError("could not find quorum votes numbers")

    votes: dict[str, int] = {}
    for field, (line_number, value) in located.items():
        token = trailing_token(value)
        try:
            votes[field] = parse_uint64(token)
        except ValueError as exc:
            raise NumericRangeError(
                f"could not parse vote number to uint64: {exc}", value=token, line=line_number
            ) from exc
    return QuorumVotes(**votes)


def parse_members(
    quorum_output: bytes | str, node_id: str | None = None, *, encoding: str = DEFAULT_OUTPUT_ENCODING
) -> list[Member]:
    """Parse the rows of the ``Membership information`` table.

    The column header decides where the vote count and the name sit, which
    keeps the optional ``Qdevice`` column out of the name. A row is local when
    it carries the ``(local)`` marker or, if ``node_id`` is given, when its id
    matches it.
    """

    lines = split_lines(quorum_output, encoding)
    start = next((index for index, line in enumerate(lines) if line.strip().startswith(MEMBERSHIP_HEADER)), None)
    if start is None:
        raise NotFoundError("could not find membership information")

    columns: list[str] = []
    index = start + 1
    while index < len(lines):
        stripped = lines[index].strip()
        index += 1
        if not stripped:
            break
        if set(stripped) == {"-"}:
            continue
        columns = stripped.split()
        break

    if not columns:
        return []
    if (
        columns[0] != MEMBERSHIP_ID_COLUMN
        or MEMBERSHIP_VOTES_COLUMN not in columns
        or MEMBERSHIP_NAME_COLUMN not in columns
    ):
        raise NotFoundError("could not find membership information", line=index)

    votes_index = columns.index(MEMBERSHIP_VOTES_COLUMN)
    name_index = columns.index(MEMBERSHIP_NAME_COLUMN)

    members: list[Member] = []
    for line_number in range(index + 1, len(lines) + 1):
        tokens = lines[line_number - 1].split()
        if not tokens:
            break

        local = tokens[-1] == LOCAL_MARKER
        if local:
            tokens.pop()

        votes_token = tokens[votes_index] if len(tokens) > votes_index else ""
        try:
            votes = parse_uint64(votes_token)
        except ValueError as exc:
            raise NumericRangeError(
                f"could not parse vote number to uint64: {exc}", value=votes_token, line=line_number
            ) from exc

        if len(tokens) > name_index:
            name = " ".join(tokens[name_index:])
        elif len(tokens) > votes_index + 1:
            # columns between Votes and Name (Qdevice) are blank on some rows
            name = tokens[-1]
        else:
            raise NotFoundError("could not find member name", line=line_number)

        member_id = tokens[0]
        if node_id is not None and member_id == node_id:
            local = True
        members.append(Member(id=member_id, name=name, local=local, votes=votes))

    logger.debug("Found %d member(s) in membership information", len(members))
    return members


class CorosyncParser(BaseParser):
    """Combine ``corosync-cfgtool -s`` and ``corosync-quorumtool -p`` output into a Status."""

    name = "corosync"

    def __init__(self, encoding: str | None = None) -> None:
        # read once per parser instance
        self.encoding = resolve_encoding(encoding or get_env(OUTPUT_ENCODING_ENV_VAR))

    def parse(self, ring_output: bytes | str, quorum_output: bytes | str) -> Status:
        encoding = self.encoding
        rings = parse_rings(ring_output, encoding=encoding)
        try:
            node_id = parse_node_id(quorum_output, encoding=encoding)
            ring_id, seq = parse_ring_id_and_seq(quorum_output, encoding=encoding)
            quorate = parse_quorate(quorum_output, encoding=encoding)
            quorum_votes = parse_quorum_votes(quorum_output, encoding=encoding)
            members = parse_members(quorum_output, node_id=node_id, encoding=encoding)
        except ParserError as exc:
            logger.debug("Failed to parse quorum status output (line %s): %s", exc.line, exc)
            raise

        return Status(
            rings=tuple(rings),
            node_id=node_id,
            ring_id=ring_id,
            seq=seq,
            quorate=quorate,
            quorum_votes=quorum_votes,
            members=tuple(members),
        )
