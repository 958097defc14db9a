"""Line scanning helpers shared by the corosync parsers."""

from __future__ import annotations

import codecs
import logging
from collections.abc import Sequence

from corosync.constants import DEFAULT_OUTPUT_ENCODING, UINT64_MAX

logger = logging.getLogger("corosync.parser")


def resolve_encoding(name: str | None) -> str:
    """Return ``name`` if Python knows the codec, the default encoding otherwise."""

    if not name:
        return DEFAULT_OUTPUT_ENCODING
    try:
        return codecs.lookup(name).name
    except LookupError:
        logger.warning("Unknown output encoding '%s', falling back to %s", name, DEFAULT_OUTPUT_ENCODING)
        return DEFAULT_OUTPUT_ENCODING


def split_lines(output: bytes | str | None, encoding: str = DEFAULT_OUTPUT_ENCODING) -> list[str]:
    """Decode tool output if needed and split it into lines."""

    if isinstance(output, (bytes, bytearray)):
        output = bytes(output).decode(resolve_encoding(encoding), errors="replace")
    return (output or "").splitlines()


def find_labelled(lines: Sequence[str], label: str) -> tuple[int, str] | None:
    """Return the 1-based line number and value of the first line starting with ``label``."""

    for number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if stripped.startswith(label):
            return number, stripped[len(label) :].strip()
    return None


def trailing_token(value: str) -> str:
    tokens = value.split()
    return tokens[-1] if tokens else ""


def parse_uint64(token: str) -> int:
    """Convert a plain decimal string to an unsigned 64-bit integer.

    Raises:
        ValueError: with a ``parsing "<token>": ...`` diagnostic when the token
            is not made of ASCII digits or does not fit in 64 bits.
    """

    if not token or not (token.isascii() and token.isdigit()):
        raise ValueError(f'parsing "{token}": invalid syntax')
    digits = token.lstrip("0") or "0"
    # int() refuses very long digit strings, so bound the length first
    if len(digits) > len(str(UINT64_MAX)) or int(digits) > UINT64_MAX:
        raise ValueError(f'parsing "{token}": value out of range')
    return int(digits)
