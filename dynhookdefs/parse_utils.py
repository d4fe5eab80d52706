"""Small helpers for splitting and reading hook definition arguments."""

from __future__ import annotations

import re

_UINT64_MASK = (1 << 64) - 1
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DEC_RE = re.compile(r"\s*([+-]?)([0-9]*)")


def replace_char(text: str, old: str, new: str) -> str:
    """Return ``text`` with every ``old`` character replaced by ``new``."""
    return text.replace(old, new)


def split_args(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty pieces."""
    return [piece for piece in text.split(" ") if piece]


def _unsigned(sign: str, digits: str, base: int) -> int:
    if not digits:
        return 0
    value = int(digits, base)
    if value > _UINT64_MASK:
        return _UINT64_MASK
    if sign == "-":
        value = -value & _UINT64_MASK
    return value


def parse_hex(text: str) -> int:
    """Read a hexadecimal unsigned 64-bit number, leniently.

    Leading blanks, a sign and a ``0x`` prefix are accepted; reading stops
    at the first character that is not a hex digit. No digits give 0, an
    overflow gives the largest 64-bit value and a minus sign wraps around.
    """
    match = _HEX_RE.match(text)
    return _unsigned(match.group(1), match.group(2), 16)


def parse_decimal(text: str) -> int:
    """Read a decimal unsigned 64-bit number with the same leniency as :func:`parse_hex`."""
    match = _DEC_RE.match(text)
    return _unsigned(match.group(1), match.group(2), 10)