"""NMEA 0183 telegram helpers: checksums and coordinate notation."""

from __future__ import annotations

import re

__all__ = ["nmea_checksum", "has_valid_checksum", "degree_minutes_to_degrees"]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``; raise ValueError if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    return int(match.group(1))


def _parse_float(text: str) -> float:
    """Parse the leading decimal number of ``text``; raise ValueError if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at start of {text!r}")
    return float(match.group(1))


def _int_or_zero(text: str) -> int:
    try:
        return _parse_int(text)
    except ValueError:
        return 0


def _float_or_zero(text: str) -> float:
    try:
        return _parse_float(text)
    except ValueError:
        return 0.0


def nmea_checksum(body: str) -> int:
    """XOR of all characters between the leading '$' and the '*'."""
    result = 0
    for char in body:
        result ^= ord(char)
    return result


def has_valid_checksum(telegram: str) -> bool:
    """Return whether a complete ``$...*HH`` telegram carries a matching checksum.

    The calculated checksum is rendered as upper-case hexadecimal without
    zero padding before it is compared with the two characters after '*'.
    """
    if len(telegram) < 3 or telegram[0] != "$" or telegram[-3] != "*":
        return False
    expected = telegram[-2:]
    body = telegram[1:-3]
    return format(nmea_checksum(body), "X") == expected


def degree_minutes_to_degrees(degree_minutes: str) -> float:
    """Convert NMEA ``dddmm.mmmm`` notation to decimal degrees.

    Unparseable parts count as zero, so an empty field yields 0.0.
    """
    dot = degree_minutes.find(".")
    if dot < 2:
        # Without two minute digits before the point the whole text is read
        # as degrees and the minutes are taken as zero.
        return float(_int_or_zero(degree_minutes))
    degrees = _int_or_zero(degree_minutes[: dot - 2])
    minutes = _float_or_zero(degree_minutes[dot - 2 :])
    return degrees + minutes / 60