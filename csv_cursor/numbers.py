"""
Numeric conversion for csv-cursor fields.

Turns the raw string of one field into a Python number of a given
width.  Used by the typed ``next_*`` readers of the parser, by the
table reader (through ``CONVERTERS``) and by the prompt service.

Rules:
- Integers (short / integer / long) must be a plain signed decimal:
  ``[+-]?[0-9]+``.  No whitespace, no ``_`` digit grouping, no
  thousand separators.  The value must fit the target width
  (16 / 32 / 64-bit two's complement).
- Doubles follow Python's ``float()`` grammar, minus the two things
  integers also refuse: surrounding whitespace and ``_`` digit grouping.
  A finite literal whose magnitude overflows to infinity is rejected;
  ``inf`` / ``nan`` spelled out are accepted.
- Floats are parsed as doubles, then rounded to IEEE-754 single
  precision.  Values beyond single-precision range are rejected.

Every failure raises ``ParseError``; nothing is coerced to a default.
"""

from __future__ import annotations

import math
import re
import struct
from typing import Any, Callable

from csv_cursor.exceptions import ParseError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Inclusive (min, max) per integer column type
_INTEGER_BOUNDS: dict[str, tuple[int, int]] = {
    "short": (-(2**15), 2**15 - 1),
    "integer": (-(2**31), 2**31 - 1),
    "long": (-(2**63), 2**63 - 1),
}


def _to_bounded_int(text: str, target: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ParseError(
            f"Cannot parse {text!r} as {target}: not a decimal integer",
            text=text,
            target=target,
        )
    value = int(text)
    low, high = _INTEGER_BOUNDS[target]
    if not low <= value <= high:
        raise ParseError(
            f"Cannot parse {text!r} as {target}: value out of range [{low}, {high}]",
            text=text,
            target=target,
        )
    return value


def to_short(text: str) -> int:
    """Parse a 16-bit signed integer."""
    return _to_bounded_int(text, "short")


def to_integer(text: str) -> int:
    """Parse a 32-bit signed integer."""
    return _to_bounded_int(text, "integer")


def to_long(text: str) -> int:
    """Parse a 64-bit signed integer."""
    return _to_bounded_int(text, "long")


def to_double(text: str) -> float:
    """Parse a 64-bit floating point number.

    Raises:
        ParseError: If *text* is not a float literal, or is a finite
            literal too large to represent (e.g. ``"1e400"``).
    """
    if text != text.strip() or "_" in text:
        raise ParseError(
            f"Cannot parse {text!r} as double: whitespace or '_' not allowed",
            text=text,
            target="double",
        )
    try:
        value = float(text)
    except ValueError as exc:
        raise ParseError(
            f"Cannot parse {text!r} as double", text=text, target="double"
        ) from exc
    if math.isinf(value) and "inf" not in text.lower():
        raise ParseError(
            f"Cannot parse {text!r} as double: magnitude out of range",
            text=text,
            target="double",
        )
    return value


def to_float(text: str) -> float:
    """Parse a 32-bit floating point number.

    The result is a Python ``float`` holding the nearest single
    precision value, e.g. ``to_float("0.1") != 0.1``.
    """
    try:
        value = to_double(text)
    except ParseError as exc:
        raise ParseError(
            f"Cannot parse {text!r} as float", text=text, target="float"
        ) from exc
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ParseError(
            f"Cannot parse {text!r} as float: magnitude out of range",
            text=text,
            target="float",
        ) from exc


def to_string(text: str) -> str:
    return text


# Column type name -> converter.  Keys match ``config.ColumnType``.
CONVERTERS: dict[str, Callable[[str], Any]] = {
    "string": to_string,
    "short": to_short,
    "integer": to_integer,
    "long": to_long,
    "float": to_float,
    "double": to_double,
}
