"""
Field cursor parser for csv-cursor.

``FieldCursorParser`` owns one text buffer and an integer cursor into
it.  Fields are read one at a time, left to right:

1. **Trim phase** -- skip every ``','`` and ``' '`` at the cursor.
   Consecutive commas are therefore collapsed: ``"1,,3"`` yields
   ``"1"`` then ``"3"``, never ``""``.  (``ParserConfig.skip_empty_fields
   = False`` skips spaces only, so the empty field comes back as ``""``.)
2. **Bounds check** -- nothing left to read raises ``OutOfRangeError``.
3. **Accumulation** -- collect characters up to the next ``','`` or
   ``'\\n'``.  The delimiter is consumed but not returned.

The parser has two states: *positioned* (cursor inside the buffer) and
*exhausted*.  Only reads move it from positioned to exhausted; only
``set_text()`` / ``set_cursor()`` move it back.

Delimiters are fixed: ``','`` separates fields, ``'\\n'`` separates rows,
and only the plain space is trimmed (tabs are kept).  No quoting or
escaping is recognised.

A parser instance is not thread-safe: the cursor is shared state.
"""

from __future__ import annotations

import logging
from typing import Any

from csv_cursor.config import ColumnType, ParserConfig
from csv_cursor.exceptions import OutOfRangeError
from csv_cursor.numbers import (
    CONVERTERS,
    to_double,
    to_float,
    to_integer,
    to_long,
    to_short,
)

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
RECORD_SEPARATOR = "\n"
_SPACE = " "


class FieldCursorParser:
    """Sequential typed field reader over a single CSV text buffer.

    Args:
        text: The CSV text to parse.  May hold one row or several.
        config: Behaviour switches; defaults to ``ParserConfig()``.

    Example::

        parser = FieldCursorParser("a,b,c\\n1,2,3")
        parser.total_columns()   # 3
        parser.next_string()     # "a"
    """

    def __init__(self, text: str = "", config: ParserConfig | None = None) -> None:
        self._text = text
        self._cursor = 0
        self.config = config or ParserConfig()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(cursor={self._cursor}, "
            f"length={len(self._text)})"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def exhausted(self) -> bool:
        """True when the cursor does not point at a readable character."""
        return not 0 <= self._cursor < len(self._text)

    def set_text(self, text: str) -> None:
        """Replace the buffer and move the cursor back to the start."""
        self._text = text
        self._cursor = 0

    def set_cursor(self, position: int) -> None:
        """Move the cursor to *position*.

        With ``cursor_bounds="current"`` (the default) the bounds check
        is made against the cursor **before** the move, and *position*
        itself is not validated.  A bad target then surfaces as an
        ``OutOfRangeError`` on the next read.  An exhausted parser
        cannot be repositioned in this mode; use ``set_text()``.

        With ``cursor_bounds="target"`` the requested position must
        satisfy ``0 <= position < len(text)``.

        Raises:
            OutOfRangeError: If the bounds check fails.
        """
        if self.config.cursor_bounds == "target":
            if not 0 <= position < len(self._text):
                raise OutOfRangeError(
                    f"Cursor position {position} is outside the text "
                    f"(length {len(self._text)})"
                )
        elif self._cursor >= len(self._text):
            # Only the upper bound of the pre-move cursor is checked
            raise OutOfRangeError("Cursor exceeds the size of the text")
        self._cursor = position

    # ------------------------------------------------------------------
    # Structural inspection
    # ------------------------------------------------------------------

    def total_columns(self) -> int:
        """Count the columns of the first row of the buffer.

        Counts commas from the start of the buffer up to the first
        newline (or the end) and adds one.  An empty buffer has one
        column.  The cursor is not moved.
        """
        first_row = self._text.split(RECORD_SEPARATOR, 1)[0]
        return first_row.count(FIELD_SEPARATOR) + 1

    # ------------------------------------------------------------------
    # Field extraction
    # ------------------------------------------------------------------

    def next_string(self) -> str:
        """Read the next field as a string.

        Raises:
            OutOfRangeError: If no characters remain after the trim phase.
        """
        self._trim()
        self._check_bounds()

        text = self._text
        length = len(text)
        start = self._cursor
        end = start
        while end < length and text[end] not in (FIELD_SEPARATOR, RECORD_SEPARATOR):
            end += 1

        # Step past the delimiter, if the field was terminated by one
        self._cursor = end + 1 if end < length else end
        field = text[start:end]
        logger.debug("Read field %r (cursor %d -> %d)", field, start, self._cursor)
        return field

    def next_short(self) -> int:
        """Read the next field as a 16-bit integer.

        Raises:
            OutOfRangeError: If the buffer is exhausted.
            ParseError: If the field is not a valid short.
        """
        return to_short(self.next_string())

    def next_integer(self) -> int:
        """Read the next field as a 32-bit integer.

        Raises:
            OutOfRangeError: If the buffer is exhausted.
            ParseError: If the field is not a valid integer.
        """
        return to_integer(self.next_string())

    def next_long(self) -> int:
        """Read the next field as a 64-bit integer.

        Raises:
            OutOfRangeError: If the buffer is exhausted.
            ParseError: If the field is not a valid long.
        """
        return to_long(self.next_string())

    def next_float(self) -> float:
        """Read the next field as a single precision float.

        Raises:
            OutOfRangeError: If the buffer is exhausted.
            ParseError: If the field is not a valid float.
        """
        return to_float(self.next_string())

    def next_double(self) -> float:
        """Read the next field as a double precision float.

        Raises:
            OutOfRangeError: If the buffer is exhausted.
            ParseError: If the field is not a valid double.
        """
        return to_double(self.next_string())

    def next_value(self, column_type: ColumnType) -> Any:
        """Read the next field converted according to *column_type*."""
        try:
            converter = CONVERTERS[column_type]
        except KeyError:
            raise ValueError(
                f"Unknown column type: '{column_type}'. "
                f"Supported types: {list(CONVERTERS)}"
            ) from None
        return converter(self.next_string())

    def read_fields(self) -> list[str]:
        """Read every remaining field of the buffer as strings.

        Stops cleanly at exhaustion instead of raising.  Row boundaries
        are not respected: on a multi-row buffer the fields of all rows
        are returned in one list.
        """
        fields: list[str] = []
        while True:
            self._trim()
            if self.exhausted:
                return fields
            fields.append(self.next_string())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _trim(self) -> None:
        """Skip leading spaces (and commas, unless empty fields are kept)."""
        skipped = (
            (FIELD_SEPARATOR, _SPACE)
            if self.config.skip_empty_fields
            else (_SPACE,)
        )
        text = self._text
        while 0 <= self._cursor < len(text) and text[self._cursor] in skipped:
            self._cursor += 1

    def _check_bounds(self) -> None:
        if self.exhausted:
            raise OutOfRangeError("Cursor exceeds the size of the text")
