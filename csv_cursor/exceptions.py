"""
Custom exception hierarchy for csv-cursor.

Every error derives from ``CsvCursorError`` so callers can catch the
whole family at once.  The two parser errors also derive from the
matching built-in (``IndexError`` / ``ValueError``) so code written
against plain Python semantics keeps working.
"""


class CsvCursorError(Exception):
    """Base exception for all csv-cursor errors."""


class OutOfRangeError(CsvCursorError, IndexError):
    """Raised when the parser cursor falls outside the text buffer.

    This happens when:
    - ``next_string()`` finds no characters left after the trim phase.
    - ``set_cursor()`` fails its bounds check.
    """


class ParseError(CsvCursorError, ValueError):
    """Raised when a field cannot be converted to the requested numeric type.

    Attributes:
        text: The raw field text that failed to convert.
        target: The column type name that was requested (e.g. ``"short"``).
    """

    def __init__(self, message: str, text: str = "", target: str = "") -> None:
        super().__init__(message)
        self.text = text
        self.target = target


class RowError(CsvCursorError):
    """Raised when the table reader cannot turn one line into a row.

    The underlying ``OutOfRangeError`` / ``ParseError`` (if any) is
    chained as ``__cause__``.

    Attributes:
        reason: What went wrong, without the line prefix.
        line_number: 1-based line number within the source, or ``None``
            when the row was parsed outside a file context.
    """

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        prefix = f"Line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{reason}")
        self.reason = reason
        self.line_number = line_number


class ConfigValidationError(CsvCursorError):
    """Raised when a table config file is empty or inconsistent."""


class InputExhaustedError(CsvCursorError, EOFError):
    """Raised when a line file or prompt input stream has no more lines."""


class ExportError(CsvCursorError):
    """Raised when the exporter fails to write an output file.

    For example, permission errors, disk full, or unsupported format.
    """
