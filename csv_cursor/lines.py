"""
Line-oriented file access for csv-cursor.

``LineFile`` is both the line source that hands the parser one row at
a time and the line sink that receives output text.  It keeps at most
one handle open and switches between reading and writing on demand:

- Entering read mode opens the file from the beginning.
- Entering write mode truncates the file.
- Switching modes closes the previous handle first.

Reads use ``utf-8-sig`` so a BOM written by Excel (or by ``export``)
is not glued onto the first field.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import IO, Iterator

from csv_cursor.exceptions import InputExhaustedError

logger = logging.getLogger(__name__)


class _Mode(enum.Enum):
    READ = "read"
    WRITE = "write"


class LineFile:
    """Read or write a text file one line at a time.

    Example::

        with LineFile("people.csv") as source:
            while source.has_line():
                parser.set_text(source.read_line())
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._handle: IO[str] | None = None
        self._mode: _Mode | None = None
        # One line of lookahead for has_line(); "" marks end of file
        self._pending: str | None = None

    def __enter__(self) -> LineFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[str]:
        while self.has_line():
            yield self.read_line()

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def has_line(self) -> bool:
        """Return True if another line can be read."""
        self._set_mode(_Mode.READ)
        return self._peek() != ""

    def read_line(self) -> str:
        """Return the next line without its line terminator.

        Raises:
            InputExhaustedError: If the end of the file was reached.
        """
        self._set_mode(_Mode.READ)
        line = self._peek()
        if line == "":
            raise InputExhaustedError(f"No more lines in {self.path.name}")
        self._pending = None
        return line.rstrip("\n\r")

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Write *text* as-is and flush."""
        self._set_mode(_Mode.WRITE)
        self._handle.write(text)
        self._handle.flush()

    def write_line(self, text: str) -> None:
        """Write *text* followed by a newline and flush."""
        self.write(f"{text}\n")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the open handle, if any.  Safe to call repeatedly."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None
        self._mode = None
        self._pending = None

    def _set_mode(self, mode: _Mode) -> None:
        if mode is self._mode:
            return

        self.close()
        try:
            if mode is _Mode.READ:
                self._handle = open(self.path, "r", encoding="utf-8-sig")
            else:
                self._handle = open(self.path, "w", encoding="utf-8")
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"File {self.path.name} cannot be found") from exc

        logger.debug("Opened %s for %s", self.path, mode.value)
        self._mode = mode

    def _peek(self) -> str:
        if self._pending is None:
            self._pending = self._handle.readline()
        return self._pending
