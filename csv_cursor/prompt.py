"""
Interactive prompting for csv-cursor.

``PromptService`` asks for a typed value, reads one line from its input
stream and repeats until the line converts.  Streams are passed in
explicitly (falling back to ``sys.stdin`` / ``sys.stdout`` when
omitted), so several services can run side by side and tests can feed
``io.StringIO`` objects.

Numeric prompts reuse the field converters from ``numbers``: the whole
line, stripped of surrounding whitespace, must be a valid literal.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, TextIO

from pydantic import BaseModel, Field

from csv_cursor.exceptions import InputExhaustedError, ParseError
from csv_cursor.numbers import to_double, to_float, to_integer, to_long, to_short

logger = logging.getLogger(__name__)

_TRUE_WORDS = {"true", "1"}
_FALSE_WORDS = {"false", "0"}


class PromptConfig(BaseModel):
    """What to show when asking for a value."""

    prompt: str = Field(..., description="Text written before reading input")
    on_invalid: str | None = Field(
        None, description="Text written after invalid input; None stays silent"
    )


class PromptService:
    """Ask for typed values on a text stream until valid input arrives.

    Every ``get_*`` method accepts either a prompt string plus an
    optional *on_invalid* message, or a ready-made ``PromptConfig``.

    Raises:
        InputExhaustedError: From any ``get_*`` method when the input
            stream ends before a valid value was read.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write(self, data: Any) -> None:
        self.stdout.write(str(data))
        self.stdout.flush()

    def write_line(self, data: Any) -> None:
        self.write(f"{data}\n")

    # ------------------------------------------------------------------
    # Typed prompts
    # ------------------------------------------------------------------

    def get_string(self, prompt: str | PromptConfig) -> str:
        """Return the next line as-is (empty lines included)."""
        config = _as_config(prompt, None)
        self.write(config.prompt)
        return self._read_line()

    def get_char(
        self, prompt: str | PromptConfig, on_invalid: str | None = None
    ) -> str:
        """Return the first character of the next non-blank line.

        Surrounding whitespace is ignored, so ``"  y"`` gives ``"y"``.
        """
        return self._ask(_as_config(prompt, on_invalid), _first_char)

    def get_short(
        self, prompt: str | PromptConfig, on_invalid: str | None = None
    ) -> int:
        return self._ask(_as_config(prompt, on_invalid), to_short)

    def get_integer(
        self, prompt: str | PromptConfig, on_invalid: str | None = None
    ) -> int:
        return self._ask(_as_config(prompt, on_invalid), to_integer)

    def get_long(
        self, prompt: str | PromptConfig, on_invalid: str | None = None
    ) -> int:
        return self._ask(_as_config(prompt, on_invalid), to_long)

    def get_float(
        self, prompt: str | PromptConfig, on_invalid: str | None = None
    ) -> float:
        return self._ask(_as_config(prompt, on_invalid), to_float)

    def get_double(
        self, prompt: str | PromptConfig, on_invalid: str | None = None
    ) -> float:
        return self._ask(_as_config(prompt, on_invalid), to_double)

    def get_boolean(
        self, prompt: str | PromptConfig, on_invalid: str | None = None
    ) -> bool:
        """Accept ``true``/``1`` or ``false``/``0``, case-insensitively."""
        return self._ask(_as_config(prompt, on_invalid), _to_boolean)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ask(self, config: PromptConfig, convert: Callable[[str], Any]) -> Any:
        while True:
            self.write(config.prompt)
            line = self._read_line()
            try:
                return convert(line.strip())
            except ParseError as exc:
                logger.debug("Rejected input %r: %s", line, exc)
                if config.on_invalid is not None:
                    self.write_line(config.on_invalid)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise InputExhaustedError("Input stream closed before a value was read")
        return line.rstrip("\n\r")


def _as_config(prompt: str | PromptConfig, on_invalid: str | None) -> PromptConfig:
    if isinstance(prompt, PromptConfig):
        return prompt
    return PromptConfig(prompt=prompt, on_invalid=on_invalid)


def _first_char(text: str) -> str:
    if not text:
        raise ParseError("Expected at least one character", text=text, target="char")
    return text[0]


def _to_boolean(text: str) -> bool:
    word = text.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ParseError(
        f"Cannot parse {text!r} as boolean", text=text, target="boolean"
    )
