"""Retry-until-valid console input.

Each read keeps prompting until the user supplies a value that parses and,
where bounds are given, lies inside them. There is no retry limit. Bad input
only ever produces an ``[ERROR]`` line and a fresh prompt; the exceptions
that escape are ``EOFError`` (input exhausted) and ``KeyboardInterrupt``.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO, TypeVar, Union

from rich.console import Console
from rich.text import Text

from activity_system.validation.reader import TokenReader, create_line_source
from activity_system.validation.results import (
    Ok,
    ParseError,
    check_bounds,
    check_choice,
    check_range,
    parse_float,
    parse_int,
    parse_yes_no,
    parser_for,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

YES_NO_SUFFIX = " (y/n): "
PAUSE_PROMPT = "\n>>> Press Enter to continue..."


class InputValidator:
    """Reads validated integers, reals and yes/no answers from the console."""

    def __init__(self, reader: TokenReader, console: Console, error_style: str = "red"):
        self.reader = reader
        self.console = console
        self.error_style = error_style

    @classmethod
    def from_console(cls, console: Console, stream: Optional[TextIO] = None, **kwargs) -> "InputValidator":
        """Build a validator reading from ``stream`` (stdin by default)."""
        reader = TokenReader(create_line_source(console, stream), console)
        return cls(reader, console, **kwargs)

    def error(self, message: str) -> None:
        """Print an ``[ERROR]`` line."""
        self.console.print(Text(f"[ERROR] {message}", style=self.error_style))

    def read_typed(self, prompt: str, kind) -> T:
        """Prompt until a token parses as ``kind``.

        ``kind`` is ``int``, ``float``, ``str``, ``bool`` (yes/no) or a parser
        returning a ValidationResult. A malformed token also throws away the
        rest of its line so the same bad input is not read twice.
        """
        parse = parser_for(kind)
        while True:
            token = self.reader.next_token(prompt)
            result = parse(token)
            if isinstance(result, Ok):
                return result.value

            logger.debug("Rejected token", extra={"token": token})
            if isinstance(result, ParseError):
                self.reader.discard_line()
            self.error(result.message)

    def read_choice(self, prompt: str, minimum: int, maximum: int) -> int:
        """Prompt until an integer in ``[minimum, maximum]`` is entered."""
        check_bounds(minimum, maximum)
        return self._read_bounded(prompt, parse_int, lambda v: check_choice(v, minimum, maximum))

    def read_range(self, prompt: str, minimum: float, maximum: float) -> float:
        """Prompt until a real number in ``[minimum, maximum]`` is entered."""
        check_bounds(minimum, maximum)
        return self._read_bounded(prompt, parse_float, lambda v: check_range(v, minimum, maximum))

    def read_yes_no(self, prompt: str) -> bool:
        return self.read_typed(prompt + YES_NO_SUFFIX, parse_yes_no)

    def pause(self) -> None:
        """Drop the rest of the current line and wait for Enter."""
        self.reader.wait_for_line(PAUSE_PROMPT)

    def _read_bounded(self, prompt: str, parse, check) -> Union[int, float]:
        while True:
            value = self.read_typed(prompt, parse)
            result = check(value)
            if isinstance(result, Ok):
                return result.value
            logger.debug("Rejected out-of-range value %s", value)
            self.error(result.message)
