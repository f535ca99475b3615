"""Pure parsing and range checks for typed console input.

Nothing here reads or prints. Every function returns a ``ValidationResult``:
``Ok`` carries the parsed value, ``ParseError`` and ``RangeError`` carry the
message to show the user. The interactive retry loop in
``activity_system.validation.validator`` is layered on top of these.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, Generic, TypeVar, Union

from activity_system.utils.errors import ValidationError

T = TypeVar("T")

INVALID_INPUT_MESSAGE = "Invalid input! Try again."
YES_NO_MESSAGE = "Please type 'y' or 'n'."

YES_LITERALS = frozenset({"y", "yes"})
NO_LITERALS = frozenset({"n", "no"})

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successfully validated value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class ParseError:
    """The token could not be read as the requested type."""

    token: str
    message: str = INVALID_INPUT_MESSAGE

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise ValidationError(self.message)


@dataclass(frozen=True)
class RangeError:
    """The value parsed but falls outside the inclusive bounds."""

    value: Union[int, float]
    minimum: Union[int, float]
    maximum: Union[int, float]
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise ValidationError(self.message)


ValidationResult = Union[Ok[T], ParseError, RangeError]
Parser = Callable[[str], ValidationResult]


def format_bound(value: Union[int, float]) -> str:
    """Render a bound the way a person would type it (100, not 100.0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_int(token: str) -> ValidationResult:
    """Parse a whole token as a base-10 integer with an optional sign."""
    if not _INT_RE.fullmatch(token):
        return ParseError(token)
    return Ok(int(token))


def parse_float(token: str) -> ValidationResult:
    """Parse a whole token as a finite decimal number."""
    if not _FLOAT_RE.fullmatch(token):
        return ParseError(token)
    value = float(token)
    # "1e999" matches the pattern but overflows
    if not math.isfinite(value):
        return ParseError(token)
    return Ok(value)


def parse_text(token: str) -> ValidationResult:
    """Accept any non-empty token."""
    if not token:
        return ParseError(token)
    return Ok(token)


def parse_yes_no(token: str) -> ValidationResult:
    """Map y/yes to True and n/no to False, ignoring case."""
    answer = token.casefold()
    if answer in YES_LITERALS:
        return Ok(True)
    if answer in NO_LITERALS:
        return Ok(False)
    return ParseError(token, YES_NO_MESSAGE)


def check_choice(value: int, minimum: int, maximum: int) -> ValidationResult:
    """Inclusive range check worded for menu choices."""
    check_bounds(minimum, maximum)
    if minimum <= value <= maximum:
        return Ok(value)
    return RangeError(
        value,
        minimum,
        maximum,
        f"Choice must be {format_bound(minimum)}-{format_bound(maximum)}. Try again.",
    )


def check_range(value: float, minimum: float, maximum: float) -> ValidationResult:
    """Inclusive range check worded for numeric amounts."""
    check_bounds(minimum, maximum)
    if minimum <= value <= maximum:
        return Ok(value)
    return RangeError(
        value,
        minimum,
        maximum,
        f"Value must be between {format_bound(minimum)} and {format_bound(maximum)}. Try again.",
    )


def check_bounds(minimum, maximum) -> None:
    """Reject inverted bounds; that is a caller bug, not bad input."""
    if minimum > maximum:
        raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")


PARSERS: Dict[type, Parser] = {
    int: parse_int,
    float: parse_float,
    str: parse_text,
    bool: parse_yes_no,
}


def parser_for(kind) -> Parser:
    """Resolve a type (int, float, str, bool) or a custom parser callable."""
    if isinstance(kind, type):
        try:
            return PARSERS[kind]
        except KeyError:
            raise TypeError(f"No parser registered for {kind.__name__}") from None
    if callable(kind):
        return kind
    raise TypeError(f"Expected a type or a parser, got {kind!r}")
