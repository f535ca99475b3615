"""Validated console input."""

from activity_system.validation.results import (
    Ok,
    ParseError,
    RangeError,
    ValidationResult,
    check_choice,
    check_range,
    parse_float,
    parse_int,
    parse_text,
    parse_yes_no,
)
from activity_system.validation.reader import StreamLineSource, TokenReader
from activity_system.validation.validator import InputValidator

__all__ = [
    "InputValidator",
    "Ok",
    "ParseError",
    "RangeError",
    "StreamLineSource",
    "TokenReader",
    "ValidationResult",
    "check_choice",
    "check_range",
    "parse_float",
    "parse_int",
    "parse_text",
    "parse_yes_no",
]
