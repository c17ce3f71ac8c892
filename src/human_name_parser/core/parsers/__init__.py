"""Name parser and its extraction stages."""

from .name_parser import HumanNameParser, parse_name
from .exceptions import (
    NameParsingError,
    FirstNameNotFound,
    LastNameNotFound,
    AmbiguousMatchError,
)
from .patterns import FlipPattern, NamePatterns, compile_patterns

__all__ = [
    "HumanNameParser",
    "parse_name",
    "NameParsingError",
    "FirstNameNotFound",
    "LastNameNotFound",
    "AmbiguousMatchError",
    "FlipPattern",
    "NamePatterns",
    "compile_patterns",
]
