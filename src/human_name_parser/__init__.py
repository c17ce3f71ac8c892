"""Human Name Parser - split a free-form human name into its parts."""

from .core.models import ParsedName, ParserOptions
from .core.parsers import (
    HumanNameParser,
    parse_name,
    NameParsingError,
    FirstNameNotFound,
    LastNameNotFound,
    AmbiguousMatchError,
)
from .pipelines.name_parsing import parse_name_strings, parse_name_file

__version__ = "0.1.0"

__all__ = [
    "ParsedName",
    "ParserOptions",
    "HumanNameParser",
    "parse_name",
    "NameParsingError",
    "FirstNameNotFound",
    "LastNameNotFound",
    "AmbiguousMatchError",
    "parse_name_strings",
    "parse_name_file",
]
