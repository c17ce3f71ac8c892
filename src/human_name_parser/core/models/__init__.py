"""Core data models for name parsing."""

from .parsed_name import ParsedName
from .options import (
    ParserOptions,
    DEFAULT_SUFFIXES,
    DEFAULT_PREFIXES,
    DEFAULT_ACADEMIC_TITLES,
)
from .validators import (
    to_str,
    to_list,
    none_to_empty,
    empty_to_none,
    normalize,
    to_word_set,
)

__all__ = [
    "ParsedName",
    "ParserOptions",
    "DEFAULT_SUFFIXES",
    "DEFAULT_PREFIXES",
    "DEFAULT_ACADEMIC_TITLES",
    "to_str",
    "to_list",
    "none_to_empty",
    "empty_to_none",
    "normalize",
    "to_word_set",
]
