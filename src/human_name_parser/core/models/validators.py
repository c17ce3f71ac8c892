"""Validation functions for data models."""

from typing import Any, List, Optional


def to_str(value: Any) -> str:
    """Convert value to string and strip whitespace."""
    return str(value).strip()


def to_list(value: Any) -> List[Any]:
    """Convert value to list if it's not already a list."""
    if isinstance(value, (tuple, set, frozenset)):
        return list(value)
    if not isinstance(value, list):
        return [value]
    return value


def none_to_empty(value: Any) -> Any:
    """Convert None to an empty string."""
    if value is None:
        return ""
    return value


def empty_to_none(value: Any) -> Optional[Any]:
    """Convert empty values to None."""
    if isinstance(value, str) and value == "":
        return None
    if isinstance(value, (tuple, list)) and (
        value == [] or value == () or value == [""] or value == ("",)
    ):
        return None
    return value


def normalize(value: Any) -> Optional[Any]:
    """Normalize strings.

    - Strip white spaces, tabs and new lines.
    - Replace tabs, new lines and multiple white spaces with one white space.
    """
    if value is None:
        return None
    if isinstance(value, tuple):
        return tuple([normalize(v) for v in value])
    if isinstance(value, list):
        return [normalize(v) for v in value]
    if isinstance(value, str):
        return " ".join(value.split())

    return value


def to_word_set(value: List[Any]) -> List[str]:
    """Lowercase and deduplicate word list entries, keeping first occurrences.

    Entries are normalized and empty entries are dropped.
    """
    words = []
    for v in value:
        word = normalize(to_str(v)).lower()
        if word and word not in words:
            words.append(word)
    return words
