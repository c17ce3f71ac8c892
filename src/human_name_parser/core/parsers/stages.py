"""Extraction stages of the name parser.

Every stage takes the working string (the part of the name that is still
unclassified) and returns the updated working string together with the value
it extracted, or ``None`` when it found nothing.
"""

import logging
import re
from typing import Optional, Pattern, Sequence, Tuple

from .exceptions import AmbiguousMatchError, FirstNameNotFound, LastNameNotFound
from .patterns import (
    COMBINED_TITLE,
    FIRST_NAME,
    LEADING_INITIAL,
    NICKNAMES,
    SPACE_FLIPS,
    FlipPattern,
)

_LOGGER = logging.getLogger(__name__)

StageResult = Tuple[str, Optional[str]]


def normalize(tainted: str) -> str:
    """Remove extra whitespace and trailing commas from a string.

    Strips whitespace from both ends, collapses whitespace runs into one
    space and drops trailing commas.
    """
    text = re.sub(r"\s+", " ", tainted.strip())
    return re.sub(r"[\s,]*,$", "", text).rstrip()


def find_with_regex(token: str, pattern: Pattern, group: int = 0) -> Optional[str]:
    """Return a capture group of the first match, or None for no or empty match."""
    match = pattern.search(token)
    if not match:
        return None
    return match.group(group) or None


def remove_token(
    token: str, pattern: Pattern, normalize_result: bool = True, limit: Optional[int] = None
) -> str:
    """Replace the matches of ``pattern`` with a single space.

    Args:
        token: The working string.
        pattern: Compiled pattern to remove.
        normalize_result: Normalize the string after removal.
        limit: Maximum number of matches allowed. ``None`` removes every match.

    Raises:
        AmbiguousMatchError: If the pattern matches more often than ``limit``.
    """
    removed, count = pattern.subn(" ", token)
    if limit is not None and count > limit:
        raise AmbiguousMatchError(
            f"The regex {pattern.pattern!r} has {count} matches in {token!r}, expected at most {limit}."
        )

    if not normalize_result:
        return removed
    return normalize(removed)


def flip_name_token(token: str, delimiter: str, patterns: Sequence[FlipPattern]) -> str:
    """Flip the parts of a name around a delimiter.

    The first pattern whose arity equals the number of delimiters decides the
    new order. Without such a pattern the string is returned unchanged.
    """
    substrings = token.split(delimiter)
    for item in patterns:
        if len(substrings) - 1 != item.arity:
            continue

        pieces = [normalize(substrings[idx]) for idx in item.order]
        flipped = normalize(" ".join(pieces))
        _LOGGER.debug(f"Flipped {token!r} around {delimiter!r} to {flipped!r}")
        return flipped

    return token


def find_combined_title(token: str) -> StageResult:
    """Find a leading 'Mrs. / Ms.' combination.

    The strip is not normalized so the slash flip still sees the original spacing.
    """
    title = find_with_regex(token, COMBINED_TITLE, 1)
    if title:
        token = remove_token(token, COMBINED_TITLE, normalize_result=False, limit=1)
    return token, title


def find_trailing_title(token: str, pattern: Pattern) -> StageResult:
    """Find a title at the end of the name, as in 'Last First Title'.

    When one is found the remaining tokens are flipped on spaces.
    """
    title = find_with_regex(token, pattern, 1)
    if title:
        token = remove_token(token, pattern, limit=1)
        token = flip_name_token(token, " ", SPACE_FLIPS)
        title = title.rstrip(".")
    return token, title


def find_academic_title(token: str, pattern: Pattern) -> StageResult:
    title = find_with_regex(token, pattern, 1)
    if title:
        token = remove_token(token, pattern)
        title = title.rstrip(".")
    return token, title


def find_nickname(token: str) -> StageResult:
    nickname = find_with_regex(token, NICKNAMES, 2)
    if nickname:
        token = remove_token(token, NICKNAMES)
    return token, nickname


def find_suffix(token: str, pattern: Pattern) -> StageResult:
    suffix = find_with_regex(token, pattern, 1)
    if suffix:
        token = remove_token(token, pattern, limit=1)
        suffix = suffix.rstrip(".")
    return token, suffix


def find_last_name(token: str, pattern: Pattern, mandatory: bool = True) -> StageResult:
    """Find the last name, including any surname prefixes before it.

    Raises:
        LastNameNotFound: If nothing matches and the last name is mandatory.
    """
    last_name = find_with_regex(token, pattern, 0)
    if last_name:
        token = remove_token(token, pattern, limit=1)
    elif mandatory:
        raise LastNameNotFound(f"Couldn't find a last name in {token!r}.")
    return token, last_name


def find_leading_initial(token: str) -> StageResult:
    initial = find_with_regex(token, LEADING_INITIAL, 1)
    if initial:
        token = remove_token(token, LEADING_INITIAL, limit=1)
    return token, initial


def find_first_name(token: str, mandatory: bool = True) -> StageResult:
    """Find the first name at the start of the working string.

    Raises:
        FirstNameNotFound: If nothing is left and the first name is mandatory.
    """
    first_name = find_with_regex(token, FIRST_NAME, 0)
    if first_name:
        token = remove_token(token, FIRST_NAME, limit=1)
    elif mandatory:
        raise FirstNameNotFound("Couldn't find a first name.")
    return token, first_name


def find_middle_name(token: str) -> StageResult:
    """Whatever is left is the middle name."""
    middle_name = token.strip()
    return "", middle_name or None
