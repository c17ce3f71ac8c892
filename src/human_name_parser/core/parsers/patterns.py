"""Regular expressions and flip tables used by the name parser.

Everything matched by a stage regex is removed from the working string, but
only one capture group is recorded. Each regex assumes that the preceding
stages already ran and chopped out their matches.
"""

import re
from typing import Iterable, NamedTuple, Pattern, Tuple

from ..models.options import ParserOptions

FLAGS = re.IGNORECASE | re.UNICODE

# Names that start or end with an apostrophe break this, hence the
# surrounding spaces: the match can never sit at either edge.
REGEX_NICKNAMES = r" ('|\"|\(\"*'*)(.+?)('|\"|\"*'*\)) "
REGEX_COMBINED_TITLE = r"^(mrs\.? / ms\.?)"
REGEX_TRAILING_TITLE = r"\b(%s)$"
REGEX_TITLES = r"\b\s*(%s)\s*\b"
REGEX_SUFFIX = r",*\s+(%s)$"
REGEX_LAST_NAME = r"(?!^)\b([^ ]+ y |%s)*[^ ]+$"
# The lookahead is neither recorded nor removed.
REGEX_LEADING_INITIAL = r"^(.\.*)(?= [^\W\d_]{2})"
REGEX_FIRST_NAME = r"^[^ ]+"

NEVER_MATCH = r"(?!)"

NICKNAMES = re.compile(REGEX_NICKNAMES, FLAGS)
COMBINED_TITLE = re.compile(REGEX_COMBINED_TITLE, FLAGS)
LEADING_INITIAL = re.compile(REGEX_LEADING_INITIAL, FLAGS)
FIRST_NAME = re.compile(REGEX_FIRST_NAME, FLAGS)


class FlipPattern(NamedTuple):
    """Reorder rule applied when a delimiter occurs exactly ``arity`` times."""
    arity: int
    order: Tuple[int, ...]


SLASH_FLIPS = (
    FlipPattern(2, (2, 1, 0)),  # Last / First / Title => Title First Last
    FlipPattern(1, (1, 0)),  # Last / First+ => First+ Last
)

SPACE_FLIPS = (
    FlipPattern(2, (1, 2, 0)),  # Last First Middle => First Middle Last
    FlipPattern(1, (1, 0)),  # Last First+ => First+ Last
)

COMMA_FLIPS = (
    FlipPattern(2, (1, 2, 0)),  # Last, First, Middle => First Middle Last
    FlipPattern(1, (1, 0)),  # Last, First+ => First+ Last
)


def build_alternation(words: Iterable[str], tail: str) -> str:
    """Join escaped words into a regex alternation, appending ``tail`` to each.

    An empty word list yields an alternation that never matches.
    """
    entries = [re.escape(word) + tail for word in words]
    if not entries:
        return NEVER_MATCH
    return "|".join(entries)


class NamePatterns(NamedTuple):
    """Patterns compiled from a set of parser options."""
    trailing_title: Pattern
    title: Pattern
    suffix: Pattern
    last_name: Pattern


def compile_patterns(options: ParserOptions) -> NamePatterns:
    """Compile the configuration-dependent patterns.

    Every suffix and title entry may be followed by any number of dots. Every
    prefix entry must be followed by a space, so 'van' only matches 'van '.
    """
    suffixes = build_alternation(options.suffixes, r"\.*")
    prefixes = build_alternation(options.prefixes, " ")
    titles = build_alternation(options.academic_titles, r"\.*")

    return NamePatterns(
        trailing_title=re.compile(REGEX_TRAILING_TITLE % titles, FLAGS),
        title=re.compile(REGEX_TITLES % titles, FLAGS),
        suffix=re.compile(REGEX_SUFFIX % suffixes, FLAGS),
        last_name=re.compile(REGEX_LAST_NAME % prefixes, FLAGS),
    )
