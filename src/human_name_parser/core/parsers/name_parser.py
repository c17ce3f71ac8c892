"""Split a single name string into its parts."""

import logging
from typing import Dict, List, Optional

from ..models import ParsedName, ParserOptions
from . import stages
from .patterns import COMMA_FLIPS, SLASH_FLIPS, NamePatterns, compile_patterns

_LOGGER = logging.getLogger(__name__)


class HumanNameParser:
    """Parse human names into title, initial, first, middle, nickname, last name and suffix.

    Args:
        options: Word lists and flags. By default, we use ``ParserOptions()``.
        **overrides: Individual options replacing those of ``options``.

    The word lists are compiled into patterns once, here and whenever a list
    is replaced. Replacing a list only affects later calls to ``parse``.
    """

    def __init__(self, options: Optional[ParserOptions] = None, **overrides):
        options = options or ParserOptions()
        if overrides:
            options = options.replace(**overrides)
        self._set_options(options)

    def _set_options(self, options: ParserOptions) -> None:
        self._options = options
        self._patterns: NamePatterns = compile_patterns(options)

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def suffixes(self) -> List[str]:
        return list(self._options.suffixes)

    @property
    def prefixes(self) -> List[str]:
        return list(self._options.prefixes)

    @property
    def academic_titles(self) -> List[str]:
        return list(self._options.academic_titles)

    def set_suffixes(self, suffixes: List[str]) -> "HumanNameParser":
        self._set_options(self._options.replace(suffixes=suffixes))
        return self

    def set_prefixes(self, prefixes: List[str]) -> "HumanNameParser":
        self._set_options(self._options.replace(prefixes=prefixes))
        return self

    def set_academic_titles(self, academic_titles: List[str]) -> "HumanNameParser":
        self._set_options(self._options.replace(academic_titles=academic_titles))
        return self

    def parse(self, name: str) -> ParsedName:
        """Parse the name into its constituent parts.

        Args:
            name: The name string, e.g. ``"Smith, John Q"`` or ``"Dr. Jane van der Berg"``.

        Returns:
            The parsed name.

        Raises:
            FirstNameNotFound: If no first name is left and it is mandatory.
            LastNameNotFound: If no last name is found and it is mandatory.
            AmbiguousMatchError: If an anchored strip matched more than once.
        """
        patterns = self._patterns
        fields: Dict[str, str] = {}
        token = stages.normalize(name or "")

        # Leading combination of titles: Mrs. / Ms.
        token, title = stages.find_combined_title(token)
        self._record(fields, "academic_title", title)

        # Flip on slashes before any other transformation.
        token = stages.flip_name_token(token, "/", SLASH_FLIPS)

        token, title = stages.find_trailing_title(token, patterns.trailing_title)
        self._record(fields, "academic_title", title)

        token, title = stages.find_academic_title(token, patterns.title)
        self._record(fields, "academic_title", title)

        token, nickname = stages.find_nickname(token)
        self._record(fields, "nickname", nickname)

        token, suffix = stages.find_suffix(token, patterns.suffix)
        self._record(fields, "suffix", suffix)

        token = stages.flip_name_token(token, ",", COMMA_FLIPS)

        token, last_name = stages.find_last_name(
            token, patterns.last_name, mandatory=self._options.mandatory_last_name
        )
        self._record(fields, "last_name", last_name)

        token, initial = stages.find_leading_initial(token)
        self._record(fields, "leading_initial", initial)

        token, first_name = stages.find_first_name(
            token, mandatory=self._options.mandatory_first_name
        )
        self._record(fields, "first_name", first_name)

        token, middle_name = stages.find_middle_name(token)
        self._record(fields, "middle_name", middle_name)

        return ParsedName(**fields)

    @staticmethod
    def _record(fields: Dict[str, str], key: str, value: Optional[str]) -> None:
        # The first stage to find a component owns it.
        if not value:
            return
        if key in fields:
            _LOGGER.debug(f"Ignoring {key} {value!r}, already found {fields[key]!r}")
            return
        _LOGGER.debug(f"Found {key}: {value!r}")
        fields[key] = value


def parse_name(name: str, **overrides) -> ParsedName:
    """Parse a single name with a parser built from ``overrides``."""
    return HumanNameParser(**overrides).parse(name)
