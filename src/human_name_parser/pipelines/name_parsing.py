"""Pipelines for parsing many name strings with one parser."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from human_name_parser.core.models import ParsedName
from human_name_parser.core.parsers import HumanNameParser, NameParsingError


def parse_name_strings(
    names: Iterable[str],
    parser: Optional[HumanNameParser] = None,
    raise_errors: bool = True,
) -> List[Optional[ParsedName]]:
    """Parse a list of name strings into ParsedNames.

    With ``raise_errors=False`` a name that cannot be parsed is logged and
    yields ``None`` in its position.
    """
    parser = parser or HumanNameParser()
    results: List[Optional[ParsedName]] = []
    for name in names:
        try:
            results.append(parser.parse(name))
        except NameParsingError as e:
            if raise_errors:
                raise
            logging.warning(f"Skipping {name!r}: {type(e).__name__}: {e}")
            results.append(None)
    return results


def parse_name_file(
    path: str | Path,
    parser: Optional[HumanNameParser] = None,
    raise_errors: bool = True,
) -> List[Optional[ParsedName]]:
    """Parse a text file with one name per line. Blank lines are skipped."""
    lines = [ln.strip() for ln in Path(path).read_text(encoding="utf-8").splitlines() if ln.strip()]
    return parse_name_strings(lines, parser=parser, raise_errors=raise_errors)
