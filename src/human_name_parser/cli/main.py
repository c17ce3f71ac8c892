"""Main CLI entry point for human name parser."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..core.models import ParsedName, ParserOptions
from ..core.parsers import HumanNameParser
from ..pipelines.name_parsing import parse_name_file, parse_name_strings

CONFIG_ENV_VAR = "HUMAN_NAME_PARSER_CONFIG"


def build_parser(args) -> HumanNameParser:
    """Create a parser from the --config file and the command line flags."""
    config_path = args.config or os.environ.get(CONFIG_ENV_VAR)
    options = ParserOptions.from_file(config_path) if config_path else ParserOptions()

    overrides = {}
    if args.optional_first_name:
        overrides['mandatory_first_name'] = False
    if args.optional_last_name:
        overrides['mandatory_last_name'] = False
    return HumanNameParser(options, **overrides)


def format_results(results: List[Optional[ParsedName]], output_format: str) -> str:
    if output_format == 'text':
        return "\n".join(str(r) if r is not None else "" for r in results)
    return json.dumps(
        [r.model_dump() if r is not None else None for r in results],
        indent=2,
        ensure_ascii=False,
    )


def write_output(text: str, output: Optional[Path]) -> None:
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding='utf-8')
        print(f"Parsed names saved to: {output_path}")
    else:
        print(text)


def parse_command(args):
    """Parse names given on the command line."""
    try:
        parser = build_parser(args)
        results = parse_name_strings(args.names, parser=parser, raise_errors=not args.skip_errors)
        write_output(format_results(results, args.format), args.output)
    except Exception as e:
        print(f"Error parsing names: {e}", file=sys.stderr)
        sys.exit(1)


def parse_file_command(args):
    """Parse a text file with one name per line."""
    try:
        parser = build_parser(args)
        results = parse_name_file(args.input, parser=parser, raise_errors=not args.skip_errors)
        write_output(format_results(results, args.format), args.output)
    except Exception as e:
        print(f"Error parsing names from {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output", type=Path, help="Output file")
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"JSON file with parser options (defaults to ${CONFIG_ENV_VAR})",
    )
    parser.add_argument(
        "--optional-first-name",
        action="store_true",
        help="Leave the first name empty instead of failing when none is found",
    )
    parser.add_argument(
        "--optional-last-name",
        action="store_true",
        help="Leave the last name empty instead of failing when none is found",
    )
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Output null for names that cannot be parsed instead of failing",
    )


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="human-name-parser",
        description="Split human names into title, first, middle, nick and last name and suffix"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"human-name-parser {__version__}"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse names from arguments
    parse_parser = subparsers.add_parser("parse", help="Parse names given as arguments")
    parse_parser.add_argument("names", nargs="+", help="Names to parse")
    add_common_arguments(parse_parser)
    parse_parser.set_defaults(func=parse_command)

    # Parse names from a file
    parse_file_parser = subparsers.add_parser("parse-file", help="Parse a file with one name per line")
    parse_file_parser.add_argument("input", type=Path, help="Input text file")
    add_common_arguments(parse_file_parser)
    parse_file_parser.set_defaults(func=parse_file_command)

    # Parse arguments
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    # Execute command
    args.func(args)


if __name__ == "__main__":
    main()
