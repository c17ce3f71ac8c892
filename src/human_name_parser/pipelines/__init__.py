"""Batch name parsing pipelines."""

from .name_parsing import parse_name_strings, parse_name_file

__all__ = ["parse_name_strings", "parse_name_file"]
