"""Core functionality for human name parsing."""

from . import models
from . import parsers

__all__ = ["models", "parsers"]
