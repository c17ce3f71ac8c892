"""Errors raised while parsing a name."""


class NameParsingError(Exception):
    """Raised when a name cannot be parsed."""
    pass


class FirstNameNotFound(NameParsingError):
    """Raised when no first name is left and a first name is mandatory."""
    pass


class LastNameNotFound(NameParsingError):
    """Raised when no last name matches and a last name is mandatory."""
    pass


class AmbiguousMatchError(NameParsingError):
    """Raised when a strip expected to remove one match finds more."""
    pass
