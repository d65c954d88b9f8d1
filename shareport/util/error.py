"""Utility layer errors.

These are raised by infrastructure helpers and never reach API clients
directly; the domain layer translates them into its own errors.
"""


class UtilError(Exception):
    """Base utility error."""

    pass


class DurationParseError(UtilError, ValueError):
    """Raised when a string is not a valid Go-style duration."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid duration {value!r}")


class DependencyInjectionError(UtilError):
    """Raised when the DI container cannot be assembled as requested."""

    pass
