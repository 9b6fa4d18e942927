"""Error types raised while reading and evaluating a run."""


class RunInputError(Exception):
    """Base class for everything the CLI reports as a user-facing failure."""


class ParseError(RunInputError, ValueError):
    """A distance or time argument does not follow the expected grammar."""


class InvalidUnit(ParseError):
    """A unit token is not one of the supported units."""

    def __init__(self, unit: str, message: str | None = None) -> None:
        self.unit = unit
        super().__init__(message or f'Unknown unit "{unit}".')


class DivisionByZero(RunInputError, ZeroDivisionError):
    """Velocity is undefined for a positive distance covered in zero time."""


class InvalidReferenceData(RunInputError):
    """The built-in reference table is inconsistent."""
