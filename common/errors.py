"""
Exceptions raised by the coordinate engine.

Both concrete errors derive from ``ValueError`` so callers that already
guard numeric input with ``except ValueError`` keep working.
"""


class CoordinateEngineError(ValueError):
    """Base class for coordinate engine errors."""


class InvalidInputError(CoordinateEngineError):
    """Input cannot be processed at all (e.g. an empty polygon)."""


class OutOfRangeError(CoordinateEngineError):
    """A coordinate lies outside its valid range.

    Only raised by an explicit range check in strict mode; the conversion
    functions never raise it.
    """

    def __init__(self, message: str, field: str = "", value: object = None):
        super().__init__(message)
        self.field = field
        self.value = value
