"""Domain-level exceptions.

Business rule violations on the aggregates are *returned* as failed
``Result`` objects, not raised.  Exceptions are reserved for two cases:

- ``ValidationError``: a value object was built from malformed input
  (e.g. ``Money.of("abc")``).  The CLI catches these uniformly.
- ``ProgrammingError``: a caller broke an internal contract that the
  public aggregate methods already guard against.  Never caught.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value could not be constructed from the given input."""


class ProgrammingError(RuntimeError):
    """An internal invariant was violated by the calling code."""
