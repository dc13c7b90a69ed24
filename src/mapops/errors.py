"""
Exceptions raised by mapops operations.

Most "absence" cases are ordinary values, not errors:
- missing key / no match → (None, False) from get, find, find_by
- empty container in reductions → the supplied zero or seed

Only precondition violations that would otherwise hide caller bugs raise.
"""


class MapOpsError(Exception):
    """Base class for all mapops errors."""


class EmptyContainerError(MapOpsError, ValueError):
    """
    Operation requires a non-empty container.

    Raised by sample(): returning an arbitrary zero value for {} would
    mask the caller's bug.
    """


class ZeroValueError(MapOpsError, TypeError):
    """
    The zero value of a type cannot be inferred.

    Raised when a value's type cannot be constructed without arguments.
    Pass zero= explicitly to the operation instead.
    """
