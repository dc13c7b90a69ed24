"""
Shared Types - Entry, Capability Protocols, Zero Values

Types shared by every operation family:
- Entry: immutable (key, value) pair
- SupportsOrdering / SupportsAddition: value capabilities for min/max/sum
- RandomSource: the injected uniform random source used by sample()
- zero_factory() / zero_value(): zero values for a fixed set of builtin types

The capability protocols are bounds for static type checkers only.
Nothing here checks them at runtime.
"""

import logging
from collections.abc import Callable, Hashable, Iterable
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final, Generic, NamedTuple, Protocol, TypeVar

from mapops.errors import ZeroValueError

logger = logging.getLogger(__name__)

# =============================================================================
# TYPE VARIABLES
# =============================================================================

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
V1 = TypeVar("V1")
V2 = TypeVar("V2")

# Additive identity used when a numeric reduction runs over {}
DEFAULT_NUMERIC_ZERO: Final[int] = 0


class _InferZero:
    """Default marker meaning "infer the zero value from each stored value"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "INFER_ZERO"


INFER_ZERO: Final[Any] = _InferZero()


# =============================================================================
# ENTRY
# =============================================================================


class Entry(NamedTuple, Generic[K, V]):
    """
    One container element as an immutable (key, value) pair.

    Unpacks like a tuple and compares equal to a plain 2-tuple:

        >>> k, v = Entry("a", 1)
        >>> Entry("a", 1) == ("a", 1)
        True
    """

    key: K
    value: V


# =============================================================================
# CAPABILITY PROTOCOLS
# =============================================================================


class SupportsOrdering(Protocol):
    """Value type with a total order via < and >."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


class SupportsAddition(Protocol):
    """Value type closed under +."""

    def __add__(self, other: Any, /) -> Any: ...


class RandomSource(Protocol):
    """
    Uniform integer source.

    random.Random and the random module itself both satisfy it.
    """

    def randrange(self, stop: int, /) -> int: ...


OrderedT = TypeVar("OrderedT", bound=SupportsOrdering)
AddableT = TypeVar("AddableT", bound=SupportsAddition)


# =============================================================================
# ZERO VALUES
# =============================================================================

# Types whose zero is well defined, keyed by exact type. Subclasses and
# user classes are not inferred: constructing them could run arbitrary code.
_ZERO_FACTORIES: Final[dict[type, Callable[[], Any]]] = {
    bool: bool,
    int: int,
    float: float,
    complex: complex,
    Decimal: Decimal,
    Fraction: Fraction,
    str: str,
    bytes: bytes,
    bytearray: bytearray,
    type(None): lambda: None,
    list: list,
    tuple: tuple,
    dict: dict,
    set: set,
    frozenset: frozenset,
}


def zero_factory(value_type: type) -> Callable[[], Any]:
    """
    Callable producing the zero value of value_type.

    Only numbers (bool, int, float, complex, Decimal, Fraction), str, bytes,
    bytearray, NoneType and the builtin containers are supported. The type
    itself is never called during the lookup.

    Raises:
        ZeroValueError: For any other type, subclasses included
    """
    try:
        return _ZERO_FACTORIES[value_type]
    except KeyError:
        logger.debug("no zero value registered for %s", value_type.__name__)
        raise ZeroValueError(
            f"cannot infer zero value for type {value_type.__name__!r}; "
            f"pass zero= explicitly"
        ) from None


def zero_factories(values: Iterable[Any]) -> dict[type, Callable[[], Any]]:
    """
    Zero factory for every distinct type among values.

    Each type is resolved once. Raises before returning anything, so callers
    can resolve first and mutate afterwards.

    Raises:
        ZeroValueError: If any value has an unsupported type
    """
    factories: dict[type, Callable[[], Any]] = {}
    for value in values:
        value_type = type(value)
        if value_type not in factories:
            factories[value_type] = zero_factory(value_type)
    return factories


def zero_value(value: Any) -> Any:
    """
    Zero value for the type of value.

    Args:
        value: Instance of a supported type (see zero_factory)

    Returns:
        A fresh zero of type(value)

    Raises:
        ZeroValueError: If the type has no registered zero

    Examples:
        >>> zero_value(42)
        0
        >>> zero_value("text")
        ''
        >>> zero_value(None) is None
        True
        >>> zero_value([1, 2])
        []
    """
    return zero_factory(type(value))()


def is_zero_value(value: Any) -> bool:
    """True if value equals the zero value of its own type."""
    return value == zero_value(value)
