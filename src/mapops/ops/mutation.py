"""
In-place Mutation

The only operations with side effects on their input:
- fill: bind every key to one value
- fill_zero: bind every key to a zero value
- fill_by: bind every key to f(key)
- clear: remove every entry

fill, fill_zero and fill_by keep the key set and size; clear empties the
same object. All of them return None.

None of these may run concurrently with another operation on the same
container. Synchronization is the caller's job.
"""

from collections.abc import Callable, MutableMapping
from typing import Any

from mapops.types import INFER_ZERO, K, V, zero_factories


def fill(c: MutableMapping[K, V], v: V) -> None:
    """
    Bind every existing key to v.

    Examples:
        >>> c = {"a": 1, "b": 2}
        >>> fill(c, 9)
        >>> c
        {'a': 9, 'b': 9}
    """
    for k in list(c):
        c[k] = v


def fill_zero(c: MutableMapping[K, V], zero: Any = INFER_ZERO) -> None:
    """
    Bind every existing key to a zero value.

    Args:
        c: Container, mutated in place
        zero: Value to store. If omitted, each key gets the zero of its
            current value's type

    Raises:
        ZeroValueError: If zero is omitted and a value's type has no
            registered zero. c is left unchanged in that case.

    Examples:
        >>> c = {"a": 1, "b": 2}
        >>> fill_zero(c)
        >>> c
        {'a': 0, 'b': 0}
    """
    if zero is INFER_ZERO:
        # resolve every type first so a failure leaves c untouched
        factories = zero_factories(c.values())
        for k in list(c):
            c[k] = factories[type(c[k])]()
        return

    fill(c, zero)


def fill_by(c: MutableMapping[K, V], f: Callable[[K], V]) -> None:
    """Bind every existing key k to f(k)."""
    for k in list(c):
        c[k] = f(k)


def clear(c: MutableMapping[K, V]) -> None:
    """Remove all entries; c keeps its identity and ends with size 0."""
    c.clear()
