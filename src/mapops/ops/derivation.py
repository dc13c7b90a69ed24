"""
Derivation - Operations Producing New Containers

Every function here returns a fresh dict and leaves its input untouched:
- clone: copy of all bindings
- clean: drop zero values
- map / collect: transform values (collect also filters)
- filter family: keep or drop entries by value or predicate
- partition family: split into (matches, rest)

INVARIANTS:
1. The result never aliases the input
2. map() preserves the key set exactly
3. partition outputs are disjoint and their key union equals the input's
"""

from collections.abc import Callable, Mapping
from typing import Any

from mapops.types import INFER_ZERO, K, V, V1, V2, zero_factories


# =============================================================================
# COPYING
# =============================================================================


def clone(c: Mapping[K, V]) -> dict[K, V]:
    """
    Copy holding the same bindings as c.

    Adding, removing or rebinding keys in the copy never affects c. Values
    themselves are shared; copying mutable values is the value type's concern.
    """
    return dict(c)


def clean(c: Mapping[K, V], zero: Any = INFER_ZERO) -> dict[K, V]:
    """
    Entries whose value is not the zero value.

    Args:
        c: Container
        zero: Zero value to drop. If omitted, each value is compared with
            the zero of its own type (0, "", None, [], ...); each distinct
            type is resolved once and user types are never constructed

    Returns:
        New dict with zero-valued entries removed; len(result) <= len(c)

    Raises:
        ZeroValueError: If zero is omitted and a value's type has no
            registered zero (see zero_factory)

    Examples:
        >>> clean({"a": 1, "b": 0, "c": 3})
        {'a': 1, 'c': 3}
        >>> clean({"a": "x", "b": ""})
        {'a': 'x'}
    """
    if zero is INFER_ZERO:
        zeros = {t: factory() for t, factory in zero_factories(c.values()).items()}
        return {k: v for k, v in c.items() if v != zeros[type(v)]}
    return {k: v for k, v in c.items() if v != zero}


# =============================================================================
# TRANSFORMING
# =============================================================================


def map(c: Mapping[K, V1], f: Callable[[K, V1], V2]) -> dict[K, V2]:
    """
    New dict with every value replaced by f(key, value).

    Examples:
        >>> map({"a": 1, "b": 2}, lambda k, v: v * 10)
        {'a': 10, 'b': 20}
    """
    return {k: f(k, v) for k, v in c.items()}


def collect(c: Mapping[K, V1], f: Callable[[K, V1], tuple[V2, bool]]) -> dict[K, V2]:
    """
    Transform and filter in one pass.

    Args:
        c: Container
        f: Called as f(key, value); returns (new_value, keep)

    Returns:
        New dict holding new_value for each key where keep is true
    """
    dst: dict[K, V2] = {}
    for k, v in c.items():
        v2, keep = f(k, v)
        if keep:
            dst[k] = v2
    return dst


# =============================================================================
# FILTERING
# =============================================================================


def filter(c: Mapping[K, V], v: V) -> dict[K, V]:
    """Entries whose value equals v."""
    return {k: v1 for k, v1 in c.items() if v1 == v}


def filter_by(c: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """
    Entries whose (key, value) satisfies predicate.

    Examples:
        >>> filter_by({"a": 1, "b": 0, "c": 3}, lambda k, v: v > 0)
        {'a': 1, 'c': 3}
    """
    return {k: v for k, v in c.items() if predicate(k, v)}


def filter_not(c: Mapping[K, V], v: V) -> dict[K, V]:
    """Entries whose value differs from v."""
    return {k: v1 for k, v1 in c.items() if v1 != v}


def filter_not_by(c: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Entries whose (key, value) does not satisfy predicate."""
    return {k: v for k, v in c.items() if not predicate(k, v)}


# =============================================================================
# PARTITIONING
# =============================================================================


def partition(c: Mapping[K, V], v: V) -> tuple[dict[K, V], dict[K, V]]:
    """
    Split into entries whose value equals v and the rest.

    Returns:
        (matches, rest): disjoint dicts whose keys together are c's keys
    """
    return partition_by(c, lambda _k, v1: v1 == v)


def partition_by(
    c: Mapping[K, V],
    predicate: Callable[[K, V], bool],
) -> tuple[dict[K, V], dict[K, V]]:
    """
    Split into entries satisfying predicate and the rest.

    predicate is called exactly once per entry.

    Returns:
        (matches, rest): disjoint dicts whose keys together are c's keys

    Examples:
        >>> partition_by({"a": 1, "b": -1}, lambda k, v: v > 0)
        ({'a': 1}, {'b': -1})
    """
    matches: dict[K, V] = {}
    rest: dict[K, V] = {}
    for k, v in c.items():
        if predicate(k, v):
            matches[k] = v
        else:
            rest[k] = v
    return matches, rest
