"""
Reduction - Folding a Container Into One Value

- reduce: combine values, seeded with the first value under iteration order
- fold: combine values into an explicit seed
- sum / sum_by: addition
- max / max_by / min / min_by: comparison

COMBINER CONTRACT:
Iteration order is unspecified, so combiners must be order-independent
(associative and commutative with respect to the accumulator). A combiner
that is not gives traversal-order-dependent results. This is a caller
error and is not detected.

EMPTY CONTAINERS:
reduce, sum, max and min return their zero argument; fold returns its seed;
the *_by variants return their zero argument. None of them raise.
"""

from collections.abc import Callable, Mapping
from typing import Any

from mapops.types import DEFAULT_NUMERIC_ZERO, AddableT, K, OrderedT, V, V1, V2


# =============================================================================
# GENERIC REDUCTION
# =============================================================================


def reduce(c: Mapping[K, V], f: Callable[[V, K, V], V], zero: Any = None) -> V:
    """
    Combine all values with f.

    The accumulator starts as the first value under iteration order;
    every remaining entry is folded in as acc = f(acc, key, value).

    Args:
        c: Container
        f: Order-independent combiner, called as f(acc, key, value)
        zero: Result for an empty container (default: None)

    Returns:
        Combined value, or zero if c is empty

    Examples:
        >>> reduce({"a": 1, "b": 2, "c": 3}, lambda acc, k, v: acc + v)
        6
        >>> reduce({}, lambda acc, k, v: acc + v, zero=0)
        0
    """
    items = iter(c.items())
    head = next(items, None)
    if head is None:
        return zero

    acc = head[1]
    for k, v in items:
        acc = f(acc, k, v)
    return acc


def fold(c: Mapping[K, V1], seed: V2, f: Callable[[V2, K, V1], V2]) -> V2:
    """
    Combine all values into seed with f.

    Args:
        c: Container
        seed: Initial accumulator, returned unchanged if c is empty
        f: Order-independent combiner, called as f(acc, key, value)

    Examples:
        >>> fold({"a": "x", "b": "yy"}, 0, lambda acc, k, v: acc + len(v))
        3
    """
    acc = seed
    for k, v in c.items():
        acc = f(acc, k, v)
    return acc


# =============================================================================
# SUMMATION
# =============================================================================


def sum(c: Mapping[K, AddableT], zero: Any = DEFAULT_NUMERIC_ZERO) -> AddableT:
    """
    Sum of all values.

    Args:
        c: Container with addable values (numbers, complex, ...)
        zero: Result for an empty container (default: 0)

    Examples:
        >>> sum({"a": 1, "b": 0, "c": 3})
        4
        >>> sum({})
        0
    """
    return reduce(c, lambda acc, _k, v: acc + v, zero=zero)


def sum_by(
    c: Mapping[K, V1],
    f: Callable[[K, V1], AddableT],
    zero: Any = DEFAULT_NUMERIC_ZERO,
) -> AddableT:
    """
    Sum of f(key, value) over all entries, starting from zero.

    Examples:
        >>> sum_by({"a": "x", "b": "yy"}, lambda k, v: len(v))
        3
    """
    return fold(c, zero, lambda acc, k, v: acc + f(k, v))


# =============================================================================
# COMPARISON
# =============================================================================


def max(c: Mapping[K, OrderedT], zero: Any = None) -> OrderedT:
    """
    Largest value.

    Ties keep the value encountered first.

    Args:
        c: Container with ordered values
        zero: Result for an empty container (default: None)
    """
    return reduce(c, lambda acc, _k, v: v if acc < v else acc, zero=zero)


def min(c: Mapping[K, OrderedT], zero: Any = None) -> OrderedT:
    """
    Smallest value.

    Ties keep the value encountered first.

    Args:
        c: Container with ordered values
        zero: Result for an empty container (default: None)
    """
    return reduce(c, lambda acc, _k, v: v if acc > v else acc, zero=zero)


def max_by(
    c: Mapping[K, V1],
    f: Callable[[K, V1], OrderedT],
    zero: Any = None,
) -> OrderedT:
    """
    Largest f(key, value).

    The first projected value seeds the comparison, so the result is
    always one of the projections and never zero for a non-empty c.

    Args:
        c: Container
        f: Projection to an ordered type, called as f(key, value)
        zero: Result for an empty container (default: None)

    Examples:
        >>> max_by({"a": "x", "b": "yyy"}, lambda k, v: len(v))
        3
    """
    return _select_by(c, f, zero, lambda best, candidate: best < candidate)


def min_by(
    c: Mapping[K, V1],
    f: Callable[[K, V1], OrderedT],
    zero: Any = None,
) -> OrderedT:
    """
    Smallest f(key, value).

    Same seeding and empty-container behaviour as max_by().
    """
    return _select_by(c, f, zero, lambda best, candidate: best > candidate)


def _select_by(
    c: Mapping[K, V1],
    f: Callable[[K, V1], OrderedT],
    zero: Any,
    replaces: Callable[[OrderedT, OrderedT], bool],
) -> OrderedT:
    """Projection kept by replaces(best, candidate), seeded with the first one."""
    items = iter(c.items())
    head = next(items, None)
    if head is None:
        return zero

    best = f(*head)
    for k, v in items:
        candidate = f(k, v)
        if replaces(best, candidate):
            best = candidate
    return best
