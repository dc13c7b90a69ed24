"""
Membership & Counting

- contains / contains_by: existence tests, short-circuit on the first match
- count / count_by: number of matches, full traversal

Predicates are called as predicate(key, value).
"""

from collections.abc import Callable, Mapping

from mapops.types import K, V


def contains(c: Mapping[K, V], v: V) -> bool:
    """
    True if at least one value equals v.

    Examples:
        >>> contains({"a": 1, "b": 2}, 2)
        True
        >>> contains({}, 2)
        False
    """
    for v1 in c.values():
        if v1 == v:
            return True
    return False


def contains_by(c: Mapping[K, V], predicate: Callable[[K, V], bool]) -> bool:
    """True if at least one (key, value) satisfies predicate."""
    for k, v in c.items():
        if predicate(k, v):
            return True
    return False


def count(c: Mapping[K, V], v: V) -> int:
    """Number of values equal to v."""
    n = 0
    for v1 in c.values():
        if v1 == v:
            n += 1
    return n


def count_by(c: Mapping[K, V], predicate: Callable[[K, V], bool]) -> int:
    """Number of (key, value) pairs satisfying predicate."""
    n = 0
    for k, v in c.items():
        if predicate(k, v):
            n += 1
    return n
