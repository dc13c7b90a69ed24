"""
Accessors - Lookups, Snapshots, Random Sampling

Read-only access to a container:
- get / get_or_else: lookups where absence is a value, never an exception
- keys / values / entries: independent snapshot lists
- find / find_by: first entry matching a value or a predicate
- sample: one uniformly chosen value

INVARIANTS:
1. No operation here modifies its input
2. Snapshot order is the container's iteration order and is not relied upon
3. sample() on an empty container raises EmptyContainerError
"""

import logging
from collections.abc import Callable, Mapping
from itertools import islice

from mapops.errors import EmptyContainerError
from mapops.types import Entry, K, RandomSource, V

logger = logging.getLogger(__name__)


# =============================================================================
# LOOKUPS
# =============================================================================


def get(c: Mapping[K, V], k: K) -> tuple[V | None, bool]:
    """
    Value stored under k and whether it was present.

    Args:
        c: Container
        k: Key to look up

    Returns:
        (value, True) if k is present, otherwise (None, False)

    Examples:
        >>> get({"a": 1}, "a")
        (1, True)
        >>> get({"a": 1}, "b")
        (None, False)
    """
    if k in c:
        return c[k], True
    return None, False


def get_or_else(c: Mapping[K, V], k: K, default: V) -> V:
    """
    Value stored under k, or default if k is absent.

    default is never inserted into c.
    """
    if k in c:
        return c[k]
    return default


# =============================================================================
# SNAPSHOTS
# =============================================================================


def keys(c: Mapping[K, V]) -> list[K]:
    """Snapshot list of the keys."""
    return list(c)


def values(c: Mapping[K, V]) -> list[V]:
    """Snapshot list of the values."""
    return list(c.values())


def entries(c: Mapping[K, V]) -> list[Entry[K, V]]:
    """
    Snapshot list of the container's entries.

    Each call builds a new list; later changes to c do not show up in it.

    Examples:
        >>> entries({"a": 1})
        [Entry(key='a', value=1)]
    """
    return [Entry(k, v) for k, v in c.items()]


# =============================================================================
# SEARCH
# =============================================================================


def find(c: Mapping[K, V], v: V) -> tuple[Entry[K, V] | None, bool]:
    """
    First entry whose value equals v.

    Short-circuits on the first match. With several matches, which one is
    returned depends on iteration order.

    Returns:
        (entry, True) on a match, otherwise (None, False)
    """
    for k, v1 in c.items():
        if v1 == v:
            return Entry(k, v1), True
    return None, False


def find_by(
    c: Mapping[K, V],
    predicate: Callable[[K, V], bool],
) -> tuple[Entry[K, V] | None, bool]:
    """
    First entry whose (key, value) satisfies predicate.

    Args:
        c: Container
        predicate: Called as predicate(key, value)

    Returns:
        (entry, True) on a match, otherwise (None, False)
    """
    for k, v in c.items():
        if predicate(k, v):
            return Entry(k, v), True
    return None, False


# =============================================================================
# SAMPLING
# =============================================================================


def sample(c: Mapping[K, V], rng: RandomSource) -> V:
    """
    Value of one uniformly chosen key.

    Draws n = rng.randrange(len(c)) and returns the value at position n
    of the container's iteration order. Every key has probability
    1/len(c) given a uniform rng.

    Args:
        c: Non-empty container
        rng: Random source supplied by the caller (e.g. random.Random(seed))

    Returns:
        The sampled value

    Raises:
        EmptyContainerError: If c is empty

    Examples:
        >>> import random
        >>> sample({"only": 7}, random.Random(0))
        7
    """
    size = len(c)
    if size == 0:
        logger.warning("sample() called on an empty container")
        raise EmptyContainerError("cannot sample from an empty container")

    n = rng.randrange(size)
    logger.debug("sample() drew index %d of %d", n, size)

    return next(islice(c.values(), n, None))
