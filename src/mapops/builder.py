"""
Entry Builder - Containers From Entry Sequences

from_entries() is the one operation whose result depends on input order:
for duplicate keys the last occurrence wins.
"""

import logging
from collections.abc import Iterable

from mapops.types import K, V

logger = logging.getLogger(__name__)


def from_entries(entries: Iterable[tuple[K, V]]) -> dict[K, V]:
    """
    Build a new dict from (key, value) pairs.

    Args:
        entries: Entry instances or plain 2-tuples, in sequence order

    Returns:
        New dict; for a duplicate key the last value in sequence order wins

    Examples:
        >>> from_entries([("x", 1), ("y", 2), ("x", 5)])
        {'x': 5, 'y': 2}
    """
    dst: dict[K, V] = {}
    for k, v in entries:
        if k in dst:
            logger.debug("from_entries(): duplicate key %r overwritten", k)
        dst[k] = v
    return dst
