"""
mapops - generic operations over unordered key-value containers

Inspect, transform, reduce, filter, partition and mutate dicts without
rewriting the iteration each time. Operations are plain functions that
compose freely:

    >>> import mapops
    >>> c = {"a": 1, "b": 0, "c": 3}
    >>> mapops.sum(mapops.filter_by(c, lambda k, v: v > 0))
    4
"""

# Operations
from mapops.ops import (
    clean,
    clear,
    clone,
    collect,
    contains,
    contains_by,
    count,
    count_by,
    entries,
    fill,
    fill_by,
    fill_zero,
    filter,
    filter_by,
    filter_not,
    filter_not_by,
    find,
    find_by,
    fold,
    get,
    get_or_else,
    keys,
    map,
    max,
    max_by,
    min,
    min_by,
    partition,
    partition_by,
    reduce,
    sample,
    sum,
    sum_by,
    values,
)

# Entry Builder
from mapops.builder import from_entries

# Types
from mapops.types import (
    Entry,
    RandomSource,
    SupportsAddition,
    SupportsOrdering,
    is_zero_value,
    zero_factory,
    zero_value,
)

# Errors
from mapops.errors import (
    EmptyContainerError,
    MapOpsError,
    ZeroValueError,
)

# Configuration & Logging
from mapops.config import Settings
from mapops.logger import setup_logger

__all__ = [
    # Accessors
    "get",
    "get_or_else",
    "keys",
    "values",
    "entries",
    "find",
    "find_by",
    "sample",
    # Membership & Counting
    "contains",
    "contains_by",
    "count",
    "count_by",
    # Derivation
    "clone",
    "clean",
    "map",
    "collect",
    "filter",
    "filter_by",
    "filter_not",
    "filter_not_by",
    "partition",
    "partition_by",
    # Reduction
    "reduce",
    "fold",
    "sum",
    "sum_by",
    "max",
    "max_by",
    "min",
    "min_by",
    # In-place Mutation
    "fill",
    "fill_zero",
    "fill_by",
    "clear",
    # Entry Builder
    "from_entries",
    # Types
    "Entry",
    "RandomSource",
    "SupportsAddition",
    "SupportsOrdering",
    "zero_factory",
    "zero_value",
    "is_zero_value",
    # Errors
    "MapOpsError",
    "EmptyContainerError",
    "ZeroValueError",
    # Configuration & Logging
    "Settings",
    "setup_logger",
]
