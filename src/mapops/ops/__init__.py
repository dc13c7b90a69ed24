"""
Operation families over unordered key-value containers.

Several names (map, filter, sum, max, min) shadow builtins on purpose;
call them through the module: ``mapops.sum(c)``.
"""

# Accessors
from mapops.ops.accessors import (
    entries,
    find,
    find_by,
    get,
    get_or_else,
    keys,
    sample,
    values,
)

# Membership & Counting
from mapops.ops.membership import (
    contains,
    contains_by,
    count,
    count_by,
)

# Derivation
from mapops.ops.derivation import (
    clean,
    clone,
    collect,
    filter,
    filter_by,
    filter_not,
    filter_not_by,
    map,
    partition,
    partition_by,
)

# Reduction
from mapops.ops.reduction import (
    fold,
    max,
    max_by,
    min,
    min_by,
    reduce,
    sum,
    sum_by,
)

# In-place Mutation
from mapops.ops.mutation import (
    clear,
    fill,
    fill_by,
    fill_zero,
)

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
]
