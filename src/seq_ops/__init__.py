"""
Sequence Operations Package

Functional helpers over lists, mappings and other iterables: predicate
queries, mapping and folding, filtering and partitioning, sorting, indexing
and slicing.
"""

__version__ = "0.1.0"
__author__ = "seq_ops contributors"

from .core.errors import SeqOpsError, InvalidArgumentError, EmptySequenceError
from .core.traversable import is_list, materialize
from .sequences import (
    all, any, map, reduce, filter, partition, span,
    get_by_key, extend, zip, flatten, pairs, sorted, key_sorted,
    indexed, take, drop, first, last, reorder,
)
from .deprecated import move_element
from .config.settings import SeqOpsSettings, get_settings
from .utils.logging import configure_logging

__all__ = [
    "SeqOpsError",
    "InvalidArgumentError",
    "EmptySequenceError",
    "is_list",
    "materialize",
    "all",
    "any",
    "map",
    "reduce",
    "filter",
    "partition",
    "span",
    "get_by_key",
    "extend",
    "zip",
    "flatten",
    "pairs",
    "sorted",
    "key_sorted",
    "indexed",
    "take",
    "drop",
    "first",
    "last",
    "reorder",
    "move_element",
    "SeqOpsSettings",
    "get_settings",
    "configure_logging",
]
