"""
列表判定与物化
所有序列操作共用的两个辅助函数
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Hashable, Iterator, List, Tuple, Union

from . import args

Container = Union[List[Any], Dict[Hashable, Any]]


def is_list(var: Any) -> bool:
    """Returns True if the variable is a list.

    Non-string sequences are lists. A mapping is a list only when its keys
    are exactly ``0..len-1`` in iteration order.
    """
    if isinstance(var, (str, bytes, bytearray)):
        return False
    if isinstance(var, Sequence):
        return True
    if isinstance(var, Mapping):
        for expected, key in enumerate(var):
            if type(key) is not int or key != expected:
                return False
        return True
    return False


def materialize(var: Any) -> Container:
    """Copies a traversable into a new dict (for mappings) or list.

    One-shot iterators are drained and can not be reused afterwards.
    """
    args.expects(args.traversable, var)
    if isinstance(var, Mapping):
        return dict(var)
    return list(var)


def values_of(container: Any) -> Iterator[Any]:
    if isinstance(container, Mapping):
        return iter(container.values())
    return iter(container)


def items_of(container: Any) -> Iterator[Tuple[Hashable, Any]]:
    if isinstance(container, Mapping):
        return iter(container.items())
    return enumerate(container)


def rebuild(items: List[Tuple[Hashable, Any]], as_list: bool) -> Container:
    """Builds a result container from (key, value) items."""
    if as_list:
        return [value for _, value in items]
    return dict(items)


__all__ = ['Container', 'is_list', 'materialize', 'values_of', 'items_of', 'rebuild']
