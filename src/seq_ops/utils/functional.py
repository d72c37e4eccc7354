"""
简化的函数组合工具
供排序和默认谓词使用
"""

from __future__ import annotations

from typing import Any, Callable

from ..core.types import Comparator


def identity(value: Any) -> Any:
    return value


# 简单的函数组合
def compose(*functions: Callable[..., Any]) -> Callable[..., Any]:
    """函数组合：从右到左组合函数，最右侧的函数可以接收多个参数"""
    if not functions:
        return identity

    *outer, inner = functions

    def composed(*args, **kwargs):
        result = inner(*args, **kwargs)
        for func in reversed(outer):
            result = func(result)
        return result
    return composed


def compare(a: Any, b: Any) -> int:
    """Generic three-way comparison: -1, 0 or 1."""
    return (a > b) - (a < b)


def on_key(cmp: Comparator, key: Callable[[Any], Any]) -> Comparator:
    """Comparator that compares ``key(a)`` with ``key(b)``."""
    def keyed(a, b):
        return cmp(key(a), key(b))
    return keyed
