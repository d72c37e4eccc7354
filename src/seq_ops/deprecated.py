"""
废弃的别名
旧名称继续可用，调用时发出 DeprecationWarning 并记录日志
"""

from __future__ import annotations

import warnings
from functools import wraps
from typing import Any, Callable, List

from .config.settings import get_settings
from .sequences import reorder
from .utils.logging import get_logger

logger = get_logger(__name__)


def deprecated(replacement: Callable[..., Any]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Routes the decorated name to ``replacement`` and warns on every call.

    The decorated function's body is never run, only its name and docstring
    are kept.
    """
    target = f"{replacement.__module__}.{replacement.__name__}"

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug("deprecated_call", name=func.__name__, replacement=target)
            if get_settings().warn_deprecated:
                warnings.warn(
                    f"{func.__name__}() is deprecated, use {target}() instead",
                    DeprecationWarning,
                    stacklevel=2,
                )
            return replacement(*args, **kwargs)

        wrapper.__deprecated_by__ = replacement
        return wrapper

    return decorator


@deprecated(reorder)
def move_element(sequence: Any, from_index: int, to_index: int) -> List[Any]:
    """Moves list element to another position."""


__all__ = ['deprecated', 'move_element']
