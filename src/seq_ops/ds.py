"""Deprecated data-structure helpers, kept for old imports."""

from __future__ import annotations

from typing import Any

from .core import args, traversable
from .deprecated import deprecated


@deprecated(args.get_type)
def get_type(var: Any) -> str:
    """Returns the variable type name."""


@deprecated(traversable.is_list)
def is_list(var: Any) -> bool:
    """Returns True if the variable is a list."""


@deprecated(traversable.materialize)
def traversable_to_array(var: Any) -> Any:
    """Copies a traversable into a list or dict."""


__all__ = ['get_type', 'is_list', 'traversable_to_array']
