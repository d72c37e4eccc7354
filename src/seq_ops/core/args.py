"""
参数校验
在每个公共函数入口处检查参数，失败时抛出带有参数位置的 InvalidArgumentError
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, List, Union

from .errors import InvalidArgumentError
from .types import ArgumentViolation, Constraint

_STRINGS = (str, bytes, bytearray)


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_traversable(value: Any) -> bool:
    """True for any iterable except strings and byte strings."""
    return isinstance(value, Iterable) and not isinstance(value, _STRINGS)


def is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def is_array_access(value: Any) -> bool:
    return isinstance(value, (Mapping, Sequence)) and not isinstance(value, _STRINGS)


traversable = Constraint(name="traversable", check=is_traversable)
array_access = Constraint(name="array_access", check=is_array_access)
array_key = Constraint(name="hashable", check=is_hashable)
int_ = Constraint(name="int", check=is_int)
natural = Constraint(name="int >= 0", check=lambda v: is_int(v) and v >= 0)
positive = Constraint(name="int >= 1", check=lambda v: is_int(v) and v >= 1)
bool_ = Constraint(name="bool", check=lambda v: isinstance(v, bool))
callable_ = Constraint(name="callable", check=callable)

ConstraintSpec = Union[Constraint, List[Constraint]]


def get_type(value: Any) -> str:
    """Returns the type name of ``value``, or ``None`` for None."""
    if value is None:
        return "None"
    return type(value).__name__


def _caller_name(depth: int) -> str:
    frame = sys._getframe(depth + 1)
    module = frame.f_globals.get("__name__", "")
    name = frame.f_code.co_name
    return f"{module}.{name}" if module else name


def _check(constraint: ConstraintSpec, value: Any, position: int, depth: int) -> None:
    constraints = constraint if isinstance(constraint, list) else [constraint]
    for c in constraints:
        if c(value):
            return

    violation = ArgumentViolation(
        function=_caller_name(depth + 1),
        position=position,
        expected=tuple(c.name for c in constraints),
        actual=get_type(value),
    )
    raise InvalidArgumentError.from_violation(violation)


def expects(constraint: ConstraintSpec, value: Any, position: int = 1) -> None:
    """Checks that ``value`` satisfies ``constraint``.

    ``constraint`` may be a single Constraint or a list of them, in which case
    satisfying any one is enough. ``position`` is the 1-based position of the
    argument in the calling function and ends up in the error message.

    Raises:
        InvalidArgumentError: if the value satisfies none of the constraints
    """
    _check(constraint, value, position, depth=1)


def expects_optional(constraint: ConstraintSpec, value: Any, position: int = 1) -> None:
    """Like ``expects`` but None is always accepted."""
    if value is None:
        return
    _check(constraint, value, position, depth=1)


__all__ = [
    'traversable', 'array_access', 'array_key', 'int_', 'natural', 'positive',
    'bool_', 'callable_', 'is_int', 'is_hashable', 'is_traversable', 'is_array_access',
    'get_type', 'expects', 'expects_optional',
]
