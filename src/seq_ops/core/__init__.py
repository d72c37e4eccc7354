"""
核心模块初始化
导出类型、异常和公共辅助函数
"""

from .types import (
    Predicate, KeyFunc, Comparator, Transform, Traversable,
    Constraint, ArgumentViolation
)

from .errors import SeqOpsError, InvalidArgumentError, EmptySequenceError

from .traversable import is_list, materialize

__all__ = [
    # 类型
    'Predicate', 'KeyFunc', 'Comparator', 'Transform', 'Traversable',
    'Constraint', 'ArgumentViolation',

    # 异常
    'SeqOpsError', 'InvalidArgumentError', 'EmptySequenceError',

    # 辅助函数
    'is_list', 'materialize',
]
