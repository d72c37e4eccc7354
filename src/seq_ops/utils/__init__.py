"""
工具模块初始化
导出函数组合工具和日志配置
"""

from .functional import identity, compose, compare, on_key
from .logging import configure_logging, get_logger

__all__ = [
    # 函数组合
    'identity', 'compose', 'compare', 'on_key',

    # 日志
    'configure_logging', 'get_logger',
]
