"""
类型定义模块
参数约束和校验失败描述，使用 Pydantic v2 模型
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

# 调用方提供的函数
Predicate = Callable[[Any], Any]
KeyFunc = Callable[[Any], Any]
Comparator = Callable[[Any, Any], int]
Transform = Callable[[Any], Any]

# 可遍历对象：序列、映射或任意非字符串可迭代对象
Traversable = Union[Iterable[Any], Mapping[Hashable, Any]]


class BaseTypeModel(BaseModel):
    """基础类型模型配置"""
    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        str_strip_whitespace=True,  # 去除空白字符
        arbitrary_types_allowed=True,  # 允许任意类型
    )


class Constraint(BaseTypeModel):
    """A named argument check used by ``expects``.

    Calling the constraint with a value returns whether the value satisfies it.
    """
    name: str = Field(min_length=1, description="约束名称，出现在错误信息中")
    check: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return bool(self.check(value))

    def __str__(self) -> str:
        return self.name


class ArgumentViolation(BaseTypeModel):
    """不可变的参数校验失败描述"""
    function: str = Field(description="被调用函数的限定名")
    position: int = Field(ge=1, description="参数位置，从 1 开始")
    expected: Tuple[str, ...] = Field(min_length=1)
    actual: str

    @computed_field
    @property
    def message(self) -> str:
        return (
            f"Argument {self.position} passed to {self.function}() must be "
            f"{' or '.join(self.expected)}, {self.actual} given"
        )

    def __str__(self) -> str:
        return self.message


__all__ = [
    'Predicate', 'KeyFunc', 'Comparator', 'Transform', 'Traversable',
    'BaseTypeModel', 'Constraint', 'ArgumentViolation',
]
