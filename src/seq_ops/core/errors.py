"""异常类型"""

from __future__ import annotations

from typing import Optional

from .types import ArgumentViolation


class SeqOpsError(Exception):
    """Base class for every error raised by seq_ops."""


class InvalidArgumentError(SeqOpsError, ValueError):
    """An argument has the wrong shape or type.

    When raised by the argument validator, ``violation`` describes which
    argument of which function failed and why.
    """

    def __init__(self, message: str, violation: Optional[ArgumentViolation] = None):
        super().__init__(message)
        self.violation = violation

    @classmethod
    def from_violation(cls, violation: ArgumentViolation) -> 'InvalidArgumentError':
        return cls(violation.message, violation)


class EmptySequenceError(InvalidArgumentError):
    """The operation needs at least one element."""


__all__ = ['SeqOpsError', 'InvalidArgumentError', 'EmptySequenceError']
