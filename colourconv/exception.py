from __future__ import annotations

__all__ = ['ComponentValueError']

from typing import Any


class _StringRepresentable(BaseException):
    def __str__(self) -> str:
        if self.args:
            return f'{self.__class__.__name__}: {self.args[0]}'
        return self.__class__.__name__

    def __repr__(self) -> str:
        return self.__class__.__name__


class ComponentValueError(ValueError, _StringRepresentable):
    """Colour component value refused under the raising policy"""

    field: str
    value: Any
    reason: str

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f'{field}={value!r} {reason}')
        self.field = field
        self.value = value
        self.reason = reason
