"""Validation of colour components"""
from __future__ import annotations

__all__ = ['Policy', 'Validation', 'Component', 'HexComponent']

import math
import re
from enum import Enum
from numbers import Real
from typing import Any, Callable, NamedTuple, Optional, Type

from typing_extensions import TypeGuard

from .misc import clamp_value


class Policy(Enum):
    """What happens to a value refused by a component"""

    REJECT = 'reject'
    """Keep the previous value"""

    CLAMP = 'clamp'
    """Clamp out of range numbers into range, malformed values are still rejected"""

    RAISE = 'raise'
    """Raise a ComponentValueError"""


class Validation(NamedTuple):
    """Result of a component validation"""

    value: Any
    """Coerced value when accepted, the raw value otherwise"""

    reason: Optional[str] = None
    """Why the value was refused, None when accepted"""

    out_of_range: bool = False
    """Whether the value was well-formed but outside the allowed range"""

    @property
    def accepted(self) -> bool:
        return self.reason is None


def is_real(value: Any) -> TypeGuard[float]:
    """Real number, excluding booleans and NaN"""
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    return not (isinstance(value, float) and math.isnan(value))


class Component:
    """Numeric component bounded by an inclusive range"""

    __slots__ = ('force_type', 'peaks', 'coerce')

    def __init__(
        self, force_type: Type[float] | Type[int], low: float, high: float,
        coerce: Optional[Callable[[float], float]] = None
    ) -> None:
        self.force_type = force_type
        self.peaks = (force_type(low), force_type(high))
        self.coerce = coerce if coerce is not None else force_type

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.force_type.__name__}, {self.peaks[0]}, {self.peaks[1]})'

    def validate(self, value: Any) -> Validation:
        """
        Coerce and check value against the range of this component

        :param value:       Candidate value
        :return:            Validation result, never raises
        """
        if not is_real(value):
            return Validation(value, 'is not a number')
        if isinstance(value, float) and math.isinf(value):
            return Validation(value, f'is outside {self.peaks}', True)
        try:
            nvalue = self.force_type(self.coerce(value))
        except OverflowError:
            return Validation(value, f'is outside {self.peaks}', True)
        if not self.peaks[0] <= nvalue <= self.peaks[1]:
            return Validation(value, f'is outside {self.peaks}', True)
        return Validation(nvalue)

    def clamp(self, value: float) -> Any:
        """
        Clamp an out of range value into the peaks

        :param value:       Real number
        :return:            Clamped value
        """
        nvalue = clamp_value(value, *self.peaks)
        return self.force_type(self.coerce(nvalue))


class HexComponent:
    """Component made of one or two hexadecimal digits, stored on two lowercase digits"""

    __slots__ = ()

    width = 2
    pattern = re.compile(r'[0-9a-fA-F]{1,2}')

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

    def validate(self, value: Any) -> Validation:
        if not isinstance(value, str):
            return Validation(value, 'is not a string')
        if not self.pattern.fullmatch(value):
            return Validation(value, 'is not one or two hexadecimal digits')
        return Validation(value.lower().rjust(self.width, '0'))
