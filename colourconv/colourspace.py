"""Colourspace module"""
from __future__ import annotations

__all__ = [
    'ColourSpace',
    'RGB', 'Hex', 'CMYK', 'HSL', 'HSV',
]

import math
import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Pattern, Tuple, Type, TypeVar

from ._logging import logger
from .convert import ConvertColour as CC
from .exception import ComponentValueError
from .misc import to_percent
from .types import NamedMutableSequence, PropertyCallback, TCV_co
from .validation import Component, HexComponent, Policy, Validation

_ColourSpaceT = TypeVar('_ColourSpaceT', bound='ColourSpace[Any]')

_BYTE = Component(int, 0, 255, math.floor)
_DEGREES = Component(int, 0, 359, math.floor)
_NORMALISED = Component(float, 0., 1.)
_HEX = HexComponent()


def _fmt(val: Any) -> str:
    return '' if val is None else str(val)


class ColourSpace(NamedMutableSequence[TCV_co], ABC):
    """
    Base class for colourspace interface

    Every public field is validated on assignment according to ``components``.
    None unsets a field.
    """

    __slots__ = ('_on_change', '_notify_rejected', '_policy')

    components: ClassVar[Dict[str, Any]] = {}
    """Validator of each field"""

    default_policy: ClassVar[Policy] = Policy.REJECT
    """Policy used when none is given to the constructor"""

    _on_change: Optional[PropertyCallback]
    _notify_rejected: bool
    _policy: Policy

    def __init__(
        self, *args: Any,
        on_change: Optional[PropertyCallback] = None,
        notify_rejected: bool = True,
        policy: Optional[Policy] = None
    ) -> None:
        super().__init__()
        object.__setattr__(self, '_on_change', None)
        object.__setattr__(self, '_notify_rejected', notify_rejected)
        object.__setattr__(self, '_policy', policy if policy is not None else self.default_policy)
        for k in self._fields:
            object.__setattr__(self, k, None)
        for k, v in zip(self._fields, args):
            setattr(self, k, v)
        self.on_change = on_change

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith('_') or name not in self.components:
            return super().__setattr__(name, value)

        if value is None:
            super().__setattr__(name, None)
            self._notify(name)
            return None

        validation: Validation = self.components[name].validate(value)
        if validation.accepted:
            super().__setattr__(name, validation.value)
            self._notify(name)
            return None

        if self._policy is Policy.CLAMP and validation.out_of_range:
            nvalue = self.components[name].clamp(value)
            logger.debug(f'{self.__class__.__name__}.{name}: {value!r} {validation.reason}, clamped to {nvalue!r}')
            super().__setattr__(name, nvalue)
            self._notify(name)
            return None

        if self._policy is Policy.RAISE:
            raise ComponentValueError(name, value, validation.reason or '')

        logger.debug(f'{self.__class__.__name__}.{name}: {value!r} {validation.reason}, rejected')
        if self._notify_rejected:
            self._notify(name)
        return None

    def __delattr__(self, name: str) -> None:
        if name in self.components:
            raise AttributeError(f'Can\'t delete {name}, assign None to unset it')
        super().__delattr__(name)

    def __copy__(self: _ColourSpaceT) -> _ColourSpaceT:
        return self.__class__(*self, notify_rejected=self._notify_rejected, policy=self._policy)

    def __deepcopy__(self: _ColourSpaceT, *args: Any) -> _ColourSpaceT:
        return self.__copy__()

    __repr__ = NamedMutableSequence.__repr__

    @property
    def on_change(self) -> Optional[PropertyCallback]:
        """Callback called with the name of every assigned field"""
        return self._on_change

    @on_change.setter
    def on_change(self, func: Optional[PropertyCallback]) -> None:
        if func is None or callable(func):
            object.__setattr__(self, '_on_change', func)

    @property
    def policy(self) -> Policy:
        """Policy applied to refused values"""
        return self._policy

    def _notify(self, name: str) -> None:
        if self._on_change is not None:
            self._on_change(name)

    def is_complete(self) -> bool:
        """Whether every field is set"""
        return all(v is not None for v in self)

    def _incomplete(self, target: Type[_ColourSpaceT]) -> _ColourSpaceT:
        logger.warning(f'{self!r} has unset fields, {target.__name__} conversion gives an unset colour', depth=2)
        return target()

    @abstractmethod
    def __str__(self) -> str:
        ...

    def to_css(self) -> str:
        """
        CSS like notation of the current object

        :return:            String in the form ``name(values)``
        """
        return f'{self.__class__.__name__.lower()}({self})'

    @abstractmethod
    def to_rgb(self) -> RGB:
        """
        Convert current object to a RGB object

        :return:            RGB object
        """
        ...

    def to_hex(self) -> Hex:
        """
        Convert current object to a Hex object

        :return:            Hex object
        """
        return self.to_rgb().to_hex()

    def to_cmyk(self) -> CMYK:
        """
        Convert current object to a CMYK object

        :return:            CMYK object
        """
        return self.to_rgb().to_cmyk()

    def to_hsl(self) -> HSL:
        """
        Convert current object to a HSL object

        :return:            HSL object
        """
        return self.to_rgb().to_hsl()

    def to_hsv(self) -> HSV:
        """
        Convert current object to a HSV object

        :return:            HSV object
        """
        return self.to_rgb().to_hsv()


class RGB(ColourSpace[int]):
    """RGB colourspace in range 0 - 255"""

    __slots__ = ('r', 'g', 'b')

    components = dict(r=_BYTE, g=_BYTE, b=_BYTE)

    r: Optional[int]
    """Red value"""
    g: Optional[int]
    """Green value"""
    b: Optional[int]
    """Blue value"""

    def __init__(
        self, r: Optional[float] = None, g: Optional[float] = None, b: Optional[float] = None, *,
        on_change: Optional[PropertyCallback] = None, notify_rejected: bool = True, policy: Optional[Policy] = None
    ) -> None:
        """
        Make a new RGB colourspace object

        :param r:                   Red value, floored
        :param g:                   Green value, floored
        :param b:                   Blue value, floored
        :param on_change:           Callback called with the name of every assigned field
        :param notify_rejected:     Call on_change for rejected values too, defaults to True
        :param policy:              Policy for refused values, defaults to ``default_policy``
        """
        super().__init__(r, g, b, on_change=on_change, notify_rejected=notify_rejected, policy=policy)

    def __str__(self) -> str:
        return ', '.join(map(_fmt, self))

    def _normalised(self) -> Tuple[float, float, float]:
        r, g, b = self
        assert r is not None and g is not None and b is not None
        return CC.normalise(r, g, b)

    def to_rgb(self) -> RGB:
        return self.__copy__()

    def to_hex(self) -> Hex:
        if self.is_complete():
            return Hex(*CC.rgb_to_hex(*self))  # type: ignore[arg-type]
        # Unset channels stay unset
        return Hex(*(None if v is None else CC.byte_to_hex(v) for v in self))

    def to_cmyk(self) -> CMYK:
        if not self.is_complete():
            return self._incomplete(CMYK)
        cmyk = CMYK(*CC.rgb_to_cmyk(*self._normalised()))
        logger.trace(f'{self!r} -> {cmyk!r}')
        return cmyk

    def to_hsl(self) -> HSL:
        if not self.is_complete():
            return self._incomplete(HSL)
        h, s, l = CC.rgb_to_hsl(*self._normalised())
        hsl = HSL(CC.whole_hue(h), s, l)
        logger.trace(f'{self!r} -> {hsl!r}')
        return hsl

    def to_hsv(self) -> HSV:
        if not self.is_complete():
            return self._incomplete(HSV)
        h, s, v = CC.rgb_to_hsv(*self._normalised())
        hsv = HSV(CC.whole_hue(h), s, v)
        logger.trace(f'{self!r} -> {hsv!r}')
        return hsv


class Hex(ColourSpace[str]):
    """RGB colourspace as two hexadecimal digits per channel"""

    __slots__ = ('r', 'g', 'b')

    components = dict(r=_HEX, g=_HEX, b=_HEX)
    hex_pattern: ClassVar[Pattern[str]] = re.compile(r'[0-9a-fA-F]{0,6}')

    r: Optional[str]
    """Red value"""
    g: Optional[str]
    """Green value"""
    b: Optional[str]
    """Blue value"""

    def __init__(
        self, r: Optional[str] = None, g: Optional[str] = None, b: Optional[str] = None, *,
        on_change: Optional[PropertyCallback] = None, notify_rejected: bool = True, policy: Optional[Policy] = None
    ) -> None:
        """
        Make a new Hex colourspace object

        .. code-block:: python

            >>> Hex('ff', '8', '0')
            Hex(r='ff', g='08', b='00')

        :param r:                   Red value, one or two hexadecimal digits
        :param g:                   Green value, one or two hexadecimal digits
        :param b:                   Blue value, one or two hexadecimal digits
        :param on_change:           Callback called with the name of every assigned field
        :param notify_rejected:     Call on_change for rejected values too, defaults to True
        :param policy:              Policy for refused values, defaults to ``default_policy``
        """
        super().__init__(r, g, b, on_change=on_change, notify_rejected=notify_rejected, policy=policy)

    @classmethod
    def from_string(cls, hexstring: str, /, **kwargs: Any) -> Hex:
        """
        Make a Hex object from a combined string such as ``#ff8000`` or ``ff8000``

        :param hexstring:   Up to six hexadecimal digits, optionally prefixed by #
        :return:            Hex object
        """
        obj = cls(**kwargs)
        on_change = obj.on_change
        obj.on_change = None
        obj.hex = hexstring
        obj.on_change = on_change
        return obj

    @property
    def hex(self) -> str:
        """Concatenation of the three components, unset ones are empty"""
        return ''.join(map(_fmt, self))

    @hex.setter
    def hex(self, value: str) -> None:
        if not isinstance(value, str):
            return self._reject_hex(value, 'is not a string')
        digits = value[1:] if value.startswith('#') else value
        if not self.hex_pattern.fullmatch(digits):
            return self._reject_hex(value, 'is not up to six hexadecimal digits')
        self.r, self.g, self.b = (digits[i:i + 2] or None for i in (0, 2, 4))
        self._notify('hex')
        return None

    def _reject_hex(self, value: Any, reason: str) -> None:
        if self._policy is Policy.RAISE:
            raise ComponentValueError('hex', value, reason)
        logger.debug(f'{self.__class__.__name__}.hex: {value!r} {reason}, rejected')
        if self._notify_rejected:
            self._notify('hex')

    def __str__(self) -> str:
        return self.hex

    def to_css(self) -> str:
        return f'#{self.hex}'

    def to_rgb(self) -> RGB:
        if self.is_complete():
            return RGB(*CC.hex_to_rgb(*self))  # type: ignore[arg-type]
        return RGB(*(None if v is None else CC.hex_to_byte(v) for v in self))

    def to_hex(self) -> Hex:
        return self.__copy__()


class CMYK(ColourSpace[float]):
    """CMYK colourspace in range 0.0 - 1.0"""

    __slots__ = ('c', 'm', 'y', 'k')

    components = dict(c=_NORMALISED, m=_NORMALISED, y=_NORMALISED, k=_NORMALISED)

    c: Optional[float]
    """Cyan value"""
    m: Optional[float]
    """Magenta value"""
    y: Optional[float]
    """Yellow value"""
    k: Optional[float]
    """Key (black) value"""

    def __init__(
        self, c: Optional[float] = None, m: Optional[float] = None,
        y: Optional[float] = None, k: Optional[float] = None, *,
        on_change: Optional[PropertyCallback] = None, notify_rejected: bool = True, policy: Optional[Policy] = None
    ) -> None:
        """
        Make a new CMYK colourspace object

        :param c:                   Cyan value in the range 0.0 - 1.0
        :param m:                   Magenta value in the range 0.0 - 1.0
        :param y:                   Yellow value in the range 0.0 - 1.0
        :param k:                   Key value in the range 0.0 - 1.0
        :param on_change:           Callback called with the name of every assigned field
        :param notify_rejected:     Call on_change for rejected values too, defaults to True
        :param policy:              Policy for refused values, defaults to ``default_policy``
        """
        super().__init__(c, m, y, k, on_change=on_change, notify_rejected=notify_rejected, policy=policy)

    def __str__(self) -> str:
        return ', '.join(f'{to_percent(v)}%' for v in self)

    def to_rgb(self) -> RGB:
        if not self.is_complete():
            return self._incomplete(RGB)
        rgb = RGB(*CC.denormalise(*CC.cmyk_to_rgb(*self)))  # type: ignore[arg-type]
        logger.trace(f'{self!r} -> {rgb!r}')
        return rgb

    def to_cmyk(self) -> CMYK:
        return self.__copy__()


class _HueSaturationBased(ColourSpace[float], ABC):
    """Base class for Hue and Saturation based colourspace"""

    __slots__ = ()

    h: Optional[int]
    """Hue value in degrees"""
    s: Optional[float]
    """Saturation"""

    def __str__(self) -> str:
        h, *others = self
        return ', '.join([_fmt(h), *(f'{to_percent(v)}%' for v in others)])

    def to_rgb(self) -> RGB:
        if not self.is_complete():
            return self._incomplete(RGB)
        rgb = RGB(*CC.denormalise(*self._to_rgbs()))
        logger.trace(f'{self!r} -> {rgb!r}')
        return rgb

    @abstractmethod
    def _to_rgbs(self) -> Tuple[float, float, float]:
        ...


class HSL(_HueSaturationBased):
    """HSL colourspace, hue in range 0 - 359, saturation and lightness in range 0.0 - 1.0"""

    __slots__ = ('h', 's', 'l')

    components = dict(h=_DEGREES, s=_NORMALISED, l=_NORMALISED)

    l: Optional[float]
    """Lightness value"""

    def __init__(
        self, h: Optional[float] = None, s: Optional[float] = None, l: Optional[float] = None, *,
        on_change: Optional[PropertyCallback] = None, notify_rejected: bool = True, policy: Optional[Policy] = None
    ) -> None:
        """
        Make a new HSL colourspace object

        :param h:                   Hue in degrees in the range 0 - 359, floored
        :param s:                   Saturation in the range 0.0 - 1.0
        :param l:                   Lightness in the range 0.0 - 1.0
        :param on_change:           Callback called with the name of every assigned field
        :param notify_rejected:     Call on_change for rejected values too, defaults to True
        :param policy:              Policy for refused values, defaults to ``default_policy``
        """
        super().__init__(h, s, l, on_change=on_change, notify_rejected=notify_rejected, policy=policy)

    def _to_rgbs(self) -> Tuple[float, float, float]:
        return CC.hsl_to_rgb(*self)  # type: ignore[arg-type]

    def to_hsl(self) -> HSL:
        return self.__copy__()


class HSV(_HueSaturationBased):
    """HSV colourspace, hue in range 0 - 359, saturation and value in range 0.0 - 1.0"""

    __slots__ = ('h', 's', 'v')

    components = dict(h=_DEGREES, s=_NORMALISED, v=_NORMALISED)

    v: Optional[float]
    """Value (brightness)"""

    def __init__(
        self, h: Optional[float] = None, s: Optional[float] = None, v: Optional[float] = None, *,
        on_change: Optional[PropertyCallback] = None, notify_rejected: bool = True, policy: Optional[Policy] = None
    ) -> None:
        """
        Make a new HSV colourspace object

        :param h:                   Hue in degrees in the range 0 - 359, floored
        :param s:                   Saturation in the range 0.0 - 1.0
        :param v:                   Value in the range 0.0 - 1.0
        :param on_change:           Callback called with the name of every assigned field
        :param notify_rejected:     Call on_change for rejected values too, defaults to True
        :param policy:              Policy for refused values, defaults to ``default_policy``
        """
        super().__init__(h, s, v, on_change=on_change, notify_rejected=notify_rejected, policy=policy)

    def _to_rgbs(self) -> Tuple[float, float, float]:
        return CC.hsv_to_rgb(*self)  # type: ignore[arg-type]

    def to_hsv(self) -> HSV:
        return self.__copy__()
