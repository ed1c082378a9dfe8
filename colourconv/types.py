"""Internal types module"""
from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Dict, Generic, Optional, Sequence, Tuple, TypeVar, Union, overload

T_co = TypeVar('T_co', covariant=True)
TCV_co = TypeVar('TCV_co', bound=Union[float, int, str], covariant=True)  # Type Color Value covariant
Nb = TypeVar('Nb', bound=Union[float, int])  # Number
Tup3 = Tuple[Nb, Nb, Nb]
Tup3Str = Tuple[str, str, str]

PropertyCallback = Callable[[str], Any]
"""Change callback, called with the name of the assigned attribute"""


class NamedMutableSequence(Sequence[Optional[T_co]], Generic[T_co], ABC):
    """
    Sequence whose items are the public slots of the concrete class.

    A slot that was never assigned reads as None.
    """

    __slots__: Tuple[str, ...] = ()

    @property
    def _fields(self) -> Tuple[str, ...]:
        return tuple(k for k in self.__slots__ if not k.startswith('_'))

    def __str__(self) -> str:
        clsname = self.__class__.__name__
        values = ', '.join('%s=%r' % (k, v) for k, v in zip(self._fields, self))
        return '%s(%s)' % (clsname, values)

    def __repr__(self) -> str:
        return NamedMutableSequence.__str__(self)

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, NamedMutableSequence):
            return NotImplemented
        return type(self) == type(__o) and tuple(self) == tuple(__o)

    __hash__ = None  # type: ignore[assignment]

    @overload
    def __getitem__(self, index: int) -> Optional[T_co]:
        ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Optional[T_co], ...]:
        ...

    def __getitem__(self, index: int | slice) -> Optional[T_co] | Tuple[Optional[T_co], ...]:
        if isinstance(index, slice):
            return tuple(getattr(self, k, None) for k in self._fields[index])
        return getattr(self, self._fields[index], None)

    def __setitem__(self, item: int, value: Any) -> None:
        self.__setattr__(self._fields[item], value)

    def __len__(self) -> int:
        return len(self._fields)

    def _asdict(self) -> Dict[str, Optional[T_co]]:
        return {k: v for k, v in zip(self._fields, self)}
