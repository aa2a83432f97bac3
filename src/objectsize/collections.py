from collections import *  # pyright: ignore[reportAssignmentType]
import reprlib
from ._shared import AbstractComposition
from .typing import (
    Any,
    Iterable,
    Iterator,
    MutableSet,
    T,
)




class IdentitySet(AbstractComposition, MutableSet[T]):
    """A set whose members are compared by identity rather than by
    equality.

    Members do not need to be hashable, and their `__eq__` and `__hash__`
    methods are never called. Two distinct objects that compare equal are
    both members.

    Each member is kept alive for as long as it belongs to the set; an
    `id` is only unique among objects that exist at the same time.
    """
    __slots__ = ('_object_value_',)

    _object_value_: dict[int, T]

    def __init__(self, iterable: Iterable[T] = (), /):
        self._object_value_ = {}
        for obj in iterable:
            self.add(obj)

    def __contains__(self, obj: Any) -> bool:
        return id(obj) in self._object_value_

    def __iter__(self) -> Iterator[T]:
        return iter(self._object_value_.values())

    def __len__(self) -> int:
        return len(self._object_value_)

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self._object_value_.values())!r})'

    def add(self, obj: T) -> None:
        self._object_value_[id(obj)] = obj

    def discard(self, obj: T) -> None:
        self._object_value_.pop(id(obj), None)

    def clear(self) -> None:
        self._object_value_.clear()

    def copy(self) -> 'IdentitySet[T]':
        new = self.__new__(type(self))
        new._object_value_ = self._object_value_.copy()
        return new

    __copy__ = copy
