from sys import *
import logging
import threading
from ._shared import MISSING, typename
from .collections import IdentitySet
from .gc import peel_references
from .inspect import declared_reference_fields
from .typing import (
    overload,
    Any,
    Callable,
    FieldEnumerator,
    Iterable,
    Iterator,
    SizeOracle,
    T,
)


logger = logging.getLogger(__name__)




# [ Shallow Size ]

_SIZEOF_LOCK = threading.Lock()
_SIZEOF_REGISTRY: dict[type[Any], Callable[[Any], int]] = {}


@overload
def register_sizeof(tp: type[T], /) -> Callable[[Callable[[T], int]], Callable[[T], int]]: ...
@overload
def register_sizeof(tp: type[T], sizefn: Callable[[T], int], /) -> Callable[[T], int]: ...
def register_sizeof(tp: type[Any], sizefn: Any = MISSING, /) -> Any:
    """Use *sizefn* to compute the shallow size of instances of *tp*.

    Only exact instances are affected; subclasses of *tp* are not. When
    *sizefn* is omitted, return a decorator registering the function it
    decorates.
    """
    if sizefn is MISSING:
        return lambda sizefn: register_sizeof(tp, sizefn)
    with _SIZEOF_LOCK:
        _SIZEOF_REGISTRY[tp] = sizefn
    return sizefn


def unregister_sizeof(tp: type[Any], /) -> None:
    """Remove the size function registered for *tp*, if any."""
    with _SIZEOF_LOCK:
        _SIZEOF_REGISTRY.pop(tp, None)


def shallowsizeof(obj: Any, /) -> int:
    """Return the size of *obj*'s own storage, in bytes.

    Objects *obj* references are not included. Uses the size function
    registered for `type(obj)` when there is one, otherwise
    `sys.getsizeof`. The shallow size of None is zero.
    """
    if obj is None:
        return 0
    with _SIZEOF_LOCK:
        sizefn = _SIZEOF_REGISTRY.get(type(obj))
    if sizefn is None:
        return getsizeof(obj)
    return sizefn(obj)




# [ Retained Size ]

class ObjectSize:
    """Calculates the retained size of one or more root objects: the
    shallow size of every distinct object reachable from them.

    Args:
        * roots: Objects to start from. None is accepted and contributes
        nothing.

        * sizer: Returns the shallow size of a single object.

        * fields: Lists the fields declared directly on a class.

        * exclude: Objects treated as already counted. They contribute
        nothing and are not expanded, even when passed as roots.


    The object graph is walked breadth-first, one layer at a time, so
    the walk's depth is not limited by the recursion limit. Objects are
    told apart by identity; equality and hashing of the objects in the
    graph are never used.

    The graph should not be mutated while being walked. Every walk starts
    from scratch, so an instance may be reused.
    """
    __slots__ = ('roots', 'sizer', 'fields', 'exclude')

    def __init__(
        self,
        *roots : Any,
        sizer  : SizeOracle = shallowsizeof,
        fields : FieldEnumerator = declared_reference_fields,
        exclude: Iterable[Any] = (),
    ):
        self.roots   = roots
        self.sizer   = sizer
        self.fields  = fields
        self.exclude = tuple(exclude)

    def _sizeof(self, obj: Any) -> int:
        size = self.sizer(obj)
        if size < 0:
            raise ValueError(f"size oracle returned {size!r} for {typename(obj)!r} object")
        return size

    def walk(self) -> Iterator[tuple[Any, int, int]]:
        """Yield `(object, shallow size, depth)` for every distinct object
        reachable from the roots, in breadth-first order.

        Roots are at depth 0.
        """
        visited   = IdentitySet(self.exclude)
        cur_layer = []
        new_layer = []

        for root in self.roots:
            if root in visited:
                continue
            visited.add(root)
            if root is None:
                continue
            cur_layer.append(root)
            yield root, self._sizeof(root), 0

        depth = 0
        while cur_layer:
            depth += 1
            new_layer.clear()
            for obj in cur_layer:
                for ref in peel_references(obj, self.fields):
                    if ref not in visited:
                        visited.add(ref)
                        new_layer.append(ref)
                        yield ref, self._sizeof(ref), depth
            cur_layer, new_layer = new_layer, cur_layer

    def calculate_size(self) -> int:
        """Return the retained size of the roots, in bytes."""
        size  = 0
        count = 0
        depth = 0
        for _, nbytes, depth in self.walk():
            size  += nbytes
            count += 1
        logger.debug("retained size %d bytes (%d objects, depth %d)", size, count, depth)
        return size


def sizeof(
    obj    : Any,
    /,
    *,
    sizer  : SizeOracle = shallowsizeof,
    fields : FieldEnumerator = declared_reference_fields,
    exclude: Iterable[Any] = (),
) -> int:
    """Return the retained size of *obj*, in bytes.

    Equivalent to `ObjectSize(obj, ...).calculate_size()`. The size of None
    is zero.
    """
    return ObjectSize(obj, sizer=sizer, fields=fields, exclude=exclude).calculate_size()


def bytesizeof(
    *roots : Any,
    sizer  : SizeOracle = shallowsizeof,
    fields : FieldEnumerator = declared_reference_fields,
    exclude: Iterable[Any] = (),
) -> int:
    """Return the combined retained size of *roots*, in bytes.

    Objects shared between roots are counted once.
    """
    return ObjectSize(*roots, sizer=sizer, fields=fields, exclude=exclude).calculate_size()
