from typing import Protocol, Any


MISSING = object()




def typename(obj: Any) -> str:
    """Return the qualified name of *obj*'s class, for use in messages."""
    tp = type(obj)
    if tp.__module__ == 'builtins':
        return tp.__qualname__
    return f'{tp.__module__}.{tp.__qualname__}'




# [ Types ]

class AbstractComposition(Protocol):
    """Base class for classes that wrap other objects.

    Instances of a base composition class must have a `_object_value_`
    attribute pointing to the wrapped object.
    """
    __slots__ = ()

    _object_value_: Any
