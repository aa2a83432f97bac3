from inspect import *
import enum
import types
import array
import collections
import dataclasses
from .typing import (
    Any,
    Descriptor,
    GetSetDescriptor,
    MemberDescriptor,
    NoneType,
    TypeIs,
)




class PyTypeFlag(enum.IntFlag):
    """Python type bit masks (`type.__flags__`, `PyTypeObject.tp_flags`).

    A type's flag bit mask is created when the object is defined --
    changing it from Python does nothing helpful.
    """
    HEAPTYPE = (1 << 9)


def hasfeature(cls: type[Any], /, flags: PyTypeFlag | int) -> bool:
    """Python implementation of the Python C-API `PyType_HasFeature`
    macro.
    """
    return bool(cls.__flags__ & flags)




def iscclass(obj: type[Any] | Any, /) -> TypeIs[type[Any]]:
    """Return True if *obj* is a class implemented in C."""
    return isinstance(obj, type) and not hasfeature(obj, PyTypeFlag.HEAPTYPE)




# [ Payload Kinds ]

# Values without references of their own. Their storage is fully
# described by their shallow size.
PRIMITIVE_TYPES = (NoneType, bool, int, float, complex)

# Arrays whose items are stored inline rather than as objects.
PRIMITIVE_ARRAY_TYPES = (str, bytes, bytearray, array.array)

# Arrays holding references to other objects. Mappings are handled
# separately since they hold two references per item.
REFERENCE_ARRAY_TYPES = (list, tuple, collections.deque, set, frozenset)


def isprimitive(obj: Any, /) -> bool:
    """Return True if *obj* is a scalar value that cannot reference
    other objects (e.g. an `int` or `float`)."""
    return isinstance(obj, PRIMITIVE_TYPES)


def isprimitivearray(obj: Any, /) -> bool:
    """Return True if *obj* is a sequence of raw values stored inline,
    such as a `str` or an `array.array`.

    Instances of subclasses qualify, though a subclass may still declare
    fields of its own.
    """
    return isinstance(obj, PRIMITIVE_ARRAY_TYPES)


def isreferencearray(obj: Any, /) -> bool:
    """Return True if *obj* is a built-in container whose items are
    references to other objects. Includes `dict` and its subclasses.
    """
    return isinstance(obj, (dict, *REFERENCE_ARRAY_TYPES))




# [ Fields ]

class ReadStatus(enum.Enum):
    VALUE  = enum.auto()  # the field holds a value (possibly None)
    UNSET  = enum.auto()  # e.g. an unassigned slot
    DENIED = enum.auto()  # `PermissionError`
    FAILED = enum.auto()  # anything else


@dataclasses.dataclass(frozen=True, slots=True)
class FieldRead:
    """The outcome of reading a field from an instance."""
    status: ReadStatus
    value : Any = None
    error : BaseException | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class Field:
    """An instance field declared on *owner*.

    Args:
        * name: The attribute name as stored on the class (private names
        are mangled, e.g. `_Class__name`).

        * owner: The class declaring the field.

        * descriptor: The object managing the field's storage, usually a
        slot member descriptor or the `__dict__` descriptor.
    """
    name      : str
    owner     : type[Any]
    descriptor: Descriptor[Any]

    @property
    def qualname(self) -> str:
        return f'{self.owner.__qualname__}.{self.name}'

    def read(self, obj: Any) -> FieldRead:
        """Read the field's current value from *obj*.

        The value is fetched from the descriptor directly, so neither
        private name mangling nor a custom `__getattribute__` method on
        *obj*'s class can hide it. Errors are reported through the result
        instead of being raised.
        """
        try:
            value = self.descriptor.__get__(obj, self.owner)
        except AttributeError:
            return FieldRead(ReadStatus.UNSET)
        except PermissionError as e:
            return FieldRead(ReadStatus.DENIED, error=e)
        except Exception as e:
            return FieldRead(ReadStatus.FAILED, error=e)
        return FieldRead(ReadStatus.VALUE, value)


# Namespaces shared across the whole process rather than owned by an
# instance. Their `__dict__` is never a field.
NAMESPACE_TYPES = (type, types.ModuleType, types.FunctionType)


def declared_reference_fields(cls: type[Any], /) -> tuple[Field, ...]:
    """Return the instance fields declared directly on *cls*.

    Fields are the slot members listed in the class' `__slots__`, and
    `__dict__` when *cls* is the class introducing the instance
    dictionary. Inherited fields, class attributes and `__weakref__` are
    not included.

    Classes implemented in C have no slot fields, but some of them
    (e.g. `BaseException`, `types.SimpleNamespace`, `functools.partial`)
    introduce the instance dictionary. Classes, modules and functions
    never expose theirs.
    """
    if issubclass(cls, NAMESPACE_TYPES):
        return ()
    cclass = iscclass(cls)
    # Not cached. Class dictionaries are mutable, so a slot found on a
    # class once may not exist later.
    fields = []
    for name, member in tuple(cls.__dict__.items()):
        if name == '__dict__':
            if not isinstance(member, (GetSetDescriptor, MemberDescriptor)):
                continue
        elif cclass or not isinstance(member, MemberDescriptor):
            continue
        # a descriptor borrowed from another class is just a class attribute
        if getattr(member, '__objclass__', None) is not cls:
            continue
        fields.append(Field(name, cls, member))
    return tuple(fields)

