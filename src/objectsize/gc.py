from gc import *
import logging
from ._shared import typename
from .inspect import (
    REFERENCE_ARRAY_TYPES,
    ReadStatus,
    declared_reference_fields,
    isprimitive,
    isprimitivearray,
)
from .typing import Any, FieldEnumerator, Iterator


logger = logging.getLogger(__name__)




class ReflectiveReadError(RuntimeError):
    """A field expected to be readable could not be read.

    This indicates the field metadata disagrees with the object it was
    applied to; the cause is chained as `__cause__`.
    """




def _iter_elements(obj: Any) -> Iterator[Any]:
    # Use the built-in base's methods so subclasses cannot hide items by
    # overriding `items` or `__iter__`. Snapshot first; the container
    # must not change size while being read.
    if isinstance(obj, dict):
        for k, v in tuple(dict.items(obj)):
            yield k
            yield v
        return
    for base in REFERENCE_ARRAY_TYPES:
        if isinstance(obj, base):
            yield from tuple(base.__iter__(obj))
            return


def peel_references(obj: Any, /, fields: FieldEnumerator = declared_reference_fields) -> list[Any]:
    """Return the objects *obj* directly references, excluding None.

    Args:
        - obj: The object to inspect. None has no references.

        - fields: Lists the fields declared directly on a class. It is
        called once for every class in `type(obj).__mro__`.


    Items of built-in containers come first (for mappings, each key
    followed by its value), then field values in MRO order. Primitive
    values and arrays contribute no items, but a user-defined subclass of
    one still contributes its fields.

    References held internally by C-implemented objects are not visible
    and are not returned. Among others, this covers the `default_factory`
    of a `collections.defaultdict`, the linked list behind an
    `OrderedDict`, and the items of numpy object arrays. Use
    `register_sizeof` to account for such storage.

    A field raising `PermissionError` when read is skipped. Any other
    read failure raises `ReflectiveReadError`.
    """
    if obj is None:
        return []

    result = []
    if not (isprimitive(obj) or isprimitivearray(obj)):
        result.extend(e for e in _iter_elements(obj) if e is not None)

    for cls in type(obj).__mro__:
        for field in fields(cls):
            read = field.read(obj)
            if read.status is ReadStatus.VALUE:
                if read.value is not None:
                    result.append(read.value)
            elif read.status is ReadStatus.DENIED:
                logger.debug("access to field %s of %s object denied; skipped", field.qualname, typename(obj))
            elif read.status is ReadStatus.FAILED:
                raise ReflectiveReadError(
                    f"cannot read field {field.qualname!r} of {typename(obj)!r} object: {read.error!r}"
                ) from read.error

    return result
