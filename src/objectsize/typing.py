from typing_extensions import *
from typing import *
import types




# [ General TypeVars ]

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

if TYPE_CHECKING:
    from .inspect import Field







# [ Structural Types ]

class Descriptor(Protocol[T_co]):
    __slots__ = ()
    @overload
    def __get__(self, __inst: None, __type: type[Any] | None) -> Self: ...
    @overload
    def __get__(self, __inst: T, __type: type[T] | None) -> T_co: ...


class SizeOracle(Protocol):
    """Answers "how many bytes does this single object occupy".

    The answer covers the object's own storage (header, fixed fields and
    inline payload) and nothing it merely references. It must be a
    non-negative integer, and zero for None.
    """
    __slots__ = ()
    def __call__(self, obj: Any, /) -> int: ...


class FieldEnumerator(Protocol):
    """Lists the instance fields declared directly on a class.

    Inherited fields are not included; callers walk the MRO themselves.
    """
    __slots__ = ()
    def __call__(self, cls: type[Any], /) -> 'Sequence[Field]': ...







# [ Aliases ]

MemberDescriptor = types.MemberDescriptorType
GetSetDescriptor = types.GetSetDescriptorType
NoneType = type(None)
