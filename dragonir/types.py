"""Type descriptors for the IR: void, label, integers, arrays, pointers and functions."""

from __future__ import annotations

from enum import Enum, auto
from typing import ClassVar, Sequence


class TypeID(Enum):
    """Kind of an IR type."""

    VOID = auto()
    LABEL = auto()
    INTEGER = auto()
    ARRAY = auto()
    POINTER = auto()
    FUNCTION = auto()


class Type:
    """Base class of every IR type."""

    def __init__(self, type_id: TypeID) -> None:
        self.type_id = type_id

    def size(self) -> int:
        """Bytes the type occupies in memory, or -1 when it has no storage size."""
        return -1

    def is_void_type(self) -> bool:
        return self.type_id is TypeID.VOID

    def is_label_type(self) -> bool:
        return self.type_id is TypeID.LABEL

    def is_integer_type(self) -> bool:
        return self.type_id is TypeID.INTEGER

    def is_array_type(self) -> bool:
        return self.type_id is TypeID.ARRAY

    def is_pointer_type(self) -> bool:
        return self.type_id is TypeID.POINTER

    def is_function_type(self) -> bool:
        return self.type_id is TypeID.FUNCTION

    def is_int1_byte(self) -> bool:
        """True for the one-bit boolean integer type."""
        return False

    def is_int32_type(self) -> bool:
        """True for the 32-bit integer type."""
        return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class VoidType(Type):
    """The single void type."""

    _instance: ClassVar[VoidType | None] = None

    def __init__(self) -> None:
        super().__init__(TypeID.VOID)

    @classmethod
    def get(cls) -> VoidType:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __str__(self) -> str:
        return "void"


class LabelType(Type):
    """The single type of labels and basic-block names."""

    _instance: ClassVar[LabelType | None] = None

    def __init__(self) -> None:
        super().__init__(TypeID.LABEL)

    @classmethod
    def get(cls) -> LabelType:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __str__(self) -> str:
        return "void"


class IntegerType(Type):
    """Integer type of a given bit width; only i1 and i32 are handed out."""

    _bool: ClassVar[IntegerType | None] = None
    _int: ClassVar[IntegerType | None] = None

    def __init__(self, bit_width: int) -> None:
        super().__init__(TypeID.INTEGER)
        self.bit_width = bit_width

    @classmethod
    def get_bool(cls) -> IntegerType:
        if cls._bool is None:
            cls._bool = cls(1)
        return cls._bool

    @classmethod
    def get_int(cls) -> IntegerType:
        if cls._int is None:
            cls._int = cls(32)
        return cls._int

    def __str__(self) -> str:
        return f"i{self.bit_width}"

    def size(self) -> int:
        return 4

    def is_int1_byte(self) -> bool:
        return self.bit_width == 1

    def is_int32_type(self) -> bool:
        return self.bit_width == 32


class ArrayType(Type):
    """Fixed-length array of an element type; nesting gives more dimensions."""

    def __init__(self, element_type: Type, num_elements: int) -> None:
        super().__init__(TypeID.ARRAY)
        self.element_type = element_type
        self.num_elements = num_elements

    def __str__(self) -> str:
        return f"[{self.num_elements} x {self.element_type}]"

    def size(self) -> int:
        element_size = self.element_type.size()
        if element_size <= 0:
            return -1
        return self.num_elements * element_size

    def base_and_dims(self) -> tuple[Type, list[int]]:
        """Split nested arrays into the innermost element type and the dimensions, outermost first."""
        dims: list[int] = []
        current: Type = self
        while isinstance(current, ArrayType):
            dims.append(current.num_elements)
            current = current.element_type
        return current, dims


class PointerType(Type):
    """Pointer to another type; instances from get() are shared per pointee."""

    _cache: ClassVar[dict[int, tuple[Type, PointerType]]] = {}

    def __init__(self, pointee_type: Type) -> None:
        super().__init__(TypeID.POINTER)
        self.pointee_type = pointee_type
        if isinstance(pointee_type, PointerType):
            self.root_type: Type = pointee_type.root_type
            self.depth: int = pointee_type.depth + 1
        else:
            self.root_type = pointee_type
            self.depth = 1

    @classmethod
    def get(cls, pointee_type: Type) -> PointerType:
        if pointee_type is None:
            raise ValueError("cannot create a pointer to no type")
        entry = cls._cache.get(id(pointee_type))
        if entry is not None and entry[0] is pointee_type:
            return entry[1]
        pointer = cls(pointee_type)
        cls._cache[id(pointee_type)] = (pointee_type, pointer)
        return pointer

    def __str__(self) -> str:
        return f"{self.pointee_type}*"


class FunctionType(Type):
    """Function signature: return type and formal parameter types."""

    def __init__(self, return_type: Type, arg_types: Sequence[Type]) -> None:
        super().__init__(TypeID.FUNCTION)
        self.return_type = return_type
        self.arg_types = tuple(arg_types)

    def __str__(self) -> str:
        args = ", ".join(str(t) for t in self.arg_types)
        return f"{self.return_type} (*)({args})"