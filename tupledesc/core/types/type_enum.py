from dataclasses import dataclass
from enum import Enum

from ..constants import DEFAULT_STRING_LENGTH, STRING_LENGTH_PREFIX


class TypeKind(Enum):
    """
    Enum for field kinds.
    """
    INT = "int"
    STRING = "string"
    BOOLEAN = "boolean"
    FLOAT = "float"
    DOUBLE = "double"


@dataclass(frozen=True)
class FieldType:
    """
    The type of a single column.

    Fixed-width kinds need no extra data. STRING carries its declared
    content length, so ``string_type(20)`` and ``string_type(128)`` are
    different types with different widths.
    """
    kind: TypeKind
    string_length: int = 0

    def __post_init__(self):
        # accepts a TypeKind or its value, e.g. "int"
        object.__setattr__(self, "kind", TypeKind(self.kind))

        if self.string_length < 0:
            raise ValueError(
                f"String length must be non-negative, got {self.string_length}")

        if self.kind is not TypeKind.STRING and self.string_length != 0:
            raise ValueError(
                f"Only string types carry a length, got {self.kind.value}"
                f" with length {self.string_length}")

    def get_length(self) -> int:
        """Get the length of the field type in bytes."""
        if self.kind is TypeKind.STRING:
            return STRING_LENGTH_PREFIX + self.string_length

        length_map = {
            TypeKind.INT: 4,
            TypeKind.BOOLEAN: 1,
            TypeKind.FLOAT: 4,
            TypeKind.DOUBLE: 8,
        }

        return length_map[self.kind]

    def __str__(self) -> str:
        if self.kind is TypeKind.STRING:
            return f"{self.kind.value}({self.string_length})"
        return self.kind.value


INT_TYPE = FieldType(TypeKind.INT)
BOOLEAN_TYPE = FieldType(TypeKind.BOOLEAN)
FLOAT_TYPE = FieldType(TypeKind.FLOAT)
DOUBLE_TYPE = FieldType(TypeKind.DOUBLE)
STRING_TYPE = FieldType(TypeKind.STRING, DEFAULT_STRING_LENGTH)


def string_type(length: int = DEFAULT_STRING_LENGTH) -> FieldType:
    """Return the string type holding up to ``length`` bytes of content."""
    return FieldType(TypeKind.STRING, length)
