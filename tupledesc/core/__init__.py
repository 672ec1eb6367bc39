from .exceptions import (
    DbException,
    NoSuchFieldError,
)
from .tuple import FieldEntry, TupleDesc
from .types import FieldType, TypeKind

__all__ = [
    "DbException",
    "NoSuchFieldError",
    "FieldEntry",
    "TupleDesc",
    "FieldType",
    "TypeKind",
]
