"""
Schema descriptors for tuples flowing through a tabular data engine.
"""

from .core import (
    DbException,
    NoSuchFieldError,
    FieldEntry,
    TupleDesc,
    FieldType,
    TypeKind,
)
from .core.types import (
    INT_TYPE,
    BOOLEAN_TYPE,
    FLOAT_TYPE,
    DOUBLE_TYPE,
    STRING_TYPE,
    string_type,
)

__all__ = [
    "DbException",
    "NoSuchFieldError",
    "FieldEntry",
    "TupleDesc",
    "FieldType",
    "TypeKind",
    "INT_TYPE",
    "BOOLEAN_TYPE",
    "FLOAT_TYPE",
    "DOUBLE_TYPE",
    "STRING_TYPE",
    "string_type",
]
