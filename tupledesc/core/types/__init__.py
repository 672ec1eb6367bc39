from .type_enum import (
    TypeKind,
    FieldType,
    INT_TYPE,
    BOOLEAN_TYPE,
    FLOAT_TYPE,
    DOUBLE_TYPE,
    STRING_TYPE,
    string_type,
)

__all__ = [
    'TypeKind',
    'FieldType',
    'INT_TYPE',
    'BOOLEAN_TYPE',
    'FLOAT_TYPE',
    'DOUBLE_TYPE',
    'STRING_TYPE',
    'string_type',
]
