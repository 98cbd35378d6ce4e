"""
Pydantic models for the schema projector.
"""
from .common import (
    BasePydanticModel,
    DataFormat,
    DataType,
    DescriptorKind,
    EnumMember,
    PrimitiveTypeLiteral,
    ReferenceTypeLiteral,
)
from .descriptors import (
    ArrayType,
    EnumType,
    MethodDescriptor,
    PrimitiveType,
    ReferenceType,
    ResponseDescriptor,
    TypeDescriptor,
    VoidType,
    parse_type_descriptor,
)
from .swagger import OperationFragment, ResponseFragment, SchemaFragment

__all__ = [
    "ArrayType",
    "BasePydanticModel",
    "DataFormat",
    "DataType",
    "DescriptorKind",
    "EnumMember",
    "EnumType",
    "MethodDescriptor",
    "OperationFragment",
    "PrimitiveType",
    "PrimitiveTypeLiteral",
    "ReferenceType",
    "ReferenceTypeLiteral",
    "ResponseDescriptor",
    "ResponseFragment",
    "SchemaFragment",
    "TypeDescriptor",
    "VoidType",
    "parse_type_descriptor",
]
