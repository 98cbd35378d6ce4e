"""
Type descriptor models handed over by the metadata extractor.

Descriptors form a closed tagged union keyed on ``dataType``. The tag fully
determines which auxiliary fields are present: only ``array`` carries an
``elementType``, only ``enum`` carries ``enums`` and only reference kinds
carry ``refName``.
"""
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from .common import BasePydanticModel, EnumMember, PrimitiveTypeLiteral, ReferenceTypeLiteral


class VoidType(BasePydanticModel):
    data_type: Literal["void"] = Field(default="void", alias="dataType")


class PrimitiveType(BasePydanticModel):
    data_type: PrimitiveTypeLiteral = Field(..., alias="dataType")


class ArrayType(BasePydanticModel):
    data_type: Literal["array"] = Field(default="array", alias="dataType")
    element_type: "TypeDescriptor" = Field(..., alias="elementType")


class EnumType(BasePydanticModel):
    data_type: Literal["enum"] = Field(default="enum", alias="dataType")
    enums: list[EnumMember] = Field(..., description="Enum members in declaration order.")


class ReferenceType(BasePydanticModel):
    """A named model registered separately (interface, class or enum declaration)."""
    data_type: ReferenceTypeLiteral = Field(..., alias="dataType")
    ref_name: str = Field(..., alias="refName")
    description: Optional[str] = None


TypeDescriptor = Annotated[
    Union[VoidType, PrimitiveType, ArrayType, EnumType, ReferenceType],
    Field(discriminator="data_type"),
]

ArrayType.model_rebuild()


class ResponseDescriptor(BasePydanticModel):
    name: str = Field(..., description="Status code or key the response is published under.")
    description: str
    type_schema: Optional[TypeDescriptor] = Field(None, alias="schema")
    examples: Optional[Any] = None


class MethodDescriptor(BasePydanticModel):
    name: str
    responses: list[ResponseDescriptor] = Field(default_factory=list)


_type_descriptor_adapter: TypeAdapter = TypeAdapter(TypeDescriptor)


def parse_type_descriptor(data: Any) -> TypeDescriptor:
    """Validate a raw (JSON-decoded) descriptor into its tagged variant."""
    return _type_descriptor_adapter.validate_python(data)
