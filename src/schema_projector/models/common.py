from typing import Literal

from pydantic import BaseModel


class BasePydanticModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "frozen": True,
    }

# Leaf kinds produced by the metadata extractor
PrimitiveTypeLiteral = Literal[
    "any",
    "binary",
    "boolean",
    "buffer",
    "byte",
    "date",
    "datetime",
    "double",
    "float",
    "integer",
    "long",
    "object",
    "string",
]

ReferenceTypeLiteral = Literal["refObject", "refEnum"]

# Every tag a type descriptor may carry
DescriptorKind = Literal[
    "void",
    PrimitiveTypeLiteral,
    "array",
    "enum",
    ReferenceTypeLiteral,
]

# Swagger 2.0 `format` values this project may emit
DataFormat = Literal[
    "int32",
    "int64",
    "float",
    "double",
    "byte",
    "binary",
    "date",
    "date-time",
    "password",
]

# Swagger 2.0 `type` values this project may emit
DataType = Literal["array", "boolean", "integer", "number", "object", "string"]

EnumMember = bool | int | float | str | None
