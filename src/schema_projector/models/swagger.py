"""Swagger 2.0 fragments produced by the projector."""
from typing import Any, Optional

from pydantic import Field

from .common import BasePydanticModel, DataFormat, DataType


class SchemaFragment(BasePydanticModel):
    """A value schema. Only the keys that were populated are emitted."""
    type: Optional[DataType] = None
    format: Optional[DataFormat] = None
    items: Optional["SchemaFragment"] = None
    enum: Optional[list[str]] = None
    additional_properties: Optional[bool] = Field(None, alias="additionalProperties")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ResponseFragment(BasePydanticModel):
    description: str
    response_schema: Optional[SchemaFragment] = Field(None, alias="schema")
    examples: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"description": self.description}
        if self.response_schema is not None:
            data["schema"] = self.response_schema.to_dict()
        if self.examples is not None:
            data["examples"] = dict(self.examples)
        return data


class OperationFragment(BasePydanticModel):
    operation_id: str = Field(..., alias="operationId")
    produces: list[str]
    responses: dict[str, ResponseFragment] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "operationId": self.operation_id,
            "produces": list(self.produces),
            "responses": {name: response.to_dict() for name, response in self.responses.items()},
        }
