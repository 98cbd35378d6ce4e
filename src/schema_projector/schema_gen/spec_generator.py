"""
Projection of type descriptors into Swagger 2.0 schema fragments.

The dispatcher is total over the closed descriptor tag set. Every tag is
routed to an explicit projector; an unknown tag raises instead of producing a
default schema. The tag groups below are checked against ``DescriptorKind``
when this module is imported, so a new upstream tag without a branch here
fails at load time.
"""
import math
from decimal import Decimal
from typing import Any, Optional

import structlog

from ..config import Config
from ..models.common import DescriptorKind, EnumMember, PrimitiveTypeLiteral
from ..models.descriptors import (
    ArrayType,
    EnumType,
    MethodDescriptor,
    ReferenceType,
    TypeDescriptor,
)
from ..models.swagger import OperationFragment, ResponseFragment, SchemaFragment
from .exceptions import UnhandledDescriptorError
from .literals import ensure_covers, throw_if_not_data_format, throw_if_not_data_type

logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"

# primitive kind -> (swagger type, swagger format)
PRIMITIVE_TYPE_MAP: dict[str, tuple[str, Optional[str]]] = {
    "any": ("object", None),
    "binary": ("string", "binary"),
    "boolean": ("boolean", None),
    "buffer": ("string", "byte"),
    "byte": ("string", "byte"),
    "date": ("string", "date"),
    "datetime": ("string", "date-time"),
    "double": ("number", "double"),
    "float": ("number", "float"),
    "integer": ("integer", "int32"),
    "long": ("integer", "int64"),
    "object": ("object", None),
    "string": ("string", None),
}

VOID_KINDS: tuple[str, ...] = ("void",)
REFERENCE_KINDS: tuple[str, ...] = ("refEnum", "refObject")
PRIMITIVE_KINDS: tuple[str, ...] = tuple(PRIMITIVE_TYPE_MAP)
ARRAY_KINDS: tuple[str, ...] = ("array",)
ENUM_KINDS: tuple[str, ...] = ("enum",)

ensure_covers(PrimitiveTypeLiteral, PRIMITIVE_KINDS, "primitive type table")
ensure_covers(
    DescriptorKind,
    VOID_KINDS + REFERENCE_KINDS + PRIMITIVE_KINDS + ARRAY_KINDS + ENUM_KINDS,
    "type descriptor dispatcher",
)

OBJECT_TYPE_SUGGESTION = (
    "Declare an indexed interface instead, e.g. "
    "IStringToStringDictionary { [key: string]: string } "
    "or IRecordOfAny { [key: string]: any }."
)

DEFAULT_ADDITIONAL_PROPERTIES = True


def _number_to_string(value: float) -> str:
    """Render a float the way a JSON/JavaScript number is printed (shortest round-trip digits)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + _number_to_string(-value)

    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # value == 0.<digits> * 10**n

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * -n + digits
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"


def _enum_member_to_string(member: EnumMember) -> str:
    """Render an enum member the way it appears in a JSON document."""
    if isinstance(member, bool):
        return "true" if member else "false"
    if member is None:
        return "null"
    if isinstance(member, float):
        return _number_to_string(member)
    return str(member)


def _has_examples(examples: Any) -> bool:
    """Falsy scalars (None, false, 0, NaN, empty string) count as absent; empty containers do not."""
    if examples is None or isinstance(examples, bool):
        return bool(examples)
    if isinstance(examples, (int, float)):
        return examples == examples and examples != 0
    if isinstance(examples, str):
        return examples != ""
    return True


class SpecGenerator:
    """
    Builds Swagger 2.0 value schemas and operation fragments.

    Holds no state besides the read-only configuration, so one instance can
    be shared between callers.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.logger = logger.bind(service="SpecGenerator")

    def build_additional_properties(self, type_: TypeDescriptor) -> SchemaFragment:
        """Schema placed under ``additionalProperties`` of an indexed model."""
        return self.get_swagger_type(type_)

    def build_operation(self, controller_name: str, method: MethodDescriptor) -> OperationFragment:
        log = self.logger.bind(controller=controller_name, method=method.name)
        responses: dict[str, ResponseFragment] = {}

        for res in method.responses:
            schema: Optional[SchemaFragment] = None
            if res.type_schema is not None and res.type_schema.data_type != "void":
                schema = self.get_swagger_type(res.type_schema)
            examples = {JSON_CONTENT_TYPE: res.examples} if _has_examples(res.examples) else None
            responses[res.name] = ResponseFragment(
                description=res.description,
                response_schema=schema,
                examples=examples,
            )

        operation = OperationFragment(
            operation_id=self.get_operation_id(method.name),
            produces=[JSON_CONTENT_TYPE],
            responses=responses,
        )
        log.debug("Operation built.", operation_id=operation.operation_id, response_count=len(responses))
        return operation

    def get_operation_id(self, method_name: str) -> str:
        return method_name[:1].upper() + method_name[1:]

    def get_swagger_type(self, type_: TypeDescriptor) -> SchemaFragment:
        data_type: Any = getattr(type_, "data_type", None)
        if not isinstance(data_type, str):
            raise UnhandledDescriptorError(data_type)

        if data_type in VOID_KINDS:
            return self.get_swagger_type_for_void(data_type)
        elif data_type in REFERENCE_KINDS:
            return self.get_swagger_type_for_reference_type(type_)  # type: ignore[arg-type]
        elif data_type in PRIMITIVE_KINDS:
            return self.get_swagger_type_for_primitive_type(data_type)  # type: ignore[arg-type]
        elif data_type in ARRAY_KINDS:
            return self.get_swagger_type_for_array_type(type_)  # type: ignore[arg-type]
        elif data_type in ENUM_KINDS:
            return self.get_swagger_type_for_enum_type(type_)  # type: ignore[arg-type]
        raise UnhandledDescriptorError(data_type)

    def get_swagger_type_for_reference_type(self, reference_type: ReferenceType) -> SchemaFragment:
        # The $ref link and additionalProperties belong to the registered model, not to this fragment
        return SchemaFragment()

    def get_swagger_type_for_void(self, data_type: str) -> SchemaFragment:
        # An empty response body may not declare additionalProperties at all, not even false
        return SchemaFragment()

    def get_swagger_type_for_primitive_type(self, data_type: PrimitiveTypeLiteral) -> SchemaFragment:
        mapping = PRIMITIVE_TYPE_MAP.get(data_type)
        if mapping is None:
            raise UnhandledDescriptorError(data_type)
        swagger_type, swagger_format = mapping

        fields: dict[str, Any] = {"type": throw_if_not_data_type(swagger_type)}
        if swagger_format is not None:
            fields["format"] = throw_if_not_data_format(swagger_format)

        if data_type == "any":
            # "any" is unconstrained by contract
            fields["additional_properties"] = True
        elif data_type == "object":
            self._warn_object_type()
            fields["additional_properties"] = (
                False if self.config.no_implicit_additional_properties else DEFAULT_ADDITIONAL_PROPERTIES
            )

        return SchemaFragment(**fields)

    def get_swagger_type_for_array_type(self, array_type: ArrayType) -> SchemaFragment:
        return SchemaFragment(type="array", items=self.get_swagger_type(array_type.element_type))

    def get_swagger_type_for_enum_type(self, enum_type: EnumType) -> SchemaFragment:
        return SchemaFragment(type="string", enum=[_enum_member_to_string(member) for member in enum_type.enums])

    def _warn_object_type(self) -> None:
        if self.config.suppress_advisory_warnings:
            return
        self.logger.warning("The type Object is discouraged.", suggestion=OBJECT_TYPE_SUGGESTION)


def project_type(type_: TypeDescriptor, config: Optional[Config] = None) -> SchemaFragment:
    """Project a single descriptor with a throwaway generator."""
    return SpecGenerator(config).get_swagger_type(type_)


def project_operation(controller_name: str, method: MethodDescriptor, config: Optional[Config] = None) -> OperationFragment:
    return SpecGenerator(config).build_operation(controller_name, method)
