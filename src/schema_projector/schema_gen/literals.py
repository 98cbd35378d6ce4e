"""
Narrowing of free strings into the Swagger ``format`` and ``type`` literal sets.

Both validators are total: a value is either returned unchanged or the call
raises :class:`UnrecognizedLiteralError`. There is no best-guess fallback.
"""
from typing import Any, cast, get_args

from ..models.common import DataFormat, DataType
from .exceptions import UnhandledDescriptorError, UnrecognizedLiteralError

DATA_FORMATS: tuple[str, ...] = (
    "int32",
    "int64",
    "float",
    "double",
    "byte",
    "binary",
    "date",
    "date-time",
    "password",
)

DATA_TYPES: tuple[str, ...] = (
    "array",
    "boolean",
    "integer",
    "number",
    "object",
    "string",
)


def throw_if_not_data_format(value: Any) -> DataFormat:
    if isinstance(value, str) and value in DATA_FORMATS:
        return cast(DataFormat, value)
    raise UnrecognizedLiteralError(value, "data format", DATA_FORMATS)


def throw_if_not_data_type(value: Any) -> DataType:
    if isinstance(value, str) and value in DATA_TYPES:
        return cast(DataType, value)
    raise UnrecognizedLiteralError(value, "data type", DATA_TYPES)


def ensure_covers(literal_alias: Any, handled: tuple[str, ...] | set[str], what: str) -> None:
    """Fail at import time when a closed literal set and its handler drift apart."""
    declared = set(get_args(literal_alias))
    handled_set = set(handled)
    if declared != handled_set:
        missing = sorted(declared - handled_set)
        unknown = sorted(handled_set - declared)
        raise UnhandledDescriptorError(
            missing or unknown,
            f"{what} out of sync with its literal set (missing: {missing}, unknown: {unknown})",
        )


ensure_covers(DataFormat, DATA_FORMATS, "data format validator")
ensure_covers(DataType, DATA_TYPES, "data type validator")
