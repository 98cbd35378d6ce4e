"""
Schema generation for the schema projector.

Total projection of type descriptors into Swagger 2.0 value schemas and
operation fragments, plus the literal validators that guard the emitted
``type`` and ``format`` values.
"""
from .exceptions import (
    ProjectionError,
    UnhandledDescriptorError,
    UnreachableStateError,
    UnrecognizedLiteralError,
)
from .literals import throw_if_not_data_format, throw_if_not_data_type
from .spec_generator import SpecGenerator, project_operation, project_type

__all__ = [
    "ProjectionError",
    "SpecGenerator",
    "UnhandledDescriptorError",
    "UnreachableStateError",
    "UnrecognizedLiteralError",
    "project_operation",
    "project_type",
    "throw_if_not_data_format",
    "throw_if_not_data_type",
]
