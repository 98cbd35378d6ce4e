"""
Exceptions raised by the schema projector.

Both error kinds are integration defects between the projector and the
descriptor producer. Nothing in this package catches them.
"""
from typing import Any, Optional


class ProjectionError(Exception):
    """Base class for all projection errors."""
    pass

class UnreachableStateError(ProjectionError, AssertionError):
    """Raised when a value outside a closed set reaches a total function."""
    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value

class UnrecognizedLiteralError(UnreachableStateError):
    """Raised when a string is not a member of the expected literal set."""
    def __init__(self, value: Any, literal_set: str, allowed: Optional[tuple[str, ...]] = None):
        message = f"Unrecognized {literal_set} literal: {value!r}"
        if allowed:
            message += f" (expected one of: {', '.join(allowed)})"
        super().__init__(message, value=value)
        self.literal_set = literal_set
        self.allowed = allowed

class UnhandledDescriptorError(UnreachableStateError):
    """Raised when a type descriptor tag has no projection."""
    def __init__(self, data_type: Any, message: Optional[str] = None):
        super().__init__(message or f"Unhandled type descriptor dataType: {data_type!r}", value=data_type)
        self.data_type = data_type
