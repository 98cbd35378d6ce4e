"""Schema Projector - turns type descriptors into Swagger 2.0 schema fragments.

Maps every kind of type descriptor produced by metadata extraction onto the
schema shape an API specification consumer understands.
"""

__version__ = "0.1.0"

from .config import Config
from .schema_gen import SpecGenerator, project_operation, project_type

__all__ = ["Config", "SpecGenerator", "project_operation", "project_type"]
