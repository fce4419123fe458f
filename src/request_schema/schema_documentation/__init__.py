"""Schema documentation exports."""

from .constants import (
    CONSTRAINT_COLUMNS,
    FIELD_COLUMNS,
    OPERATION_COLUMNS,
    OPERATIONS_SHEET_NAME,
)
from .documentation_models import FlattenedProperty
from .documentation_workbook_builder import generate_documentation_workbook
from .property_projection import SchemaDocumentationError, flatten_properties

__all__ = [
    "OPERATIONS_SHEET_NAME",
    "OPERATION_COLUMNS",
    "FIELD_COLUMNS",
    "CONSTRAINT_COLUMNS",
    "FlattenedProperty",
    "SchemaDocumentationError",
    "flatten_properties",
    "generate_documentation_workbook",
]
