"""
Models for the Nanosync library.
"""

from .fields import (
    Field, FieldType, FieldValue, MappedField,
    find_query_field_name, find_mutation_field_name, mock_field_value
)
from .process import ProcessOptions
from .sync import SyncExecution, SyncStatus

__all__ = [
    # Field vocabulary
    "Field",
    "FieldType",
    "FieldValue",
    "MappedField",
    "find_query_field_name",
    "find_mutation_field_name",
    "mock_field_value",

    # Process and execution
    "ProcessOptions",
    "SyncExecution",
    "SyncStatus",
]
