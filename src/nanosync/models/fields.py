"""
Field models shared by the schema builder and the resolution engine.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


# The underlying python types a resolver may hand back for any FieldType
FieldValue = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]


class FieldType(str, Enum):
    """
    Column types found in services like airtable, postgres or google sheets.

    CUSTOM is the escape hatch for anything else. Types are declarative only,
    resolved values are never checked against them.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    JSON = "json"
    ARRAY = "array"
    OBJECT = "object"
    CUSTOM = "custom"


class Field(BaseModel):
    """A field in a source or target integration."""
    model_config = ConfigDict(frozen=True)

    key: str
    type: FieldType


class MappedField(BaseModel):
    """Two associated fields. The source field overwrites the target field."""
    model_config = ConfigDict(frozen=True)

    source_field: Field
    target_field: Field


def find_query_field_name(fields: List[MappedField], mutation_field_name: str) -> Optional[str]:
    """Find the source field key paired with a target field key."""
    for mapped in fields:
        if mapped.target_field.key == mutation_field_name:
            return mapped.source_field.key
    return None


def find_mutation_field_name(fields: List[MappedField], query_field_name: str) -> Optional[str]:
    """Find the target field key paired with a source field key."""
    for mapped in fields:
        if mapped.source_field.key == query_field_name:
            return mapped.target_field.key
    return None


def mock_field_value(value: Any) -> FieldValue:
    """Cast any value to a string field value. Only used for mocking."""
    return str(value)
