"""
Text generation and parsing for query and mutation operations.

Formats::

    query{name age}
    mutation{fullName(resolvedQuery:"John") userAge(resolvedQuery:"30")}

Values are inserted between double quotes exactly as they are, without any
escaping.
"""

import json
import re
from typing import Any, Dict, List, Mapping, NamedTuple

from ..exceptions import MappingError, SchemaError
from ..models.fields import MappedField, find_query_field_name
from .schema import MUTATION_ARGUMENT, Schema

QUERY = "query"

_OPERATION_PATTERN = re.compile(r"^(query|mutation)\{(.*)\}$", re.DOTALL)
_MUTATION_SELECTION_PATTERN = re.compile(
    r'([^\s()]+)\(' + MUTATION_ARGUMENT + r':"(.*?)"\)(?= |$)', re.DOTALL
)


class Selection(NamedTuple):
    name: str
    arguments: Dict[str, str]


class Operation(NamedTuple):
    kind: str
    selections: List[Selection]


def format_value(value: Any) -> str:
    """Render a resolved value the way it appears inside mutation text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, default=str)


def create_query_string(schema: Schema) -> str:
    """Generate the query text for every query slot of a schema."""
    query_type = schema.get_query_type()
    if query_type is None:
        raise SchemaError("Schema has no query type defined")

    return f"query{{{' '.join(query_type.names())}}}"


def create_mutation_string(schema: Schema, field_mappings: List[MappedField],
                           query_results: Mapping[str, Any]) -> str:
    """
    Generate the mutation text for every mutation slot of a schema.

    Each slot receives the query result of its paired source field.

    Raises:
        SchemaError: If the schema has no mutation type
        MappingError: If a slot has no paired source field or no query result
    """
    mutation_type = schema.get_mutation_type()
    if mutation_type is None:
        raise SchemaError("Schema has no mutation type defined")

    selections = []
    for mutation_field_name in mutation_type.names():
        query_field_name = find_query_field_name(field_mappings, mutation_field_name)
        if query_field_name is None:
            raise MappingError(
                mutation_field_name,
                f"Could not find query field for mutation field: {mutation_field_name}"
            )
        if query_field_name not in query_results:
            raise MappingError(
                mutation_field_name,
                f"No query result '{query_field_name}' for mutation field: {mutation_field_name}"
            )
        value = format_value(query_results[query_field_name])
        selections.append(f'{mutation_field_name}({MUTATION_ARGUMENT}:"{value}")')

    return f"mutation{{{' '.join(selections)}}}"


def parse_operation(text: str) -> Operation:
    """Parse query or mutation text back into its selections."""
    match = _OPERATION_PATTERN.match(text)
    if not match:
        raise SchemaError(f"Malformed operation: {text!r}")

    kind, body = match.groups()
    if not body:
        return Operation(kind, [])
    if kind == QUERY:
        return Operation(kind, _parse_query_selections(body))
    return Operation(kind, _parse_mutation_selections(body))


def _parse_query_selections(body: str) -> List[Selection]:
    names = body.split(" ")
    if not all(names):
        raise SchemaError(f"Malformed query selections: {body!r}")
    return [Selection(name, {}) for name in names]


def _parse_mutation_selections(body: str) -> List[Selection]:
    selections = []
    position = 0
    while position < len(body):
        match = _MUTATION_SELECTION_PATTERN.match(body, position)
        if not match:
            raise SchemaError(f"Malformed mutation selection at position {position}: {body[position:]!r}")
        name, value = match.groups()
        selections.append(Selection(name, {MUTATION_ARGUMENT: value}))
        # Skip the separating space
        position = match.end() + 1
    return selections
