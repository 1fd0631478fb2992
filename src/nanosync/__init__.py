"""
Nanosync is a simple and unopinionated library for syncing field data
between any two integrations.

An integration only has to resolve a query and a mutation for a given field
key. A list of mapped fields and two integrations make a Process, and
``sync`` reads every source field and writes it to its paired target field.
"""

from .exceptions import (
    NanosyncException, ConstructionError, ValidationFailure,
    SchemaError, MappingError, ResolutionError, IntegrationError
)
from .models import (
    Field, FieldType, FieldValue, MappedField, ProcessOptions,
    SyncExecution, SyncStatus,
    find_query_field_name, find_mutation_field_name, mock_field_value
)
from .integrations import BaseIntegration, MemoryIntegration, define_integration
from .engine import (
    Process, Schema, SyncEngine,
    create_process, create_schema, create_query_schema, create_mutation_schema,
    create_query_string, create_mutation_string, parse_operation,
    resolve_source, resolve_target, validate_process, find_violation,
    sync, sync_all
)
from .version import __version__

__all__ = [
    # Errors
    "NanosyncException",
    "ConstructionError",
    "ValidationFailure",
    "SchemaError",
    "MappingError",
    "ResolutionError",
    "IntegrationError",

    # Models
    "Field",
    "FieldType",
    "FieldValue",
    "MappedField",
    "ProcessOptions",
    "SyncExecution",
    "SyncStatus",
    "find_query_field_name",
    "find_mutation_field_name",
    "mock_field_value",

    # Integrations
    "BaseIntegration",
    "MemoryIntegration",
    "define_integration",

    # Engine
    "Process",
    "Schema",
    "SyncEngine",
    "create_process",
    "create_schema",
    "create_query_schema",
    "create_mutation_schema",
    "create_query_string",
    "create_mutation_string",
    "parse_operation",
    "resolve_source",
    "resolve_target",
    "validate_process",
    "find_violation",
    "sync",
    "sync_all",

    "__version__",
]
