"""
Sync engine: schema building, text generation, resolution and orchestration.
"""

from .schema import Schema, Slot, SlotSet, create_schema, create_query_schema, create_mutation_schema
from .text import create_query_string, create_mutation_string, parse_operation
from .validation import validate_process, find_violation
from .process import Process, create_process
from .resolver import resolve_source, resolve_target
from .sync import SyncEngine, sync, sync_all

__all__ = [
    "Schema",
    "Slot",
    "SlotSet",
    "create_schema",
    "create_query_schema",
    "create_mutation_schema",
    "create_query_string",
    "create_mutation_string",
    "parse_operation",
    "validate_process",
    "find_violation",
    "Process",
    "create_process",
    "resolve_source",
    "resolve_target",
    "SyncEngine",
    "sync",
    "sync_all",
]
