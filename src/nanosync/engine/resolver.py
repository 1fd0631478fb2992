"""
Resolution engine that executes query and mutation text against a schema.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import ResolutionError, SchemaError
from ..models.fields import FieldValue
from .process import Process
from .schema import Schema
from .text import QUERY, create_mutation_string, create_query_string, parse_operation

logger = logging.getLogger(__name__)


@dataclass
class ExecutionFailure:
    """A single failure encountered while executing an operation."""
    message: str
    path: Optional[str] = None
    original: Optional[BaseException] = None

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


@dataclass
class ExecutionResult:
    """Outcome of executing one operation: the keyed data and any failures."""
    data: Optional[Dict[str, FieldValue]] = None
    errors: List[ExecutionFailure] = field(default_factory=list)


async def execute(schema: Schema, text: str) -> ExecutionResult:
    """
    Execute query or mutation text against a schema.

    Every selected slot is resolved concurrently. A failing slot leaves None
    under its key and adds an entry to ``errors``; text that cannot be parsed
    or that selects unknown slots yields no data at all.
    """
    try:
        operation = parse_operation(text)
    except SchemaError as e:
        return ExecutionResult(errors=[ExecutionFailure(str(e), original=e)])

    slot_set = schema.get_query_type() if operation.kind == QUERY else schema.get_mutation_type()
    if slot_set is None:
        return ExecutionResult(errors=[ExecutionFailure(f"Schema does not support {operation.kind} operations")])

    unknown = [s.name for s in operation.selections if s.name not in slot_set]
    if unknown:
        return ExecutionResult(errors=[
            ExecutionFailure(f"Cannot {operation.kind} field '{name}' on type '{slot_set.name}'", path=name)
            for name in unknown
        ])

    slots = slot_set.get_fields()
    outcomes = await asyncio.gather(
        *(slots[s.name].resolve(**s.arguments) for s in operation.selections),
        return_exceptions=True
    )

    result = ExecutionResult(data={})
    for selection, outcome in zip(operation.selections, outcomes):
        if isinstance(outcome, Exception):
            logger.debug(f"Slot {selection.name} failed: {outcome}")
            result.data[selection.name] = None
            result.errors.append(ExecutionFailure(str(outcome), path=selection.name, original=outcome))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            result.data[selection.name] = outcome
    return result


def _describe_errors(errors: List[ExecutionFailure]) -> str:
    return "; ".join(str(error) for error in errors)


async def resolve_source(process: Process) -> Dict[str, FieldValue]:
    """
    Resolve the source integration query to a data record.

    Raises:
        ResolutionError: If any query slot fails or no data is produced
    """
    query = create_query_string(process.schema)
    logger.debug(f"Executing {query}")
    result = await execute(process.schema, query)
    if result.errors:
        raise ResolutionError(
            f"Query execution failed: {_describe_errors(result.errors)}"
        ) from result.errors[0].original
    if result.data is None:
        raise ResolutionError("Query data unavailable")
    return result.data


async def resolve_target(process: Process, query_results: Mapping[str, Any]) -> Optional[Dict[str, FieldValue]]:
    """
    Resolve the target integration mutation from pre-resolved query results.

    Raises:
        MappingError: If a mutation slot has no paired query result
        ResolutionError: If any mutation slot fails
    """
    mutation = create_mutation_string(process.schema, process.options.fields, query_results)
    logger.debug(f"Executing {mutation}")
    result = await execute(process.schema, mutation)
    if result.errors:
        raise ResolutionError(
            f"Mutation execution failed: {_describe_errors(result.errors)}"
        ) from result.errors[0].original
    # None when execution produced no data at all
    return result.data
