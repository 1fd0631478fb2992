"""
Schema builder.

A schema holds one query slot per source field and one mutation slot per
target field. Each slot knows how to resolve itself against its integration,
which makes the schema the source of truth once a process is created.
"""

import inspect
import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple

from ..exceptions import ResolutionError
from ..models.fields import FieldValue, MappedField

logger = logging.getLogger(__name__)

QUERY_TYPE_NAME = "RootQueryType"
MUTATION_TYPE_NAME = "RootMutationType"
MUTATION_ARGUMENT = "resolvedQuery"


@dataclass(frozen=True)
class Slot:
    """A named, independently resolvable unit of a schema."""
    name: str
    description: str
    resolve: Callable[..., Awaitable[FieldValue]] = field(repr=False, compare=False)
    args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SlotSet:
    """An ordered, read-only set of slots."""
    name: str
    slots: Mapping[str, Slot]

    def get_fields(self) -> Mapping[str, Slot]:
        return self.slots

    def names(self) -> List[str]:
        return list(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def __contains__(self, name: object) -> bool:
        return name in self.slots


@dataclass(frozen=True)
class Schema:
    """Read-only descriptor of the query and mutation slots of a process."""
    query: Optional[SlotSet]
    mutation: Optional[SlotSet]

    def get_query_type(self) -> Optional[SlotSet]:
        return self.query

    def get_mutation_type(self) -> Optional[SlotSet]:
        return self.mutation

    def describe(self) -> Dict[str, List[Dict[str, Any]]]:
        """Slot metadata, for introspection and debugging."""
        described = {}
        for kind, slot_set in (("query", self.query), ("mutation", self.mutation)):
            if slot_set is None:
                continue
            described[kind] = [
                {"name": slot.name, "args": list(slot.args), **json.loads(slot.description)}
                for slot in slot_set.slots.values()
            ]
        return described


async def _call_resolver(resolver: Optional[Callable], *args: Any) -> FieldValue:
    if resolver is None:
        raise ResolutionError(f"No resolver available for field '{args[0]}'")
    result = resolver(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def _describe_slot(key: str, paired_key: str, integration: Any) -> str:
    return json.dumps({
        "key": key,
        "pairedKey": paired_key,
        "integrationName": getattr(integration, "name", None)
    })


def _build_query_slot(mapped: MappedField, integration: Any) -> Slot:
    key = mapped.source_field.key
    resolver = getattr(integration, "resolve_query", None)

    async def resolve() -> FieldValue:
        return await _call_resolver(resolver, key)

    return Slot(
        name=key,
        description=_describe_slot(key, mapped.target_field.key, integration),
        resolve=resolve
    )


def _build_mutation_slot(mapped: MappedField, integration: Any) -> Slot:
    key = mapped.target_field.key
    resolver = getattr(integration, "resolve_mutation", None)

    async def resolve(resolvedQuery: FieldValue) -> FieldValue:
        return await _call_resolver(resolver, key, resolvedQuery)

    return Slot(
        name=key,
        description=_describe_slot(key, mapped.source_field.key, integration),
        resolve=resolve,
        args=(MUTATION_ARGUMENT,)
    )


def create_query_schema(fields: List[MappedField], source_integration: Any) -> SlotSet:
    """Create the query slot set, one slot per source field key."""
    # Later duplicates replace earlier slots; validation reports them
    slots = {mapped.source_field.key: _build_query_slot(mapped, source_integration) for mapped in fields}
    return SlotSet(name=QUERY_TYPE_NAME, slots=MappingProxyType(slots))


def create_mutation_schema(fields: List[MappedField], target_integration: Any) -> SlotSet:
    """Create the mutation slot set, one slot per target field key."""
    slots = {mapped.target_field.key: _build_mutation_slot(mapped, target_integration) for mapped in fields}
    return SlotSet(name=MUTATION_TYPE_NAME, slots=MappingProxyType(slots))


def create_schema(fields: List[MappedField], source_integration: Any, target_integration: Any) -> Schema:
    """Create the schema used to generate and execute source and target operations."""
    schema = Schema(
        query=create_query_schema(fields, source_integration),
        mutation=create_mutation_schema(fields, target_integration)
    )
    logger.debug(f"Created schema with {len(schema.query)} query and {len(schema.mutation)} mutation slots")
    return schema
