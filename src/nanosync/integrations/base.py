"""
Base integration class for all services that take part in a sync.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, Union
from pydantic import BaseModel
import logging

from ..models.fields import FieldValue

logger = logging.getLogger(__name__)

QueryResolver = Callable[[str], Union[FieldValue, Awaitable[FieldValue]]]
MutationResolver = Callable[[str, FieldValue], Union[FieldValue, Awaitable[FieldValue]]]


class IntegrationCapability(BaseModel):
    """Defines which side of a sync an integration can serve."""
    can_query: bool = False
    can_mutate: bool = False


def get_capabilities(integration: Any) -> IntegrationCapability:
    """Inspect any integration-like object for its resolvers."""
    return IntegrationCapability(
        can_query=callable(getattr(integration, "resolve_query", None)),
        can_mutate=callable(getattr(integration, "resolve_mutation", None))
    )


class BaseIntegration(ABC):
    """
    Abstract base class for integrations.

    An integration only has to resolve a query and a mutation for a given
    field key. Connection and session state is owned by the integration and
    is never inspected by the sync engine.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        logger.info(f"Initialized {self.__class__.__name__} integration '{name}'")

    @abstractmethod
    async def resolve_query(self, field_key: str) -> FieldValue:
        """Read the value stored under ``field_key``."""
        pass

    @abstractmethod
    async def resolve_mutation(self, field_key: str, value: FieldValue) -> FieldValue:
        """Write ``value`` under ``field_key`` and return what was written."""
        pass

    def get_capabilities(self) -> IntegrationCapability:
        return get_capabilities(self)

    # Lifecycle hooks, never called by the sync engine
    async def connect(self) -> bool:
        return True

    async def disconnect(self) -> bool:
        return True

    async def authenticate(self) -> bool:
        return True

    async def __aenter__(self) -> "BaseIntegration":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class FunctionIntegration:
    """
    Integration built from plain callables.

    Resolvers may be coroutine functions or regular functions. A resolver
    left as None is kept as None so that validation can reject the process.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        resolve_query: Optional[QueryResolver] = None,
        resolve_mutation: Optional[MutationResolver] = None
    ):
        self.name = name
        self.description = description
        self.resolve_query = resolve_query
        self.resolve_mutation = resolve_mutation

    def get_capabilities(self) -> IntegrationCapability:
        return get_capabilities(self)

    def __repr__(self) -> str:
        return f"FunctionIntegration(name={self.name!r})"


def define_integration(
    name: str,
    description: str = "",
    resolve_query: Optional[QueryResolver] = None,
    resolve_mutation: Optional[MutationResolver] = None
) -> FunctionIntegration:
    """Define an integration from its two resolver functions."""
    return FunctionIntegration(
        name=name,
        description=description,
        resolve_query=resolve_query,
        resolve_mutation=resolve_mutation
    )
