"""
Integration framework for Nanosync.

Integrations are the sources and targets of a sync. Anything exposing
``resolve_query`` and ``resolve_mutation`` qualifies; the classes here are
conveniences for building one.
"""

from typing import Type

from .base import (
    BaseIntegration, FunctionIntegration, IntegrationCapability,
    define_integration, get_capabilities
)
from .memory import MemoryIntegration

__all__ = [
    "BaseIntegration",
    "FunctionIntegration",
    "IntegrationCapability",
    "MemoryIntegration",
    "define_integration",
    "get_capabilities",
    "get_integration",
]

# Integration registry for loading from mapping files
INTEGRATION_REGISTRY = {
    "memory": MemoryIntegration,
}

def get_integration(integration_type: str) -> Type[BaseIntegration]:
    """Get an integration class by type name."""
    if integration_type not in INTEGRATION_REGISTRY:
        raise ValueError(f"Unknown integration type: {integration_type}")
    return INTEGRATION_REGISTRY[integration_type]
