"""
Pytest configuration and shared fixtures for nanosync tests.
"""
from typing import List

import pytest

from nanosync import (
    MappedField,
    ProcessOptions,
    create_process,
    define_integration,
    mock_field_value,
)


def make_fields(*pairs) -> List[MappedField]:
    """Build mapped fields from (source_key, target_key, type) tuples."""
    return [
        MappedField(
            source_field={"key": source_key, "type": field_type},
            target_field={"key": target_key, "type": field_type},
        )
        for source_key, target_key, field_type in pairs
    ]


@pytest.fixture
def source_integration():
    """Source integration returning source_<key>_value."""

    async def resolve_query(key):
        return mock_field_value(f"source_{key}_value")

    async def resolve_mutation(key, value):
        return mock_field_value(f"mutated_{key}_{value}")

    return define_integration(
        "source",
        "source integration",
        resolve_query=resolve_query,
        resolve_mutation=resolve_mutation,
    )


@pytest.fixture
def target_integration():
    """Target integration with plain (non-async) resolvers."""
    return define_integration(
        "target",
        "target integration",
        resolve_query=lambda key: mock_field_value(f"target_{key}_value"),
        resolve_mutation=lambda key, value: f"mutated_{key}_{value}",
    )


@pytest.fixture
def mapped_fields():
    return make_fields(("name", "fullName", "string"), ("age", "userAge", "number"))


@pytest.fixture
def process_options(mapped_fields, source_integration, target_integration):
    return ProcessOptions(
        fields=mapped_fields,
        source_integration=source_integration,
        target_integration=target_integration,
    )


@pytest.fixture
def process(process_options):
    return create_process(process_options)
