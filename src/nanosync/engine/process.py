"""
Process creation.

A Process represents an effort to sync data between two integrations. It
holds its initial options and the schema generated from them.
"""

import logging
from dataclasses import dataclass

from ..exceptions import ConstructionError
from ..models.process import ProcessOptions
from .schema import Schema, create_schema
from .validation import find_violation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Process:
    options: ProcessOptions
    schema: Schema


def create_process(options: ProcessOptions) -> Process:
    """
    Create a Process from ProcessOptions.

    Raises:
        ConstructionError: If the resulting process is invalid
    """
    process = Process(
        options=options,
        schema=create_schema(
            options.fields,
            options.source_integration,
            options.target_integration
        )
    )

    violation = find_violation(process)
    if violation:
        logger.error(f"Validation failed: {violation}")
        raise ConstructionError(f"Invalid process: {violation}")
    return process
