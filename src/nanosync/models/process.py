"""
Options used to initialize a sync process.
"""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict

from .fields import MappedField


class ProcessOptions(BaseModel):
    """
    Options for a new Process.

    Options are immutable, so a bi-directional sync needs two processes and
    updating a process means replacing it. Integrations are kept as given;
    they only need to expose ``resolve_query`` and ``resolve_mutation``.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fields: Tuple[MappedField, ...]
    source_integration: Any
    target_integration: Any
