"""
In-memory integration backed by a single record.
"""

import logging
from typing import Any, Dict, Optional

from ..exceptions import IntegrationError
from ..models.fields import FieldValue
from .base import BaseIntegration

logger = logging.getLogger(__name__)


class MemoryIntegration(BaseIntegration):
    """
    Integration that reads from and writes to a dict.

    Useful as a sync target for previews and as a source in tests.
    """

    def __init__(self, name: str, record: Optional[Dict[str, Any]] = None, description: str = ""):
        super().__init__(name, description or f"In-memory record '{name}'")
        self.record: Dict[str, Any] = dict(record or {})

    async def resolve_query(self, field_key: str) -> FieldValue:
        if field_key not in self.record:
            raise IntegrationError(f"Field '{field_key}' not found in {self.name}")
        return self.record[field_key]

    async def resolve_mutation(self, field_key: str, value: FieldValue) -> FieldValue:
        logger.debug(f"Writing {field_key} to {self.name}")
        self.record[field_key] = value
        return value
