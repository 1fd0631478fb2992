"""Data models for mapping files used by the command line."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from ..integrations import get_integration
from ..models.fields import MappedField
from ..models.process import ProcessOptions


class IntegrationSpec(BaseModel):
    """Describes one side of a sync in a mapping file."""
    type: str = "memory"
    name: str
    description: str = ""
    record: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('type')
    @classmethod
    def validate_type(cls, v):
        # Fail early on integrations we cannot build
        get_integration(v)
        return v

    def build(self):
        integration_class = get_integration(self.type)
        return integration_class(name=self.name, record=self.record, description=self.description)


class MappingDocument(BaseModel):
    """A mapping file: the mapped fields and both integrations."""
    fields: List[MappedField]
    source: IntegrationSpec
    target: IntegrationSpec

    def to_process_options(self) -> ProcessOptions:
        return ProcessOptions(
            fields=self.fields,
            source_integration=self.source.build(),
            target_integration=self.target.build()
        )
