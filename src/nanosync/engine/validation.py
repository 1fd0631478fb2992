"""
Structural validation of sync processes.

Checks, in order:
- the process, its options, fields, integrations and schema exist
- fields are not empty
- source keys are unique and target keys are unique (a source key may equal
  a target key)
- the source has a resolve_query and the target has a resolve_mutation
- the schema has a query type and a mutation type with as many query slots
  as mutation slots

Only the first violated check is reported.
"""

import logging
from typing import Any, Optional

from ..exceptions import ValidationFailure


def _invariant(condition: Any, message: str) -> None:
    if not condition:
        raise ValidationFailure(message)


def require_valid(process: Any) -> None:
    """
    Raise on the first invariant the process violates.

    Raises:
        ValidationFailure: With the message of the violated invariant
    """
    _invariant(process is not None, "Process is required")
    options = getattr(process, "options", None)
    _invariant(options is not None, "Options are required")
    fields = getattr(options, "fields", None)
    _invariant(fields is not None, "Fields are required")
    source_integration = getattr(options, "source_integration", None)
    _invariant(source_integration is not None, "Source integration is required")
    target_integration = getattr(options, "target_integration", None)
    _invariant(target_integration is not None, "Target integration is required")
    schema = getattr(process, "schema", None)
    _invariant(schema is not None, "Schema is required")

    _invariant(len(fields) > 0, "Fields cannot be empty")

    _invariant(
        len(fields) == len({f.source_field.key for f in fields}),
        "Source fields must be unique"
    )
    _invariant(
        len(fields) == len({f.target_field.key for f in fields}),
        "Target fields must be unique"
    )

    _invariant(
        callable(getattr(source_integration, "resolve_query", None)),
        "Source must have a resolve_query"
    )
    _invariant(
        callable(getattr(target_integration, "resolve_mutation", None)),
        "Target must have a resolve_mutation"
    )

    query_type = schema.get_query_type()
    mutation_type = schema.get_mutation_type()
    _invariant(query_type is not None, "Schema must have a query type")
    _invariant(mutation_type is not None, "Schema must have a mutation type")
    _invariant(
        len(query_type) == len(mutation_type),
        "Schema must have as many query fields as there are mutation fields"
    )


def find_violation(process: Any) -> Optional[str]:
    """Return the message of the first violated invariant, or None."""
    try:
        require_valid(process)
    except ValidationFailure as e:
        return str(e)
    except Exception as e:
        return f"Malformed process: {e}"
    return None


def validate_process(process: Any, logger: Optional[logging.Logger] = None) -> bool:
    """
    Validate that a process is correctly structured to sync data.

    Never raises. The first violated invariant is reported on ``logger``
    (this module's logger by default).
    """
    violation = find_violation(process)
    if violation:
        (logger or logging.getLogger(__name__)).error(f"Validation failed: {violation}")
        return False
    return True
