"""
Custom exceptions for Nanosync.
"""

class NanosyncException(Exception):
    """Base exception for all library-specific errors."""
    pass

class ConstructionError(NanosyncException):
    """A process failed validation while it was being created."""
    pass

class ValidationFailure(NanosyncException):
    """A process violates one of its structural invariants."""
    pass

class SchemaError(NanosyncException):
    """The schema lacks a slot set needed to generate or parse text."""
    pass

class MappingError(NanosyncException):
    """A mutation slot has no resolvable paired query result."""

    def __init__(self, slot_name: str, message: str):
        super().__init__(message)
        self.slot_name = slot_name

class ResolutionError(NanosyncException):
    """A query or mutation phase failed or produced no data."""
    pass

# Raised by integration implementations
class IntegrationError(NanosyncException):
    """Error inside an integration's own resolver."""
    pass
