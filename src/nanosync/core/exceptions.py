"""
Exception classes for the nanosync command line.
"""

from ..exceptions import NanosyncException


class ConfigurationError(NanosyncException):
    """Raised when a mapping file or the environment is misconfigured."""
    pass
