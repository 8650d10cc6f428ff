"""
Custom exceptions for HandMorph.
"""


class HandMorphError(Exception):
    """Base exception for HandMorph errors."""
    pass


class MalformedHandError(HandMorphError, ValueError):
    """Raised when detector output is not a well-formed 21-point hand."""
    pass


class ConfigError(HandMorphError, ValueError):
    """Raised when a configuration value is out of range."""
    pass
