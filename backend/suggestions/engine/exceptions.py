# suggestions/engine/exceptions.py
"""
Error taxonomy for the suggestion engine.

Persistence failures are not wrapped: the database's own ``DatabaseError``
subclasses reach the caller unchanged.
"""

from typing import Any, Dict, Optional


class SuggestionEngineError(Exception):
    """Base class for errors raised by the suggestion engine."""

    pass


class InvalidSuggestionInput(SuggestionEngineError, ValueError):
    """Raised before any computation when an input bundle is malformed."""

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.errors: Dict[str, Any] = errors or {}


class ImmutableSuggestionError(SuggestionEngineError):
    """Raised when code tries to rewrite the payload of a stored suggestion."""

    pass
