"""Domain errors raised by the session and result services.

The services know nothing about HTTP; the global exception handler in
``app.middleware.exceptions`` maps each kind to a status code.
"""
from typing import Any, Dict, Optional


class CBTError(Exception):
    code = "CBT_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(CBTError):
    code = "NOT_FOUND"


class UnavailableError(CBTError):
    """The test exists but is not open for attempts right now."""
    code = "TEST_UNAVAILABLE"


class InvalidStateError(CBTError):
    """The session is in a state that does not allow the operation."""
    code = "INVALID_STATE"


class InvalidInputError(CBTError):
    code = "INVALID_INPUT"


class PermissionDeniedError(CBTError):
    code = "FORBIDDEN"
