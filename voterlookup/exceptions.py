"""
Custom exceptions for the voter lookup application.

All application-specific exceptions inherit from VoterLookupError.

The search core (transliteration, shadow fields, index, list-screen search)
never raises these for bad data; it degrades to pass-through text or empty
results. They are raised by the layers around it: configuration and the
record sources that feed it.
"""

from __future__ import annotations

from typing import Optional, Any


class VoterLookupError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details (for debugging)
        recoverable: Whether the error can potentially be recovered from
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(VoterLookupError):
    """
    Invalid or missing configuration.

    Examples:
        - Search threshold outside [0, 1]
        - Non-positive field weight
    """

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details=details, recoverable=False)


class RecordSourceError(VoterLookupError):
    """
    Failed to load voter records from a source.

    Examples:
        - File missing or unreadable
        - Invalid JSON / CSV layout
        - Unknown booth id
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        operation: Optional[str] = None
    ):
        details = {}
        if source:
            details["source"] = source
        if operation:
            details["operation"] = operation
        super().__init__(message, details=details, recoverable=True)

