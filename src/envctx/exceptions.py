"""
envctx exception hierarchy.

All domain-specific exceptions inherit from EnvctxError, making it easy
to catch any loader error with a single base class while still allowing
fine-grained handling when needed.

Hierarchy::

    EnvctxError
    ├── ConfigurationError   - settings file loading, parsing, validation
    ├── FileOpenError        - env file missing or unreadable
    ├── AllocationError      - store init/grow or line processing ran out of room
    └── MalformedLineError   - line without '=' or with an empty key
"""

from __future__ import annotations


class EnvctxError(Exception):
    """Base exception for all envctx errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Configuration -----------------------------------------------------------


class ConfigurationError(EnvctxError):
    """Raised when the settings file cannot be loaded, parsed, or validated."""


# --- Loading -----------------------------------------------------------------


class FileOpenError(EnvctxError):
    """Raised when an env file cannot be opened for reading.

    The store is left exactly as it was before the load call.
    """

    def __init__(self, path: str, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message, details={"path": path})
        self.path = path
        if cause is not None:
            self.__cause__ = cause


class AllocationError(EnvctxError):
    """Raised when the store cannot grow or a line cannot be processed.

    Entries appended before the failure stay in the store; loads are not
    rolled back.
    """

    def __init__(self, message: str, *, capacity: int | None = None, requested: int | None = None) -> None:
        super().__init__(message, details={"capacity": capacity, "requested": requested})
        self.capacity = capacity
        self.requested = requested


class MalformedLineError(EnvctxError):
    """Raised for a line with no '=' separator or an empty key.

    The loader skips such lines; it never surfaces this error to callers.
    """

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Malformed line ({reason}): {line!r}", details={"reason": reason})
        self.line = line
        self.reason = reason
