"""Error hierarchy for the rebasing engine."""

from __future__ import annotations

from typing import Any


class RebaseError(Exception):
    """Base class for all urirebase errors."""


class InvalidUriError(RebaseError, ValueError):
    """Raised when a URI is relative or cannot be parsed."""

    def __init__(self, uri: str, reason: str = "not an absolute URI") -> None:
        super().__init__(f"Invalid URI {uri!r}: {reason}")
        self.uri = uri
        self.reason = reason


class SessionConfigError(RebaseError):
    """Raised when a session file cannot be read or validated."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}
