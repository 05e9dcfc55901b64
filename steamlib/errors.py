"""Error hierarchy surfaced to the host through failed hook calls."""
from __future__ import annotations

from typing import Optional


class ExtensionError(Exception):
    """Base class for every failure reported by the extension."""

    kind = "extension"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class NotFoundError(ExtensionError):
    """Installation, game or hook target could not be found."""

    kind = "not_found"


class ValidationError(ExtensionError):
    """Malformed input, parameter or manifest field."""

    kind = "validation"


class ExtensionIOError(ExtensionError):
    """Filesystem or process failure propagated from the OS."""

    kind = "io"

    def __init__(self, message: str, error: Optional[OSError] = None) -> None:
        super().__init__(message)
        self.error = error

    @classmethod
    def wrap(cls, exc: OSError, action: str) -> "ExtensionIOError":
        return cls(f"{action}: {exc}", exc)


class SerializationError(ExtensionError):
    """Payload could not be encoded or decoded at the hook boundary."""

    kind = "serialization"


__all__ = [
    "ExtensionError",
    "NotFoundError",
    "ValidationError",
    "ExtensionIOError",
    "SerializationError",
]
