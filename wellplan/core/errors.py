"""Error types shared by the engine, the storage boundary and the API."""

from __future__ import annotations

from typing import Any


class WellplanError(Exception):
    """Base for all wellplan errors."""


class ConfigurationError(WellplanError, ValueError):
    """Invalid or unrecognized input. Always names the offending field."""

    def __init__(self, field: str, value: Any = None, message: str | None = None):
        self.field = field
        self.value = value
        detail = message or f"unrecognized value {value!r}"
        super().__init__(f"{field}: {detail}")
        self.detail = detail


class CollaboratorError(WellplanError):
    """Recoverable failure of an external collaborator (storage, content generation)."""


class PersistenceError(CollaboratorError):
    pass


class ContentGenerationError(CollaboratorError):
    pass
