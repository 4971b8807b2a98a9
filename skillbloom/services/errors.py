from __future__ import annotations

from typing import Any


class SkillBloomError(RuntimeError):
    """Base class for errors raised by the service layer.

    Routers translate these into HTTP responses; services never build
    `HTTPException` themselves.
    """

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class ValidationError(SkillBloomError):
    """Bad or missing input the caller can correct."""


class NotFoundError(SkillBloomError):
    pass


class PermissionDeniedError(SkillBloomError):
    pass


class CollaboratorError(SkillBloomError):
    """The AI provider failed or answered with something unusable.

    Always retryable from the caller's point of view.
    """


class CollaboratorTimeoutError(CollaboratorError):
    pass


class PersistenceError(SkillBloomError):
    pass
