"""Error kinds raised by the resolution pipeline."""

from __future__ import annotations


class EcsExecError(Exception):
    """Base exception for all ecs-exec failures."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputError(EcsExecError):
    """Raised when neither a service nor a task id was supplied."""


class NotFoundError(EcsExecError):
    """Raised when a directory lookup yields an empty result."""

    def __init__(self, resource_type: str, identifier: str) -> None:
        super().__init__(
            f"{resource_type} not found: {identifier}",
            details={"resource_type": resource_type, "identifier": identifier},
        )


class ResolutionFailure(EcsExecError):
    """Raised when an AWS API call fails during resolution."""

    def __init__(self, hop: str, cause: Exception) -> None:
        super().__init__(f"{hop} failed: {cause}", details={"hop": hop})
        self.hop = hop


class TemplateError(EcsExecError):
    """Raised when a pipe template cannot be rendered."""


class ConfigError(EcsExecError):
    """Raised when the config file is unreadable or malformed."""
