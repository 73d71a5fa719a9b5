"""Custom exception hierarchy for target_position."""

from typing import Any


class TargetPositionError(Exception):
    """Base exception for all target_position errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TargetPositionError, ValueError):
    """Input validation failed."""

    pass


class ResolutionError(TargetPositionError):
    """Failed to resolve a target name."""

    pass


class ServiceError(ResolutionError):
    """The Sesame service responded with a non-success status.

    The message is the response body, which Sesame fills with its own
    description of the problem.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.url = url


class TransportError(ResolutionError):
    """No response could be obtained from the Sesame service."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url


class ResponseFormatError(ResolutionError):
    """The Sesame response is not a readable XML document."""

    pass
