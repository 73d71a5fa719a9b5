"""Resolver configuration and resolution results."""

from __future__ import annotations

from pydantic import BaseModel

from target_position.core.models import Position
from target_position.core.types import ErrorKind, ResolutionStatus


class ResolverConfig(BaseModel):
    """Configuration for a resolver.

    Fields left as None fall back to the process-wide mirror and the library
    settings, read when each request is built.
    """

    base_url: str | None = None
    timeout: float | None = None
    user_agent: str | None = None


class ResolutionResult(BaseModel):
    """Result of a resolution attempt."""

    status: ResolutionStatus
    position: Position | None = None
    error_kind: ErrorKind | None = None
    error_message: str | None = None
    url: str | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS and self.position is not None

    @property
    def failed(self) -> bool:
        """Whether the attempt ended in an error rather than an answer."""
        return self.status == ResolutionStatus.ERROR
