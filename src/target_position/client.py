"""Convenience functions for one-off resolutions."""

from __future__ import annotations

from collections.abc import Sequence

from target_position.core.models import Position
from target_position.core.types import Resolver
from target_position.core.validation import DEFAULT_RESOLVERS
from target_position.resolution.base import ResolutionResult, ResolverConfig
from target_position.resolution.sesame import SesameResolver


async def target_position(
    target_name: str | None,
    resolvers: Sequence[str | Resolver] = DEFAULT_RESOLVERS,
    *,
    config: ResolverConfig | None = None,
) -> Position | None:
    """
    Resolve a target name to a position by means of the Sesame web service.

    The resolvers are tried in the order given, and the first position found
    is returned. None is returned if the target name cannot be resolved.

    For multiple resolutions, use SesameResolver to reuse the HTTP connection.

    Raises:
        ValidationError: for a missing target name or a bad resolver list
        TransportError: if no response is obtained from the service
        ServiceError: if the service responds with an error status
        ResponseFormatError: if the response is not a Sesame XML document
    """
    async with SesameResolver(config) as resolver:
        return await resolver.target_position(target_name, resolvers)


async def resolve(
    target_name: str | None,
    resolvers: Sequence[str | Resolver] = DEFAULT_RESOLVERS,
    *,
    config: ResolverConfig | None = None,
) -> ResolutionResult:
    """
    Resolve a target name (convenience function).

    Errors are reported in the returned ResolutionResult instead of being
    raised.
    """
    async with SesameResolver(config) as resolver:
        return await resolver.resolve(target_name, resolvers)
