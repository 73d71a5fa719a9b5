"""Resolution layer for querying the Sesame name resolver."""

from target_position.resolution.base import ResolutionResult, ResolverConfig
from target_position.resolution.sesame import SesameResolver

__all__ = [
    # Base
    "ResolutionResult",
    "ResolverConfig",
    # Sesame
    "SesameResolver",
]
