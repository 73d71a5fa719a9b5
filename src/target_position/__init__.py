"""Target position - resolve astronomical target names with the CDS Sesame service."""

from target_position.client import resolve, target_position
from target_position.config import get_mirror, reset_mirror, set_mirror
from target_position.core.exceptions import (
    ResolutionError,
    ResponseFormatError,
    ServiceError,
    TargetPositionError,
    TransportError,
    ValidationError,
)
from target_position.core.models import Position
from target_position.core.types import ErrorKind, ResolutionStatus, Resolver
from target_position.resolution.base import ResolutionResult, ResolverConfig
from target_position.resolution.sesame import SesameResolver

__version__ = "0.1.0"
__all__ = [
    # Client
    "SesameResolver",
    "resolve",
    "target_position",
    # Configuration
    "ResolverConfig",
    "get_mirror",
    "reset_mirror",
    "set_mirror",
    # Types
    "ErrorKind",
    "ResolutionStatus",
    "Resolver",
    # Models
    "Position",
    "ResolutionResult",
    # Exceptions
    "ResolutionError",
    "ResponseFormatError",
    "ServiceError",
    "TargetPositionError",
    "TransportError",
    "ValidationError",
    # Version
    "__version__",
]
