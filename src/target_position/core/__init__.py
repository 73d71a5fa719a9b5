"""Core types, models, and validation."""

from .exceptions import (
    ResolutionError,
    ResponseFormatError,
    ServiceError,
    TargetPositionError,
    TransportError,
    ValidationError,
)
from .models import J2000, Position
from .types import ErrorKind, ResolutionStatus, Resolver
from .validation import (
    DEFAULT_RESOLVERS,
    resolver_codes,
    validate_resolvers,
    validate_target_name,
)

__all__ = [
    # Types
    "ErrorKind",
    "ResolutionStatus",
    "Resolver",
    # Models
    "J2000",
    "Position",
    # Validation
    "DEFAULT_RESOLVERS",
    "resolver_codes",
    "validate_resolvers",
    "validate_target_name",
    # Exceptions
    "ResolutionError",
    "ResponseFormatError",
    "ServiceError",
    "TargetPositionError",
    "TransportError",
    "ValidationError",
]
