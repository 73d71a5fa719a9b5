"""Core enums and type definitions."""

from enum import StrEnum


class Resolver(StrEnum):
    """Object databases the Sesame service can consult."""

    SIMBAD = "simbad"
    NED = "ned"
    VIZIER = "vizier"

    @property
    def code(self) -> str:
        """Single-letter code used in the Sesame query URL."""
        return _RESOLVER_CODES[self]

    @property
    def display_name(self) -> str:
        """Name of the database as spelled by its maintainers."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, name: str) -> "Resolver":
        """Look up a resolver by case-insensitive name."""
        return cls(str(name).lower())


_RESOLVER_CODES = {
    Resolver.SIMBAD: "S",
    Resolver.NED: "N",
    Resolver.VIZIER: "V",
}

_DISPLAY_NAMES = {
    Resolver.SIMBAD: "Simbad",
    Resolver.NED: "NED",
    Resolver.VIZIER: "VizieR",
}


class ResolutionStatus(StrEnum):
    """Status of a resolution attempt."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


class ErrorKind(StrEnum):
    """Why a resolution attempt failed."""

    VALIDATION = "validation"  # Bad target name or resolver list
    TRANSPORT = "transport"  # No response from the service
    SERVICE = "service"  # Non-success HTTP status
    FORMAT = "format"  # Response body is not a Sesame XML document
