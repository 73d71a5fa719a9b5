"""Domain models for resolved targets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Sesame reports decimal positions for the J2000 equinox.
J2000 = 2000.0


class Position(BaseModel):
    """A target position on the sky."""

    model_config = ConfigDict(frozen=True)

    right_ascension: float = Field(..., description="Right ascension, in degrees")
    declination: float = Field(..., description="Declination, in degrees")
    equinox: float = Field(default=J2000, description="Equinox, as a float")

    def as_tuple(self) -> tuple[float, float]:
        """Return (right ascension, declination) in degrees."""
        return (self.right_ascension, self.declination)
