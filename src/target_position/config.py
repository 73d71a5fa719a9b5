"""Library configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SESAME_URL = "https://cdsweb.u-strasbg.fr/cgi-bin/nph-sesame"

# Process-wide override set via set_mirror(); None means "use the settings".
_mirror_url: str | None = None


class TargetPositionSettings(BaseSettings):
    """Library configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="TARGET_POSITION_",
        extra="ignore",
    )

    # Sesame
    sesame_url: str = Field(
        default=DEFAULT_SESAME_URL,
        description="Base URL of the Sesame name resolver",
    )
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP timeout in seconds",
    )
    user_agent: str = Field(
        default="target-position/0.1",
        description="User-Agent header sent to the Sesame service",
    )

    # App settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> TargetPositionSettings:
    """Get cached settings instance."""
    return TargetPositionSettings()


def set_mirror(url: str) -> None:
    """
    Set the base URL of the Sesame web service.

    The value is not validated; a malformed URL only shows up as a transport
    error once a target is resolved. Calls already in flight keep the URL
    they were built with.
    """
    global _mirror_url
    _mirror_url = url


def reset_mirror() -> None:
    """Forget any URL passed to set_mirror() and use the configured default."""
    global _mirror_url
    _mirror_url = None


def get_mirror() -> str:
    """Return the Sesame base URL used for new requests."""
    if _mirror_url is not None:
        return _mirror_url
    return get_settings().sesame_url
