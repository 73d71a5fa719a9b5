"""CDS Sesame name resolver.

Sesame looks a name up in Simbad, NED and/or VizieR, in the order requested,
and reports the first match. The service is documented at
http://cdsweb.u-strasbg.fr/doc/sesame.htx.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import AsyncIterator, ClassVar
from urllib.parse import quote

import httpx
from defusedxml import DefusedXmlException
from defusedxml import ElementTree as ET

from target_position.config import get_mirror, get_settings
from target_position.core.exceptions import (
    ResponseFormatError,
    ServiceError,
    TargetPositionError,
    TransportError,
    ValidationError,
)
from target_position.core.models import J2000, Position
from target_position.core.types import ErrorKind, ResolutionStatus, Resolver
from target_position.core.validation import (
    DEFAULT_RESOLVERS,
    resolver_codes,
    validate_resolvers,
    validate_target_name,
)
from target_position.resolution.base import ResolutionResult, ResolverConfig

logger = logging.getLogger(__name__)

# Characters left alone by JavaScript's encodeURIComponent, which is what
# Sesame clients conventionally use for the object name.
_URI_COMPONENT_SAFE = "-_.!~*'()"

_ERROR_KINDS: dict[type[TargetPositionError], ErrorKind] = {
    ValidationError: ErrorKind.VALIDATION,
    TransportError: ErrorKind.TRANSPORT,
    ServiceError: ErrorKind.SERVICE,
    ResponseFormatError: ErrorKind.FORMAT,
}


class SesameResolver:
    """
    Resolver for target names using the Sesame web service.

    Usage:
        async with SesameResolver() as resolver:
            position = await resolver.target_position("M31", ["Simbad", "NED"])

    Each call sends exactly one GET request. Nothing is cached or retried.
    """

    # XML output ("-ox") is the only format parsed here
    OUTPUT_OPTION: ClassVar[str] = "-ox"

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.config = config or ResolverConfig()
        self._client: httpx.AsyncClient | None = None

    @asynccontextmanager
    async def _get_client(self, url: str) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            settings = get_settings()
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout or settings.timeout),
                headers={"User-Agent": self.config.user_agent or settings.user_agent},
                follow_redirects=True,
            )

        try:
            yield self._client
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(
                message=f"No response from the Sesame service: {e}",
                url=url,
                details={"error": type(e).__name__},
            ) from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @property
    def base_url(self) -> str:
        """The Sesame base URL that the next request will use."""
        return self.config.base_url or get_mirror()

    def build_url(
        self,
        target_name: str | None,
        resolvers: Sequence[str | Resolver] = DEFAULT_RESOLVERS,
    ) -> str:
        """
        Validate the input and return the Sesame query URL.

        The target name is encoded as given (white space included); trimming
        is only used to check that there is a name at all.

        Raises:
            ValidationError: for a missing target name or a bad resolver list
        """
        validate_target_name(target_name)
        selected = validate_resolvers(resolvers)

        encoded_name = quote(target_name, safe=_URI_COMPONENT_SAFE)
        codes = resolver_codes(selected)

        return f"{self.base_url}/{self.OUTPUT_OPTION}/{codes}?{encoded_name}"

    async def target_position(
        self,
        target_name: str | None,
        resolvers: Sequence[str | Resolver] = DEFAULT_RESOLVERS,
    ) -> Position | None:
        """
        Resolve a target name to a position.

        The resolvers are tried by Sesame in the order given, and the first
        position found is returned.

        Args:
            target_name: Target name
            resolvers: Resolver names (Simbad, NED, VizieR; case-insensitive)

        Returns:
            The position, or None if no resolver knows the target

        Raises:
            ValidationError: for a missing target name or a bad resolver list
            TransportError: if no response is obtained from the service
            ServiceError: if the service responds with an error status
            ResponseFormatError: if the response is not a Sesame XML document
        """
        # The URL is fixed here, before the first await, so that set_mirror()
        # calls made while the request is in flight cannot change it.
        url = self.build_url(target_name, resolvers)
        logger.debug(f"Querying Sesame: {url}")

        async with self._get_client(url) as client:
            response = await client.get(url)

        text = response.text

        if not response.is_success:
            logger.warning(
                f"Sesame responded with status {response.status_code} for {target_name!r}"
            )
            raise ServiceError(text, status_code=response.status_code, url=url)

        position = self.parse_response(text)
        if position is None:
            logger.info(f"No position found for {target_name!r}")
        else:
            logger.info(f"Resolved {target_name!r} to {position.as_tuple()}")
        return position

    async def resolve(
        self,
        target_name: str | None,
        resolvers: Sequence[str | Resolver] = DEFAULT_RESOLVERS,
    ) -> ResolutionResult:
        """
        Resolve a target name, reporting the outcome as a ResolutionResult.

        Unlike target_position(), this does not raise for invalid input or
        failed requests; the error kind and message are part of the result.
        """
        start = time.monotonic()
        url: str | None = None

        try:
            url = self.build_url(target_name, resolvers)
            position = await self.target_position(target_name, resolvers)
        except TargetPositionError as e:
            return ResolutionResult(
                status=ResolutionStatus.ERROR,
                error_kind=_error_kind(e),
                error_message=e.message,
                url=url,
                duration_ms=(time.monotonic() - start) * 1000,
            )

        return ResolutionResult(
            status=(
                ResolutionStatus.SUCCESS if position is not None else ResolutionStatus.NOT_FOUND
            ),
            position=position,
            url=url,
            duration_ms=(time.monotonic() - start) * 1000,
        )

    @staticmethod
    def parse_response(text: str) -> Position | None:
        """
        Extract the position from a Sesame XML response.

        Only the first Resolver element of the (single) Target is used. A
        Resolver without usable jradeg/jdedeg values is treated as no match.

        Raises:
            ResponseFormatError: if the text is not a Sesame XML document
        """
        try:
            root = ET.fromstring(text)
        except (ET.ParseError, DefusedXmlException) as e:
            raise ResponseFormatError(f"Invalid Sesame response: {e}") from e

        target = root.find("Target")
        if root.tag != "Sesame" or target is None:
            raise ResponseFormatError(
                f"Unexpected Sesame response: no Target in <{root.tag}> element"
            )

        resolver = target.find("Resolver")
        if resolver is None:
            return None

        ra = _parse_degrees(resolver.findtext("jradeg"))
        dec = _parse_degrees(resolver.findtext("jdedeg"))
        if ra is None or dec is None:
            logger.warning(
                f"Ignoring Sesame resolver {resolver.get('name')!r} without a usable position"
            )
            return None

        return Position(right_ascension=ra, declination=dec, equinox=J2000)

    async def __aenter__(self) -> "SesameResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _parse_degrees(value: str | None) -> float | None:
    """Parse a decimal-degree value, returning None if it isn't a number."""
    if value is None:
        return None
    try:
        degrees = float(value.strip())
    except ValueError:
        return None
    if math.isnan(degrees):
        return None
    return degrees


def _error_kind(error: TargetPositionError) -> ErrorKind | None:
    for cls, kind in _ERROR_KINDS.items():
        if isinstance(error, cls):
            return kind
    return None
