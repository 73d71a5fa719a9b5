"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
import respx
from httpx import Response

from target_position.config import set_mirror
from target_position.resolution.base import ResolverConfig

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

MOCK_MIRROR_URL = "http://mock.saao.ac.za/sesame"


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture(autouse=True)
def mock_mirror(clean_config) -> str:
    """Point the process-wide Sesame URL at a mock host."""
    set_mirror(MOCK_MIRROR_URL)
    return MOCK_MIRROR_URL


@pytest.fixture
def sesame_route(respx_mock):
    """A route catching every request sent to the mock Sesame mirror."""
    return respx_mock.get(url__startswith=MOCK_MIRROR_URL)


# ============================================================================
# Resolver Configuration Fixtures
# ============================================================================


@pytest.fixture
def resolver_config() -> ResolverConfig:
    """Create a resolver config for testing."""
    return ResolverConfig(
        base_url="http://mirror.example.org/cgi-bin/nph-sesame",
        timeout=5.0,
        user_agent="target-position-tests",
    )


# ============================================================================
# Sesame Response Fixtures
# ============================================================================


def load_fixture(category: str, name: str) -> str:
    """Load an XML fixture file.

    Args:
        category: Fixture category (e.g., "sesame")
        name: Fixture filename without extension (e.g., "nothing_found")

    Returns:
        The file content
    """
    fixture_path = FIXTURES_DIR / category / f"{name}.xml"
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture_path}")
    return fixture_path.read_text(encoding="utf-8")


@pytest.fixture
def load_sesame_fixture() -> Callable[[str], str]:
    """Factory fixture to load Sesame XML responses."""
    def _load(name: str) -> str:
        return load_fixture("sesame", name)
    return _load


def sesame_xml(ra: str, dec: str) -> str:
    """Sesame response with a single VizieR match at the given position."""
    return f"""<Sesame xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xsi:noNamespaceSchemaLocation="http://vizier.u-strasbg.fr/xml/sesame_4x.xsd">
<Target option="V">
<name>HIP123</name>
<!--  Q24770814 #1  -->
<Resolver name="V1=VizieR (CDS)">
<!-- delay: 0ms [0]  -->
<INFO>from cache</INFO>
<jpos>00:01:35.97 +72:14:11.8</jpos>
<jradeg>{ra}</jradeg>
<jdedeg>{dec}</jdedeg>
<oname>{{HIP}} 123</oname>
</Resolver>
</Target>
</Sesame>
<!-- - ====Done (2019-Feb-05,21:35:03z)====  -->"""


@pytest.fixture
def target_xml() -> Callable[[str, str], str]:
    """Factory fixture building a Sesame response for a position."""
    return sesame_xml


@pytest.fixture
def no_target_xml(load_sesame_fixture) -> str:
    """Sesame response for a name no database knows."""
    return load_sesame_fixture("nothing_found")


@pytest.fixture
def target_response(target_xml) -> Response:
    """Successful response resolving to (0, 0)."""
    return Response(200, text=target_xml("0", "0"))
