"""Global fixtures for odds-proxy tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from odds_proxy.config import Settings
from odds_proxy.main import create_app
from odds_proxy.schemas.upstream import UpstreamMeta, UpstreamResult


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a fake key and no .env lookup."""
    return Settings(
        _env_file=None,
        odds_api_key="test_api_key",
        odds_api_base_url="https://api.test.com/v4",
    )


@pytest.fixture
def test_app(test_settings):
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(test_app):
    """Async test client for FastAPI."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def upstream_client(test_app):
    """The UpstreamClient wired into the test app."""
    return test_app.state.upstream_client


@pytest.fixture
def make_result():
    """Factory for UpstreamResult objects, as the client would build them."""

    def _make(data: Any, status: int = 200, remaining: str | None = "480", used: str | None = "20"):
        return UpstreamResult(
            error=not (200 <= status < 300),
            meta=UpstreamMeta(status=status, remaining=remaining, used=used),
            data=data,
        )

    return _make


@pytest.fixture
def sample_odds_event() -> dict[str, Any]:
    """Sample event with odds, as The Odds API returns it."""
    return {
        "id": "abc123",
        "sport_key": "boxing_boxing",
        "sport_title": "Boxing",
        "commence_time": "2026-11-02T03:00:00Z",
        "home_team": "Fighter A",
        "away_team": "Fighter B",
        "bookmakers": [
            {
                "key": "draftkings",
                "title": "DraftKings",
                "last_update": "2026-10-18T12:00:00Z",
                "markets": [
                    {
                        "key": "h2h",
                        "last_update": "2026-10-18T12:00:00Z",
                        "outcomes": [
                            {"name": "Fighter A", "price": -200},
                            {"name": "Fighter B", "price": 150},
                        ],
                    },
                    {
                        "key": "totals",
                        "last_update": "2026-10-18T12:00:00Z",
                        "outcomes": [
                            {"name": "Over", "price": -110, "point": 9.5},
                            {"name": "Under", "price": -110, "point": 9.5},
                        ],
                    },
                ],
            },
            {
                "key": "fanduel",
                "title": "FanDuel",
                "last_update": "2026-10-18T12:05:00Z",
                "markets": [
                    {
                        "key": "h2h",
                        "outcomes": [
                            {"name": "Fighter A", "price": -250},
                            {"name": "Fighter B", "price": 190},
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def sample_sports() -> list[dict[str, Any]]:
    """Sample /sports payload."""
    return [
        {
            "key": "boxing_boxing",
            "group": "Boxing",
            "title": "Boxing",
            "description": "Boxing Bouts",
            "active": True,
            "has_outcomes": False,
        },
        {
            "key": "mma_mixed_martial_arts",
            "group": "Mixed Martial Arts",
            "title": "MMA",
            "description": "Mixed Martial Arts",
            "active": True,
            "has_outcomes": False,
        },
    ]


@pytest.fixture
def make_httpx_response():
    """Factory for fake httpx.Response objects with the attributes the client reads."""

    def _make(text: str, status: int = 200, headers: dict[str, str] | None = None) -> MagicMock:
        response = MagicMock()
        response.text = text
        response.status_code = status
        response.headers = headers or {}
        return response

    return _make


@pytest.fixture
def mock_httpx():
    """Mock httpx.AsyncClient for outbound HTTP calls."""
    with patch("httpx.AsyncClient") as mock_class:
        mock_client = AsyncMock()
        mock_class.return_value.__aenter__ = AsyncMock(return_value=mock_client)
        mock_class.return_value.__aexit__ = AsyncMock(return_value=None)
        mock_client.class_mock = mock_class
        yield mock_client
