import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from odds_proxy.schemas.upstream import UpstreamMeta, UpstreamResult

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # NaN/Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _segment(value: str) -> str:
    # Client values must stay one path segment
    return quote(value, safe="")


def events_endpoint(sport: str) -> str:
    return f"/sports/{_segment(sport)}/events"


def odds_endpoint(sport: str, event_id: str | None = None) -> str:
    if event_id:
        return f"/sports/{_segment(sport)}/events/{_segment(event_id)}/odds"
    return f"/sports/{_segment(sport)}/odds"


class UpstreamClient:
    """HTTP client for The Odds API (v4).

    The API key travels as the ``apiKey`` query parameter; the provider
    rejects header-based auth for this API version.
    """

    def __init__(self, base_url: str, api_key: str, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _build_params(self, params: dict[str, Any] | None) -> dict[str, str]:
        """Drop None/empty values, stringify the rest, append the API key."""
        request_params = {
            name: str(value)
            for name, value in (params or {}).items()
            if value is not None and value != ""
        }
        request_params["apiKey"] = self.api_key
        return request_params

    async def fetch(self, endpoint: str, params: dict[str, Any] | None = None) -> UpstreamResult:
        """Make one GET request and wrap the response.

        Never retries. Transport errors (DNS, refused connection, timeout
        when one is configured) propagate to the caller.
        """
        url = f"{self.base_url}{endpoint}"

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url, params=self._build_params(params))

        text = response.text
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except ValueError:
            data = {"raw": text}

        status = response.status_code
        result = UpstreamResult(
            error=not (200 <= status < 300),
            meta=UpstreamMeta(
                status=status,
                remaining=response.headers.get("x-requests-remaining"),
                used=response.headers.get("x-requests-used"),
            ),
            data=data,
        )

        if result.error:
            logger.warning(f"HTTP {status} from The Odds API for {endpoint}")
        else:
            logger.debug(
                f"HTTP {status} from The Odds API for {endpoint} "
                f"(remaining={result.meta.remaining}, used={result.meta.used})"
            )
        return result

    async def get_sports(self) -> UpstreamResult:
        """GET /sports - List in-season sports."""
        return await self.fetch("/sports")

    async def get_events(self, sport: str) -> UpstreamResult:
        """GET /sports/{sport}/events - List upcoming events."""
        return await self.fetch(events_endpoint(sport))

    async def get_odds(
        self,
        sport: str,
        params: dict[str, Any],
        event_id: str | None = None,
    ) -> UpstreamResult:
        """GET odds for one event, or for the whole sport when no event is given."""
        return await self.fetch(odds_endpoint(sport, event_id), params)
