from fastapi import APIRouter, Depends, Query

from odds_proxy.api.deps import get_settings, get_upstream_client
from odds_proxy.config import Settings
from odds_proxy.exceptions import UpstreamError
from odds_proxy.schemas.upstream import UpstreamResult
from odds_proxy.services.upstream_client import UpstreamClient, events_endpoint

router = APIRouter()


@router.get("", response_model=UpstreamResult)
async def list_events(
    sport: str | None = Query(None, description="Sport key, e.g. boxing_boxing"),
    settings: Settings = Depends(get_settings),
    client: UpstreamClient = Depends(get_upstream_client),
):
    """Get upcoming events for a sport (default sport when omitted)."""
    sport = sport or settings.default_sport
    result = await client.get_events(sport)
    if result.error:
        raise UpstreamError(result, endpoint=events_endpoint(sport))
    return result
