from fastapi import APIRouter, Depends, Query

from odds_proxy.api.deps import get_settings, get_upstream_client
from odds_proxy.config import Settings
from odds_proxy.exceptions import UpstreamError
from odds_proxy.schemas.snapshot import OddsQuery, SnapshotResponse
from odds_proxy.services.odds_normalizer import normalize_snapshot
from odds_proxy.services.upstream_client import UpstreamClient, odds_endpoint

router = APIRouter()


@router.get("", response_model=SnapshotResponse)
async def get_snapshot(
    sport: str | None = None,
    regions: str | None = None,
    markets: str | None = Query(None, description="Comma-separated markets, e.g. h2h,totals"),
    odds_format: str | None = Query(None, alias="oddsFormat"),
    bookmakers: str | None = Query(None, description="Comma-separated bookmaker keys"),
    event_id: str | None = Query(None, alias="eventId"),
    event_ids: str | None = Query(None, alias="eventIds", description="Comma-separated event IDs"),
    settings: Settings = Depends(get_settings),
    client: UpstreamClient = Depends(get_upstream_client),
):
    """Get odds for one event (eventId) or a whole sport, with implied probabilities.

    eventId is optional; without it the sport-wide odds endpoint is used and
    eventIds is forwarded as a best-effort filter.
    """
    query = OddsQuery(
        sport=sport or settings.default_sport,
        regions=regions or settings.default_regions,
        markets=markets or settings.default_markets,
        odds_format=odds_format or settings.default_odds_format,
        bookmakers=bookmakers or None,
        event_id=event_id or None,
        event_ids=event_ids or None,
    )

    params = {
        "regions": query.regions,
        "markets": query.markets,
        "oddsFormat": query.odds_format,
        "bookmakers": query.bookmakers,
    }
    if not query.event_id:
        params["eventIds"] = query.event_ids

    result = await client.get_odds(query.sport, params, event_id=query.event_id)
    if result.error:
        raise UpstreamError(result, endpoint=odds_endpoint(query.sport, query.event_id))

    return SnapshotResponse(
        meta=result.meta,
        query=query,
        snapshot=normalize_snapshot(result.data),
    )
