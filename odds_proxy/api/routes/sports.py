from fastapi import APIRouter, Depends

from odds_proxy.api.deps import get_settings, get_upstream_client
from odds_proxy.config import Settings
from odds_proxy.exceptions import UpstreamError
from odds_proxy.schemas.sports import SportsResponse, SportSummary
from odds_proxy.services.upstream_client import UpstreamClient

router = APIRouter()

USAGE_NOTE = (
    "Use /events?sport=<key> to list events, then "
    "/snapshot?sport=<key>&eventId=<id> for normalized odds."
)


@router.get("", response_model=SportsResponse)
async def list_sports(
    settings: Settings = Depends(get_settings),
    client: UpstreamClient = Depends(get_upstream_client),
):
    """Get in-season sports from The Odds API."""
    result = await client.get_sports()
    if result.error:
        raise UpstreamError(result, endpoint="/sports")

    sports = result.data if isinstance(result.data, list) else []
    return SportsResponse(
        default_sport=settings.default_sport,
        sports=[
            SportSummary(
                key=s.get("key"),
                title=s.get("title"),
                group=s.get("group"),
                active=s.get("active"),
            )
            for s in sports
        ],
        meta=result.meta,
        note=USAGE_NOTE,
    )
