from typing import Any

from pydantic import BaseModel, Field

from odds_proxy.schemas.common import CamelCaseModel
from odds_proxy.schemas.upstream import UpstreamMeta


class OutcomeSnapshot(CamelCaseModel):
    name: Any = None
    price: Any = None
    implied_prob: float | None = Field(None, alias="impliedProb")
    point: Any = None  # totals/spread line, absent for h2h


class MarketSnapshot(BaseModel):
    key: Any = None
    outcomes: list[OutcomeSnapshot] = []


class BookmakerSnapshot(BaseModel):
    key: Any = None
    title: Any = None
    last_update: Any = None
    markets: list[MarketSnapshot] = []


class EventSnapshot(BaseModel):
    id: Any = None
    commence_time: Any = None
    home_team: Any = None
    away_team: Any = None
    bookmakers: list[BookmakerSnapshot] = []


class OddsQuery(CamelCaseModel):
    """Query echoed back in the snapshot response."""

    sport: str
    regions: str
    markets: str
    odds_format: str = Field(alias="oddsFormat")
    bookmakers: str | None = None
    event_id: str | None = Field(None, alias="eventId")
    event_ids: str | None = Field(None, alias="eventIds")


class SnapshotResponse(CamelCaseModel):
    ok: bool = True
    meta: UpstreamMeta
    query: OddsQuery
    # Non-list upstream payloads are passed through untouched
    snapshot: list[EventSnapshot] | Any
