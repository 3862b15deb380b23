from odds_proxy.schemas.common import CamelCaseModel
from odds_proxy.schemas.snapshot import (
    BookmakerSnapshot,
    EventSnapshot,
    MarketSnapshot,
    OddsQuery,
    OutcomeSnapshot,
    SnapshotResponse,
)
from odds_proxy.schemas.sports import SportsResponse, SportSummary
from odds_proxy.schemas.upstream import UpstreamMeta, UpstreamResult

__all__ = [
    "BookmakerSnapshot",
    "CamelCaseModel",
    "EventSnapshot",
    "MarketSnapshot",
    "OddsQuery",
    "OutcomeSnapshot",
    "SnapshotResponse",
    "SportSummary",
    "SportsResponse",
    "UpstreamMeta",
    "UpstreamResult",
]
