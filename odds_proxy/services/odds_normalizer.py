"""American odds conversion and snapshot reshaping.

Pure functions, no I/O.
"""

import math
from typing import Any

from odds_proxy.schemas.snapshot import (
    BookmakerSnapshot,
    EventSnapshot,
    MarketSnapshot,
    OutcomeSnapshot,
)


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        v = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(v) or math.isinf(v) or v == 0.0:
        return None
    return v


def american_to_implied_prob(price: Any) -> float | None:
    """Implied probability from an American price.

    Returns None for zero, non-numeric or non-finite prices. The result
    still includes the bookmaker margin; outcomes of one market will
    usually sum to more than 1.
    """
    p = _to_float(price)
    if p is None:
        return None
    if p > 0:
        return 100.0 / (p + 100.0)
    return abs(p) / (abs(p) + 100.0)


def _as_list(value: Any) -> list[Any]:
    # Upstream omits or nulls empty collections
    return value if isinstance(value, list) else []


def _normalize_outcome(outcome: dict[str, Any]) -> OutcomeSnapshot:
    price = outcome.get("price")
    return OutcomeSnapshot(
        name=outcome.get("name"),
        price=price,
        implied_prob=american_to_implied_prob(price),
        point=outcome.get("point"),
    )


def _normalize_market(market: dict[str, Any]) -> MarketSnapshot:
    return MarketSnapshot(
        key=market.get("key"),
        outcomes=[_normalize_outcome(o) for o in _as_list(market.get("outcomes"))],
    )


def _normalize_bookmaker(bookmaker: dict[str, Any]) -> BookmakerSnapshot:
    return BookmakerSnapshot(
        key=bookmaker.get("key"),
        title=bookmaker.get("title"),
        last_update=bookmaker.get("last_update"),
        markets=[_normalize_market(m) for m in _as_list(bookmaker.get("markets"))],
    )


def normalize_event(event: dict[str, Any]) -> EventSnapshot:
    return EventSnapshot(
        id=event.get("id"),
        commence_time=event.get("commence_time"),
        home_team=event.get("home_team"),
        away_team=event.get("away_team"),
        bookmakers=[_normalize_bookmaker(b) for b in _as_list(event.get("bookmakers"))],
    )


def normalize_snapshot(raw: Any) -> list[EventSnapshot] | Any:
    """Reshape an upstream odds payload into event snapshots.

    Anything that is not a list (error bodies, ``{"raw": ...}`` wrappers)
    is returned unchanged.
    """
    if not isinstance(raw, list):
        return raw
    return [normalize_event(event) for event in raw]
