from typing import Any

from pydantic import BaseModel


class UpstreamMeta(BaseModel):
    status: int
    remaining: str | None = None  # x-requests-remaining
    used: str | None = None  # x-requests-used


class UpstreamResult(BaseModel):
    """One outbound call to The Odds API.

    ``data`` is the parsed JSON body, or ``{"raw": <text>}`` when the body
    is not valid JSON.
    """

    error: bool
    meta: UpstreamMeta
    data: Any = None
