from pydantic import Field

from odds_proxy.schemas.common import CamelCaseModel
from odds_proxy.schemas.upstream import UpstreamMeta


class SportSummary(CamelCaseModel):
    key: str | None = None
    title: str | None = None
    group: str | None = None
    active: bool | None = None


class SportsResponse(CamelCaseModel):
    ok: bool = True
    default_sport: str = Field(alias="defaultSport")
    sports: list[SportSummary]
    meta: UpstreamMeta
    note: str
