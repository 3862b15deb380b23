"""Custom exceptions for the odds-proxy service."""

from typing import Any

from odds_proxy.schemas.upstream import UpstreamResult


class OddsProxyError(Exception):
    """Base exception for all odds-proxy errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "ODDS_PROXY_ERROR"
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dict for API response."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class UpstreamError(OddsProxyError):
    """The Odds API answered with a non-2xx status.

    The response body is the upstream result itself, so clients see the
    upstream status, usage headers and payload unchanged.
    """

    def __init__(self, result: UpstreamResult, *, endpoint: str | None = None):
        details: dict[str, Any] = {"status_code": result.meta.status}
        if endpoint is not None:
            details["endpoint"] = endpoint

        super().__init__(
            f"HTTP {result.meta.status} from The Odds API",
            code="UPSTREAM_ERROR",
            details=details,
        )
        self.result = result
        self.status_code = result.meta.status

    def to_dict(self) -> dict[str, Any]:
        return self.result.model_dump()

