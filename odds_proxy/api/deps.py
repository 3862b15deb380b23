from fastapi import Request

from odds_proxy.config import Settings
from odds_proxy.services.upstream_client import UpstreamClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_upstream_client(request: Request) -> UpstreamClient:
    return request.app.state.upstream_client
