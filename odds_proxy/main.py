import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from odds_proxy.api.routes import events, snapshot, sports
from odds_proxy.config import Settings, settings
from odds_proxy.exceptions import UpstreamError
from odds_proxy.services.upstream_client import UpstreamClient

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting odds-proxy service")
    if not app.state.settings.odds_api_key:
        logger.warning("ODDS_API_KEY is not set; upstream calls will be rejected")
    yield
    # Shutdown
    logger.info("Shutting down odds-proxy service")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the proxy application around one explicit configuration."""
    app_settings = app_settings or settings
    logging.getLogger().setLevel(app_settings.log_level)

    app = FastAPI(
        title="odds-proxy",
        description="Key-hiding proxy for The Odds API with normalized odds snapshots",
        version="0.1.0",
        lifespan=lifespan,
        # Only the proxy routes are exposed
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = app_settings
    app.state.upstream_client = UpstreamClient(
        base_url=app_settings.odds_api_base_url,
        api_key=app_settings.odds_api_key,
        timeout=app_settings.upstream_timeout,
    )
    cors_headers = app_settings.cors_headers

    # CORS + last-resort error guard
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        """Answer preflights directly and stamp CORS headers on every response."""
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            response = JSONResponse(
                status_code=500,
                content={"error": "Worker error", "message": str(e)},
            )

        response.headers.update(cors_headers)
        return response

    # Exception handlers
    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.warning(f"Upstream error: {exc.message} - {exc.details}")
        return JSONResponse(status_code=502, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown path or unsupported method
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={"error": "Not found", "path": request.url.path},
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    # Include routers
    app.include_router(sports.router, prefix="/sports", tags=["sports"])
    app.include_router(events.router, prefix="/events", tags=["events"])
    app.include_router(snapshot.router, prefix="/snapshot", tags=["snapshot"])

    @app.get("/", response_class=PlainTextResponse)
    async def health_check():
        """Health check endpoint."""
        return "Odds API Proxy running"

    return app


app = create_app()
