from pydantic_settings import BaseSettings, SettingsConfigDict

# CORS headers attached to every response (origin comes from settings)
CORS_ALLOW_METHODS = "GET,OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # The Odds API
    odds_api_key: str = ""
    odds_api_base_url: str = "https://api.the-odds-api.com/v4"
    upstream_timeout: float | None = None  # None = wait for the transport

    # Query defaults
    default_sport: str = "mma_mixed_martial_arts"
    default_regions: str = "us"
    default_markets: str = "h2h,totals"
    default_odds_format: str = "american"

    # CORS
    cors_allow_origin: str = "*"

    # Logging
    log_level: str = "INFO"

    @property
    def cors_headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
            "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        }


settings = Settings()
