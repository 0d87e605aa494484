"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./data/journal.db"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # Journal defaults
    timezone: str = "Asia/Bangkok"  # used for tradeDate when a row omits it
    decimal_places: int = 2
    recent_trades_limit: int = 10
    popular_assets_limit: int = 5
    warn_duplicate_trade_dates: bool = True

    model_config = {"env_prefix": "TJ_", "env_file": ".env"}


settings = Settings()
