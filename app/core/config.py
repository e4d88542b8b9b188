"""Application configuration."""
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Remote food API
    api_base_url: str = "http://localhost:3333"
    api_timeout: float = 10.0
    food_api_backend: Literal["http", "memory"] = "http"
    menu_file: Optional[str] = None  # YAML seed for the in-memory backend

    # Currency formatting
    currency_symbol: str = "$"
    decimal_separator: str = "."
    thousands_separator: str = ","

    # Order submission
    home_destination: str = "MainBottom"
    order_price_mode: Literal["formatted", "raw"] = "formatted"
    order_include_quantity: bool = False

    # Header favorite action
    favorite_icon_color: str = "#FFB84D"
    favorite_icon_size: int = 24

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
