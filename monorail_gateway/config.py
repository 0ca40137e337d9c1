from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def model_post_init(self, __context: Any) -> None:
        """Normalize base URLs so path joins never produce double slashes."""

        super().model_post_init(__context)

        for attr in ("monorail_data_api_url", "monorail_quote_api_url"):
            value = getattr(self, attr)
            if value and value.endswith("/"):
                object.__setattr__(self, attr, value.rstrip("/"))

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3001, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Outbound HTTP
    request_timeout_seconds: int = Field(default=30, description="Timeout applied to each upstream request")

    # Monorail upstream services
    monorail_data_api_url: str = Field(
        default="https://testnet-api.monorail.xyz/v1",
        description="Base URL of the Monorail token data API",
        validation_alias=AliasChoices("monorail_data_api_url", "data_api_url"),
    )
    monorail_quote_api_url: str = Field(
        default="https://testnet-pathfinder.monorail.xyz/v4",
        description="Base URL of the Monorail pathfinder (quote/swap) API",
        validation_alias=AliasChoices("monorail_quote_api_url", "quote_api_url"),
    )
    monorail_source_id: str = Field(
        default="1300175433951702",
        description="Public ID sent as the `source` parameter for fee attribution",
        validation_alias=AliasChoices("monorail_source_id", "monorail_public_id"),
    )

    # Token resolution
    native_token_symbol: str = Field(
        default="MON",
        description="Symbol that resolves to the native asset placeholder address",
    )

    # Feature Flags
    enable_swap_execution: bool = Field(
        default=True,
        description="Allow the execute_swap operation to reach the swap endpoint",
    )


# Global settings instance
settings = Settings()
