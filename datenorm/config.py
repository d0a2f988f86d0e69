"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_v1_prefix: str = "/api/v1"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Time Zone Configuration
    # Server zone is applied once at startup; default zone is used for
    # requests that do not declare one.
    server_time_zone: str = "UTC"
    default_time_zone: str = "UTC"
    time_zone_header: str = "X-Timezone"

    # When False, an unknown client zone is logged and the default applies
    reject_unknown_time_zone: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
