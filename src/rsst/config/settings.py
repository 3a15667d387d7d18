"""Configuration management using pydantic-settings.

Supports environment variables (``RSST_`` prefix) and .env file loading.
"""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from rsst.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Library configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RSST_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # HTTP
    http_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for the client rsst creates itself",
    )
    user_agent: str | None = Field(
        default=None,
        description="User-Agent for the client rsst creates itself (transport default if unset)",
    )
    max_redirects: int = Field(
        default=10,
        ge=0,
        description="Redirect hops followed before giving up",
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the cached settings instance, loading it on first use.

    Raises:
        ConfigurationError: If the environment or .env holds invalid values.
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
    return _settings
