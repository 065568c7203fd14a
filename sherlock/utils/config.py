"""
Configuration management using Pydantic Settings
Loads optional overrides from SHERLOCK_* environment variables or a .env file
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_URL = "https://api.sherlockdomains.com"


class Settings(BaseSettings):
    """
    Client settings. Every field has a default, so no environment is required.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHERLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API Configuration
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Sherlock Domains API base URL"
    )
    api_prefix: str = Field(
        default="/api/v0",
        description="Versioned path prefix for all endpoints"
    )
    access_token: Optional[str] = Field(
        default=None,
        description="Bearer token used by SherlockClient.from_settings()"
    )

    # Request behaviour
    request_timeout: Optional[float] = Field(
        default=None,
        description="Seconds before a request is abandoned. None waits indefinitely"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    @property
    def base_url(self) -> str:
        """
        Returns the API root including the versioned prefix
        """
        return f"{self.api_url.rstrip('/')}{self.api_prefix}"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Normalise the prefix to a single leading slash and no trailing one"""
        return "/" + v.strip("/") if v.strip("/") else ""


class RecordDefaults(BaseModel):
    """
    Values filled into a DNS record descriptor when the caller leaves a field out.
    """

    type: str = "TXT"
    name: str = "test"
    value: str = "test-1"
    ttl: int = 3600

    def apply(
        self,
        record_type: Optional[str] = None,
        name: Optional[str] = None,
        value: Optional[str] = None,
        ttl: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Build a record dict, taking each field from the override when given.

        Returns:
            {"type": ..., "name": ..., "value": ..., "ttl": ...}
        """
        return {
            "type": self.type if record_type is None else record_type,
            "name": self.name if name is None else name,
            "value": self.value if value is None else value,
            "ttl": self.ttl if ttl is None else ttl,
        }


# | operation | type | name   | value  | ttl  |
# | create    | TXT  | test   | test-1 | 3600 |
# | update    | TXT  | test-2 | test-2 | 3600 |
CREATE_RECORD_DEFAULTS = RecordDefaults()
UPDATE_RECORD_DEFAULTS = RecordDefaults(name="test-2", value="test-2")


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.

    Returns:
        Settings instance

    Raises:
        pydantic.ValidationError: If an environment override is invalid
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None
