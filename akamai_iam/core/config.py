"""
Configuration

Settings for the IAM client, read from environment variables and an
optional ``.env`` file. Nested names use ``__``: the endpoint lives
under ``IAM__*``, Logfire under ``LOGFIRE__*`` and the rotating log file
under ``LOG__*``.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from akamai_iam.core.error_codes import ConfigurationErrorCode
from akamai_iam.core.exceptions import ConfigurationException

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _check_level(value: str, setting: str) -> str:
    level = value.strip().lower()
    if level not in LOG_LEVELS:
        raise ValueError(f"{setting} must be one of {list(LOG_LEVELS)}, got '{value}'")
    return level


class Settings(BaseSettings):
    """
    IAM client settings.

    Environment variables win over values from ``.env``.
    """

    log_level: str = Field(default="info", description="Package log level")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Deployment the client runs in"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return _check_level(v, "log_level")

    # IAM endpoint
    iam__host: str = Field(
        default="https://localhost",
        description="EdgeGrid host serving the identity-management API",
    )
    iam__timeout: float = Field(
        default=30.0, gt=0, description="Request timeout in seconds"
    )
    iam__user_agent: str = Field(
        default="akamai-iam-python", description="User-Agent header sent upstream"
    )
    iam__account_switch_key: Optional[str] = Field(
        default=None,
        description="Account switch key appended to every request when set",
    )

    @field_validator("iam__host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Default the scheme to https and drop trailing slashes."""
        host = v.strip().rstrip("/")
        if not host:
            raise ValueError("iam__host must not be empty")
        if "://" not in host:
            host = f"https://{host}"
        return host

    # Logfire
    logfire__enabled: bool = Field(
        default=False, description="Forward logs and httpx spans to Logfire"
    )
    logfire__service_name: str = Field(
        default="akamai_iam", description="Service name reported to Logfire"
    )
    logfire__environment: str = Field(
        default="development", description="Environment reported to Logfire"
    )
    logfire__token: Optional[SecretStr] = Field(
        default=None, description="Logfire write token"
    )
    logfire__instrument__httpx: bool = Field(
        default=True, description="Trace IAM requests made by the session"
    )
    logfire__httpx_capture_all: bool = Field(
        default=False, description="Record request and response bodies in traces"
    )

    # Rotating log file
    log__file_enabled: bool = Field(
        default=False, description="Also write logs to a rotating file"
    )
    log__dir: str = Field(default="logs", description="Directory of akamai_iam.log")
    log__file_path: Optional[str] = Field(
        default=None, description="Explicit log file; wins over log__dir"
    )
    log__file_level: str = Field(default="INFO", description="Level of the file handler")
    log__file_max_bytes: int = Field(
        default=10 * 1024 * 1024, gt=0, description="Size that triggers rotation"
    )
    log__file_backup_count: int = Field(
        default=3, ge=0, description="Rotated files kept next to the live one"
    )

    @field_validator("log__file_level")
    @classmethod
    def validate_file_level(cls, v: str) -> str:
        return _check_level(v, "log__file_level").upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


def create_settings() -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigurationException: A value failed validation
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationException(
            f"Configuration loading failed: {e}",
            ConfigurationErrorCode.INVALID_CONFIG,
            cause=e,
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return create_settings()
