"""Client configuration.

Settings are loaded from environment variables prefixed with ``DAGGER_``
(``DAGGER_SESSION_PORT``, ``DAGGER_SESSION_TOKEN``, ...), then a ``.env``
file, then defaults. The engine sets the session variables for every
process it starts.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .auth import Auth, NoAuth, SessionTokenAuth
from .errors import ConfigurationError


class ClientSettings(BaseSettings):
    """Connection settings for an engine session."""

    model_config = SettingsConfigDict(
        env_prefix="DAGGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    session_port: Optional[int] = Field(
        default=None,
        description="Port of the engine session's GraphQL server",
        gt=0,
        le=65535,
    )

    session_token: Optional[str] = Field(
        default=None,
        description="Session token sent as the HTTP Basic username",
    )

    session_url: Optional[str] = Field(
        default=None,
        description="Full GraphQL endpoint URL, overrides session_port",
    )

    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds, None waits indefinitely",
        gt=0,
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the command-line interface",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(sorted(valid_levels))}")
        return v.upper()

    @property
    def endpoint(self) -> str:
        """The GraphQL endpoint URL for this session."""
        if self.session_url:
            return self.session_url
        if self.session_port is None:
            raise ConfigurationError(
                "no engine session configured: set DAGGER_SESSION_PORT or DAGGER_SESSION_URL"
            )
        return f"http://127.0.0.1:{self.session_port}/query"

    def auth(self) -> Auth:
        """Authentication handler for the configured session."""
        if self.session_token:
            return SessionTokenAuth(self.session_token)
        return NoAuth()
