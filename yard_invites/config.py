"""
Notifier configuration management.

Loads configuration from environment variables or .env file.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SITE_URL = "http://localhost:5173"
DEFAULT_RESEND_API_URL = "https://api.resend.com/emails"
DEFAULT_FROM_EMAIL = "Yard <noreply@yard.app>"


class NotifierConfig(BaseSettings):
    """
    Invitation notifier configuration settings.

    Can be loaded from:
    1. Environment variables (YARD_SITE_URL, YARD_RESEND_API_KEY, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Every delivery credential is optional. Which backend is used is decided
    from what is present (see ``yard_invites.delivery.select_backend``).

    Example:
        ```python
        # From environment
        config = NotifierConfig()

        # Direct instantiation
        config = NotifierConfig(
            site_url="https://yard.app",
            resend_api_key="re_123456789",
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="YARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Public site used to build invite links
    site_url: Optional[str] = Field(
        default=None,
        description=f"Base URL of the web app (falls back to {DEFAULT_SITE_URL})",
    )

    # Transactional email provider
    resend_api_key: Optional[str] = Field(
        default=None,
        description="Resend API key; enables direct email delivery",
    )

    resend_api_url: str = Field(
        default=DEFAULT_RESEND_API_URL,
        description="Resend send-email endpoint",
    )

    from_email: str = Field(
        default=DEFAULT_FROM_EMAIL,
        description="From address used for invitation emails",
    )

    # Identity provider (Supabase auth admin API)
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co)",
    )

    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (needed for auth admin invites)",
    )

    # Behaviour
    delivery_backend: Literal["auto", "resend", "supabase", "none"] = Field(
        default="auto",
        description="Delivery backend; 'auto' picks from configured credentials",
    )

    internal_error_policy: Literal["ok", "error"] = Field(
        default="ok",
        description="'ok' answers unexpected errors with 200, 'error' with 500",
    )

    http_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for outbound provider calls",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("site_url", "supabase_url")
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        """Ensure URLs carry a scheme and drop a trailing slash."""
        if v is None or v == "":
            return None
        if not v.startswith(("https://", "http://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("resend_api_url")
    @classmethod
    def validate_resend_api_url(cls, v: str) -> str:
        if not v.startswith(("https://", "http://")):
            raise ValueError("resend_api_url must start with http:// or https://")
        return v

    @field_validator("resend_api_key", "supabase_service_role_key")
    @classmethod
    def validate_key(cls, v: Optional[str]) -> Optional[str]:
        """Ensure a configured key is not obviously truncated."""
        if v is None or v == "":
            return None
        if len(v) < 10:
            raise ValueError("key appears invalid (too short)")
        return v

    @property
    def has_resend(self) -> bool:
        """Whether direct email delivery is configured."""
        return self.resend_api_key is not None

    @property
    def has_supabase(self) -> bool:
        """Whether the Supabase auth admin API is configured."""
        return self.supabase_url is not None and self.supabase_service_role_key is not None

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


def load_config(**kwargs) -> NotifierConfig:
    """
    Load notifier configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (YARD_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        NotifierConfig instance

    Raises:
        ValidationError: If a provided value is invalid

    Example:
        ```python
        # Load from environment
        config = load_config()

        # Override specific values
        config = load_config(debug=True)
        ```
    """
    return NotifierConfig(**kwargs)
