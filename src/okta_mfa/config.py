"""
Configuration management for the Okta factor verification package.

Settings are read from environment variables with the ``OKTA_`` prefix
using Pydantic settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from okta_mfa.utils.logger import logger


class OktaSettings(BaseSettings):
    """Transport and logging options for talking to the Okta API."""

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", env_prefix="OKTA_", frozen=True
    )

    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds; unset keeps the httpx default",
    )
    verify_ssl: bool = Field(
        default=True, description="Whether to verify TLS certificates"
    )
    user_agent: str = Field(
        default="okta-mfa", description="User-Agent header sent with requests"
    )

    # Logging
    log_requests: bool = Field(
        default=False, description="Whether to log outgoing request payloads"
    )
    log_responses: bool = Field(
        default=False, description="Whether to log response bodies"
    )
    mask_sensitive_data: bool = Field(
        default=True, description="Whether to mask secrets in logged payloads"
    )


# Global settings instance
_okta_settings: OktaSettings | None = None


def get_okta_settings() -> OktaSettings:
    """
    Get the global Okta settings instance.

    Returns:
        OktaSettings: The global settings instance
    """
    global _okta_settings
    if _okta_settings is None:
        _okta_settings = OktaSettings()
        logger.info("OktaSettings loaded")
    return _okta_settings


def set_okta_settings(settings: OktaSettings | None) -> None:
    """
    Set the global Okta settings instance.

    Args:
        settings: The settings to set, or None to reload from the environment
    """
    global _okta_settings
    _okta_settings = settings
