import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Environment variable names
SUBDOMAIN_ENV = "ZENDESK_SUBDOMAIN"
EMAIL_ENV = "ZENDESK_EMAIL"
API_TOKEN_ENV = "ZENDESK_API_TOKEN"
LOG_LEVEL_ENV = "ZENDESK_MCP_LOG_LEVEL"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


logger = logging.getLogger(__name__)


class ZendeskSettings(BaseModel):
    """Zendesk credentials, loaded once at startup."""

    model_config = ConfigDict(frozen=True)

    subdomain: Optional[str] = Field(None, description="Zendesk subdomain (the <subdomain> in <subdomain>.zendesk.com)")
    email: Optional[str] = Field(None, description="Email address of the account owning the API token")
    api_token: Optional[str] = Field(None, description="Zendesk API token")
    log_level: str = Field("INFO", description="Logging level for the server process")

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value):
        level = str(value).upper()
        if level not in LOG_LEVELS:
            logger.warning("Unknown log level %r, falling back to INFO", value)
            return "INFO"
        return level

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ZendeskSettings":
        if load_env_file:
            load_dotenv()
        return cls(
            subdomain=os.getenv(SUBDOMAIN_ENV) or None,
            email=os.getenv(EMAIL_ENV) or None,
            api_token=os.getenv(API_TOKEN_ENV) or None,
            log_level=os.getenv(LOG_LEVEL_ENV) or "INFO",
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.subdomain and self.email and self.api_token)

    def missing_fields(self) -> List[str]:
        """Names of the credential environment variables that are not set."""
        missing = []
        if not self.subdomain:
            missing.append(SUBDOMAIN_ENV)
        if not self.email:
            missing.append(EMAIL_ENV)
        if not self.api_token:
            missing.append(API_TOKEN_ENV)
        return missing
