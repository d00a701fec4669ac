"""Configuration and authentication of request descriptors."""
from dataclasses import replace
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from openai_descriptors.core.request import Request
from openai_descriptors.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"


class Config(BaseModel):
    """Credentials and endpoint used to decorate every request."""
    model_config = ConfigDict(frozen=True)

    organization_id: str
    api_key: str = Field(repr=False)
    base_url: Optional[str] = None

    @property
    def resolved_base_url(self) -> str:
        return self.base_url or DEFAULT_BASE_URL


def with_config(config: Config, request: Request) -> Request:
    """Resolve the request URL against the base and append auth headers.

    Existing headers are kept; the authorization and organization headers
    are added after them.
    """
    url = config.resolved_base_url + request.url
    logger.debug("request_decorated", method=request.method, url=url)
    return replace(
        request,
        url=url,
        headers=request.headers + (
            ("Authorization", f"Bearer {config.api_key}"),
            ("OpenAI-Organization", config.organization_id),
        ),
    )


class Settings(BaseSettings):
    """Environment-based settings (``OPENAI_*`` variables or a .env file)."""
    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(repr=False)
    org_id: str
    base_url: Optional[str] = None

    log_level: str = "info"

    def to_config(self) -> Config:
        """Build the immutable request config from these settings."""
        return Config(
            organization_id=self.org_id,
            api_key=self.api_key,
            base_url=self.base_url or None,
        )
