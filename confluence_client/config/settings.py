"""
Client configuration.

Settings are plain pydantic models. They can be built in code or loaded from
environment variables (and a .env file) with ConfluenceSettings.from_env().
"""

import os
from enum import Enum
from typing import List, Optional

import dotenv
from pydantic import BaseModel, Field, field_validator  # type: ignore


class AuthType(str, Enum):
    """Supported authentication schemes."""
    BASIC = "BASIC"
    API_KEY = "API_KEY"
    BEARER_TOKEN = "BEARER_TOKEN"


class AuthConfig(BaseModel):
    """Credentials, which ones are needed depends on the auth type."""

    auth_type: AuthType = Field(default=AuthType.BASIC, description="Authentication scheme")
    username: Optional[str] = Field(default=None, description="Username for basic auth")
    password: Optional[str] = Field(default=None, description="Password for basic auth")
    email: Optional[str] = Field(default=None, description="Account email for API key auth")
    api_key: Optional[str] = Field(default=None, description="Atlassian API key")
    token: Optional[str] = Field(default=None, description="Bearer or personal access token")


class ExpandConfig(BaseModel):
    """Default expand values, passed explicitly to the data source."""

    search: List[str] = Field(
        default_factory=lambda: ["version", "space", "space.icon", "space.description", "space.homepage", "history.lastUpdated"],
        description="Expand values for content searches",
    )
    get_content: List[str] = Field(
        default_factory=lambda: ["version", "space", "ancestors"],
        description="Expand values when fetching a single content",
    )
    get_content_with_storage: List[str] = Field(
        default_factory=lambda: ["version", "space", "ancestors", "body.storage"],
        description="Expand values when fetching content including its storage body",
    )
    space: List[str] = Field(
        default_factory=lambda: ["icon", "description.plain", "homepage"],
        description="Expand values for spaces",
    )
    attachment: List[str] = Field(
        default_factory=lambda: ["version", "container"],
        description="Expand values for attachments",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format"
    )


class ConfluenceSettings(BaseModel):
    """
    Main client settings.

    Aggregates the connection, authentication, expand and logging
    configuration of a Confluence client.
    """

    base_url: str = Field(description="Base URL of the Confluence instance, e.g. https://example.atlassian.net/wiki")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    auth: AuthConfig = Field(default_factory=AuthConfig)
    expand: ExpandConfig = Field(default_factory=ExpandConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL is set and doesn't end with trailing slash."""
        if not v or not v.strip():
            raise ValueError("base_url must not be empty")
        return v.strip().rstrip("/")

    @property
    def api_url(self) -> str:
        """URL of the REST API (rest/api) below the base URL."""
        return f"{self.base_url}/rest/api"

    @classmethod
    def from_env(cls) -> "ConfluenceSettings":
        """
        Load settings from environment variables, reading a .env file first.

        Returns:
            ConfluenceSettings instance with values from environment
        """
        dotenv.load_dotenv()
        return cls(
            base_url=os.getenv("CONFLUENCE_BASE_URL", ""),
            timeout=float(os.getenv("CONFLUENCE_TIMEOUT", "30")),
            auth=AuthConfig(
                auth_type=AuthType(os.getenv("CONFLUENCE_AUTH_TYPE", "BASIC").upper()),
                username=os.getenv("CONFLUENCE_USERNAME"),
                password=os.getenv("CONFLUENCE_PASSWORD"),
                email=os.getenv("CONFLUENCE_EMAIL"),
                api_key=os.getenv("CONFLUENCE_API_KEY"),
                token=os.getenv("CONFLUENCE_TOKEN"),
            ),
            logging=LoggingConfig(
                level=os.getenv("CONFLUENCE_LOG_LEVEL", "INFO"),
            ),
        )
