import base64
import logging
from dataclasses import asdict, dataclass
from typing import Optional, Union

import httpx  # type: ignore

from confluence_client.config.settings import AuthType, ConfluenceSettings
from confluence_client.exceptions.confluence_exceptions import InvalidArgumentError
from confluence_client.sources.client.http.http_client import HTTPClient
from confluence_client.sources.client.iclient import IClient
from confluence_client.utils.logger import create_logger


PACKAGE_LOGGER = "confluence_client"


def _basic_token(user: str, secret: str) -> str:
    return base64.b64encode(f"{user}:{secret}".encode("utf-8")).decode("ascii")


class ConfluenceRESTClientViaUsernamePassword(HTTPClient):
    """Confluence REST client via username and password
    Args:
        base_url: The base URL of the Confluence instance
        username: The username to use for authentication
        password: The password to use for authentication
    """

    def __init__(self, base_url: str, username: str, password: str, **kwargs) -> None:
        super().__init__(_basic_token(username, password), "Basic", **kwargs)
        self.base_url = base_url

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.base_url


class ConfluenceRESTClientViaApiKey(HTTPClient):
    """Confluence REST client via API key, Atlassian cloud expects it as basic auth
    Args:
        base_url: The base URL of the Confluence instance
        email: The email to use for authentication
        api_key: The API key to use for authentication
    """

    def __init__(self, base_url: str, email: str, api_key: str, **kwargs) -> None:
        super().__init__(_basic_token(email, api_key), "Basic", **kwargs)
        self.base_url = base_url

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.base_url


class ConfluenceRESTClientViaToken(HTTPClient):
    def __init__(self, base_url: str, token: str, token_type: str = "Bearer", **kwargs) -> None:
        super().__init__(token, token_type, **kwargs)
        self.base_url = base_url

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.base_url


ConfluenceRESTClient = Union[
    ConfluenceRESTClientViaUsernamePassword,
    ConfluenceRESTClientViaApiKey,
    ConfluenceRESTClientViaToken,
]


@dataclass
class ConfluenceUsernamePasswordConfig:
    """Configuration for Confluence REST client via username and password
    Args:
        base_url: The base URL of the Confluence instance
        username: The username to use for authentication
        password: The password to use for authentication
        timeout: Request timeout in seconds
    """

    base_url: str
    username: str
    password: str
    timeout: float = 30.0

    def create_client(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> ConfluenceRESTClientViaUsernamePassword:
        return ConfluenceRESTClientViaUsernamePassword(
            self.base_url, self.username, self.password, timeout=self.timeout, transport=transport
        )

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary"""
        return asdict(self)


@dataclass
class ConfluenceTokenConfig:
    """Configuration for Confluence REST client via token
    Args:
        base_url: The base URL of the Confluence instance
        token: The token to use for authentication
        timeout: Request timeout in seconds
    """

    base_url: str
    token: str
    timeout: float = 30.0

    def create_client(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> ConfluenceRESTClientViaToken:
        return ConfluenceRESTClientViaToken(self.base_url, self.token, timeout=self.timeout, transport=transport)

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary"""
        return asdict(self)


@dataclass
class ConfluenceApiKeyConfig:
    """Configuration for Confluence REST client via API key
    Args:
        base_url: The base URL of the Confluence instance
        email: The email to use for authentication
        api_key: The API key to use for authentication
        timeout: Request timeout in seconds
    """

    base_url: str
    email: str
    api_key: str
    timeout: float = 30.0

    def create_client(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> ConfluenceRESTClientViaApiKey:
        return ConfluenceRESTClientViaApiKey(
            self.base_url, self.email, self.api_key, timeout=self.timeout, transport=transport
        )

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary"""
        return asdict(self)


ConfluenceConfig = Union[ConfluenceUsernamePasswordConfig, ConfluenceTokenConfig, ConfluenceApiKeyConfig]


class ConfluenceClient(IClient):
    """Builder class for Confluence clients with different construction methods"""

    def __init__(self, client: ConfluenceRESTClient) -> None:
        """Initialize with a Confluence client object"""
        self.client = client

    def get_client(self) -> ConfluenceRESTClient:
        """Return the Confluence client object"""
        return self.client

    async def close(self) -> None:
        await self.client.close()

    @classmethod
    def build_with_config(
        cls,
        config: ConfluenceConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ConfluenceClient":
        """Build ConfluenceClient with configuration

        Args:
            config: One of the Confluence config dataclasses
            transport: Optional httpx transport for the underlying HTTP client
        Returns:
            ConfluenceClient instance
        """
        return cls(config.create_client(transport))

    @classmethod
    def build_from_settings(
        cls,
        settings: ConfluenceSettings,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ConfluenceClient":
        """Build ConfluenceClient from ConfluenceSettings
        Args:
            settings: Client settings, e.g. from ConfluenceSettings.from_env()
            logger: Logger instance, when omitted the package logger is configured from settings.logging
            transport: Optional httpx transport for the underlying HTTP client
        Returns:
            ConfluenceClient instance
        """
        if logger is None:
            # Module loggers of the package propagate to this one
            logger = create_logger(PACKAGE_LOGGER, settings.logging.level, settings.logging.format)
        auth = settings.auth
        try:
            if auth.auth_type == AuthType.BASIC:
                if not auth.username or not auth.password:
                    raise InvalidArgumentError("Username and password required for basic auth type")
                config = ConfluenceUsernamePasswordConfig(settings.base_url, auth.username, auth.password, settings.timeout)
            elif auth.auth_type == AuthType.API_KEY:
                if not auth.email or not auth.api_key:
                    raise InvalidArgumentError("Email and API key required for api key auth type")
                config = ConfluenceApiKeyConfig(settings.base_url, auth.email, auth.api_key, settings.timeout)
            elif auth.auth_type == AuthType.BEARER_TOKEN:
                if not auth.token:
                    raise InvalidArgumentError("Token required for token auth type")
                config = ConfluenceTokenConfig(settings.base_url, auth.token, settings.timeout)
            else:
                raise InvalidArgumentError(f"Invalid auth type: {auth.auth_type}")

            logger.debug("Building Confluence client for %s with %s auth", settings.base_url, auth.auth_type.value)
            return cls.build_with_config(config, transport)

        except InvalidArgumentError as e:
            logger.error(f"Failed to build Confluence client from settings: {str(e)}")
            raise
