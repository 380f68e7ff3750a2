import logging
from typing import Optional

from confluence_client.config.settings import ExpandConfig
from confluence_client.sources.client.confluence.confluence import ConfluenceClient
from confluence_client.sources.external.confluence.attachment import AttachmentDomain
from confluence_client.sources.external.confluence.content import ContentDomain
from confluence_client.sources.external.confluence.group import GroupDomain
from confluence_client.sources.external.confluence.misc import MiscDomain
from confluence_client.sources.external.confluence.space import SpaceDomain
from confluence_client.sources.external.confluence.user import UserDomain


class ConfluenceDataSource:
    """Typed access to the Confluence REST API, grouped by domain

    Example:
        data_source = ConfluenceDataSource(ConfluenceClient.build_from_settings(settings))
        pages = await data_source.content.search(Where.and_(Where.type.is_page, Where.text.contains("foo")))
    """

    def __init__(
        self,
        client: ConfluenceClient,
        expand: Optional[ExpandConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._client = client.get_client()
        if self._client is None:
            raise ValueError('HTTP client is not initialized')
        if not hasattr(self._client, "get_base_url"):
            raise ValueError('HTTP client does not have get_base_url method')

        self.expand = expand or ExpandConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.content = ContentDomain(self._client, self.expand, self.logger)
        self.space = SpaceDomain(self._client, self.expand, self.logger)
        self.user = UserDomain(self._client, self.expand, self.logger)
        self.group = GroupDomain(self._client, self.expand, self.logger)
        self.attachment = AttachmentDomain(self._client, self.expand, self.logger)
        self.misc = MiscDomain(self._client, self.expand, self.logger)

    def get_data_source(self) -> 'ConfluenceDataSource':
        return self

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "ConfluenceDataSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
