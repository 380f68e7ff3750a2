from confluence_client.sources.external.confluence.confluence import ConfluenceDataSource

__all__ = ["ConfluenceDataSource"]
