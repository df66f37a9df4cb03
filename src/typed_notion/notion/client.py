import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

import httpx

from typed_notion.config import Settings
from typed_notion.errors import RemoteApiError
from typed_notion.filters.query import Filter
from typed_notion.ids import BlockId, DatabaseId, PageId
from typed_notion.notion.block_parser import raw_block_to_block
from typed_notion.notion.models import Block, Page
from typed_notion.notion.property_parser import raw_page_to_page
from typed_notion.notion.property_update import (
    REMOVE,
    CoverUpdate,
    IconUpdate,
    PropertyUpdate,
    Remove,
)
from typed_notion.notion.raw_types import RawErrorResponse, RawListResponse

logger = logging.getLogger(__name__)


class NotionClient:
    """Async client for the parts of the Notion API this library models.

    Use it as an async context manager, or call :meth:`close` when done::

        async with NotionClient(api_key) as notion:
            async for page in notion.query_database(database_id):
                ...
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or Settings()
        api_key = api_key or settings.api_key
        if not api_key:
            raise RuntimeError("NOTION_API_KEY not set")
        self._client = httpx.AsyncClient(
            base_url=settings.api_base,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Notion-Version": settings.api_version,
                "Content-Type": "application/json",
            },
            timeout=settings.timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "NotionClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            RemoteApiError: if Notion answered with its error envelope.
            httpx.HTTPStatusError: on an error status without that envelope.
        """
        logger.debug("Notion %s %s", method, url)
        resp = await self._client.request(method, url, **kwargs)
        try:
            data = resp.json()
        except ValueError:
            resp.raise_for_status()
            raise

        if isinstance(data, dict) and data.get("object") == "error":
            error = RawErrorResponse.model_validate(data)
            logger.warning(
                "Notion API error on %s %s: %s %s", method, url, error.code, error.message
            )
            raise RemoteApiError(error.code, error.message, error.status or resp.status_code)

        resp.raise_for_status()
        return data

    async def query_database(
        self,
        database_id: DatabaseId,
        *,
        page_size: int | None = None,
        filter: Filter | None = None,
    ) -> AsyncIterator[Page]:
        """Yield the pages of a database matching ``filter``, fetching lazily.

        A request is only sent once the previous batch has been consumed.
        ``page_size`` (at most 100) defaults to Notion's own default.

        https://developers.notion.com/reference/post-database-query
        """
        cursor: str | None = None
        while True:
            body: dict[str, Any] = {}
            if cursor is not None:
                body["start_cursor"] = cursor
            if page_size is not None:
                body["page_size"] = page_size
            if filter is not None:
                body["filter"] = filter

            data = await self._request("POST", f"/databases/{database_id}/query", json=body)
            result = RawListResponse.model_validate(data)
            for raw_page in result.results:
                yield raw_page_to_page(raw_page)

            if result.next_cursor is None:
                return
            cursor = result.next_cursor

    async def retrieve_block_children(
        self,
        block_id: BlockId | PageId,
        *,
        page_size: int | None = None,
    ) -> AsyncIterator[Block]:
        """Yield the child blocks of a page or block, fetching lazily.

        Only direct children are returned; fetch nested blocks by calling
        this again with the ID of a block whose ``has_children`` is set.

        https://developers.notion.com/reference/get-block-children
        """
        cursor: str | None = None
        while True:
            params: dict[str, Any] = {}
            if cursor is not None:
                params["start_cursor"] = cursor
            if page_size is not None:
                params["page_size"] = page_size

            data = await self._request("GET", f"/blocks/{block_id}/children", params=params)
            result = RawListResponse.model_validate(data)
            for raw_block in result.results:
                yield raw_block_to_block(raw_block)

            if result.next_cursor is None:
                return
            cursor = result.next_cursor

    async def update_page_properties(
        self,
        page_id: PageId,
        *,
        properties: Mapping[str, PropertyUpdate] | None = None,
        icon: IconUpdate | Remove | None = None,
        cover: CoverUpdate | Remove | None = None,
        in_trash: bool | None = None,
    ) -> Page:
        """Update a page and return it as Notion sends it back.

        ``properties`` is keyed by property name or ID; properties left out
        are not touched. Pass ``REMOVE`` as ``icon`` or ``cover`` to remove it.

        https://developers.notion.com/reference/patch-page
        """
        body: dict[str, Any] = {}
        if properties is not None:
            body["properties"] = dict(properties)
        if icon is not None:
            body["icon"] = None if icon is REMOVE else icon
        if cover is not None:
            body["cover"] = None if cover is REMOVE else cover
        if in_trash is not None:
            body["in_trash"] = in_trash

        data = await self._request("PATCH", f"/pages/{page_id}", json=body)
        page = raw_page_to_page(data)
        logger.info("Updated %d properties on page %s", len(body.get("properties", {})), page.id)
        return page
