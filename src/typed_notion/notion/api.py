"""One-shot entry points that open a client for a single call.

Handy for scripts; long-running code should keep one ``NotionClient``.
"""

from collections.abc import AsyncIterator, Mapping

from typed_notion.filters.query import Filter
from typed_notion.ids import BlockId, DatabaseId, PageId
from typed_notion.notion.client import NotionClient
from typed_notion.notion.models import Block, Page
from typed_notion.notion.property_update import CoverUpdate, IconUpdate, PropertyUpdate, Remove


async def query_database(
    api_key: str,
    database_id: DatabaseId,
    *,
    page_size: int | None = None,
    filter: Filter | None = None,
) -> AsyncIterator[Page]:
    async with NotionClient(api_key) as client:
        async for page in client.query_database(database_id, page_size=page_size, filter=filter):
            yield page


async def retrieve_block_children(
    api_key: str,
    block_id: BlockId | PageId,
    *,
    page_size: int | None = None,
) -> AsyncIterator[Block]:
    async with NotionClient(api_key) as client:
        async for block in client.retrieve_block_children(block_id, page_size=page_size):
            yield block


async def update_page_properties(
    api_key: str,
    page_id: PageId,
    *,
    properties: Mapping[str, PropertyUpdate] | None = None,
    icon: IconUpdate | Remove | None = None,
    cover: CoverUpdate | Remove | None = None,
    in_trash: bool | None = None,
) -> Page:
    async with NotionClient(api_key) as client:
        return await client.update_page_properties(
            page_id, properties=properties, icon=icon, cover=cover, in_trash=in_trash
        )
