"""Convert Notion block JSON into the domain model."""

import logging

from typed_notion.errors import MalformedUrl
from typed_notion.ids import block_id_from, database_id_from, page_id_from, user_id_from
from typed_notion.notion.models import (
    Audio,
    Block,
    BlockContent,
    BlockParent,
    Bookmark,
    Breadcrumb,
    BulletedListItem,
    Callout,
    ChildDatabase,
    ChildPage,
    Code,
    Column,
    ColumnList,
    CustomEmojiIcon,
    DatabaseParent,
    Divider,
    Embed,
    EmojiIcon,
    Equation,
    ExternalFile,
    File,
    FileObject,
    Heading1,
    Heading2,
    Heading3,
    HostedFile,
    Icon,
    Image,
    LinkPreview,
    LinkToPage,
    NumberedListItem,
    PageParent,
    Paragraph,
    Parent,
    Pdf,
    Quote,
    SyncedBlock,
    Table,
    TableOfContents,
    TableRow,
    Template,
    ToDo,
    Toggle,
    UnsupportedBlock,
    UnsupportedParent,
    Video,
    WorkspaceParent,
)
from typed_notion.notion.property_parser import classify_url, raw_rich_text_list
from typed_notion.notion.raw_types import RawBlock, RawFileObject, RawIcon, RawParent
from typed_notion.utils.timestamps import parse_timestamp
from typed_notion.utils.url import parse_absolute_url, resolve_url

logger = logging.getLogger(__name__)

_TEXT_BLOCKS = {
    "paragraph": Paragraph,
    "bulleted_list_item": BulletedListItem,
    "numbered_list_item": NumberedListItem,
    "quote": Quote,
    "toggle": Toggle,
}

_HEADING_BLOCKS = {
    "heading_1": Heading1,
    "heading_2": Heading2,
    "heading_3": Heading3,
}

_MEDIA_BLOCKS = {
    "image": Image,
    "video": Video,
    "pdf": Pdf,
    "audio": Audio,
}


def raw_parent_to_parent(raw: RawParent) -> Parent:
    parent_type = raw.get("type")

    if parent_type == "database_id":
        return DatabaseParent(database_id_from(raw["database_id"]))
    if parent_type == "page_id":
        return PageParent(page_id_from(raw["page_id"]))
    if parent_type == "block_id":
        return BlockParent(block_id_from(raw["block_id"]))
    if parent_type == "workspace":
        return WorkspaceParent()

    logger.debug("Unsupported Notion parent type: %s", parent_type)
    return UnsupportedParent()


def raw_file_to_file_object(raw: RawFileObject | RawIcon) -> FileObject | None:
    """Convert the ``file | external`` union used by media blocks and icons.

    Returns None for file types this library does not know and for URLs that
    cannot be read.
    """
    file_type = raw.get("type")

    try:
        if file_type == "file":
            hosted = raw["file"]
            expiry = hosted.get("expiry_time")
            return HostedFile(
                url=resolve_url(hosted["url"]),
                expiry_time=parse_timestamp(expiry) if expiry else None,
            )

        if file_type == "external":
            return ExternalFile(url=resolve_url(raw["external"]["url"]))
    except MalformedUrl as e:
        logger.warning("Dropping %s file with malformed URL: %r", file_type, e.raw)
        return None

    logger.debug("Unsupported Notion file type: %s", file_type)
    return None


def raw_icon_to_icon(raw: RawIcon | None) -> Icon | None:
    if raw is None:
        return None
    if raw.get("type") == "emoji":
        return EmojiIcon(raw["emoji"])
    if raw.get("type") == "custom_emoji":
        custom = raw["custom_emoji"]
        return CustomEmojiIcon(
            id=custom["id"],
            name=custom.get("name", ""),
            url=parse_absolute_url(custom["url"]) if custom.get("url") else None,
        )
    return raw_file_to_file_object(raw)


def raw_block_content(block_type: str, data: dict) -> BlockContent:
    """Convert the type-specific payload of a block."""
    if block_type in _TEXT_BLOCKS:
        return _TEXT_BLOCKS[block_type](
            rich_text=raw_rich_text_list(data.get("rich_text")),
            color=data.get("color", "default"),
        )

    if block_type in _HEADING_BLOCKS:
        return _HEADING_BLOCKS[block_type](
            rich_text=raw_rich_text_list(data.get("rich_text")),
            color=data.get("color", "default"),
            is_toggleable=data.get("is_toggleable", False),
        )

    if block_type == "to_do":
        return ToDo(
            rich_text=raw_rich_text_list(data.get("rich_text")),
            color=data.get("color", "default"),
            checked=data.get("checked", False),
        )

    if block_type == "callout":
        return Callout(
            rich_text=raw_rich_text_list(data.get("rich_text")),
            color=data.get("color", "default"),
            icon=raw_icon_to_icon(data.get("icon")),
        )

    if block_type == "template":
        return Template(rich_text=raw_rich_text_list(data.get("rich_text")))

    if block_type == "synced_block":
        synced_from = data.get("synced_from")
        return SyncedBlock(
            synced_from=block_id_from(synced_from["block_id"]) if synced_from else None
        )

    if block_type == "child_page":
        return ChildPage(title=data.get("title", ""))

    if block_type == "child_database":
        return ChildDatabase(title=data.get("title", ""))

    if block_type == "equation":
        return Equation(expression=data["expression"])

    if block_type == "code":
        return Code(
            rich_text=raw_rich_text_list(data.get("rich_text")),
            caption=raw_rich_text_list(data.get("caption")),
            language=data.get("language", "plain text"),
        )

    if block_type == "divider":
        return Divider()

    if block_type == "breadcrumb":
        return Breadcrumb()

    if block_type == "table_of_contents":
        return TableOfContents(color=data.get("color", "default"))

    if block_type == "column_list":
        return ColumnList()

    if block_type == "column":
        return Column()

    if block_type == "link_to_page":
        if data.get("type") == "page_id":
            return LinkToPage(page_id=page_id_from(data["page_id"]))
        if data.get("type") == "database_id":
            return LinkToPage(database_id=database_id_from(data["database_id"]))

    if block_type == "table":
        return Table(
            table_width=data["table_width"],
            has_column_header=data.get("has_column_header", False),
            has_row_header=data.get("has_row_header", False),
        )

    if block_type == "table_row":
        return TableRow(cells=tuple(raw_rich_text_list(cell) for cell in data.get("cells", [])))

    if block_type == "embed":
        return Embed(
            url=classify_url(data.get("url")),
            caption=raw_rich_text_list(data.get("caption")),
        )

    if block_type == "bookmark":
        return Bookmark(
            url=classify_url(data.get("url")),
            caption=raw_rich_text_list(data.get("caption")),
        )

    if block_type == "link_preview":
        return LinkPreview(url=classify_url(data.get("url")))

    if block_type in _MEDIA_BLOCKS or block_type == "file":
        file_object = raw_file_to_file_object(data)
        if file_object is not None:
            caption = raw_rich_text_list(data.get("caption"))
            if block_type == "file":
                return File(file=file_object, caption=caption, name=data.get("name", ""))
            return _MEDIA_BLOCKS[block_type](file=file_object, caption=caption)

    logger.debug("Unsupported Notion block type: %s", block_type)
    return UnsupportedBlock()


def raw_block_to_block(raw: RawBlock) -> Block:
    """Convert a block object as returned by the block children endpoint."""
    block_type = raw.get("type", "")
    return Block(
        id=block_id_from(raw["id"]),
        created_time=parse_timestamp(raw["created_time"]),
        created_by_user_id=user_id_from(raw["created_by"]["id"]),
        last_edited_time=parse_timestamp(raw["last_edited_time"]),
        last_edited_by_user_id=user_id_from(raw["last_edited_by"]["id"]),
        has_children=raw.get("has_children", False),
        in_trash=raw.get("in_trash", raw.get("archived", False)),
        parent=raw_parent_to_parent(raw["parent"]),
        content=raw_block_content(block_type, raw.get(block_type) or {}),
    )
