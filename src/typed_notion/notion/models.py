"""Normalized domain model built from Notion responses.

Every union here is closed: each variant is a frozen dataclass with a
class-level ``type`` tag, and each union has an ``Unsupported*`` member
that stands in for wire variants this library does not model (yet).
Optional wire fields become ``None``; nothing here holds raw JSON.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Literal

import httpx

from typed_notion.ids import BlockId, DatabaseId, PageId, PropertyId, SelectOptionId, UserId

# ── Rich text ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Annotations:
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


@dataclass(frozen=True)
class DateRange:
    start: datetime
    end: datetime | None = None


@dataclass(frozen=True)
class UserMention:
    user_id: UserId
    type: ClassVar[str] = "user"


@dataclass(frozen=True)
class DateMention:
    date: DateRange
    type: ClassVar[str] = "date"


@dataclass(frozen=True)
class LinkPreviewMention:
    """``url`` is None when ``raw_url`` could not be read as a URL."""

    url: httpx.URL | None
    raw_url: str
    type: ClassVar[str] = "link_preview"


@dataclass(frozen=True)
class TemplateMention:
    kind: Literal["template_mention_date", "template_mention_user"]
    value: str  # "today" / "now" for dates, "me" for users
    type: ClassVar[str] = "template_mention"


@dataclass(frozen=True)
class PageMention:
    page_id: PageId
    type: ClassVar[str] = "page"


@dataclass(frozen=True)
class DatabaseMention:
    database_id: DatabaseId
    type: ClassVar[str] = "database"


@dataclass(frozen=True)
class UnsupportedMention:
    type: ClassVar[str] = "unsupported"


Mention = (
    UserMention
    | DateMention
    | LinkPreviewMention
    | TemplateMention
    | PageMention
    | DatabaseMention
    | UnsupportedMention
)


@dataclass(frozen=True)
class TextContent:
    type: ClassVar[str] = "text"


@dataclass(frozen=True)
class MentionContent:
    mention: Mention
    type: ClassVar[str] = "mention"


@dataclass(frozen=True)
class EquationContent:
    expression: str
    type: ClassVar[str] = "equation"


@dataclass(frozen=True)
class UnsupportedContent:
    type: ClassVar[str] = "unsupported"


RichTextContent = TextContent | MentionContent | EquationContent | UnsupportedContent


@dataclass(frozen=True)
class RichTextItem:
    annotations: Annotations
    plain_text: str
    href: httpx.URL | None
    content: RichTextContent


RichText = tuple[RichTextItem, ...]

# ── Property values ────────────────────────────────────────────────────────


class SelectType(Enum):
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    STATUS = "status"


class RichTextType(Enum):
    TITLE = "title"
    RICH_TEXT = "rich_text"


class UrlType(Enum):
    EMPTY = "empty"  # null on the wire
    VALID = "valid"  # absolute URL
    INVALID = "invalid"  # kept only as raw_url


@dataclass(frozen=True)
class SelectOption:
    id: SelectOptionId
    name: str
    color: str


@dataclass(frozen=True)
class NumberValue:
    number: float | None
    type: ClassVar[str] = "number"


@dataclass(frozen=True)
class UrlValue:
    url_type: UrlType
    url: httpx.URL | None = None
    raw_url: str | None = None
    type: ClassVar[str] = "url"


@dataclass(frozen=True)
class SelectValue:
    """select, multi_select and status, told apart by ``select_type``."""

    select: tuple[SelectOption, ...]
    select_type: SelectType
    type: ClassVar[str] = "select"


@dataclass(frozen=True)
class DateValue:
    date: DateRange | None
    type: ClassVar[str] = "date"


@dataclass(frozen=True)
class EmailValue:
    email: str | None
    type: ClassVar[str] = "email"


@dataclass(frozen=True)
class PhoneNumberValue:
    phone_number: str | None
    type: ClassVar[str] = "phone_number"


@dataclass(frozen=True)
class CheckboxValue:
    checkbox: bool
    type: ClassVar[str] = "checkbox"


@dataclass(frozen=True)
class RichTextValue:
    """title and rich_text, told apart by ``rich_text_type``."""

    rich_text: RichText
    rich_text_type: RichTextType
    type: ClassVar[str] = "rich_text"


@dataclass(frozen=True)
class RelationValue:
    """Related pages in the order the user arranged them.

    ``has_more`` is set when Notion truncated the list (after 25 pages).
    """

    ids: tuple[PageId, ...]
    has_more: bool
    type: ClassVar[str] = "relation"


@dataclass(frozen=True)
class UnsupportedValue:
    type: ClassVar[str] = "unsupported"


PropertyValue = (
    NumberValue
    | UrlValue
    | SelectValue
    | DateValue
    | EmailValue
    | PhoneNumberValue
    | CheckboxValue
    | RichTextValue
    | RelationValue
    | UnsupportedValue
)


@dataclass(frozen=True)
class PageProperty:
    name: str
    value: PropertyValue


@dataclass(frozen=True)
class Page:
    """A database page. ``properties`` is read-only and left out of the hash."""

    id: PageId
    created_time: datetime
    last_edited_time: datetime
    created_by_user_id: UserId
    last_edited_by_user_id: UserId
    in_trash: bool
    properties: Mapping[PropertyId, PageProperty] = field(default_factory=dict, hash=False)
    url: UrlValue = UrlValue(UrlType.EMPTY)
    public_url: UrlValue = UrlValue(UrlType.EMPTY)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))


def get_property_value_by_id(
    properties: Mapping[PropertyId, PageProperty], property_id: PropertyId
) -> PropertyValue | None:
    prop = properties.get(property_id)
    return prop.value if prop is not None else None


def get_property_value_by_name(
    properties: Mapping[PropertyId, PageProperty], name: str
) -> PropertyValue | None:
    """Look a property up by its display name, which users can rename at any time."""
    for prop in properties.values():
        if prop.name == name:
            return prop.value
    return None


# ── Blocks ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DatabaseParent:
    database_id: DatabaseId
    type: ClassVar[str] = "database_id"


@dataclass(frozen=True)
class PageParent:
    page_id: PageId
    type: ClassVar[str] = "page_id"


@dataclass(frozen=True)
class BlockParent:
    block_id: BlockId
    type: ClassVar[str] = "block_id"


@dataclass(frozen=True)
class WorkspaceParent:
    type: ClassVar[str] = "workspace"


@dataclass(frozen=True)
class UnsupportedParent:
    type: ClassVar[str] = "unsupported"


Parent = DatabaseParent | PageParent | BlockParent | WorkspaceParent | UnsupportedParent


@dataclass(frozen=True)
class HostedFile:
    """A file uploaded to Notion. The URL stops working after ``expiry_time``."""

    url: httpx.URL
    expiry_time: datetime | None
    type: ClassVar[str] = "file"


@dataclass(frozen=True)
class ExternalFile:
    url: httpx.URL
    type: ClassVar[str] = "external"


FileObject = HostedFile | ExternalFile


@dataclass(frozen=True)
class EmojiIcon:
    emoji: str
    type: ClassVar[str] = "emoji"


@dataclass(frozen=True)
class CustomEmojiIcon:
    id: str
    name: str
    url: httpx.URL | None
    type: ClassVar[str] = "custom_emoji"


Icon = EmojiIcon | CustomEmojiIcon | HostedFile | ExternalFile


@dataclass(frozen=True)
class _TextBlock:
    rich_text: RichText
    color: str = "default"


@dataclass(frozen=True)
class Paragraph(_TextBlock):
    type: ClassVar[str] = "paragraph"


@dataclass(frozen=True)
class BulletedListItem(_TextBlock):
    type: ClassVar[str] = "bulleted_list_item"


@dataclass(frozen=True)
class NumberedListItem(_TextBlock):
    type: ClassVar[str] = "numbered_list_item"


@dataclass(frozen=True)
class Quote(_TextBlock):
    type: ClassVar[str] = "quote"


@dataclass(frozen=True)
class Toggle(_TextBlock):
    type: ClassVar[str] = "toggle"


@dataclass(frozen=True)
class _Heading(_TextBlock):
    is_toggleable: bool = False


@dataclass(frozen=True)
class Heading1(_Heading):
    type: ClassVar[str] = "heading_1"


@dataclass(frozen=True)
class Heading2(_Heading):
    type: ClassVar[str] = "heading_2"


@dataclass(frozen=True)
class Heading3(_Heading):
    type: ClassVar[str] = "heading_3"


@dataclass(frozen=True)
class ToDo(_TextBlock):
    checked: bool = False
    type: ClassVar[str] = "to_do"


@dataclass(frozen=True)
class Callout(_TextBlock):
    icon: Icon | None = None
    type: ClassVar[str] = "callout"


@dataclass(frozen=True)
class Template:
    rich_text: RichText
    type: ClassVar[str] = "template"


@dataclass(frozen=True)
class SyncedBlock:
    """The original synced block has ``synced_from`` None; copies point at it."""

    synced_from: BlockId | None
    type: ClassVar[str] = "synced_block"


@dataclass(frozen=True)
class ChildPage:
    title: str
    type: ClassVar[str] = "child_page"


@dataclass(frozen=True)
class ChildDatabase:
    title: str
    type: ClassVar[str] = "child_database"


@dataclass(frozen=True)
class Equation:
    expression: str
    type: ClassVar[str] = "equation"


@dataclass(frozen=True)
class Code:
    rich_text: RichText
    caption: RichText
    language: str
    type: ClassVar[str] = "code"


@dataclass(frozen=True)
class Divider:
    type: ClassVar[str] = "divider"


@dataclass(frozen=True)
class Breadcrumb:
    type: ClassVar[str] = "breadcrumb"


@dataclass(frozen=True)
class TableOfContents:
    color: str = "default"
    type: ClassVar[str] = "table_of_contents"


@dataclass(frozen=True)
class ColumnList:
    type: ClassVar[str] = "column_list"


@dataclass(frozen=True)
class Column:
    type: ClassVar[str] = "column"


@dataclass(frozen=True)
class LinkToPage:
    """Points at either a page or a database; the other ID is None."""

    page_id: PageId | None = None
    database_id: DatabaseId | None = None
    type: ClassVar[str] = "link_to_page"


@dataclass(frozen=True)
class Table:
    table_width: int
    has_column_header: bool
    has_row_header: bool
    type: ClassVar[str] = "table"


@dataclass(frozen=True)
class TableRow:
    cells: tuple[RichText, ...]
    type: ClassVar[str] = "table_row"


@dataclass(frozen=True)
class Embed:
    url: UrlValue
    caption: RichText = ()
    type: ClassVar[str] = "embed"


@dataclass(frozen=True)
class Bookmark:
    url: UrlValue
    caption: RichText = ()
    type: ClassVar[str] = "bookmark"


@dataclass(frozen=True)
class LinkPreview:
    url: UrlValue
    type: ClassVar[str] = "link_preview"


@dataclass(frozen=True)
class _MediaBlock:
    file: FileObject
    caption: RichText = ()


@dataclass(frozen=True)
class Image(_MediaBlock):
    type: ClassVar[str] = "image"


@dataclass(frozen=True)
class Video(_MediaBlock):
    type: ClassVar[str] = "video"


@dataclass(frozen=True)
class Pdf(_MediaBlock):
    type: ClassVar[str] = "pdf"


@dataclass(frozen=True)
class Audio(_MediaBlock):
    type: ClassVar[str] = "audio"


@dataclass(frozen=True)
class File(_MediaBlock):
    name: str = ""
    type: ClassVar[str] = "file"


@dataclass(frozen=True)
class UnsupportedBlock:
    type: ClassVar[str] = "unsupported"


BlockContent = (
    Paragraph
    | Heading1
    | Heading2
    | Heading3
    | BulletedListItem
    | NumberedListItem
    | Quote
    | ToDo
    | Toggle
    | Template
    | SyncedBlock
    | ChildPage
    | ChildDatabase
    | Equation
    | Code
    | Callout
    | Divider
    | Breadcrumb
    | TableOfContents
    | ColumnList
    | Column
    | LinkToPage
    | Table
    | TableRow
    | Embed
    | Bookmark
    | Image
    | Video
    | Pdf
    | File
    | Audio
    | LinkPreview
    | UnsupportedBlock
)


@dataclass(frozen=True)
class Block:
    id: BlockId
    created_time: datetime
    created_by_user_id: UserId
    last_edited_time: datetime
    last_edited_by_user_id: UserId
    has_children: bool
    in_trash: bool
    parent: Parent
    content: BlockContent
