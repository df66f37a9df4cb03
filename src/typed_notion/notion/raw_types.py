"""Wire shapes of the Notion API responses this client reads.

These mirror the JSON exactly (snake_case keys, ``null`` where Notion sends
``null``) and only exist so the normalizers in ``property_parser`` and
``block_parser`` have something typed to read from. Anything not listed
here is still accepted at runtime; unknown variants end up as the
``Unsupported*`` domain values.

The two response envelopes are pydantic models because the client has to
tell them apart before anything else happens.
"""

from typing import Any, Literal, NotRequired, TypedDict

from pydantic import BaseModel


# ── Envelopes ──────────────────────────────────────────────────────────────


class RawErrorResponse(BaseModel):
    """``{"object": "error", ...}``, returned with a 4xx/5xx status."""

    object: Literal["error"]
    status: int | None = None
    code: str
    message: str


class RawListResponse(BaseModel):
    """A page of results from a paginated endpoint."""

    object: Literal["list"]
    results: list[dict[str, Any]]
    next_cursor: str | None = None
    has_more: bool = False


# ── Shared ─────────────────────────────────────────────────────────────────


class RawPartialUser(TypedDict):
    id: str
    object: Literal["user"]


class RawAnnotations(TypedDict):
    bold: bool
    italic: bool
    strikethrough: bool
    underline: bool
    code: bool
    color: str


class RawDate(TypedDict):
    start: str
    end: str | None
    time_zone: str | None


class RawSelectOption(TypedDict):
    id: str
    name: str
    color: str


# ── Rich text ──────────────────────────────────────────────────────────────


class RawLink(TypedDict):
    url: str


class RawTextPayload(TypedDict):
    content: str
    link: RawLink | None


class RawTemplateMention(TypedDict):
    type: Literal["template_mention_date", "template_mention_user"]
    template_mention_date: NotRequired[Literal["today", "now"]]
    template_mention_user: NotRequired[Literal["me"]]


class RawMention(TypedDict):
    """One of user, date, link_preview, template_mention, page, database."""

    type: str
    user: NotRequired[RawPartialUser]
    date: NotRequired[RawDate]
    link_preview: NotRequired[RawLink]
    template_mention: NotRequired[RawTemplateMention]
    page: NotRequired[dict[str, str]]
    database: NotRequired[dict[str, str]]


class RawEquationPayload(TypedDict):
    expression: str


class RawRichTextItem(TypedDict):
    type: Literal["text", "mention", "equation"]
    text: NotRequired[RawTextPayload]
    mention: NotRequired[RawMention]
    equation: NotRequired[RawEquationPayload]
    annotations: RawAnnotations
    plain_text: str
    href: str | None


# ── Page properties ────────────────────────────────────────────────────────


class RawNumberProperty(TypedDict):
    id: str
    type: Literal["number"]
    number: float | None


class RawUrlProperty(TypedDict):
    id: str
    type: Literal["url"]
    url: str | None


class RawSelectProperty(TypedDict):
    id: str
    type: Literal["select"]
    select: RawSelectOption | None


class RawMultiSelectProperty(TypedDict):
    id: str
    type: Literal["multi_select"]
    multi_select: list[RawSelectOption]


class RawStatusProperty(TypedDict):
    id: str
    type: Literal["status"]
    status: RawSelectOption | None


class RawDateProperty(TypedDict):
    id: str
    type: Literal["date"]
    date: RawDate | None


class RawEmailProperty(TypedDict):
    id: str
    type: Literal["email"]
    email: str | None


class RawPhoneNumberProperty(TypedDict):
    id: str
    type: Literal["phone_number"]
    phone_number: str | None


class RawCheckboxProperty(TypedDict):
    id: str
    type: Literal["checkbox"]
    checkbox: bool


class RawTitleProperty(TypedDict):
    id: str
    type: Literal["title"]
    title: list[RawRichTextItem]


class RawRichTextProperty(TypedDict):
    id: str
    type: Literal["rich_text"]
    rich_text: list[RawRichTextItem]


class RawRelationProperty(TypedDict):
    id: str
    type: Literal["relation"]
    relation: list[dict[str, str]]
    # Notion stops listing relations after 25 entries and sets this flag
    has_more: bool


RawPropertyValue = (
    RawNumberProperty
    | RawUrlProperty
    | RawSelectProperty
    | RawMultiSelectProperty
    | RawStatusProperty
    | RawDateProperty
    | RawEmailProperty
    | RawPhoneNumberProperty
    | RawCheckboxProperty
    | RawTitleProperty
    | RawRichTextProperty
    | RawRelationProperty
)


class RawPage(TypedDict):
    object: Literal["page"]
    id: str
    created_time: str
    last_edited_time: str
    created_by: RawPartialUser
    last_edited_by: RawPartialUser
    in_trash: bool
    properties: dict[str, RawPropertyValue]
    url: str
    public_url: str | None


# ── Blocks ─────────────────────────────────────────────────────────────────


class RawParent(TypedDict):
    type: Literal["database_id", "page_id", "block_id", "workspace"]
    database_id: NotRequired[str]
    page_id: NotRequired[str]
    block_id: NotRequired[str]
    workspace: NotRequired[Literal[True]]


class RawFileObject(TypedDict):
    type: Literal["file", "external"]
    file: NotRequired[dict[str, str]]
    external: NotRequired[RawLink]
    caption: NotRequired[list[RawRichTextItem]]
    name: NotRequired[str]


class RawIcon(TypedDict):
    type: Literal["emoji", "external", "file", "custom_emoji"]
    emoji: NotRequired[str]
    external: NotRequired[RawLink]
    file: NotRequired[dict[str, str]]
    custom_emoji: NotRequired[dict[str, str]]


class RawTextBlockData(TypedDict):
    """Payload of paragraph, list items, quote, toggle, headings, to_do, callout."""

    rich_text: list[RawRichTextItem]
    color: str
    is_toggleable: NotRequired[bool]
    checked: NotRequired[bool]
    icon: NotRequired[RawIcon | None]


class RawCodeData(TypedDict):
    rich_text: list[RawRichTextItem]
    caption: list[RawRichTextItem]
    language: str


class RawUrlBlockData(TypedDict):
    """Payload of embed, bookmark and link_preview."""

    url: str
    caption: NotRequired[list[RawRichTextItem]]


class RawTableData(TypedDict):
    table_width: int
    has_column_header: bool
    has_row_header: bool


class RawTableRowData(TypedDict):
    cells: list[list[RawRichTextItem]]


class RawBlock(TypedDict):
    """Common block fields; the payload sits under the key named by ``type``."""

    object: Literal["block"]
    id: str
    type: str
    parent: RawParent
    created_time: str
    created_by: RawPartialUser
    last_edited_time: str
    last_edited_by: RawPartialUser
    has_children: bool
    in_trash: bool
