"""Build the payloads sent when updating page properties.

Each builder returns the JSON for one entry of the ``properties`` map of a
page update. ``None`` means "clear the property" and is sent as an explicit
``null``; to leave a property untouched, leave it out of the map::

    from typed_notion.notion import property_update as update

    await client.update_page_properties(
        page_id,
        properties={
            "Age": update.number(42),
            "URL": update.url(None),
            "Tags": update.multi_select([update.option_by_name("a")]),
        },
    )

https://developers.notion.com/reference/page-property-values
"""

from collections.abc import Sequence
from datetime import date as date_type
from enum import Enum
from typing import Any, Literal, Required, TypedDict

import httpx

from typed_notion.ids import DatabaseId, PageId, SelectOptionId, UserId
from typed_notion.utils.timestamps import format_timestamp

# ── Rich text requests ─────────────────────────────────────────────────────


class RequestAnnotations(TypedDict, total=False):
    bold: bool
    italic: bool
    strikethrough: bool
    underline: bool
    code: bool
    color: str


class RichTextRequest(TypedDict, total=False):
    type: Required[Literal["text", "mention", "equation"]]
    text: dict[str, Any]
    mention: dict[str, Any]
    equation: dict[str, str]
    annotations: RequestAnnotations


def _with_annotations(item: RichTextRequest, annotations: RequestAnnotations | None) -> RichTextRequest:
    if annotations:
        item["annotations"] = annotations
    return item


def text(
    content: str,
    *,
    link: str | httpx.URL | None = None,
    annotations: RequestAnnotations | None = None,
) -> RichTextRequest:
    payload: dict[str, Any] = {"content": content}
    if link is not None:
        payload["link"] = {"url": str(link)}
    return _with_annotations({"type": "text", "text": payload}, annotations)


def mention_user(user_id: UserId, *, annotations: RequestAnnotations | None = None) -> RichTextRequest:
    return _with_annotations(
        {"type": "mention", "mention": {"user": {"id": user_id}}}, annotations
    )


def mention_page(page_id: PageId, *, annotations: RequestAnnotations | None = None) -> RichTextRequest:
    return _with_annotations(
        {"type": "mention", "mention": {"page": {"id": page_id}}}, annotations
    )


def mention_database(
    database_id: DatabaseId, *, annotations: RequestAnnotations | None = None
) -> RichTextRequest:
    return _with_annotations(
        {"type": "mention", "mention": {"database": {"id": database_id}}}, annotations
    )


def mention_date(
    start: date_type,
    end: date_type | None = None,
    *,
    annotations: RequestAnnotations | None = None,
) -> RichTextRequest:
    return _with_annotations(
        {"type": "mention", "mention": {"date": _date_request(start, end)}}, annotations
    )


def mention_template_date(
    when: Literal["today", "now"], *, annotations: RequestAnnotations | None = None
) -> RichTextRequest:
    """A template mention, resolved by Notion when the template is used."""
    template = {"type": "template_mention_date", "template_mention_date": when}
    return _with_annotations(
        {"type": "mention", "mention": {"template_mention": template}}, annotations
    )


def mention_template_user(*, annotations: RequestAnnotations | None = None) -> RichTextRequest:
    template = {"type": "template_mention_user", "template_mention_user": "me"}
    return _with_annotations(
        {"type": "mention", "mention": {"template_mention": template}}, annotations
    )


def equation(expression: str, *, annotations: RequestAnnotations | None = None) -> RichTextRequest:
    return _with_annotations(
        {"type": "equation", "equation": {"expression": expression}}, annotations
    )


def _date_request(start: date_type, end: date_type | None) -> dict[str, str | None]:
    return {
        "start": format_timestamp(start),
        "end": format_timestamp(end) if end is not None else None,
    }


# ── Option and file references ─────────────────────────────────────────────


class OptionReference(TypedDict, total=False):
    id: str
    name: str
    color: str


def option_by_name(name: str, color: str | None = None) -> OptionReference:
    """Reference an option by name. Unknown names create a new option."""
    ref: OptionReference = {"name": name}
    if color is not None:
        ref["color"] = color
    return ref


def option_by_id(option_id: SelectOptionId) -> OptionReference:
    return {"id": option_id}


class FileReference(TypedDict, total=False):
    type: Required[Literal["file", "external"]]
    name: Required[str]
    file: dict[str, str]
    external: dict[str, str]


def external_file(name: str, url: str | httpx.URL) -> FileReference:
    return {"type": "external", "name": name, "external": {"url": str(url)}}


def hosted_file(name: str, url: str | httpx.URL) -> FileReference:
    """Keep a file already uploaded to Notion, e.g. one read from the same page."""
    return {"type": "file", "name": name, "file": {"url": str(url)}}


# ── Property updates ───────────────────────────────────────────────────────


class PropertyUpdate(TypedDict, total=False):
    type: Required[str]
    title: list[RichTextRequest]
    rich_text: list[RichTextRequest]
    number: float | None
    url: str | None
    select: OptionReference | None
    multi_select: list[OptionReference]
    people: list[dict[str, str]]
    email: str | None
    phone_number: str | None
    date: dict[str, str | None] | None
    checkbox: bool
    relation: list[dict[str, str]]
    files: list[FileReference]
    status: OptionReference | None


def title(rich_text: Sequence[RichTextRequest]) -> PropertyUpdate:
    return {"type": "title", "title": list(rich_text)}


def rich_text(items: Sequence[RichTextRequest]) -> PropertyUpdate:
    return {"type": "rich_text", "rich_text": list(items)}


def number(value: float | None) -> PropertyUpdate:
    return {"type": "number", "number": value}


def url(value: str | httpx.URL | None) -> PropertyUpdate:
    return {"type": "url", "url": str(value) if value is not None else None}


def select(option: OptionReference | None) -> PropertyUpdate:
    return {"type": "select", "select": option}


def multi_select(options: Sequence[OptionReference]) -> PropertyUpdate:
    return {"type": "multi_select", "multi_select": list(options)}


def status(option: OptionReference | None) -> PropertyUpdate:
    return {"type": "status", "status": option}


def people(user_ids: Sequence[UserId]) -> PropertyUpdate:
    return {"type": "people", "people": [{"id": user_id} for user_id in user_ids]}


def email(value: str | None) -> PropertyUpdate:
    return {"type": "email", "email": value}


def phone_number(value: str | None) -> PropertyUpdate:
    return {"type": "phone_number", "phone_number": value}


def date(start: date_type | None, end: date_type | None = None) -> PropertyUpdate:
    """Set a date or date range; ``date(None)`` clears the property."""
    if start is None:
        return {"type": "date", "date": None}
    return {"type": "date", "date": _date_request(start, end)}


def checkbox(checked: bool) -> PropertyUpdate:
    return {"type": "checkbox", "checkbox": checked}


def relation(page_ids: Sequence[PageId]) -> PropertyUpdate:
    """Replace the related pages, keeping the given order."""
    return {"type": "relation", "relation": [{"id": page_id} for page_id in page_ids]}


def files(items: Sequence[FileReference]) -> PropertyUpdate:
    return {"type": "files", "files": list(items)}


# ── Icon and cover ─────────────────────────────────────────────────────────


class Remove(Enum):
    """Marker asking Notion to remove a page's icon or cover."""

    REMOVE = "remove"


REMOVE = Remove.REMOVE


class IconUpdate(TypedDict, total=False):
    type: Required[Literal["emoji", "external"]]
    emoji: str
    external: dict[str, str]


class CoverUpdate(TypedDict):
    type: Literal["external"]
    external: dict[str, str]


def emoji_icon(emoji: str) -> IconUpdate:
    return {"type": "emoji", "emoji": emoji}


def external_icon(url: str | httpx.URL) -> IconUpdate:
    return {"type": "external", "external": {"url": str(url)}}


def external_cover(url: str | httpx.URL) -> CoverUpdate:
    return {"type": "external", "external": {"url": str(url)}}
