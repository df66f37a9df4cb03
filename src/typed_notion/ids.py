"""Branded identifiers for Notion objects.

Notion hands out UUIDs with or without hyphens depending on the endpoint.
Every constructor here strips the hyphens so two IDs for the same object
always compare equal. Property IDs are the exception: they are short opaque
strings (``"title"``, ``"ycLe"``, ``"BjF%5D"``) and are kept as-is.
"""

import re
from typing import NewType

from typed_notion.errors import InvalidIdentifier

PageId = NewType("PageId", str)
UserId = NewType("UserId", str)
BlockId = NewType("BlockId", str)
DatabaseId = NewType("DatabaseId", str)
SelectOptionId = NewType("SelectOptionId", str)
CommentId = NewType("CommentId", str)
PropertyId = NewType("PropertyId", str)

_UUID_HEX_RE = re.compile(r"^[0-9a-f]{32}$")


def _normalize_uuid(raw: str, kind: str) -> str:
    if not isinstance(raw, str):
        raise InvalidIdentifier(raw, kind)
    normalized = raw.replace("-", "").strip()
    if not _UUID_HEX_RE.fullmatch(normalized):
        raise InvalidIdentifier(raw, kind)
    return normalized


def page_id_from(raw: str) -> PageId:
    """Build a page ID, e.g. from the last path segment of a page URL."""
    return PageId(_normalize_uuid(raw, "PageId"))


def user_id_from(raw: str) -> UserId:
    return UserId(_normalize_uuid(raw, "UserId"))


def block_id_from(raw: str) -> BlockId:
    return BlockId(_normalize_uuid(raw, "BlockId"))


def database_id_from(raw: str) -> DatabaseId:
    """Build a database ID.

    The ID is the part of the database URL before ``?v=``::

        https://www.notion.so/39aaf5dc888847dbbf3b671067cf3816?v=1c2ae7b6440241c4a0553eb9f72cd843
                              ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    """
    return DatabaseId(_normalize_uuid(raw, "DatabaseId"))


def select_option_id_from(raw: str) -> SelectOptionId:
    """Build the ID of a select, multi-select or status option."""
    return SelectOptionId(_normalize_uuid(raw, "SelectOptionId"))


def comment_id_from(raw: str) -> CommentId:
    return CommentId(_normalize_uuid(raw, "CommentId"))


def property_id_from(raw: str) -> PropertyId:
    """Build a database property ID. Any string is accepted."""
    if not isinstance(raw, str):
        raise InvalidIdentifier(raw, "PropertyId")
    return PropertyId(raw)
