"""Conditions for title, rich_text, url, email and phone_number properties.

https://developers.notion.com/reference/post-database-query-filter#rich-text
"""

from typing import Literal, TypedDict

from typed_notion.filters.existence import is_empty, is_not_empty

__all__ = [
    "TextCondition",
    "contains",
    "does_not_contain",
    "does_not_equal",
    "ends_with",
    "equals",
    "is_empty",
    "is_not_empty",
    "starts_with",
]


class TextCondition(TypedDict, total=False):
    equals: str
    does_not_equal: str
    contains: str
    does_not_contain: str
    starts_with: str
    ends_with: str
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def equals(text: str) -> TextCondition:
    return {"equals": text}


def does_not_equal(text: str) -> TextCondition:
    return {"does_not_equal": text}


def contains(text: str) -> TextCondition:
    return {"contains": text}


def does_not_contain(text: str) -> TextCondition:
    return {"does_not_contain": text}


def starts_with(text: str) -> TextCondition:
    return {"starts_with": text}


def ends_with(text: str) -> TextCondition:
    return {"ends_with": text}
