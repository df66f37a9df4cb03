"""Conditions for relation properties."""

from typing import Literal, TypedDict

from typed_notion.filters.existence import is_empty, is_not_empty
from typed_notion.ids import PageId

__all__ = ["RelationCondition", "contains", "does_not_contain", "is_empty", "is_not_empty"]


class RelationCondition(TypedDict, total=False):
    contains: str
    does_not_contain: str
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def contains(page_id: PageId) -> RelationCondition:
    return {"contains": page_id}


def does_not_contain(page_id: PageId) -> RelationCondition:
    return {"does_not_contain": page_id}
