"""Conditions for people, created_by and last_edited_by properties."""

from typing import Literal, TypedDict

from typed_notion.filters.existence import is_empty, is_not_empty
from typed_notion.ids import UserId

__all__ = ["PeopleCondition", "contains", "does_not_contain", "is_empty", "is_not_empty"]


class PeopleCondition(TypedDict, total=False):
    contains: str
    does_not_contain: str
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def contains(user_id: UserId) -> PeopleCondition:
    return {"contains": user_id}


def does_not_contain(user_id: UserId) -> PeopleCondition:
    return {"does_not_contain": user_id}
