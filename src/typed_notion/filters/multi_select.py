"""Conditions for multi_select properties, matched by option name."""

from typing import Literal, TypedDict

from typed_notion.filters.existence import is_empty, is_not_empty

__all__ = ["MultiSelectCondition", "contains", "does_not_contain", "is_empty", "is_not_empty"]


class MultiSelectCondition(TypedDict, total=False):
    contains: str
    does_not_contain: str
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def contains(name: str) -> MultiSelectCondition:
    return {"contains": name}


def does_not_contain(name: str) -> MultiSelectCondition:
    return {"does_not_contain": name}
