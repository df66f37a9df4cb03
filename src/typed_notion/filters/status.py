"""Conditions for status properties, matched by option name."""

from typing import Literal, TypedDict

from typed_notion.filters.existence import is_empty, is_not_empty

__all__ = ["StatusCondition", "does_not_equal", "equals", "is_empty", "is_not_empty"]


class StatusCondition(TypedDict, total=False):
    equals: str
    does_not_equal: str
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def equals(name: str) -> StatusCondition:
    return {"equals": name}


def does_not_equal(name: str) -> StatusCondition:
    return {"does_not_equal": name}
