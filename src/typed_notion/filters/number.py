"""Conditions for number and unique_id properties.

https://developers.notion.com/reference/post-database-query-filter#number
"""

from typing import Literal, TypedDict

from typed_notion.filters.existence import is_empty, is_not_empty

__all__ = [
    "NumberCondition",
    "does_not_equal",
    "equals",
    "greater_than",
    "greater_than_or_equal_to",
    "is_empty",
    "is_not_empty",
    "less_than",
    "less_than_or_equal_to",
]


class NumberCondition(TypedDict, total=False):
    equals: float
    does_not_equal: float
    greater_than: float
    less_than: float
    greater_than_or_equal_to: float
    less_than_or_equal_to: float
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def equals(number: float) -> NumberCondition:
    return {"equals": number}


def does_not_equal(number: float) -> NumberCondition:
    return {"does_not_equal": number}


def greater_than(number: float) -> NumberCondition:
    return {"greater_than": number}


def less_than(number: float) -> NumberCondition:
    return {"less_than": number}


def greater_than_or_equal_to(number: float) -> NumberCondition:
    return {"greater_than_or_equal_to": number}


def less_than_or_equal_to(number: float) -> NumberCondition:
    return {"less_than_or_equal_to": number}
