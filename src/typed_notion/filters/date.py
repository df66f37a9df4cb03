"""Conditions for date, created_time and last_edited_time values.

Absolute conditions take a ``datetime`` (sent as a UTC ISO-8601 timestamp)
or a ``date`` (sent as ``YYYY-MM-DD``). Relative conditions such as
``past_week`` take no argument.

https://developers.notion.com/reference/post-database-query-filter#date
"""

from datetime import date
from typing import Literal, TypedDict

from typed_notion.filters.existence import is_empty, is_not_empty
from typed_notion.utils.timestamps import format_timestamp

__all__ = [
    "DateCondition",
    "after",
    "before",
    "equals",
    "is_empty",
    "is_not_empty",
    "next_month",
    "next_week",
    "next_year",
    "on_or_after",
    "on_or_before",
    "past_month",
    "past_week",
    "past_year",
    "this_week",
]

EmptyObject = dict[str, object]


class DateCondition(TypedDict, total=False):
    equals: str
    before: str
    after: str
    on_or_before: str
    on_or_after: str
    this_week: EmptyObject
    past_week: EmptyObject
    past_month: EmptyObject
    past_year: EmptyObject
    next_week: EmptyObject
    next_month: EmptyObject
    next_year: EmptyObject
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def equals(value: date) -> DateCondition:
    return {"equals": format_timestamp(value)}


def before(value: date) -> DateCondition:
    return {"before": format_timestamp(value)}


def after(value: date) -> DateCondition:
    return {"after": format_timestamp(value)}


def on_or_before(value: date) -> DateCondition:
    return {"on_or_before": format_timestamp(value)}


def on_or_after(value: date) -> DateCondition:
    return {"on_or_after": format_timestamp(value)}


def this_week() -> DateCondition:
    return {"this_week": {}}


def past_week() -> DateCondition:
    return {"past_week": {}}


def past_month() -> DateCondition:
    return {"past_month": {}}


def past_year() -> DateCondition:
    return {"past_year": {}}


def next_week() -> DateCondition:
    return {"next_week": {}}


def next_month() -> DateCondition:
    return {"next_month": {}}


def next_year() -> DateCondition:
    return {"next_year": {}}
