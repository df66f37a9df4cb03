"""Database query filters.

A filter is either a property condition, a timestamp condition, or an
``or_`` / ``and_`` group of other filters. Groups may be nested freely.
Everything built here is plain JSON-ready data::

    from typed_notion.filters import number, query, text

    query.or_([
        query.property_number("Age", number.greater_than(5)),
        query.property_title("Name", text.starts_with("A")),
    ])

https://developers.notion.com/reference/post-database-query-filter
"""

from collections.abc import Sequence
from typing import Literal, Required, TypedDict

from typed_notion.filters.checkbox import CheckboxCondition
from typed_notion.filters.date import DateCondition
from typed_notion.filters.existence import ExistenceCondition
from typed_notion.filters.formula import FormulaCondition
from typed_notion.filters.multi_select import MultiSelectCondition
from typed_notion.filters.number import NumberCondition
from typed_notion.filters.people import PeopleCondition
from typed_notion.filters.relation import RelationCondition
from typed_notion.filters.rollup import RollupCondition
from typed_notion.filters.select import SelectCondition
from typed_notion.filters.status import StatusCondition
from typed_notion.filters.text import TextCondition


class PropertyFilter(TypedDict, total=False):
    """A condition on one database property; exactly one payload key is set."""

    property: Required[str]
    type: Required[str]
    title: TextCondition
    rich_text: TextCondition
    number: NumberCondition
    checkbox: CheckboxCondition
    select: SelectCondition
    multi_select: MultiSelectCondition
    status: StatusCondition
    date: DateCondition
    people: PeopleCondition
    files: ExistenceCondition
    url: TextCondition
    email: TextCondition
    phone_number: TextCondition
    relation: RelationCondition
    created_by: PeopleCondition
    created_time: DateCondition
    last_edited_by: PeopleCondition
    last_edited_time: DateCondition
    formula: FormulaCondition
    unique_id: NumberCondition
    rollup: RollupCondition


class TimestampFilter(TypedDict, total=False):
    """A condition on the row's own creation or last edit time."""

    timestamp: Required[Literal["created_time", "last_edited_time"]]
    type: Required[Literal["created_time", "last_edited_time"]]
    created_time: DateCondition
    last_edited_time: DateCondition


OrFilter = TypedDict("OrFilter", {"or": "list[Filter]"})
AndFilter = TypedDict("AndFilter", {"and": "list[Filter]"})

Filter = PropertyFilter | TimestampFilter | OrFilter | AndFilter


def or_(filters: Sequence[Filter]) -> OrFilter:
    """Match rows satisfying at least one of ``filters``."""
    return {"or": list(filters)}


def and_(filters: Sequence[Filter]) -> AndFilter:
    """Match rows satisfying every one of ``filters``."""
    return {"and": list(filters)}


def created_time(condition: DateCondition) -> TimestampFilter:
    return {"timestamp": "created_time", "type": "created_time", "created_time": condition}


def last_edited_time(condition: DateCondition) -> TimestampFilter:
    return {
        "timestamp": "last_edited_time",
        "type": "last_edited_time",
        "last_edited_time": condition,
    }


def _property(prop_type: str, name: str, condition) -> PropertyFilter:
    return {"property": name, "type": prop_type, prop_type: condition}


def property_title(name: str, condition: TextCondition) -> PropertyFilter:
    return _property("title", name, condition)


def property_rich_text(name: str, condition: TextCondition) -> PropertyFilter:
    return _property("rich_text", name, condition)


def property_number(name: str, condition: NumberCondition) -> PropertyFilter:
    return _property("number", name, condition)


def property_checkbox(name: str, condition: CheckboxCondition) -> PropertyFilter:
    return _property("checkbox", name, condition)


def property_select(name: str, condition: SelectCondition) -> PropertyFilter:
    return _property("select", name, condition)


def property_multi_select(name: str, condition: MultiSelectCondition) -> PropertyFilter:
    return _property("multi_select", name, condition)


def property_status(name: str, condition: StatusCondition) -> PropertyFilter:
    return _property("status", name, condition)


def property_date(name: str, condition: DateCondition) -> PropertyFilter:
    return _property("date", name, condition)


def property_people(name: str, condition: PeopleCondition) -> PropertyFilter:
    return _property("people", name, condition)


def property_files(name: str, condition: ExistenceCondition) -> PropertyFilter:
    return _property("files", name, condition)


def property_url(name: str, condition: TextCondition) -> PropertyFilter:
    return _property("url", name, condition)


def property_email(name: str, condition: TextCondition) -> PropertyFilter:
    return _property("email", name, condition)


def property_phone_number(name: str, condition: TextCondition) -> PropertyFilter:
    return _property("phone_number", name, condition)


def property_relation(name: str, condition: RelationCondition) -> PropertyFilter:
    return _property("relation", name, condition)


def property_created_by(name: str, condition: PeopleCondition) -> PropertyFilter:
    return _property("created_by", name, condition)


def property_created_time(name: str, condition: DateCondition) -> PropertyFilter:
    return _property("created_time", name, condition)


def property_last_edited_by(name: str, condition: PeopleCondition) -> PropertyFilter:
    return _property("last_edited_by", name, condition)


def property_last_edited_time(name: str, condition: DateCondition) -> PropertyFilter:
    return _property("last_edited_time", name, condition)


def property_formula(name: str, condition: FormulaCondition) -> PropertyFilter:
    return _property("formula", name, condition)


def property_unique_id(name: str, condition: NumberCondition) -> PropertyFilter:
    return _property("unique_id", name, condition)


def property_rollup(name: str, condition: RollupCondition) -> PropertyFilter:
    return _property("rollup", name, condition)
