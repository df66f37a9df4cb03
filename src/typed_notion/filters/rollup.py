"""Conditions for rollup properties.

Array rollups are filtered with ``any``, ``none`` or ``every`` wrapped around
a sub-condition built with one of the ``subfilter_*`` functions. Date and
number rollups take the plain date/number condition.

https://developers.notion.com/reference/post-database-query-filter#rollup
"""

from typing import Literal, TypedDict

from typed_notion.filters.checkbox import CheckboxCondition
from typed_notion.filters.date import DateCondition
from typed_notion.filters.existence import ExistenceCondition, is_empty, is_not_empty
from typed_notion.filters.multi_select import MultiSelectCondition
from typed_notion.filters.number import NumberCondition
from typed_notion.filters.people import PeopleCondition
from typed_notion.filters.relation import RelationCondition
from typed_notion.filters.select import SelectCondition
from typed_notion.filters.status import StatusCondition
from typed_notion.filters.text import TextCondition

__all__ = [
    "RollupCondition",
    "RollupSubfilter",
    "any_",
    "date",
    "every",
    "is_empty",
    "is_not_empty",
    "none",
    "number",
    "subfilter_checkbox",
    "subfilter_date",
    "subfilter_files",
    "subfilter_multi_select",
    "subfilter_number",
    "subfilter_people",
    "subfilter_relation",
    "subfilter_rich_text",
    "subfilter_select",
    "subfilter_status",
]


class RollupSubfilter(TypedDict, total=False):
    rich_text: TextCondition
    number: NumberCondition
    checkbox: CheckboxCondition
    select: SelectCondition
    multi_select: MultiSelectCondition
    relation: RelationCondition
    date: DateCondition
    people: PeopleCondition
    files: ExistenceCondition
    status: StatusCondition


class RollupCondition(TypedDict, total=False):
    any: RollupSubfilter
    none: RollupSubfilter
    every: RollupSubfilter
    date: DateCondition
    number: NumberCondition
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def any_(subfilter: RollupSubfilter) -> RollupCondition:
    return {"any": subfilter}


def none(subfilter: RollupSubfilter) -> RollupCondition:
    return {"none": subfilter}


def every(subfilter: RollupSubfilter) -> RollupCondition:
    return {"every": subfilter}


def date(condition: DateCondition) -> RollupCondition:
    return {"date": condition}


def number(condition: NumberCondition) -> RollupCondition:
    return {"number": condition}


def subfilter_rich_text(condition: TextCondition) -> RollupSubfilter:
    return {"rich_text": condition}


def subfilter_number(condition: NumberCondition) -> RollupSubfilter:
    return {"number": condition}


def subfilter_checkbox(condition: CheckboxCondition) -> RollupSubfilter:
    return {"checkbox": condition}


def subfilter_select(condition: SelectCondition) -> RollupSubfilter:
    return {"select": condition}


def subfilter_multi_select(condition: MultiSelectCondition) -> RollupSubfilter:
    return {"multi_select": condition}


def subfilter_relation(condition: RelationCondition) -> RollupSubfilter:
    return {"relation": condition}


def subfilter_date(condition: DateCondition) -> RollupSubfilter:
    return {"date": condition}


def subfilter_people(condition: PeopleCondition) -> RollupSubfilter:
    return {"people": condition}


def subfilter_files(condition: ExistenceCondition) -> RollupSubfilter:
    return {"files": condition}


def subfilter_status(condition: StatusCondition) -> RollupSubfilter:
    return {"status": condition}
