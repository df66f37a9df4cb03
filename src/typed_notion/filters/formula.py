"""Conditions for formula properties, keyed by the formula's result type.

https://developers.notion.com/reference/post-database-query-filter#formula
"""

from typing import Literal, TypedDict

from typed_notion.filters.checkbox import CheckboxCondition
from typed_notion.filters.date import DateCondition
from typed_notion.filters.existence import is_empty, is_not_empty
from typed_notion.filters.number import NumberCondition
from typed_notion.filters.text import TextCondition

__all__ = ["FormulaCondition", "checkbox", "date", "is_empty", "is_not_empty", "number", "string"]


class FormulaCondition(TypedDict, total=False):
    string: TextCondition
    checkbox: CheckboxCondition
    number: NumberCondition
    date: DateCondition
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def string(condition: TextCondition) -> FormulaCondition:
    return {"string": condition}


def checkbox(condition: CheckboxCondition) -> FormulaCondition:
    return {"checkbox": condition}


def number(condition: NumberCondition) -> FormulaCondition:
    return {"number": condition}


def date(condition: DateCondition) -> FormulaCondition:
    return {"date": condition}
