"""Conditions for checkbox properties."""

from typing import Literal, TypedDict

from typed_notion.filters.existence import is_empty, is_not_empty

__all__ = ["CheckboxCondition", "does_not_equal", "equals", "is_empty", "is_not_empty"]


class CheckboxCondition(TypedDict, total=False):
    equals: bool
    does_not_equal: bool
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def equals(checked: bool) -> CheckboxCondition:
    return {"equals": checked}


def does_not_equal(checked: bool) -> CheckboxCondition:
    return {"does_not_equal": checked}
