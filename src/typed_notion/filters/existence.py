"""Existence conditions, accepted by every property filter type."""

from typing import Literal, TypedDict


class ExistenceCondition(TypedDict, total=False):
    is_empty: Literal[True]
    is_not_empty: Literal[True]


def is_empty() -> ExistenceCondition:
    return {"is_empty": True}


def is_not_empty() -> ExistenceCondition:
    return {"is_not_empty": True}
