"""Tagged query filters understood by the code repository."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

CodeField = Literal[
    "id",
    "value",
    "gift_id",
    "used_by_id",
    "used_at",
    "month",
    "created_at",
]


@dataclass(frozen=True)
class ById:
    """Match one code by primary key."""

    id: int


@dataclass(frozen=True)
class ByField:
    """Exact equality on a column."""

    field: CodeField
    value: object


@dataclass(frozen=True)
class BySubstring:
    """Column contains ``term``."""

    field: CodeField
    term: str


@dataclass(frozen=True)
class ByNullable:
    """Column is (or is not) NULL."""

    field: CodeField
    is_null: bool


@dataclass(frozen=True)
class ByMembership:
    """Column value is (or, when ``negate``, is not) one of ``values``.

    An empty set matches nothing, and its negation matches everything.
    ``ignore_case`` compares the way a case-insensitive collation would.
    """

    field: CodeField
    values: frozenset[str]
    negate: bool = False
    ignore_case: bool = False


CodeFilter = Union[ById, ByField, BySubstring, ByNullable, ByMembership]


@dataclass(frozen=True)
class Sort:
    field: CodeField
    descending: bool = False
