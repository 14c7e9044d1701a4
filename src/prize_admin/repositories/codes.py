"""Code persistence: translates tagged filters into SQLAlchemy queries."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from sqlalchemy import false, func, select, true
from sqlalchemy.orm import Session, joinedload

from ..models import Code
from .filters import ByField, ById, ByMembership, ByNullable, BySubstring, CodeFilter, Sort
from .records import CodeRecord

_COLUMNS = {
    "id": Code.id,
    "value": Code.value,
    "gift_id": Code.gift_id,
    "used_by_id": Code.used_by_id,
    "used_at": Code.used_at,
    "month": Code.month,
    "created_at": Code.created_at,
}


class CodeRepository(Protocol):
    """Read/write access to codes used by the services."""

    def find_and_count(
        self,
        filters: Sequence[CodeFilter],
        *,
        order: Sequence[Sort],
        page: int,
        limit: int,
    ) -> tuple[list[CodeRecord], int]:
        ...

    def count(self, filters: Sequence[CodeFilter]) -> int:
        ...

    def find_one_by_values(self, values: Sequence[str]) -> Optional[CodeRecord]:
        ...

    def mark_gift_given(self, code_id: int, *, given_by: str, given_at: datetime) -> Optional[CodeRecord]:
        ...


def _column(field: str):
    try:
        return _COLUMNS[field]
    except KeyError as exc:
        raise ValueError(f"Unsupported code field: {field!r}") from exc


def _clause(code_filter: CodeFilter):
    if isinstance(code_filter, ById):
        return Code.id == code_filter.id
    if isinstance(code_filter, ByField):
        return _column(code_filter.field) == code_filter.value
    if isinstance(code_filter, BySubstring):
        return _column(code_filter.field).contains(code_filter.term, autoescape=True)
    if isinstance(code_filter, ByNullable):
        column = _column(code_filter.field)
        return column.is_(None) if code_filter.is_null else column.is_not(None)
    if isinstance(code_filter, ByMembership):
        column = _column(code_filter.field)
        if not code_filter.values:
            return true() if code_filter.negate else false()
        values = sorted(code_filter.values)
        if code_filter.ignore_case:
            column = func.upper(column)
            values = sorted({value.upper() for value in values})
        return column.not_in(values) if code_filter.negate else column.in_(values)
    raise TypeError(f"Unsupported filter: {code_filter!r}")


def _order_by(order: Sequence[Sort]):
    clauses = []
    for sort in order:
        column = _column(sort.field)
        clauses.append(column.desc().nulls_last() if sort.descending else column.asc())
    return clauses


class SqlCodeRepository:
    """Code repository backed by a SQLAlchemy session. Soft-deleted rows are never returned."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _conditions(self, filters: Sequence[CodeFilter]) -> list:
        return [Code.deleted_at.is_(None), *(_clause(code_filter) for code_filter in filters)]

    def _load(self):
        return select(Code).options(joinedload(Code.gift), joinedload(Code.used_by))

    def find_and_count(
        self,
        filters: Sequence[CodeFilter],
        *,
        order: Sequence[Sort],
        page: int,
        limit: int,
    ) -> tuple[list[CodeRecord], int]:
        conditions = self._conditions(filters)

        total = self.session.execute(select(func.count(Code.id)).where(*conditions)).scalar_one()

        stmt = (
            self._load()
            .where(*conditions)
            .order_by(*_order_by(order))
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [CodeRecord.from_model(row) for row in rows], total

    def count(self, filters: Sequence[CodeFilter]) -> int:
        stmt = select(func.count(Code.id)).where(*self._conditions(filters))
        return self.session.execute(stmt).scalar_one()

    def find_one_by_values(self, values: Sequence[str]) -> Optional[CodeRecord]:
        """Return the first code whose value equals one of ``values``, in the given priority."""

        if not values:
            return None

        stmt = self._load().where(*self._conditions([ByMembership("value", frozenset(values))])).order_by(Code.id)
        by_value: dict[str, Code] = {}
        for row in self.session.execute(stmt).scalars().all():
            by_value.setdefault(row.value, row)

        for value in values:
            if value in by_value:
                return CodeRecord.from_model(by_value[value])
        return None

    def mark_gift_given(self, code_id: int, *, given_by: str, given_at: datetime) -> Optional[CodeRecord]:
        stmt = self._load().where(*self._conditions([ById(code_id)]))
        code = self.session.execute(stmt).scalar_one_or_none()
        if code is None:
            return None

        code.gift_given_by = given_by
        code.gift_given_at = given_at
        self.session.flush()
        return CodeRecord.from_model(code)
