"""Shared fixtures: in-memory SQLite database and repository fakes."""

import os
from datetime import datetime
from typing import Optional, Sequence

os.environ.setdefault("PRIZE_ADMIN_DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from prize_admin.core.database import Base, get_db
from prize_admin.main import app
from prize_admin.models import Code, Gift, User, Winner
from prize_admin.repositories import (
    ByField,
    ById,
    ByMembership,
    ByNullable,
    BySubstring,
    CodeFilter,
    CodeRecord,
    Sort,
)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine, future=True) as db:
        yield db


@pytest.fixture()
def client(session):
    def _override_get_db():
        yield session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def seed(session):
    """Insert rows and return them, flushed so ids are assigned."""

    class Seeder:
        def gift(self, name="Headphones", **fields) -> Gift:
            gift = Gift(name=name, images=fields.pop("images", []), **fields)
            session.add(gift)
            session.flush()
            return gift

        def user(self, first_name="Aziz", **fields) -> User:
            user = User(first_name=first_name, **fields)
            session.add(user)
            session.flush()
            return user

        def code(self, value, **fields) -> Code:
            code = Code(value=value, **fields)
            session.add(code)
            session.flush()
            return code

        def winner(self, value, **fields) -> Winner:
            winner = Winner(value=value, **fields)
            session.add(winner)
            session.flush()
            return winner

    return Seeder()


def _matches(record: CodeRecord, code_filter: CodeFilter) -> bool:
    if isinstance(code_filter, ById):
        return record.id == code_filter.id
    if isinstance(code_filter, ByField):
        return getattr(record, code_filter.field) == code_filter.value
    if isinstance(code_filter, BySubstring):
        value = getattr(record, code_filter.field)
        return value is not None and code_filter.term in value
    if isinstance(code_filter, ByNullable):
        return (getattr(record, code_filter.field) is None) == code_filter.is_null
    if isinstance(code_filter, ByMembership):
        value = getattr(record, code_filter.field)
        values = code_filter.values
        if code_filter.ignore_case:
            value = value.upper()
            values = {member.upper() for member in values}
        return (value in values) != code_filter.negate
    raise TypeError(code_filter)


class InMemoryCodeRepository:
    """Applies tagged filters in Python; records the last query for assertions."""

    def __init__(self, records: Sequence[CodeRecord] = ()) -> None:
        self.records = list(records)
        self.last_filters: list[CodeFilter] = []

    def _select(self, filters):
        self.last_filters = list(filters)
        return [record for record in self.records if all(_matches(record, f) for f in filters)]

    def find_and_count(self, filters, *, order: Sequence[Sort], page: int, limit: int):
        rows = self._select(filters)
        for sort in reversed(order):
            present = [row for row in rows if getattr(row, sort.field) is not None]
            missing = [row for row in rows if getattr(row, sort.field) is None]
            present.sort(key=lambda row: getattr(row, sort.field), reverse=sort.descending)
            rows = present + missing
        start = (page - 1) * limit
        return rows[start:start + limit], len(rows)

    def count(self, filters) -> int:
        return len(self._select(filters))

    def find_one_by_values(self, values) -> Optional[CodeRecord]:
        for value in values:
            for record in self.records:
                if record.value == value:
                    return record
        return None

    def mark_gift_given(self, code_id: int, *, given_by: str, given_at: datetime) -> Optional[CodeRecord]:
        return None


class InMemoryWinnerRepository:
    def __init__(self, values: Sequence[str] = ()) -> None:
        self.values = list(values)
        self.calls = 0

    def list_values(self) -> list[str]:
        self.calls += 1
        return list(self.values)
