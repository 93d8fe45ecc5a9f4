import logging
import sqlite3
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

logger = logging.getLogger(__name__)

logging.basicConfig(level=logging.INFO)


class FakeError(Exception):
    """Stands in for a driver's native exception type."""


class FakeCursor:
    """Records statements and hands back canned rows."""

    def __init__(self, connection: "FakeConnection"):
        self.connection = connection
        self.closed = False

    def execute(self, operation: str, parameters: Sequence[Any] = (), /) -> "FakeCursor":
        self.connection.executed.append((operation, tuple(parameters)))
        if self.connection.fail_on_execute is not None:
            raise self.connection.fail_on_execute
        return self

    def fetchone(self) -> Sequence[Any] | None:
        if self.connection.fail_on_fetch is not None:
            raise self.connection.fail_on_fetch
        if not self.connection.rows:
            return None
        return self.connection.rows.pop(0)

    def close(self) -> None:
        self.closed = True
        self.connection.events.append("cursor.close")


class FakeConnection:
    """An in-memory DB-API connection used to observe how the store drives its backend."""

    def __init__(
        self,
        rows: list[Sequence[Any]] | None = None,
        fail_on_execute: Exception | None = None,
        fail_on_fetch: Exception | None = None,
        fail_on_cursor: Exception | None = None,
    ):
        self.rows: list[Sequence[Any]] = list(rows or [])
        self.fail_on_execute = fail_on_execute
        self.fail_on_fetch = fail_on_fetch
        self.fail_on_cursor = fail_on_cursor
        self.executed: list[tuple[str, tuple[Any, ...]]] = []
        self.events: list[str] = []
        self.cursors: list[FakeCursor] = []
        self.commits = 0
        self.closed = False

    def cursor(self) -> FakeCursor:
        if self.fail_on_cursor is not None:
            raise self.fail_on_cursor
        cursor = FakeCursor(connection=self)
        self.cursors.append(cursor)
        return cursor

    def commit(self) -> None:
        self.commits += 1
        self.events.append("connection.commit")

    def close(self) -> None:
        self.closed = True
        self.events.append("connection.close")


class FakeConnectionFactory:
    """Hands out pre-built fake connections and remembers every one it handed out."""

    def __init__(self, *connections: FakeConnection):
        self._pending: list[FakeConnection] = list(connections)
        self.handed_out: list[FakeConnection] = []

    def __call__(self) -> FakeConnection:
        connection = self._pending.pop(0) if self._pending else FakeConnection()
        self.handed_out.append(connection)
        return connection


@pytest.fixture
def sqlite_path(tmp_path: Path) -> Path:
    return tmp_path / "test.db"


@pytest.fixture
def sqlite_connection_factory(sqlite_path: Path) -> Callable[[], sqlite3.Connection]:
    def connect() -> sqlite3.Connection:
        return sqlite3.connect(sqlite_path)

    return connect
