from __future__ import annotations

from typing import Any, List, Optional

import pytest


class RecordingCursor:
    """Records executed SQL; returns queued rows for fetchone/fetchall."""

    def __init__(self, results: Optional[List[Any]] = None, *, fail_with: Optional[Exception] = None):
        self.executed: list[tuple[str, tuple]] = []
        self._results = list(results or [])
        self._fail_with = fail_with
        self.lastrowid = 0
        self.rowcount = 0
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), tuple(params)))
        if self._fail_with is not None:
            raise self._fail_with

    def fetchone(self):
        return self._results.pop(0) if self._results else None

    def fetchall(self):
        return self._results.pop(0) if self._results else []

    def close(self):
        self.closed = True


class RecordingConnection:
    def __init__(self, cursor: RecordingCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class RecordingConnectionFactory:
    def __init__(self, cursor: RecordingCursor):
        self.cursor = cursor
        self.connection = RecordingConnection(cursor)

    def connect(self):
        return self.connection

    @property
    def sql(self) -> list[str]:
        return [s for s, _ in self.cursor.executed]

    @property
    def params(self) -> list[tuple]:
        return [p for _, p in self.cursor.executed]


@pytest.fixture()
def recording_db():
    """Build a connection factory whose cursor replays the given result rows."""

    def make(results: Optional[List[Any]] = None, *, fail_with: Optional[Exception] = None, lastrowid: int = 0):
        cursor = RecordingCursor(results, fail_with=fail_with)
        cursor.lastrowid = lastrowid
        return RecordingConnectionFactory(cursor)

    return make
