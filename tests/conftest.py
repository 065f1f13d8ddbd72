"""
Shared fixtures: a fake psycopg2 connection and scripted operator input.

The fake connection records every statement and answers from a queue of
canned results, one result per executed statement.
"""

import builtins

import pytest

import db.connection


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.description = None
        self.rowcount = -1
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((" ".join(sql.split()), params))
        if self.conn.error is not None:
            error, self.conn.error = self.conn.error, None
            raise error
        columns, rows = self.conn.results.pop(0) if self.conn.results else ((), [])
        self.description = [(name,) for name in columns]
        self._rows = list(rows)
        self.rowcount = len(self._rows)

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def __iter__(self):
        while self._rows:
            yield self._rows.pop(0)


class FakeConnection:
    def __init__(self):
        self.executed = []
        self.results = []
        self.error = None
        self.autocommit = False
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def queue(self, columns=(), rows=()):
        """Queue the result of the next executed statement."""
        self.results.append((tuple(columns), list(rows)))
        return self

    def fail_next(self, error):
        self.error = error

    def cursor(self):
        return FakeCursor(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.commits += 1
        else:
            self.rollbacks += 1
        return False

    def close(self):
        self.closed = True

    @property
    def statements(self):
        return [sql for sql, _ in self.executed]


@pytest.fixture
def fake_db(monkeypatch):
    conn = FakeConnection()
    monkeypatch.setattr(db.connection, "_conn", conn)
    return conn


@pytest.fixture
def operator_input(monkeypatch):
    """Script the lines the operator types; running out raises EOFError."""
    lines = []

    def fake_input(prompt=""):
        if not lines:
            raise EOFError
        return lines.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)

    def feed(*values):
        lines.extend(str(v) for v in values)

    return feed
