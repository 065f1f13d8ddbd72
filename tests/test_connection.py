import psycopg2
import pytest

import db.connection
from db.connection import close_connection, get_connection, open_connection, transaction
from tests.conftest import FakeConnection


@pytest.fixture
def no_connection(monkeypatch):
    monkeypatch.setattr(db.connection, "_conn", None)


def test_open_connection_targets_local_server(monkeypatch, no_connection, capsys):
    attempts = []
    conn = FakeConnection()

    def fake_connect(**params):
        attempts.append(params)
        return conn

    monkeypatch.setattr(psycopg2, "connect", fake_connect)

    assert open_connection("hotels", "5432", "clerk", "") is conn
    assert attempts == [
        {"host": "localhost", "port": "5432", "dbname": "hotels", "user": "clerk", "password": ""}
    ]
    assert conn.autocommit is True
    assert get_connection() is conn
    assert "Connection URL: postgresql://localhost:5432/hotels" in capsys.readouterr().out


@pytest.mark.parametrize("user", ["x%zz", "clerk@front", "ops/desk", "a?b", "a#b"])
def test_login_names_are_passed_verbatim(monkeypatch, no_connection, user):
    attempts = []

    def fake_connect(**params):
        attempts.append(params)
        return FakeConnection()

    monkeypatch.setattr(psycopg2, "connect", fake_connect)

    open_connection("front desk", "5432", user, "p%40ss@word")

    assert attempts[0]["user"] == user
    assert attempts[0]["password"] == "p%40ss@word"
    assert attempts[0]["dbname"] == "front desk"


def test_open_connection_propagates_failure(monkeypatch, no_connection):
    def refuse(**params):
        raise psycopg2.OperationalError("connection refused")

    monkeypatch.setattr(psycopg2, "connect", refuse)

    with pytest.raises(psycopg2.OperationalError):
        open_connection("hotels", "5432", "clerk")
    with pytest.raises(RuntimeError):
        get_connection()


def test_close_connection_is_idempotent(fake_db):
    close_connection()
    close_connection()

    assert fake_db.closed
    assert db.connection._conn is None


def test_transaction_commits_on_success(fake_db):
    with transaction():
        pass
    assert (fake_db.commits, fake_db.rollbacks) == (1, 0)


def test_transaction_rolls_back_on_error(fake_db):
    with pytest.raises(ValueError):
        with transaction():
            raise ValueError("boom")
    assert (fake_db.commits, fake_db.rollbacks) == (0, 1)
