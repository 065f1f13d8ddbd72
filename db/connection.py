"""
db/connection.py
----------------
Manages the one PostgreSQL connection used for the whole session.
Opened at startup, closed at shutdown. No pooling, no reconnection.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2

from config import DB_HOST, DB_PASS
from utils.logger import get_logger

logger = get_logger(__name__)

_conn = None


def open_connection(dbname: str, port: int | str, user: str, password: str = DB_PASS):
    """
    Open the session connection.

    Args:
        dbname: Database name.
        port: Server port on localhost.
        user: Login role.
        password: Login password (blank unless DB_PASS is set).

    Returns:
        The psycopg2 connection object.

    Raises:
        psycopg2.Error: If the database is unreachable or rejects the login parameters.
    """
    global _conn
    if _conn is not None:
        return _conn
    print(f"Connection URL: postgresql://{DB_HOST}:{port}/{dbname}\n")
    try:
        _conn = psycopg2.connect(
            host=DB_HOST, port=port, dbname=dbname, user=user, password=password
        )
    except psycopg2.Error as e:
        logger.error(f"Unable to connect to database: {e}")
        raise
    # Every statement stands alone unless grouped by transaction().
    _conn.autocommit = True
    logger.info(f"Connected to {dbname} on port {port} as {user}.")
    return _conn


def get_connection():
    """
    Get the open connection.

    Raises:
        RuntimeError: If open_connection() has not been called.
    """
    if _conn is None:
        raise RuntimeError("Database connection not open. Call open_connection() first.")
    return _conn


@contextmanager
def transaction() -> Iterator:
    """
    Run the enclosed statements as one atomic unit.

    Commits when the block exits normally, rolls back if it raises.
    """
    conn = get_connection()
    with conn:
        yield conn


def close_connection() -> None:
    """Close the connection if it is open."""
    global _conn
    if _conn is not None:
        _conn.close()
        _conn = None
        logger.info("Database connection closed.")
