"""
db/statements.py
----------------
The two primitives every repository goes through, plus a single-row fetch.

    execute_update  - INSERT / UPDATE / DELETE / DDL, no result rows.
    execute_query   - SELECT, printed to the terminal as tab-separated text.
    fetch_one       - lookups and INSERT ... RETURNING.

Statements are always sent with bound parameters.
"""

from typing import Any, Optional, Sequence

import psycopg2

from db.connection import get_connection
from utils.logger import get_logger

logger = get_logger(__name__)

Params = Optional[Sequence[Any]]


class StatementError(Exception):
    """A statement was rejected by the backend or the driver."""

    def __init__(self, message: str):
        super().__init__(f"statement failed: {message}")


def _render(value: Any) -> str:
    return "null" if value is None else str(value)


def execute_update(sql: str, params: Params = None) -> int:
    """
    Execute a statement that returns no rows.

    Returns:
        The number of affected rows as reported by the driver.

    Raises:
        StatementError: On any driver failure. No retry.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.rowcount
    except psycopg2.Error as e:
        logger.debug(f"Update failed: {sql!r} {params!r}")
        raise StatementError(str(e).strip()) from e


def execute_query(sql: str, params: Params = None) -> int:
    """
    Execute a query and print its result set.

    A header line of column names is printed once, before the first row.
    Each row follows on its own line. Columns are tab-separated and NULL
    is shown as ``null``.

    Returns:
        The number of rows printed.

    Raises:
        StatementError: On any driver failure.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            columns = [col[0] for col in cur.description]
            row_count = 0
            for row in cur:
                if row_count == 0:
                    print("\t".join(columns))
                print("\t".join(_render(v) for v in row))
                row_count += 1
            return row_count
    except psycopg2.Error as e:
        logger.debug(f"Query failed: {sql!r} {params!r}")
        raise StatementError(str(e).strip()) from e


def fetch_one(sql: str, params: Params = None) -> Optional[tuple]:
    """
    Execute a statement and return its first row, or None.

    Raises:
        StatementError: On any driver failure.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.fetchone()
    except psycopg2.Error as e:
        logger.debug(f"Fetch failed: {sql!r} {params!r}")
        raise StatementError(str(e).strip()) from e
