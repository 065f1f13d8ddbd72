"""
handlers/prompt.py
------------------
Operator input helpers shared by all command handlers.
A value that does not parse raises ValueError, which aborts the command.
"""

from datetime import date
from decimal import Decimal, InvalidOperation

from dateutil import parser as date_parser


def ask(label: str) -> str:
    """Prompt for a line of free text."""
    return input(f"{label}: ").strip()


def ask_int(label: str) -> int:
    return int(ask(label))


def ask_decimal(label: str) -> Decimal:
    raw = ask(label)
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"invalid amount: {raw!r}") from None


def ask_date(label: str) -> date:
    """
    Prompt for a date.

    Accepts anything dateutil understands, e.g. ``2024-03-15`` or
    ``03/15/2024`` (month first).
    """
    raw = ask(label)
    try:
        return date_parser.parse(raw).date()
    except (date_parser.ParserError, OverflowError):
        raise ValueError(f"invalid date: {raw!r}") from None


def report_rows(count: int) -> None:
    """Tell the operator when a report came back empty."""
    if count == 0:
        print("No rows.")
