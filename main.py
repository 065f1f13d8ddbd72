"""
main.py
-------
Entry point for the hotel desk console.

Responsibilities:
    - Validate the command line (<dbname> <port> <user>).
    - Open the single database connection.
    - Run the menu loop until the operator exits.
    - Close the connection on the way out.
"""

import sys

import psycopg2

from db.connection import close_connection, open_connection
from handlers.menu import dispatch, read_choice, show_menu
from utils.logger import get_logger

logger = get_logger(__name__)

USAGE = "Usage: hotel-desk <dbname> <port> <user>"

BANNER = (
    "\n\n*******************************************************\n"
    "              Hotel Desk Console                       \n"
    "*******************************************************\n"
)


def run_menu() -> None:
    """Serve commands until the operator picks exit or input ends."""
    keep_on = True
    while keep_on:
        show_menu()
        try:
            choice = read_choice()
        except EOFError:
            print()
            break
        keep_on = dispatch(choice)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, connect and run the console."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3:
        print(USAGE, file=sys.stderr)
        return 1
    dbname, port, user = args

    print(BANNER)

    # ── 1. Database setup ─────────────────────────────────
    print("Connecting to database...")
    try:
        open_connection(dbname, port, user)
    except psycopg2.Error:
        logger.error("Make sure you started postgres on this machine.")
        return 1
    print("Done")

    # ── 2. Command loop ───────────────────────────────────
    try:
        run_menu()
    finally:
        # ── 3. Cleanup on shutdown ────────────────────────
        print("Disconnecting from database...")
        close_connection()
        print("Done\n\nBye !")
    return 0


if __name__ == "__main__":
    sys.exit(main())
