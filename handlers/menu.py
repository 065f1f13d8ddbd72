"""
handlers/menu.py
----------------
The numbered main menu: rendering, reading the operator's choice and
dispatching it to a command handler.
"""

from typing import Callable

from handlers.booking_handler import (
    book_room,
    customer_total_cost,
    top_k_customer_bookings,
    top_k_room_prices,
    week_bookings,
)
from handlers.customer_handler import add_customer
from handlers.maintenance_handler import (
    add_company,
    add_repair,
    company_repairs,
    raise_repair_request,
    room_repairs_per_year,
    top_k_companies,
)
from handlers.room_handler import (
    add_room,
    assign_housekeeping,
    available_rooms,
    booked_rooms,
)

COMMANDS: dict[int, tuple[str, Callable[[], None]]] = {
    1: ("Add new customer", add_customer),
    2: ("Add new room", add_room),
    3: ("Add new maintenance company", add_company),
    4: ("Add new repair", add_repair),
    5: ("Add new Booking", book_room),
    6: ("Assign house cleaning staff to a room", assign_housekeeping),
    7: ("Raise a repair request", raise_repair_request),
    8: ("Get number of available rooms", available_rooms),
    9: ("Get number of booked rooms", booked_rooms),
    10: ("Get hotel bookings for a week", week_bookings),
    11: ("Get top k rooms with highest price for a date range", top_k_room_prices),
    12: ("Get top k highest booking price for a customer", top_k_customer_bookings),
    13: ("Get customer total cost occurred for a given date range", customer_total_cost),
    14: ("List the repairs made by maintenance company", company_repairs),
    15: ("Get top k maintenance companies based on repair count", top_k_companies),
    16: ("Get number of repairs occurred per year for a given hotel room", room_repairs_per_year),
}
EXIT_CHOICE = 17


def show_menu() -> None:
    print("MAIN MENU")
    print("---------")
    for number, (label, _) in COMMANDS.items():
        print(f"{number}. {label}")
    print(f"{EXIT_CHOICE}. < EXIT")


def read_choice() -> int:
    """
    Read the operator's choice.

    Re-prompts until the input is an integer. Range is not checked here.

    Raises:
        EOFError: When input is exhausted.
    """
    while True:
        raw = input("Please make your choice: ")
        try:
            return int(raw.strip())
        except ValueError:
            print("Your input is invalid!")


def dispatch(choice: int) -> bool:
    """
    Run the command for `choice`.

    Returns:
        False when the operator chose to exit, True otherwise.
    """
    if choice == EXIT_CHOICE:
        return False
    command = COMMANDS.get(choice)
    if command is None:
        print("Unrecognized choice!")
    else:
        command[1]()
    return True
