"""
handlers/booking_handler.py
----------------------------
Handles booking creation and the booking reports.
"""

from handlers.prompt import ask, ask_date, ask_decimal, ask_int, report_rows
from services.booking_service import BookingService
from utils.command_guard import command_boundary

booking_service = BookingService()


def _ask_customer_name() -> tuple[str, str]:
    first_name = ask("Enter the customer's first name")
    last_name = ask("Enter the customer's last name")
    return first_name, last_name


@command_boundary
def book_room() -> None:
    """Command 5 - book a room for an existing customer."""
    hotel_id = ask_int("Enter the hotel ID")
    room_no = ask_int("Enter the room number")
    first_name, last_name = _ask_customer_name()
    booking_date = ask_date("Enter the booking date")
    party_size = ask_int("Enter the number of people")
    price = ask_decimal("Enter the price")
    print(booking_service.book_room(
        hotel_id, room_no, first_name, last_name, booking_date, party_size, price
    ))


@command_boundary
def week_bookings() -> None:
    """Command 10 - bookings in the seven days after a start date."""
    hotel_id = ask_int("Enter the hotel ID")
    start = ask_date("Enter the starting date")
    report_rows(booking_service.bookings_for_week(hotel_id, start))


@command_boundary
def top_k_room_prices() -> None:
    """Command 11."""
    start = ask_date("Enter first date")
    end = ask_date("Enter second date")
    k = ask_int("Enter max number of rooms to display")
    report_rows(booking_service.top_k_in_range(start, end, k))


@command_boundary
def top_k_customer_bookings() -> None:
    """Command 12."""
    first_name, last_name = _ask_customer_name()
    k = ask_int("Enter max number of bookings to display")
    report_rows(booking_service.top_k_for_customer(first_name, last_name, k))


@command_boundary
def customer_total_cost() -> None:
    """Command 13 - what a customer spent at one hotel over a date range."""
    first_name, last_name = _ask_customer_name()
    hotel_id = ask_int("Enter the hotel ID")
    start = ask_date("Enter the start date")
    end = ask_date("Enter the end date")
    report_rows(booking_service.total_cost(first_name, last_name, hotel_id, start, end))
