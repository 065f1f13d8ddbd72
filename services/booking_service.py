"""
services/booking_service.py
----------------------------
Business logic for booking rooms and the booking reports.
"""

from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from models.booking import Booking
from repositories.booking_repo import BookingRepository
from services.customer_service import CustomerService
from utils.logger import get_logger

logger = get_logger(__name__)

WEEK = relativedelta(days=7)


class BookingService:
    """
    Handles all business logic for bookings.

    Responsibilities:
        - Resolve the booking customer by name and store the booking.
        - Weekly listing, top-k by price and total cost reports.
    """

    def __init__(self, customers: CustomerService | None = None):
        self.repo = BookingRepository()
        self.customers = customers or CustomerService()

    def book_room(
        self, hotel_id: int, room_no: int, first_name: str, last_name: str,
        booking_date: date, party_size: int, price: Decimal,
    ) -> str:
        """
        Book a room for a customer identified by name.

        Raises:
            LookupError: If the customer does not exist.
        """
        customer_id = self.customers.resolve_id(first_name, last_name)
        booking = self.repo.add(Booking(
            customer_id=customer_id,
            hotel_id=hotel_id,
            room_no=room_no,
            booking_date=booking_date,
            party_size=party_size,
            price=price,
        ))
        return f"{booking} added."

    def bookings_for_week(self, hotel_id: int, start: date) -> int:
        """
        Print a hotel's bookings for the week following `start`.

        The window is (start, start + 7 days]: the start date itself is
        excluded, the seventh day after it included.
        """
        return self.repo.list_between(hotel_id, start, start + WEEK)

    def top_k_in_range(self, start: date, end: date, k: int) -> int:
        return self.repo.top_by_price_in_range(start, end, k)

    def top_k_for_customer(self, first_name: str, last_name: str, k: int) -> int:
        customer_id = self.customers.resolve_id(first_name, last_name)
        return self.repo.top_for_customer(customer_id, k)

    def total_cost(
        self, first_name: str, last_name: str, hotel_id: int, start: date, end: date
    ) -> int:
        customer_id = self.customers.resolve_id(first_name, last_name)
        return self.repo.total_cost(customer_id, hotel_id, start, end)
