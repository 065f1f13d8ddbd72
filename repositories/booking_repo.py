"""
repositories/booking_repo.py
-----------------------------
Data access layer for room bookings.
All SQL statements related to the `Booking` table live here.
"""

from datetime import date

from db.statements import execute_query, fetch_one
from models.booking import Booking
from utils.logger import get_logger

logger = get_logger(__name__)

_BOOKING_COLUMNS = "bID, customer, hotelID, roomNo, bookingDate, noOfPeople, price"


class BookingRepository:
    """Repository for the Booking table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, booking: Booking) -> Booking:
        """
        Insert a booking with the next free bID.

        Returns:
            The same Booking with its `id` populated.
        """
        sql = """
            INSERT INTO Booking (bID, customer, hotelID, roomNo, bookingDate, noOfPeople, price)
            VALUES ((SELECT COALESCE(MAX(bID), 0) + 1 FROM Booking), %s, %s, %s, %s, %s, %s)
            RETURNING bID;
        """
        row = fetch_one(sql, (
            booking.customer_id, booking.hotel_id, booking.room_no,
            booking.booking_date, booking.party_size, booking.price,
        ))
        booking.id = row[0]
        logger.info(f"Added booking #{booking.id} for customer {booking.customer_id}")
        return booking

    # ── REPORTS ───────────────────────────────────────────

    def list_between(self, hotel_id: int, after: date, until: date) -> int:
        """
        Print a hotel's bookings dated after `after` up to and including `until`.

        Returns:
            Number of rows printed.
        """
        sql = f"""
            SELECT {_BOOKING_COLUMNS} FROM Booking
            WHERE hotelID = %s AND bookingDate > %s AND bookingDate <= %s
            ORDER BY bookingDate, bID;
        """
        return execute_query(sql, (hotel_id, after, until))

    def top_by_price_in_range(self, start: date, end: date, k: int) -> int:
        """Print up to k bookings dated within [start, end], most expensive first."""
        sql = f"""
            SELECT {_BOOKING_COLUMNS} FROM Booking
            WHERE bookingDate >= %s AND bookingDate <= %s
            ORDER BY price DESC
            LIMIT %s;
        """
        return execute_query(sql, (start, end, k))

    def top_for_customer(self, customer_id: int, k: int) -> int:
        """Print up to k of a customer's bookings, most expensive first."""
        sql = """
            SELECT bID, price FROM Booking
            WHERE customer = %s
            ORDER BY price DESC
            LIMIT %s;
        """
        return execute_query(sql, (customer_id, k))

    def total_cost(self, customer_id: int, hotel_id: int, start: date, end: date) -> int:
        """Print the summed price of a customer's bookings at a hotel within [start, end]."""
        sql = """
            SELECT SUM(price) AS total FROM Booking
            WHERE hotelID = %s AND customer = %s
              AND bookingDate >= %s AND bookingDate <= %s;
        """
        return execute_query(sql, (hotel_id, customer_id, start, end))
