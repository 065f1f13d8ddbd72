"""
models/booking.py
-----------------
Domain model for room bookings.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class Booking:
    """
    A booking of one room by one customer.

    Attributes:
        id: bID (None until inserted).
        customer_id: customerID of the booking customer.
        hotel_id: Hotel of the booked room.
        room_no: Room number within the hotel.
        booking_date: Date the room is booked for.
        party_size: Number of people.
        price: Price of the booking.
    """
    customer_id: int
    hotel_id: int
    room_no: int
    booking_date: date
    party_size: int
    price: Decimal
    id: Optional[int] = None

    def __str__(self) -> str:
        return (
            f"Booking #{self.id}: hotel {self.hotel_id} room {self.room_no} "
            f"on {self.booking_date} for {self.party_size} ({self.price})"
        )
