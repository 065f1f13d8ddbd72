"""
models/room.py
--------------
Domain models for hotel rooms and housekeeping assignments.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Room:
    """
    A room, keyed by (hotel_id, room_no).

    room_no is None until inserted; it is assigned as the highest
    room number of that hotel plus one.
    """
    hotel_id: int
    room_type: str
    room_no: Optional[int] = None

    def __str__(self) -> str:
        return f"Hotel {self.hotel_id} / room {self.room_no} ({self.room_type})"


@dataclass
class Assignment:
    """A housekeeping staff member assigned to a room."""
    staff_id: int
    hotel_id: int
    room_no: int
    id: Optional[int] = None
