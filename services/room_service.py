"""
services/room_service.py
-------------------------
Business logic for rooms, occupancy counts and housekeeping assignments.
"""

from models.room import Assignment, Room
from repositories.room_repo import RoomRepository


class RoomService:
    """Adds rooms, assigns housekeeping staff and reports occupancy."""

    def __init__(self):
        self.repo = RoomRepository()

    def add_room(self, hotel_id: int, room_type: str) -> str:
        room = self.repo.add(Room(hotel_id=hotel_id, room_type=room_type))
        return f"Room added: {room}."

    def assign_staff(self, staff_id: int, hotel_id: int, room_no: int) -> str:
        assignment = self.repo.assign(
            Assignment(staff_id=staff_id, hotel_id=hotel_id, room_no=room_no)
        )
        return (
            f"Assignment #{assignment.id}: staff {staff_id} -> "
            f"hotel {hotel_id} room {room_no}."
        )

    def count_available(self, hotel_id: int) -> int:
        return self.repo.count_available(hotel_id)

    def count_booked(self, hotel_id: int) -> int:
        return self.repo.count_booked(hotel_id)
