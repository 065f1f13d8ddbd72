"""
repositories/room_repo.py
--------------------------
Data access layer for rooms, their occupancy and housekeeping assignments.
"""

from db.statements import execute_query, fetch_one
from models.room import Assignment, Room
from utils.logger import get_logger

logger = get_logger(__name__)


class RoomRepository:
    """Repository for the Room and Assigned tables."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, room: Room) -> Room:
        """
        Insert a room numbered one past the highest room of its hotel.

        Returns:
            The same Room with its `room_no` populated.
        """
        sql = """
            INSERT INTO Room (hotelID, roomNo, roomType)
            VALUES (%s, (SELECT COALESCE(MAX(roomNo), 0) + 1 FROM Room WHERE hotelID = %s), %s)
            RETURNING roomNo;
        """
        row = fetch_one(sql, (room.hotel_id, room.hotel_id, room.room_type))
        room.room_no = row[0]
        logger.info(f"Added room {room.room_no} to hotel {room.hotel_id}")
        return room

    def assign(self, assignment: Assignment) -> Assignment:
        """Insert a housekeeping assignment with the next free asgID."""
        sql = """
            INSERT INTO Assigned (asgID, staffID, hotelID, roomNo)
            VALUES ((SELECT COALESCE(MAX(asgID), 0) + 1 FROM Assigned), %s, %s, %s)
            RETURNING asgID;
        """
        row = fetch_one(sql, (assignment.staff_id, assignment.hotel_id, assignment.room_no))
        assignment.id = row[0]
        logger.info(f"Assigned staff {assignment.staff_id} as #{assignment.id}")
        return assignment

    # ── REPORTS ───────────────────────────────────────────

    def count_available(self, hotel_id: int) -> int:
        """Print the number of rooms of a hotel that appear in no booking."""
        sql = """
            SELECT COUNT(*) AS available
            FROM Room R
            WHERE R.hotelID = %s
              AND NOT EXISTS (
                  SELECT 1 FROM Booking B
                  WHERE B.hotelID = R.hotelID AND B.roomNo = R.roomNo
              );
        """
        return execute_query(sql, (hotel_id,))

    def count_booked(self, hotel_id: int) -> int:
        """Print the number of bookings held for a hotel."""
        sql = "SELECT COUNT(*) AS booked FROM Booking WHERE hotelID = %s;"
        return execute_query(sql, (hotel_id,))
