"""
handlers/room_handler.py
-------------------------
Handles room, housekeeping and occupancy commands.
"""

from handlers.prompt import ask, ask_int, report_rows
from services.room_service import RoomService
from utils.command_guard import command_boundary

room_service = RoomService()


@command_boundary
def add_room() -> None:
    """Command 2 - add a room; its number follows the hotel's highest room."""
    hotel_id = ask_int("Enter the hotel ID")
    room_type = ask("Enter the room type")
    print(room_service.add_room(hotel_id, room_type))


@command_boundary
def assign_housekeeping() -> None:
    """Command 6 - assign a housekeeping staff member to a room."""
    staff_id = ask_int("Enter the staff SSN")
    hotel_id = ask_int("Enter the hotel ID")
    room_no = ask_int("Enter the room number")
    print(room_service.assign_staff(staff_id, hotel_id, room_no))


@command_boundary
def available_rooms() -> None:
    """Command 8."""
    hotel_id = ask_int("Enter the hotel ID")
    report_rows(room_service.count_available(hotel_id))


@command_boundary
def booked_rooms() -> None:
    """Command 9."""
    hotel_id = ask_int("Enter the hotel ID")
    report_rows(room_service.count_booked(hotel_id))
