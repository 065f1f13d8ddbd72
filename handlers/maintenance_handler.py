"""
handlers/maintenance_handler.py
--------------------------------
Handles maintenance company, repair and repair request commands.
"""

from handlers.prompt import ask, ask_date, ask_int, report_rows
from services.maintenance_service import MaintenanceService
from utils.command_guard import command_boundary

maintenance_service = MaintenanceService()


@command_boundary
def add_company() -> None:
    """Command 3 - register a maintenance company."""
    name = ask("Enter the name of the company")
    address = ask("Enter the address of the company")
    is_certified = ask("Enter TRUE or FALSE if the company is certified")
    print(maintenance_service.add_company(name, address, is_certified))


@command_boundary
def add_repair() -> None:
    """Command 4 - record a repair."""
    hotel_id = ask_int("Enter the hotel ID")
    room_no = ask_int("Enter the room number")
    company_id = ask_int("Enter the maintenance company ID")
    repair_date = ask_date("Enter the repair date")
    description = ask("Enter a description")
    repair_type = ask("Enter the repair type")
    print(maintenance_service.add_repair(
        hotel_id, room_no, company_id, repair_date, description, repair_type
    ))


@command_boundary
def raise_repair_request() -> None:
    """Command 7 - a staff member asks for a room to be repaired."""
    hotel_id = ask_int("Enter the hotel ID")
    staff_id = ask_int("Enter the staff SSN")
    room_no = ask_int("Enter the room number")
    request_date = ask_date("Enter the request date")
    repair, request = maintenance_service.raise_request(
        hotel_id, staff_id, room_no, request_date
    )
    print(f"Request #{request.id} raised for repair #{repair.id}.")


@command_boundary
def company_repairs() -> None:
    """Command 14."""
    name = ask("Enter the company's name")
    report_rows(maintenance_service.list_repairs(name))


@command_boundary
def top_k_companies() -> None:
    """Command 15."""
    k = ask_int("Enter max number of companies to display")
    report_rows(maintenance_service.top_companies(k))


@command_boundary
def room_repairs_per_year() -> None:
    """Command 16."""
    hotel_id = ask_int("Enter the hotel ID")
    room_no = ask_int("Enter the room number")
    report_rows(maintenance_service.repairs_per_year(hotel_id, room_no))
