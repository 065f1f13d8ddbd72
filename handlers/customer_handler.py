"""
handlers/customer_handler.py
-----------------------------
Handles the customer registration command.
"""

from handlers.prompt import ask, ask_date
from services.customer_service import CustomerService
from utils.command_guard import command_boundary

customer_service = CustomerService()


@command_boundary
def add_customer() -> None:
    """Command 1 - register a new customer."""
    first_name = ask("Enter the first name")
    last_name = ask("Enter the last name")
    address = ask("Enter the customer's address")
    phone = ask("Enter the phone number")
    dob = ask_date("Enter the date of birth")
    gender = ask("Enter Male/Female/Other for gender")
    print(customer_service.add_customer(first_name, last_name, address, phone, dob, gender))
