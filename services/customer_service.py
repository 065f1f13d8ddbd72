"""
services/customer_service.py
-----------------------------
Business logic for registering customers and resolving them by name.
"""

from datetime import date

from models.customer import Customer
from repositories.customer_repo import CustomerRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerService:
    """Registers customers and resolves names to customer ids."""

    def __init__(self):
        self.repo = CustomerRepository()

    def add_customer(
        self, first_name: str, last_name: str, address: str,
        phone: str, dob: date, gender: str,
    ) -> str:
        """Insert a customer and return a confirmation line."""
        customer = self.repo.add(Customer(
            first_name=first_name,
            last_name=last_name,
            address=address,
            phone=phone,
            dob=dob,
            gender=gender,
        ))
        return f"Customer {customer} added."

    def resolve_id(self, first_name: str, last_name: str) -> int:
        """
        Map a customer name to its id.

        Raises:
            LookupError: If no customer has that name.
        """
        customer_id = self.repo.find_id_by_name(first_name, last_name)
        if customer_id is None:
            raise LookupError(f"No customer named {first_name} {last_name}.")
        return customer_id
