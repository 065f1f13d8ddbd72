"""
models/customer.py
------------------
Domain model for hotel customers.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Customer:
    """
    A hotel guest.

    Attributes:
        id: customerID (None until inserted; assigned as max + 1).
        first_name: Given name.
        last_name: Family name.
        address: Postal address.
        phone: Phone number as entered.
        dob: Date of birth.
        gender: Male/Female/Other.
    """
    first_name: str
    last_name: str
    address: str
    phone: str
    dob: date
    gender: str
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"#{self.id} {self.full_name}"
