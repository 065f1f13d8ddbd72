"""
models/maintenance.py
---------------------
Domain models for maintenance companies, repairs and repair requests.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class MaintenanceCompany:
    """
    A company that carries out repairs.

    is_certified is stored as entered (e.g. 'TRUE' / 'FALSE').
    """
    name: str
    address: str
    is_certified: str
    id: Optional[int] = None


@dataclass
class Repair:
    """
    A repair of one room by one maintenance company.

    Attributes:
        id: rID (None until inserted).
        hotel_id: Hotel of the repaired room.
        room_no: Room number within the hotel.
        company_id: cmpID of the company doing the work.
        repair_date: Date of the repair.
        description: Free text.
        repair_type: Free text category.
    """
    hotel_id: int
    room_no: int
    company_id: int
    repair_date: date | str
    description: Optional[str] = None
    repair_type: Optional[str] = None
    id: Optional[int] = None


@dataclass
class RepairRequest:
    """A request raised by a staff member for a repair."""
    manager_id: int
    repair_id: int
    request_date: date
    id: Optional[int] = None
