"""
services/maintenance_service.py
--------------------------------
Business logic for maintenance companies, repairs and repair requests.
"""

from datetime import date

from config import REPAIR_REQUEST_COMPANY_ID, REPAIR_REQUEST_DATE
from db.connection import transaction
from models.maintenance import MaintenanceCompany, Repair, RepairRequest
from repositories.maintenance_repo import MaintenanceRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class MaintenanceService:
    """Manages maintenance companies, repairs and repair requests."""

    def __init__(self):
        self.repo = MaintenanceRepository()

    def add_company(self, name: str, address: str, is_certified: str) -> str:
        """Insert a company, then print the stored row back."""
        company = self.repo.add_company(
            MaintenanceCompany(name=name, address=address, is_certified=is_certified)
        )
        self.repo.show_company(company.id)
        return f"Maintenance company #{company.id} added."

    def add_repair(
        self, hotel_id: int, room_no: int, company_id: int, repair_date: date,
        description: str, repair_type: str,
    ) -> str:
        repair = self.repo.add_repair(Repair(
            hotel_id=hotel_id,
            room_no=room_no,
            company_id=company_id,
            repair_date=repair_date,
            description=description,
            repair_type=repair_type,
        ))
        return f"Repair #{repair.id} added."

    def raise_request(
        self, hotel_id: int, staff_id: int, room_no: int, request_date: date,
        company_id: int = REPAIR_REQUEST_COMPANY_ID,
        repair_date: date | str = REPAIR_REQUEST_DATE,
    ) -> tuple[Repair, RepairRequest]:
        """
        Open a repair for a room and file a request for it.

        The repair carries placeholder company and date values until the
        work is scheduled. Both rows are written in one transaction and the
        request references the repair id returned by the first insert.
        """
        with transaction():
            repair = self.repo.add_repair(Repair(
                hotel_id=hotel_id,
                room_no=room_no,
                company_id=company_id,
                repair_date=repair_date,
            ))
            request = self.repo.add_request(RepairRequest(
                manager_id=staff_id,
                repair_id=repair.id,
                request_date=request_date,
            ))
        logger.info(f"Staff {staff_id} raised request #{request.id} for repair #{repair.id}")
        return repair, request

    def list_repairs(self, company_name: str) -> int:
        """
        Print the repairs made by a company.

        Raises:
            LookupError: If no company has that name.
        """
        company_id = self.repo.find_company_id_by_name(company_name)
        if company_id is None:
            raise LookupError(f"No maintenance company named {company_name}.")
        return self.repo.list_repairs_by_company(company_id)

    def top_companies(self, k: int) -> int:
        return self.repo.top_companies_by_repairs(k)

    def repairs_per_year(self, hotel_id: int, room_no: int) -> int:
        return self.repo.repairs_per_year(hotel_id, room_no)
