"""
repositories/maintenance_repo.py
---------------------------------
Data access layer for maintenance companies, repairs and repair requests.
"""

from typing import Optional

from db.statements import execute_query, fetch_one
from models.maintenance import MaintenanceCompany, Repair, RepairRequest
from utils.logger import get_logger

logger = get_logger(__name__)


class MaintenanceRepository:
    """Repository for the MaintenanceCompany, Repair and Request tables."""

    # ── COMPANIES ─────────────────────────────────────────

    def add_company(self, company: MaintenanceCompany) -> MaintenanceCompany:
        """Insert a maintenance company with the next free cmpID."""
        sql = """
            INSERT INTO MaintenanceCompany (cmpID, name, address, isCertified)
            VALUES ((SELECT COALESCE(MAX(cmpID), 0) + 1 FROM MaintenanceCompany), %s, %s, %s)
            RETURNING cmpID;
        """
        row = fetch_one(sql, (company.name, company.address, company.is_certified))
        company.id = row[0]
        logger.info(f"Added maintenance company #{company.id}")
        return company

    def show_company(self, company_id: int) -> int:
        """Print the stored name of a company."""
        sql = "SELECT name FROM MaintenanceCompany WHERE cmpID = %s;"
        return execute_query(sql, (company_id,))

    def find_company_id_by_name(self, name: str) -> Optional[int]:
        """
        Look up a company by name.

        Returns:
            The lowest matching cmpID, or None.
        """
        sql = "SELECT cmpID FROM MaintenanceCompany WHERE name = %s ORDER BY cmpID LIMIT 1;"
        row = fetch_one(sql, (name,))
        return row[0] if row else None

    # ── REPAIRS & REQUESTS ────────────────────────────────

    def add_repair(self, repair: Repair) -> Repair:
        """Insert a repair with the next free rID."""
        sql = """
            INSERT INTO Repair (rID, hotelID, roomNo, mCompany, repairDate, description, repairType)
            VALUES ((SELECT COALESCE(MAX(rID), 0) + 1 FROM Repair), %s, %s, %s, %s, %s, %s)
            RETURNING rID;
        """
        row = fetch_one(sql, (
            repair.hotel_id, repair.room_no, repair.company_id,
            repair.repair_date, repair.description, repair.repair_type,
        ))
        repair.id = row[0]
        logger.info(f"Added repair #{repair.id}")
        return repair

    def add_request(self, request: RepairRequest) -> RepairRequest:
        """Insert a repair request with the next free reqID."""
        sql = """
            INSERT INTO Request (reqID, managerID, repairID, requestDate)
            VALUES ((SELECT COALESCE(MAX(reqID), 0) + 1 FROM Request), %s, %s, %s)
            RETURNING reqID;
        """
        row = fetch_one(sql, (request.manager_id, request.repair_id, request.request_date))
        request.id = row[0]
        logger.info(f"Added request #{request.id} for repair #{request.repair_id}")
        return request

    # ── REPORTS ───────────────────────────────────────────

    def list_repairs_by_company(self, company_id: int) -> int:
        """Print every repair done by a company, highest hotel id first."""
        sql = """
            SELECT rID, hotelID, roomNo, repairType FROM Repair
            WHERE mCompany = %s
            ORDER BY hotelID DESC;
        """
        return execute_query(sql, (company_id,))

    def top_companies_by_repairs(self, k: int) -> int:
        """Print up to k company names with the most repairs."""
        sql = """
            SELECT C.name, COUNT(R.rID) AS repairs
            FROM MaintenanceCompany C
            JOIN Repair R ON R.mCompany = C.cmpID
            GROUP BY C.cmpID, C.name
            ORDER BY repairs DESC
            LIMIT %s;
        """
        return execute_query(sql, (k,))

    def repairs_per_year(self, hotel_id: int, room_no: int) -> int:
        """Print the number of repairs of one room for each year."""
        sql = """
            SELECT EXTRACT(YEAR FROM repairDate) AS year, COUNT(rID) AS repairs
            FROM Repair
            WHERE hotelID = %s AND roomNo = %s
            GROUP BY EXTRACT(YEAR FROM repairDate)
            ORDER BY year;
        """
        return execute_query(sql, (hotel_id, room_no))
