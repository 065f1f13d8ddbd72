"""
repositories/customer_repo.py
------------------------------
Data access layer for customer records.
"""

from typing import Optional

from db.statements import fetch_one
from models.customer import Customer
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerRepository:
    """Repository for the Customer table."""

    def add(self, customer: Customer) -> Customer:
        """
        Insert a customer with the next free customerID.

        Returns:
            The same Customer with its `id` populated.
        """
        sql = """
            INSERT INTO Customer (customerID, fName, lName, Address, phNo, DOB, gender)
            VALUES ((SELECT COALESCE(MAX(customerID), 0) + 1 FROM Customer), %s, %s, %s, %s, %s, %s)
            RETURNING customerID;
        """
        row = fetch_one(sql, (
            customer.first_name, customer.last_name, customer.address,
            customer.phone, customer.dob, customer.gender,
        ))
        customer.id = row[0]
        logger.info(f"Added customer #{customer.id}")
        return customer

    def find_id_by_name(self, first_name: str, last_name: str) -> Optional[int]:
        """
        Look up a customer by first and last name.

        Names are not unique; the lowest matching customerID wins.

        Returns:
            The customerID or None.
        """
        sql = """
            SELECT customerID FROM Customer
            WHERE fName = %s AND lName = %s
            ORDER BY customerID
            LIMIT 1;
        """
        row = fetch_one(sql, (first_name, last_name))
        return row[0] if row else None
