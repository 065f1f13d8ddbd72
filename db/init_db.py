"""
db/init_db.py
-------------
Creates the hotel schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db <dbname> <port> <user>
"""

import sys

from db.connection import transaction
from db.statements import StatementError, execute_update
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Hotels and their staff
CREATE TABLE IF NOT EXISTS Hotel (
    hotelID         INTEGER PRIMARY KEY,
    address         TEXT,
    manager         INTEGER
);

CREATE TABLE IF NOT EXISTS Staff (
    SSN             INTEGER PRIMARY KEY,
    fName           VARCHAR(30) NOT NULL,
    lName           VARCHAR(30) NOT NULL,
    address         TEXT,
    role            VARCHAR(30),
    employerID      INTEGER REFERENCES Hotel(hotelID)
);

-- Rooms are numbered per hotel
CREATE TABLE IF NOT EXISTS Room (
    hotelID         INTEGER NOT NULL REFERENCES Hotel(hotelID),
    roomNo          INTEGER NOT NULL,
    roomType        VARCHAR(30),
    PRIMARY KEY (hotelID, roomNo)
);

CREATE TABLE IF NOT EXISTS Customer (
    customerID      INTEGER PRIMARY KEY,
    fName           VARCHAR(30) NOT NULL,
    lName           VARCHAR(30) NOT NULL,
    Address         TEXT,
    phNo            NUMERIC(10, 0),
    DOB             DATE,
    gender          VARCHAR(10)
);

CREATE TABLE IF NOT EXISTS MaintenanceCompany (
    cmpID           INTEGER PRIMARY KEY,
    name            VARCHAR(30) NOT NULL,
    address         TEXT,
    isCertified     VARCHAR(10)
);

CREATE TABLE IF NOT EXISTS Booking (
    bID             INTEGER PRIMARY KEY,
    customer        INTEGER NOT NULL REFERENCES Customer(customerID),
    hotelID         INTEGER NOT NULL,
    roomNo          INTEGER NOT NULL,
    bookingDate     DATE NOT NULL,
    noOfPeople      INTEGER,
    price           NUMERIC(8, 2),
    FOREIGN KEY (hotelID, roomNo) REFERENCES Room(hotelID, roomNo)
);

CREATE TABLE IF NOT EXISTS Assigned (
    asgID           INTEGER PRIMARY KEY,
    staffID         INTEGER NOT NULL REFERENCES Staff(SSN),
    hotelID         INTEGER NOT NULL,
    roomNo          INTEGER NOT NULL,
    FOREIGN KEY (hotelID, roomNo) REFERENCES Room(hotelID, roomNo)
);

-- mCompany is not a foreign key: repair requests store a placeholder company
CREATE TABLE IF NOT EXISTS Repair (
    rID             INTEGER PRIMARY KEY,
    hotelID         INTEGER NOT NULL,
    roomNo          INTEGER NOT NULL,
    mCompany        INTEGER NOT NULL,
    repairDate      DATE NOT NULL,
    description     TEXT,
    repairType      VARCHAR(30),
    FOREIGN KEY (hotelID, roomNo) REFERENCES Room(hotelID, roomNo)
);

CREATE TABLE IF NOT EXISTS Request (
    reqID           INTEGER PRIMARY KEY,
    managerID       INTEGER NOT NULL REFERENCES Staff(SSN),
    repairID        INTEGER NOT NULL REFERENCES Repair(rID),
    requestDate     DATE NOT NULL,
    description     TEXT
);

-- Indexes for the reporting queries
CREATE INDEX IF NOT EXISTS idx_booking_hotel_date ON Booking(hotelID, bookingDate);
CREATE INDEX IF NOT EXISTS idx_booking_customer ON Booking(customer);
CREATE INDEX IF NOT EXISTS idx_repair_company ON Repair(mCompany);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with transaction():
            execute_update(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except StatementError as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import open_connection, close_connection

    if len(sys.argv) != 4:
        print("Usage: python -m db.init_db <dbname> <port> <user>", file=sys.stderr)
        sys.exit(1)
    open_connection(*sys.argv[1:])
    try:
        create_tables()
    finally:
        close_connection()
    print("Database schema created successfully.")
