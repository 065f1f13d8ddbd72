"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
Database name, port and user are passed on the command line.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PASS: str = os.getenv("DB_PASS", "")


# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

# ── Repair requests ───────────────────────────────────────
# Placeholder values stored on the repair row that backs a new request.
REPAIR_REQUEST_COMPANY_ID: int = int(os.getenv("REPAIR_REQUEST_COMPANY_ID", "0"))
REPAIR_REQUEST_DATE: str = os.getenv("REPAIR_REQUEST_DATE", "2000-01-01")
