# server/scripts/init_db.py
"""
Database initialization script - Create tables and optional demo data

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --seed
    python scripts/init_db.py --reset --seed --db-url sqlite:///staff.db

This script will:
1. Test the database connection
2. Create all tables (dropping them first with --reset)
3. Insert a few demo companies and employees with --seed
"""

import sys
import asyncio
import argparse
from datetime import date
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.async_database import (
    create_engine_for, create_session_factory, init_models, drop_models, test_async_connection
)
from core.config import DATABASE_URL
from core.constants import Position
from core.logger import get_logger
from repositories import CompanyRepository, EmployeeRepository
from schemas.company import CompanyRecord
from schemas.employee import EmployeeRecord
from services import CompanyService, EmployeeService
from utils.exceptions import StaffManagerException

logger = get_logger(__name__)

DEMO_COMPANIES = [
    ("Acme", "ООО"),
    ("Северные Технологии", "АО"),
    ("Иванов", "ИП"),
]

# (last, first, middle, position, hire date, index into DEMO_COMPANIES)
DEMO_EMPLOYEES = [
    ("Lee", "Ann", None, Position.DEVELOPER, date(2020, 1, 15), 0),
    ("Smith", "John", "Paul", Position.MANAGER, date(2018, 6, 1), 0),
    ("Петрова", "Мария", "Игоревна", Position.BUSINESS_ANALYST, date(2021, 3, 10), 1),
    ("Сидоров", "Алексей", None, Position.TESTER, date(2023, 9, 4), 1),
]


async def seed_demo_data(company_service: CompanyService, employee_service: EmployeeService) -> int:
    """
    Insert demo rows through the services so every record passes validation.

    Returns:
        Number of rows inserted
    """
    existing = {c.name.casefold(): c.id for c in await company_service.list_all()}
    company_ids = []
    inserted = 0

    for name, legal_form in DEMO_COMPANIES:
        company_id = existing.get(name.casefold())
        if company_id is None:
            company_id = await company_service.create(CompanyRecord(name=name, legal_form=legal_form))
            inserted += 1
            logger.info(f"✓ Created company: {name} ({legal_form})")
        company_ids.append(company_id)

    if await employee_service.list_all():
        logger.info("✓ Employees already present, skipping demo employees")
        return inserted

    for last, first, middle, position, hired, company_index in DEMO_EMPLOYEES:
        await employee_service.create(EmployeeRecord(
            last_name=last,
            first_name=first,
            middle_name=middle,
            position=position,
            hire_date=hired,
            company_id=company_ids[company_index]
        ))
        inserted += 1
        logger.info(f"✓ Created employee: {last} {first}")

    return inserted


async def initialize_database(url: str, reset: bool = False, seed: bool = False) -> bool:
    """
    Initialize database tables and optionally demo data.

    Returns:
        True if successful, False otherwise
    """
    engine = create_engine_for(url)
    try:
        logger.info("1️⃣ Testing database connection...")
        if not await test_async_connection(engine):
            logger.error("❌ Cannot connect to database")
            return False

        if reset:
            logger.info("2️⃣ Dropping existing tables...")
            await drop_models(engine)

        logger.info("3️⃣ Creating database tables...")
        await init_models(engine)

        if seed:
            logger.info("4️⃣ Inserting demo data...")
            session_factory = create_session_factory(engine)
            company_service = CompanyService(CompanyRepository(session_factory))
            employee_service = EmployeeService(
                EmployeeRepository(session_factory),
                CompanyRepository(session_factory)
            )
            try:
                count = await seed_demo_data(company_service, employee_service)
            except StaffManagerException as e:
                logger.error(f"❌ Failed to insert demo data: {e.message}")
                return False
            logger.info(f"✓ Inserted {count} demo rows")

        logger.info("✅ Database initialization complete")
        return True
    finally:
        await engine.dispose()


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Create Staff Manager tables")
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert demo companies and employees"
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables before creating them (deletes all data!)"
    )
    parser.add_argument(
        "--db-url",
        help="Override DATABASE_URL from .env"
    )

    args = parser.parse_args()

    success = asyncio.run(initialize_database(args.db_url or DATABASE_URL, args.reset, args.seed))
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
