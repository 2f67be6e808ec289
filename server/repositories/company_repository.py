# server/repositories/company_repository.py
"""Company persistence over parameterized SQL"""
from typing import Any, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import async_sessionmaker

from schemas.company import CompanyRecord

_SELECT_COMPANIES = """
    SELECT c.id, c.name, c.legal_form,
           COUNT(e.id) AS employee_count
    FROM companies c
    LEFT JOIN employees e ON e.company_id = c.id
"""
_GROUP_COMPANIES = " GROUP BY c.id, c.name, c.legal_form"

LIST_COMPANIES = text(_SELECT_COMPANIES + _GROUP_COMPANIES + " ORDER BY c.name")
GET_COMPANY = text(_SELECT_COMPANIES + " WHERE c.id = :id" + _GROUP_COMPANIES)
INSERT_COMPANY = text("""
    INSERT INTO companies (name, legal_form)
    VALUES (:name, :legal_form)
    RETURNING id
""")
UPDATE_COMPANY = text("""
    UPDATE companies
    SET name = :name, legal_form = :legal_form
    WHERE id = :id
""")
DELETE_COMPANY = text("DELETE FROM companies WHERE id = :id")
COUNT_EMPLOYEES = text("SELECT COUNT(*) FROM employees WHERE company_id = :company_id")


class CompanyRepository:
    """
    Each call runs in its own session and commits on its own.

    No validation happens here; store errors propagate to the caller.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def list_all(self) -> List[CompanyRecord]:
        async with self.session_factory() as session:
            result = await session.execute(LIST_COMPANIES)
            return [self._map_row(row) for row in result.mappings()]

    async def get_by_id(self, company_id: int) -> Optional[CompanyRecord]:
        async with self.session_factory() as session:
            result = await session.execute(GET_COMPANY, {"id": company_id})
            row = result.mappings().first()
            return self._map_row(row) if row else None

    async def create(self, company: CompanyRecord) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                INSERT_COMPANY,
                {"name": company.name, "legal_form": company.legal_form}
            )
            new_id = int(result.scalar_one())
            await session.commit()
            return new_id

    async def update(self, company: CompanyRecord) -> None:
        async with self.session_factory() as session:
            await session.execute(
                UPDATE_COMPANY,
                {"id": company.id, "name": company.name, "legal_form": company.legal_form}
            )
            await session.commit()

    async def delete(self, company_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(DELETE_COMPANY, {"id": company_id})
            await session.commit()

    async def has_employees(self, company_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(COUNT_EMPLOYEES, {"company_id": company_id})
            return (result.scalar_one() or 0) > 0

    @staticmethod
    def _map_row(row: Mapping[str, Any]) -> CompanyRecord:
        return CompanyRecord(
            id=row["id"],
            name=row["name"],
            legal_form=row["legal_form"],
            employee_count=row["employee_count"] or 0
        )
