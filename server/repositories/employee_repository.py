# server/repositories/employee_repository.py
"""Employee persistence over parameterized SQL"""
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import Date, bindparam, text
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.constants import Position
from schemas.company import CompanyRef
from schemas.employee import EmployeeRecord

_SELECT_EMPLOYEES = """
    SELECT e.id, e.first_name, e.middle_name, e.last_name,
           e.position, e.hire_date, e.company_id,
           c.name AS company_name, c.legal_form AS company_legal_form
    FROM employees e
    LEFT JOIN companies c ON c.id = e.company_id
"""


def _employee_query(sql: str):
    # Typed hire_date so every dialect hands back a datetime.date
    return text(sql).columns(hire_date=Date)


def _employee_command(sql: str):
    return text(sql).bindparams(bindparam("hire_date", type_=Date))


LIST_EMPLOYEES = _employee_query(_SELECT_EMPLOYEES + " ORDER BY e.last_name, e.first_name")
GET_EMPLOYEE = _employee_query(_SELECT_EMPLOYEES + " WHERE e.id = :id")
LIST_BY_COMPANY = _employee_query(
    _SELECT_EMPLOYEES + " WHERE e.company_id = :company_id ORDER BY e.last_name, e.first_name"
)
INSERT_EMPLOYEE = _employee_command("""
    INSERT INTO employees (first_name, middle_name, last_name, position, hire_date, company_id)
    VALUES (:first_name, :middle_name, :last_name, :position, :hire_date, :company_id)
    RETURNING id
""")
UPDATE_EMPLOYEE = _employee_command("""
    UPDATE employees
    SET first_name = :first_name,
        middle_name = :middle_name,
        last_name = :last_name,
        position = :position,
        hire_date = :hire_date,
        company_id = :company_id
    WHERE id = :id
""")
DELETE_EMPLOYEE = text("DELETE FROM employees WHERE id = :id")


class EmployeeRepository:
    """Same session-per-call contract as CompanyRepository"""

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def list_all(self) -> List[EmployeeRecord]:
        async with self.session_factory() as session:
            result = await session.execute(LIST_EMPLOYEES)
            return [self._map_row(row) for row in result.mappings()]

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeRecord]:
        async with self.session_factory() as session:
            result = await session.execute(GET_EMPLOYEE, {"id": employee_id})
            row = result.mappings().first()
            return self._map_row(row) if row else None

    async def list_by_company(self, company_id: int) -> List[EmployeeRecord]:
        async with self.session_factory() as session:
            result = await session.execute(LIST_BY_COMPANY, {"company_id": company_id})
            return [self._map_row(row) for row in result.mappings()]

    async def create(self, employee: EmployeeRecord) -> int:
        async with self.session_factory() as session:
            result = await session.execute(INSERT_EMPLOYEE, self._params(employee))
            new_id = int(result.scalar_one())
            await session.commit()
            return new_id

    async def update(self, employee: EmployeeRecord) -> None:
        params = self._params(employee)
        params["id"] = employee.id
        async with self.session_factory() as session:
            await session.execute(UPDATE_EMPLOYEE, params)
            await session.commit()

    async def delete(self, employee_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(DELETE_EMPLOYEE, {"id": employee_id})
            await session.commit()

    @staticmethod
    def _params(employee: EmployeeRecord) -> Dict[str, Any]:
        return {
            "first_name": employee.first_name,
            "middle_name": employee.middle_name,
            "last_name": employee.last_name,
            "position": Position(employee.position).name,
            "hire_date": employee.hire_date,
            "company_id": employee.company_id,
        }

    @staticmethod
    def _map_row(row: Mapping[str, Any]) -> EmployeeRecord:
        company = None
        if row["company_name"] is not None:
            company = CompanyRef(
                id=row["company_id"],
                name=row["company_name"],
                legal_form=row["company_legal_form"]
            )

        return EmployeeRecord(
            id=row["id"],
            first_name=row["first_name"],
            middle_name=row["middle_name"],
            last_name=row["last_name"],
            position=Position.__members__.get(row["position"], Position.UNSET),
            hire_date=row["hire_date"],
            company_id=row["company_id"],
            company=company
        )
