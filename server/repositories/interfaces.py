# server/repositories/interfaces.py
"""Store ports the services depend on"""
from typing import List, Optional, Protocol

from schemas.company import CompanyRecord
from schemas.employee import EmployeeRecord


class CompanyRepositoryPort(Protocol):
    async def list_all(self) -> List[CompanyRecord]:
        ...

    async def get_by_id(self, company_id: int) -> Optional[CompanyRecord]:
        ...

    async def create(self, company: CompanyRecord) -> int:
        ...

    async def update(self, company: CompanyRecord) -> None:
        ...

    async def delete(self, company_id: int) -> None:
        ...

    async def has_employees(self, company_id: int) -> bool:
        ...


class EmployeeRepositoryPort(Protocol):
    async def list_all(self) -> List[EmployeeRecord]:
        ...

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeRecord]:
        ...

    async def create(self, employee: EmployeeRecord) -> int:
        ...

    async def update(self, employee: EmployeeRecord) -> None:
        ...

    async def delete(self, employee_id: int) -> None:
        ...

    async def list_by_company(self, company_id: int) -> List[EmployeeRecord]:
        ...
