# server/tests/test_repositories.py
"""SQL repositories and the constraints the store enforces on its own"""
from datetime import date

import pytest
from sqlalchemy import Text
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError
from sqlalchemy.schema import CreateTable

from core.constants import Position
from models import Employee
from schemas.company import CompanyRecord
from schemas.employee import EmployeeRecord


def _company(name="Acme", legal_form="ООО"):
    return CompanyRecord(name=name, legal_form=legal_form)


def _employee(company_id, **overrides):
    fields = dict(
        first_name="Ann",
        last_name="Lee",
        position=Position.TESTER,
        hire_date=date(2021, 2, 3),
        company_id=company_id,
    )
    fields.update(overrides)
    return EmployeeRecord(**fields)


class TestCompanyRepository:

    @pytest.mark.asyncio
    async def test_create_returns_new_ids(self, company_repository):
        first = await company_repository.create(_company("Acme"))
        second = await company_repository.create(_company("Mira"))

        assert first > 0
        assert second != first

    @pytest.mark.asyncio
    async def test_employee_counts(self, company_repository, employee_repository):
        acme_id = await company_repository.create(_company("Acme"))
        await company_repository.create(_company("Mira"))
        await employee_repository.create(_employee(acme_id))
        await employee_repository.create(_employee(acme_id, first_name="Bob"))

        counts = {c.name: c.employee_count for c in await company_repository.list_all()}
        assert counts == {"Acme": 2, "Mira": 0}
        assert await company_repository.has_employees(acme_id) is True

    @pytest.mark.asyncio
    async def test_has_employees_for_empty_company(self, company_repository):
        company_id = await company_repository.create(_company())
        assert await company_repository.has_employees(company_id) is False

    @pytest.mark.asyncio
    async def test_unique_name_index_ignores_ascii_case(self, company_repository):
        await company_repository.create(_company("Acme"))

        with pytest.raises(IntegrityError):
            await company_repository.create(_company("ACME"))

    @pytest.mark.asyncio
    async def test_delete_with_employees_is_refused_by_store(self, company_repository, employee_repository):
        company_id = await company_repository.create(_company())
        await employee_repository.create(_employee(company_id))

        with pytest.raises(IntegrityError):
            await company_repository.delete(company_id)
        assert await company_repository.get_by_id(company_id) is not None

    @pytest.mark.asyncio
    async def test_update_and_delete(self, company_repository):
        company_id = await company_repository.create(_company())

        await company_repository.update(CompanyRecord(id=company_id, name="Acme Group", legal_form="АО"))
        company = await company_repository.get_by_id(company_id)
        assert (company.name, company.legal_form) == ("Acme Group", "АО")

        await company_repository.delete(company_id)
        assert await company_repository.get_by_id(company_id) is None


class TestEmployeeRepository:

    @pytest.mark.asyncio
    async def test_round_trip_with_company(self, company_repository, employee_repository):
        company_id = await company_repository.create(_company())
        employee_id = await employee_repository.create(_employee(company_id, middle_name="Q"))

        employee = await employee_repository.get_by_id(employee_id)
        assert employee.position == Position.TESTER
        assert employee.hire_date == date(2021, 2, 3)
        assert employee.middle_name == "Q"
        assert employee.company.id == company_id
        assert employee.company.name == "Acme"

    @pytest.mark.asyncio
    async def test_unknown_company_is_refused_by_store(self, employee_repository):
        with pytest.raises(IntegrityError):
            await employee_repository.create(_employee(999))

    @pytest.mark.asyncio
    async def test_list_by_company(self, company_repository, employee_repository):
        acme_id = await company_repository.create(_company("Acme"))
        mira_id = await company_repository.create(_company("Mira"))
        await employee_repository.create(_employee(acme_id, last_name="Zorin"))
        await employee_repository.create(_employee(acme_id, last_name="Adams"))
        await employee_repository.create(_employee(mira_id))

        staff = await employee_repository.list_by_company(acme_id)
        assert [e.last_name for e in staff] == ["Adams", "Zorin"]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, company_repository, employee_repository):
        company_id = await company_repository.create(_company())
        employee_id = await employee_repository.create(_employee(company_id))

        await employee_repository.update(
            _employee(company_id, id=employee_id, position=Position.MANAGER, hire_date=date(2019, 1, 1))
        )
        employee = await employee_repository.get_by_id(employee_id)
        assert employee.position == Position.MANAGER
        assert employee.hire_date == date(2019, 1, 1)

        await employee_repository.delete(employee_id)
        assert await employee_repository.get_by_id(employee_id) is None


class TestEmployeeSchema:

    def test_middle_name_has_no_length_cap(self):
        column = Employee.__table__.c.middle_name
        assert isinstance(column.type, Text)

        ddl = str(CreateTable(Employee.__table__).compile(dialect=postgresql.dialect()))
        assert "middle_name TEXT" in ddl

    @pytest.mark.asyncio
    async def test_long_middle_name_round_trip(self, company_repository, employee_repository):
        company_id = await company_repository.create(_company())
        middle_name = "M" * 160

        employee_id = await employee_repository.create(_employee(company_id, middle_name=middle_name))

        assert (await employee_repository.get_by_id(employee_id)).middle_name == middle_name
