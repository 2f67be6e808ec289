# server/tests/test_statistics_service.py
"""Dashboard and statistics aggregation over mocked services"""
from datetime import date
from unittest.mock import AsyncMock

import pytest

from core.constants import Position
from schemas.company import CompanyRecord
from schemas.employee import EmployeeRecord
from services.statistics_service import StatisticsService

TODAY = date(2024, 6, 1)


def _employee(employee_id, position, hire_date, company_id=1):
    return EmployeeRecord(
        id=employee_id,
        first_name="Ann",
        last_name=f"Lee{employee_id}",
        position=position,
        hire_date=hire_date,
        company_id=company_id,
    )


@pytest.fixture
def companies():
    service = AsyncMock()
    service.list_all.return_value = [
        CompanyRecord(id=1, name="Acme", legal_form="ООО", employee_count=4),
        CompanyRecord(id=2, name="Mira", legal_form="ООО", employee_count=2),
        CompanyRecord(id=3, name="Zeta", legal_form="АО", employee_count=0),
    ]
    return service


@pytest.fixture
def employees():
    service = AsyncMock()
    service.list_all.return_value = [
        _employee(1, Position.DEVELOPER, date(2014, 6, 1)),
        _employee(2, Position.DEVELOPER, date(2024, 1, 10)),
        _employee(3, Position.MANAGER, date(2022, 6, 1)),
        _employee(4, Position.TESTER, date(2024, 5, 20), company_id=2),
        _employee(5, Position.TESTER, date(2020, 6, 1), company_id=2),
        _employee(6, Position.DEVELOPER, date(2023, 6, 2)),
    ]
    return service


@pytest.fixture
def statistics(companies, employees):
    return StatisticsService(companies, employees, clock=lambda: TODAY)


class TestDashboard:

    @pytest.mark.asyncio
    async def test_totals(self, statistics):
        summary = await statistics.dashboard()

        assert summary.total_companies == 3
        assert summary.total_employees == 6
        assert summary.companies_with_employees == 2

    @pytest.mark.asyncio
    async def test_recent_employees_newest_first(self, statistics):
        summary = await statistics.dashboard()

        assert [e.id for e in summary.recent_employees] == [4, 2, 6, 3, 5]

    @pytest.mark.asyncio
    async def test_empty_store(self):
        empty = AsyncMock()
        empty.list_all.return_value = []

        summary = await StatisticsService(empty, empty).dashboard()
        assert summary.total_companies == 0
        assert summary.recent_employees == []


class TestCompanyStatistics:

    @pytest.mark.asyncio
    async def test_aggregates(self, statistics):
        stats = await statistics.company_statistics()

        assert stats.total_companies == 3
        assert stats.companies_with_employees == 2
        assert stats.companies_without_employees == 1
        assert stats.average_employees_per_company == 2.0
        assert stats.largest_company_size == 4
        assert stats.legal_form_counts == {"ООО": 2, "АО": 1}
        assert list(stats.legal_form_counts) == ["ООО", "АО"]

    @pytest.mark.asyncio
    async def test_no_companies(self):
        empty = AsyncMock()
        empty.list_all.return_value = []

        stats = await StatisticsService(empty, AsyncMock()).company_statistics()
        assert stats.total_companies == 0
        assert stats.average_employees_per_company == 0.0


class TestEmployeeStatistics:

    @pytest.mark.asyncio
    async def test_aggregates(self, statistics):
        stats = await statistics.employee_statistics()

        assert stats.total_employees == 6
        assert stats.employees_by_position == {"Developer": 3, "Tester": 2, "Manager": 1}
        assert stats.new_employees_this_year == 2
        assert stats.longest_working_employee.id == 1

    @pytest.mark.asyncio
    async def test_average_experience(self, statistics):
        stats = await statistics.employee_statistics()

        assert 0 < stats.average_work_experience_years < 10
        assert stats.average_work_experience_years == round(stats.average_work_experience_years, 1)

    @pytest.mark.asyncio
    async def test_no_employees(self):
        empty = AsyncMock()
        empty.list_all.return_value = []

        stats = await StatisticsService(AsyncMock(), empty).employee_statistics()
        assert stats.total_employees == 0
        assert stats.longest_working_employee is None
