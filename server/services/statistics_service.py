# server/services/statistics_service.py
"""Dashboard and statistics aggregation"""
from collections import Counter
from datetime import date
from typing import Callable

from core.constants import Position, POSITION_LABELS, RECENT_EMPLOYEES_LIMIT
from schemas.statistics import DashboardSummary, CompanyStatistics, EmployeeStatistics
from services.company_service import CompanyService
from services.employee_service import EmployeeService
from utils.datetime_utils import work_experience_years


class StatisticsService:
    """Read-only aggregates computed from the company and employee lists"""

    def __init__(
        self,
        company_service: CompanyService,
        employee_service: EmployeeService,
        clock: Callable[[], date] = date.today
    ):
        self.company_service = company_service
        self.employee_service = employee_service
        self.clock = clock

    async def dashboard(self) -> DashboardSummary:
        """Totals plus the most recently hired employees"""
        companies = await self.company_service.list_all()
        employees = await self.employee_service.list_all()

        recent = sorted(
            (e for e in employees if e.hire_date is not None),
            key=lambda e: e.hire_date,
            reverse=True
        )[:RECENT_EMPLOYEES_LIMIT]

        return DashboardSummary(
            total_companies=len(companies),
            total_employees=len(employees),
            companies_with_employees=sum(1 for c in companies if c.employee_count > 0),
            recent_employees=recent
        )

    async def company_statistics(self) -> CompanyStatistics:
        companies = await self.company_service.list_all()
        if not companies:
            return CompanyStatistics()

        with_employees = sum(1 for c in companies if c.employee_count > 0)
        total_employees = sum(c.employee_count for c in companies)
        legal_forms = Counter(c.legal_form for c in companies if c.legal_form)

        return CompanyStatistics(
            total_companies=len(companies),
            companies_with_employees=with_employees,
            companies_without_employees=len(companies) - with_employees,
            average_employees_per_company=round(total_employees / len(companies), 2),
            largest_company_size=max(c.employee_count for c in companies),
            legal_form_counts=dict(legal_forms.most_common())
        )

    async def employee_statistics(self) -> EmployeeStatistics:
        employees = await self.employee_service.list_all()
        if not employees:
            return EmployeeStatistics()

        today = self.clock()
        by_position = Counter(
            POSITION_LABELS.get(Position(e.position), "Unknown")
            for e in employees
        )
        hired = [e for e in employees if e.hire_date is not None]
        experience = [work_experience_years(e.hire_date, today) for e in hired]

        return EmployeeStatistics(
            total_employees=len(employees),
            employees_by_position=dict(by_position.most_common()),
            average_work_experience_years=(
                round(sum(experience) / len(experience), 1) if experience else 0.0
            ),
            new_employees_this_year=sum(1 for e in hired if e.hire_date.year == today.year),
            longest_working_employee=min(hired, key=lambda e: e.hire_date, default=None)
        )
