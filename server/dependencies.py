# server/dependencies.py
"""Per-request service construction for FastAPI routes"""
from datetime import date
from typing import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.async_database import AsyncSessionLocal
from repositories import CompanyRepository, EmployeeRepository
from services import CompanyService, EmployeeService, StatisticsService


def get_session_factory() -> async_sessionmaker:
    """Session factory for repositories; tests override this."""
    return AsyncSessionLocal


def get_clock() -> Callable[[], date]:
    """Source of "today" for hire-date rules and work experience; tests override this."""
    return date.today


def get_company_service(
    session_factory: async_sessionmaker = Depends(get_session_factory)
) -> CompanyService:
    return CompanyService(CompanyRepository(session_factory))


def get_employee_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    clock: Callable[[], date] = Depends(get_clock)
) -> EmployeeService:
    return EmployeeService(
        EmployeeRepository(session_factory),
        CompanyRepository(session_factory),
        clock=clock
    )


def get_statistics_service(
    company_service: CompanyService = Depends(get_company_service),
    employee_service: EmployeeService = Depends(get_employee_service),
    clock: Callable[[], date] = Depends(get_clock)
) -> StatisticsService:
    return StatisticsService(company_service, employee_service, clock=clock)
