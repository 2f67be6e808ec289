from .company_service import CompanyService
from .employee_service import EmployeeService
from .statistics_service import StatisticsService

__all__ = [
    "CompanyService",
    "EmployeeService",
    "StatisticsService",
]
