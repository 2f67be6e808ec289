from .company_repository import CompanyRepository
from .employee_repository import EmployeeRepository
from .interfaces import CompanyRepositoryPort, EmployeeRepositoryPort

__all__ = [
    "CompanyRepository",
    "EmployeeRepository",
    "CompanyRepositoryPort",
    "EmployeeRepositoryPort",
]
