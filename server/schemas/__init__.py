from .common import ErrorResponse, ReferenceData, IdResponse
from .company import CompanyRecord, CompanyRef
from .employee import EmployeeRecord
from .statistics import DashboardSummary, CompanyStatistics, EmployeeStatistics

__all__ = [
    "ErrorResponse",
    "ReferenceData",
    "IdResponse",
    "CompanyRecord",
    "CompanyRef",
    "EmployeeRecord",
    "DashboardSummary",
    "CompanyStatistics",
    "EmployeeStatistics",
]
