from pydantic import BaseModel
from typing import Dict, List, Optional

from .employee import EmployeeRecord


class DashboardSummary(BaseModel):
    total_companies: int = 0
    total_employees: int = 0
    companies_with_employees: int = 0
    recent_employees: List[EmployeeRecord] = []


class CompanyStatistics(BaseModel):
    total_companies: int = 0
    companies_with_employees: int = 0
    companies_without_employees: int = 0
    average_employees_per_company: float = 0.0
    largest_company_size: int = 0
    # Most common first
    legal_form_counts: Dict[str, int] = {}


class EmployeeStatistics(BaseModel):
    total_employees: int = 0
    employees_by_position: Dict[str, int] = {}
    average_work_experience_years: float = 0.0
    new_employees_this_year: int = 0
    longest_working_employee: Optional[EmployeeRecord] = None
