# server/routes/api_routes.py
"""JSON API over the company and employee services"""
from typing import List

from fastapi import APIRouter, Depends, Response

from core.constants import LEGAL_FORMS, POSITION_LABELS
from dependencies import get_company_service, get_employee_service, get_statistics_service
from schemas.common import IdResponse, ReferenceData
from schemas.company import CompanyRecord
from schemas.employee import EmployeeRecord
from schemas.statistics import CompanyStatistics, EmployeeStatistics
from services.company_service import CompanyService
from services.employee_service import EmployeeService
from services.statistics_service import StatisticsService
from utils.exceptions import NotFoundError

router = APIRouter(prefix="/api", tags=["API"])


# ==================== REFERENCE DATA ====================

@router.get("/reference", response_model=ReferenceData)
async def reference_data():
    """Legal forms and positions accepted by the validators"""
    return ReferenceData(
        legal_forms=list(LEGAL_FORMS),
        positions={p.value: label for p, label in POSITION_LABELS.items()}
    )


# ==================== COMPANIES ====================

@router.get("/companies", response_model=List[CompanyRecord])
async def api_list_companies(companies: CompanyService = Depends(get_company_service)):
    return await companies.list_all()


@router.post("/companies", response_model=IdResponse, status_code=201)
async def api_create_company(
    company: CompanyRecord,
    companies: CompanyService = Depends(get_company_service)
):
    new_id = await companies.create(company.model_copy(update={"id": 0}))
    return IdResponse(id=new_id)


@router.post("/companies/validate")
async def api_validate_company(
    company: CompanyRecord,
    companies: CompanyService = Depends(get_company_service)
):
    """Run the company rules without saving"""
    is_valid, errors = await companies.validate(company)
    return {"valid": is_valid, "errors": errors}


@router.get("/companies/{company_id}", response_model=CompanyRecord)
async def api_get_company(
    company_id: int,
    companies: CompanyService = Depends(get_company_service)
):
    company = await companies.get_by_id(company_id)
    if company is None:
        raise NotFoundError(f"Company with ID {company_id} not found")
    return company


@router.put("/companies/{company_id}", response_model=CompanyRecord)
async def api_update_company(
    company_id: int,
    company: CompanyRecord,
    companies: CompanyService = Depends(get_company_service)
):
    await companies.update(company.model_copy(update={"id": company_id}))
    return await companies.get_by_id(company_id)


@router.delete("/companies/{company_id}", status_code=204)
async def api_delete_company(
    company_id: int,
    companies: CompanyService = Depends(get_company_service)
):
    if not await companies.delete(company_id):
        raise NotFoundError(f"Company with ID {company_id} not found")
    return Response(status_code=204)


@router.get("/companies/{company_id}/employees", response_model=List[EmployeeRecord])
async def api_company_employees(
    company_id: int,
    employees: EmployeeService = Depends(get_employee_service)
):
    return await employees.list_by_company(company_id)


# ==================== EMPLOYEES ====================

@router.get("/employees", response_model=List[EmployeeRecord])
async def api_list_employees(employees: EmployeeService = Depends(get_employee_service)):
    return await employees.list_all()


@router.post("/employees", response_model=IdResponse, status_code=201)
async def api_create_employee(
    employee: EmployeeRecord,
    employees: EmployeeService = Depends(get_employee_service)
):
    new_id = await employees.create(employee.model_copy(update={"id": 0, "company": None}))
    return IdResponse(id=new_id)


@router.post("/employees/validate")
async def api_validate_employee(
    employee: EmployeeRecord,
    employees: EmployeeService = Depends(get_employee_service)
):
    """Run the employee rules without saving"""
    is_valid, errors = await employees.validate(employee)
    return {"valid": is_valid, "errors": errors}


@router.get("/employees/{employee_id}", response_model=EmployeeRecord)
async def api_get_employee(
    employee_id: int,
    employees: EmployeeService = Depends(get_employee_service)
):
    employee = await employees.get_by_id(employee_id)
    if employee is None:
        raise NotFoundError(f"Employee with ID {employee_id} not found")
    return employee


@router.put("/employees/{employee_id}", response_model=EmployeeRecord)
async def api_update_employee(
    employee_id: int,
    employee: EmployeeRecord,
    employees: EmployeeService = Depends(get_employee_service)
):
    await employees.update(employee.model_copy(update={"id": employee_id, "company": None}))
    return await employees.get_by_id(employee_id)


@router.delete("/employees/{employee_id}", status_code=204)
async def api_delete_employee(
    employee_id: int,
    employees: EmployeeService = Depends(get_employee_service)
):
    if not await employees.delete(employee_id):
        raise NotFoundError(f"Employee with ID {employee_id} not found")
    return Response(status_code=204)


# ==================== STATISTICS ====================

@router.get("/statistics/companies", response_model=CompanyStatistics)
async def api_company_statistics(
    statistics: StatisticsService = Depends(get_statistics_service)
):
    return await statistics.company_statistics()


@router.get("/statistics/employees", response_model=EmployeeStatistics)
async def api_employee_statistics(
    statistics: StatisticsService = Depends(get_statistics_service)
):
    return await statistics.employee_statistics()
