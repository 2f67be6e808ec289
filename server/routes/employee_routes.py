# server/routes/employee_routes.py
"""Employee pages: list, details, create, update, delete"""
from datetime import date
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Form

from core.logger import get_logger
from dependencies import get_clock, get_company_service, get_employee_service
from schemas.employee import EmployeeRecord
from services.company_service import CompanyService
from services.employee_service import EmployeeService
from utils.datetime_utils import parse_form_date, work_experience_years
from utils.exceptions import ValidationError, NotFoundError, ConflictError, StorageError
from views import (
    employee_list_page, employee_details_page, employee_form_page, employee_delete_page,
    not_found_page, render_page
)
from .responses import page, redirect_with_flash

logger = get_logger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])


def _bad_request():
    return page(render_page("Bad request", "<h1>Invalid employee ID</h1>"), 400)


async def _form(
    employee: EmployeeRecord,
    companies: CompanyService,
    status_code: int = 200,
    errors=None,
    error: Optional[str] = None
):
    """Employee form with the company dropdown filled in"""
    try:
        choices = await companies.list_all()
    except StorageError as e:
        logger.error(f"Error loading companies for employee form: {e}")
        choices = []
        error = error or "Could not load the company list"
    return page(employee_form_page(employee, choices, errors=errors, error=error), status_code)


def _record_from_form(
    employee_id: int,
    first_name: str,
    middle_name: str,
    last_name: str,
    position: int,
    hire_date: str,
    company_id: int
) -> EmployeeRecord:
    return EmployeeRecord(
        id=employee_id,
        first_name=first_name,
        middle_name=middle_name or None,
        last_name=last_name,
        position=position,
        hire_date=parse_form_date(hire_date),
        company_id=company_id
    )


@router.get("")
async def list_employees(
    message: Optional[str] = None,
    error: Optional[str] = None,
    employees: EmployeeService = Depends(get_employee_service)
):
    """All employees"""
    try:
        return page(employee_list_page(await employees.list_all(), message, error))
    except StorageError as e:
        logger.error(f"Error loading employees: {e}")
        return page(employee_list_page([], error=f"Could not load employees: {e.message}"), 500)


@router.get("/create")
async def create_employee_form(
    companies: CompanyService = Depends(get_company_service),
    clock: Callable[[], date] = Depends(get_clock)
):
    return await _form(EmployeeRecord(hire_date=clock()), companies)


@router.post("/create")
async def create_employee(
    first_name: str = Form(""),
    middle_name: str = Form(""),
    last_name: str = Form(""),
    position: int = Form(0),
    hire_date: str = Form(""),
    company_id: int = Form(0),
    employees: EmployeeService = Depends(get_employee_service),
    companies: CompanyService = Depends(get_company_service)
):
    """Create an employee from the submitted form"""
    employee = _record_from_form(
        0, first_name, middle_name, last_name, position, hire_date, company_id
    )
    try:
        await employees.create(employee)
    except ValidationError as e:
        return await _form(employee, companies, 422, errors=e.errors)
    except ConflictError as e:
        return await _form(employee, companies, 409, error=e.message)
    except StorageError as e:
        logger.error(f"Error creating employee: {e}")
        return await _form(
            employee, companies, 500,
            error="Could not create the employee. Please try again later."
        )

    return redirect_with_flash("/employees", message="Employee created")


@router.get("/{employee_id}")
async def employee_details(
    employee_id: int,
    employees: EmployeeService = Depends(get_employee_service)
):
    """Employee details with work experience"""
    if employee_id <= 0:
        return _bad_request()

    try:
        employee = await employees.get_by_id(employee_id)
    except StorageError as e:
        logger.error(f"Error loading employee {employee_id}: {e}")
        return redirect_with_flash("/employees", error=e.message)

    if employee is None:
        return page(not_found_page("Employee"), 404)

    experience = work_experience_years(employee.hire_date, employees.clock())
    return page(employee_details_page(employee, experience))


@router.get("/{employee_id}/update")
async def update_employee_form(
    employee_id: int,
    employees: EmployeeService = Depends(get_employee_service),
    companies: CompanyService = Depends(get_company_service)
):
    if employee_id <= 0:
        return _bad_request()

    try:
        employee = await employees.get_by_id(employee_id)
    except StorageError as e:
        logger.error(f"Error loading employee {employee_id}: {e}")
        return redirect_with_flash("/employees", error=e.message)

    if employee is None:
        return page(not_found_page("Employee"), 404)
    return await _form(employee, companies)


@router.post("/{employee_id}/update")
async def update_employee(
    employee_id: int,
    id: int = Form(...),
    first_name: str = Form(""),
    middle_name: str = Form(""),
    last_name: str = Form(""),
    position: int = Form(0),
    hire_date: str = Form(""),
    company_id: int = Form(0),
    employees: EmployeeService = Depends(get_employee_service),
    companies: CompanyService = Depends(get_company_service)
):
    """Update an employee from the submitted form"""
    if employee_id != id:
        return _bad_request()

    employee = _record_from_form(
        employee_id, first_name, middle_name, last_name, position, hire_date, company_id
    )
    try:
        await employees.update(employee)
    except NotFoundError:
        return page(not_found_page("Employee"), 404)
    except ValidationError as e:
        return await _form(employee, companies, 422, errors=e.errors)
    except ConflictError as e:
        return await _form(employee, companies, 409, error=e.message)
    except StorageError as e:
        logger.error(f"Error updating employee {employee_id}: {e}")
        return await _form(
            employee, companies, 500,
            error="Could not update the employee. Please try again later."
        )

    return redirect_with_flash("/employees", message="Employee updated")


@router.get("/{employee_id}/delete")
async def delete_employee_confirm(
    employee_id: int,
    employees: EmployeeService = Depends(get_employee_service)
):
    if employee_id <= 0:
        return _bad_request()

    try:
        employee = await employees.get_by_id(employee_id)
    except StorageError as e:
        logger.error(f"Error loading employee {employee_id}: {e}")
        return redirect_with_flash("/employees", error=e.message)

    if employee is None:
        return page(not_found_page("Employee"), 404)
    return page(employee_delete_page(employee))


@router.post("/{employee_id}/delete")
async def delete_employee(
    employee_id: int,
    employees: EmployeeService = Depends(get_employee_service)
):
    try:
        deleted = await employees.delete(employee_id)
    except StorageError as e:
        logger.error(f"Error deleting employee {employee_id}: {e}")
        return redirect_with_flash("/employees", error=e.message)

    if not deleted:
        return redirect_with_flash("/employees", error="Employee not found")
    return redirect_with_flash("/employees", message="Employee deleted")
