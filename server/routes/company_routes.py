# server/routes/company_routes.py
"""Company pages: list, details, create, update, delete"""
from typing import Optional

from fastapi import APIRouter, Depends, Form

from core.logger import get_logger
from dependencies import get_company_service, get_employee_service
from schemas.company import CompanyRecord
from services.company_service import CompanyService
from services.employee_service import EmployeeService
from utils.exceptions import ValidationError, NotFoundError, ConflictError, StorageError
from views import (
    company_list_page, company_details_page, company_form_page, company_delete_page,
    not_found_page, render_page
)
from .responses import page, redirect_with_flash

logger = get_logger(__name__)

router = APIRouter(prefix="/companies", tags=["Companies"])


def _bad_request():
    return page(render_page("Bad request", "<h1>Invalid company ID</h1>"), 400)


@router.get("")
async def list_companies(
    message: Optional[str] = None,
    error: Optional[str] = None,
    companies: CompanyService = Depends(get_company_service)
):
    """All companies"""
    try:
        return page(company_list_page(await companies.list_all(), message, error))
    except StorageError as e:
        logger.error(f"Error loading companies: {e}")
        return page(company_list_page([], error=f"Could not load companies: {e.message}"), 500)


@router.get("/create")
async def create_company_form():
    return page(company_form_page(CompanyRecord()))


@router.post("/create")
async def create_company(
    name: str = Form(""),
    legal_form: str = Form(""),
    companies: CompanyService = Depends(get_company_service)
):
    """Create a company from the submitted form"""
    company = CompanyRecord(name=name, legal_form=legal_form)
    try:
        await companies.create(company)
    except ValidationError as e:
        return page(company_form_page(company, errors=e.errors), 422)
    except ConflictError as e:
        return page(company_form_page(company, error=e.message), 409)
    except StorageError as e:
        logger.error(f"Error creating company: {e}")
        return page(company_form_page(
            company, error="Could not create the company. Please try again later."
        ), 500)

    return redirect_with_flash("/companies", message=f"Company '{name.strip()}' created")


@router.get("/{company_id}")
async def company_details(
    company_id: int,
    companies: CompanyService = Depends(get_company_service),
    employees: EmployeeService = Depends(get_employee_service)
):
    """Company details with its employees"""
    if company_id <= 0:
        return _bad_request()

    try:
        company = await companies.get_by_id(company_id)
        if company is None:
            return page(not_found_page("Company"), 404)
        staff = await employees.list_by_company(company_id)
    except StorageError as e:
        logger.error(f"Error loading company {company_id}: {e}")
        return redirect_with_flash("/companies", error=e.message)

    return page(company_details_page(company, staff))


@router.get("/{company_id}/update")
async def update_company_form(
    company_id: int,
    companies: CompanyService = Depends(get_company_service)
):
    if company_id <= 0:
        return _bad_request()

    try:
        company = await companies.get_by_id(company_id)
    except StorageError as e:
        logger.error(f"Error loading company {company_id}: {e}")
        return redirect_with_flash("/companies", error=e.message)

    if company is None:
        return page(not_found_page("Company"), 404)
    return page(company_form_page(company))


@router.post("/{company_id}/update")
async def update_company(
    company_id: int,
    id: int = Form(...),
    name: str = Form(""),
    legal_form: str = Form(""),
    companies: CompanyService = Depends(get_company_service)
):
    """Update a company from the submitted form"""
    if company_id != id:
        return _bad_request()

    company = CompanyRecord(id=company_id, name=name, legal_form=legal_form)
    try:
        await companies.update(company)
    except NotFoundError:
        return page(not_found_page("Company"), 404)
    except ValidationError as e:
        return page(company_form_page(company, errors=e.errors), 422)
    except ConflictError as e:
        return page(company_form_page(company, error=e.message), 409)
    except StorageError as e:
        logger.error(f"Error updating company {company_id}: {e}")
        return page(company_form_page(
            company, error="Could not update the company. Please try again later."
        ), 500)

    return redirect_with_flash("/companies", message=f"Company '{name.strip()}' updated")


@router.get("/{company_id}/delete")
async def delete_company_confirm(
    company_id: int,
    companies: CompanyService = Depends(get_company_service)
):
    if company_id <= 0:
        return _bad_request()

    try:
        company = await companies.get_by_id(company_id)
    except StorageError as e:
        logger.error(f"Error loading company {company_id}: {e}")
        return redirect_with_flash("/companies", error=e.message)

    if company is None:
        return page(not_found_page("Company"), 404)
    return page(company_delete_page(company))


@router.post("/{company_id}/delete")
async def delete_company(
    company_id: int,
    companies: CompanyService = Depends(get_company_service)
):
    """Delete a company; blocked while it has employees"""
    try:
        deleted = await companies.delete(company_id)
    except ConflictError as e:
        return redirect_with_flash("/companies", error=e.message)
    except StorageError as e:
        logger.error(f"Error deleting company {company_id}: {e}")
        return redirect_with_flash("/companies", error=e.message)

    if not deleted:
        return redirect_with_flash("/companies", error="Company not found")
    return redirect_with_flash("/companies", message="Company deleted")
