from .layout import render_page, not_found_page
from .company_views import (
    company_list_page, company_details_page, company_form_page, company_delete_page
)
from .employee_views import (
    employee_list_page, employee_details_page, employee_form_page, employee_delete_page
)
from .home_views import dashboard_page

__all__ = [
    "render_page",
    "not_found_page",
    "company_list_page",
    "company_details_page",
    "company_form_page",
    "company_delete_page",
    "employee_list_page",
    "employee_details_page",
    "employee_form_page",
    "employee_delete_page",
    "dashboard_page",
]
