# server/views/employee_views.py
"""Employee pages"""
from typing import List, Optional

from core.constants import POSITION_LABELS, Position
from schemas.company import CompanyRecord
from schemas.employee import EmployeeRecord
from utils.datetime_utils import to_iso_date
from .layout import esc, errors_html, options_html, render_page


def employee_list_page(
    employees: List[EmployeeRecord],
    message: Optional[str] = None,
    error: Optional[str] = None
) -> str:
    rows = "".join(
        f"""<tr>
          <td><a href="/employees/{e.id}">{esc(e.full_name)}</a></td>
          <td>{esc(e.position_label)}</td>
          <td>{esc(to_iso_date(e.hire_date))}</td>
          <td>{esc(e.company.name if e.company else '-')}</td>
          <td><a href="/employees/{e.id}/update">Edit</a> · <a href="/employees/{e.id}/delete">Delete</a></td>
        </tr>"""
        for e in employees
    ) or '<tr><td colspan="5">No employees yet</td></tr>'

    body = f"""<h1>Employees</h1>
    <table>
      <thead><tr><th>Name</th><th>Position</th><th>Hired</th><th>Company</th><th></th></tr></thead>
      <tbody>{rows}</tbody>
    </table>
    <a class="btn" href="/employees/create">New employee</a>"""
    return render_page("Employees", body, message, error)


def employee_details_page(employee: EmployeeRecord, experience_years: float) -> str:
    company = "-"
    if employee.company:
        company = (
            f'<a href="/companies/{employee.company.id}">{esc(employee.company.name)}</a> '
            f'{esc(employee.company.legal_form)}'
        )

    body = f"""<h1>{esc(employee.full_name)}</h1>
    <div class="card">
      <dl>
        <dt>Position</dt><dd>{esc(employee.position_label)}</dd>
        <dt>Hire date</dt><dd>{esc(to_iso_date(employee.hire_date))}</dd>
        <dt>Work experience</dt><dd>{experience_years} years</dd>
        <dt>Company</dt><dd>{company}</dd>
      </dl>
    </div>
    <a class="btn" href="/employees/{employee.id}/update">Edit</a>
    <a class="btn muted" href="/employees">Back</a>"""
    return render_page(employee.full_name or "Employee", body)


def employee_form_page(
    employee: EmployeeRecord,
    companies: List[CompanyRecord],
    errors: Optional[List[str]] = None,
    error: Optional[str] = None
) -> str:
    is_new = employee.id <= 0
    title = "New employee" if is_new else f"Edit {employee.full_name or 'employee'}"
    action = "/employees/create" if is_new else f"/employees/{employee.id}/update"

    positions = options_html(
        [(Position.UNSET.value, "Select...")]
        + [(p.value, label) for p, label in POSITION_LABELS.items()],
        int(employee.position)
    )
    company_options = options_html(
        [(0, "Select...")] + [(c.id, f"{c.name} ({c.legal_form})") for c in companies],
        employee.company_id
    )

    body = f"""<h1>{esc(title)}</h1>
    {errors_html(errors)}
    <form class="card" method="post" action="{action}">
      <input type="hidden" name="id" value="{employee.id}" />
      <label for="last_name">Last name</label>
      <input id="last_name" name="last_name" value="{esc(employee.last_name)}" />
      <label for="first_name">First name</label>
      <input id="first_name" name="first_name" value="{esc(employee.first_name)}" />
      <label for="middle_name">Middle name</label>
      <input id="middle_name" name="middle_name" value="{esc(employee.middle_name)}" />
      <label for="position">Position</label>
      <select id="position" name="position">{positions}</select>
      <label for="hire_date">Hire date</label>
      <input id="hire_date" name="hire_date" type="date" value="{esc(to_iso_date(employee.hire_date))}" />
      <label for="company_id">Company</label>
      <select id="company_id" name="company_id">{company_options}</select>
      <button class="btn" type="submit">Save</button>
      <a class="btn muted" href="/employees">Cancel</a>
    </form>"""
    return render_page(title, body, error=error)


def employee_delete_page(employee: EmployeeRecord) -> str:
    body = f"""<h1>Delete employee</h1>
    <form class="card" method="post" action="/employees/{employee.id}/delete">
      <p>Delete <strong>{esc(employee.full_name)}</strong>?</p>
      <button class="btn danger" type="submit">Delete</button>
      <a class="btn muted" href="/employees">Cancel</a>
    </form>"""
    return render_page("Delete employee", body)
