# server/views/company_views.py
"""Company pages"""
from typing import List, Optional

from core.constants import LEGAL_FORMS
from schemas.company import CompanyRecord
from schemas.employee import EmployeeRecord
from utils.datetime_utils import to_iso_date
from .layout import esc, errors_html, options_html, render_page


def company_list_page(
    companies: List[CompanyRecord],
    message: Optional[str] = None,
    error: Optional[str] = None
) -> str:
    rows = "".join(
        f"""<tr>
          <td><a href="/companies/{c.id}">{esc(c.name)}</a></td>
          <td>{esc(c.legal_form)}</td>
          <td>{c.employee_count}</td>
          <td><a href="/companies/{c.id}/update">Edit</a> · <a href="/companies/{c.id}/delete">Delete</a></td>
        </tr>"""
        for c in companies
    ) or '<tr><td colspan="4">No companies yet</td></tr>'

    body = f"""<h1>Companies</h1>
    <table>
      <thead><tr><th>Name</th><th>Legal form</th><th>Employees</th><th></th></tr></thead>
      <tbody>{rows}</tbody>
    </table>
    <a class="btn" href="/companies/create">New company</a>"""
    return render_page("Companies", body, message, error)


def company_details_page(company: CompanyRecord, employees: List[EmployeeRecord]) -> str:
    rows = "".join(
        f"""<tr>
          <td><a href="/employees/{e.id}">{esc(e.full_name)}</a></td>
          <td>{esc(e.position_label)}</td>
          <td>{esc(to_iso_date(e.hire_date))}</td>
        </tr>"""
        for e in employees
    ) or '<tr><td colspan="3">No employees</td></tr>'

    body = f"""<h1>{esc(company.name)}</h1>
    <div class="card">
      <dl>
        <dt>Legal form</dt><dd>{esc(company.legal_form)}</dd>
        <dt>Employees</dt><dd>{company.employee_count}</dd>
      </dl>
    </div>
    <h2>Employees</h2>
    <table>
      <thead><tr><th>Name</th><th>Position</th><th>Hired</th></tr></thead>
      <tbody>{rows}</tbody>
    </table>
    <a class="btn" href="/companies/{company.id}/update">Edit</a>
    <a class="btn muted" href="/companies">Back</a>"""
    return render_page(company.name or "Company", body)


def company_form_page(
    company: CompanyRecord,
    errors: Optional[List[str]] = None,
    error: Optional[str] = None
) -> str:
    is_new = company.id <= 0
    title = "New company" if is_new else f"Edit {company.name or 'company'}"
    action = "/companies/create" if is_new else f"/companies/{company.id}/update"
    legal_forms = options_html(
        [("", "Select...")] + [(f, f) for f in LEGAL_FORMS],
        (company.legal_form or "").strip().upper()
    )

    body = f"""<h1>{esc(title)}</h1>
    {errors_html(errors)}
    <form class="card" method="post" action="{action}">
      <input type="hidden" name="id" value="{company.id}" />
      <label for="name">Name</label>
      <input id="name" name="name" value="{esc(company.name)}" />
      <label for="legal_form">Legal form</label>
      <select id="legal_form" name="legal_form">{legal_forms}</select>
      <button class="btn" type="submit">Save</button>
      <a class="btn muted" href="/companies">Cancel</a>
    </form>"""
    return render_page(title, body, error=error)


def company_delete_page(company: CompanyRecord) -> str:
    warning = ""
    if company.employee_count > 0:
        warning = (
            f'<div class="flash err">This company has {company.employee_count} '
            f'employee(s) and cannot be deleted until they are removed.</div>'
        )

    body = f"""<h1>Delete company</h1>
    {warning}
    <form class="card" method="post" action="/companies/{company.id}/delete">
      <p>Delete <strong>{esc(company.name)}</strong> ({esc(company.legal_form)})?</p>
      <button class="btn danger" type="submit">Delete</button>
      <a class="btn muted" href="/companies">Cancel</a>
    </form>"""
    return render_page("Delete company", body)
