# server/views/home_views.py
"""Dashboard page"""
from typing import Optional

from schemas.statistics import DashboardSummary
from utils.datetime_utils import to_iso_date
from .layout import esc, render_page


def dashboard_page(summary: DashboardSummary, error: Optional[str] = None) -> str:
    recent = "".join(
        f"""<tr>
          <td><a href="/employees/{e.id}">{esc(e.full_name)}</a></td>
          <td>{esc(e.position_label)}</td>
          <td>{esc(e.company.name if e.company else '-')}</td>
          <td>{esc(to_iso_date(e.hire_date))}</td>
        </tr>"""
        for e in summary.recent_employees
    ) or '<tr><td colspan="4">No employees yet</td></tr>'

    body = f"""<h1>Dashboard</h1>
    <div class="tiles">
      <div class="tile"><div class="n">{summary.total_companies}</div>Companies</div>
      <div class="tile"><div class="n">{summary.total_employees}</div>Employees</div>
      <div class="tile"><div class="n">{summary.companies_with_employees}</div>Companies with staff</div>
    </div>
    <h2>Recently hired</h2>
    <table>
      <thead><tr><th>Name</th><th>Position</th><th>Company</th><th>Hired</th></tr></thead>
      <tbody>{recent}</tbody>
    </table>"""
    return render_page("Dashboard", body, error=error)
