# server/tests/test_routes.py
"""HTML pages: forms, redirects and flash messages"""
from datetime import date
from urllib.parse import parse_qs, urlparse

from dependencies import get_clock
from main import app


def _fix_today(day):
    app.dependency_overrides[get_clock] = lambda: (lambda: day)


def _create_company(client, name="Acme", legal_form="ООО"):
    response = client.post("/api/companies", json={"name": name, "legal_form": legal_form})
    assert response.status_code == 201
    return response.json()["id"]


def _create_employee(client, company_id, **overrides):
    body = {
        "first_name": "Ann",
        "last_name": "Lee",
        "position": 2,
        "hire_date": "2020-01-15",
        "company_id": company_id,
    }
    body.update(overrides)
    response = client.post("/api/employees", json=body)
    assert response.status_code == 201
    return response.json()["id"]


def _flash(response):
    return parse_qs(urlparse(response.headers["location"]).query)


class TestDashboardPage:

    def test_dashboard(self, client):
        company_id = _create_company(client)
        _create_employee(client, company_id)

        response = client.get("/")
        assert response.status_code == 200
        assert "Dashboard" in response.text
        assert "Lee Ann" in response.text

    def test_request_id_header(self, client):
        response = client.get("/", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"


class TestCompanyPages:

    def test_create_redirects_with_message(self, client):
        response = client.post(
            "/companies/create",
            data={"name": "Acme", "legal_form": "ООО"},
            follow_redirects=False
        )

        assert response.status_code == 303
        assert _flash(response)["message"] == ["Company 'Acme' created"]

        listing = client.get(response.headers["location"])
        assert "Acme" in listing.text

    def test_create_invalid_shows_every_error(self, client):
        response = client.post("/companies/create", data={"name": "", "legal_form": ""})

        assert response.status_code == 422
        assert "Company name must not be empty" in response.text
        assert "Legal form must not be empty" in response.text

    def test_create_form(self, client):
        response = client.get("/companies/create")
        assert response.status_code == 200
        assert 'action="/companies/create"' in response.text

    def test_details(self, client):
        company_id = _create_company(client)
        _create_employee(client, company_id)

        response = client.get(f"/companies/{company_id}")
        assert response.status_code == 200
        assert "Lee Ann" in response.text

    def test_invalid_and_missing_ids(self, client):
        assert client.get("/companies/0").status_code == 400
        assert client.get("/companies/999").status_code == 404
        assert client.get("/companies/999/update").status_code == 404

    def test_update(self, client):
        company_id = _create_company(client)

        response = client.post(
            f"/companies/{company_id}/update",
            data={"id": company_id, "name": "Acme Group", "legal_form": "АО"},
            follow_redirects=False
        )
        assert response.status_code == 303
        assert client.get(f"/api/companies/{company_id}").json()["name"] == "Acme Group"

    def test_update_id_mismatch(self, client):
        company_id = _create_company(client)

        response = client.post(
            f"/companies/{company_id}/update",
            data={"id": company_id + 1, "name": "Acme", "legal_form": "ООО"}
        )
        assert response.status_code == 400

    def test_delete_page_warns_about_employees(self, client):
        company_id = _create_company(client)
        _create_employee(client, company_id)

        response = client.get(f"/companies/{company_id}/delete")
        assert "cannot be deleted" in response.text

    def test_delete_with_employees_redirects_with_error(self, client):
        company_id = _create_company(client)
        _create_employee(client, company_id)

        response = client.post(f"/companies/{company_id}/delete", follow_redirects=False)

        assert response.status_code == 303
        assert "error" in _flash(response)
        assert client.get(f"/api/companies/{company_id}").status_code == 200

    def test_delete(self, client):
        company_id = _create_company(client)

        response = client.post(f"/companies/{company_id}/delete", follow_redirects=False)
        assert _flash(response)["message"] == ["Company deleted"]

        response = client.post(f"/companies/{company_id}/delete", follow_redirects=False)
        assert _flash(response)["error"] == ["Company not found"]


class TestEmployeePages:

    def _form(self, company_id, **overrides):
        data = {
            "first_name": "Ann",
            "middle_name": "",
            "last_name": "Lee",
            "position": "2",
            "hire_date": "2020-01-15",
            "company_id": str(company_id),
        }
        data.update(overrides)
        return data

    def test_create(self, client):
        company_id = _create_company(client)

        response = client.post("/employees/create", data=self._form(company_id), follow_redirects=False)

        assert response.status_code == 303
        assert _flash(response)["message"] == ["Employee created"]
        employees = client.get("/api/employees").json()
        assert employees[0]["company"]["name"] == "Acme"

    def test_create_invalid(self, client):
        response = client.post(
            "/employees/create",
            data=self._form(0, first_name="", position="0", hire_date="not-a-date")
        )

        assert response.status_code == 422
        for message in (
            "First name must not be empty",
            "Position is not valid",
            "Hire date must not be empty",
            "A company must be selected",
        ):
            assert message in response.text

    def test_create_form_lists_companies(self, client):
        _create_company(client, "Mira")

        response = client.get("/employees/create")
        assert "Mira" in response.text

    def test_details_show_experience(self, client):
        employee_id = _create_employee(client, _create_company(client))

        response = client.get(f"/employees/{employee_id}")
        assert response.status_code == 200
        assert "Work experience" in response.text
        assert "Developer" in response.text

    def test_details_use_injected_clock(self, client):
        _fix_today(date(2024, 3, 15))
        employee_id = _create_employee(client, _create_company(client))

        response = client.get(f"/employees/{employee_id}")
        assert "4.2 years" in response.text

    def test_create_form_defaults_hire_date_to_today(self, client):
        _fix_today(date(2024, 3, 15))

        response = client.get("/employees/create")
        assert 'value="2024-03-15"' in response.text

    def test_invalid_and_missing_ids(self, client):
        assert client.get("/employees/-1").status_code == 400
        assert client.get("/employees/999").status_code == 404

    def test_update(self, client):
        company_id = _create_company(client)
        employee_id = _create_employee(client, company_id)

        response = client.post(
            f"/employees/{employee_id}/update",
            data=dict(self._form(company_id, position="1"), id=str(employee_id)),
            follow_redirects=False
        )
        assert response.status_code == 303
        assert client.get(f"/api/employees/{employee_id}").json()["position"] == 1

    def test_delete(self, client):
        employee_id = _create_employee(client, _create_company(client))

        response = client.post(f"/employees/{employee_id}/delete", follow_redirects=False)
        assert _flash(response)["message"] == ["Employee deleted"]
        assert client.get(f"/employees/{employee_id}").status_code == 404


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["components"]["database"] == "healthy"
