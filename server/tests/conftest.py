# server/tests/conftest.py
"""
Shared fixtures: every test gets its own SQLite file with foreign keys on.

Run with: pytest server/tests -v
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from core.async_database import create_engine_for, create_session_factory, init_models
from core.constants import Position
from dependencies import get_session_factory
from main import app
from models import Base
from repositories import CompanyRepository, EmployeeRepository
from schemas.company import CompanyRecord
from schemas.employee import EmployeeRecord
from services import CompanyService, EmployeeService

TODAY = date(2024, 3, 15)


@pytest.fixture
async def session_factory(tmp_path):
    """Async session factory over a fresh database file"""
    engine = create_engine_for(f"sqlite:///{tmp_path / 'staff.db'}", poolclass=NullPool)
    await init_models(engine)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def company_repository(session_factory):
    return CompanyRepository(session_factory)


@pytest.fixture
def employee_repository(session_factory):
    return EmployeeRepository(session_factory)


@pytest.fixture
def company_service(company_repository):
    return CompanyService(company_repository)


@pytest.fixture
def employee_service(employee_repository, company_repository):
    return EmployeeService(employee_repository, company_repository, clock=lambda: TODAY)


@pytest.fixture
def create_company(company_service):
    """Factory inserting a valid company, Acme by default"""
    async def _create(name: str = "Acme", legal_form: str = "ООО") -> int:
        return await company_service.create(CompanyRecord(name=name, legal_form=legal_form))
    return _create


@pytest.fixture
def new_employee():
    """Factory for a valid Ann Lee record, fields overridable"""
    def _make(company_id: int, **overrides) -> EmployeeRecord:
        fields = dict(
            first_name="Ann",
            last_name="Lee",
            position=Position.DEVELOPER,
            hire_date=date(2020, 1, 15),
            company_id=company_id,
        )
        fields.update(overrides)
        return EmployeeRecord(**fields)
    return _make


# ==================== HTTP CLIENT ====================

@pytest.fixture
def app_session_factory(tmp_path):
    """Session factory for the app under TestClient, which runs its own event loop"""
    path = tmp_path / "app.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    engine = create_engine_for(f"sqlite:///{path}", poolclass=NullPool)
    return create_session_factory(engine)


@pytest.fixture
def client(app_session_factory):
    app.dependency_overrides[get_session_factory] = lambda: app_session_factory
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
