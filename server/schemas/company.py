from pydantic import BaseModel
from typing import Optional


class CompanyRecord(BaseModel):
    """
    Company as passed between routes, services and repositories.

    Fields are deliberately unconstrained: the service validates them and
    reports every violation at once.
    """
    id: int = 0
    name: Optional[str] = None
    legal_form: Optional[str] = None
    employee_count: int = 0


class CompanyRef(BaseModel):
    """Read-only company summary attached to an employee for display"""
    id: int
    name: str
    legal_form: Optional[str] = None
