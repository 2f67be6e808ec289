from datetime import date
from pydantic import BaseModel
from typing import Optional

from core.constants import Position, POSITION_LABELS
from .company import CompanyRef


class EmployeeRecord(BaseModel):
    """Employee as passed between routes, services and repositories."""
    id: int = 0
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    # Raw int so undefined values reach the validator instead of failing parsing
    position: int = Position.UNSET
    hire_date: Optional[date] = None
    company_id: int = 0
    company: Optional[CompanyRef] = None

    @property
    def full_name(self) -> str:
        parts = [self.last_name, self.first_name, self.middle_name]
        return " ".join(p for p in parts if p)

    @property
    def position_label(self) -> str:
        try:
            return POSITION_LABELS.get(Position(self.position), "-")
        except ValueError:
            return "-"
