# server/core/constants.py
"""
Fixed reference data shared by services, views and the JSON API.

Nothing here is mutable at runtime.
"""
import enum
from typing import Dict, Tuple


# ==================== COMPANY ====================

LEGAL_FORMS: Tuple[str, ...] = (
    "ООО", "ЗАО", "ОАО", "ИП", "АО", "ПАО", "НКО", "ГУП", "МУП",
)

COMPANY_NAME_MIN_LENGTH = 3
COMPANY_NAME_MAX_LENGTH = 100


# ==================== EMPLOYEE ====================

class Position(enum.IntEnum):
    """Employee roles. UNSET is the form default and never valid on save."""
    UNSET = 0
    MANAGER = 1
    DEVELOPER = 2
    BUSINESS_ANALYST = 3
    TESTER = 4


POSITION_LABELS: Dict[Position, str] = {
    Position.MANAGER: "Manager",
    Position.DEVELOPER: "Developer",
    Position.BUSINESS_ANALYST: "Business Analyst",
    Position.TESTER: "Tester",
}

PERSON_NAME_MIN_LENGTH = 2
PERSON_NAME_MAX_LENGTH = 50

MAX_HIRE_AGE_YEARS = 50

RECENT_EMPLOYEES_LIMIT = 5
