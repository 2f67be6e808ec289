# server/models/__init__.py
from .base import Base
from .company import Company
from .employee import Employee

__all__ = [
    "Base",
    "Company",
    "Employee",
]
