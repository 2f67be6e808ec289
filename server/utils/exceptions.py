"""Custom exceptions for Staff Manager"""
from typing import List, Optional


class StaffManagerException(Exception):
    """Base exception for Staff Manager"""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class ValidationError(StaffManagerException):
    """One or more validation rules failed; every message is kept in `errors`"""
    def __init__(self, errors: List[str], message: str = "Validation failed"):
        self.errors = list(errors)
        super().__init__(f"{message}: {'; '.join(self.errors)}", "VALIDATION_ERROR", 422)


class NotFoundError(StaffManagerException):
    """Resource not found"""
    def __init__(self, message: str):
        super().__init__(message, "NOT_FOUND", 404)


class ConflictError(StaffManagerException):
    """Operation blocked by existing data (duplicate, dependents)"""
    def __init__(self, message: str):
        super().__init__(message, "CONFLICT", 409)


class StorageError(StaffManagerException):
    """Underlying store failed; the original exception is kept in `cause`"""
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message, "STORAGE_ERROR", 500)
