# server/services/employee_service.py
"""Employee management service"""
from datetime import date
from typing import Callable, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from core.constants import (
    Position, PERSON_NAME_MIN_LENGTH, PERSON_NAME_MAX_LENGTH, MAX_HIRE_AGE_YEARS
)
from core.logger import get_logger
from repositories.interfaces import CompanyRepositoryPort, EmployeeRepositoryPort
from schemas.employee import EmployeeRecord
from utils.datetime_utils import years_before
from utils.exceptions import (
    StaffManagerException, ValidationError, NotFoundError, ConflictError, StorageError
)

logger = get_logger(__name__)

_DEFINED_POSITIONS = {p.value for p in Position if p is not Position.UNSET}


def _check_person_name(value: Optional[str], label: str, errors: List[str]) -> None:
    value = (value or "").strip()
    if not value:
        errors.append(f"{label} must not be empty")
    elif not PERSON_NAME_MIN_LENGTH <= len(value) <= PERSON_NAME_MAX_LENGTH:
        errors.append(
            f"{label} must be between {PERSON_NAME_MIN_LENGTH} "
            f"and {PERSON_NAME_MAX_LENGTH} characters"
        )


class EmployeeService:
    """
    Validation and orchestration for employees.

    The company reference is checked through the company repository at
    validation time; the employees foreign key backs it up in the store.
    """

    def __init__(
        self,
        employee_repository: EmployeeRepositoryPort,
        company_repository: CompanyRepositoryPort,
        clock: Callable[[], date] = date.today
    ):
        self.employee_repository = employee_repository
        self.company_repository = company_repository
        self.clock = clock

    async def list_all(self) -> List[EmployeeRecord]:
        """All employees ordered by last name, each with its company"""
        try:
            return await self.employee_repository.list_all()
        except Exception as e:
            logger.error(f"Failed to list employees: {e}")
            raise StorageError("Failed to retrieve employees", e) from e

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeRecord]:
        if employee_id <= 0:
            return None

        try:
            return await self.employee_repository.get_by_id(employee_id)
        except Exception as e:
            logger.error(f"Failed to get employee {employee_id}: {e}")
            raise StorageError(f"Failed to retrieve employee with ID {employee_id}", e) from e

    async def list_by_company(self, company_id: int) -> List[EmployeeRecord]:
        if company_id <= 0:
            return []

        try:
            return await self.employee_repository.list_by_company(company_id)
        except Exception as e:
            logger.error(f"Failed to list employees of company {company_id}: {e}")
            raise StorageError(
                f"Failed to retrieve employees of company with ID {company_id}", e
            ) from e

    async def create(self, employee: EmployeeRecord) -> int:
        """
        Validate and insert an employee.

        Raises:
            ValidationError: With every failed rule
            ConflictError: If the company vanished before the insert
            StorageError: If the store fails
        """
        await self._ensure_valid(employee)
        employee = self._normalized(employee)

        try:
            employee_id = await self.employee_repository.create(employee)
        except IntegrityError as e:
            logger.warning(f"Store rejected employee {employee.full_name}: {e}")
            raise ConflictError(f"Company with ID {employee.company_id} no longer exists") from e
        except Exception as e:
            logger.error(f"Failed to create employee {employee.full_name}: {e}")
            raise StorageError("Failed to create employee", e) from e

        logger.info(
            f"✓ Employee created: {employee.full_name}",
            extra={"employee_id": employee_id, "company_id": employee.company_id}
        )
        return employee_id

    async def update(self, employee: EmployeeRecord) -> None:
        """
        Revalidate and persist an existing employee.

        Raises:
            ValidationError: If a rule fails
            NotFoundError: If the id is not positive or the employee does not exist
            ConflictError: If the company vanished before the update
            StorageError: If the store fails
        """
        existing = await self.get_by_id(employee.id)
        if existing is None:
            raise NotFoundError(f"Employee with ID {employee.id} not found")

        await self._ensure_valid(employee)
        employee = self._normalized(employee)

        try:
            await self.employee_repository.update(employee)
        except IntegrityError as e:
            logger.warning(f"Store rejected employee {employee.id}: {e}")
            raise ConflictError(f"Company with ID {employee.company_id} no longer exists") from e
        except Exception as e:
            logger.error(f"Failed to update employee {employee.id}: {e}")
            raise StorageError(f"Failed to update employee with ID {employee.id}", e) from e

        logger.info(f"✓ Employee updated: {employee.full_name}", extra={"employee_id": employee.id})

    async def delete(self, employee_id: int) -> bool:
        """True if deleted, False if the id is not positive or not found"""
        if employee_id <= 0:
            return False

        try:
            existing = await self.employee_repository.get_by_id(employee_id)
            if existing is None:
                return False

            await self.employee_repository.delete(employee_id)
        except StaffManagerException:
            raise
        except Exception as e:
            logger.error(f"Failed to delete employee {employee_id}: {e}")
            raise StorageError(f"Failed to delete employee with ID {employee_id}", e) from e

        logger.info(f"✓ Employee deleted: {existing.full_name}", extra={"employee_id": employee_id})
        return True

    async def validate(self, employee: EmployeeRecord) -> Tuple[bool, List[str]]:
        """
        Run every employee rule and collect the failures.

        Hire date bounds are inclusive: today and exactly MAX_HIRE_AGE_YEARS
        ago are both accepted.
        """
        errors: List[str] = []

        _check_person_name(employee.first_name, "First name", errors)
        _check_person_name(employee.last_name, "Last name", errors)

        if employee.position not in _DEFINED_POSITIONS:
            errors.append("Position is not valid")

        today = self.clock()
        if employee.hire_date is None:
            errors.append("Hire date must not be empty")
        elif employee.hire_date > today:
            errors.append("Hire date cannot be in the future")
        elif employee.hire_date < years_before(today, MAX_HIRE_AGE_YEARS):
            errors.append(f"Hire date cannot be more than {MAX_HIRE_AGE_YEARS} years ago")

        if employee.company_id <= 0:
            errors.append("A company must be selected")
        else:
            try:
                company = await self.company_repository.get_by_id(employee.company_id)
            except Exception as e:
                logger.error(f"Failed to look up company {employee.company_id}: {e}")
                raise StorageError(
                    f"Failed to retrieve company with ID {employee.company_id}", e
                ) from e
            if company is None:
                errors.append(f"Company with ID {employee.company_id} not found")

        return not errors, errors

    async def _ensure_valid(self, employee: EmployeeRecord) -> None:
        is_valid, errors = await self.validate(employee)
        if not is_valid:
            logger.warning(f"Employee rejected: {'; '.join(errors)}")
            raise ValidationError(errors, "Invalid employee data")

    @staticmethod
    def _normalized(employee: EmployeeRecord) -> EmployeeRecord:
        middle_name = (employee.middle_name or "").strip() or None
        return employee.model_copy(update={
            "first_name": employee.first_name.strip(),
            "middle_name": middle_name,
            "last_name": employee.last_name.strip(),
            "position": Position(employee.position),
        })
