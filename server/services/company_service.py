# server/services/company_service.py
"""Company management service"""
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from core.constants import LEGAL_FORMS, COMPANY_NAME_MIN_LENGTH, COMPANY_NAME_MAX_LENGTH
from core.logger import get_logger
from repositories.interfaces import CompanyRepositoryPort
from schemas.company import CompanyRecord
from utils.exceptions import (
    StaffManagerException, ValidationError, NotFoundError, ConflictError, StorageError
)

logger = get_logger(__name__)


def _normalize_name(name: str) -> str:
    return name.strip().casefold()


class CompanyService:
    """
    Validation and orchestration for companies.

    Checks and writes are separate round trips; the unique name index and
    the employees foreign key are what finally hold under concurrent
    requests. Their violations are reported as ConflictError.
    """

    def __init__(self, company_repository: CompanyRepositoryPort):
        self.company_repository = company_repository

    async def list_all(self) -> List[CompanyRecord]:
        """All companies ordered by name, with employee counts"""
        try:
            return await self.company_repository.list_all()
        except Exception as e:
            logger.error(f"Failed to list companies: {e}")
            raise StorageError("Failed to retrieve companies", e) from e

    async def get_by_id(self, company_id: int) -> Optional[CompanyRecord]:
        """Company by id, or None when the id is not positive or not found"""
        if company_id <= 0:
            return None

        try:
            return await self.company_repository.get_by_id(company_id)
        except Exception as e:
            logger.error(f"Failed to get company {company_id}: {e}")
            raise StorageError(f"Failed to retrieve company with ID {company_id}", e) from e

    async def create(self, company: CompanyRecord) -> int:
        """
        Validate and insert a company.

        Returns:
            The id assigned by the store

        Raises:
            ValidationError: With every failed rule
            ConflictError: If the store rejects a duplicate name
            StorageError: If the store fails
        """
        await self._ensure_valid(company)
        company = self._normalized(company)

        try:
            company_id = await self.company_repository.create(company)
        except IntegrityError as e:
            logger.warning(f"Store rejected company '{company.name}': {e}")
            raise ConflictError(f"Company '{company.name}' already exists") from e
        except Exception as e:
            logger.error(f"Failed to create company '{company.name}': {e}")
            raise StorageError("Failed to create company", e) from e

        logger.info(f"✓ Company created: {company.name}", extra={"company_id": company_id})
        return company_id

    async def update(self, company: CompanyRecord) -> None:
        """
        Revalidate and persist name and legal form of an existing company.

        Raises:
            ValidationError: If a rule fails
            NotFoundError: If the id is not positive or the company does not exist
            ConflictError: If the store rejects a duplicate name
            StorageError: If the store fails
        """
        existing = await self.get_by_id(company.id)
        if existing is None:
            raise NotFoundError(f"Company with ID {company.id} not found")

        await self._ensure_valid(company)
        company = self._normalized(company)

        try:
            await self.company_repository.update(company)
        except IntegrityError as e:
            logger.warning(f"Store rejected company '{company.name}': {e}")
            raise ConflictError(f"Company '{company.name}' already exists") from e
        except Exception as e:
            logger.error(f"Failed to update company {company.id}: {e}")
            raise StorageError(f"Failed to update company with ID {company.id}", e) from e

        logger.info(f"✓ Company updated: {company.name}", extra={"company_id": company.id})

    async def delete(self, company_id: int) -> bool:
        """
        Delete a company that has no employees.

        Returns:
            True if deleted, False if the id is not positive or not found

        Raises:
            ConflictError: If employees still reference the company
            StorageError: If the store fails
        """
        if company_id <= 0:
            return False

        try:
            existing = await self.company_repository.get_by_id(company_id)
            if existing is None:
                return False

            if await self.company_repository.has_employees(company_id):
                raise ConflictError(
                    f"Company '{existing.name}' cannot be deleted while it has employees"
                )

            await self.company_repository.delete(company_id)
        except StaffManagerException:
            raise
        except IntegrityError as e:
            logger.warning(f"Store blocked deletion of company {company_id}: {e}")
            raise ConflictError(
                f"Company with ID {company_id} cannot be deleted while it has employees"
            ) from e
        except Exception as e:
            logger.error(f"Failed to delete company {company_id}: {e}")
            raise StorageError(f"Failed to delete company with ID {company_id}", e) from e

        logger.info(f"✓ Company deleted: {existing.name}", extra={"company_id": company_id})
        return True

    async def validate(self, company: CompanyRecord) -> Tuple[bool, List[str]]:
        """
        Run every company rule and collect the failures.

        An empty name skips the name length and duplicate checks; an empty
        legal form skips the allowed-set check.
        """
        errors: List[str] = []

        name = (company.name or "").strip()
        if not name:
            errors.append("Company name must not be empty")
        else:
            if not COMPANY_NAME_MIN_LENGTH <= len(name) <= COMPANY_NAME_MAX_LENGTH:
                errors.append(
                    f"Company name must be between {COMPANY_NAME_MIN_LENGTH} "
                    f"and {COMPANY_NAME_MAX_LENGTH} characters"
                )
            if await self._is_duplicate_name(name, company.id):
                errors.append(f"A company named '{name}' already exists")

        legal_form = (company.legal_form or "").strip()
        if not legal_form:
            errors.append("Legal form must not be empty")
        elif legal_form.upper() not in LEGAL_FORMS:
            errors.append(
                f"Legal form '{legal_form}' is not allowed. "
                f"Allowed forms: {', '.join(LEGAL_FORMS)}"
            )

        return not errors, errors

    async def _is_duplicate_name(self, name: str, own_id: int) -> bool:
        # Compared in Python so case folding covers Cyrillic on every store
        wanted = _normalize_name(name)
        for other in await self.list_all():
            if other.id != own_id and other.name and _normalize_name(other.name) == wanted:
                return True
        return False

    async def _ensure_valid(self, company: CompanyRecord) -> None:
        is_valid, errors = await self.validate(company)
        if not is_valid:
            logger.warning(f"Company rejected: {'; '.join(errors)}")
            raise ValidationError(errors, "Invalid company data")

    @staticmethod
    def _normalized(company: CompanyRecord) -> CompanyRecord:
        return company.model_copy(update={
            "name": company.name.strip(),
            "legal_form": company.legal_form.strip(),
        })
