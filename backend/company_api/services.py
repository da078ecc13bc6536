"""Business logic services used by HTTP controllers.

Services are intentionally thin: they check that referenced ids exist,
perform the storage operation through a repository and hand back the
Full response shape (`CompanyFull` / `EmployeeFull`). Simple shapes are
never returned on their own; they only appear embedded in a Full one.
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from . import models, repositories
from .schemas import CompanyFull, CompanyRequest, EmployeeFull, EmployeeRequest

logger = logging.getLogger("company_api.services")


class NotFoundError(LookupError):
    """A requested or referenced entity does not exist."""
    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class CompanyService:
    """Create, read, update and delete companies."""
    def __init__(self, session: Session):
        self.session = session
        self.company_repo = repositories.CompanyRepository(session)

    def create(self, request: CompanyRequest) -> CompanyFull:
        """Persist a new company.

        The employee collection is not loaded for a brand new company,
        so the returned shape carries `employees=None`.
        """
        company = self.company_repo.create(models.Company(name=request.name, address=request.address))
        logger.info("company_created id=%s", company.id)
        return CompanyFull.from_entity(company)

    def get(self, company_id: int) -> CompanyFull:
        """Return a company with its employees or raise `NotFoundError`."""
        company = self.company_repo.get_with_employees(company_id)
        if not company:
            raise NotFoundError("company", company_id)
        return CompanyFull.from_entity(company)

    def list(self, limit: int, offset: int = 0) -> List[CompanyFull]:
        return [CompanyFull.from_entity(c) for c in self.company_repo.list(limit, offset)]

    def update(self, company_id: int, request: CompanyRequest) -> CompanyFull:
        """Replace the scalar fields of an existing company."""
        company = self.company_repo.get(company_id)
        if not company:
            raise NotFoundError("company", company_id)
        company.name = request.name
        company.address = request.address
        self.company_repo.update(company)
        logger.info("company_updated id=%s", company_id)
        return self.get(company_id)

    def delete(self, company_id: int) -> None:
        """Delete a company and, with it, all of its employees."""
        company = self.company_repo.get(company_id)
        if not company:
            raise NotFoundError("company", company_id)
        removed = self.company_repo.delete(company)
        logger.info("company_deleted id=%s employees_removed=%s", company_id, removed)


class EmployeeService:
    """Create, read, update and delete employees."""
    def __init__(self, session: Session):
        self.session = session
        self.company_repo = repositories.CompanyRepository(session)
        self.employee_repo = repositories.EmployeeRepository(session)

    def _require_company(self, company_id: int) -> models.Company:
        company = self.company_repo.get(company_id)
        if not company:
            raise NotFoundError("company", company_id)
        return company

    def _write(self, write, employee: models.Employee, company_id: int) -> models.Employee:
        """Run a repository write, mapping a vanished company to `NotFoundError`.

        The company may be deleted between the existence check and the
        commit; the foreign key then rejects the row.
        """
        try:
            return write(employee)
        except IntegrityError as exc:
            self.session.rollback()
            raise NotFoundError("company", company_id) from exc

    def create(self, request: EmployeeRequest) -> EmployeeFull:
        """Persist a new employee for the company named by `company_id`.

        The company is resolved first; when it does not exist nothing is
        written and `NotFoundError` is raised.
        """
        company = self._require_company(request.company_id)
        employee = models.Employee(
            name=request.name,
            email=request.email,
            position=request.position,
            company_id=company.id,
        )
        employee = self._write(self.employee_repo.create, employee, request.company_id)
        logger.info("employee_created id=%s company_id=%s", employee.id, request.company_id)
        return self.get(employee.id)

    def get(self, employee_id: int) -> EmployeeFull:
        """Return an employee with its company or raise `NotFoundError`."""
        employee = self.employee_repo.get_with_company(employee_id)
        if not employee:
            raise NotFoundError("employee", employee_id)
        return EmployeeFull.from_entity(employee)

    def list(self, limit: int, offset: int = 0, company_id: Optional[int] = None) -> List[EmployeeFull]:
        if company_id is not None:
            self._require_company(company_id)
        employees = self.employee_repo.list(limit, offset, company_id=company_id)
        return [EmployeeFull.from_entity(e) for e in employees]

    def update(self, employee_id: int, request: EmployeeRequest) -> EmployeeFull:
        """Replace an employee's fields; a new `company_id` moves them."""
        employee = self.employee_repo.get(employee_id)
        if not employee:
            raise NotFoundError("employee", employee_id)
        company = self._require_company(request.company_id)
        employee.name = request.name
        employee.email = request.email
        employee.position = request.position
        employee.company_id = company.id
        self._write(self.employee_repo.update, employee, request.company_id)
        logger.info("employee_updated id=%s company_id=%s", employee_id, request.company_id)
        return self.get(employee_id)

    def delete(self, employee_id: int) -> None:
        employee = self.employee_repo.get(employee_id)
        if not employee:
            raise NotFoundError("employee", employee_id)
        self.employee_repo.delete(employee)
        logger.info("employee_deleted id=%s", employee_id)
