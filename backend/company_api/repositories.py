"""Repository classes encapsulating database operations.

Each repository is small and focused on a single aggregate (companies,
employees). Repositories return SQLModel objects and perform
commits/refreshes where appropriate. Relationships are only loaded by
the `get_with_*` and `list` helpers, which ask for them explicitly.
"""

from typing import List, Optional
from sqlmodel import Session, select
from sqlalchemy.orm import selectinload
from . import models


class CompanyRepository:
    """CRUD operations for `Company` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, company: models.Company) -> models.Company:
        """Persist a new company and return the managed instance."""
        self.session.add(company)
        self.session.commit()
        self.session.refresh(company)
        return company

    def get(self, company_id: int) -> Optional[models.Company]:
        """Get a `Company` by primary key without its employees."""
        return self.session.get(models.Company, company_id)

    def get_with_employees(self, company_id: int) -> Optional[models.Company]:
        """Get a `Company` with its `employees` collection loaded.

        `populate_existing` makes the eager load apply even when the
        company is already in the session's identity map.
        """
        return self.session.get(
            models.Company,
            company_id,
            options=[selectinload(models.Company.employees)],
            populate_existing=True,
        )

    def list(self, limit: int, offset: int = 0) -> List[models.Company]:
        """Return a page of companies, by id, with employees loaded."""
        stmt = (
            select(models.Company)
            .options(selectinload(models.Company.employees))
            .order_by(models.Company.id)
            .offset(offset)
            .limit(limit)
        )
        return self.session.exec(stmt).all()

    def update(self, company: models.Company) -> models.Company:
        """Refresh `updated_at` and commit pending changes to `company`."""
        company.touch()
        self.session.add(company)
        self.session.commit()
        self.session.refresh(company)
        return company

    def delete(self, company: models.Company) -> int:
        """Delete a company together with its employees.

        Dependents go first, then the company, all in one commit.
        Returns the number of employees removed.
        """
        stmt = select(models.Employee).where(models.Employee.company_id == company.id)
        employees = self.session.exec(stmt).all()
        for e in employees:
            self.session.delete(e)
        self.session.delete(company)
        self.session.commit()
        return len(employees)


class EmployeeRepository:
    """CRUD operations for `Employee` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, employee: models.Employee) -> models.Employee:
        """Persist a new employee and return the managed instance."""
        self.session.add(employee)
        self.session.commit()
        self.session.refresh(employee)
        return employee

    def get(self, employee_id: int) -> Optional[models.Employee]:
        """Get an `Employee` by primary key without its company."""
        return self.session.get(models.Employee, employee_id)

    def get_with_company(self, employee_id: int) -> Optional[models.Employee]:
        """Get an `Employee` with its `company` loaded."""
        return self.session.get(
            models.Employee,
            employee_id,
            options=[selectinload(models.Employee.company)],
            populate_existing=True,
        )

    def list(self, limit: int, offset: int = 0, company_id: Optional[int] = None) -> List[models.Employee]:
        """Return a page of employees, by id, with their company loaded.

        When `company_id` is given only that company's employees are
        returned.
        """
        stmt = select(models.Employee).options(selectinload(models.Employee.company))
        if company_id is not None:
            stmt = stmt.where(models.Employee.company_id == company_id)
        stmt = stmt.order_by(models.Employee.id).offset(offset).limit(limit)
        return self.session.exec(stmt).all()

    def update(self, employee: models.Employee) -> models.Employee:
        """Refresh `updated_at` and commit pending changes to `employee`."""
        employee.touch()
        self.session.add(employee)
        self.session.commit()
        self.session.refresh(employee)
        return employee

    def delete(self, employee: models.Employee) -> None:
        """Delete a single employee; its company is left untouched."""
        self.session.delete(employee)
        self.session.commit()
