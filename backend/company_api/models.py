"""SQLModel data models.

This module defines the two database tables, `Company` and `Employee`.
A company owns many employees and every employee points back at its
company through `company_id`. Both sides of the relationship are lazy:
nothing beyond the row itself is loaded unless a repository asks for it.
"""

from typing import List, Optional
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Company(SQLModel, table=True):
    """A company and its ordered collection of employees.

    Deleting a company removes its employees as well; the repository
    does this explicitly (dependents first, then the company), so the
    relationship is told not to touch children on delete.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, max_length=100)
    address: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    employees: List['Employee'] = Relationship(
        back_populates='company',
        sa_relationship_kwargs={'order_by': 'Employee.id', 'passive_deletes': 'all'},
    )

    def touch(self):
        self.updated_at = utcnow()


class Employee(SQLModel, table=True):
    """An employee belonging to exactly one `Company`.

    `company_id` is only ever `None` on a transient instance that has
    not been assigned yet; the column itself is NOT NULL.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(index=True, max_length=255)
    position: str = Field(max_length=100)
    company_id: Optional[int] = Field(default=None, foreign_key='company.id', index=True, nullable=False)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    company: Optional[Company] = Relationship(back_populates='employees')

    def touch(self):
        self.updated_at = utcnow()
