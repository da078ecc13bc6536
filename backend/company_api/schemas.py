"""Pydantic request/response schemas used by the API.

Response shapes come in two flavours per entity:

- *Simple* shapes carry only the entity's own scalar fields.
- *Full* shapes add the one-hop relation to the other entity, always
  expressed as that entity's *Simple* shape.

A Simple shape never embeds anything related, so serialising a Full
shape stops after one hop no matter how the company/employee graph is
linked in memory.

Conversions read only what is already loaded on the entity. A
relationship that was never loaded maps to `None` instead of being
fetched behind the caller's back.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from sqlalchemy import inspect

from .models import Company, Employee


def is_loaded(entity, relationship: str) -> bool:
    """Return True when `relationship` is already populated on `entity`."""
    return relationship not in inspect(entity).unloaded


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON names (`createdAt`, `companyId`)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompanySimple(CamelModel):
    """A company without its employees."""
    id: int
    name: str
    address: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, company: Company) -> 'CompanySimple':
        return cls(
            id=company.id,
            name=company.name,
            address=company.address,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )


class EmployeeSimple(CamelModel):
    """An employee without its company."""
    id: int
    name: str
    email: str
    position: str

    @classmethod
    def from_entity(cls, employee: Employee) -> 'EmployeeSimple':
        return cls(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            position=employee.position,
        )


class CompanyFull(CompanySimple):
    """A company with its employees as `EmployeeSimple` entries.

    `employees` is `None` when the collection was not loaded (e.g. right
    after creation) and a possibly empty list otherwise.
    """
    employees: Optional[List[EmployeeSimple]] = None

    @classmethod
    def from_entity(cls, company: Company) -> 'CompanyFull':
        employees = None
        if is_loaded(company, 'employees'):
            employees = [EmployeeSimple.from_entity(e) for e in company.employees]
        return cls(
            id=company.id,
            name=company.name,
            address=company.address,
            created_at=company.created_at,
            updated_at=company.updated_at,
            employees=employees,
        )


class EmployeeFull(EmployeeSimple):
    """An employee with its company as a `CompanySimple`."""
    created_at: datetime
    updated_at: datetime
    company: Optional[CompanySimple] = None

    @classmethod
    def from_entity(cls, employee: Employee) -> 'EmployeeFull':
        company = None
        if is_loaded(employee, 'company') and employee.company is not None:
            company = CompanySimple.from_entity(employee.company)
        return cls(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            position=employee.position,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
            company=company,
        )


class CompanyRequest(CamelModel):
    """Payload for creating or replacing a company."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=1, max_length=255)


class EmployeeRequest(CamelModel):
    """Payload for creating or replacing an employee.

    The company is referenced by id only; the service resolves it.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    position: str = Field(min_length=1, max_length=100)
    company_id: int = Field(gt=0, strict=True)
