"""CLI script to seed the backend DB with a demo company and employees.
Usage: python scripts/seed_demo.py [--company NAME] [--address ADDRESS] [--employees N]
"""
import sys
import argparse
import pathlib
# Ensure `backend/` is on sys.path so `company_api` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from company_api.database import engine, create_db_and_tables
from company_api import services
from company_api.schemas import CompanyRequest, EmployeeRequest

POSITIONS = ('Dev', 'Ops', 'QA', 'PM')


def main(company: str = 'Tech', address: str = 'Seoul', employees: int = 3):
    """Create one company with `employees` staff and print the result.

    The printed JSON is the same Full shape the API returns for
    `GET /companies/{id}`.
    """
    create_db_and_tables()
    with Session(engine) as session:
        created = services.CompanyService(session).create(CompanyRequest(name=company, address=address))
        emp_svc = services.EmployeeService(session)
        for i in range(employees):
            emp_svc.create(EmployeeRequest(
                name=f'Employee {i + 1}',
                email=f'employee{i + 1}@{company.lower().replace(" ", "")}.example.com',
                position=POSITIONS[i % len(POSITIONS)],
                company_id=created.id,
            ))
        full = services.CompanyService(session).get(created.id)
        print(full.model_dump_json(by_alias=True, indent=2))


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--company', default='Tech', help='Company name')
    parser.add_argument('--address', default='Seoul', help='Company address')
    parser.add_argument('--employees', type=int, default=3, help='Number of employees to create')
    args = parser.parse_args()
    main(company=args.company, address=args.address, employees=args.employees)
