"""Run a quick smoke check against the app with FastAPI's TestClient.

Hits `/health`, then creates a company and an employee and prints the
`GET /companies/{id}` payload so the Full/Simple nesting can be eyeballed.
"""

import sys
import os

# Ensure backend folder is on sys.path so `company_api` package can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from company_api.main import app


def run_testclient():
    client = TestClient(app)
    resp = client.get('/health')
    print('STATUS:', resp.status_code, resp.json())
    company = client.post('/companies', json={'name': 'Smoke Co', 'address': 'Seoul'}).json()
    client.post('/employees', json={
        'name': 'Kim', 'email': 'kim@smoke.example.com', 'position': 'Dev', 'companyId': company['id'],
    })
    resp = client.get(f"/companies/{company['id']}")
    print('STATUS:', resp.status_code)
    print('JSON:', resp.json())


if __name__ == '__main__':
    run_testclient()
