from fastapi.testclient import TestClient
from company_api.main import app

client = TestClient(app)


def _create_company(name='Tech', address='Seoul'):
    r = client.post('/companies', json={'name': name, 'address': address})
    assert r.status_code == 201
    return r.json()


def _create_employee(company_id, name='Kim', email='kim@x.com', position='Dev'):
    r = client.post('/employees', json={'name': name, 'email': email, 'position': position, 'companyId': company_id})
    assert r.status_code == 201
    return r.json()


def test_create_company_assigns_id_and_no_employees():
    body = _create_company()
    assert isinstance(body['id'], int)
    assert body['name'] == 'Tech'
    assert body['address'] == 'Seoul'
    assert not body['employees']
    assert 'createdAt' in body and 'updatedAt' in body


def test_get_company_lists_employees_without_company_field():
    company = _create_company('Acme', 'Daejeon')
    kim = _create_employee(company['id'])
    r = client.get(f"/companies/{company['id']}")
    assert r.status_code == 200
    employees = r.json()['employees']
    assert [e['id'] for e in employees] == [kim['id']]
    assert employees[0] == {'id': kim['id'], 'name': 'Kim', 'email': 'kim@x.com', 'position': 'Dev'}
    assert 'company' not in employees[0]


def test_get_company_without_employees_returns_empty_list():
    company = _create_company('Quiet', 'Ulsan')
    r = client.get(f"/companies/{company['id']}")
    assert r.status_code == 200
    assert r.json()['employees'] == []


def test_get_unknown_company_is_404():
    r = client.get('/companies/999999')
    assert r.status_code == 404
    assert 'company not found' in r.json()['detail']


def test_update_company_replaces_fields():
    company = _create_company('Old Name', 'Old Street')
    r = client.put(f"/companies/{company['id']}", json={'name': 'New Name', 'address': 'New Street'})
    assert r.status_code == 200
    body = r.json()
    assert body['name'] == 'New Name'
    assert body['address'] == 'New Street'
    assert body['updatedAt'] >= company['updatedAt']
    assert client.get(f"/companies/{company['id']}").json()['name'] == 'New Name'


def test_update_unknown_company_is_404():
    r = client.put('/companies/999999', json={'name': 'X', 'address': 'Y'})
    assert r.status_code == 404


def test_delete_company_cascades_to_employees():
    company = _create_company('Doomed', 'Gwangju')
    first = _create_employee(company['id'], name='A', email='a@doomed.com')
    second = _create_employee(company['id'], name='B', email='b@doomed.com')
    r = client.delete(f"/companies/{company['id']}")
    assert r.status_code == 204
    assert client.get(f"/companies/{company['id']}").status_code == 404
    assert client.get(f"/employees/{first['id']}").status_code == 404
    assert client.get(f"/employees/{second['id']}").status_code == 404


def test_delete_unknown_company_is_404():
    assert client.delete('/companies/999999').status_code == 404


def test_list_companies_pages_by_id():
    created = [_create_company(f'Paged {i}', 'Seoul') for i in range(3)]
    r = client.get('/companies', params={'limit': 200})
    assert r.status_code == 200
    ids = [c['id'] for c in r.json()]
    assert ids == sorted(ids)
    assert {c['id'] for c in created} <= set(ids)
    assert all(isinstance(c['employees'], list) for c in r.json())

    first_page = client.get('/companies', params={'limit': 1}).json()
    second_page = client.get('/companies', params={'limit': 1, 'offset': 1}).json()
    assert len(first_page) == 1 and len(second_page) == 1
    assert first_page[0]['id'] < second_page[0]['id']


def test_invalid_company_payloads_are_400():
    assert client.post('/companies', json={'name': 'Tech'}).status_code == 400
    assert client.post('/companies', json={'name': '  ', 'address': 'Seoul'}).status_code == 400
    assert client.get('/companies', params={'limit': 0}).status_code == 400


def test_request_id_header_exists():
    r = client.get('/health')
    assert r.status_code == 200
    assert r.json() == {'status': 'ok'}
    assert 'X-Request-ID' in r.headers


def test_request_id_is_propagated():
    r = client.get('/health', headers={'X-Request-ID': 'abc123'})
    assert r.headers['X-Request-ID'] == 'abc123'
