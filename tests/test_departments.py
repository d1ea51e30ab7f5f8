import uuid

from fastapi.testclient import TestClient

from employee_management.main import app
from tests.helpers import create_department, create_employee


def test_list_departments_empty(db_session):
    client = TestClient(app)
    r = client.get("/api/departments")
    assert r.status_code == 200
    assert r.json() == []


def test_create_and_get_department(db_session):
    client = TestClient(app)
    r = client.post(
        "/api/departments",
        json={"department_name": "Engineering", "description": "Builds the product"},
    )
    assert r.status_code == 201
    created = r.json()
    assert created["department_name"] == "Engineering"
    assert created["description"] == "Builds the product"
    assert created["employee_count"] == 0

    r = client.get(f"/api/departments/{created['id']}")
    assert r.status_code == 200
    assert r.json()["department_name"] == "Engineering"
    assert r.json()["id"] == created["id"]


def test_create_duplicate_department_returns_400(db_session):
    create_department(db_session, "Engineering")

    client = TestClient(app)
    r = client.post("/api/departments", json={"department_name": "Engineering"})
    assert r.status_code == 400
    assert "already exists" in r.json()["detail"]

    # different case is a different name
    r = client.post("/api/departments", json={"department_name": "ENGINEERING"})
    assert r.status_code == 201


def test_create_department_validation(db_session):
    client = TestClient(app)
    assert client.post("/api/departments", json={"department_name": "X"}).status_code == 422
    assert client.post("/api/departments", json={"department_name": "x" * 101}).status_code == 422
    assert client.post(
        "/api/departments", json={"department_name": "Legal", "description": "d" * 501}
    ).status_code == 422
    assert client.post("/api/departments", json={}).status_code == 422


def test_get_department_not_found(db_session):
    client = TestClient(app)
    r = client.get(f"/api/departments/{uuid.uuid4()}")
    assert r.status_code == 404


def test_get_department_by_name(db_session):
    create_department(db_session, "Human Resources")

    client = TestClient(app)
    r = client.get("/api/departments/name/Human Resources")
    assert r.status_code == 200
    assert r.json()["department_name"] == "Human Resources"

    r = client.get("/api/departments/name/Nope")
    assert r.status_code == 404


def test_update_department(db_session):
    d = create_department(db_session, "Engineering", "old")

    client = TestClient(app)
    r = client.put(
        f"/api/departments/{d.id}",
        json={"department_name": "Platform Engineering", "description": "new"},
    )
    assert r.status_code == 200
    assert r.json()["department_name"] == "Platform Engineering"
    assert r.json()["description"] == "new"

    r = client.put(f"/api/departments/{uuid.uuid4()}", json={"department_name": "Whatever"})
    assert r.status_code == 404


def test_update_department_to_taken_name_conflicts(db_session):
    create_department(db_session, "Engineering")
    other = create_department(db_session, "Finance")

    client = TestClient(app)
    r = client.put(f"/api/departments/{other.id}", json={"department_name": "Engineering"})
    assert r.status_code == 409


def test_delete_department(db_session):
    d = create_department(db_session, "Engineering")

    client = TestClient(app)
    r = client.delete(f"/api/departments/{d.id}")
    assert r.status_code == 204

    r = client.get(f"/api/departments/{d.id}")
    assert r.status_code == 404

    r = client.delete(f"/api/departments/{d.id}")
    assert r.status_code == 404


def test_delete_department_with_employees_conflicts(db_session):
    d = create_department(db_session, "Engineering")
    create_employee(db_session, "alice@company.com", department=d)

    client = TestClient(app)
    r = client.delete(f"/api/departments/{d.id}")
    assert r.status_code == 409

    r = client.get(f"/api/departments/{d.id}")
    assert r.status_code == 200
    assert r.json()["employee_count"] == 1


def test_search_departments(db_session):
    create_department(db_session, "Engineering")
    create_department(db_session, "Finance")

    client = TestClient(app)
    r = client.get("/api/departments/search?name=engin")
    assert r.status_code == 200
    assert [d["department_name"] for d in r.json()] == ["Engineering"]

    r = client.get("/api/departments/search")
    assert r.status_code == 422


def test_list_departments_with_employees(db_session):
    eng = create_department(db_session, "Engineering")
    create_department(db_session, "Finance")
    create_employee(db_session, "alice@company.com", department=eng)

    client = TestClient(app)
    r = client.get("/api/departments/with-employees")
    assert r.status_code == 200
    by_name = {d["department_name"]: d for d in r.json()}
    assert set(by_name) == {"Engineering", "Finance"}
    assert by_name["Engineering"]["employee_count"] == 1
    assert by_name["Engineering"]["employees"][0]["email"] == "alice@company.com"
    assert by_name["Engineering"]["employees"][0]["department_name"] == "Engineering"
    assert by_name["Finance"]["employees"] == []


def test_list_and_search_report_employee_counts(db_session):
    eng = create_department(db_session, "Engineering")
    create_department(db_session, "Finance")
    create_employee(db_session, "alice@company.com", department=eng)
    create_employee(db_session, "bob@company.com", first_name="Bob", department=eng)

    client = TestClient(app)
    r = client.get("/api/departments")
    assert r.status_code == 200
    assert {d["department_name"]: d["employee_count"] for d in r.json()} == {
        "Engineering": 2,
        "Finance": 0,
    }

    r = client.get("/api/departments/search", params={"name": "fin"})
    assert [(d["department_name"], d["employee_count"]) for d in r.json()] == [("Finance", 0)]

    r = client.get("/api/departments/search", params={"name": "_"})
    assert r.json() == []
