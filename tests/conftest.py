import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import build_engine, get_db
from app.main import app


@pytest.fixture
def engine():
    # one shared in-memory connection so the app threads see the same data
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_employee(client):
    def _create(full_name="Jane Doe", email="jane@co.com", department="HR"):
        response = client.post(
            "/api/employees",
            json={"full_name": full_name, "email": email, "department": department},
        )
        assert response.status_code == 201, response.json()
        return response.json()["data"]
    return _create


@pytest.fixture
def mark_attendance(client):
    def _mark(employee_id, date, status="Present"):
        response = client.post(
            "/api/attendance",
            json={"employee_id": employee_id, "date": date, "status": status},
        )
        assert response.status_code == 201, response.json()
        return response.json()["data"]
    return _mark
