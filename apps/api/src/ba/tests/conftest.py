import uuid
from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ba.core.security import create_access_token, hash_password
from ba.db.base import Base
from ba.db.models.user import User
from ba.db.session import get_db
from ba.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

PASSWORD_HASH = hash_password("password123")


@pytest.fixture(autouse=True)
def db():
    Base.metadata.create_all(bind=engine)
    session = TestSession()
    app.dependency_overrides[get_db] = lambda: session
    yield session
    session.close()
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client():
    return TestClient(app)


@dataclass
class ApiUser:
    """A user plus a client that sends requests as that user."""

    client: TestClient
    user: User
    headers: dict = field(default_factory=dict)

    def create(self, prefix: str, name: str = "Test") -> dict:
        r = self.client.post(f"/api/v1/{prefix}", json={"name": name}, headers=self.headers)
        assert r.status_code == 201, r.text
        return r.json()

    def invite(self, prefix: str, container_id: str, user_id):
        return self.client.post(
            f"/api/v1/{prefix}/{container_id}/members",
            json={"userId": str(user_id)},
            headers=self.headers,
        )

    def accept(self, prefix: str, container_id: str):
        return self.client.post(
            f"/api/v1/{prefix}/{container_id}/members/{self.user.id}/accept",
            headers=self.headers,
        )

    def set_role(self, prefix: str, container_id: str, user_id, role: str):
        return self.client.put(
            f"/api/v1/{prefix}/{container_id}/members/{user_id}",
            json={"role": role},
            headers=self.headers,
        )

    def members(self, prefix: str, container_id: str):
        return self.client.get(f"/api/v1/{prefix}/{container_id}/members", headers=self.headers)

    def access(self, prefix: str, container_id: str, user_id):
        return self.client.get(
            f"/api/v1/{prefix}/{container_id}/members/{user_id}", headers=self.headers
        )

    def add_to(self, prefix: str, container_id: str, other: "ApiUser") -> None:
        assert self.invite(prefix, container_id, other.user.id).status_code == 201
        assert other.accept(prefix, container_id).status_code == 200


@pytest.fixture()
def make_user(db, client):
    def _make(first_name: str = "Test", last_name: str = "User", username: str | None = None):
        username = username or f"{first_name.lower()}-{uuid.uuid4().hex[:8]}"
        user = User(
            id=uuid.uuid4(),
            username=username,
            first_name=first_name,
            last_name=last_name,
            email=f"{username}@test.local",
            hashed_password=PASSWORD_HASH,
        )
        db.add(user)
        db.commit()
        token = create_access_token(subject=str(user.id))
        return ApiUser(client=client, user=user, headers={"Authorization": f"Bearer {token}"})

    return _make


@pytest.fixture()
def owner(make_user):
    return make_user("Jeff", "Hansen", username="jeffijoe")


@pytest.fixture(params=["boards", "spaces"])
def prefix(request):
    return request.param
