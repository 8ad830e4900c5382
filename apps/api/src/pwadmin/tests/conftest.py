import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pwadmin.db.base import Base
from pwadmin.db.models.organization import Organization
from pwadmin.db.models.organization_member import OrganizationMember
from pwadmin.db.models.user import User
from pwadmin.db.session import get_db
from pwadmin.domain.enums import OrganizationMemberRole
from pwadmin.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)


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


@pytest.fixture()
def registry():
    return app.state.registry


@pytest.fixture()
def seed_member(db):
    user = User(username="alice", email="alice@pathwar.local")
    org = Organization(name="Staff")
    db.add_all([user, org])
    db.flush()

    member = OrganizationMember(
        user_id=user.id, organization_id=org.id, role=OrganizationMemberRole.owner
    )
    db.add(member)
    db.commit()

    return user, org, member


@pytest.fixture()
def other_user(db):
    user = User(username="bob", email="bob@pathwar.local")
    db.add(user)
    db.commit()
    return user
