import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SQLALCHEMY_URL", "sqlite://")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from app.database import build_engine, create_db_and_tables, get_session
from app.main import app
from app.models import Book, PaymentProvider, User
from app.utils.token import create_access_token


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    create_db_and_tables(engine)

    yield engine

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture()
def user(session):
    user = User(auth_user_id="auth-user-001", email="reader@example.com")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture()
def books(session):
    """Catalog with prices {1: 100, 2: 250} and an inactive book 3."""
    rows = [
        Book(id=1, title="Dune", base_price=100, is_active=True),
        Book(id=2, title="Emma", base_price=250, is_active=True),
        Book(id=3, title="Out of print", base_price=500, is_active=False),
    ]
    session.add_all(rows)
    session.commit()
    return {book.id: book for book in rows}


@pytest.fixture()
def payment_provider(session):
    provider = PaymentProvider(id=1, name="card")
    session.add(provider)
    session.commit()
    return provider


@pytest.fixture()
def auth_headers(user):
    token = create_access_token({"sub": user.auth_user_id})
    return {"Authorization": f"Bearer {token}"}
