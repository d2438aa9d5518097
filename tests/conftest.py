import os

# Settings are read at import time, so the test environment goes first
os.environ["ENV"] = "testing"
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("LOG_DIR", "logs")

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Generator

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from main import app
from core.config import settings
from core.database import Base
from models.products import Product
from models.users import User, Role
from utils.deps import get_db

# SYNC SQLite for testing (matches sync service layer)
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False}
)

TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """
    Creates a fresh, empty database for each test.
    """
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(session):
    """
    Opens extra sessions on the test database, e.g. to play a second request.
    Every session handed out is closed before the tables are dropped.
    """
    opened = []

    def factory() -> Session:
        db = TestingSessionLocal()
        opened.append(db)
        return db

    yield factory

    for db in opened:
        db.close()


@pytest.fixture
async def client(session: Session):
    """
    HTTP client talking to the app with get_db pointed at the test session.
    """
    def override_get_db():
        try:
            yield session
        finally:
            pass  # Session cleanup handled by session fixture

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


def _create_user(session: Session, email: str, role: Role = Role.CUSTOMER) -> User:
    user = User(
        email=email,
        first_name=email.split("@")[0].title(),
        last_name="Tester",
        role=role.value,
        is_active=True
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def customer(session) -> User:
    return _create_user(session, "alice@example.com")


@pytest.fixture
def other_customer(session) -> User:
    return _create_user(session, "bob@example.com")


@pytest.fixture
def admin_user(session) -> User:
    return _create_user(session, "admin@example.com", Role.ADMIN)


@pytest.fixture
def products(session) -> dict[str, Product]:
    """
    Two catalogue products: A at 5.00 and B at 3.50.
    """
    product_a = Product(name="Product A", description="First", price=Decimal("5.00"))
    product_b = Product(name="Product B", description="Second", price=Decimal("3.50"))
    session.add_all([product_a, product_b])
    session.commit()
    session.refresh(product_a)
    session.refresh(product_b)
    return {"A": product_a, "B": product_b}


def create_access_token(user: User, expires_delta: timedelta = timedelta(minutes=15)) -> str:
    payload = {
        "sub": user.email,
        "id": user.id,
        "role": user.role,
        "type": "access",
        "exp": datetime.now(timezone.utc) + expires_delta
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


@pytest.fixture
def auth_headers():
    """
    Builds an Authorization header for a user.
    """
    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user)}"}

    return _headers
