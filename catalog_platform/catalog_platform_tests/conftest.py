"""
Pytest configuration for the catalog platform tests.

Points both services at throw-away SQLite files before any app module
is imported, and resets the schemas before each test.
"""
import os
import tempfile

_tmp_dir = tempfile.mkdtemp(prefix="catalog_platform_tests_")
os.environ.setdefault("AUTH_DATABASE_URL", f"sqlite:///{_tmp_dir}/auth.db")
os.environ.setdefault("PRODUCT_DATABASE_URL", f"sqlite:///{_tmp_dir}/products.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes-long")
os.environ.setdefault("ENVIRONMENT", "test")

import uuid  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from catalog_platform.catalog_platform.auth_service import db as auth_db  # noqa: E402
from catalog_platform.catalog_platform.auth_service import models as auth_models  # noqa: E402,F401
from catalog_platform.catalog_platform.auth_service.auth import hash_password  # noqa: E402
from catalog_platform.catalog_platform.auth_service.main import app as auth_app  # noqa: E402
from catalog_platform.catalog_platform.auth_service.models import User, UserRole  # noqa: E402
from catalog_platform.catalog_platform.product_service import db as product_db  # noqa: E402
from catalog_platform.catalog_platform.product_service import models as product_models  # noqa: E402,F401
from catalog_platform.catalog_platform.product_service.main import app as product_app  # noqa: E402
from catalog_platform.catalog_platform.shared.tokens import create_access_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    for module in (auth_db, product_db):
        module.Base.metadata.drop_all(bind=module.engine)
        module.Base.metadata.create_all(bind=module.engine)


@pytest.fixture
def auth_session():
    session = auth_db.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def product_session():
    session = product_db.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def auth_client():
    with TestClient(auth_app) as c:
        yield c


@pytest.fixture
def product_client():
    with TestClient(product_app) as c:
        yield c


def make_user(session, name="Owner", email=None, password="Secret123!", role=UserRole.USER, is_active=True):
    user = User(
        name=name,
        email=email or f"user_{uuid.uuid4().hex[:8]}@example.com",
        password_hash=hash_password(password),
        role=role,
        is_active=is_active,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def auth_header_for(user) -> dict:
    token, _ = create_access_token(user)
    return {"Authorization": f"Bearer {token}"}
