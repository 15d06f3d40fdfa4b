import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.session import create_db_engine
from app.main import create_app
from app.services.auth_service import create_access_token

TEST_SECRET = "test-secret"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, DATABASE_URL="sqlite://", SECRET_KEY=TEST_SECRET, CORS_ORIGINS="*")


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def client(test_settings, engine):
    with TestClient(create_app(test_settings, engine=engine)) as client:
        yield client


@pytest.fixture
def make_token(test_settings):
    def _make_token(sub: str, **kwargs) -> str:
        return create_access_token(sub, config=test_settings, **kwargs)

    return _make_token


@pytest.fixture
def auth_headers(make_token):
    def _auth_headers(sub: str) -> dict:
        return {"Authorization": f"Bearer {make_token(sub)}"}

    return _auth_headers
