import os
import tempfile

# Point the app at a throwaway database before any settings are loaded
_db_dir = tempfile.mkdtemp(prefix="formbuilder-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ.setdefault("ENV", "dev")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from formbuilder_core.app import models  # noqa: F401
from formbuilder_core.app.client import FormsClient
from formbuilder_core.app.config import settings
from formbuilder_core.app.data_broker import DataBroker
from formbuilder_core.app.form_service import FormService
from formbuilder_core.app.main import app
from formbuilder_core.db.base_class import Base
from formbuilder_core.db.session import SessionLocal, engine


# =============================================================================
# Core Fixtures - Database, Client, Service
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def create_tables() -> Generator[None, None, None]:
    Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()


@pytest.fixture()
def db() -> Generator[Session, None, None]:
    """
    Fresh session per test so reads never come from a stale identity map.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="module")
def client() -> Generator[TestClient, None, None]:
    """
    FastAPI test client for making HTTP requests.
    Scope: module - one client per test module.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def form_service() -> FormService:
    return FormService(DataBroker())


@pytest.fixture()
def api(client: TestClient) -> FormsClient:
    return FormsClient(base_url=settings.API_STR, session=client)
