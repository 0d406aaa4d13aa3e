"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient

from doctor_portal.auth import create_token
from doctor_portal.config import Settings
from doctor_portal.database import Database
from doctor_portal.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'portal.db'}",
        secret_token="test-secret",
        log_json=False,
    )


@pytest.fixture
async def database(settings):
    """Database handle for service-level tests."""
    db = Database(settings.database_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """FastAPI test client with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def run_db(app, client):
    """Run ``fn(session)`` on the app's own event loop and database."""
    def _run(fn):
        async def _call():
            async with app.state.db.session() as session:
                return await fn(session)
        return client.portal.call(_call)
    return _run


@pytest.fixture
def seed(run_db):
    """Insert ORM instances directly."""
    def _seed(*instances):
        async def _insert(session):
            session.add_all(instances)
            await session.commit()
        run_db(_insert)
    return _seed


@pytest.fixture
def auth_header(settings):
    """Build an Authorization header for ``email``."""
    def _create(email: str, expires_in: int = None) -> dict:
        token = create_token(email, settings, expires_in=expires_in)
        return {"Authorization": f"Bearer {token}"}
    return _create
