import os
import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

# Point the content repository at a throwaway SQLite file before any app
# module creates its engine.
_SESSION_DIR = Path(tempfile.mkdtemp(prefix="zaryab_pytest_"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_SESSION_DIR / 'content.db'}"
os.environ.setdefault("LOG_LEVEL", "WARNING")

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str = "content.yml") -> dict:
    with open(FIXTURES_DIR / name, encoding="utf-8") as f:
        return yaml.safe_load(f)


def pytest_sessionfinish(session, exitstatus):
    """Cleanup temporary test files after the test session."""
    shutil.rmtree(_SESSION_DIR, ignore_errors=True)


@pytest.fixture(scope="session")
def content():
    return load_fixture()


@pytest.fixture(scope="session")
def client(content):
    """TestClient over the app with the fixture content loaded."""
    from fastapi.testclient import TestClient

    from app.commands.seed_content import load_content
    from app.main import app
    from app.services.database_service import database_service

    async def seed():
        async with database_service.get_session() as session:
            await load_content(session, content)

    with TestClient(app) as c:
        # Seed on the app's own event loop (tables exist once startup ran)
        c.portal.call(seed)
        yield c
