import os
import tempfile

import pytest

# Point the app at a throwaway database before app.config is imported.
_db_dir = tempfile.mkdtemp(prefix="login-api-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.sqlite3')}"
os.environ["DATA_DIR"] = _db_dir
os.environ["SEED_USERNAME"] = ""
os.environ["SEED_PASSWORD"] = ""

SEED_USERNAME = "alice"
SEED_PASSWORD = "secret"


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    from app.database import create_tables, async_session, engine
    from app.seed import seed_user

    async def _setup():
        await create_tables()
        async with async_session() as session:
            await seed_user(session, SEED_USERNAME, SEED_PASSWORD)
        await engine.dispose()

    asyncio.run(_setup())


@pytest.fixture
def override_dependency():
    """Swap a FastAPI dependency for the duration of one test."""
    from app.main import app

    def _override(dependency, replacement):
        app.dependency_overrides[dependency] = replacement

    yield _override
    app.dependency_overrides.clear()
