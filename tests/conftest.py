import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Settings and the engine are built at import time, so point them at a
# throwaway database before anything imports config.
_DB_DIR = Path(tempfile.mkdtemp(prefix="vault-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'test.db'}"
os.environ["DEMO_MODE"] = "false"


@pytest.fixture(scope="session", autouse=True)
def test_db_dir():
    """Temp directory holding the test database, removed when the session ends."""
    yield _DB_DIR
    shutil.rmtree(_DB_DIR, ignore_errors=True)


@pytest.fixture(scope="session")
def client(test_db_dir):
    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app) as test_client:
        yield test_client
