import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sunshine.app import create_app
from sunshine.config import Settings
from sunshine.services.registration_store import RegistrationStore

TEST_PIN = "4321"
TEST_SECRET = "test-cookie-secret"


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "db.json"


@pytest.fixture()
def settings(db_path: Path) -> Settings:
    return Settings(admin_pin=TEST_PIN, cookie_secret=TEST_SECRET, db_path=db_path)


@pytest.fixture()
def store(db_path: Path) -> RegistrationStore:
    s = RegistrationStore(db_path)
    s.load()
    return s


@pytest.fixture()
def unwritable_path(tmp_path: Path) -> Path:
    """A store path whose parent is a regular file, so every write fails."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    return blocker / "db.json"


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture()
def admin_client(client: TestClient) -> TestClient:
    r = client.post("/admin/login", data={"pin": TEST_PIN}, follow_redirects=False)
    assert r.status_code == 303
    return client
