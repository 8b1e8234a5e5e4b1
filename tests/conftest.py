import os
import sys
import tempfile
from pathlib import Path

# Keep settings away from any developer .env database or upload directory
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="candidate-intake-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_ROOT / 'app.db'}"
os.environ["UPLOAD_DIR"] = str(_TEST_ROOT / "uploads")

# Add project root to Python path (for direct invocation)
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import copy

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from api.main import app
from services.intake_models import StoredFile
from utils.database import build_engine, get_db, init_db
from utils.upload_storage import UploadStorage, get_upload_storage


VALID_PAYLOAD = {
    "firstName": "Ana",
    "lastName": "Ruiz",
    "email": "ana@example.com",
    "phone": "+34123456789",
    "educations": [
        {
            "institution": "MIT",
            "degree": "BSc",
            "fieldOfStudy": "CS",
            "startDate": "2018-09-01",
            "endDate": "2022-06-01",
            "current": False,
        }
    ],
    "experiences": [],
}


def make_payload(**overrides) -> dict:
    payload = copy.deepcopy(VALID_PAYLOAD)
    payload.update(overrides)
    return payload


def write_stored_file(directory: Path, name: str = "resume-1-abc.pdf", size: int = 16) -> StoredFile:
    """Put a file into upload storage the way the upload step would."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(b"%PDF" + b"0" * (size - 4))
    return StoredFile(
        file_name=name,
        original_name="cv.pdf",
        media_type="application/pdf",
        size=size,
        path=path,
    )


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def upload_dir(tmp_path) -> Path:
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def storage(upload_dir) -> UploadStorage:
    return UploadStorage(upload_dir, max_files=3, max_size=5 * 1024 * 1024)


@pytest.fixture
def client(engine, storage):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_upload_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def payload_factory():
    return make_payload


@pytest.fixture
def stored_file_factory(upload_dir):
    def factory(name: str = "resume-1-abc.pdf", size: int = 16) -> StoredFile:
        return write_stored_file(upload_dir, name=name, size=size)

    return factory
