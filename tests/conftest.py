import os
import tempfile

import pytest

# The app builds its storage backend at import time; point it at a scratch
# directory before any test module imports it.
os.environ["STORAGE_BACKEND"] = "local"
os.environ.setdefault("FILES_DIR", tempfile.mkdtemp(prefix="file-store-tests-"))
os.environ.setdefault("DD_TRACE_ENABLED", "false")

from interfaces import StorageBackend  # noqa: E402


class InMemoryStorage(StorageBackend):
    """Dictionary-backed storage keeping insertion order."""

    def __init__(self, files: dict[str, bytes] | None = None):
        self.files: dict[str, bytes] = dict(files or {})

    def exists(self, name: str) -> bool:
        return name in self.files

    def get(self, name: str) -> bytes:
        return self.files[name]

    def put(self, name: str, data: bytes) -> None:
        self.files[name] = data

    def delete(self, name: str) -> None:
        del self.files[name]

    def list(self) -> list[str]:
        return list(self.files)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def client(storage):
    """Test client whose routes all share the in-memory storage fixture."""
    from fastapi.testclient import TestClient

    from dependencies import get_storage
    from main import app

    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides = {}
