"""Test configuration and fixtures for the photo library.

This module provides isolated test environments:
- Temporary SQLite key/value store
- Temporary local object storage
- Settings with known admin and token secrets
"""
from pathlib import Path
from typing import Dict, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from photolib.application.services import LibraryService, PhotoService, UserService
from photolib.application.services.photo_service import PhotoPart
from photolib.config import Settings
from photolib.infrastructure.database import open_store
from photolib.infrastructure.repositories import LibraryRepository, UserRepository
from photolib.infrastructure.storage import LocalStorage, StorageConfig
from photolib.models import ADMIN_ACTOR, SafeUser
from photolib.services.tokens import SessionTokenService

ADMIN_SECRET = "test-admin-secret"
TOKEN_SECRET = "test-token-secret"


# ============================================================================
# Isolated environment
# ============================================================================

@pytest.fixture(scope="function")
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test database file."""
    return Settings(
        admin_secret=ADMIN_SECRET,
        token_secret=TOKEN_SECRET,
        database_path=tmp_path / "test.db",
        log_level="DEBUG",
    )


@pytest.fixture(scope="function")
def storage(tmp_path: Path) -> LocalStorage:
    """Local object storage under tmp_path."""
    return LocalStorage(StorageConfig(backend="local", base_path=tmp_path / "storage"))


@pytest_asyncio.fixture
async def store(tmp_path: Path):
    """Fresh key/value store for each test."""
    kv = await open_store(tmp_path / "kv.db")
    yield kv
    await kv.close()


@pytest.fixture
def token_service() -> SessionTokenService:
    return SessionTokenService(TOKEN_SECRET)


# ============================================================================
# Services
# ============================================================================

@pytest.fixture
def photo_service(store, storage) -> PhotoService:
    return PhotoService(library_repository=LibraryRepository(store), storage=storage)


@pytest.fixture
def library_service(store, photo_service) -> LibraryService:
    return LibraryService(library_repository=LibraryRepository(store), photo_service=photo_service)


@pytest.fixture
def user_service(store, token_service) -> UserService:
    return UserService(user_repository=UserRepository(store), token_service=token_service)


@pytest.fixture
def admin() -> SafeUser:
    return ADMIN_ACTOR.model_copy(deep=True)


@pytest.fixture
def member() -> SafeUser:
    """Non-admin actor with access to library L1."""
    return SafeUser(username="member", library_access=["L1"], admin_access=False)


@pytest.fixture
def outsider() -> SafeUser:
    """Non-admin actor without access to L1."""
    return SafeUser(username="outsider", library_access=["other"], admin_access=False)


@pytest.fixture
def photo_parts() -> Dict[str, PhotoPart]:
    """The three binary parts of a photo upload."""
    return {
        "original": PhotoPart(content=b"original-bytes", content_type="image/png"),
        "thumbnail": PhotoPart(content=b"thumb-bytes", content_type="image/webp"),
        "preview": PhotoPart(content=b"preview-bytes", content_type="image/jpeg"),
    }


# ============================================================================
# HTTP client
# ============================================================================

@pytest.fixture(scope="function")
def client(settings: Settings, storage: LocalStorage) -> Generator[TestClient, None, None]:
    """Create test client with fresh isolated environment.

    Usage:
        def test_something(client):
            response = client.get("/api/library", params={"library": "L1"})
    """
    from photolib.main import create_app

    app = create_app(settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": ADMIN_SECRET}


def create_and_login(
    client: TestClient,
    username: str,
    password: str,
    library_access: list[str],
    admin_access: bool = False
) -> Dict[str, str]:
    """Create a user as admin, log in, and return bearer headers."""
    response = client.post(
        "/api/user",
        json={
            "username": username,
            "password": password,
            "library_access": library_access,
            "admin_access": admin_access,
        },
        headers={"Authorization": ADMIN_SECRET},
    )
    assert response.status_code == 200, response.text

    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


def upload_files(content: bytes = b"\xff\xd8jpeg") -> Dict[str, tuple]:
    """Multipart files for the three photo variants."""
    return {
        "original": ("original.jpg", content, "image/jpeg"),
        "thumbnail": ("thumb.jpg", content + b"-t", "image/jpeg"),
        "preview": ("preview.jpg", content + b"-p", "image/jpeg"),
    }
