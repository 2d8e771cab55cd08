import pytest
from fastapi.testclient import TestClient

from credential_platform.credential_platform.credential_service.config import Settings
from credential_platform.credential_platform.credential_service.main import create_app
from credential_platform.credential_platform.credential_service.repository import InMemoryUserRepository

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def settings():
    # Low bcrypt cost keeps the suite fast
    return Settings(
        _env_file=None,
        JWT_SECRET=TEST_SECRET,
        BCRYPT_ROUNDS=4,
        USER_REPOSITORY="inmemory",
        LOG_LEVEL="INFO",
    )


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def client(settings, repository):
    with TestClient(create_app(settings, repository)) as c:
        yield c
