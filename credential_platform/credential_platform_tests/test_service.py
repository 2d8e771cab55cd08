"""
Unit tests for the credential flow without the HTTP layer.
"""
import pytest
import jwt

from credential_platform.credential_platform.credential_service.auth import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from credential_platform.credential_platform.credential_service.models import User
from credential_platform.credential_platform.credential_service.repository import InMemoryUserRepository
from credential_platform.credential_platform.credential_service.service import (
    CredentialService,
    InvalidCredentialsError,
)

SECRET = "service-test-secret-key-long-enough-for-hs256"


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def service(repository):
    return CredentialService(repository, secret=SECRET, rounds=4)


def test_default_hash_uses_cost_factor_10():
    hashed = hash_password("Secret123!")
    assert hashed.startswith("$2b$10$")
    assert verify_password("Secret123!", hashed)
    assert not verify_password("secret123!", hashed)


def test_configured_rounds_are_applied(service):
    hashed = service.pwd_context.hash("pw")
    assert hashed.startswith("$2b$04$")


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_token_carries_only_identifier():
    token = create_access_token("65f0c0ffee0000000000abcd", SECRET)
    assert decode_token(token, SECRET) == {"id": "65f0c0ffee0000000000abcd"}


def test_decode_token_rejects_tampering():
    token = create_access_token("65f0c0ffee0000000000abcd", SECRET)
    with pytest.raises(jwt.InvalidTokenError):
        decode_token(token + "x", SECRET)


@pytest.mark.asyncio
async def test_signup_then_login(service, repository):
    assert await service.signup("a@example.com", "pw") == "User created"

    token = await service.login("a@example.com", "pw")
    assert decode_token(token, SECRET)["id"] == str(repository.all()[0].id)


@pytest.mark.asyncio
async def test_login_unknown_email_raises(service):
    with pytest.raises(InvalidCredentialsError):
        await service.login("missing@example.com", "pw")


@pytest.mark.asyncio
async def test_login_wrong_password_raises(service):
    await service.signup("a@example.com", "pw")
    with pytest.raises(InvalidCredentialsError):
        await service.login("a@example.com", "PW")


@pytest.mark.asyncio
async def test_email_match_is_exact(service):
    await service.signup("a@example.com", "pw")
    with pytest.raises(InvalidCredentialsError):
        await service.login("A@example.com", "pw")


@pytest.mark.asyncio
async def test_forgot_password_touches_nothing(service, repository):
    assert await service.forgot_password() == "Dummy forgot password endpoint"
    assert repository.all() == []


@pytest.mark.asyncio
async def test_login_against_non_bcrypt_hash_is_rejected(service, repository):
    # Record not written by this service
    await repository.insert(User(email="legacy@example.com", password="plaintext-password"))
    with pytest.raises(InvalidCredentialsError):
        await service.login("legacy@example.com", "plaintext-password")


@pytest.mark.asyncio
async def test_login_with_nul_byte_password_is_rejected(service):
    await service.signup("a@example.com", "pw")
    with pytest.raises(InvalidCredentialsError):
        await service.login("a@example.com", "p\x00w")
