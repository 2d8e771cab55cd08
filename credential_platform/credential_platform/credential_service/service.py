"""
Credential Service: signup, login and the forgot-password placeholder.
"""
import logging

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

from .auth import build_password_context, create_access_token, hash_password, verify_password, DEFAULT_BCRYPT_ROUNDS
from .models import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

SIGNUP_MESSAGE = "User created"
FORGOT_PASSWORD_MESSAGE = "Dummy forgot password endpoint"


class InvalidCredentialsError(Exception):
    """Raised for an unknown email and for a wrong password alike."""


class CredentialService:
    def __init__(self, repository: UserRepository, secret: str, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.repository = repository
        self.secret = secret
        self.pwd_context: CryptContext = build_password_context(rounds)

    async def signup(self, email: str, password: str) -> str:
        """
        Hash the password and store a new user record.

        No existing-email check is made, so repeated signups for one address
        each create a record. Store errors propagate to the caller.
        """
        hashed_pw = await run_in_threadpool(hash_password, password, self.pwd_context)
        user = await self.repository.insert(User(email=email, password=hashed_pw))
        logger.info(f"[Signup] User created: user_id={user.id}")
        return SIGNUP_MESSAGE

    async def login(self, email: str, password: str) -> str:
        """
        Verify a credential pair and return a signed token for the user.

        Raises:
            InvalidCredentialsError: If no user has this email or the password does not match
        """
        user = await self.repository.find_by_email(email)
        if not user or not await run_in_threadpool(self._password_matches, password, user.password):
            logger.info("[Login] Invalid credentials")
            raise InvalidCredentialsError()

        logger.info(f"[Login] Successful login: user_id={user.id}")
        return create_access_token(str(user.id), self.secret)

    def _password_matches(self, password: str, hashed_password: str) -> bool:
        # passlib raises ValueError for NUL bytes and for hashes it cannot identify
        try:
            return verify_password(password, hashed_password, self.pwd_context)
        except ValueError:
            return False

    async def forgot_password(self) -> str:
        return FORGOT_PASSWORD_MESSAGE
