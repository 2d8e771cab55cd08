from passlib.context import CryptContext
import jwt

ALGORITHM = "HS256"
DEFAULT_BCRYPT_ROUNDS = 10


def build_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


pwd_context = build_password_context()


def hash_password(password: str, context: CryptContext = pwd_context) -> str:
    return context.hash(password)


def verify_password(plain_password: str, hashed_password: str, context: CryptContext = pwd_context) -> bool:
    return context.verify(plain_password, hashed_password)


def create_access_token(user_id: str, secret: str) -> str:
    # Only the record identifier is signed; no exp/iss/aud claims
    payload = {"id": user_id}
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_token(token: str, secret: str) -> dict:
    """
    Verify a token issued by create_access_token and return its claims.

    Raises:
        jwt.InvalidTokenError: If the signature does not match or the token is malformed
    """
    return jwt.decode(token, secret, algorithms=[ALGORITHM])
