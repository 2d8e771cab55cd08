"""
Credential Service - signup and login backed by MongoDB, issuing signed tokens
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import uvicorn

from .config import Settings, get_settings
from .db import create_client, get_database, init_db, close_client
from .repository import UserRepository, create_user_repository
from .routes import health
from .schemas import Credentials, Token
from .service import CredentialService, InvalidCredentialsError

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ping MongoDB on startup and close the client on shutdown"""
    client = app.state.mongo_client
    if client is not None:
        await init_db(client)
    yield
    if client is not None:
        close_client(client)


def get_credential_service(request: Request) -> CredentialService:
    return request.app.state.credential_service


async def invalid_credentials_handler(_request: Request, _exc: InvalidCredentialsError):
    return PlainTextResponse("Invalid", status_code=status.HTTP_400_BAD_REQUEST)


def create_app(settings: Optional[Settings] = None, repository: Optional[UserRepository] = None) -> FastAPI:
    """
    Build the application with its own store handle and signing secret.

    Args:
        settings: Configuration; read from the environment when omitted
        repository: User repository to use instead of the one named by USER_REPOSITORY
    """
    settings = settings or get_settings()
    configure_logging(settings)

    mongo_client = None
    if repository is None:
        database = None
        if settings.USER_REPOSITORY.lower() == "mongodb":
            mongo_client = create_client(settings.MONGO_URI)
            database = get_database(mongo_client, settings.MONGO_DB)
        repository = create_user_repository(settings.USER_REPOSITORY, database)

    app = FastAPI(
        title="Credential Service",
        description="Signup and login issuing signed session tokens",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.mongo_client = mongo_client
    app.state.credential_service = CredentialService(
        repository,
        secret=settings.JWT_SECRET,
        rounds=settings.BCRYPT_ROUNDS
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidCredentialsError, invalid_credentials_handler)
    app.include_router(health.router)

    @app.post("/signup", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
    async def signup(credentials: Credentials, service: CredentialService = Depends(get_credential_service)):
        try:
            return await service.signup(credentials.email, credentials.password)
        except Exception as e:
            logger.exception(f"[Signup] Failed to register user: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to register user"
            ) from e

    @app.post("/login", response_model=Token)
    async def login(credentials: Credentials, service: CredentialService = Depends(get_credential_service)):
        token = await service.login(credentials.email, credentials.password)
        return Token(token=token)

    @app.post("/forgot-password", response_class=PlainTextResponse)
    async def forgot_password(service: CredentialService = Depends(get_credential_service)):
        return await service.forgot_password()

    return app


def run() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Auth service running on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "credential_platform.credential_platform.credential_service.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT
    )


if __name__ == "__main__":
    run()
