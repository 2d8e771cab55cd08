"""
User repositories for the Credential Service.

`MongoUserRepository` is the production store. `InMemoryUserRepository`
keeps records in a list and is selected with USER_REPOSITORY=inmemory for
local runs and tests without a MongoDB deployment.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from .models import User, USERS_COLLECTION

logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """Storage port for user records."""

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Store a new user and return it with its generated identifier."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Return the first user whose email matches exactly, or None."""


class MongoUserRepository(UserRepository):
    """MongoDB implementation of the user repository.

    No unique index is created on `email`: two signups for the same address
    produce two documents and lookups return whichever MongoDB yields first.
    """

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def insert(self, user: User) -> User:
        result = await self.collection.insert_one(user.to_document())
        user.id = result.inserted_id
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        document = await self.collection.find_one({"email": email})
        if not document:
            return None
        return User.from_document(document)


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of the user repository.

    Mirrors the Mongo behaviour: identifiers are fresh ObjectIds, emails are
    not unique and lookups return the earliest inserted match.
    """

    def __init__(self) -> None:
        self._users: List[User] = []

    async def insert(self, user: User) -> User:
        stored = User(email=user.email, password=user.password, id=ObjectId())
        self._users.append(stored)
        user.id = stored.id
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users:
            if user.email == email:
                return user
        return None

    def all(self) -> List[User]:
        """Snapshot of stored records, for tests and local inspection."""
        return list(self._users)


def create_user_repository(kind: str, database=None) -> UserRepository:
    """
    Create the repository named by USER_REPOSITORY.

    Args:
        kind: "mongodb" or "inmemory"
        database: Motor database, required for "mongodb"

    Raises:
        ValueError: If kind is unknown or no database is given for "mongodb"
    """
    kind = kind.lower()

    if kind == "mongodb":
        if database is None:
            raise ValueError("A MongoDB database is required when USER_REPOSITORY=mongodb")
        return MongoUserRepository(database[USERS_COLLECTION])

    if kind == "inmemory":
        logger.warning("Using in-memory user repository; records are lost on restart")
        return InMemoryUserRepository()

    raise ValueError(
        f"Invalid USER_REPOSITORY value: {kind}. "
        "Expected 'mongodb' or 'inmemory'"
    )
