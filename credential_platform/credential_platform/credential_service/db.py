"""
MongoDB connection management for the Credential Service
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def create_client(uri: str) -> AsyncIOMotorClient:
    """
    Create the Motor client for the configured URI.

    Motor connects lazily, so this never touches the network.
    """
    return AsyncIOMotorClient(uri)


def get_database(client: AsyncIOMotorClient, default_name: str) -> AsyncIOMotorDatabase:
    """
    Resolve the database named in the connection string, falling back to
    `default_name` when the URI does not carry one.
    """
    return client.get_default_database(default=default_name)


async def check_db_connection(client: AsyncIOMotorClient) -> bool:
    """
    Ping the MongoDB deployment.

    Returns:
        bool: True if the server answered, False otherwise
    """
    try:
        await client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.error(f"MongoDB connection check failed: {e}")
        return False


async def init_db(client: AsyncIOMotorClient) -> None:
    """
    Verify connectivity on startup.

    A failure is logged and the service keeps running; there is no retry.
    """
    if await check_db_connection(client):
        logger.info("MongoDB connected")
    else:
        logger.error("MongoDB unavailable; requests touching the store will fail")


def close_client(client: AsyncIOMotorClient) -> None:
    client.close()
    logger.info("MongoDB client closed")
