"""
Database connection management
"""

import logging
from dataclasses import dataclass

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from config.settings import (
    MONGODB_URI,
    MONGODB_DATABASE,
    MONGODB_COLLECTION,
    MONGODB_SERVER_SELECTION_TIMEOUT_MS,
)

logger = logging.getLogger(__name__)


@dataclass
class DatabaseConnection:
    """Open MongoDB client together with the cars collection"""
    client: AsyncMongoClient
    collection: AsyncCollection

    async def ping(self) -> None:
        """Round-trip to the server; raises PyMongoError when unreachable"""
        await self.client.admin.command("ping")


async def init_database(
    uri: str = MONGODB_URI,
    database: str = MONGODB_DATABASE,
    collection: str = MONGODB_COLLECTION,
) -> DatabaseConnection:
    """Connect to MongoDB and verify connectivity before serving requests"""
    client = AsyncMongoClient(
        uri,
        serverSelectionTimeoutMS=MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    )
    connection = DatabaseConnection(
        client=client,
        collection=client[database][collection],
    )

    # Test connection
    try:
        await connection.ping()
    except Exception:
        await client.close()
        raise

    logger.info("Database initialized successfully")
    return connection


async def close_database(connection: DatabaseConnection) -> None:
    """Close the MongoDB client and its connection pool"""
    await connection.client.close()
    logger.info("Database connections closed")
