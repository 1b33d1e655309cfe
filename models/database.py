"""Database models and connection setup."""

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo import ASCENDING
from typing import Optional
from config.settings import database_name_from_url, settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

USERS_COLLECTION = "users"
EXERCISES_COLLECTION = "exercises"


class Database:
    """Database connection manager.

    One instance is built at application startup and handed to the
    repositories; nothing reaches for a module-level client.
    """

    def __init__(self, url: str, name: Optional[str] = None):
        self.url = url
        self.name = name or database_name_from_url(url)
        self.client: Optional[AsyncIOMotorClient] = None

    def connect(self) -> None:
        """Create the motor client. Sockets are opened lazily by the driver."""
        self.client = AsyncIOMotorClient(self.url)
        logger.info(f"Connected to MongoDB database '{self.name}'")

    def close(self) -> None:
        """Close database connection."""
        if self.client:
            self.client.close()
            self.client = None
            logger.info("Disconnected from MongoDB")

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self.client is None:
            raise RuntimeError("Database is not connected")
        return self.client[self.name]

    @property
    def users(self) -> AsyncIOMotorCollection:
        """Get users collection."""
        return self.database[USERS_COLLECTION]

    @property
    def exercises(self) -> AsyncIOMotorCollection:
        """Get exercises collection."""
        return self.database[EXERCISES_COLLECTION]

    async def init_indexes(self) -> None:
        """Create the indexes the log query relies on."""
        # Usernames are intentionally not unique.
        await self.exercises.create_index([("userId", ASCENDING), ("date", ASCENDING)])
        logger.info("MongoDB initialized: exercise indexes created")


async def init_mongo(url: str = settings.mongodb_url) -> Database:
    """Initialize MongoDB connection and collection indexes."""
    db = Database(url)
    db.connect()
    await db.init_indexes()
    return db
