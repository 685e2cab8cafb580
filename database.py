# database.py
import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ConfigurationError, InvalidURI

from config import Settings
from errors import DatabaseUnavailableError

logger = logging.getLogger(__name__)

# collection -> fields carrying a unique index
UNIQUE_INDEXES = {
    "students": ["email"],
    "courses": ["name"],
}


class Database:
    """Explicitly constructed persistence handle shared through ``app.state``."""

    def __init__(self, client: Optional[AsyncIOMotorClient], name: str):
        self.client = client
        self.name = name
        self._ready = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        if not settings.mongodb_uri:
            logger.error("MONGODB_URI is not set; database operations will fail")
            return cls(None, settings.mongodb_db)
        try:
            client = AsyncIOMotorClient(
                settings.mongodb_uri,
                serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
                tz_aware=True,
            )
        except (ConfigurationError, InvalidURI, ValueError) as e:
            logger.error(f"MongoDB client could not be created: {e}")
            return cls(None, settings.mongodb_db)
        try:
            name = client.get_default_database().name
        except ConfigurationError:
            name = settings.mongodb_db
        return cls(client, name)

    @property
    def db(self):
        if self.client is None:
            raise DatabaseUnavailableError()
        return self.client[self.name]

    @property
    def students(self):
        return self.db["students"]

    @property
    def courses(self):
        return self.db["courses"]

    async def ready(self) -> "Database":
        if self._ready:
            return self
        for collection, fields in UNIQUE_INDEXES.items():
            for field in fields:
                await self.db[collection].create_index(field, unique=True)
        self._ready = True
        logger.info(f"MongoDB connected, using database '{self.name}'")
        return self

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


async def get_database(request: Request) -> Database:
    return await request.app.state.database.ready()


def parse_object_id(value: str) -> Optional[ObjectId]:
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def serialize(document: Dict[str, Any]) -> Dict[str, Any]:
    document = dict(document)
    document["id"] = str(document.pop("_id"))
    return document
