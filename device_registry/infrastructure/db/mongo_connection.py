# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import DeviceFields

logger = logging.getLogger(__name__)

DEVICE_COLLECTION_NAME = "devices"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    # Explicit timeout so an unreachable server fails fast instead of hanging
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        tz_aware=True,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_device_collection() -> AsyncIOMotorCollection:
    """
    Get devices collection from MongoDB

    Returns:
        MongoDB collection for devices
    """
    return get_database()[DEVICE_COLLECTION_NAME]


async def ensure_device_indexes() -> None:
    """
    Create the indexes backing ordered listing and brand/state filters.

    Uniqueness of device IDs comes from the mandatory _id index.
    """
    collection = get_device_collection()
    await collection.create_index([(DeviceFields.BRAND, ASCENDING)], name="idx_devices_brand")
    await collection.create_index([(DeviceFields.STATE, ASCENDING)], name="idx_devices_state")
    await collection.create_index([(DeviceFields.CREATED_AT, DESCENDING)], name="idx_devices_created_at")
    logger.info("Device collection indexes ensured")


async def ping_database() -> bool:
    """Return True when the MongoDB server answers a ping"""
    try:
        await get_database().command("ping")
        return True
    except Exception as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False


def close_connection() -> None:
    """Close the MongoDB client and forget the cached instances"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
