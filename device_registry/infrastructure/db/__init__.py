from .mongo_connection import (
    close_connection,
    ensure_device_indexes,
    get_database,
    get_device_collection,
    ping_database,
)
from .mongo_device_repository import MongoDeviceRepository

__all__ = [
    "close_connection",
    "ensure_device_indexes",
    "get_database",
    "get_device_collection",
    "ping_database",
    "MongoDeviceRepository",
]
