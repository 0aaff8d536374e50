from typing import TYPE_CHECKING
from ...core.config import get_settings, DEVICE_STORE_MONGO
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_device_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register database handles in the container.
        This is the ONLY place where database connections are registered.
        Nothing is registered when the in-memory device store is configured.
        """
        settings = get_settings()
        if settings.device_store != DEVICE_STORE_MONGO:
            return

        container.register_singleton("database", get_database())
        container.register_singleton("device_collection", get_device_collection())
