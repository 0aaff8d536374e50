import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings, DEVICE_STORE_MEMORY, DEVICE_STORE_MONGO
from ...domain.repositories.device_repository import DeviceRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository
from ...infrastructure.memory.in_memory_device_repository import InMemoryDeviceRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the DeviceRepository implementation chosen by settings.device_store.

        Raises:
            ValueError: If the configured store is unknown
        """
        settings = get_settings()

        # Domain interfaces -> Infrastructure implementations
        if settings.device_store == DEVICE_STORE_MONGO:
            device_collection = container.get("device_collection")
            container.register_singleton(
                DeviceRepository,
                MongoDeviceRepository(device_collection=device_collection)
            )
        elif settings.device_store == DEVICE_STORE_MEMORY:
            logger.warning("Using in-memory device store; devices are lost on restart")
            container.register_singleton(DeviceRepository, InMemoryDeviceRepository())
        else:
            raise ValueError(
                f"Unknown DEVICE_STORE '{settings.device_store}' "
                f"(expected '{DEVICE_STORE_MONGO}' or '{DEVICE_STORE_MEMORY}')"
            )
