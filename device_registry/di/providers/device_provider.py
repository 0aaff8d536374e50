from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...application.services.device_service import DeviceService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceProvider:
    """Device service provider - registers the device orchestration service"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register DeviceService.
        The service is stateless, so one shared instance serves every request.
        """
        container.register_singleton(
            DeviceService,
            DeviceService(device_repository=container.get(DeviceRepository)),
        )
