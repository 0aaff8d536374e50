from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ..models.device import Device, DeviceState


class DeviceRepository(ABC):
    """
    Repository interface - defines contract for device data access.

    Implementations raise DeviceNotFoundError / DeviceAlreadyExistsError from
    domain.exceptions where documented and wrap any other store failure in
    DeviceRepositoryError. Each write is atomic on its own; there are no
    cross-call transactions.
    """

    @abstractmethod
    async def create(self, device: Device) -> None:
        """Persist a new device. Raises DeviceAlreadyExistsError on ID collision"""
        pass

    @abstractmethod
    async def get_by_id(self, device_id: UUID) -> Device:
        """Find device by ID. Raises DeviceNotFoundError if absent"""
        pass

    @abstractmethod
    async def list(self, limit: int, offset: int) -> List[Device]:
        """List devices, most recently created first"""
        pass

    @abstractmethod
    async def list_by_brand(self, brand: str, limit: int, offset: int) -> List[Device]:
        """List devices with an exact brand match, most recently created first"""
        pass

    @abstractmethod
    async def list_by_state(self, state: DeviceState, limit: int, offset: int) -> List[Device]:
        """List devices in the given state, most recently created first"""
        pass

    @abstractmethod
    async def update(self, device: Device) -> None:
        """Replace name, brand and state by ID. Raises DeviceNotFoundError if absent"""
        pass

    @abstractmethod
    async def delete(self, device_id: UUID) -> None:
        """Remove device by ID. Raises DeviceNotFoundError if absent"""
        pass

    @abstractmethod
    async def exists_by_id(self, device_id: UUID) -> bool:
        """Check whether a device with this ID is stored"""
        pass
