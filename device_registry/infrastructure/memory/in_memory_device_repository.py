"""In-memory device store used for local runs and tests."""
import asyncio
from typing import Callable, Dict, List
from uuid import UUID

from ...domain.exceptions import DeviceAlreadyExistsError, DeviceNotFoundError
from ...domain.models.device import Device, DeviceState
from ...domain.repositories.device_repository import DeviceRepository


class InMemoryDeviceRepository(DeviceRepository):
    """
    Dict-backed implementation of DeviceRepository.

    Devices are immutable snapshots, so stored instances can be handed out
    directly. A single lock serialises writes so each call applies atomically.
    Data lives only as long as the process.
    """

    def __init__(self) -> None:
        self._devices: Dict[UUID, Device] = {}
        self._lock = asyncio.Lock()

    async def create(self, device: Device) -> None:
        async with self._lock:
            if device.id in self._devices:
                raise DeviceAlreadyExistsError(device.id)
            self._devices[device.id] = device

    async def get_by_id(self, device_id: UUID) -> Device:
        device = self._devices.get(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        return device

    async def list(self, limit: int, offset: int) -> List[Device]:
        return self._page(lambda device: True, limit, offset)

    async def list_by_brand(self, brand: str, limit: int, offset: int) -> List[Device]:
        return self._page(lambda device: device.brand == brand, limit, offset)

    async def list_by_state(self, state: DeviceState, limit: int, offset: int) -> List[Device]:
        return self._page(lambda device: device.state == state, limit, offset)

    async def update(self, device: Device) -> None:
        async with self._lock:
            current = self._devices.get(device.id)
            if current is None:
                raise DeviceNotFoundError(device.id)
            # Only mutable fields are replaced
            self._devices[device.id] = current.with_changes(
                name=device.name,
                brand=device.brand,
                state=device.state,
            )

    async def delete(self, device_id: UUID) -> None:
        async with self._lock:
            if self._devices.pop(device_id, None) is None:
                raise DeviceNotFoundError(device_id)

    async def exists_by_id(self, device_id: UUID) -> bool:
        return device_id in self._devices

    def _page(self, predicate: Callable[[Device], bool], limit: int, offset: int) -> List[Device]:
        matches = [device for device in self._devices.values() if predicate(device)]
        matches.sort(key=lambda device: (device.created_at, str(device.id)), reverse=True)
        return matches[offset:offset + limit]
