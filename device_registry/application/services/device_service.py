# Standard library imports
import logging
from typing import List, Optional, Tuple, Union
from uuid import UUID

# Local application imports
from ...domain.constants import DeviceFields
from ...domain.exceptions import BusinessRuleViolationError, DeviceValidationError
from ...domain.models.device import Device, DeviceState, parse_state
from ...domain.repositories.device_repository import DeviceRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 10


def normalize_pagination(limit: int, offset: int) -> Tuple[int, int]:
    """
    Clamp pagination input instead of rejecting it.

    Non-positive limits fall back to DEFAULT_PAGE_LIMIT and negative offsets to 0.
    """
    if limit <= 0:
        limit = DEFAULT_PAGE_LIMIT
    if offset < 0:
        offset = 0
    return limit, offset


class DeviceService:
    """
    Orchestrates device operations.

    The only writer path to the repository: every mutation is loaded, guarded,
    validated and persisted here, in that order, stopping at the first failure.
    Holds no state besides the repository reference, so one instance can serve
    concurrent requests.
    """

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def create_device(self, name: str, brand: str) -> Device:
        """
        Create a new active device

        Raises:
            DeviceValidationError: If name or brand are invalid
            DeviceAlreadyExistsError: If the generated ID collides in the store
        """
        device = Device.new(name, brand)
        await self.device_repository.create(device)
        logger.info(f"Created device {device.id} ({device.brand} {device.name})")
        return device

    async def get_device(self, device_id: UUID) -> Device:
        """Get a device by ID. Raises DeviceNotFoundError if absent"""
        return await self.device_repository.get_by_id(device_id)

    async def list_devices(self, limit: int, offset: int) -> List[Device]:
        """List devices, most recently created first"""
        limit, offset = normalize_pagination(limit, offset)
        return await self.device_repository.list(limit, offset)

    async def list_devices_by_brand(self, brand: str, limit: int, offset: int) -> List[Device]:
        """
        List devices of one brand

        Raises:
            DeviceValidationError: If brand is empty
        """
        if not brand:
            raise DeviceValidationError(DeviceFields.BRAND, "cannot be empty")
        limit, offset = normalize_pagination(limit, offset)
        return await self.device_repository.list_by_brand(brand, limit, offset)

    async def list_devices_by_state(
        self,
        state: Union[DeviceState, str],
        limit: int,
        offset: int,
    ) -> List[Device]:
        """
        List devices in one state

        Raises:
            DeviceValidationError: If state is not a permitted value
        """
        device_state = parse_state(state)
        limit, offset = normalize_pagination(limit, offset)
        return await self.device_repository.list_by_state(device_state, limit, offset)

    async def update_device(
        self,
        device_id: UUID,
        name: str,
        brand: str,
        state: Union[DeviceState, str],
    ) -> Device:
        """
        Replace name, brand and state of a device

        The in-use guard is checked against the stored device, whatever the
        requested new state is.

        Raises:
            DeviceNotFoundError: If the device does not exist
            BusinessRuleViolationError: If the device is currently in use
            DeviceValidationError: If any new value is invalid
        """
        current = await self.device_repository.get_by_id(device_id)
        self._check_guard(current.can_update, device_id, "update")

        candidate = current.with_values(name, brand, state).validate()
        await self.device_repository.update(candidate)
        logger.info(f"Updated device {device_id}")
        return candidate

    async def partial_update_device(
        self,
        device_id: UUID,
        name: Optional[str] = None,
        brand: Optional[str] = None,
        state: Union[DeviceState, str, None] = None,
    ) -> Device:
        """
        Overwrite only the provided fields of a device

        With no fields provided the stored device is persisted unchanged.

        Raises:
            DeviceNotFoundError: If the device does not exist
            BusinessRuleViolationError: If the device is currently in use
            DeviceValidationError: If a provided value is invalid
        """
        current = await self.device_repository.get_by_id(device_id)
        self._check_guard(current.can_update, device_id, "partial update")

        merged = current.with_changes(name=name, brand=brand, state=state).validate()
        await self.device_repository.update(merged)
        logger.info(f"Partially updated device {device_id}")
        return merged

    async def delete_device(self, device_id: UUID) -> None:
        """
        Delete a device

        Raises:
            DeviceNotFoundError: If the device does not exist
            BusinessRuleViolationError: If the device is currently in use
        """
        current = await self.device_repository.get_by_id(device_id)
        self._check_guard(current.can_delete, device_id, "delete")

        await self.device_repository.delete(device_id)
        logger.info(f"Deleted device {device_id}")

    @staticmethod
    def _check_guard(guard, device_id: UUID, operation: str) -> None:
        try:
            guard()
        except BusinessRuleViolationError as e:
            logger.warning(f"Rejected {operation} of device {device_id}: {e.reason}")
            raise
