# Standard library imports
from typing import Optional, List, Dict, Any
from uuid import UUID

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device, DeviceState
from ...domain.constants import DeviceFields
from ...domain.exceptions import (
    DeviceAlreadyExistsError,
    DeviceNotFoundError,
    DeviceRepositoryError,
)
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_device_collection


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.device_collection = device_collection if device_collection is not None else get_device_collection()

    async def create(self, device: Device) -> None:
        """Insert a new device document"""
        try:
            await self.device_collection.insert_one(self._device_to_dict(device))
        except DuplicateKeyError:
            raise DeviceAlreadyExistsError(device.id) from None
        except PyMongoError as e:
            raise DeviceRepositoryError(f"Error creating device: {str(e)}", cause=e) from e

    async def get_by_id(self, device_id: UUID) -> Device:
        """Find device by ID"""
        try:
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: str(device_id)})
        except PyMongoError as e:
            raise DeviceRepositoryError(f"Error finding device by ID: {str(e)}", cause=e) from e

        if document is None:
            raise DeviceNotFoundError(device_id)
        return self._document_to_device(document)

    async def list(self, limit: int, offset: int) -> List[Device]:
        """List devices, newest first"""
        return await self._find_many({}, limit, offset, "Error listing devices")

    async def list_by_brand(self, brand: str, limit: int, offset: int) -> List[Device]:
        """List devices of a brand, newest first"""
        return await self._find_many(
            {DeviceFields.BRAND: brand}, limit, offset, "Error listing devices by brand"
        )

    async def list_by_state(self, state: DeviceState, limit: int, offset: int) -> List[Device]:
        """List devices in a state, newest first"""
        return await self._find_many(
            {DeviceFields.STATE: DeviceState(state).value}, limit, offset, "Error listing devices by state"
        )

    async def update(self, device: Device) -> None:
        """Replace the mutable fields of an existing device"""
        try:
            update_result = await self.device_collection.update_one(
                {DeviceFields.MONGO_ID: str(device.id)},
                {"$set": {
                    DeviceFields.NAME: device.name,
                    DeviceFields.BRAND: device.brand,
                    DeviceFields.STATE: DeviceState(device.state).value,
                }},
            )
        except PyMongoError as e:
            raise DeviceRepositoryError(f"Error updating device: {str(e)}", cause=e) from e

        if update_result.matched_count == 0:
            raise DeviceNotFoundError(device.id)

    async def delete(self, device_id: UUID) -> None:
        """Delete device by ID"""
        try:
            delete_result = await self.device_collection.delete_one({DeviceFields.MONGO_ID: str(device_id)})
        except PyMongoError as e:
            raise DeviceRepositoryError(f"Error deleting device: {str(e)}", cause=e) from e

        if delete_result.deleted_count == 0:
            raise DeviceNotFoundError(device_id)

    async def exists_by_id(self, device_id: UUID) -> bool:
        """Check if a device document exists"""
        try:
            count = await self.device_collection.count_documents(
                {DeviceFields.MONGO_ID: str(device_id)}, limit=1
            )
        except PyMongoError as e:
            raise DeviceRepositoryError(f"Error checking device existence: {str(e)}", cause=e) from e
        return count > 0

    async def _find_many(
        self,
        query: Dict[str, Any],
        limit: int,
        offset: int,
        error_message: str,
    ) -> List[Device]:
        try:
            cursor = (
                self.device_collection.find(query)
                .sort([(DeviceFields.CREATED_AT, DESCENDING), (DeviceFields.MONGO_ID, DESCENDING)])
                .skip(offset)
                .limit(limit)
            )
            devices = []
            async for document in cursor:
                devices.append(self._document_to_device(document))
            return devices
        except PyMongoError as e:
            raise DeviceRepositoryError(f"{error_message}: {str(e)}", cause=e) from e

    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """Convert MongoDB document to Device domain model"""
        if not document:
            raise DeviceRepositoryError("Invalid document: document is None or empty")

        try:
            return Device(
                id=UUID(str(document[DeviceFields.MONGO_ID])),
                name=document.get(DeviceFields.NAME, ""),
                brand=document.get(DeviceFields.BRAND, ""),
                state=DeviceState(document.get(DeviceFields.STATE)),
                created_at=ensure_utc(document.get(DeviceFields.CREATED_AT)),
            )
        except (KeyError, ValueError) as e:
            raise DeviceRepositoryError(f"Invalid device document: {str(e)}", cause=e) from e

    def _device_to_dict(self, device: Device) -> Dict[str, Any]:
        """Convert Device domain model to MongoDB document"""
        return {
            DeviceFields.MONGO_ID: str(device.id),
            DeviceFields.NAME: device.name,
            DeviceFields.BRAND: device.brand,
            DeviceFields.STATE: DeviceState(device.state).value,
            DeviceFields.CREATED_AT: device.created_at,
        }
