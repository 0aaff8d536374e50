from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.models.device import Device, DeviceState


class DeviceCreateRequest(BaseModel):
    """DTO for device creation request"""
    name: str
    brand: str


class DeviceUpdateRequest(BaseModel):
    """DTO for full device update request (all fields required)"""
    name: str
    brand: str
    state: str


class DevicePartialUpdateRequest(BaseModel):
    """DTO for partial device update request (omitted fields are kept)"""
    name: Optional[str] = None
    brand: Optional[str] = None
    state: Optional[str] = None


class DeviceResponse(BaseModel):
    """DTO for device response"""
    id: str
    name: str
    brand: str
    state: str
    created_at: datetime

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponse":
        return cls(
            id=str(device.id),
            name=device.name,
            brand=device.brand,
            state=DeviceState(device.state).value,
            created_at=device.created_at,
        )


class DeviceListResponse(BaseModel):
    """DTO for a page of devices"""
    devices: List[DeviceResponse] = Field(default_factory=list)
    total: int
    limit: int
    offset: int


class ErrorResponse(BaseModel):
    """DTO for error responses"""
    error: str
    message: Optional[str] = None
    field: Optional[str] = None
