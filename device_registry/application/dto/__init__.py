from .device_dto import (
    DeviceCreateRequest,
    DeviceUpdateRequest,
    DevicePartialUpdateRequest,
    DeviceResponse,
    DeviceListResponse,
    ErrorResponse,
)

__all__ = [
    "DeviceCreateRequest",
    "DeviceUpdateRequest",
    "DevicePartialUpdateRequest",
    "DeviceResponse",
    "DeviceListResponse",
    "ErrorResponse",
]
