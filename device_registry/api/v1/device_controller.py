# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query, Response, status

# Local application imports
from ...application.dto.device_dto import (
    DeviceCreateRequest,
    DeviceListResponse,
    DevicePartialUpdateRequest,
    DeviceResponse,
    DeviceUpdateRequest,
)
from ...application.services.device_service import (
    DEFAULT_PAGE_LIMIT,
    DeviceService,
    normalize_pagination,
)
from ...di.container import get_container
from ...domain.exceptions import DeviceError
from .errors import parse_device_id, to_http_exception


router = APIRouter(tags=["devices"])


def _get_device_service() -> DeviceService:
    return get_container().get(DeviceService)


def _query_int(raw_value: Optional[str], default: int) -> int:
    # Non-numeric values keep the default; range clamping happens in normalize_pagination
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def create_device(request: DeviceCreateRequest) -> DeviceResponse:
    """
    Create a new device

    Args:
        request: Device name and brand

    Returns:
        DeviceResponse with the created device (state "active")
    """
    device_service = _get_device_service()

    try:
        device = await device_service.create_device(name=request.name, brand=request.brand)
    except DeviceError as exception:
        raise to_http_exception(exception) from exception
    return DeviceResponse.from_domain(device)


@router.get("", response_model=DeviceListResponse)
async def list_devices(
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
) -> DeviceListResponse:
    """
    List devices, newest first

    A brand filter takes precedence over a state filter when both are given.
    Non-numeric limit/offset values fall back to the defaults, out of range
    values are clamped, and the response echoes the values actually used.
    """
    device_service = _get_device_service()
    limit = _query_int(limit, DEFAULT_PAGE_LIMIT)
    offset = _query_int(offset, 0)

    try:
        if brand:
            devices = await device_service.list_devices_by_brand(brand, limit, offset)
        elif state:
            devices = await device_service.list_devices_by_state(state, limit, offset)
        else:
            devices = await device_service.list_devices(limit, offset)
    except DeviceError as exception:
        raise to_http_exception(exception) from exception

    limit, offset = normalize_pagination(limit, offset)
    return DeviceListResponse(
        devices=[DeviceResponse.from_domain(device) for device in devices],
        total=len(devices),
        limit=limit,
        offset=offset,
    )


@router.get("/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str) -> DeviceResponse:
    """
    Get a device by ID

    Args:
        device_id: UUID of the device

    Returns:
        DeviceResponse with device information
    """
    device_service = _get_device_service()

    try:
        device = await device_service.get_device(parse_device_id(device_id))
    except DeviceError as exception:
        raise to_http_exception(exception) from exception
    return DeviceResponse.from_domain(device)


@router.put("/{device_id}", response_model=DeviceResponse)
async def update_device(device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
    """
    Fully update a device (name, brand and state are all required)

    Devices currently in use cannot be updated.
    """
    device_service = _get_device_service()

    try:
        device = await device_service.update_device(
            parse_device_id(device_id),
            name=request.name,
            brand=request.brand,
            state=request.state,
        )
    except DeviceError as exception:
        raise to_http_exception(exception) from exception
    return DeviceResponse.from_domain(device)


@router.patch("/{device_id}", response_model=DeviceResponse)
async def partial_update_device(device_id: str, request: DevicePartialUpdateRequest) -> DeviceResponse:
    """
    Partially update a device; omitted fields keep their current values

    Devices currently in use cannot be updated.
    """
    device_service = _get_device_service()

    try:
        device = await device_service.partial_update_device(
            parse_device_id(device_id),
            name=request.name,
            brand=request.brand,
            state=request.state,
        )
    except DeviceError as exception:
        raise to_http_exception(exception) from exception
    return DeviceResponse.from_domain(device)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(device_id: str) -> Response:
    """
    Delete a device

    Devices currently in use cannot be deleted.
    """
    device_service = _get_device_service()

    try:
        await device_service.delete_device(parse_device_id(device_id))
    except DeviceError as exception:
        raise to_http_exception(exception) from exception
    return Response(status_code=status.HTTP_204_NO_CONTENT)
