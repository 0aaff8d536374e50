from .device_service import DEFAULT_PAGE_LIMIT, DeviceService, normalize_pagination

__all__ = ["DEFAULT_PAGE_LIMIT", "DeviceService", "normalize_pagination"]
