"""
Exception hierarchy for the device domain.

Every failure the domain, the service or a store adapter can produce is one of
the classes below. The four classified kinds (not found, already exists,
validation, business rule) carry enough structure for callers to react without
parsing messages; DeviceRepositoryError is the opaque fifth kind used for
store failures and must never be read as one of the other four.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional

# -----------------------------------------------------------------------------
# Local application
# -----------------------------------------------------------------------------
from .constants.device_fields import DeviceFields


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class DeviceError(Exception):
    """Base exception for all device errors."""

    error_code: str = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class DeviceNotFoundError(DeviceError):
    """Raised when the referenced device ID has no stored device."""

    error_code = "not_found"

    def __init__(self, device_id: object) -> None:
        super().__init__(f"device not found: {device_id}")
        self.device_id = device_id


class DeviceAlreadyExistsError(DeviceError):
    """Raised when creating a device whose ID is already stored."""

    error_code = "already_exists"

    def __init__(self, device_id: object) -> None:
        super().__init__(f"device already exists: {device_id}")
        self.device_id = device_id


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class DeviceValidationError(DeviceError):
    """Raised when a device field fails validation."""

    error_code = "validation_error"

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"validation error on field '{field}': {reason}")
        self.field = field
        self.reason = reason


class InvalidDeviceIdError(DeviceValidationError):
    """Raised when a caller supplied ID is not a valid UUID."""

    error_code = "invalid_id"

    def __init__(self, value: str) -> None:
        super().__init__(DeviceFields.ID, "invalid UUID format")
        self.value = value


# -----------------------------------------------------------------------------
# Business rules
# -----------------------------------------------------------------------------


class BusinessRuleViolationError(DeviceError):
    """Raised when the current device state forbids the requested operation."""

    error_code = "business_rule_violation"

    def __init__(self, reason: str) -> None:
        super().__init__(f"business rule violation: {reason}")
        self.reason = reason


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class DeviceRepositoryError(DeviceError):
    """Raised when the store fails for a reason outside the domain taxonomy."""

    error_code = "internal_error"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
