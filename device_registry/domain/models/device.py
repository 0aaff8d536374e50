# Standard library imports
import dataclasses
import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

# Local application imports
from ..constants.device_fields import DeviceFields
from ..exceptions import BusinessRuleViolationError, DeviceValidationError
from ...utils.datetime_utils import truncate_to_millis, utc_now


NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
BRAND_MIN_LENGTH = 2
BRAND_MAX_LENGTH = 50


class DeviceState(str, Enum):
    """Operational state of a device"""
    ACTIVE = "active"
    IN_USE = "in-use"
    INACTIVE = "inactive"


def parse_state(value: Union[str, DeviceState, None]) -> DeviceState:
    """
    Convert a raw state value into a DeviceState.

    Raises:
        DeviceValidationError: If the value is not one of the permitted states
    """
    try:
        return DeviceState(value)
    except ValueError:
        raise DeviceValidationError(
            DeviceFields.STATE,
            f"invalid state: {value} (must be: active, in-use, or inactive)",
        ) from None


def _validate_text(field: str, value: Optional[str], min_length: int, max_length: int) -> None:
    # Trimming only decides emptiness and length; the stored value keeps its whitespace
    text = (value or "").strip()
    if not text:
        raise DeviceValidationError(field, "cannot be empty")
    if len(text) < min_length:
        raise DeviceValidationError(field, f"must be at least {min_length} characters")
    if len(text) > max_length:
        raise DeviceValidationError(field, f"must not exceed {max_length} characters")


@dataclass(frozen=True)
class Device:
    """
    Pure domain model for Device entity.

    A device is a standalone aggregate root with a name, a brand and an
    operational state. Instances are immutable snapshots: changes produce a new
    Device via with_changes(), and validate() checks a snapshot without
    touching it.
    """
    id: Optional[uuid.UUID]
    name: str
    brand: str
    state: Union[DeviceState, str]
    created_at: Optional[datetime]

    @classmethod
    def new(cls, name: str, brand: str) -> "Device":
        """
        Build a brand new active device with a fresh ID and creation time.

        Raises:
            DeviceValidationError: If name or brand are invalid
        """
        device = cls(
            id=uuid.uuid4(),
            name=name,
            brand=brand,
            state=DeviceState.ACTIVE,
            created_at=truncate_to_millis(utc_now()),
        )
        return device.validate()

    def validate(self) -> "Device":
        """
        Run every field check and raise the first violation.

        Checks run in the order id, name, brand, created_at, state.

        Returns:
            The device itself when it is well formed

        Raises:
            DeviceValidationError: For the first invalid field
        """
        if self.id is None or self.id.int == 0:
            raise DeviceValidationError(DeviceFields.ID, "cannot be empty")
        self.validate_name()
        self.validate_brand()
        if self.created_at is None:
            raise DeviceValidationError(DeviceFields.CREATED_AT, "cannot be empty")
        self.validate_state()
        return self

    def validate_name(self) -> None:
        _validate_text(DeviceFields.NAME, self.name, NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    def validate_brand(self) -> None:
        _validate_text(DeviceFields.BRAND, self.brand, BRAND_MIN_LENGTH, BRAND_MAX_LENGTH)

    def validate_state(self) -> None:
        parse_state(self.state)

    def can_update(self) -> None:
        """Guard: devices currently in use cannot be updated"""
        if self.state == DeviceState.IN_USE:
            raise BusinessRuleViolationError("cannot update device in 'in-use' state")

    def can_delete(self) -> None:
        """Guard: devices currently in use cannot be deleted"""
        if self.state == DeviceState.IN_USE:
            raise BusinessRuleViolationError("cannot delete device in 'in-use' state")

    def with_changes(
        self,
        name: Optional[str] = None,
        brand: Optional[str] = None,
        state: Union[DeviceState, str, None] = None,
    ) -> "Device":
        """Return a copy with the given fields replaced. ID and creation time never change."""
        changes = {}
        if name is not None:
            changes[DeviceFields.NAME] = name
        if brand is not None:
            changes[DeviceFields.BRAND] = brand
        if state is not None:
            changes[DeviceFields.STATE] = _coerce_state(state)
        return dataclasses.replace(self, **changes)

    def with_values(
        self,
        name: Optional[str],
        brand: Optional[str],
        state: Union[DeviceState, str, None],
    ) -> "Device":
        """Return a copy with name, brand and state all overwritten, None included."""
        return dataclasses.replace(
            self,
            name=name,
            brand=brand,
            state=_coerce_state(state) if state is not None else None,
        )


def _coerce_state(state: Union[DeviceState, str]) -> Union[DeviceState, str]:
    # Unknown values are kept as-is so validate() can report them in order
    try:
        return DeviceState(state)
    except ValueError:
        return state
