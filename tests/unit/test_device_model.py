"""
Unit tests for the Device domain model (validation, guards, state parsing).
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from device_registry.domain.exceptions import BusinessRuleViolationError, DeviceValidationError
from device_registry.domain.models.device import Device, DeviceState, parse_state
from tests.factories import make_device


class TestDeviceNew:
    """Tests for Device.new"""

    def test_new_device_is_active_with_id_and_timestamp(self):
        before = datetime.now(timezone.utc)
        device = Device.new("iPhone 15", "Apple")
        after = datetime.now(timezone.utc)

        assert device.state == DeviceState.ACTIVE
        assert isinstance(device.id, uuid.UUID)
        assert device.id.int != 0
        assert before - timedelta(seconds=1) <= device.created_at <= after + timedelta(seconds=1)
        assert device.created_at.tzinfo is not None

    def test_new_devices_get_distinct_ids(self):
        first = Device.new("Pixel 8", "Google")
        second = Device.new("Pixel 8", "Google")
        assert first.id != second.id

    def test_new_rejects_short_name(self):
        with pytest.raises(DeviceValidationError) as exc_info:
            Device.new("ab", "Apple")
        assert exc_info.value.field == "name"
        assert exc_info.value.reason == "must be at least 3 characters"

    def test_new_keeps_untrimmed_values(self):
        device = Device.new("  iPhone 15  ", " Apple ")
        assert device.name == "  iPhone 15  "
        assert device.brand == " Apple "


class TestValidateOrder:
    """validate() reports the first invalid field in id, name, brand, created_at, state order"""

    def test_id_reported_before_everything(self):
        device = Device(id=None, name="", brand="", state="bogus", created_at=None)
        with pytest.raises(DeviceValidationError) as exc_info:
            device.validate()
        assert exc_info.value.field == "id"

    def test_nil_uuid_is_rejected(self):
        device = make_device(device_id=uuid.UUID(int=0))
        with pytest.raises(DeviceValidationError) as exc_info:
            device.validate()
        assert exc_info.value.field == "id"

    def test_name_reported_before_brand_created_at_state(self):
        device = Device(id=uuid.uuid4(), name="x", brand="", state="bogus", created_at=None)
        with pytest.raises(DeviceValidationError) as exc_info:
            device.validate()
        assert exc_info.value.field == "name"

    def test_brand_reported_before_created_at_and_state(self):
        device = Device(id=uuid.uuid4(), name="Galaxy S24", brand="S", state="bogus", created_at=None)
        with pytest.raises(DeviceValidationError) as exc_info:
            device.validate()
        assert exc_info.value.field == "brand"

    def test_created_at_reported_before_state(self):
        device = Device(id=uuid.uuid4(), name="Galaxy S24", brand="Samsung", state="bogus", created_at=None)
        with pytest.raises(DeviceValidationError) as exc_info:
            device.validate()
        assert exc_info.value.field == "created_at"

    def test_state_reported_last(self):
        device = make_device().with_changes(state="bogus")
        with pytest.raises(DeviceValidationError) as exc_info:
            device.validate()
        assert exc_info.value.field == "state"
        assert "invalid state: bogus" in exc_info.value.reason

    def test_valid_device_returns_itself(self):
        device = make_device()
        assert device.validate() is device


class TestFieldBounds:
    """Length bounds are inclusive and measured after trimming"""

    @pytest.mark.parametrize("name", ["abc", "a" * 100, "  abc  "])
    def test_name_within_bounds(self, name):
        make_device(name=name).validate_name()

    @pytest.mark.parametrize(
        "name, reason",
        [
            ("", "cannot be empty"),
            ("     ", "cannot be empty"),
            ("ab", "must be at least 3 characters"),
            ("  ab  ", "must be at least 3 characters"),
            ("a" * 101, "must not exceed 100 characters"),
        ],
    )
    def test_name_out_of_bounds(self, name, reason):
        with pytest.raises(DeviceValidationError) as exc_info:
            make_device(name=name).validate_name()
        assert exc_info.value.field == "name"
        assert exc_info.value.reason == reason

    @pytest.mark.parametrize("brand", ["HP", "b" * 50, " LG "])
    def test_brand_within_bounds(self, brand):
        make_device(brand=brand).validate_brand()

    @pytest.mark.parametrize(
        "brand, reason",
        [
            ("", "cannot be empty"),
            ("\t\n", "cannot be empty"),
            ("A", "must be at least 2 characters"),
            ("b" * 51, "must not exceed 50 characters"),
        ],
    )
    def test_brand_out_of_bounds(self, brand, reason):
        with pytest.raises(DeviceValidationError) as exc_info:
            make_device(brand=brand).validate_brand()
        assert exc_info.value.field == "brand"
        assert exc_info.value.reason == reason


class TestState:
    """Tests for DeviceState and parse_state"""

    @pytest.mark.parametrize("raw", ["active", "in-use", "inactive"])
    def test_parse_permitted_values(self, raw):
        assert parse_state(raw).value == raw

    def test_parse_accepts_enum_member(self):
        assert parse_state(DeviceState.IN_USE) is DeviceState.IN_USE

    @pytest.mark.parametrize("raw", ["bogus", "ACTIVE", "in_use", "", None])
    def test_parse_rejects_unknown_values(self, raw):
        with pytest.raises(DeviceValidationError) as exc_info:
            parse_state(raw)
        assert exc_info.value.field == "state"

    def test_state_compares_equal_to_raw_string(self):
        assert DeviceState.IN_USE == "in-use"


class TestGuards:
    """can_update / can_delete fail only for in-use devices"""

    @pytest.mark.parametrize("state", [DeviceState.ACTIVE, DeviceState.INACTIVE])
    def test_guards_pass_when_not_in_use(self, state):
        device = make_device(state=state)
        device.can_update()
        device.can_delete()

    def test_can_update_blocks_in_use(self):
        with pytest.raises(BusinessRuleViolationError, match="cannot update"):
            make_device(state=DeviceState.IN_USE).can_update()

    def test_can_delete_blocks_in_use(self):
        with pytest.raises(BusinessRuleViolationError, match="cannot delete"):
            make_device(state=DeviceState.IN_USE).can_delete()


class TestWithChanges:
    """Tests for Device.with_changes"""

    def test_only_given_fields_change(self):
        device = make_device()
        changed = device.with_changes(brand="Samsung")
        assert changed.brand == "Samsung"
        assert changed.name == device.name
        assert changed.state == device.state
        assert changed.id == device.id
        assert changed.created_at == device.created_at

    def test_original_is_untouched(self):
        device = make_device()
        device.with_changes(name="Other name", state="inactive")
        assert device.name == "iPhone 15"
        assert device.state == DeviceState.ACTIVE

    def test_known_state_strings_become_enum_members(self):
        assert make_device().with_changes(state="in-use").state is DeviceState.IN_USE

    def test_no_changes_gives_equal_copy(self):
        device = make_device()
        assert device.with_changes() == device

    def test_device_is_immutable(self):
        device = make_device()
        with pytest.raises(AttributeError):
            device.name = "Changed"


class TestWithValues:
    """Tests for Device.with_values"""

    def test_all_fields_overwritten(self):
        device = make_device()
        replaced = device.with_values("Galaxy S24", "Samsung", "in-use")
        assert replaced.name == "Galaxy S24"
        assert replaced.brand == "Samsung"
        assert replaced.state is DeviceState.IN_USE
        assert replaced.id == device.id
        assert replaced.created_at == device.created_at

    def test_none_replaces_stored_value(self):
        replaced = make_device().with_values(None, "Samsung", None)
        assert replaced.name is None
        assert replaced.state is None
        with pytest.raises(DeviceValidationError) as exc_info:
            replaced.validate()
        assert exc_info.value.field == "name"
