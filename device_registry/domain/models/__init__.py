from .device import Device, DeviceState, parse_state

__all__ = ["Device", "DeviceState", "parse_state"]
