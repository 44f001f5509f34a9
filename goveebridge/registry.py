"""A thread-safe collection of known devices with lookup by id, name or address."""

from __future__ import annotations

import threading
from dataclasses import replace

from goveebridge.device import Device
from goveebridge.topics import topic_safe_id


class DeviceNotFoundError(LookupError):
    """Raised when no known device matches a label."""


def _ascii_fold(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def _eq_ignore_ascii_case(left: str, right: str) -> bool:
    return len(left) == len(right) and _ascii_fold(left) == _ascii_fold(right)


def _snapshot(device: Device) -> Device:
    """An independent copy of a device record."""
    return replace(device, humidifier_param_by_mode=dict(device.humidifier_param_by_mode))


class DeviceRegistry:
    """Holds one record per device id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._devices_by_id: dict[str, Device] = {}

    def device_mut(self, sku: str, device_id: str) -> Device:
        """The live record for a device, created from the model and id if unknown."""
        with self._lock:
            device = self._devices_by_id.get(device_id)
            if device is None:
                device = Device(sku=sku, id=device_id)
                self._devices_by_id[device_id] = device
            return device

    def devices(self) -> list[Device]:
        """Copies of every known device."""
        with self._lock:
            return [_snapshot(device) for device in self._devices_by_id.values()]

    def device_by_id(self, device_id: str) -> Device | None:
        """A copy of the device with exactly this id, or None."""
        with self._lock:
            device = self._devices_by_id.get(device_id)
            return None if device is None else _snapshot(device)

    def resolve_device(self, label: str) -> Device | None:
        """Find a device by id, name, computed name, topic-safe id or IP, ignoring case."""
        with self._lock:
            exact = self._devices_by_id.get(label)
            if exact is not None:
                return _snapshot(exact)
            for device in self._devices_by_id.values():
                ip = device.ip_addr()
                if (
                    _eq_ignore_ascii_case(device.name(), label)
                    or _eq_ignore_ascii_case(device.id, label)
                    or _eq_ignore_ascii_case(topic_safe_id(device), label)
                    or (ip is not None and _eq_ignore_ascii_case(str(ip), label))
                    or _eq_ignore_ascii_case(device.computed_name(), label)
                ):
                    return _snapshot(device)
            return None

    def resolve_device_read_only(self, label: str) -> Device:
        """Like resolve_device, but raises DeviceNotFoundError when nothing matches."""
        device = self.resolve_device(label)
        if device is None:
            raise DeviceNotFoundError(f"device '{label}' not found")
        return device