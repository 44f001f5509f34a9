"""The per-device record that merges facts learned from the LAN, cloud and IoT APIs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Protocol

from goveebridge.quirks import BULB, DeviceType, Quirk, resolve_quirk

LAN_COLOR_TEMP_RANGE = (2000, 9000)

# Models whose polling behaviour differs from what their device type implies.
_IOT_POLLED_HUMIDIFIER = "H7160"


class LanDeviceLike(Protocol):
    """What a device needs from a LAN discovery result."""

    ip: Any


class HttpDeviceInfoLike(Protocol):
    """What a device needs from the platform API's device metadata."""

    device_name: str
    device_type: DeviceType

    def supports_rgb(self) -> bool: ...

    def supports_brightness(self) -> bool: ...

    def get_color_temperature_range(self) -> tuple[int, int] | None: ...

    def capability_by_instance(self, instance: str) -> Any: ...


@dataclass
class UndocDeviceInfo:
    """Account-level metadata for a device, together with the room it lives in."""

    entry: Any
    room_name: str | None = None

    @property
    def wifi_name(self) -> str | None:
        return self.entry.device_ext.device_settings.wifi_name


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Device:
    """Everything known about one device, keyed by model (sku) and id."""

    sku: str
    id: str
    lan_device: LanDeviceLike | None = None
    last_lan_device_update: datetime | None = None
    http_device_info: HttpDeviceInfoLike | None = None
    last_http_device_update: datetime | None = None
    undoc_device_info: UndocDeviceInfo | None = None
    last_undoc_device_info_update: datetime | None = None
    target_humidity_percent: int | None = None
    humidifier_work_mode: int | None = None
    humidifier_param_by_mode: dict[int, int] = field(default_factory=dict)
    last_polled: datetime | None = None

    def __str__(self) -> str:
        return f"{self.name()} ({self.id} {self.sku})"

    def name(self) -> str:
        """The name set in the vendor app, or a name computed from the model and id."""
        govee_name = self.govee_name()
        if govee_name is not None:
            return govee_name
        return self.computed_name()

    def govee_name(self) -> str | None:
        """The name defined for the device in the vendor app, if known."""
        if self.http_device_info is not None:
            return self.http_device_info.device_name
        return None

    def room_name(self) -> str | None:
        if self.undoc_device_info is not None:
            return self.undoc_device_info.room_name
        return None

    def computed_name(self) -> str:
        """The model followed by the last four characters of the normalized id."""
        normalized = "".join(
            ch.upper() if ch.isascii() else ch for ch in self.id if ch != ":"
        )
        return f"{self.sku}_{normalized[-4:]}"

    def ip_addr(self) -> Any:
        return self.lan_device.ip if self.lan_device is not None else None

    def set_last_polled(self) -> None:
        self.last_polled = _now()

    def set_target_humidity(self, percent: int) -> None:
        self.target_humidity_percent = percent

    def set_humidifier_work_mode_and_param(self, mode: int, param: int) -> None:
        self.humidifier_work_mode = mode
        self.humidifier_param_by_mode[mode] = param

    def set_lan_device(self, lan_device: LanDeviceLike) -> None:
        self.lan_device = lan_device
        self.last_lan_device_update = _now()

    def set_http_device_info(self, info: HttpDeviceInfoLike) -> None:
        self.http_device_info = info
        self.last_http_device_update = _now()

    def set_undoc_device_info(self, entry: Any, room_name: str | None = None) -> None:
        self.undoc_device_info = UndocDeviceInfo(entry=entry, room_name=room_name)
        self.last_undoc_device_info_update = _now()

    def device_type(self) -> DeviceType:
        if self.http_device_info is not None:
            return self.http_device_info.device_type
        quirk = resolve_quirk(self.sku)
        if quirk is not None:
            return quirk.device_type
        return DeviceType.LIGHT

    def resolve_quirk(self) -> Quirk | None:
        """The model's quirk; an unknown model seen on the LAN is assumed to be a light."""
        quirk = resolve_quirk(self.sku)
        if quirk is not None:
            return quirk
        if self.lan_device is not None:
            return Quirk.light(self.sku, BULB).with_lan_api()
        return None

    def needs_platform_poll(self) -> bool:
        """Whether platform API data is required to report this device correctly."""
        if not self.iot_api_supported():
            return True
        if self.sku == _IOT_POLLED_HUMIDIFIER:
            return False
        return self.device_type() is not DeviceType.LIGHT

    def pollable_via_lan(self) -> bool:
        return self.lan_device is not None

    def pollable_via_iot(self) -> bool:
        if not self.iot_api_supported():
            return False
        if self.sku == _IOT_POLLED_HUMIDIFIER:
            return True
        return self.device_type() is DeviceType.LIGHT

    def avoid_platform_api(self) -> bool:
        quirk = self.resolve_quirk()
        if quirk is None:
            return False
        if quirk.avoid_platform_api:
            return True
        # LAN support says "light"; if the platform API disagrees, distrust it.
        platform_says_rgb = (
            self.http_device_info is not None and self.http_device_info.supports_rgb()
        )
        return self.lan_device is not None and not platform_says_rgb

    def get_capability_by_instance(self, instance: str) -> Any:
        if self.http_device_info is None:
            return None
        return self.http_device_info.capability_by_instance(instance)

    def get_light_power_toggle_instance_name(self) -> str | None:
        if self.device_type() is DeviceType.LIGHT:
            return "powerSwitch"
        # For non-lights, a nightlight toggle is most likely the light part.
        if self.get_capability_by_instance("nightlightToggle") is not None:
            return "nightlightToggle"
        return None

    def get_color_temperature_range(self) -> tuple[int, int] | None:
        quirk = self.resolve_quirk()
        if quirk is not None:
            return quirk.color_temp_range
        if self.lan_device is not None:
            return LAN_COLOR_TEMP_RANGE
        if self.http_device_info is not None:
            return self.http_device_info.get_color_temperature_range()
        return None

    def supports_brightness(self) -> bool:
        quirk = self.resolve_quirk()
        if quirk is not None:
            return quirk.supports_brightness
        if self.lan_device is not None:
            return True
        return self.http_device_info is not None and self.http_device_info.supports_brightness()

    def supports_rgb(self) -> bool:
        quirk = self.resolve_quirk()
        if quirk is not None:
            return quirk.supports_rgb
        if self.lan_device is not None:
            return True
        return self.http_device_info is not None and self.http_device_info.supports_rgb()

    def iot_api_supported(self) -> bool:
        quirk = self.resolve_quirk()
        return quirk is not None and quirk.iot_api_supported

    def is_ble_only_device(self) -> bool | None:
        """True if only reachable over Bluetooth, False if not, None if unknown."""
        quirk = self.resolve_quirk()
        if quirk is not None:
            return quirk.ble_only
        if self.http_device_info is not None:
            return False
        if self.undoc_device_info is not None:
            return self.undoc_device_info.wifi_name is None
        return None

    def is_controllable(self) -> bool:
        return self.is_ble_only_device() is not True