from dataclasses import dataclass, field
from types import SimpleNamespace

from goveebridge.device import Device
from goveebridge.quirks import BULB, DeviceType


@dataclass
class FakeHttpInfo:
    device_name: str = "Kitchen"
    device_type: DeviceType = DeviceType.LIGHT
    rgb: bool = False
    brightness: bool = False
    color_range: tuple = None
    capabilities: dict = field(default_factory=dict)

    def supports_rgb(self):
        return self.rgb

    def supports_brightness(self):
        return self.brightness

    def get_color_temperature_range(self):
        return self.color_range

    def capability_by_instance(self, instance):
        return self.capabilities.get(instance)


def lan(ip="192.0.2.10"):
    return SimpleNamespace(ip=ip)


def undoc_entry(wifi_name):
    return SimpleNamespace(
        device_ext=SimpleNamespace(device_settings=SimpleNamespace(wifi_name=wifi_name))
    )


def test_name_compute():
    assert Device("H6000", "AA:BB:CC:DD:EE:FF:42:2A").name() == "H6000_422A"
    assert Device("H6127", "cef142b0b354995f").name() == "H6127_995F"
    assert Device("H6127", "ce").name() == "H6127_CE"


def test_name_prefers_app_name_and_str():
    device = Device("H6000", "AA:BB")
    device.set_http_device_info(FakeHttpInfo(device_name="Desk"))
    assert device.name() == "Desk"
    assert device.computed_name() == "H6000_AABB"
    assert str(device) == "Desk (AA:BB H6000)"
    assert device.last_http_device_update is not None


def test_room_name():
    device = Device("H6000", "x")
    assert device.room_name() is None
    device.set_undoc_device_info(undoc_entry("net"), "Lounge")
    assert device.room_name() == "Lounge"


def test_ip_addr_and_lan_polling():
    device = Device("H6000", "x")
    assert device.ip_addr() is None
    assert device.pollable_via_lan() is False
    device.set_lan_device(lan("192.0.2.7"))
    assert device.ip_addr() == "192.0.2.7"
    assert device.pollable_via_lan() is True


def test_humidity_setters():
    device = Device("H7160", "x")
    device.set_target_humidity(55)
    device.set_humidifier_work_mode_and_param(1, 3)
    device.set_humidifier_work_mode_and_param(2, 7)
    assert device.target_humidity_percent == 55
    assert device.humidifier_work_mode == 2
    assert device.humidifier_param_by_mode == {1: 3, 2: 7}


def test_device_type_sources():
    assert Device("ZZZZ", "x").device_type() is DeviceType.LIGHT
    assert Device("H7160", "x").device_type() is DeviceType.HUMIDIFIER
    device = Device("H7160", "x")
    device.set_http_device_info(FakeHttpInfo(device_type=DeviceType.KETTLE))
    assert device.device_type() is DeviceType.KETTLE


def test_resolve_quirk_unknown_lan_device_is_light():
    device = Device("ZZZZ", "x")
    assert device.resolve_quirk() is None
    device.set_lan_device(lan())
    quirk = device.resolve_quirk()
    assert quirk.sku == "ZZZZ"
    assert quirk.icon == BULB
    assert quirk.lan_api_capable is True
    assert quirk.device_type is DeviceType.LIGHT


def test_polling_decisions():
    light = Device("H6072", "x")
    assert light.iot_api_supported() is True
    assert light.needs_platform_poll() is False
    assert light.pollable_via_iot() is True

    humidifier = Device("H7160", "x")
    assert humidifier.needs_platform_poll() is False
    assert humidifier.pollable_via_iot() is True

    no_iot = Device("H6121", "x")
    assert no_iot.iot_api_supported() is False
    assert no_iot.needs_platform_poll() is True
    assert no_iot.pollable_via_iot() is False

    heater = Device("H7130", "x")
    assert heater.needs_platform_poll() is True
    assert heater.pollable_via_iot() is False


def test_color_temperature_range():
    assert Device("H60A1", "x").get_color_temperature_range() == (2200, 6500)
    assert Device("H7130", "x").get_color_temperature_range() is None
    unknown = Device("ZZZZ", "x")
    assert unknown.get_color_temperature_range() is None
    unknown.set_http_device_info(FakeHttpInfo(color_range=(2500, 6000)))
    assert unknown.get_color_temperature_range() == (2500, 6000)
    unknown.set_lan_device(lan())
    assert unknown.get_color_temperature_range() == (2000, 9000)


def test_supports_rgb_and_brightness():
    assert Device("H7131", "x").supports_rgb() is True
    assert Device("H7134", "x").supports_rgb() is False
    assert Device("H7134", "x").supports_brightness() is True
    unknown = Device("ZZZZ", "x")
    assert unknown.supports_rgb() is False
    assert unknown.supports_brightness() is False
    unknown.set_http_device_info(FakeHttpInfo(rgb=True, brightness=False))
    assert unknown.supports_rgb() is True
    assert unknown.supports_brightness() is False


def test_ble_only_and_controllable():
    assert Device("H6102", "x").is_ble_only_device() is True
    assert Device("H6102", "x").is_controllable() is False
    assert Device("H6072", "x").is_ble_only_device() is False

    unknown = Device("ZZZZ", "x")
    assert unknown.is_ble_only_device() is None
    assert unknown.is_controllable() is True

    no_wifi = Device("ZZZZ", "x")
    no_wifi.set_undoc_device_info(undoc_entry(None))
    assert no_wifi.is_ble_only_device() is True
    assert no_wifi.is_controllable() is False

    wifi = Device("ZZZZ", "x")
    wifi.set_undoc_device_info(undoc_entry("home"))
    assert wifi.is_ble_only_device() is False

    platform = Device("ZZZZ", "x")
    platform.set_http_device_info(FakeHttpInfo())
    assert platform.is_ble_only_device() is False


def test_avoid_platform_api():
    assert Device("H6141", "x").avoid_platform_api() is True
    assert Device("H6072", "x").avoid_platform_api() is False
    assert Device("ZZZZ", "x").avoid_platform_api() is False

    conflicted = Device("H6072", "x")
    conflicted.set_lan_device(lan())
    conflicted.set_http_device_info(FakeHttpInfo(rgb=False))
    assert conflicted.avoid_platform_api() is True

    agreed = Device("H6072", "x")
    agreed.set_lan_device(lan())
    agreed.set_http_device_info(FakeHttpInfo(rgb=True))
    assert agreed.avoid_platform_api() is False


def test_light_power_toggle_instance_name():
    assert Device("H6072", "x").get_light_power_toggle_instance_name() == "powerSwitch"
    heater = Device("H7130", "x")
    assert heater.get_light_power_toggle_instance_name() is None
    heater.set_http_device_info(
        FakeHttpInfo(
            device_type=DeviceType.HEATER,
            capabilities={"nightlightToggle": object()},
        )
    )
    assert heater.get_light_power_toggle_instance_name() == "nightlightToggle"


def test_set_last_polled():
    device = Device("H6072", "x")
    assert device.last_polled is None
    device.set_last_polled()
    assert device.last_polled.tzinfo is not None