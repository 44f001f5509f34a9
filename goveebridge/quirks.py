"""Per-model knowledge about device capabilities that the cloud APIs report poorly."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from goveebridge.temperature import TemperatureUnits


class DeviceType(Enum):
    """The broad category of a device."""

    LIGHT = "light"
    HUMIDIFIER = "humidifier"
    KETTLE = "kettle"
    HEATER = "heater"
    ICE_MAKER = "ice_maker"
    THERMOMETER = "thermometer"
    OTHER = "other"


class HumidityUnits(Enum):
    """Units in which a humidity reading is expressed."""

    RELATIVE_PERCENT = "relative_percent"
    RELATIVE_PERCENT_TIMES_100 = "relative_percent_times_100"

    def from_reading_to_relative_percent(self, value: float) -> float:
        """Convert a raw reading into relative humidity percent."""
        if self is HumidityUnits.RELATIVE_PERCENT_TIMES_100:
            return value / 100.0
        return value


DEFAULT_COLOR_TEMP_RANGE = (2000, 9000)


@dataclass(frozen=True)
class Quirk:
    """Capabilities of one device model; builder methods return modified copies."""

    sku: str
    icon: str
    device_type: DeviceType
    supports_rgb: bool = False
    supports_brightness: bool = False
    color_temp_range: tuple[int, int] | None = None
    avoid_platform_api: bool = False
    ble_only: bool = False
    lan_api_capable: bool = False
    platform_temperature_sensor_units: TemperatureUnits | None = None
    platform_humidity_sensor_units: HumidityUnits | None = None
    # True when every relevant packet from the IoT subscription can be parsed and applied.
    iot_api_supported: bool = False
    show_as_preset_buttons: tuple[str, ...] | None = None

    @classmethod
    def device(cls, sku: str, device_type: DeviceType, icon: str) -> Quirk:
        return cls(sku=sku, icon=icon, device_type=device_type)

    @classmethod
    def light(cls, sku: str, icon: str) -> Quirk:
        return (
            cls.device(sku, DeviceType.LIGHT, icon)
            .with_rgb()
            .with_brightness()
            .with_color_temp()
            .with_iot_api_support(True)
        )

    @classmethod
    def ice_maker(cls, sku: str) -> Quirk:
        return cls.device(sku, DeviceType.ICE_MAKER, "mdi:snowflake")

    @classmethod
    def space_heater(cls, sku: str) -> Quirk:
        return cls.device(sku, DeviceType.HEATER, "mdi:heat-wave")

    @classmethod
    def humidifier(cls, sku: str) -> Quirk:
        return cls.device(sku, DeviceType.HUMIDIFIER, "mdi:air-humidifier")

    @classmethod
    def thermometer(cls, sku: str) -> Quirk:
        return cls.device(sku, DeviceType.THERMOMETER, "mdi:thermometer")

    @classmethod
    def lan_api_capable_light(cls, sku: str, icon: str) -> Quirk:
        return cls.light(sku, icon).with_lan_api()

    def with_rgb(self) -> Quirk:
        return replace(self, supports_rgb=True)

    def with_brightness(self) -> Quirk:
        return replace(self, supports_brightness=True)

    def with_platform_temperature_sensor_units(self, units: TemperatureUnits) -> Quirk:
        return replace(self, platform_temperature_sensor_units=units)

    def with_platform_humidity_sensor_units(self, units: HumidityUnits) -> Quirk:
        return replace(self, platform_humidity_sensor_units=units)

    def with_iot_api_support(self, supported: bool) -> Quirk:
        return replace(self, iot_api_supported=supported)

    def with_color_temp(self) -> Quirk:
        return replace(self, color_temp_range=DEFAULT_COLOR_TEMP_RANGE)

    def with_color_temp_range(self, min_kelvin: int, max_kelvin: int) -> Quirk:
        return replace(self, color_temp_range=(min_kelvin, max_kelvin))

    def with_lan_api(self) -> Quirk:
        return replace(self, lan_api_capable=True)

    def with_show_as_preset_modes(self, modes: Iterable[str]) -> Quirk:
        return replace(self, show_as_preset_buttons=tuple(modes))

    def with_broken_platform(self) -> Quirk:
        return replace(self, avoid_platform_api=True)

    def with_ble_only(self, ble_only: bool) -> Quirk:
        return replace(self, ble_only=ble_only)

    def should_show_mode_as_preset(self, mode: str) -> bool:
        """Whether the named mode should be presented as preset buttons."""
        return self.show_as_preset_buttons is not None and mode in self.show_as_preset_buttons


STRIP = "mdi:led-strip-variant"
STRIP_ALT = "mdi:led-strip"
FLOOD = "mdi:light-flood-down"
STRING = "mdi:string-lights"
BULB = "mdi:lightbulb"
FLOOR_LAMP = "mdi:floor-lamp"
TV_BACK = "mdi:television-ambient-light"
DESK = "mdi:desk-lamp"
HEX = "mdi:hexagon-multiple"
TRIANGLE = "mdi:triangle"
CEILING = "mdi:ceiling-light"
NIGHTLIGHT = "mdi:lightbulb-night"
WALL_SCONCE = "mdi:wall-sconce"
OUTDOOR_LAMP = "mdi:outdoor-lamp"
SPOTLIGHT = "mdi:lightbulb-spot"

_F = TemperatureUnits.FAHRENHEIT
_RH = HumidityUnits.RELATIVE_PERCENT

_LAN_LIGHTS = [
    ("H6072", FLOOR_LAMP), ("H619B", STRIP), ("H619C", STRIP), ("H619Z", STRIP),
    ("H7060", FLOOD), ("H6046", TV_BACK), ("H6047", TV_BACK), ("H6051", DESK),
    ("H6056", STRIP_ALT), ("H6059", NIGHTLIGHT), ("H6061", HEX), ("H6062", STRIP),
    ("H6065", STRIP), ("H6066", HEX), ("H6067", TRIANGLE), ("H6073", FLOOR_LAMP),
    ("H6076", FLOOR_LAMP), ("H6078", FLOOR_LAMP), ("H6087", WALL_SCONCE),
    ("H610A", STRIP), ("H610B", STRIP), ("H6117", STRIP), ("H6159", STRIP),
    ("H615E", STRIP), ("H6163", STRIP), ("H6168", TV_BACK), ("H6172", STRIP),
    ("H6173", STRIP), ("H618A", STRIP), ("H618C", STRIP), ("H618E", STRIP),
    ("H618F", STRIP), ("H619A", STRIP), ("H619D", STRIP), ("H619E", STRIP),
    ("H61A0", STRIP), ("H61A1", STRIP), ("H61A2", STRIP), ("H61A3", STRIP),
    ("H61A5", STRIP), ("H61A8", STRIP), ("H61B2", TV_BACK), ("H61E1", STRIP),
    ("H7012", STRING), ("H7013", STRING), ("H7021", STRING), ("H7028", STRING),
    ("H7041", STRING), ("H7042", STRING), ("H7050", BULB), ("H7051", BULB),
    ("H7052", STRING), ("H7055", BULB), ("H705A", OUTDOOR_LAMP),
    ("H705B", OUTDOOR_LAMP), ("H7061", FLOOD), ("H7062", FLOOD),
    ("H7065", SPOTLIGHT),
]


def _load_quirks() -> dict[str, Quirk]:
    ble_only_strips = ["H6102", "H6053", "H617C", "H617E", "H617F", "H6119"]
    heaters = ["H7130", "H713A", "H713B", "H7132", "H7135"]
    thermometers = ["H5051", "H5100", "H5103", "H5179"]

    quirks: list[Quirk] = [
        Quirk.lan_api_capable_light("H60A1", CEILING).with_color_temp_range(2200, 6500),
        Quirk.lan_api_capable_light("H6022", BULB).with_color_temp_range(2700, 6500),
        Quirk.lan_api_capable_light("H610A", STRIP),
        # Platform metadata for these is bogus.
        Quirk.light("H6141", STRIP).with_broken_platform(),
        Quirk.light("H6159", STRIP).with_broken_platform(),
        Quirk.light("H6003", BULB).with_broken_platform(),
        # These don't behave like the others over IoT.
        Quirk.light("H6121", STRIP).with_iot_api_support(False),
        Quirk.light("H6154", STRIP).with_iot_api_support(False),
        Quirk.light("H6176", STRIP).with_iot_api_support(False),
    ]
    quirks += [
        Quirk.light(sku, STRIP).with_broken_platform().with_ble_only(True)
        for sku in ble_only_strips
    ]
    quirks.append(
        Quirk.humidifier("H7160")
        .with_broken_platform()
        .with_iot_api_support(True)
        .with_rgb()
        .with_brightness()
    )
    quirks += [Quirk.space_heater("H7130").with_platform_temperature_sensor_units(_F)]
    quirks.append(
        Quirk.space_heater("H7131")
        .with_platform_temperature_sensor_units(_F)
        .with_show_as_preset_modes(["gearMode"])
        .with_rgb()
        .with_brightness()
    )
    quirks += [
        Quirk.space_heater(sku).with_platform_temperature_sensor_units(_F)
        for sku in heaters[1:4]
    ]
    quirks.append(
        Quirk.space_heater("H7133")
        .with_platform_temperature_sensor_units(_F)
        .with_show_as_preset_modes(["gearMode"])
        .with_rgb()
        .with_brightness()
    )
    quirks.append(
        Quirk.space_heater("H7134")
        .with_platform_temperature_sensor_units(_F)
        .with_show_as_preset_modes(["gearMode"])
        .with_color_temp()
        .with_brightness()
    )
    quirks.append(Quirk.space_heater("H7135").with_platform_temperature_sensor_units(_F))
    quirks.append(Quirk.ice_maker("H7172").with_iot_api_support(False))
    quirks += [
        Quirk.thermometer(sku)
        .with_platform_temperature_sensor_units(_F)
        .with_platform_humidity_sensor_units(_RH)
        for sku in thermometers
    ]
    quirks += [
        Quirk.device("H7170", DeviceType.KETTLE, "mdi:kettle")
        .with_platform_temperature_sensor_units(_F),
        Quirk.device("H7171", DeviceType.KETTLE, "mdi:kettle")
        .with_platform_temperature_sensor_units(_F)
        .with_show_as_preset_modes(["M1", "M2", "M3", "M4"]),
        Quirk.device("H7173", DeviceType.KETTLE, "mdi:kettle")
        .with_platform_temperature_sensor_units(_F)
        .with_show_as_preset_modes(["Tea", "Coffee", "DIY"]),
    ]
    quirks += [Quirk.lan_api_capable_light(sku, icon) for sku, icon in _LAN_LIGHTS]

    # Later entries replace earlier ones for the same model.
    return {quirk.sku: quirk for quirk in quirks}


_QUIRKS = _load_quirks()


def resolve_quirk(sku: str) -> Quirk | None:
    """The known quirk for a model, or None."""
    return _QUIRKS.get(sku)