# goveebridge

Building blocks for presenting Govee lights, humidifiers, heaters, kettles,
ice makers and thermometers to Home Assistant over MQTT. The package has no
runtime dependencies.

## Modules

- `goveebridge.temperature`: the `TemperatureScale` enum (Celsius and
  Fahrenheit, parsed from forms such as `"C"`, `"°F"` or `"celsius"` with
  `TemperatureScale.parse`), the `TemperatureUnits` enum (including units
  scaled by 100), the `ftoc` and `ctof` conversions, and `TemperatureValue`,
  which converts between units (`as_unit`, `as_celsius`, `as_fahrenheit`,
  `normalize`) and parses strings such as `"23"`, `"23.3"` or `" 23 C "` with
  `TemperatureValue.parse_with_optional_scale`. A bare number takes the given
  scale, or Celsius when none is given; an unknown suffix raises `ValueError`.
- `goveebridge.config`: `HassArguments`, a dataclass of MQTT broker and
  Home Assistant settings. Its `resolved_*` methods fall back to the
  `GOVEE_MQTT_HOST`, `GOVEE_MQTT_PORT`, `GOVEE_MQTT_USER`,
  `GOVEE_MQTT_PASSWORD` and `GOVEE_TEMPERATURE_SCALE` environment variables
  when a field is unset. The port defaults to 1883, the scale to Celsius, and
  the discovery prefix to `homeassistant`; a missing host raises `ValueError`.
- `goveebridge.quirks`: the `DeviceType` and `HumidityUnits` enums, the
  immutable `Quirk` record with its builder methods, and `resolve_quirk(sku)`,
  which looks a model up in a built-in table of known SKUs.
- `goveebridge.device`: `Device`, which combines what is known about one
  device (LAN discovery result, platform metadata, account metadata) into a
  name, a device type and its capabilities: brightness, RGB, colour
  temperature range, whether it is Bluetooth-only, and how it may be polled.
- `goveebridge.topics`: the MQTT topic names used for light and switch
  state, availability, one-click actions and cache purging, plus
  `topic_safe_string` and `topic_safe_id`.
- `goveebridge.scenes`: `sort_and_dedup_scenes` for scene name lists.
- `goveebridge.registry`: `DeviceRegistry`, a thread-safe collection of
  devices that finds them by id, name, computed name, topic-safe id or IP
  address, ignoring case. `resolve_device_read_only` raises
  `DeviceNotFoundError` when nothing matches.
- `goveebridge.naming`: `mired_to_kelvin`, `kelvin_to_mired` and
  `camel_case_to_space_separated`.

## Example

```python
from goveebridge.registry import DeviceRegistry
from goveebridge.temperature import TemperatureValue
from goveebridge.naming import camel_case_to_space_separated

registry = DeviceRegistry()
device = registry.device_mut("H6000", "00:11:22:33:44:55:00:01")
print(device.name())                              # H6000_0001
print(registry.resolve_device("h6000_0001").id)   # 00:11:22:33:44:55:00:01

print(TemperatureValue.parse_with_optional_scale("76F", None).as_celsius())
print(camel_case_to_space_separated("powerSwitch"))   # Power Switch
```

## What this package does not do

It contains no MQTT client, no HTTP server, no clients for the LAN, platform
or IoT APIs, and no command-line program. It does not send commands to
devices or publish anything to Home Assistant; it supplies the device model,
lookup, naming and topic helpers that such a bridge is built on.

## Running the tests

```
pip install -e ".[test]"
pytest
```