"""Device model, quirks, temperature handling and MQTT topic helpers for Govee devices in Home Assistant."""

__version__ = "0.1.0"