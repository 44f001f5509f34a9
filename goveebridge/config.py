"""Settings for the Home Assistant MQTT integration, with environment fallbacks."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from goveebridge.temperature import TemperatureScale

DEFAULT_MQTT_PORT = 1883
DEFAULT_DISCOVERY_PREFIX = "homeassistant"

T = TypeVar("T")


def _parse_port(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid port number {text!r}")
    port = int(digits)
    if port > 65535:
        raise ValueError(f"port number {text!r} is out of range")
    return port


def _opt_env_var(name: str, parse: Callable[[str], T]) -> T | None:
    """Read and parse an environment variable, or None when it is not set."""
    raw = os.environ.get(name)
    if raw is None:
        return None
    try:
        return parse(raw)
    except ValueError as exc:
        raise ValueError(f"while processing env var {name}: {exc}") from exc


@dataclass
class HassArguments:
    """MQTT broker and Home Assistant options; unset options fall back to GOVEE_* variables."""

    mqtt_host: str | None = None
    mqtt_port: int | None = None
    mqtt_username: str | None = None
    mqtt_password: str | None = None
    mqtt_bind_address: str | None = None
    hass_discovery_prefix: str = DEFAULT_DISCOVERY_PREFIX
    temperature_scale: str | None = None

    def opt_mqtt_host(self) -> str | None:
        if self.mqtt_host is not None:
            return self.mqtt_host
        return _opt_env_var("GOVEE_MQTT_HOST", str)

    def resolved_mqtt_host(self) -> str:
        host = self.opt_mqtt_host()
        if host is None:
            raise ValueError(
                "Please specify the mqtt broker either via the "
                "--mqtt-host parameter or by setting $GOVEE_MQTT_HOST"
            )
        return host

    def resolved_mqtt_port(self) -> int:
        if self.mqtt_port is not None:
            return self.mqtt_port
        port = _opt_env_var("GOVEE_MQTT_PORT", _parse_port)
        return DEFAULT_MQTT_PORT if port is None else port

    def resolved_mqtt_username(self) -> str | None:
        if self.mqtt_username is not None:
            return self.mqtt_username
        return _opt_env_var("GOVEE_MQTT_USER", str)

    def resolved_mqtt_password(self) -> str | None:
        if self.mqtt_password is not None:
            return self.mqtt_password
        return _opt_env_var("GOVEE_MQTT_PASSWORD", str)

    def resolved_temperature_scale(self) -> TemperatureScale:
        if self.temperature_scale is not None:
            return TemperatureScale.parse(self.temperature_scale)
        scale = _opt_env_var("GOVEE_TEMPERATURE_SCALE", TemperatureScale.parse)
        return TemperatureScale.CELSIUS if scale is None else scale