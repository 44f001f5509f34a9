"""MQTT topic names used for the Home Assistant integration."""

from __future__ import annotations

from goveebridge.device import Device

_UNSAFE_TOPIC_CHARS = frozenset(":\\/ '\"")


def topic_safe_string(text: str) -> str:
    """Lower-case ASCII letters and replace characters unsafe in topics with '_'."""
    return "".join(
        "_" if ch in _UNSAFE_TOPIC_CHARS else (ch.lower() if ch.isascii() else ch)
        for ch in text
    )


def topic_safe_id(device: Device) -> str:
    """The device id with colons and spaces removed."""
    return "".join(ch for ch in device.id if ch not in (":", " "))


def switch_instance_state_topic(device: Device, instance: str) -> str:
    return f"gv2mqtt/switch/{topic_safe_id(device)}/{instance}/state"


def light_state_topic(device: Device) -> str:
    return f"gv2mqtt/light/{topic_safe_id(device)}/state"


def light_segment_state_topic(device: Device, segment: int) -> str:
    return f"gv2mqtt/light/{topic_safe_id(device)}/state/{segment}"


def availability_topic() -> str:
    """Shared by all entities so that a last-will can mark them all unavailable."""
    return "gv2mqtt/availability"


def oneclick_topic() -> str:
    return "gv2mqtt/oneclick"


def purge_cache_topic() -> str:
    return "gv2mqtt/purge-caches"