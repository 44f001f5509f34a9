"""Conversions and label formatting used when presenting devices to Home Assistant."""

from __future__ import annotations


def mired_to_kelvin(mired: int) -> int:
    """Convert mireds to kelvin; zero stays zero."""
    return 0 if mired == 0 else 1_000_000 // mired


def kelvin_to_mired(kelvin: int) -> int:
    """Convert kelvin to mireds; zero stays zero."""
    return 0 if kelvin == 0 else 1_000_000 // kelvin


def camel_case_to_space_separated(camel: str) -> str:
    """Turn 'powerSwitch' into 'Power Switch'."""
    if not camel:
        return ""
    first, rest = camel[0], camel[1:]
    head = first.upper() if first.isascii() else first
    return head + "".join(f" {ch}" if ch.isupper() else ch for ch in rest)