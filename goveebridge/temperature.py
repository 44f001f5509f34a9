"""Temperature scales, units and values with conversion and parsing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

UNIT_CELSIUS = "°C"
UNIT_FAHRENHEIT = "°F"
DEVICE_CLASS_TEMPERATURE = "temperature"


def _format_number(value: float) -> str:
    """Render a float the way a shortest round-trip display would, without a trailing '.0'."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


class TemperatureScale(Enum):
    """A temperature scale; Celsius is the default."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    def unit_of_measurement(self) -> str:
        """The unit symbol for this scale."""
        return UNIT_CELSIUS if self is TemperatureScale.CELSIUS else UNIT_FAHRENHEIT

    @classmethod
    def parse(cls, text: str) -> TemperatureScale:
        """Parse a scale name or symbol such as 'C', '°F' or 'celsius'."""
        if text in ("c", "C", "°c", "°C", "Celsius", "celsius"):
            return cls.CELSIUS
        if text in ("f", "F", "°f", "°F", "Fahrenheit", "fahrenheit"):
            return cls.FAHRENHEIT
        raise ValueError(f"Unknown temperature scale {text}")

    def __str__(self) -> str:
        return self.unit_of_measurement()


class TemperatureUnits(Enum):
    """Units in which a temperature reading is expressed, possibly scaled by 100."""

    CELSIUS = ("celsius", 1.0)
    CELSIUS_TIMES_100 = ("celsius", 100.0)
    FAHRENHEIT = ("fahrenheit", 1.0)
    FAHRENHEIT_TIMES_100 = ("fahrenheit", 100.0)

    @property
    def factor(self) -> float:
        return self.value[1]

    @property
    def scale(self) -> TemperatureScale:
        return TemperatureScale(self.value[0])

    def unit_of_measurement(self) -> str | None:
        """The unit symbol, or None for scaled units that have no standard symbol."""
        if self.factor == 1.0:
            return self.scale.unit_of_measurement()
        return None

    @classmethod
    def from_scale(cls, scale: TemperatureScale) -> TemperatureUnits:
        """The unscaled units for the given scale."""
        if scale is TemperatureScale.CELSIUS:
            return cls.CELSIUS
        return cls.FAHRENHEIT

    def __str__(self) -> str:
        if self.factor == 1.0:
            return str(self.scale)
        return f"{self.scale}*{_format_number(self.factor)}"


def ftoc(f: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (f - 32.0) * (5.0 / 9.0)


def ctof(c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return (c * 9.0 / 5.0) + 32.0


def _split_numeric_prefix(text: str) -> tuple[float, str]:
    """Split a string into its leading number and the trimmed remainder."""
    text = text.strip()
    end = next(
        (i for i, ch in enumerate(text) if not ch.isnumeric() and ch != "."),
        len(text),
    )
    number_text = text[:end]
    try:
        number = float(number_text)
    except ValueError:
        raise ValueError(f"invalid float literal {number_text!r}") from None
    return number, text[end:].strip()


@dataclass(frozen=True)
class TemperatureValue:
    """A temperature reading in particular units."""

    value: float
    unit: TemperatureUnits

    @classmethod
    def with_celsius(cls, value: float) -> TemperatureValue:
        return cls(value, TemperatureUnits.CELSIUS)

    @classmethod
    def with_fahrenheit(cls, value: float) -> TemperatureValue:
        return cls(value, TemperatureUnits.FAHRENHEIT)

    def normalize(self) -> TemperatureValue:
        """Remove any scaling factor from the units."""
        return TemperatureValue(
            self.value / self.unit.factor, TemperatureUnits.from_scale(self.unit.scale)
        )

    def as_unit(self, unit: TemperatureUnits) -> TemperatureValue:
        """Convert to the given units."""
        if self.unit is unit:
            return self
        normalized = self.value / self.unit.factor
        source, target = self.unit.scale, unit.scale
        if source is target:
            converted = normalized
        elif source is TemperatureScale.CELSIUS:
            converted = ctof(normalized)
        else:
            converted = ftoc(normalized)
        return TemperatureValue(converted * unit.factor, unit)

    def as_celsius(self) -> float:
        return self.as_unit(TemperatureUnits.CELSIUS).value

    def as_fahrenheit(self) -> float:
        return self.as_unit(TemperatureUnits.FAHRENHEIT).value

    @classmethod
    def parse_with_optional_scale(
        cls, text: str, scale: TemperatureScale | None = None
    ) -> TemperatureValue:
        """Parse '23', '23.5C' or ' 23 F '; a bare number uses `scale`, defaulting to Celsius."""
        value, suffix = _split_numeric_prefix(text)
        if suffix:
            resolved = TemperatureScale.parse(suffix)
        else:
            resolved = scale if scale is not None else TemperatureScale.CELSIUS
        return cls(value, TemperatureUnits.from_scale(resolved))

    def __str__(self) -> str:
        normalized = self.normalize()
        return f"{_format_number(normalized.value)}{normalized.unit}"