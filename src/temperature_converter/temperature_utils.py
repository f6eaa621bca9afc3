#!/usr/bin/env python3
"""
Temperature conversion utilities for the converter
Handles conversion between Celsius, Fahrenheit, and Kelvin
"""

import math
from enum import Enum
from typing import Optional, Union


class TemperatureUnit(Enum):
    """Supported temperature units: (code, display name, symbol)"""
    CELSIUS = ('C', 'Celsius', '°C')
    FAHRENHEIT = ('F', 'Fahrenheit', '°F')
    KELVIN = ('K', 'Kelvin', 'K')

    def __init__(self, code: str, display_name: str, symbol: str):
        self.code = code
        self.display_name = display_name
        self.symbol = symbol


# Reference scale is Kelvin:
#   kelvin = (value - zero) * to_scale + offset
#   value  = (kelvin - offset) * from_scale + zero
_KELVIN_BASIS = {
    TemperatureUnit.CELSIUS: (0.0, 1.0, 1.0, 273.15),
    TemperatureUnit.FAHRENHEIT: (32.0, 5 / 9, 9 / 5, 273.15),
    TemperatureUnit.KELVIN: (0.0, 1.0, 1.0, 0.0),
}

UnitLike = Union[TemperatureUnit, str]


def parse_unit(unit: UnitLike) -> TemperatureUnit:
    """Resolve a unit from an enum member, display name, enum name or code

    Args:
        unit: e.g. TemperatureUnit.KELVIN, 'Kelvin', 'KELVIN' or 'K'

    Returns:
        Matching TemperatureUnit

    Raises:
        ValueError: If unit is not supported
    """
    if isinstance(unit, TemperatureUnit):
        return unit

    key = str(unit).strip().upper()
    for member in TemperatureUnit:
        if key in (member.code, member.name, member.display_name.upper()):
            return member
    raise ValueError(f"Unsupported temperature unit: {unit}")


def parse_number(text) -> Optional[float]:
    """Parse numeric text, returning None when it is not a finite number"""
    if isinstance(text, bool):
        return None
    try:
        if isinstance(text, (int, float)):
            value = float(text)
        else:
            value = float(str(text).strip())
    except (ValueError, OverflowError):
        # Integers too large for a float overflow rather than becoming inf
        return None
    if not math.isfinite(value):
        return None
    return value


def to_kelvin(value: float, unit: UnitLike) -> float:
    """Convert a value in the given unit onto the Kelvin reference scale"""
    zero, to_scale, from_scale, offset = _KELVIN_BASIS[parse_unit(unit)]
    return (value - zero) * to_scale + offset


def from_kelvin(kelvin: float, unit: UnitLike) -> float:
    """Convert a Kelvin value into the given unit"""
    zero, to_scale, from_scale, offset = _KELVIN_BASIS[parse_unit(unit)]
    return (kelvin - offset) * from_scale + zero


def convert_temperature(temp: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """Convert temperature between any supported units

    Args:
        temp: Temperature value to convert
        from_unit: Source unit (member, name or code)
        to_unit: Target unit (member, name or code)

    Returns:
        Converted temperature value

    Raises:
        ValueError: If unit is not supported
    """
    source = parse_unit(from_unit)
    target = parse_unit(to_unit)

    # No conversion needed
    if source is target:
        return temp

    return from_kelvin(to_kelvin(temp, source), target)


convert = convert_temperature


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit"""
    return convert(celsius, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT)


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius"""
    return convert(fahrenheit, TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS)


def celsius_to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin"""
    return convert(celsius, TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN)


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius"""
    return convert(kelvin, TemperatureUnit.KELVIN, TemperatureUnit.CELSIUS)


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    """Convert Fahrenheit to Kelvin"""
    return convert(fahrenheit, TemperatureUnit.FAHRENHEIT, TemperatureUnit.KELVIN)


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """Convert Kelvin to Fahrenheit"""
    return convert(kelvin, TemperatureUnit.KELVIN, TemperatureUnit.FAHRENHEIT)


def get_unit_symbol(unit: UnitLike) -> str:
    """Get the display symbol for a temperature unit

    Args:
        unit: Temperature unit (member, name or code)

    Returns:
        Display symbol (e.g., '°F', '°C', 'K')
    """
    return parse_unit(unit).symbol


def format_temperature(temp: float, unit: UnitLike, precision: int = 2) -> str:
    """Format temperature value with unit symbol

    Args:
        temp: Temperature value
        unit: Temperature unit (member, name or code)
        precision: Number of decimal places (default 2)

    Returns:
        Formatted temperature string (e.g., "59.00 °F")
    """
    symbol = get_unit_symbol(unit)
    return f"{temp:.{precision}f} {symbol}"
