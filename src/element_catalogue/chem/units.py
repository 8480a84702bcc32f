from __future__ import annotations

import math

from pint import UnitRegistry

ureg = UnitRegistry()
Q_ = ureg.Quantity

TEMPERATURE_UNITS = ("K", "°C", "°F")
_PINT_TEMPERATURE = {"K": "kelvin", "°C": "degC", "°F": "degF"}


def convert_temperature(kelvin: float | None, unit: str = "K") -> float | None:
    if kelvin is None:
        return None
    target = _PINT_TEMPERATURE.get(unit)
    if target is None:
        raise ValueError(f"Unsupported temperature unit '{unit}'.")
    return float(Q_(kelvin, ureg.kelvin).to(target).magnitude)


def format_numeric(value: float | None) -> str:
    if value is None:
        return "-"
    try:
        v = float(value)
    except (TypeError, ValueError):
        return "-"
    if math.isnan(v):
        return "-"
    if v != 0 and (abs(v) < 1e-2 or abs(v) >= 1e4):
        return f"{v:.3e}"
    if abs(v) >= 1000:
        return f"{v:.0f}"
    if abs(v) >= 100:
        return f"{v:.1f}"
    if abs(v) >= 10:
        return f"{v:.2f}"
    return f"{v:.3f}"


def format_quantity(value: float | None, unit: str | None = None) -> str:
    text = format_numeric(value)
    if text == "-" or not unit:
        return text
    return f"{text} {unit}"


def format_temperature(kelvin: float | None, unit: str = "K") -> str:
    return format_quantity(convert_temperature(kelvin, unit), unit)
