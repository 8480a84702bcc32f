"""Illustrative emission spectra.

The lines produced here are not measured data: their positions are derived
from the atomic number so that every element gets a stable, distinct pattern
for teaching purposes.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from element_catalogue.chem.elements import ElementRecord

VISIBLE_MIN_NM = 380.0
VISIBLE_MAX_NM = 750.0
SCALE_STEP_NM = 50
SCALE_TICKS = tuple(int(VISIBLE_MIN_NM) + i * SCALE_STEP_NM for i in range(7))

MIN_LINES = 5
MAX_LINES = 15

NOTABLE_LINES: tuple[tuple[float, str], ...] = (
    (434.2, "blue"),
    (486.3, "green-blue"),
    (656.3, "red"),
)

DISCLAIMER = "Note: This is simulated spectral data for educational purposes."

# (start, end, rgb at start, rgb at end); channels interpolate linearly inside a band
_BANDS = (
    (380.0, 440.0, (1.0, 0.0, 1.0), (0.0, 0.0, 1.0)),
    (440.0, 490.0, (0.0, 0.0, 1.0), (0.0, 1.0, 1.0)),
    (490.0, 510.0, (0.0, 1.0, 1.0), (0.0, 1.0, 0.0)),
    (510.0, 580.0, (0.0, 1.0, 0.0), (1.0, 1.0, 0.0)),
    (580.0, 645.0, (1.0, 1.0, 0.0), (1.0, 0.0, 0.0)),
    (645.0, 750.0, (1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
)
_OUT_OF_RANGE = (0.5, 0.5, 0.5)


@dataclass(frozen=True)
class SpectralLine:
    position: float
    wavelength_nm: float


def line_count(atomic_number: int) -> int:
    return min(MAX_LINES, max(MIN_LINES, atomic_number // 10))


def position_to_wavelength(position: float) -> float:
    return VISIBLE_MIN_NM + float(position) * (VISIBLE_MAX_NM - VISIBLE_MIN_NM)


def simulated_lines(record: ElementRecord | int) -> list[SpectralLine]:
    number = record if isinstance(record, int) else record.number
    seeds = number * np.arange(1, line_count(number) + 1, dtype=float)
    positions = np.sin(seeds) * 0.5 + 0.5
    return [SpectralLine(float(pos), position_to_wavelength(pos)) for pos in positions]


def wavelength_to_rgb(wavelength_nm: float) -> tuple[float, float, float]:
    for start, end, low, high in _BANDS:
        if start <= wavelength_nm <= end:
            t = (wavelength_nm - start) / (end - start)
            rgb = np.asarray(low) + (np.asarray(high) - np.asarray(low)) * t
            return tuple(float(c) for c in np.clip(rgb, 0.0, 1.0))
    return _OUT_OF_RANGE


def rgb_to_hex(rgb: tuple[float, float, float]) -> str:
    return "#" + "".join(f"{int(round(channel * 255)):02x}" for channel in rgb)


def spectrum_caption(record: ElementRecord) -> str:
    return f"{record.name} is in the {record.category} category."


def notable_line_labels() -> list[str]:
    return [f"{wavelength:.1f} nm ({name})" for wavelength, name in NOTABLE_LINES]
