from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from element_catalogue.chem.colors import color_for_element
from element_catalogue.chem.elements import ElementRecord

SHELL_SPACING = 1.2
NUCLEUS_RADIUS = 0.5
ELECTRON_RADIUS = 0.1
SHELL_TILT = math.pi / 3
BASE_PERIOD_S = 5.0


@dataclass(frozen=True)
class ShellModel:
    radius: float
    electron_count: int
    positions: np.ndarray


@dataclass(frozen=True)
class AtomModel:
    symbol: str
    nucleus_color: str
    shells: tuple[ShellModel, ...]

    @property
    def electron_count(self) -> int:
        return sum(shell.electron_count for shell in self.shells)


def shell_radius(index: int) -> float:
    return (index + 1) * SHELL_SPACING


def tilt_matrix(angle: float = SHELL_TILT) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def electron_positions(count: int, radius: float, phase: float = 0.0) -> np.ndarray:
    """Evenly spaced electrons on a tilted ring of the given radius."""
    if count <= 0:
        return np.zeros((0, 3))
    angles = phase + np.arange(count) * (2 * math.pi / count)
    ring = np.column_stack([radius * np.cos(angles), np.zeros(count), radius * np.sin(angles)])
    return ring @ tilt_matrix().T


def orbit_phase(elapsed_s: float, radius: float) -> float:
    """Angle travelled after elapsed_s; outer shells revolve more slowly."""
    period = BASE_PERIOD_S * (radius / 2.0)
    if period <= 0:
        return 0.0
    return (2 * math.pi * elapsed_s / period) % (2 * math.pi)


def build_atom_model(record: ElementRecord, elapsed_s: float = 0.0) -> AtomModel:
    shells = []
    for index, count in enumerate(record.shells):
        radius = shell_radius(index)
        shells.append(ShellModel(radius, count, electron_positions(count, radius, orbit_phase(elapsed_s, radius))))
    return AtomModel(record.symbol, color_for_element(record), tuple(shells))
