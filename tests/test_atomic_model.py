from __future__ import annotations

import math
import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
sys.path.append(str(Path(__file__).resolve().parent))

from element_catalogue.chem.atomic_model import (
    SHELL_SPACING,
    build_atom_model,
    electron_positions,
    orbit_phase,
    shell_radius,
    tilt_matrix,
)
from element_catalogue.chem.colors import CATEGORY_COLORS
from element_fixtures import make_record


class AtomicModelTests(unittest.TestCase):
    def test_shell_radius_grows_linearly(self) -> None:
        self.assertEqual(shell_radius(0), SHELL_SPACING)
        self.assertAlmostEqual(shell_radius(3), 4 * SHELL_SPACING)

    def test_tilt_is_a_rotation(self) -> None:
        m = tilt_matrix()
        np.testing.assert_allclose(m @ m.T, np.eye(3), atol=1e-12)
        self.assertAlmostEqual(float(np.linalg.det(m)), 1.0)

    def test_electrons_sit_on_the_ring(self) -> None:
        points = electron_positions(8, 2.4, phase=0.3)
        self.assertEqual(points.shape, (8, 3))
        np.testing.assert_allclose(np.linalg.norm(points, axis=1), 2.4)

    def test_electrons_are_evenly_spaced(self) -> None:
        points = electron_positions(4, 1.0)
        gaps = np.linalg.norm(points - np.roll(points, 1, axis=0), axis=1)
        np.testing.assert_allclose(gaps, math.sqrt(2.0))

    def test_no_electrons(self) -> None:
        self.assertEqual(electron_positions(0, 1.0).shape, (0, 3))

    def test_outer_shells_move_slower(self) -> None:
        self.assertGreater(orbit_phase(0.5, shell_radius(0)), orbit_phase(0.5, shell_radius(3)))
        self.assertEqual(orbit_phase(0.0, 2.0), 0.0)
        self.assertTrue(0.0 <= orbit_phase(1234.5, 1.2) < 2 * math.pi)

    def test_build_model_for_iron(self) -> None:
        iron = make_record(26, "Iron", "Fe", category="transition metal", shells=[2, 8, 14, 2])
        model = build_atom_model(iron)
        self.assertEqual(model.symbol, "Fe")
        self.assertEqual(model.nucleus_color, CATEGORY_COLORS["transition metal"])
        self.assertEqual([shell.electron_count for shell in model.shells], [2, 8, 14, 2])
        self.assertEqual(model.electron_count, 26)
        self.assertEqual([shell.radius for shell in model.shells], [shell_radius(i) for i in range(4)])
        for shell in model.shells:
            self.assertEqual(shell.positions.shape, (shell.electron_count, 3))


if __name__ == "__main__":
    unittest.main()
