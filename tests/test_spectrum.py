from __future__ import annotations

import math
import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
sys.path.append(str(Path(__file__).resolve().parent))

from element_catalogue.chem.spectrum import (
    MAX_LINES,
    MIN_LINES,
    SCALE_TICKS,
    VISIBLE_MAX_NM,
    VISIBLE_MIN_NM,
    line_count,
    notable_line_labels,
    position_to_wavelength,
    rgb_to_hex,
    simulated_lines,
    spectrum_caption,
    wavelength_to_rgb,
)
from element_fixtures import make_record


class SpectrumTests(unittest.TestCase):
    def test_line_count_is_clamped(self) -> None:
        self.assertEqual(line_count(1), MIN_LINES)
        self.assertEqual(line_count(49), MIN_LINES)
        self.assertEqual(line_count(80), 8)
        self.assertEqual(line_count(118), 11)
        self.assertEqual(line_count(500), MAX_LINES)

    def test_lines_follow_sine_of_number(self) -> None:
        lines = simulated_lines(26)
        self.assertEqual(len(lines), 5)
        for index, line in enumerate(lines, start=1):
            self.assertAlmostEqual(line.position, math.sin(26 * index) * 0.5 + 0.5)
            self.assertTrue(0.0 <= line.position <= 1.0)
            self.assertTrue(VISIBLE_MIN_NM <= line.wavelength_nm <= VISIBLE_MAX_NM)

    def test_record_and_number_agree(self) -> None:
        record = make_record(80, "Mercury", "Hg")
        self.assertEqual(simulated_lines(record), simulated_lines(80))

    def test_lines_are_deterministic(self) -> None:
        self.assertEqual(simulated_lines(11), simulated_lines(11))
        self.assertNotEqual(simulated_lines(11), simulated_lines(12))

    def test_position_to_wavelength_ends(self) -> None:
        self.assertEqual(position_to_wavelength(0.0), VISIBLE_MIN_NM)
        self.assertEqual(position_to_wavelength(1.0), VISIBLE_MAX_NM)

    def test_scale_ticks(self) -> None:
        self.assertEqual(SCALE_TICKS, (380, 430, 480, 530, 580, 630, 680))

    def test_wavelength_colours(self) -> None:
        self.assertEqual(rgb_to_hex(wavelength_to_rgb(380.0)), "#ff00ff")
        self.assertEqual(rgb_to_hex(wavelength_to_rgb(440.0)), "#0000ff")
        self.assertEqual(rgb_to_hex(wavelength_to_rgb(700.0)), "#ff0000")
        self.assertEqual(wavelength_to_rgb(200.0), (0.5, 0.5, 0.5))

    def test_caption_and_labels(self) -> None:
        record = make_record(2, "Helium", "He", category="noble gas")
        self.assertEqual(spectrum_caption(record), "Helium is in the noble gas category.")
        self.assertEqual(notable_line_labels(), ["434.2 nm (blue)", "486.3 nm (green-blue)", "656.3 nm (red)"])


if __name__ == "__main__":
    unittest.main()
