from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
sys.path.append(str(Path(__file__).resolve().parent))

from element_catalogue.chem.colors import (
    CATEGORY_COLORS,
    COLORMAPS,
    MISSING_COLOR,
    NEUTRAL_COLOR,
    PHASE_COLORS,
    PROPERTY_SCHEMES,
    color_for_category,
    color_for_phase,
    contrast_text,
    property_colors,
    resolve_cmap,
    scheme_by_key,
    scheme_colors,
    value_range,
)
from element_fixtures import make_record


def _records() -> list:
    return [
        make_record(1, "Hydrogen", "H", density=0.1),
        make_record(2, "Helium", "He", category="noble gas", density=10.0, phase="Gas"),
        make_record(26, "Iron", "Fe", category="Transition Metal", density=5.0, phase="Solid"),
        make_record(109, "Meitnerium", "Mt", category="unknown, probably transition metal", phase="Solid"),
    ]


class ColorLookupTests(unittest.TestCase):
    def test_category_lookup_ignores_case(self) -> None:
        self.assertEqual(color_for_category("Transition Metal"), CATEGORY_COLORS["transition metal"])
        self.assertEqual(color_for_category(" noble gas "), CATEGORY_COLORS["noble gas"])

    def test_unknown_category_is_neutral(self) -> None:
        self.assertEqual(color_for_category("unknown, probably transition metal"), NEUTRAL_COLOR)
        self.assertEqual(color_for_category(None), NEUTRAL_COLOR)

    def test_phase_lookup(self) -> None:
        self.assertEqual(color_for_phase("Liquid"), PHASE_COLORS["liquid"])
        self.assertEqual(color_for_phase(""), MISSING_COLOR)

    def test_contrast_text(self) -> None:
        self.assertEqual(contrast_text("#ffffff"), "#0f172a")
        self.assertEqual(contrast_text("#000000"), "#f8fafc")
        self.assertEqual(contrast_text("bogus"), "#0f172a")

    def test_every_listed_colormap_resolves(self) -> None:
        for name in COLORMAPS:
            cmap = resolve_cmap(name)
            self.assertEqual(len(cmap(0.5)), 4)

    def test_unknown_colormap_falls_back_to_viridis(self) -> None:
        self.assertEqual(resolve_cmap("no-such-map").name, "viridis")

    def test_scheme_lookup(self) -> None:
        self.assertEqual(scheme_by_key("density").field, "density")
        self.assertIs(scheme_by_key("missing"), PROPERTY_SCHEMES[0])
        self.assertFalse(scheme_by_key("category").is_numeric)
        self.assertTrue(scheme_by_key("boil").is_numeric)


class PropertyColorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.records = _records()

    def test_value_range_skips_missing(self) -> None:
        self.assertEqual(value_range(self.records, "density"), (0.1, 10.0))
        self.assertIsNone(value_range(self.records, "boil"))

    def test_log_range_skips_non_positive(self) -> None:
        records = self.records + [make_record(3, "Lithium", "Li", density=0.0)]
        self.assertEqual(value_range(records, "density", log_scale=True), (0.1, 10.0))
        self.assertEqual(value_range(records, "density"), (0.0, 10.0))

    def test_extremes_map_to_colormap_ends(self) -> None:
        colors = property_colors(self.records, "density", "viridis")
        self.assertEqual(colors[1], "#440154")
        self.assertEqual(colors[2], "#fde725")
        self.assertEqual(colors[109], MISSING_COLOR)

    def test_log_scale_places_geometric_mean_mid_way(self) -> None:
        records = [
            make_record(1, "A", "A", density=1.0),
            make_record(2, "B", "B", density=10.0),
            make_record(3, "C", "C", density=100.0),
        ]
        colors = property_colors(records, "density", "viridis", log_scale=True)
        mid = resolve_cmap("viridis")(0.5)
        expected = "#" + "".join(f"{int(round(float(c) * 255)):02x}" for c in mid[:3])
        self.assertEqual(colors[2], expected)

    def test_field_without_values_is_all_missing(self) -> None:
        colors = property_colors(self.records, "melt")
        self.assertEqual(set(colors.values()), {MISSING_COLOR})

    def test_scheme_colors_dispatch(self) -> None:
        by_category = scheme_colors(self.records, scheme_by_key("category"))
        self.assertEqual(by_category[2], CATEGORY_COLORS["noble gas"])
        by_phase = scheme_colors(self.records, scheme_by_key("phase"))
        self.assertEqual(by_phase[26], PHASE_COLORS["solid"])
        by_density = scheme_colors(self.records, scheme_by_key("density"), "viridis")
        self.assertEqual(by_density, property_colors(self.records, "density", "viridis"))
        self.assertEqual(set(by_density), {1, 2, 26, 109})


if __name__ == "__main__":
    unittest.main()
