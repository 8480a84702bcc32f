from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from element_catalogue.chem.catalogue import default_dataset_path, load_catalogue, parse_elements, read_dataset
from element_catalogue.chem.query import ElementQuery, FilterSet, SortOption


class BundledDatasetTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.catalogue = load_catalogue()

    def test_every_entry_is_kept(self) -> None:
        entries = read_dataset(default_dataset_path())
        records, dropped, duplicates = parse_elements(entries)
        self.assertEqual((len(records), dropped, duplicates), (118, 0, 0))

    def test_numbers_run_from_1_to_118(self) -> None:
        self.assertEqual([r.number for r in self.catalogue], list(range(1, 119)))

    def test_shells_hold_every_electron(self) -> None:
        for record in self.catalogue:
            self.assertEqual(record.electron_count, record.number, record.symbol)

    def test_grid_positions_are_unique(self) -> None:
        cells = [(r.xpos, r.ypos) for r in self.catalogue]
        self.assertEqual(len(cells), len(set(cells)))
        for x, y in cells:
            self.assertTrue(1 <= x <= 18)
            self.assertTrue(1 <= y <= 10)

    def test_f_block_rows(self) -> None:
        lanthanides = [r.symbol for r in self.catalogue if r.ypos == 9]
        self.assertEqual(lanthanides[0], "La")
        self.assertEqual(len(lanthanides), 15)
        self.assertTrue(self.catalogue.by_symbol("U").is_f_block_row)
        self.assertFalse(self.catalogue.by_symbol("Fe").is_f_block_row)

    def test_known_records(self) -> None:
        hydrogen = self.catalogue.by_number(1)
        self.assertEqual((hydrogen.symbol, hydrogen.category, hydrogen.phase), ("H", "diatomic nonmetal", "Gas"))
        mercury = self.catalogue.by_symbol("Hg")
        self.assertEqual((mercury.number, mercury.phase), (80, "Liquid"))
        self.assertEqual(self.catalogue.by_symbol("Og").name, "Oganesson")

    def test_liquid_filter(self) -> None:
        liquids = ElementQuery(filters=FilterSet(phase="Liquid")).run(self.catalogue)
        self.assertEqual([r.symbol for r in liquids], ["Br", "Hg"])

    def test_missing_melting_points_sort_last(self) -> None:
        ordered = ElementQuery(sort=SortOption.MELTING_POINT).run(self.catalogue)
        tail = ordered[-10:]
        self.assertTrue(all(r.melt is None for r in tail))
        self.assertTrue(all(r.melt is not None for r in ordered[:-10]))
        self.assertEqual(ordered[0].symbol, "He")

    def test_search_he_on_full_table(self) -> None:
        names = [r.name for r in self.catalogue.search("he")]
        self.assertIn("Helium", names)
        self.assertNotIn("Hydrogen", names)

    def test_every_record_found_by_its_number(self) -> None:
        for record in self.catalogue:
            self.assertIs(self.catalogue.by_number(record.number), record)

    def test_every_name_substring_finds_its_record(self) -> None:
        for record in self.catalogue:
            name = record.name
            for start in range(len(name)):
                for end in range(start + 1, len(name) + 1):
                    with self.subTest(name=name, part=name[start:end]):
                        self.assertIn(record, self.catalogue.search(name[start:end].upper()))


if __name__ == "__main__":
    unittest.main()
