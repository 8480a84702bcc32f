from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from element_catalogue.chem.catalogue import default_dataset_path, parse_elements, read_dataset
from element_catalogue.errors import CatalogueLoadError


def check_dataset(path: Path) -> bool:
    entries = read_dataset(path)
    records, dropped, duplicates = parse_elements(entries)
    print(f"{path}: {len(entries)} entries, {len(records)} kept, {dropped} malformed, {duplicates} duplicate")
    positions = Counter((record.xpos, record.ypos) for record in records)
    clashes = sorted(pos for pos, count in positions.items() if count > 1)
    for xpos, ypos in clashes:
        print(f"  grid cell ({xpos}, {ypos}) is used by more than one element")
    bad_shells = [record.symbol for record in records if record.electron_count != record.number]
    if bad_shells:
        print(f"  shell totals differ from atomic number: {', '.join(bad_shells)}")
    return not (dropped or duplicates or clashes or bad_shells)


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate an element dataset file.")
    parser.add_argument("path", type=Path, nargs="?", default=default_dataset_path())
    parser.add_argument("--verbose", action="store_true", help="log every skipped entry")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(message)s")
    try:
        ok = check_dataset(args.path)
    except CatalogueLoadError as exc:
        raise SystemExit(str(exc)) from exc
    if not ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
