from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from element_catalogue.chem.elements import ElementRecord, element_from_dict
from element_catalogue.errors import CatalogueLoadError, MalformedRecordError

logger = logging.getLogger(__name__)

DATASET_FILENAME = "periodic_table.json"


def default_dataset_path() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / DATASET_FILENAME


class Catalogue:
    """Read-only collection of element records, kept in dataset order."""

    def __init__(self, records: Iterable[ElementRecord] = ()) -> None:
        self._records: tuple[ElementRecord, ...] = tuple(records)
        self._by_number: dict[int, ElementRecord] = {}
        self._by_symbol: dict[str, ElementRecord] = {}
        for record in self._records:
            if record.number in self._by_number:
                raise ValueError(f"duplicate atomic number {record.number}")
            self._by_number[record.number] = record
            self._by_symbol.setdefault(record.symbol.lower(), record)

    @classmethod
    def empty(cls) -> Catalogue:
        return cls(())

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ElementRecord]:
        return iter(self._records)

    def __contains__(self, number: object) -> bool:
        return self.by_number(number) is not None

    @property
    def is_empty(self) -> bool:
        return not self._records

    def all(self) -> tuple[ElementRecord, ...]:
        return self._records

    def by_number(self, number: object) -> ElementRecord | None:
        if not isinstance(number, int) or isinstance(number, bool):
            return None
        return self._by_number.get(number)

    def by_symbol(self, symbol: str) -> ElementRecord | None:
        if not symbol:
            return None
        return self._by_symbol.get(symbol.strip().lower())

    def search(self, query: str) -> list[ElementRecord]:
        """Case-insensitive substring match on name, symbol, number and category."""
        needle = (query or "").lower()
        if not needle:
            return list(self._records)
        return [
            record
            for record in self._records
            if needle in record.name.lower()
            or needle in record.symbol.lower()
            or needle in str(record.number)
            or needle in record.category.lower()
        ]

    def categories(self) -> list[str]:
        return sorted({record.category for record in self._records})

    def phases(self) -> list[str]:
        return sorted({record.phase for record in self._records})

    def blocks(self) -> list[str]:
        return sorted({record.block for record in self._records})

    def periods(self) -> list[int]:
        return sorted({record.period for record in self._records})

    def groups(self) -> list[int]:
        return sorted({record.group for record in self._records})


def parse_elements(entries: Iterable) -> tuple[list[ElementRecord], int, int]:
    """Convert raw entries, returning (records, dropped, duplicates)."""
    records: list[ElementRecord] = []
    seen: set[int] = set()
    dropped = 0
    duplicates = 0
    for index, entry in enumerate(entries):
        try:
            record = element_from_dict(entry)
        except MalformedRecordError as exc:
            dropped += 1
            logger.debug("Skipping dataset entry %d: %s", index, exc)
            continue
        if record.number in seen:
            duplicates += 1
            logger.warning("Skipping duplicate atomic number %d (%s)", record.number, record.symbol)
            continue
        seen.add(record.number)
        records.append(record)
    return records, dropped, duplicates


def read_dataset(path: Path) -> list:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CatalogueLoadError(f"Dataset file not found: {path}", path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogueLoadError(f"Dataset file could not be read: {path} ({exc})", path) from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogueLoadError(f"Dataset file is not valid JSON: {path} ({exc})", path) from exc
    if isinstance(payload, dict):
        payload = payload.get("elements")
    if not isinstance(payload, list):
        raise CatalogueLoadError(f"Dataset file has no 'elements' array: {path}", path)
    return payload


def load_catalogue(path: Path | str | None = None) -> Catalogue:
    dataset = Path(path) if path is not None else default_dataset_path()
    try:
        entries = read_dataset(dataset)
    except CatalogueLoadError:
        logger.error("Could not load element dataset from %s", dataset)
        raise
    records, dropped, duplicates = parse_elements(entries)
    logger.info(
        "Loaded %d elements from %s (%d malformed, %d duplicate)",
        len(records),
        dataset,
        dropped,
        duplicates,
    )
    return Catalogue(records)
