from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, fields, replace
from enum import Enum

from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.elements import ElementRecord


class SortOption(Enum):
    ATOMIC_NUMBER = "Atomic Number"
    NAME = "Element Name"
    SYMBOL = "Symbol"
    ATOMIC_MASS = "Atomic Mass"
    DENSITY = "Density"
    MELTING_POINT = "Melting Point"
    BOILING_POINT = "Boiling Point"
    CATEGORY = "Category"
    PERIOD = "Period"
    GROUP = "Group"
    BLOCK = "Block (s, p, d, f)"
    PHASE = "State (Solid/Liquid/Gas)"
    DISCOVERY_DATE = "Discovery Date"
    DISCOVERED_BY = "Discovered By"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: object) -> SortOption:
        for option in cls:
            if option.value == label or option.name == label:
                return option
        return cls.ATOMIC_NUMBER


SORT_SECTIONS: tuple[tuple[str, tuple[SortOption, ...]], ...] = (
    ("Basic", (SortOption.ATOMIC_NUMBER, SortOption.NAME, SortOption.SYMBOL)),
    (
        "Physical Properties",
        (SortOption.ATOMIC_MASS, SortOption.DENSITY, SortOption.MELTING_POINT, SortOption.BOILING_POINT),
    ),
    (
        "Classification",
        (SortOption.CATEGORY, SortOption.PERIOD, SortOption.GROUP, SortOption.BLOCK, SortOption.PHASE),
    ),
    ("Historical", (SortOption.DISCOVERY_DATE, SortOption.DISCOVERED_BY)),
)


def _missing_last(value: float | None) -> tuple[bool, float]:
    if value is None or math.isnan(value):
        return (True, 0.0)
    return (False, value)


def _discovery(record: ElementRecord) -> str:
    # no discovery year in the dataset, the attribution stands in for it
    return record.discovered_by or ""


_SORT_KEYS: dict[SortOption, Callable[[ElementRecord], object]] = {
    SortOption.ATOMIC_NUMBER: lambda r: r.number,
    SortOption.NAME: lambda r: r.name,
    SortOption.SYMBOL: lambda r: r.symbol,
    SortOption.ATOMIC_MASS: lambda r: r.atomic_mass,
    SortOption.DENSITY: lambda r: _missing_last(r.density),
    SortOption.MELTING_POINT: lambda r: _missing_last(r.melt),
    SortOption.BOILING_POINT: lambda r: _missing_last(r.boil),
    SortOption.CATEGORY: lambda r: r.category,
    SortOption.PERIOD: lambda r: r.period,
    SortOption.GROUP: lambda r: r.group,
    SortOption.BLOCK: lambda r: r.block,
    SortOption.PHASE: lambda r: r.phase,
    SortOption.DISCOVERY_DATE: _discovery,
    SortOption.DISCOVERED_BY: _discovery,
}


def sort_elements(records: Iterable[ElementRecord], option: SortOption) -> list[ElementRecord]:
    """Stable ascending sort; records without a value for numeric keys go last."""
    return sorted(records, key=_SORT_KEYS[option])


_FILTER_LABELS = {
    "category": "{}",
    "phase": "{}",
    "block": "Block {}",
    "period": "Period {}",
    "group": "Group {}",
}


@dataclass(frozen=True)
class FilterSet:
    category: str | None = None
    phase: str | None = None
    block: str | None = None
    period: int | None = None
    group: int | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def matches(self, record: ElementRecord) -> bool:
        for f in fields(self):
            wanted = getattr(self, f.name)
            if wanted is not None and getattr(record, f.name) != wanted:
                return False
        return True

    def active(self) -> list[tuple[str, str]]:
        """(field, badge text) for every constraint that is set, in field order."""
        return [
            (f.name, _FILTER_LABELS[f.name].format(getattr(self, f.name)))
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]

    def without(self, name: str) -> FilterSet:
        return replace(self, **{name: None})

    def cleared(self) -> FilterSet:
        return FilterSet()


def filter_elements(records: Iterable[ElementRecord], filters: FilterSet) -> list[ElementRecord]:
    return [record for record in records if filters.matches(record)]


@dataclass(frozen=True)
class ElementQuery:
    text: str = ""
    filters: FilterSet = field(default_factory=FilterSet)
    sort: SortOption = SortOption.ATOMIC_NUMBER

    @property
    def is_default(self) -> bool:
        return self.filters.is_empty and self.sort is SortOption.ATOMIC_NUMBER

    def with_text(self, text: str) -> ElementQuery:
        return replace(self, text=text)

    def with_filters(self, filters: FilterSet) -> ElementQuery:
        return replace(self, filters=filters)

    def with_sort(self, sort: SortOption) -> ElementQuery:
        return replace(self, sort=sort)

    def reset(self) -> ElementQuery:
        return ElementQuery(text=self.text)

    def run(self, catalogue: Catalogue) -> list[ElementRecord]:
        matches = catalogue.search(self.text)
        return sort_elements(filter_elements(matches, self.filters), self.sort)
