from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from element_catalogue.chem.elements import ElementRecord, element_from_dict


def element_entry(number: int, name: str, symbol: str, **overrides) -> dict:
    """A minimal dataset entry; keyword arguments replace or add fields."""
    entry = {
        "number": number,
        "name": name,
        "symbol": symbol,
        "category": "diatomic nonmetal",
        "phase": "Gas",
        "block": "s",
        "atomic_mass": float(number) * 2.0,
        "period": 1,
        "group": 1,
        "xpos": number,
        "ypos": 1,
        "shells": [number],
        "electron_configuration": f"1s{number}",
        "summary": f"{name} summary.",
        "source": f"https://en.wikipedia.org/wiki/{name}",
    }
    entry.update(overrides)
    return entry


def make_record(number: int, name: str, symbol: str, **overrides) -> ElementRecord:
    return element_from_dict(element_entry(number, name, symbol, **overrides))


def hydrogen_helium() -> list[ElementRecord]:
    return [
        make_record(1, "Hydrogen", "H", atomic_mass=1.008, density=0.08988, melt=13.99, boil=20.271),
        make_record(
            2,
            "Helium",
            "He",
            atomic_mass=4.002,
            category="noble gas",
            group=18,
            xpos=18,
            density=0.1786,
            melt=0.95,
            boil=4.222,
        ),
    ]
