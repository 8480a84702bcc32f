from __future__ import annotations

from dataclasses import dataclass

from element_catalogue.chem.elements import ElementRecord
from element_catalogue.chem.units import format_numeric, format_quantity, format_temperature


@dataclass(frozen=True)
class InfoSection:
    title: str
    rows: tuple[tuple[str, str], ...]


def _text(value: object) -> str:
    if value is None or value == "":
        return "-"
    return str(value)


def _shells(record: ElementRecord) -> str:
    return ", ".join(str(n) for n in record.shells) if record.shells else "-"


def detail_sections(record: ElementRecord, temperature_unit: str = "K") -> list[InfoSection]:
    """Rows shown in the element detail dialog, grouped by section.

    Missing values render as ``"-"``; melting and boiling points follow
    ``temperature_unit``.
    """
    return [
        InfoSection(
            "Basic Information",
            (
                ("Category", record.category.title()),
                ("Atomic Mass", format_quantity(record.atomic_mass, "u")),
                ("Phase", record.phase),
                ("Appearance", _text(record.appearance)),
                ("Block", record.block),
                ("Period", str(record.period)),
                ("Group", str(record.group)),
            ),
        ),
        InfoSection(
            "Physical Properties",
            (
                ("Density", format_quantity(record.density, "g/cm³")),
                ("Melting Point", format_temperature(record.melt, temperature_unit)),
                ("Boiling Point", format_temperature(record.boil, temperature_unit)),
                ("Molar Heat", format_quantity(record.molar_heat, "J/(mol·K)")),
            ),
        ),
        InfoSection(
            "Electronic Properties",
            (
                ("Electron Configuration", _text(record.electron_configuration)),
                ("Semantic Configuration", _text(record.electron_configuration_semantic)),
                ("Electronegativity (Pauling)", format_numeric(record.electronegativity_pauling)),
                ("Electron Affinity", format_quantity(record.electron_affinity, "kJ/mol")),
                ("First Ionization Energy", format_quantity(record.first_ionization_energy, "kJ/mol")),
                ("Shells", _shells(record)),
            ),
        ),
        InfoSection(
            "Discovery",
            (
                ("Discovered By", _text(record.discovered_by)),
                ("Named By", _text(record.named_by)),
            ),
        ),
    ]


def image_reference(record: ElementRecord) -> str:
    if record.image is None:
        return "No image reference"
    image = record.image
    return f"{image.title} ({image.attribution})" if image.attribution else image.title
