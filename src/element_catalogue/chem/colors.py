from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import cmcrameri.cm as cmc
import matplotlib
import numpy as np

from element_catalogue.chem.elements import ElementRecord

NEUTRAL_COLOR = "#94a3b8"
MISSING_COLOR = "#cbd5e1"

CATEGORY_COLORS = {
    "alkali metal": "#ef4444",
    "alkaline earth metal": "#f97316",
    "transition metal": "#eab308",
    "post-transition metal": "#22c55e",
    "metalloid": "#3b82f6",
    "diatomic nonmetal": "#a855f7",
    "polyatomic nonmetal": "#ec4899",
    "noble gas": "#9ca3af",
    "lanthanide": "#14b8a6",
    "actinide": "#6366f1",
}

PHASE_COLORS = {
    "solid": "#f97316",
    "liquid": "#3b82f6",
    "gas": "#22c55e",
}

COLORMAPS = (
    "viridis", "plasma", "inferno", "magma", "cividis",
    "batlow", "lajolla", "oslo", "davos", "vik", "roma", "tokyo",
)


@dataclass(frozen=True)
class PropertyScheme:
    key: str
    label: str
    field: str | None
    default_cmap: str = "viridis"
    unit: str | None = None

    @property
    def is_numeric(self) -> bool:
        return self.key not in ("category", "phase")


PROPERTY_SCHEMES: tuple[PropertyScheme, ...] = (
    PropertyScheme("category", "Category", "category"),
    PropertyScheme("phase", "State", "phase"),
    PropertyScheme("atomic_mass", "Atomic Mass", "atomic_mass", "lajolla", "u"),
    PropertyScheme("density", "Density", "density", "batlow", "g/cm³"),
    PropertyScheme("melt", "Melting Point", "melt", "davos", "K"),
    PropertyScheme("boil", "Boiling Point", "boil", "davos", "K"),
    PropertyScheme("electronegativity", "Electronegativity", "electronegativity_pauling", "oslo"),
)


def scheme_by_key(key: str) -> PropertyScheme:
    for scheme in PROPERTY_SCHEMES:
        if scheme.key == key:
            return scheme
    return PROPERTY_SCHEMES[0]


def color_for_category(category: str | None) -> str:
    return CATEGORY_COLORS.get((category or "").strip().lower(), NEUTRAL_COLOR)


def color_for_element(record: ElementRecord) -> str:
    return color_for_category(record.category)


def color_for_phase(phase: str | None) -> str:
    return PHASE_COLORS.get((phase or "").strip().lower(), MISSING_COLOR)


def contrast_text(hex_color: str) -> str:
    try:
        hc = hex_color.lstrip("#")
        r, g, b = int(hc[0:2], 16), int(hc[2:4], 16), int(hc[4:6], 16)
    except (ValueError, IndexError):
        return "#0f172a"
    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "#0f172a" if luminance > 0.65 else "#f8fafc"


def resolve_cmap(name: str):
    if name in matplotlib.colormaps:
        return matplotlib.colormaps[name]
    cmap = getattr(cmc, name, None)
    if cmap is not None:
        return cmap
    if f"cmc.{name}" in matplotlib.colormaps:
        return matplotlib.colormaps[f"cmc.{name}"]
    return matplotlib.colormaps["viridis"]


def _to_hex(rgba) -> str:
    return "#" + "".join(f"{int(round(float(c) * 255)):02x}" for c in rgba[:3])


def _field_values(records: list[ElementRecord], field: str, log_scale: bool) -> tuple[np.ndarray, np.ndarray]:
    values = np.array(
        [math.nan if getattr(r, field) is None else float(getattr(r, field)) for r in records],
        dtype=float,
    )
    usable = ~np.isnan(values)
    if log_scale:
        usable &= values > 0
    return values, usable


def value_range(records: Iterable[ElementRecord], field: str, log_scale: bool = False) -> tuple[float, float] | None:
    """Smallest and largest usable value of a numeric field, or None when no record has one."""
    values, usable = _field_values(list(records), field, log_scale)
    if not usable.any():
        return None
    return float(np.min(values[usable])), float(np.max(values[usable]))


def property_colors(
    records: Iterable[ElementRecord],
    field: str,
    cmap_name: str = "viridis",
    log_scale: bool = False,
) -> dict[int, str]:
    """Map each record number to a colormap colour for a numeric field."""
    records = list(records)
    values, usable = _field_values(records, field, log_scale)
    colors = {r.number: MISSING_COLOR for r in records}
    if not usable.any():
        return colors
    scaled = np.log10(values, where=usable, out=np.full_like(values, math.nan)) if log_scale else values
    vmin = float(np.min(scaled[usable]))
    vmax = float(np.max(scaled[usable]))
    span = vmax - vmin if not math.isclose(vmin, vmax) else 1.0
    cmap = resolve_cmap(cmap_name)
    for record, value, ok in zip(records, scaled, usable):
        if ok:
            colors[record.number] = _to_hex(cmap((value - vmin) / span))
    return colors


def scheme_colors(
    records: Iterable[ElementRecord],
    scheme: PropertyScheme,
    cmap_name: str | None = None,
    log_scale: bool = False,
) -> dict[int, str]:
    records = list(records)
    if scheme.key == "category":
        return {r.number: color_for_element(r) for r in records}
    if scheme.key == "phase":
        return {r.number: color_for_phase(r.phase) for r in records}
    return property_colors(records, scheme.field, cmap_name or scheme.default_cmap, log_scale)
