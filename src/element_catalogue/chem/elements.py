from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from element_catalogue.errors import MalformedRecordError


@dataclass(frozen=True)
class ElementImage:
    title: str
    url: str
    attribution: str


@dataclass(frozen=True)
class ElementRecord:
    """One chemical element as described by the bundled dataset."""

    number: int
    name: str
    symbol: str
    category: str
    phase: str
    block: str
    atomic_mass: float
    period: int
    group: int
    xpos: int
    ypos: int
    shells: tuple[int, ...]
    electron_configuration: str
    electron_configuration_semantic: str
    summary: str
    source: str
    density: float | None = None
    melt: float | None = None
    boil: float | None = None
    molar_heat: float | None = None
    electronegativity_pauling: float | None = None
    electron_affinity: float | None = None
    ionization_energies: tuple[float, ...] = ()
    wxpos: int | None = None
    wypos: int | None = None
    appearance: str | None = None
    discovered_by: str | None = None
    named_by: str | None = None
    cpk_hex: str | None = None
    image: ElementImage | None = None

    @property
    def electron_count(self) -> int:
        return sum(self.shells)

    @property
    def first_ionization_energy(self) -> float | None:
        return self.ionization_energies[0] if self.ionization_energies else None

    @property
    def is_f_block_row(self) -> bool:
        # lanthanides and actinides are drawn on the detached rows below period 7
        return self.ypos > 7


def _require(raw: Mapping, key: str):
    if key not in raw or raw[key] is None:
        raise MalformedRecordError(f"missing required field '{key}'")
    return raw[key]


def _text(raw: Mapping, key: str) -> str:
    value = _require(raw, key)
    if not isinstance(value, str):
        raise MalformedRecordError(f"field '{key}' must be a string")
    return value


def _optional_text(raw: Mapping, key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedRecordError(f"field '{key}' must be a string or null")
    return value.strip() or None


def _integer(raw: Mapping, key: str) -> int:
    value = _require(raw, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or int(value) != value:
        raise MalformedRecordError(f"field '{key}' must be an integer")
    return int(value)


def _optional_integer(raw: Mapping, key: str) -> int | None:
    if raw.get(key) is None:
        return None
    return _integer(raw, key)


def _number(raw: Mapping, key: str) -> float:
    value = _require(raw, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRecordError(f"field '{key}' must be a number")
    return float(value)


def _optional_number(raw: Mapping, key: str) -> float | None:
    if raw.get(key) is None:
        return None
    return _number(raw, key)


def _image(raw: Mapping) -> ElementImage | None:
    value = raw.get("image")
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise MalformedRecordError("field 'image' must be an object or null")
    return ElementImage(
        title=str(value.get("title") or ""),
        url=str(value.get("url") or ""),
        attribution=str(value.get("attribution") or ""),
    )


def _int_list(raw: Mapping, key: str) -> tuple[int, ...]:
    value = _require(raw, key)
    if not isinstance(value, list):
        raise MalformedRecordError(f"field '{key}' must be a list")
    try:
        return tuple(_integer({key: item}, key) for item in value)
    except MalformedRecordError:
        raise MalformedRecordError(f"field '{key}' must only hold integers") from None


def _float_list(raw: Mapping, key: str) -> tuple[float, ...]:
    value = raw.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise MalformedRecordError(f"field '{key}' must be a list")
    try:
        return tuple(_number({key: item}, key) for item in value)
    except MalformedRecordError:
        raise MalformedRecordError(f"field '{key}' must only hold numbers") from None


def element_from_dict(raw: Mapping) -> ElementRecord:
    """Build a record from one dataset entry or raise ``MalformedRecordError``."""
    if not isinstance(raw, Mapping):
        raise MalformedRecordError("element entry must be an object")
    name = _text(raw, "name").strip()
    symbol = _text(raw, "symbol").strip()
    if not name or not symbol:
        raise MalformedRecordError("name and symbol must be non-empty")
    number = _integer(raw, "number")
    if number <= 0:
        raise MalformedRecordError(f"atomic number {number} is out of range")
    configuration = _text(raw, "electron_configuration")
    return ElementRecord(
        number=number,
        name=name,
        symbol=symbol,
        category=_text(raw, "category"),
        phase=_text(raw, "phase"),
        block=_text(raw, "block"),
        atomic_mass=_number(raw, "atomic_mass"),
        period=_integer(raw, "period"),
        group=_integer(raw, "group"),
        xpos=_integer(raw, "xpos"),
        ypos=_integer(raw, "ypos"),
        shells=_int_list(raw, "shells"),
        electron_configuration=configuration,
        electron_configuration_semantic=_optional_text(raw, "electron_configuration_semantic") or configuration,
        summary=_text(raw, "summary"),
        source=_text(raw, "source"),
        density=_optional_number(raw, "density"),
        melt=_optional_number(raw, "melt"),
        boil=_optional_number(raw, "boil"),
        molar_heat=_optional_number(raw, "molar_heat"),
        electronegativity_pauling=_optional_number(raw, "electronegativity_pauling"),
        electron_affinity=_optional_number(raw, "electron_affinity"),
        ionization_energies=_float_list(raw, "ionization_energies"),
        wxpos=_optional_integer(raw, "wxpos"),
        wypos=_optional_integer(raw, "wypos"),
        appearance=_optional_text(raw, "appearance"),
        discovered_by=_optional_text(raw, "discovered_by"),
        named_by=_optional_text(raw, "named_by"),
        cpk_hex=_optional_text(raw, "cpk-hex"),
        image=_image(raw),
    )
