from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Literal, Mapping

from app.core.logging import get_logger
from app.domain.text import normalize_address


_logger = get_logger(__name__)


AreaFamily = Literal["taruna_bhakti", "cimangis", "pekapuran", "depok"]

_FAMILIES: tuple[AreaFamily, ...] = ("taruna_bhakti", "cimangis", "pekapuran", "depok")

# Keys accepted in JSON files, camelCase as used by the storefront
_KEY_ALIASES: dict[str, str] = {
    "tarunabhakti": "taruna_bhakti",
    "taruna_bhakti": "taruna_bhakti",
    "cimangis": "cimangis",
    "pekapuran": "pekapuran",
    "depok": "depok",
    "outsideareas": "outside_areas",
    "outside_areas": "outside_areas",
}

LANDMARK_NAME = "SMK Taruna Bhakti"
CIMANGIS_NAME = "Cimangis"
PEKAPURAN_NAME = "Pekapuran"


class AreaTableError(ValueError):
    """Raised when area variants cannot be loaded or are malformed."""


@dataclass(frozen=True, slots=True)
class ServiceArea:
    name: str
    variants: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AreaVariantTable:
    """Variant spellings recognized for each delivery area."""

    taruna_bhakti: frozenset[str]
    cimangis: frozenset[str]
    pekapuran: frozenset[str]
    depok: frozenset[str]
    outside_areas: tuple[str, ...] = ()

    def matches(self, family: AreaFamily, text: str) -> bool:
        """Return True when any variant of ``family`` occurs in ``text``."""
        return any(variant in text for variant in getattr(self, family))

    def first_outside_area(self, text: str) -> str | None:
        """Return the first blacklisted locality found in ``text``, in table order."""
        for area in self.outside_areas:
            if area in text:
                return area
        return None

    def service_areas(self) -> list[ServiceArea]:
        return [
            ServiceArea(LANDMARK_NAME, tuple(sorted(self.taruna_bhakti))),
            ServiceArea(CIMANGIS_NAME, tuple(sorted(self.cimangis))),
            ServiceArea(PEKAPURAN_NAME, tuple(sorted(self.pekapuran))),
        ]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> AreaVariantTable:
        """Build a table from ``mapping``; families it omits keep the defaults."""
        overrides = _coerce_mapping(mapping)
        return replace(DEFAULT_AREA_TABLE, **overrides)

    def merged_with(self, mapping: Mapping[str, Iterable[str]]) -> AreaVariantTable:
        """Return a copy extended with the variants in ``mapping``."""
        extra = _coerce_mapping(mapping)
        changes: dict[str, object] = {}
        for key, variants in extra.items():
            if key == "outside_areas":
                current = list(self.outside_areas)
                current.extend(area for area in variants if area not in current)
                changes[key] = tuple(current)
            else:
                changes[key] = getattr(self, key) | variants
        return replace(self, **changes)


def _normalize_variants(key: str, values: Iterable[str]) -> list[str]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise AreaTableError(f"Variants for '{key}' must be a list of strings")

    variants: list[str] = []
    for value in values:
        if not isinstance(value, str):
            raise AreaTableError(f"Variant {value!r} for '{key}' is not a string")
        normalized = normalize_address(value)
        if normalized and normalized not in variants:
            variants.append(normalized)
    return variants


def _coerce_mapping(mapping: Mapping[str, Iterable[str]]) -> dict[str, object]:
    if not isinstance(mapping, Mapping):
        raise AreaTableError("Area table must be a JSON object")

    coerced: dict[str, object] = {}
    for raw_key, values in mapping.items():
        key = _KEY_ALIASES.get(str(raw_key).strip().lower())
        if key is None:
            raise AreaTableError(f"Unknown area key '{raw_key}'")
        variants = _normalize_variants(key, values)
        if key == "outside_areas":
            coerced[key] = tuple(variants)
        else:
            coerced[key] = frozenset(variants)
    return coerced


DEFAULT_AREA_TABLE = AreaVariantTable(
    taruna_bhakti=frozenset(
        {
            "taruna bhakti",
            "tarunabhakti",
            "tb",
            "smk taruna bhakti",
            "smk tb",
            "taruna bakti",
            "sekolah taruna bhakti",
            "smktb",
            "smk taruna bakti",
        }
    ),
    cimangis=frozenset(
        {"cimangis", "ci mangis", "cimangiss", "cimangiz", "cimangus", "cimangos"}
    ),
    pekapuran=frozenset({"pekapuran", "peka puran", "pekapurann", "pkapuran"}),
    depok=frozenset({"depok"}),
    outside_areas=(
        "jakarta",
        "bogor",
        "tangerang",
        "bekasi",
        "cikarang",
        "cibubur",
        "cileungsi",
        "citayam",
        "bojong gede",
        "sawangan",
        "cinere",
        "lenteng agung",
    ),
)


def load_area_table(path: Path | None) -> AreaVariantTable:
    """Load extra variants from a JSON file and merge them onto the defaults."""

    if path is None:
        return DEFAULT_AREA_TABLE

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise AreaTableError(f"Cannot read area table {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise AreaTableError(f"Area table {path} is not valid JSON: {exc}") from exc

    table = DEFAULT_AREA_TABLE.merged_with(payload)
    _logger.info(
        "Area table loaded",
        path=str(path),
        families={family: len(getattr(table, family)) for family in _FAMILIES},
        outside_areas=len(table.outside_areas),
    )
    return table
