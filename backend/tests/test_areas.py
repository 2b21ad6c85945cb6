from __future__ import annotations

import json

import pytest

from app.domain.areas import (
    DEFAULT_AREA_TABLE,
    AreaTableError,
    AreaVariantTable,
    load_area_table,
)


def test_default_table_holds_deduplicated_variants():
    assert "cimangiz" in DEFAULT_AREA_TABLE.cimangis
    assert len(DEFAULT_AREA_TABLE.cimangis) == 6
    assert DEFAULT_AREA_TABLE.depok == frozenset({"depok"})
    assert DEFAULT_AREA_TABLE.outside_areas[0] == "jakarta"
    assert DEFAULT_AREA_TABLE.outside_areas[-1] == "lenteng agung"


def test_matches_uses_substring_containment():
    assert DEFAULT_AREA_TABLE.matches("pekapuran", "gang pkapuran 3")
    assert not DEFAULT_AREA_TABLE.matches("pekapuran", "jl. margonda")


def test_first_outside_area_follows_table_order():
    assert DEFAULT_AREA_TABLE.first_outside_area("bekasi dekat jakarta") == "jakarta"
    assert DEFAULT_AREA_TABLE.first_outside_area("margonda") is None


def test_from_mapping_normalizes_and_keeps_missing_families():
    table = AreaVariantTable.from_mapping(
        {"Cimangis": ["  CIMANGIS ", "cimangis", "Ci  Mangis", ""]}
    )

    assert table.cimangis == frozenset({"cimangis", "ci mangis"})
    assert table.pekapuran == DEFAULT_AREA_TABLE.pekapuran
    assert table.outside_areas == DEFAULT_AREA_TABLE.outside_areas


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(AreaTableError):
        AreaVariantTable.from_mapping({"margonda": ["margonda"]})


def test_from_mapping_rejects_non_list_variants():
    with pytest.raises(AreaTableError):
        AreaVariantTable.from_mapping({"depok": "depok"})


def test_merged_with_extends_each_family():
    table = DEFAULT_AREA_TABLE.merged_with(
        {"tarunaBhakti": ["Taruna Bakthi"], "outsideAreas": ["Parung", "jakarta"]}
    )

    assert "taruna bakthi" in table.taruna_bhakti
    assert DEFAULT_AREA_TABLE.taruna_bhakti < table.taruna_bhakti
    assert table.outside_areas == DEFAULT_AREA_TABLE.outside_areas + ("parung",)


def test_service_areas_lists_served_areas():
    areas = DEFAULT_AREA_TABLE.service_areas()

    assert [area.name for area in areas] == ["SMK Taruna Bhakti", "Cimangis", "Pekapuran"]
    assert "smk tb" in areas[0].variants


def test_load_area_table_without_path_returns_defaults():
    assert load_area_table(None) is DEFAULT_AREA_TABLE


def test_load_area_table_merges_json_file(tmp_path):
    path = tmp_path / "areas.json"
    path.write_text(json.dumps({"pekapuran": ["Pekapuran Raya"]}), encoding="utf-8")

    table = load_area_table(path)

    assert "pekapuran raya" in table.pekapuran
    assert "pkapuran" in table.pekapuran


def test_load_area_table_rejects_malformed_json(tmp_path):
    path = tmp_path / "areas.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(AreaTableError):
        load_area_table(path)


def test_load_area_table_rejects_missing_file(tmp_path):
    with pytest.raises(AreaTableError):
        load_area_table(tmp_path / "missing.json")


def test_load_area_table_rejects_non_object(tmp_path):
    path = tmp_path / "areas.json"
    path.write_text(json.dumps(["cimangis"]), encoding="utf-8")

    with pytest.raises(AreaTableError):
        load_area_table(path)
