import json

import pytest

from game.catalog import Catalog, CatalogUnavailable, Category, load_catalog
from game.location_types import load_location_types


def _write(tmp_path, payload, name="locations.json"):
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_load_all_sections(tmp_path):
    path = _write(tmp_path, {
        "locations": [{"id": 1, "name": "Gate", "description": "d", "latitude": 1, "longitude": 2, "type": "town"}],
        "hiddenLocations": [{"id": "h", "name": "Cache", "latitude": 3, "longitude": 4, "type": "chest"}],
        "lastListenerLocations": [],
        "caves": [{"id": "c", "name": "Grotto", "description": "", "latitude": 5, "longitude": 6,
                   "type": "cave", "radarRadius": 8, "image": "grotto.png"}],
    })

    catalog = load_catalog(path)

    assert [loc.id for loc in catalog.locations(Category.MAIN)] == ["1"]
    assert catalog.get("h").description == ""
    assert catalog.category_of("c") == Category.CAVES
    assert catalog.get("c").radar_radius == 8.0
    assert catalog.get("c").image == "grotto.png"
    assert catalog.get("1").radar_radius is None
    assert catalog.locations(Category.LAST_LISTENER) == ()


def test_missing_section_is_empty(tmp_path):
    catalog = load_catalog(_write(tmp_path, {"locations": []}))
    assert list(catalog.all_locations()) == []
    assert catalog.ids() == []


def test_missing_file_is_unavailable(tmp_path):
    with pytest.raises(CatalogUnavailable):
        load_catalog(tmp_path / "nope.json")


def test_invalid_json_is_unavailable(tmp_path):
    with pytest.raises(CatalogUnavailable):
        load_catalog(_write(tmp_path, "{not json"))


def test_non_object_root_is_unavailable(tmp_path):
    with pytest.raises(CatalogUnavailable):
        load_catalog(_write(tmp_path, [1, 2, 3]))


def test_missing_required_field_is_unavailable(tmp_path):
    with pytest.raises(CatalogUnavailable):
        load_catalog(_write(tmp_path, {"locations": [{"id": "1", "name": "No coords", "type": "town"}]}))


def test_duplicate_ids_are_unavailable(tmp_path):
    loc = {"id": "1", "name": "A", "latitude": 0, "longitude": 0, "type": "town"}
    with pytest.raises(CatalogUnavailable):
        load_catalog(_write(tmp_path, {"locations": [loc], "caves": [loc]}))


def test_lookup_unknown_id_raises(catalog: Catalog):
    assert "1" in catalog
    assert "zzz" not in catalog
    with pytest.raises(KeyError):
        catalog.get("zzz")


def test_category_metadata():
    assert [c.section_id for c in Category] == [
        "main-locations", "hidden-locations", "last-listener-locations", "caves-locations"
    ]
    assert Category.MAIN.setting_key is None
    assert Category.CAVES.setting_key == "show-caves"


def test_location_types_optional(tmp_path):
    assert load_location_types(tmp_path / "missing.json") == {}
    path = _write(tmp_path, {"cave": "cave.png", "7": "seven.png"}, name="types.json")
    assert load_location_types(path) == {"cave": "cave.png", "7": "seven.png"}
