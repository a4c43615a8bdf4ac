from tests.factories import stored_keys


def test_set_get_overwrite(prefs):
    assert prefs.get("marker-visible-1") is None
    prefs.set("marker-visible-1", "false")
    prefs.set("marker-visible-1", "true")
    assert prefs.get("marker-visible-1") == "true"
    assert stored_keys() == ["marker-visible-1"]


def test_delete_missing_key_is_quiet(prefs):
    prefs.set("a", "true")
    prefs.delete("missing")
    prefs.delete("a")
    assert stored_keys() == []
