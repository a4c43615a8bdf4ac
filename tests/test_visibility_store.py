import pytest

from core.signals import signals
from core.visibility_store import VisibilityStore
from game.catalog import Category
from tests.factories import FailingPreferenceStore, stored_keys


@pytest.fixture
def write_failures():
    failed = []

    def collect(key):
        failed.append(key)

    signals.preference_write_failed.connect(collect)
    yield failed
    signals.preference_write_failed.disconnect(collect)


def test_defaults(store):
    assert store.get_item_visible("never-seen") is True
    assert store.get_category_visible(Category.CAVES) is True
    assert store.get_section_enabled(Category.MAIN) is True
    assert store.get_section_enabled(Category.HIDDEN) is False
    assert store.get_section_enabled(Category.LAST_LISTENER) is False
    assert store.get_section_enabled(Category.CAVES) is False


def test_item_round_trip_uses_string_encoding(store, prefs):
    store.set_item_visible("7", False)
    assert store.get_item_visible("7") is False
    assert prefs.get("marker-visible-7") == "false"

    store.set_item_visible("7", True)
    assert prefs.get("marker-visible-7") == "true"


def test_category_and_section_keys(store, prefs):
    store.set_category_visible(Category.LAST_LISTENER, False)
    store.set_section_enabled(Category.CAVES, True)

    assert prefs.get("category-visible-last-listener-locations") == "false"
    assert prefs.get("show-caves") == "true"
    assert store.section_flags()[Category.CAVES] is True


def test_unexpected_stored_value_reads_false(store, prefs):
    prefs.set("marker-visible-9", "yes")
    assert store.get_item_visible("9") is False


def test_main_section_cannot_be_disabled(store, prefs):
    store.set_section_enabled(Category.MAIN, False)
    assert store.get_section_enabled(Category.MAIN) is True
    assert stored_keys() == []


def test_reads_are_not_cached(store, prefs):
    assert store.get_item_visible("5") is True
    prefs.set("marker-visible-5", "false")
    assert store.get_item_visible("5") is False


def test_clear_all_restores_defaults(store, prefs):
    store.set_item_visible("1", False)
    store.set_item_visible("2", False)
    store.set_category_visible(Category.MAIN, False)
    store.set_section_enabled(Category.HIDDEN, True)
    store.set_section_enabled(Category.LAST_LISTENER, True)
    store.set_section_enabled(Category.CAVES, True)

    store.clear_all(["1", "2"], list(Category), list(Category))

    assert stored_keys() == []
    assert store.get_item_visible("1") is True
    assert store.get_category_visible(Category.MAIN) is True
    assert store.get_section_enabled(Category.HIDDEN) is False


def test_clear_all_leaves_unrelated_keys(store, prefs):
    prefs.set("window-geometry", "abc")
    store.set_item_visible("1", False)
    store.clear_all(["1"], [], [])
    assert stored_keys() == ["window-geometry"]


def test_write_failure_is_reported_not_raised(database, write_failures):
    store = VisibilityStore(FailingPreferenceStore())
    store.set_item_visible("3", False)
    store.set_category_visible(Category.MAIN, False)
    assert write_failures == ["marker-visible-3", "category-visible-main-locations"]


def test_clear_failure_is_reported_per_key(database, write_failures):
    store = VisibilityStore(FailingPreferenceStore())
    store.clear_all(["3"], [], [Category.CAVES])
    assert write_failures == ["marker-visible-3", "show-caves"]
