import pytest

from game.catalog import Category
from ui.widgets.atlas.controller.selection import SelectionHighlighter
from ui.widgets.sidebar.list_builder import build_sidebar
from core.search import SearchState
from ui.widgets.sidebar.location_list_widget import LocationListWidget

ALL_ENABLED = {c: True for c in Category}


@pytest.fixture
def sidebar(catalog, store):
    widget = LocationListWidget()
    widget.render(build_sidebar(catalog, ALL_ENABLED, SearchState(), store))
    yield widget
    widget.deleteLater()


@pytest.fixture
def highlighter(catalog, sync, sidebar):
    sync.full_refresh(catalog, ALL_ENABLED)
    highlighter = SelectionHighlighter(catalog, sync, sidebar)
    highlighter.connect()
    yield highlighter
    highlighter.disconnect()


def _marker(sync, location_id):
    return sync.entry(location_id).marker


def test_select_highlights_marker_and_item(highlighter, sync, sidebar):
    highlighter.select("1")
    assert highlighter.current == "1"
    assert _marker(sync, "1").is_highlighted()
    assert sidebar.item_widget("1").is_active()


def test_select_twice_is_idempotent(highlighter, sync, sidebar, monkeypatch):
    highlighter.select("1")
    calls = []
    monkeypatch.setattr(highlighter, "_set_highlight", lambda *a, **kw: calls.append(a))

    highlighter.select("1")

    assert calls == []
    assert highlighter.current == "1"
    assert _marker(sync, "1").is_highlighted()


def test_select_moves_highlight(highlighter, sync, sidebar):
    highlighter.select("1")
    highlighter.select("2")

    assert not _marker(sync, "1").is_highlighted()
    assert not sidebar.item_widget("1").is_active()
    assert _marker(sync, "2").is_highlighted()
    assert sidebar.item_widget("2").is_active()


def test_hidden_location_highlights_list_item_only(highlighter, sync, sidebar):
    sync.toggle_item("2")
    highlighter.select("2")

    assert not _marker(sync, "2").is_highlighted()
    assert sidebar.item_widget("2").is_active()
    assert highlighter.current == "2"


def test_selected_location_highlights_when_shown_again(highlighter, sync):
    sync.toggle_item("2")
    highlighter.select("2")
    assert not _marker(sync, "2").is_highlighted()

    sync.toggle_item("2")
    assert _marker(sync, "2").is_highlighted()

    highlighter.select("2")
    assert _marker(sync, "2").is_highlighted()


def test_category_show_restores_selected_marker(highlighter, sync):
    sync.toggle_category(Category.MAIN, ("1", "2", "3"))
    highlighter.select("3")

    sync.toggle_category(Category.MAIN, ("1", "2", "3"))

    assert _marker(sync, "3").is_highlighted()
    assert not _marker(sync, "1").is_highlighted()


def test_previous_selection_filtered_out_of_list(highlighter, sync, sidebar, catalog, store):
    highlighter.select("1")
    sidebar.render(build_sidebar(catalog, ALL_ENABLED, SearchState("cave"), store))
    assert sidebar.item_widget("1") is None

    highlighter.select("2")
    assert not _marker(sync, "1").is_highlighted()
    assert sidebar.item_widget("2").is_active()


def test_reapply_after_rebuild(highlighter, sidebar, catalog, store):
    highlighter.select("3")
    sidebar.render(build_sidebar(catalog, ALL_ENABLED, SearchState("tower"), store))
    assert not sidebar.item_widget("3").is_active()

    highlighter.reapply()
    assert sidebar.item_widget("3").is_active()


def test_unknown_id_is_lookup_failure(highlighter):
    with pytest.raises(KeyError):
        highlighter.select("nope")
