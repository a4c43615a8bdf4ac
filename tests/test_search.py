from core.search import MatchMode, SearchState, filter_locations
from tests.factories import make_location

CAVE_ENTRANCE = make_location("a", "Cave Entrance")
OLD_MINE = make_location("b", "Old Mine", description="contains cave drawings")


def test_empty_query_is_identity():
    locations = [CAVE_ENTRANCE, OLD_MINE]
    for mode in MatchMode:
        assert filter_locations(locations, "", mode) == locations


def test_name_only_ignores_description():
    assert filter_locations([CAVE_ENTRANCE, OLD_MINE], "cave", MatchMode.NAME_ONLY) == [CAVE_ENTRANCE]


def test_name_and_description_matches_both():
    result = filter_locations([CAVE_ENTRANCE, OLD_MINE], "cave", MatchMode.NAME_AND_DESCRIPTION)
    assert result == [CAVE_ENTRANCE, OLD_MINE]


def test_matching_is_case_insensitive():
    assert filter_locations([CAVE_ENTRANCE], "ENTR") == [CAVE_ENTRANCE]


def test_order_is_preserved():
    locations = [make_location(str(i), f"Ruin {i}") for i in (3, 1, 2)]
    assert [loc.id for loc in filter_locations(locations, "ruin")] == ["3", "1", "2"]


def test_missing_description_never_matches():
    bare = make_location("c", "Watchtower", description="")
    assert filter_locations([bare], "cave", MatchMode.NAME_AND_DESCRIPTION) == []


def test_filter_is_idempotent():
    once = filter_locations([CAVE_ENTRANCE, OLD_MINE], "mine")
    assert filter_locations(once, "mine") == once


def test_search_state_active():
    assert not SearchState().active
    assert SearchState("x").active
