import pytest

from xivalexutil.loader_actions import LoaderAction, loader_action_name, parse_loader_action


def test_names_fixed_by_source():
    assert loader_action_name(LoaderAction.UPDATE_CHECK) == "update-check"
    assert loader_action_name(LoaderAction.INTERNAL_CLEANUP_HANDLE) == "_internal_cleanup_handle"


def test_name_by_index_and_invalid():
    assert loader_action_name(0) == "auto"
    assert loader_action_name(len(LoaderAction)) == "<invalid>"
    assert loader_action_name(-1) == "<invalid>"


@pytest.mark.parametrize("action", list(LoaderAction))
def test_round_trip(action):
    assert parse_loader_action(loader_action_name(action)) is action


def test_case_insensitive():
    assert parse_loader_action("LAUNCHER") is LoaderAction.LAUNCHER


def test_prefix_picks_first_match():
    assert parse_loader_action("u") is LoaderAction.UNLOAD
    assert parse_loader_action("up") is LoaderAction.UPDATE_CHECK
    assert parse_loader_action("") is LoaderAction.AUTO


def test_longer_text_matches_shorter_name():
    assert parse_loader_action("loadmore") is LoaderAction.LOAD


def test_invalid_raises():
    with pytest.raises(ValueError):
        parse_loader_action("zzz")