"""Unit tests for state.py"""

import json

import pytest

from mdblog.state import LocalStore, RecentlyViewed, ThemePreference


@pytest.fixture(name="state_path")
def state_path_fixture(tmp_path):
    return tmp_path / ".mdblog" / "state.json"


def test_recent_push_most_recent_first_and_deduplicated(state_path):
    recent = RecentlyViewed(LocalStore(state_path))
    recent.load()
    for post_id in ("a", "b", "c", "a"):
        recent.push(post_id)
    assert recent.ids == ["a", "c", "b"]


def test_recent_capped_at_limit(state_path):
    recent = RecentlyViewed(LocalStore(state_path))
    for i in range(12):
        recent.push(f"p{i}")
    assert len(recent.ids) == 8
    assert recent.ids[0] == "p11"
    assert recent.ids[-1] == "p4"


def test_recent_save_and_load(state_path):
    recent = RecentlyViewed(LocalStore(state_path), limit=3)
    recent.load()
    recent.push("x")
    recent.push("y")
    assert recent.save() is True

    reloaded = RecentlyViewed(LocalStore(state_path), limit=3)
    assert reloaded.load() == ["y", "x"]


def test_recent_load_sanitizes_stored_list(state_path):
    state_path.parent.mkdir(parents=True)
    state_path.write_text(json.dumps({"recently_viewed": ["a", 1, "a", "b", "c"]}))
    assert RecentlyViewed(LocalStore(state_path), limit=2).load() == ["a", "b"]


def test_recent_clear(state_path):
    recent = RecentlyViewed(LocalStore(state_path))
    recent.push("a")
    recent.save()
    recent.clear()
    assert RecentlyViewed(LocalStore(state_path)).load() == []


def test_unreadable_state_is_ignored(state_path):
    state_path.parent.mkdir(parents=True)
    state_path.write_text("{not json")
    assert RecentlyViewed(LocalStore(state_path)).load() == []
    assert ThemePreference(LocalStore(state_path)).load() is None


def test_save_failure_returns_false(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    recent = RecentlyViewed(LocalStore(blocker / "state.json"))
    recent.push("a")
    assert recent.save() is False


def test_theme_save_load_clear(state_path):
    pref = ThemePreference(LocalStore(state_path))
    assert pref.load() is None
    assert pref.save("dark") is True
    assert ThemePreference(LocalStore(state_path)).load() == "dark"
    pref.clear()
    assert ThemePreference(LocalStore(state_path)).load() is None


def test_theme_rejects_unknown_value(state_path):
    with pytest.raises(ValueError, match="Unknown theme"):
        ThemePreference(LocalStore(state_path)).save("sepia")


def test_theme_and_recent_share_a_file(state_path):
    recent = RecentlyViewed(LocalStore(state_path))
    recent.push("a")
    recent.save()
    ThemePreference(LocalStore(state_path)).save("light")
    assert RecentlyViewed(LocalStore(state_path)).load() == ["a"]
    assert ThemePreference(LocalStore(state_path)).load() == "light"
