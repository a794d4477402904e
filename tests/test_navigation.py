"""Tests for wayfarer.navigation module."""

import pytest

from wayfarer.errors import NavigationError
from wayfarer.messages import MessageCatalog
from wayfarer.navigation import NavigationModel


def snapshot(model):
    return (model.history, model.cursor, model.get_home(),
            {n: model.get_favorite(n) for n in model.favorite_names()})


class TestEmptyModel:
    def test_starts_empty(self, model):
        assert model.history == []
        assert model.cursor == -1
        assert model.current is None
        assert model.get_home() is None
        assert model.favorite_names() == []

    def test_no_next_or_previous(self, model):
        assert model.has_next() is False
        assert model.has_previous() is False

    def test_advance_returns_none(self, model):
        assert model.advance() is None
        assert model.cursor == -1

    def test_retreat_raises(self, model):
        with pytest.raises(NavigationError) as exc:
            model.retreat()
        assert exc.value.kind == "Back"
        assert exc.value.message == "back!"
        assert model.cursor == -1

    def test_default_messages(self):
        model = NavigationModel()
        with pytest.raises(NavigationError, match="no previous page"):
            model.retreat()


class TestNavigateTo:
    def test_cursor_tracks_end_of_history(self, model):
        for i, url in enumerate(["http://a.com", "b", "http://c.org/x"]):
            model.navigate_to(url)
            assert len(model.history) == model.cursor + 1 == i + 1

    def test_returns_resolved_url(self, model):
        assert model.navigate_to("example.com/page") == "http://example.com/page"
        assert model.current == "http://example.com/page"

    def test_relative_to_current(self, model):
        model.navigate_to("http://a.com/b")
        assert model.navigate_to("foo") == "http://a.com/b/foo"

    def test_absolute_url_kept(self, visited):
        assert visited.navigate_to("https://d.net/x?q=1") == "https://d.net/x?q=1"

    def test_truncates_forward_history(self, visited):
        visited.retreat()
        visited.retreat()
        visited.navigate_to("http://d.com")
        assert visited.history == ["http://a.com", "http://d.com"]
        assert visited.cursor == 1
        assert visited.has_next() is False

    def test_no_truncation_at_end(self, visited):
        visited.navigate_to("http://d.com")
        assert visited.history == ["http://a.com", "http://b.com", "http://c.com", "http://d.com"]

    def test_same_url_twice_is_two_entries(self, model):
        model.navigate_to("http://a.com")
        model.navigate_to("http://a.com")
        assert model.history == ["http://a.com", "http://a.com"]

    def test_malformed_raises_with_last_attempt(self, model):
        with pytest.raises(NavigationError) as exc:
            model.navigate_to("")
        assert exc.value.kind == "MalformedURL"
        assert exc.value.message == "bad: http://"

    def test_malformed_leaves_state_unchanged(self, visited):
        visited.retreat()
        before = snapshot(visited)
        with pytest.raises(NavigationError):
            visited.navigate_to("not a url")
        assert snapshot(visited) == before
        assert visited.has_next() is True

    def test_surrounding_whitespace_ignored(self, model):
        assert model.navigate_to(" http://a.com \n") == "http://a.com"
        assert model.navigate_to("\tfoo ") == "http://a.com/foo"
        assert model.history == ["http://a.com", "http://a.com/foo"]

    def test_malformed_message_uses_trimmed_input(self, model):
        with pytest.raises(NavigationError) as exc:
            model.navigate_to("  two words  ")
        assert exc.value.message == "bad: http://two words"

    def test_custom_protocol_prefix(self, messages):
        model = NavigationModel(messages, protocol_prefix="https://")
        assert model.navigate_to("example.com") == "https://example.com"


class TestAdvanceRetreat:
    def test_retreat_returns_previous(self, visited):
        assert visited.retreat() == "http://b.com"
        assert visited.retreat() == "http://a.com"
        assert visited.current == "http://a.com"

    def test_retreat_at_first_page_keeps_cursor(self, visited):
        visited.retreat()
        visited.retreat()
        for _ in range(3):
            with pytest.raises(NavigationError):
                visited.retreat()
        assert visited.cursor == 0
        assert visited.advance() == "http://b.com"

    def test_advance_returns_next(self, visited):
        visited.retreat()
        visited.retreat()
        assert visited.advance() == "http://b.com"
        assert visited.advance() == "http://c.com"

    def test_advance_past_end_is_noop(self, visited):
        assert visited.advance() is None
        assert visited.cursor == 2

    def test_single_page_has_no_previous(self, model):
        model.navigate_to("http://a.com")
        assert model.has_previous() is False
        assert model.has_next() is False
        with pytest.raises(NavigationError):
            model.retreat()
        assert model.current == "http://a.com"

    def test_cursor_stays_in_bounds(self, visited):
        moves = [visited.advance, visited.retreat] * 2 + [visited.retreat] * 4 + [visited.advance] * 4
        for move in moves:
            try:
                move()
            except NavigationError:
                pass
            assert 0 <= visited.cursor < len(visited.history)


class TestHome:
    def test_set_home_on_empty_model(self, model):
        with pytest.raises(NavigationError) as exc:
            model.set_home_to_current()
        assert exc.value.kind == "Null"
        assert exc.value.message == "null: home"
        assert model.get_home() is None

    def test_set_home_to_current(self, visited):
        visited.retreat()
        visited.set_home_to_current()
        assert visited.get_home() == "http://b.com"

    def test_home_survives_truncation(self, visited):
        visited.set_home_to_current()
        visited.retreat()
        visited.retreat()
        visited.navigate_to("http://d.com")
        assert visited.get_home() == "http://c.com"
        assert "http://c.com" not in visited.history


class TestFavorites:
    def test_add_on_empty_model(self, model):
        with pytest.raises(NavigationError) as exc:
            model.add_favorite("x")
        assert exc.value.message == "null: x"
        assert model.get_favorite("x") is None
        assert model.favorite_names() == []

    def test_add_then_get_after_navigation(self, visited):
        visited.add_favorite("x")
        visited.navigate_to("http://d.com")
        assert visited.get_favorite("x") == "http://c.com"

    def test_name_reuse_overwrites(self, visited):
        visited.add_favorite("x")
        visited.retreat()
        visited.add_favorite("x")
        assert visited.get_favorite("x") == "http://b.com"
        assert visited.favorite_names() == ["x"]

    def test_missing_favorite_returns_none(self, visited):
        assert visited.get_favorite("nope") is None

    def test_favorite_names_sorted(self, visited):
        visited.add_favorite("zeta")
        visited.add_favorite("alpha")
        assert visited.favorite_names() == ["alpha", "zeta"]

    def test_history_is_a_copy(self, visited):
        visited.history.clear()
        assert len(visited.history) == 3


class TestBadMessageTemplates:
    @pytest.mark.parametrize("template", ["{0.x}", "{0[k]}"])
    def test_errors_still_raised(self, template):
        model = NavigationModel(MessageCatalog({"Back": template, "Null": template}))
        with pytest.raises(NavigationError) as exc:
            model.retreat()
        assert exc.value.kind == "Back"
        with pytest.raises(NavigationError) as exc:
            model.set_home_to_current()
        assert exc.value.message == "Null home"
        assert model.get_home() is None
