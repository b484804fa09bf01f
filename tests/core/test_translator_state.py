"""Unit tests for TranslatorState."""

import pytest

from translator_panel.core import SelectorRole, TranslatorState


@pytest.fixture
def state():
    return TranslatorState()


class TestTranslatorStateDefaults:
    """Tests for initial state."""

    def test_default_languages(self, state):
        assert state.source_language == "English"
        assert state.target_language == "Turkish"

    def test_starts_with_empty_buffers_and_closed_overlay(self, state):
        assert state.input_text == ""
        assert state.translated_text == ""
        assert state.character_count == 0
        assert state.overlay_visible is False
        assert state.active_role is None

    def test_empty_language_falls_back_to_default(self):
        state = TranslatorState(source_language="", target_language="")
        assert state.source_language == "English"
        assert state.target_language == "Turkish"


class TestLanguageSelection:
    """Tests for begin_selection, pick and swap."""

    def test_begin_selection_opens_overlay(self, state):
        state.begin_selection("source")
        assert state.active_role is SelectorRole.SOURCE
        assert state.overlay_visible is True

    @pytest.mark.parametrize("alias,expected", [
        ("from", SelectorRole.SOURCE),
        ("source", SelectorRole.SOURCE),
        ("to", SelectorRole.TARGET),
        ("TARGET", SelectorRole.TARGET),
        (SelectorRole.TARGET, SelectorRole.TARGET),
    ])
    def test_role_aliases(self, state, alias, expected):
        state.begin_selection(alias)
        assert state.active_role is expected

    def test_unknown_role_raises(self, state):
        with pytest.raises(ValueError):
            state.begin_selection("sideways")
        assert state.overlay_visible is False

    def test_pick_for_target_role(self, state):
        """Picking French for the "to" selector only changes the target."""
        state.begin_selection("to")
        state.pick("French")
        assert state.target_language == "French"
        assert state.source_language == "English"
        assert state.overlay_visible is False

    def test_pick_for_source_role(self, state):
        state.begin_selection("from")
        state.pick("German")
        assert state.source_language == "German"
        assert state.target_language == "Turkish"

    @pytest.mark.parametrize("role", [None, "source", "target"])
    def test_pick_always_closes_overlay(self, state, role):
        if role is not None:
            state.begin_selection(role)
        state.overlay_visible = True
        state.pick("Spanish")
        assert state.overlay_visible is False

    def test_pick_without_role_sets_target(self, state):
        state.pick("Italian")
        assert state.target_language == "Italian"
        assert state.source_language == "English"

    def test_dismiss_overlay_keeps_languages(self, state):
        state.begin_selection("source")
        state.dismiss_overlay()
        assert state.overlay_visible is False
        assert state.active_role is None
        assert state.source_language == "English"

    def test_swap_exchanges_languages(self, state):
        state.swap()
        assert (state.source_language, state.target_language) == ("Turkish", "English")

    def test_swap_twice_restores_pair(self, state):
        state.source_language = "Japanese"
        state.target_language = "Korean"
        state.swap()
        state.swap()
        assert (state.source_language, state.target_language) == ("Japanese", "Korean")

    def test_identical_languages_are_allowed(self, state):
        state.begin_selection("target")
        state.pick("English")
        assert state.source_language == state.target_language == "English"


class TestInputBuffer:
    """Tests for the bounded input buffer."""

    @pytest.mark.parametrize("candidate", ["", "hello", "ü" * 150, "x" * 200])
    def test_accepts_text_up_to_limit(self, state, candidate):
        assert state.set_text(candidate) is True
        assert state.input_text == candidate
        assert state.character_count == len(candidate)

    def test_rejects_text_over_limit(self, state):
        state.set_text("keep me")
        assert state.set_text("y" * 201) is False
        assert state.input_text == "keep me"
        assert state.character_count == 7

    def test_extra_keystroke_at_limit_is_rejected(self, state):
        full = "a" * TranslatorState.MAX_CHARACTERS
        state.set_text(full)
        assert state.set_text(full + "b") is False
        assert state.input_text == full
        assert state.character_count == 200

    def test_whitespace_only_is_not_translatable(self, state):
        state.set_text("   \n\t ")
        assert not state.has_translatable_text()

    def test_snapshot_keeps_untrimmed_text(self, state):
        state.set_text("  hello ")
        request = state.snapshot(3)
        assert request.text == "  hello "
        assert request.langpair == "English|Turkish"
        assert request.sequence == 3

    def test_snapshot_is_not_affected_by_later_swap(self, state):
        state.set_text("hello")
        request = state.snapshot(1)
        state.swap()
        assert request.source_language == "English"
        assert request.target_language == "Turkish"
