"""
Unit tests for the MCP tool logic helpers.

The helpers take the engine/session explicitly, so these tests build their
own instances instead of touching the server's module-level state.
"""

import pytest

from qamus.lexicon import LookupEngine
from qamus.main import (
    _history_logic,
    _list_dictionary_logic,
    _parse_vocabulary,
    _select_dictionary_entry_logic,
    _select_history_entry_logic,
    _suggest_logic,
    _translate_logic,
    _type_text_logic,
    _format_session_state,
    mcp,
)
from qamus.models import Direction, Vocabulary
from qamus.session import TranslatorSession


class TestParseVocabulary:

    @pytest.mark.parametrize("value,expected", [
        ("ar", Vocabulary.ARABIC),
        ("DE", Vocabulary.GERMAN),
        (" de ", Vocabulary.GERMAN),
    ])
    def test_valid(self, value: str, expected: Vocabulary) -> None:
        assert _parse_vocabulary(value) is expected

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="Unknown language 'fr'"):
            _parse_vocabulary("fr")


class TestTranslateLogic:

    def test_arabic_to_german(self, engine: LookupEngine) -> None:
        result = _translate_logic(engine, "بيت", "ar")
        assert "**Arabic:** بيت" in result
        assert "**German:** Haus" in result
        assert len(engine.history) == 1

    def test_german_to_arabic(self, engine: LookupEngine) -> None:
        result = _translate_logic(engine, "haus", "de")
        assert "**Arabic:** بيت" in result

    def test_blank(self, engine: LookupEngine) -> None:
        assert _translate_logic(engine, "  ", "ar").startswith("❌")
        assert engine.history == []

    def test_unknown_language(self, engine: LookupEngine) -> None:
        assert "Unknown language" in _translate_logic(engine, "Haus", "fr")


class TestSuggestLogic:

    def test_lists_suggestions(self, engine: LookupEngine) -> None:
        result = _suggest_logic(engine, "h", "de")
        assert result.startswith("**Suggestions for 'h':**")
        assert "• Haus" in result
        assert "• Hut" not in result

    def test_no_suggestions(self, engine: LookupEngine) -> None:
        assert _suggest_logic(engine, "xyz", "de") == "No suggestions for 'xyz'."

    def test_unknown_language(self, engine: LookupEngine) -> None:
        assert _suggest_logic(engine, "h", "en").startswith("❌")


class TestHistoryLogic:

    def test_empty(self, engine: LookupEngine) -> None:
        assert _history_logic(engine) == "No translations recorded yet."

    def test_newest_first(self, engine: LookupEngine) -> None:
        engine.translate("بيت", "ar")
        engine.translate("Buch", "de")
        lines = _history_logic(engine).splitlines()
        assert lines[1].startswith("1. [de-ar] Buch → كتاب")
        assert lines[2].startswith("2. [ar-de] بيت → Haus")


class TestListDictionaryLogic:

    def test_full_listing(self, engine: LookupEngine) -> None:
        result = _list_dictionary_logic(engine)
        assert result.startswith(f"**Dictionary ({len(engine.store)} entries):**")
        assert "• بيت — Haus" in result

    def test_limit(self, engine: LookupEngine) -> None:
        result = _list_dictionary_logic(engine, limit=2)
        assert "showing first 2" in result
        assert len(result.splitlines()) == 3


class TestSessionLogic:
    """Test the session-backed tool helpers."""

    def test_type_text_waits_for_translation(self, session: TranslatorSession) -> None:
        result = _type_text_logic(session, "بيت")
        assert "**German (translation):** Haus" in result
        assert "Translation pending" not in result

    def test_type_text_without_wait(self, session: TranslatorSession) -> None:
        result = _type_text_logic(session, "كب", wait=False)
        assert "⏳ Translation pending" in result
        assert "**Suggestions:** كبير, كبيرة" in result

    def test_state_after_toggle(self, session: TranslatorSession) -> None:
        session.toggle_direction()
        result = _format_session_state(session)
        assert "German → Arabic (de-ar)" in result

    def test_select_history_entry(self, session: TranslatorSession) -> None:
        session.engine.translate("Herz", "de")
        result = _select_history_entry_logic(session, 1)
        assert session.direction is Direction.DE_AR
        assert "**German (input):** Herz" in result
        assert "**Arabic (translation):** قلب" in result

    @pytest.mark.parametrize("index", [0, 2])
    def test_select_history_entry_out_of_range(self, session: TranslatorSession, index: int) -> None:
        session.engine.translate("بيت", "ar")
        assert _select_history_entry_logic(session, index).startswith("❌")

    def test_select_dictionary_entry(self, session: TranslatorSession) -> None:
        result = _select_dictionary_entry_logic(session, "كتاب")
        assert session.german_text == "Buch"
        assert "**German (translation):** Buch" in result

    def test_select_unknown_dictionary_entry(self, session: TranslatorSession) -> None:
        assert _select_dictionary_entry_logic(session, "غير موجود").startswith("❌")


def test_server_name() -> None:
    assert mcp.name == "qamus"
