"""
Qamus MCP Server
Arabic ↔ German dictionary lookup exposed as FastMCP tools.
"""

import logging
from typing import Annotated, Literal

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from .config import QamusConfig
from .lexicon import DictionaryStore, LookupEngine
from .models import HistoryEntry, Vocabulary
from .session import TranslatorSession

logger = logging.getLogger("qamus")

if not load_dotenv():
    logger.debug(".env file not found, using environment and defaults")

config = QamusConfig.from_env()

logging.basicConfig(
    level=config.log_level,
    )

if config.dictionary_path:
    store = DictionaryStore.from_file(config.dictionary_path)
else:
    store = DictionaryStore.default()
logger.debug(f"📖 Dictionary loaded ({len(store)} entries)")

engine = LookupEngine(
    store,
    max_suggestions=config.max_suggestions,
    history_limit=config.history_limit,
)
session = TranslatorSession(engine, debounce_seconds=config.debounce_seconds)
logger.debug("✅ Lookup engine and session initialized")

mcp = FastMCP(
    name="qamus"
)

LANGUAGE_NAMES = {
    Vocabulary.ARABIC: "Arabic",
    Vocabulary.GERMAN: "German",
}


def _parse_vocabulary(language: str) -> Vocabulary:
    """Accept 'ar'/'de' in any case and surrounding whitespace."""
    try:
        return Vocabulary(language.strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown language '{language}'. Use one of: "
            f"{', '.join(v.value for v in Vocabulary)}"
        ) from None


def _format_history_entry(index: int, entry: HistoryEntry) -> str:
    return (
        f"{index}. [{entry.direction.value}] {entry.source} → {entry.target} "
        f"({entry.timestamp.strftime('%H:%M:%S')})"
    )


# ----------------------------------------------------------------------
# Logic helpers (testable without the MCP wrapper)
# ----------------------------------------------------------------------

def _translate_logic(engine_ref: LookupEngine, text: str, source_language: str) -> str:
    try:
        source = _parse_vocabulary(source_language)
    except ValueError as e:
        return f"❌ {e}"
    if not text.strip():
        return "❌ Nothing to translate."
    translated = engine_ref.translate(text, source)
    return (
        f"**{LANGUAGE_NAMES[source]}:** {text}\n"
        f"**{LANGUAGE_NAMES[source.other]}:** {translated}"
    )


def _suggest_logic(engine_ref: LookupEngine, text: str, language: str) -> str:
    try:
        vocabulary = _parse_vocabulary(language)
    except ValueError as e:
        return f"❌ {e}"
    suggestions = engine_ref.suggest(text, vocabulary)
    if not suggestions:
        return f"No suggestions for '{text}'."
    return f"**Suggestions for '{text}':**\n" + "\n".join(f"• {s}" for s in suggestions)


def _history_logic(engine_ref: LookupEngine) -> str:
    history = engine_ref.history
    if not history:
        return "No translations recorded yet."
    lines = [_format_history_entry(i, entry) for i, entry in enumerate(history, start=1)]
    return "**Recent translations (newest first):**\n" + "\n".join(lines)


def _list_dictionary_logic(engine_ref: LookupEngine, limit: int | None = None) -> str:
    entries = engine_ref.store.entries()
    if not entries:
        return "❌ The dictionary is empty."
    shown = entries if limit is None else entries[:limit]
    lines = [f"• {entry.arabic} — {entry.german}" for entry in shown]
    header = f"**Dictionary ({len(entries)} entries):**"
    if len(shown) < len(entries):
        header += f" showing first {len(shown)}"
    return header + "\n" + "\n".join(lines)


def _format_session_state(session_ref: TranslatorSession) -> str:
    state = session_ref.snapshot()
    source, target = state.direction.source, state.direction.target
    texts = {Vocabulary.ARABIC: state.arabic_text, Vocabulary.GERMAN: state.german_text}
    lines = [
        f"**Direction:** {LANGUAGE_NAMES[source]} → {LANGUAGE_NAMES[target]} ({state.direction.value})",
        f"**{LANGUAGE_NAMES[source]} (input):** {texts[source]}",
        f"**{LANGUAGE_NAMES[target]} (translation):** {texts[target]}",
    ]
    if state.suggestions:
        lines.append(f"**Suggestions:** {', '.join(state.suggestions)}")
    if state.translation_pending:
        lines.append("⏳ Translation pending")
    return "\n".join(lines)


def _type_text_logic(session_ref: TranslatorSession, text: str, wait: bool = True) -> str:
    session_ref.handle_input(text)
    if wait:
        session_ref.flush()
    return _format_session_state(session_ref)


def _select_history_entry_logic(session_ref: TranslatorSession, index: int) -> str:
    history = session_ref.history
    if not 1 <= index <= len(history):
        return f"❌ No history entry #{index} (history has {len(history)} entries)."
    session_ref.select_history_entry(history[index - 1])
    return _format_session_state(session_ref)


def _select_dictionary_entry_logic(session_ref: TranslatorSession, arabic: str) -> str:
    german = session_ref.engine.store.forward.get(arabic)
    if german is None:
        return f"❌ '{arabic}' is not a dictionary entry."
    session_ref.select_dictionary_entry(arabic, german)
    return _format_session_state(session_ref)


# ----------------------------------------------------------------------
# Tools
# ----------------------------------------------------------------------

@mcp.tool
def translate_text(
    text: Annotated[str, Field(description="Word or phrase to translate")],
    source_language: Annotated[Literal["ar", "de"], Field(description="Language of the text: 'ar' (Arabic) or 'de' (German)")] = "ar",
) -> str:
    """Translate a phrase between Arabic and German.

    The whole phrase is looked up first (German input also matches its
    capitalized and lower-case forms). If it is not in the dictionary each
    word is substituted on its own and unknown words are kept as typed.
    """
    return _translate_logic(engine, text, source_language)


@mcp.tool
def suggest_words(
    text: Annotated[str, Field(description="Beginning of a word or phrase")],
    language: Annotated[Literal["ar", "de"], Field(description="Language of the prefix: 'ar' or 'de'")] = "ar",
) -> str:
    """Suggest dictionary entries starting with the given prefix."""
    return _suggest_logic(engine, text, language)


@mcp.tool
def get_translation_history() -> str:
    """Show the most recent whole-phrase translations."""
    return _history_logic(engine)


@mcp.tool
def clear_translation_history() -> str:
    """Forget all recorded translations."""
    engine.clear_history()
    return "✅ Translation history cleared."


@mcp.tool
def list_dictionary(
    limit: Annotated[int | None, Field(description="Maximum number of entries to show", ge=1)] = None,
) -> str:
    """List the Arabic → German dictionary in stored order."""
    return _list_dictionary_logic(engine, limit)


@mcp.tool
def type_text(
    text: Annotated[str, Field(description="Full contents of the input field")],
    wait: Annotated[bool, Field(description="Apply the translation immediately instead of after the typing pause")] = True,
) -> str:
    """Type into the session's input field (the side of the active direction)."""
    return _type_text_logic(session, text, wait)


@mcp.tool
def toggle_direction() -> str:
    """Switch between Arabic → German and German → Arabic. Clears both fields."""
    session.toggle_direction()
    return _format_session_state(session)


@mcp.tool
def select_suggestion(
    suggestion: Annotated[str, Field(description="Suggestion to use as input")],
) -> str:
    """Use a suggestion as the input and translate it."""
    session.select_suggestion(suggestion)
    return _format_session_state(session)


@mcp.tool
def select_history_entry(
    index: Annotated[int, Field(description="1-based position in the history list", ge=1)],
) -> str:
    """Restore a pair (and its direction) from the translation history."""
    return _select_history_entry_logic(session, index)


@mcp.tool
def select_dictionary_entry(
    arabic: Annotated[str, Field(description="Arabic key of the dictionary row")],
) -> str:
    """Fill both fields from a dictionary row."""
    return _select_dictionary_entry_logic(session, arabic)


@mcp.tool
def get_session_state() -> str:
    """Show the direction, both fields and the current suggestions."""
    return _format_session_state(session)


logger.debug("✅ All tools successfully registered. Qamus server running! 📚")

def main() -> None:
    """Main entry point for the Qamus MCP Server."""
    mcp.run()
