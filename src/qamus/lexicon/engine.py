"""
Lookup engine: phrase lookup with case fallbacks, word substitution and
prefix suggestions.
"""

import logging
from collections.abc import Mapping

from ..models import HistoryEntry, Vocabulary
from .history import DEFAULT_HISTORY_LIMIT, TranslationHistory
from .store import DictionaryStore

logger = logging.getLogger("qamus")

DEFAULT_MAX_SUGGESTIONS = 5


def case_variants(text: str, vocabulary: Vocabulary | str) -> list[str]:
    """Candidate keys for a lookup, in priority order.

    German input is tried as typed, then capitalized (first letter upper,
    rest lower), then fully lower-cased. Arabic has no case, so only the
    literal text is tried.

    Example:
        >>> case_variants("HAUS", Vocabulary.GERMAN)
        ['HAUS', 'Haus', 'haus']
        >>> case_variants("بيت", Vocabulary.ARABIC)
        ['بيت']
    """
    if Vocabulary(vocabulary) is Vocabulary.ARABIC:
        return [text]
    capitalized = text[:1].upper() + text[1:].lower()
    return [text, capitalized, text.lower()]


class LookupEngine:
    """Translates between Arabic and German using a shared DictionaryStore.

    ``translate`` first matches the whole input against the dictionary and
    records a history entry on a hit. Otherwise it substitutes word by word,
    passing unknown words through unchanged. No operation raises on user
    input.

    Example:
        >>> engine = LookupEngine(DictionaryStore({"بيت": "Haus"}))
        >>> engine.translate("haus", Vocabulary.GERMAN)
        'بيت'
        >>> engine.translate("بيت كبير", Vocabulary.ARABIC)
        'Haus كبير'
    """

    def __init__(
        self,
        store: DictionaryStore,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._store = store
        self._max_suggestions = max_suggestions
        self._history = TranslationHistory(limit=history_limit)

    @property
    def store(self) -> DictionaryStore:
        return self._store

    @property
    def history(self) -> list[HistoryEntry]:
        """Recorded translations, newest first."""
        return self._history.entries()

    @property
    def max_suggestions(self) -> int:
        return self._max_suggestions

    def clear_history(self) -> None:
        self._history.clear()

    def _lookup(self, dictionary: Mapping[str, str], text: str, vocabulary: Vocabulary) -> str | None:
        """Return the first non-empty translation among the case variants of ``text``, or None."""
        for candidate in case_variants(text, vocabulary):
            translation = dictionary.get(candidate)
            if translation:
                return translation
        return None

    def translate(self, text: str, source_vocab: Vocabulary | str) -> str:
        """Translate ``text`` from ``source_vocab`` into the other vocabulary.

        Args:
            text: Input as typed; only blank input is trimmed away
            source_vocab: Vocabulary the input is written in

        Returns:
            The whole-phrase translation if one exists, else the word-by-word
            substitution, else "" for blank input
        """
        if not text.strip():
            return ""

        source = Vocabulary(source_vocab)
        target = source.other
        dictionary = self._store.dictionary_for(source)

        phrase = self._lookup(dictionary, text, source)
        if phrase is not None:
            logger.debug("Phrase hit (%s→%s): %r → %r", source.value, target.value, text, phrase)
            self.record_history(text, phrase, source, target)
            return phrase

        words = text.split(" ")
        translated = [self._lookup(dictionary, word, source) or word for word in words]
        logger.debug("Word fallback (%s→%s) for %d word(s)", source.value, target.value, len(words))
        return " ".join(translated)

    def suggest(self, text: str, vocab: Vocabulary | str) -> list[str]:
        """Dictionary keys starting with ``text``, in stored order.

        German keys are compared case-insensitively; Arabic keys literally.
        At most ``max_suggestions`` keys are returned.
        """
        if not text.strip():
            return []

        vocabulary = Vocabulary(vocab)
        dictionary = self._store.dictionary_for(vocabulary)

        if vocabulary is Vocabulary.GERMAN:
            prefix = text.casefold()
            matches = (key for key in dictionary if key.casefold().startswith(prefix))
        else:
            matches = (key for key in dictionary if key.startswith(text))

        suggestions: list[str] = []
        for key in matches:
            suggestions.append(key)
            if len(suggestions) >= self._max_suggestions:
                break
        return suggestions

    def record_history(
        self,
        source: str,
        target: str,
        source_vocab: Vocabulary | str,
        target_vocab: Vocabulary | str,
    ) -> HistoryEntry:
        """Prepend a translation to the history, keeping only the most recent entries."""
        return self._history.record(source, target, source_vocab, target_vocab)
