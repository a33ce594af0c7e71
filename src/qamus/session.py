"""
Translator session: the two text fields, active direction, live suggestions
and the debounced re-translation that follows typing.
"""

import logging
import threading

from .debounce import DEBOUNCE_SECONDS, Debouncer
from .lexicon import LookupEngine
from .models import Direction, HistoryEntry, SessionState, Vocabulary

logger = logging.getLogger("qamus.session")


class TranslatorSession:
    """State behind one translator view.

    Typing into the source-side field refreshes suggestions at once and
    schedules a translation into the other field after a quiet period.
    Toggling the direction clears both fields and the suggestions but keeps
    the history, which lives on the shared engine.

    Example:
        >>> session = TranslatorSession(engine)
        >>> session.handle_arabic_change("بيت")
        >>> session.flush()
        >>> session.german_text
        'Haus'
    """

    def __init__(
        self,
        engine: LookupEngine,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        direction: Direction = Direction.AR_DE,
    ) -> None:
        self._engine = engine
        self._debouncer = Debouncer(debounce_seconds)
        self._lock = threading.RLock()
        # Bumped whenever a running translation must no longer write its result
        self._generation = 0

        self.direction = Direction(direction)
        self.arabic_text = ""
        self.german_text = ""
        self.suggestions: list[str] = []

    @property
    def engine(self) -> LookupEngine:
        return self._engine

    @property
    def history(self) -> list[HistoryEntry]:
        return self._engine.history

    @property
    def translation_pending(self) -> bool:
        return self._debouncer.pending

    # ------------------------------------------------------------------
    # Field access by role
    # ------------------------------------------------------------------

    def _get_text(self, vocabulary: Vocabulary) -> str:
        return self.arabic_text if vocabulary is Vocabulary.ARABIC else self.german_text

    def _set_text(self, vocabulary: Vocabulary, value: str) -> None:
        if vocabulary is Vocabulary.ARABIC:
            self.arabic_text = value
        else:
            self.german_text = value

    @property
    def source_text(self) -> str:
        with self._lock:
            return self._get_text(self.direction.source)

    @property
    def target_text(self) -> str:
        with self._lock:
            return self._get_text(self.direction.target)

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def handle_arabic_change(self, value: str) -> None:
        self._handle_change(Vocabulary.ARABIC, value)

    def handle_german_change(self, value: str) -> None:
        self._handle_change(Vocabulary.GERMAN, value)

    def handle_input(self, value: str) -> None:
        """Route typed text to the field on the active source side."""
        self._handle_change(self.direction.source, value)

    def _handle_change(self, vocabulary: Vocabulary, value: str) -> None:
        with self._lock:
            self._set_text(vocabulary, value)
            if vocabulary is not self.direction.source:
                return
            self.suggestions = self._engine.suggest(value, vocabulary)
            self._generation += 1
            self._debouncer.schedule(self._apply_translation, vocabulary, value, self._generation)

    def _invalidate_pending(self) -> None:
        """Cancel the scheduled translation and orphan one that is already running.

        Must be called with the session lock held.
        """
        self._generation += 1
        self._debouncer.cancel()

    def _apply_translation(self, source: Vocabulary, value: str, generation: int) -> None:
        """Debounced step: write the translation of ``value`` into the target field."""
        translated = self._engine.translate(value, source) if value.strip() else ""
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale translation for %s input", source.value)
                return
            self._set_text(source.other, translated)

    def flush(self) -> bool:
        """Apply a pending debounced translation immediately."""
        return self._debouncer.flush()

    def close(self) -> None:
        """Cancel any pending translation."""
        with self._lock:
            self._invalidate_pending()

    # ------------------------------------------------------------------
    # Direction and selections
    # ------------------------------------------------------------------

    def toggle_direction(self) -> Direction:
        """Flip the direction and clear both fields and the suggestions."""
        with self._lock:
            self._invalidate_pending()
            self.direction = self.direction.toggled()
            self.arabic_text = ""
            self.german_text = ""
            self.suggestions = []
            logger.debug("Direction switched to %s", self.direction.value)
            return self.direction

    def select_suggestion(self, suggestion: str) -> str:
        """Put a suggestion in the source field and translate it right away.

        Returns:
            The translation written to the target field
        """
        with self._lock:
            self._invalidate_pending()
            source = self.direction.source
            self._set_text(source, suggestion)
            translated = self._engine.translate(suggestion, source)
            self._set_text(source.other, translated)
            self.suggestions = []
            return translated

    def select_history_entry(self, entry: HistoryEntry) -> None:
        """Restore a recorded pair and its direction without recording it again."""
        with self._lock:
            self._invalidate_pending()
            self.direction = Direction(entry.direction)
            self._set_text(self.direction.source, entry.source)
            self._set_text(self.direction.target, entry.target)

    def select_dictionary_entry(self, arabic: str, german: str) -> None:
        """Fill both fields from a dictionary table row; the direction is kept."""
        with self._lock:
            self._invalidate_pending()
            self.arabic_text = arabic
            self.german_text = german

    def snapshot(self) -> SessionState:
        with self._lock:
            return SessionState(
                direction=self.direction,
                arabic_text=self.arabic_text,
                german_text=self.german_text,
                suggestions=list(self.suggestions),
                history=self._engine.history,
                translation_pending=self._debouncer.pending,
            )
