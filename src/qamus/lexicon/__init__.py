"""
Arabic ↔ German dictionary lookup.

Provides the dictionary store (forward table plus derived reverse index),
the lookup engine with case-tolerant phrase lookup, word-by-word fallback
and prefix suggestions, and the capped translation history.
"""

from .engine import LookupEngine, case_variants
from .history import TranslationHistory
from .store import DictionaryLoadError, DictionaryStore, build_reverse, find_value_collisions

__all__ = [
    "DictionaryLoadError",
    "DictionaryStore",
    "LookupEngine",
    "TranslationHistory",
    "build_reverse",
    "case_variants",
    "find_value_collisions",
]
