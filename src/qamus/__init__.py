"""
Qamus - Arabic ↔ German dictionary lookup with autocomplete, served over MCP.
"""

from .config import QamusConfig
from .lexicon import DictionaryLoadError, DictionaryStore, LookupEngine, build_reverse
from .models import Direction, DictionaryEntry, HistoryEntry, SessionState, Vocabulary
from .session import TranslatorSession

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("qamus")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "DictionaryEntry",
    "DictionaryLoadError",
    "DictionaryStore",
    "Direction",
    "HistoryEntry",
    "LookupEngine",
    "QamusConfig",
    "SessionState",
    "TranslatorSession",
    "Vocabulary",
    "build_reverse",
]
