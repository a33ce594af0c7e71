"""
Pytest configuration and fixtures for qamus tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing qamus
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from qamus.lexicon import DictionaryStore, LookupEngine
from qamus.session import TranslatorSession


SAMPLE_DICTIONARY = {
    "بيت": "Haus",
    "كتاب": "Buch",
    "يد": "Hand",
    "كلب": "Hund",
    "قلب": "Herz",
    "سماء": "Himmel",
    "قبعة": "Hut",
    "شارع": "Straße",
    "صباح الخير": "Guten Morgen",
    "كبير": "groß",
    "كبيرة": "große",
}


@pytest.fixture
def sample_dictionary() -> dict[str, str]:
    return dict(SAMPLE_DICTIONARY)


@pytest.fixture
def store(sample_dictionary: dict[str, str]) -> DictionaryStore:
    return DictionaryStore(sample_dictionary)


@pytest.fixture
def engine(store: DictionaryStore) -> LookupEngine:
    return LookupEngine(store)


@pytest.fixture
def session(engine: LookupEngine) -> TranslatorSession:
    """Session with a long debounce; tests apply translations with flush()."""
    s = TranslatorSession(engine, debounce_seconds=5.0)
    yield s
    s.close()
