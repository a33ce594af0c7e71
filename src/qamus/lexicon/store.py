"""
Dictionary store: forward Arabic → German table plus its derived reverse index.
"""

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

import yaml

from ..models import DictionaryEntry, Vocabulary

logger = logging.getLogger("qamus")

DEFAULT_DICTIONARY_PATH = Path(__file__).resolve().parent.parent / "data" / "translations.json"


class DictionaryLoadError(Exception):
    """Error loading or parsing a dictionary file."""
    pass


def build_reverse(forward: Mapping[str, str]) -> dict[str, str]:
    """Invert a forward mapping (value → key).

    Pairs are inverted in the forward mapping's iteration order, so when
    several keys share a value the last one wins.

    Example:
        >>> build_reverse({"بيت": "Haus", "منزل": "Haus", "كتاب": "Buch"})
        {'Haus': 'منزل', 'Buch': 'كتاب'}
    """
    reverse: dict[str, str] = {}
    for key, value in forward.items():
        reverse[value] = key
    return reverse


def find_value_collisions(forward: Mapping[str, str]) -> dict[str, list[str]]:
    """Return values shared by more than one key, with the keys in insertion order."""
    keys_by_value: dict[str, list[str]] = {}
    for key, value in forward.items():
        keys_by_value.setdefault(value, []).append(key)
    return {value: keys for value, keys in keys_by_value.items() if len(keys) > 1}


class DictionaryStore:
    """Holds the forward dictionary and the reverse dictionary derived from it.

    Both mappings are built once and exposed as read-only views, so a single
    store can be shared by every lookup without synchronization.

    Example:
        >>> store = DictionaryStore({"بيت": "Haus", "كتاب": "Buch"})
        >>> store.dictionary_for(Vocabulary.GERMAN)["Buch"]
        'كتاب'
    """

    SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}

    def __init__(self, forward: Mapping[str, str], source: str | None = None) -> None:
        """Build the store from an Arabic → German mapping.

        Args:
            forward: Arabic phrase → German phrase
            source: Optional description of where the data came from (for logs)
        """
        self.source = source
        self._forward = MappingProxyType(dict(forward))
        self._reverse = MappingProxyType(build_reverse(self._forward))

        collisions = find_value_collisions(self._forward)
        if collisions:
            logger.warning(
                "Dictionary has %d German value(s) mapped from several Arabic keys; "
                "reverse lookup keeps the last key for: %s",
                len(collisions),
                ", ".join(sorted(collisions)),
            )
        logger.debug(
            "Dictionary store built from %s: %d forward, %d reverse entries",
            source or "mapping", len(self._forward), len(self._reverse),
        )

    @property
    def forward(self) -> Mapping[str, str]:
        """Arabic → German mapping."""
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        """German → Arabic mapping."""
        return self._reverse

    def dictionary_for(self, vocabulary: Vocabulary | str) -> Mapping[str, str]:
        """Select the mapping whose keys are in the given vocabulary."""
        if Vocabulary(vocabulary) is Vocabulary.ARABIC:
            return self._forward
        return self._reverse

    def entries(self) -> list[DictionaryEntry]:
        """List the forward pairs in stored order (the dictionary table)."""
        return [DictionaryEntry(arabic=ar, german=de) for ar, de in self._forward.items()]

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, key: object) -> bool:
        return key in self._forward

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    @classmethod
    def from_file(cls, path: Path | str) -> "DictionaryStore":
        """Load a flat Arabic → German table from a JSON or YAML file.

        Expected format (JSON shown, YAML equivalent):
            {"بيت": "Haus", "كتاب": "Buch"}

        Args:
            path: Path to a .json, .yaml or .yml file

        Raises:
            DictionaryLoadError: If the file is missing, unreadable, malformed,
                or not a mapping of strings to strings
        """
        path = Path(path)
        if not path.exists():
            raise DictionaryLoadError(f"Dictionary file not found: {path}")

        suffix = path.suffix.lower()
        if suffix not in cls.SUPPORTED_EXTENSIONS:
            raise DictionaryLoadError(
                f"Unsupported file format: {suffix}. "
                f"Supported: {', '.join(sorted(cls.SUPPORTED_EXTENSIONS))}"
            )

        try:
            raw_content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DictionaryLoadError(f"Failed to read file: {e}") from e

        try:
            if suffix == ".json":
                data = json.loads(raw_content)
            else:
                data = yaml.safe_load(raw_content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DictionaryLoadError(f"Failed to parse {suffix} file: {e}") from e

        if not isinstance(data, dict):
            raise DictionaryLoadError("Dictionary must be a JSON/YAML object at the top level")

        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise DictionaryLoadError(
                    f"Dictionary entries must map strings to strings, got {key!r}: {value!r}"
                )

        logger.info("Loaded %d dictionary entries from %s", len(data), path)
        return cls(data, source=str(path))

    @classmethod
    def default(cls) -> "DictionaryStore":
        """Load the dictionary bundled with the package."""
        return cls.from_file(DEFAULT_DICTIONARY_PATH)
