"""
Data models for the Arabic ↔ German lookup tool.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Vocabulary(str, Enum):
    """The two word sets the dictionary maps between."""
    ARABIC = "ar"
    GERMAN = "de"

    @property
    def other(self) -> "Vocabulary":
        return Vocabulary.GERMAN if self is Vocabulary.ARABIC else Vocabulary.ARABIC


class Direction(str, Enum):
    """Active translation direction, tagged as '<source>-<target>'."""
    AR_DE = "ar-de"
    DE_AR = "de-ar"

    @classmethod
    def between(cls, source: Vocabulary, target: Vocabulary) -> "Direction":
        """Build the direction tag for a source/target pair.

        Raises:
            ValueError: If source and target are the same vocabulary
        """
        return cls(f"{Vocabulary(source).value}-{Vocabulary(target).value}")

    @property
    def source(self) -> Vocabulary:
        return Vocabulary(self.value.split("-")[0])

    @property
    def target(self) -> Vocabulary:
        return Vocabulary(self.value.split("-")[1])

    def toggled(self) -> "Direction":
        return Direction.DE_AR if self is Direction.AR_DE else Direction.AR_DE


class HistoryEntry(BaseModel):
    """A recorded whole-phrase translation.

    Attributes:
        source: Text as typed by the user
        target: Matched translation
        direction: Direction tag (e.g., "ar-de")
        timestamp: Capture time of the entry
    """
    source: str = Field(..., description="Source text as typed")
    target: str = Field(..., description="Matched translation")
    direction: Direction = Field(..., description="Translation direction tag")
    timestamp: datetime = Field(default_factory=datetime.now, description="Capture time")


class DictionaryEntry(BaseModel):
    """One row of the full dictionary table."""
    arabic: str
    german: str


class SessionState(BaseModel):
    """Point-in-time view of a translator session."""
    direction: Direction
    arabic_text: str = ""
    german_text: str = ""
    suggestions: list[str] = Field(default_factory=list)
    history: list[HistoryEntry] = Field(default_factory=list)
    translation_pending: bool = False


__all__ = [
    "Vocabulary",
    "Direction",
    "HistoryEntry",
    "DictionaryEntry",
    "SessionState",
]
