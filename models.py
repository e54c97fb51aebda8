"""Data models for jumble lookups, entry state and indexing metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_MIN_LEN = 4
DEFAULT_MAX_LEN = 10
DEFAULT_ENTRY_MAX_LEN = 8


@dataclass(slots=True)
class JumbleOptions:
    """Length bounds and dictionary location used for indexing and lookups."""

    min_len: int = DEFAULT_MIN_LEN
    max_len: int = DEFAULT_MAX_LEN
    entry_max_len: int = DEFAULT_ENTRY_MAX_LEN
    dictionary_path: str = ""

    def validate(self) -> None:
        if self.min_len < 0:
            raise ValueError(f"min_len must be non-negative, got {self.min_len}")
        if self.min_len > self.max_len:
            raise ValueError(f"min_len ({self.min_len}) is greater than max_len ({self.max_len})")
        if self.entry_max_len < 1:
            raise ValueError(f"entry_max_len must be positive, got {self.entry_max_len}")
        if self.entry_max_len < self.min_len:
            raise ValueError(f"entry_max_len ({self.entry_max_len}) is less than min_len ({self.min_len})")


class EntryStatus(Enum):
    """Whether the text entry changed after an input event."""

    CHANGED = "changed"
    UNCHANGED = "unchanged"
    QUIT = "quit"


@dataclass(slots=True)
class LookupReport:
    """Result of resolving the current entry against the index."""

    query: str
    normalized_query: str
    in_range: bool
    matches: tuple[str, ...] = field(default_factory=tuple)
    answer: str | None = None

    @property
    def status(self) -> str:
        if not self.in_range:
            return "out of range"
        if not self.matches:
            return "not found"
        if len(self.matches) > 1:
            return "ambiguous"
        return "found"


@dataclass(slots=True)
class IndexBuildResult:
    """Summary returned after building an index from a dictionary file."""

    wordlist_path: str
    total_lines: int
    accepted_words: int
    skipped_lines: int
    unique_signatures: int
