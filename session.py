"""Live text-entry state for resolving a jumble as it is typed."""

from __future__ import annotations

import logging
from dataclasses import replace

from models import EntryStatus, JumbleOptions, LookupReport
from solver import AnagramIndex, AnswerPolicy, unique_answer
from utils import letters_only, normalize_token

logger = logging.getLogger(__name__)


class JumbleSession:
    """Track the current entry and the answer to show for it."""

    def __init__(
        self,
        index: AnagramIndex,
        options: JumbleOptions,
        policy: AnswerPolicy = unique_answer,
    ) -> None:
        options.validate()
        self.index = index
        self.options = options
        self.policy = policy
        self.entry = ""
        self.answer: str | None = None
        self.closed = False

    def push(self, text: str) -> EntryStatus:
        """Append the letters from ``text`` to the entry."""
        if self.closed:
            return EntryStatus.QUIT
        letters = letters_only(normalize_token(text))
        if not letters:
            return EntryStatus.UNCHANGED
        return self._update(self.entry + letters)

    def backspace(self) -> EntryStatus:
        if self.closed:
            return EntryStatus.QUIT
        if not self.entry:
            return EntryStatus.UNCHANGED
        return self._update(self.entry[:-1])

    def clear(self) -> EntryStatus:
        if self.closed:
            return EntryStatus.QUIT
        if not self.entry:
            return EntryStatus.UNCHANGED
        return self._update("")

    def set_entry(self, text: str) -> EntryStatus:
        """Replace the whole entry with one edited string."""
        if self.closed:
            return EntryStatus.QUIT
        entry = letters_only(normalize_token(text))
        if entry == self.entry:
            return EntryStatus.UNCHANGED
        return self._update(entry)

    def cancel(self) -> EntryStatus:
        self.closed = True
        return EntryStatus.QUIT

    @property
    def max_len(self) -> int:
        """Longest entry that is looked up; anything longer shows no answer."""
        return min(self.options.max_len, self.options.entry_max_len)

    def report(self) -> LookupReport:
        """Describe how the current entry resolves against the index."""
        bounds = replace(self.options, max_len=self.max_len)
        return self.index.resolve(self.entry, bounds, self.policy)

    def _update(self, entry: str) -> EntryStatus:
        self.entry = entry
        matches = self.index.lookup(entry, self.options.min_len, self.max_len)
        # An edit never leaves the previous answer on screen.
        self.answer = self.policy(matches) if matches else None
        logger.debug("Entry is now %r, matches: %s", entry, matches)
        return EntryStatus.CHANGED
