"""Anagram index builder and jumble lookup engine."""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Callable, Iterable, Iterator, Sequence

from models import IndexBuildResult, JumbleOptions, LookupReport
from utils import canonicalize, normalize_token

ProgressCallback = Callable[[float], None]
AnswerPolicy = Callable[[Sequence[str]], str | None]

PREVIEW_LINES = 10

logger = logging.getLogger(__name__)


class DictionaryLoadError(OSError):
    """Raised when the dictionary resource cannot be read."""


def unique_answer(matches: Sequence[str]) -> str | None:
    """Return the match only when it is the single candidate."""
    if len(matches) == 1:
        return matches[0]
    return None


def all_answers(matches: Sequence[str]) -> str | None:
    """Return every candidate, comma separated."""
    if not matches:
        return None
    return ", ".join(matches)


class AnagramIndex:
    """
    Map canonical signatures to the dictionary words that share them.

    Example::

        {
            "AET": ["EAT", "TEA"],
            "EPRSUU": ["PURSUE"],
            "RSTTU": ["TRUST"],
        }
    """

    def __init__(self) -> None:
        self._groups: dict[str, list[str]] = defaultdict(list)
        self.word_count = 0

    @classmethod
    def build(cls, words: Iterable[str]) -> AnagramIndex:
        """Build an index from already normalized words."""
        index = cls()
        for word in words:
            index.insert(canonicalize(word), word)
        return index

    @classmethod
    def from_file(
        cls,
        wordlist_path: str | Path,
        progress_callback: ProgressCallback | None = None,
    ) -> tuple[AnagramIndex, IndexBuildResult]:
        """
        Build an index from a newline-delimited dictionary file.

        Lines are stripped and upper-cased. Blank lines are skipped rather
        than stored under an empty signature.
        """
        path = Path(wordlist_path)
        if not path.exists():
            raise DictionaryLoadError(f"Dictionary file not found: {wordlist_path}")

        index = cls()
        total_lines = 0
        skipped_lines = 0

        try:
            total_bytes = max(path.stat().st_size, 1)
            with path.open("rb") as handle:
                bytes_processed = 0
                for raw_line in handle:
                    bytes_processed += len(raw_line)
                    total_lines += 1

                    try:
                        text = raw_line.decode("utf-8")
                    except UnicodeDecodeError:
                        logger.warning("Line %d of %s is not valid UTF-8; replacing bad bytes", total_lines, path)
                        text = raw_line.decode("utf-8", errors="replace")
                    word = normalize_token(text)
                    if total_lines <= PREVIEW_LINES:
                        logger.debug("Dictionary line %d: %r", total_lines, word)
                    if not word:
                        skipped_lines += 1
                        continue

                    index.insert(canonicalize(word), word)

                    if progress_callback and total_lines % 5000 == 0:
                        progress_callback(min(bytes_processed / total_bytes, 1.0))
        except OSError as exc:
            raise DictionaryLoadError(f"Could not read dictionary file {wordlist_path}: {exc}") from exc

        if skipped_lines:
            logger.warning("Skipped %d blank lines in %s", skipped_lines, path)
        logger.info(
            "Built anagram index with %d signatures from %d words (%s)",
            len(index),
            index.word_count,
            path,
        )

        if progress_callback:
            progress_callback(1.0)

        return index, IndexBuildResult(
            wordlist_path=str(path),
            total_lines=total_lines,
            accepted_words=index.word_count,
            skipped_lines=skipped_lines,
            unique_signatures=len(index),
        )

    def insert(self, signature: str, word: str) -> None:
        """Add ``word`` to the group stored under ``signature``."""
        self._groups[signature].append(word)
        self.word_count += 1

    def lookup(self, query: str, min_len: int, max_len: int) -> tuple[str, ...] | None:
        """
        Return the words that are rearrangements of ``query``.

        Queries shorter than ``min_len`` or longer than ``max_len`` give
        ``None`` without touching the index, as do unknown signatures.
        """
        if len(query) < min_len or len(query) > max_len:
            return None
        group = self._groups.get(canonicalize(query))
        if not group:
            return None
        return tuple(group)

    def answer(
        self,
        query: str,
        min_len: int,
        max_len: int,
        policy: AnswerPolicy = unique_answer,
    ) -> str | None:
        """Look up ``query`` and reduce the matches to displayable text."""
        matches = self.lookup(query, min_len, max_len)
        if matches is None:
            return None
        return policy(matches)

    def resolve(
        self,
        raw_query: str,
        options: JumbleOptions,
        policy: AnswerPolicy = unique_answer,
    ) -> LookupReport:
        """Normalize a raw query and report its matches and displayed answer."""
        normalized = normalize_token(raw_query)
        in_range = options.min_len <= len(normalized) <= options.max_len
        matches = self.lookup(normalized, options.min_len, options.max_len) or ()
        return LookupReport(
            query=raw_query,
            normalized_query=normalized,
            in_range=in_range,
            matches=matches,
            answer=policy(matches) if matches else None,
        )

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, signature: object) -> bool:
        return signature in self._groups

    def __iter__(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        for signature, group in self._groups.items():
            yield signature, tuple(group)
