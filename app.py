"""Terminal front-end for solving jumbles against a dictionary."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from models import EntryStatus, IndexBuildResult, JumbleOptions
from session import JumbleSession
from solver import AnagramIndex, DictionaryLoadError, all_answers, unique_answer
from utils import load_config, options_from_config, save_config, setup_logging

PROMPT = "jumble> "
NO_ANSWER = "-"
CLEAR_COMMANDS = {"", ":clear", ":c"}
QUIT_COMMANDS = {":quit", ":q"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jumble-helper",
        description="Unscramble jumbled words using a dictionary anagram index.",
    )
    parser.add_argument("words", nargs="*", help="Scrambled words to solve (interactive prompt when omitted)")
    parser.add_argument("--dictionary", help="Newline-delimited word list (defaults to the last one used)")
    parser.add_argument("--min-len", type=int, help="Shortest entry that is looked up")
    parser.add_argument("--max-len", type=int, help="Longest entry that is looked up")
    parser.add_argument("--show-all", action="store_true", help="Show every candidate instead of only unique answers")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


class JumbleHelperApp:
    """Load the dictionary once, then answer jumbles from argv or a prompt."""

    def __init__(self, options: JumbleOptions, show_all: bool = False, out: TextIO | None = None) -> None:
        self.logger = logging.getLogger(__name__)
        self.options = options
        self.policy = all_answers if show_all else unique_answer
        self.out = out or sys.stdout
        self.config_data = load_config()
        self.index: AnagramIndex | None = None

    def load_index(self) -> IndexBuildResult:
        """Build the index from the configured dictionary. Raises DictionaryLoadError."""
        path = self.options.dictionary_path
        if not path:
            raise DictionaryLoadError("No dictionary file given; pass --dictionary PATH")
        resolved = str(Path(path).resolve())
        self.logger.info("Indexing dictionary %s", resolved)
        self.index, result = AnagramIndex.from_file(
            resolved,
            progress_callback=lambda pct: self.logger.debug("Indexing %.0f%%", pct * 100),
        )
        self._handle_index_done(result)
        return result

    def _handle_index_done(self, result: IndexBuildResult) -> None:
        self.logger.info(
            "Index ready: %d words, %d signatures, %d blank lines skipped.",
            result.accepted_words,
            result.unique_signatures,
            result.skipped_lines,
        )
        self.config_data["last_dictionary_path"] = result.wordlist_path
        save_config(self.config_data)

    def _require_index(self) -> AnagramIndex:
        if self.index is None:
            raise RuntimeError("Dictionary index has not been loaded; call load_index() first")
        return self.index

    def solve_words(self, words: Sequence[str]) -> None:
        index = self._require_index()
        for word in words:
            report = index.resolve(word, self.options, self.policy)
            shown = report.answer if report.answer is not None else f"(no answer: {report.status})"
            print(f"{report.normalized_query} -> {shown}", file=self.out)

    def run_prompt(self, lines: TextIO) -> None:
        """Treat each input line as the edited entry until quit or EOF."""
        session = JumbleSession(self._require_index(), self.options, self.policy)
        while True:
            self.out.write(PROMPT)
            self.out.flush()
            line = lines.readline()
            if not line:
                session.cancel()
                print(file=self.out)
                return
            command = line.strip().lower()
            if command in QUIT_COMMANDS:
                session.cancel()
                return
            if command in CLEAR_COMMANDS:
                status = session.clear()
            else:
                status = session.set_entry(line)
            if status is EntryStatus.QUIT:
                return
            print(session.answer or NO_ANSWER, file=self.out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    options = options_from_config(load_config())
    if args.dictionary:
        options.dictionary_path = args.dictionary
    if args.min_len is not None:
        options.min_len = args.min_len
        options.entry_max_len = max(options.entry_max_len, args.min_len)
    if args.max_len is not None:
        options.max_len = args.max_len
    try:
        options.validate()
    except ValueError as exc:
        parser.error(str(exc))

    app = JumbleHelperApp(options, show_all=args.show_all)
    try:
        app.load_index()
    except DictionaryLoadError as exc:
        logger.exception("Failed building index")
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.words:
        app.solve_words(args.words)
    else:
        app.run_prompt(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
