"""Utility helpers for normalization, canonical keys, logging and config."""

from __future__ import annotations

import json
import logging
import os
import string
from pathlib import Path
from typing import Any

from models import JumbleOptions

APP_DIR_ENV = "JUMBLE_HELPER_HOME"
LETTERS = frozenset(string.ascii_uppercase)


def _choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    The environment override wins, then the user home, with a local
    workspace fallback when the home directory is blocked.
    """
    override = os.environ.get(APP_DIR_ENV)
    if override:
        return Path(override)
    preferred = Path.home() / ".jumble_helper"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".jumble_helper")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


APP_DIR = _choose_app_dir()
CONFIG_PATH = APP_DIR / "config.json"
LOG_PATH = APP_DIR / "app.log"


def ensure_app_dirs() -> None:
    """Create the app directory if it does not already exist."""
    APP_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure file logging once per app run."""
    ensure_app_dirs()
    logging.basicConfig(
        filename=str(LOG_PATH),
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config() -> dict[str, Any]:
    """Load config from the app config file."""
    ensure_app_dirs()
    if not CONFIG_PATH.exists():
        return {}
    try:
        return json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to load config from %s", CONFIG_PATH)
        return {}


def save_config(config: dict[str, Any]) -> None:
    """Persist config to disk."""
    ensure_app_dirs()
    try:
        CONFIG_PATH.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception:
        logging.exception("Failed to save config to %s", CONFIG_PATH)


def _config_int(config: dict[str, Any], key: str, default: int) -> int:
    try:
        return int(config.get(key, default))
    except (TypeError, ValueError):
        logging.exception("Ignoring invalid %s in %s", key, CONFIG_PATH)
        return default


def options_from_config(config: dict[str, Any]) -> JumbleOptions:
    """Build options from stored config, keeping defaults for missing or bad keys."""
    defaults = JumbleOptions()
    dictionary_path = config.get("last_dictionary_path")
    return JumbleOptions(
        min_len=_config_int(config, "min_len", defaults.min_len),
        max_len=_config_int(config, "max_len", defaults.max_len),
        entry_max_len=_config_int(config, "entry_max_len", defaults.entry_max_len),
        dictionary_path=dictionary_path if isinstance(dictionary_path, str) else defaults.dictionary_path,
    )


def normalize_token(token: str) -> str:
    """Trim surrounding whitespace and upper-case a dictionary line or query."""
    return token.strip().upper()


def letters_only(text: str) -> str:
    """Keep only A-Z from already upper-cased text."""
    return "".join(ch for ch in text if ch in LETTERS)


def canonicalize(word: str) -> str:
    """Canonical sorted-signature shared by all anagrams of ``word``."""
    return "".join(sorted(word))
