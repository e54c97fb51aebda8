from itertools import permutations

from models import JumbleOptions
from utils import canonicalize, letters_only, load_config, normalize_token, options_from_config, save_config


def test_normalize_token_strips_and_uppercases() -> None:
    assert normalize_token("  pursue\n") == "PURSUE"


def test_normalize_token_keeps_non_letters() -> None:
    assert normalize_token("Rock-n-Roll!") == "ROCK-N-ROLL!"


def test_letters_only_drops_everything_but_a_to_z() -> None:
    assert letters_only("AB-C 1D!") == "ABCD"


def test_canonicalize_is_invariant_under_permutation() -> None:
    word = "JUMBLE"
    keys = {canonicalize("".join(p)) for p in permutations(word)}
    assert keys == {"BEJLMU"}


def test_canonicalize_distinguishes_letter_counts() -> None:
    assert canonicalize("TRUST") != canonicalize("TRUSS")
    assert canonicalize("ABB") != canonicalize("AAB")


def test_canonicalize_empty_word() -> None:
    assert canonicalize("") == ""


def test_config_round_trip() -> None:
    assert load_config() == {}
    save_config({"last_dictionary_path": "/tmp/words.txt", "min_len": 5})
    assert load_config() == {"last_dictionary_path": "/tmp/words.txt", "min_len": 5}


def test_load_config_falls_back_on_corrupt_file() -> None:
    import utils

    utils.ensure_app_dirs()
    utils.CONFIG_PATH.write_text("{not json", encoding="utf-8")
    assert load_config() == {}


def test_options_from_config_uses_defaults_for_missing_keys() -> None:
    options = options_from_config({"max_len": 6, "last_dictionary_path": "words.txt"})
    defaults = JumbleOptions()
    assert options.min_len == defaults.min_len
    assert options.max_len == 6
    assert options.entry_max_len == defaults.entry_max_len
    assert options.dictionary_path == "words.txt"


def test_options_from_config_ignores_invalid_values() -> None:
    options = options_from_config({"min_len": None, "max_len": "ten", "entry_max_len": 9, "last_dictionary_path": 3})
    defaults = JumbleOptions()
    assert options.min_len == defaults.min_len
    assert options.max_len == defaults.max_len
    assert options.entry_max_len == 9
    assert options.dictionary_path == ""
