import pytest

from models import JumbleOptions, LookupReport


def test_default_options_are_valid() -> None:
    options = JumbleOptions()
    options.validate()
    assert (options.min_len, options.max_len, options.entry_max_len) == (4, 10, 8)


@pytest.mark.parametrize(
    "options",
    [
        JumbleOptions(min_len=-1),
        JumbleOptions(min_len=6, max_len=5),
        JumbleOptions(entry_max_len=0),
        JumbleOptions(min_len=6, entry_max_len=5),
    ],
)
def test_invalid_options_raise(options: JumbleOptions) -> None:
    with pytest.raises(ValueError):
        options.validate()


def test_lookup_report_status() -> None:
    assert LookupReport("TRU", "TRU", in_range=False).status == "out of range"
    assert LookupReport("ZZZZ", "ZZZZ", in_range=True).status == "not found"
    assert LookupReport("TAE", "TAE", in_range=True, matches=("EAT", "TEA")).status == "ambiguous"
    assert LookupReport("RTA", "RTA", in_range=True, matches=("ART",), answer="ART").status == "found"
