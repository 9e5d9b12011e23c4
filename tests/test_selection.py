import pytest

from ncut.errors import SelectionError
from ncut.selection import (
    ByCharacterCount,
    ByFieldName,
    ByFieldNumber,
    effective_delimiter,
    from_options,
)


def test_from_options_picks_the_given_mode():
    assert from_options(fields="1-3") == ByFieldNumber("1-3")
    assert from_options(titles="a,b") == ByFieldName("a,b")
    assert from_options(characters="2") == ByCharacterCount("2")


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"fields": "1", "titles": "a"}, {"fields": "1", "titles": "a", "characters": "2"}],
)
def test_from_options_needs_exactly_one_mode(kwargs):
    with pytest.raises(SelectionError):
        from_options(**kwargs)


def test_character_mode_ignores_delimiter():
    assert effective_delimiter(ByCharacterCount("1"), ",") == ""
    assert effective_delimiter(ByFieldNumber("1"), None) == "\t"
    assert effective_delimiter(ByFieldName("a"), "::") == "::"
