import string

import pytest

from passcraft.charset import (
    AMBIGUOUS_CHARS,
    DEFAULT_SYMBOLS,
    SIMILAR_CHARS,
    build_character_set,
)
from passcraft.errors import EmptyAlphabetAfterExclusion, NoCharacterClassSelected
from passcraft.models import CharClass


def test_all_classes_default_symbols():
    cs = build_character_set()
    assert set(cs.alphabet) == set(string.ascii_letters + string.digits + DEFAULT_SYMBOLS)
    assert cs.classes[CharClass.SYMBOL] == DEFAULT_SYMBOLS
    assert len(cs.alphabet) == len(set(cs.alphabet))


def test_empty_custom_symbols_fall_back_to_default():
    cs = build_character_set(lower=False, upper=False, digits=False, custom_symbols="")
    assert cs.alphabet == DEFAULT_SYMBOLS


def test_custom_symbols_are_deduplicated():
    cs = build_character_set(upper=False, digits=False, custom_symbols="aa##")
    assert cs.classes[CharClass.SYMBOL] == "a#"
    assert cs.alphabet.count("a") == 1
    assert cs.alphabet.endswith("#")


def test_unselected_classes_absent():
    cs = build_character_set(lower=False, symbols=False)
    assert set(cs.classes) == {CharClass.UPPER, CharClass.DIGIT}


def test_exclude_similar():
    cs = build_character_set(exclude_similar=True)
    assert not set(SIMILAR_CHARS) & set(cs.alphabet)
    assert "2" in cs.alphabet


def test_exclude_ambiguous_filters_each_class():
    cs = build_character_set(exclude_ambiguous=True)
    assert not set(AMBIGUOUS_CHARS) & set(cs.alphabet)
    assert cs.classes[CharClass.DIGIT] == "34679"


def test_no_class_selected():
    with pytest.raises(NoCharacterClassSelected):
        build_character_set(lower=False, upper=False, digits=False, symbols=False)


def test_everything_excluded():
    with pytest.raises(EmptyAlphabetAfterExclusion):
        build_character_set(lower=False, upper=False, digits=False,
                            custom_symbols="0O", exclude_similar=True)
