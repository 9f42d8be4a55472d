"""
passcraft.charset
Builds the sampling alphabet from character-class flags and exclusion rules.
"""

import string
from typing import Dict, NamedTuple, Optional

from .errors import EmptyAlphabetAfterExclusion, NoCharacterClassSelected
from .models import CharClass


DEFAULT_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
SIMILAR_CHARS = "il1Lo0O"
AMBIGUOUS_CHARS = "il1Lo0O2Z5S8B"


class CharacterSet(NamedTuple):
    alphabet: str
    classes: Dict[CharClass, str]


def _dedupe(chars: str) -> str:
    return "".join(dict.fromkeys(chars))


def _strip(chars: str, excluded: str) -> str:
    return "".join(c for c in chars if c not in excluded)


def build_character_set(
    lower: bool = True,
    upper: bool = True,
    digits: bool = True,
    symbols: bool = True,
    custom_symbols: Optional[str] = None,
    exclude_similar: bool = False,
    exclude_ambiguous: bool = False,
) -> CharacterSet:
    """
    Return the deduplicated alphabet plus one filtered sub-alphabet per
    selected class. Unselected classes are absent from `classes`.
    """
    pools = {}
    if lower:
        pools[CharClass.LOWER] = string.ascii_lowercase
    if upper:
        pools[CharClass.UPPER] = string.ascii_uppercase
    if digits:
        pools[CharClass.DIGIT] = string.digits
    if symbols:
        pools[CharClass.SYMBOL] = custom_symbols or DEFAULT_SYMBOLS
    if not pools:
        raise NoCharacterClassSelected()

    excluded = ""
    if exclude_ambiguous:
        excluded = AMBIGUOUS_CHARS
    elif exclude_similar:
        excluded = SIMILAR_CHARS

    classes = {cls: _dedupe(_strip(chars, excluded)) for cls, chars in pools.items()}
    alphabet = _dedupe("".join(classes.values()))
    if not alphabet:
        raise EmptyAlphabetAfterExclusion()
    return CharacterSet(alphabet, classes)
