"""
passcraft.smart
Pattern passwords: two capitalized words, a number and safe symbols.
"""

from typing import List, Sequence, Tuple

from .models import Complexity, SmartRequest, WordOrder
from .random_source import RandomSource, choice, digits
from .wordlists import WordPool, capitalize

SAFE_SYMBOLS = "!@#$%^&*"

# complexity -> (number width, min symbols, max symbols)
PAYLOADS = {
    Complexity.SIMPLE: (2, 1, 1),
    Complexity.MEDIUM: (3, 1, 1),
    Complexity.COMPLEX: (4, 2, 3),
}


def _widen(base: Sequence[str], extra: Sequence[str], tenths: int, source: RandomSource) -> List[str]:
    """base plus each extra word kept with probability tenths/10."""
    return list(base) + [w for w in extra if source.next_below(10) < tenths]


def _word_pools(source: RandomSource, words: WordPool) -> Tuple[List[str], List[str], List[str]]:
    nature = words.category("nature")
    adjectives = _widen(words.require("adjectives"), nature, 3, source)
    nouns = list(words.require("nouns"))
    for name in ("technology", "cosmic", "mythical"):
        nouns.extend(words.category(name))
    verbs = _widen(words.require("verbs"), nature, 2, source)
    return adjectives, nouns, verbs


def _base(request: SmartRequest, source: RandomSource, words: WordPool) -> str:
    adjectives, nouns, verbs = _word_pools(source, words)
    adjective = capitalize(choice(source, adjectives))
    noun = capitalize(choice(source, nouns))
    verb = capitalize(choice(source, verbs))

    if request.word_order is WordOrder.ADJECTIVE_NOUN:
        return adjective + noun
    if request.word_order is WordOrder.VERB_NOUN:
        return verb + noun
    return choice(source, (
        adjective + noun,
        verb + noun,
        adjective + verb,
        noun + adjective,
    ))


def generate_smart(request: SmartRequest, source: RandomSource, words: WordPool) -> str:
    base = _base(request, source, words)

    width, low, high = PAYLOADS[request.complexity]
    number = digits(source, width)
    symbols = ""
    if request.include_symbols:
        count = low + source.next_below(high - low + 1)
        symbols = "".join(choice(source, SAFE_SYMBOLS) for _ in range(count))

    return choice(source, (
        base + number + symbols,
        symbols + base + number,
        number + base + symbols,
        base + symbols + number,
    ))
