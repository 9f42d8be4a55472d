"""
passcraft.memorable
Word-based passphrases: words, separator, capitalization, optional number.
"""

from typing import List

from .errors import EmptyWordPool
from .models import Capitalization, MemorableRequest, NumberPosition
from .random_source import RandomSource, choice, coin, digits
from .wordlists import WordPool, capitalize

# one in THEMATIC_ODDS word draws comes from a single category
THEMATIC_ODDS = 3


def _pick_words(count: int, source: RandomSource, words: WordPool) -> List[str]:
    all_words = words.all_words()
    if not all_words:
        raise EmptyWordPool("word pool is empty")
    categories = [words[name] for name in words if words[name]]
    picked = []
    for i in range(count):
        if i < len(categories) and source.next_below(THEMATIC_ODDS) == 0:
            picked.append(choice(source, choice(source, categories)))
        else:
            picked.append(choice(source, all_words))
    return picked


def _capitalize(picked: List[str], mode: Capitalization, source: RandomSource) -> List[str]:
    if mode is Capitalization.FIRST:
        return [capitalize(w) if i == 0 else w for i, w in enumerate(picked)]
    if mode is Capitalization.ALL:
        return [capitalize(w) for w in picked]
    if mode is Capitalization.RANDOM:
        return [capitalize(w) if coin(source) else w for w in picked]
    return list(picked)


def generate_memorable(request: MemorableRequest, source: RandomSource, words: WordPool) -> str:
    parts = _capitalize(
        _pick_words(request.word_count, source, words), request.capitalization, source
    )
    if request.include_numbers:
        number = digits(source, 2)
        position = request.number_position
        if position is NumberPosition.BETWEEN:
            parts.insert(source.next_below(len(parts) - 1) + 1, number)
        elif position is NumberPosition.RANDOM and coin(source):
            parts.insert(0, number)
        else:
            parts.append(number)
    return request.separator.join(parts)
