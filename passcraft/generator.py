"""
passcraft.generator
Uniform-random password generator and the type dispatcher.
"""

from typing import List, Optional

from loguru import logger

from .charset import build_character_set
from .errors import InvalidRequest
from .memorable import generate_memorable
from .models import (
    MemorableRequest,
    PasswordRequest,
    PinRequest,
    SmartRequest,
    UniformRequest,
)
from .pin import generate_pin
from .random_source import RandomSource, SystemRandomSource, sample_chars, shuffle
from .smart import generate_smart
from .wordlists import DEFAULT_WORD_POOL, WordPool


def generate_uniform(request: UniformRequest, source: RandomSource) -> str:
    """
    Generate a password of exactly `request.length` characters.

    Every selected class contributes at least one character, or
    min(min_per_class, length) when a minimum is set. Required characters
    and filler are shuffled together, then cut to length.
    """
    charset = build_character_set(
        lower=request.lower,
        upper=request.upper,
        digits=request.digits,
        symbols=request.symbols,
        custom_symbols=request.custom_symbols,
        exclude_similar=request.exclude_similar,
        exclude_ambiguous=request.exclude_ambiguous,
    )
    length = request.length

    password_chars: List[str] = []
    for cls, pool in charset.classes.items():
        if not pool:
            logger.debug("character class {} is empty after exclusion, skipping", cls.value)
            continue
        minimum = request.min_per_class.get(cls, 0)
        count = min(minimum, length) if minimum > 0 else 1
        password_chars.extend(sample_chars(source, pool, count))

    remaining = max(0, length - len(password_chars))
    password_chars.extend(sample_chars(source, charset.alphabet, remaining))

    shuffle(source, password_chars)
    return "".join(password_chars[:length])


def generate(
    request: PasswordRequest,
    source: Optional[RandomSource] = None,
    words: Optional[WordPool] = None,
) -> str:
    """
    Generate one password for `request`.

    Each call is independent: nothing about the result is kept. Raises a
    GenerationError subclass on failure.
    """
    source = source or SystemRandomSource()
    words = words if words is not None else DEFAULT_WORD_POOL

    if isinstance(request, UniformRequest):
        return generate_uniform(request, source)
    if isinstance(request, PinRequest):
        return generate_pin(request, source)
    if isinstance(request, MemorableRequest):
        return generate_memorable(request, source, words)
    if isinstance(request, SmartRequest):
        return generate_smart(request, source, words)
    raise InvalidRequest(f"unsupported request type: {type(request).__name__}")
