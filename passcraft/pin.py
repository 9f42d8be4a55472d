"""
passcraft.pin
PIN generator with bounded retry for the repeat/sequence constraints.
"""

import re
import string
from typing import Tuple

from loguru import logger

from .errors import ConstraintUnsatisfiable, NoAvailableDigits
from .models import PinRequest
from .random_source import RandomSource, choice

MAX_ATTEMPTS = 50
MAX_DIGIT_ATTEMPTS = 20

_ASCENDING = tuple(string.digits[i:i + 4] for i in range(7))
CANONICAL_SEQUENCES: Tuple[str, ...] = _ASCENDING + tuple(s[::-1] for s in reversed(_ASCENDING))

_REPEAT_RE = re.compile(r"(\d)\1")


def has_repeat(pin: str) -> bool:
    """Two or more identical adjacent digits."""
    return _REPEAT_RE.search(pin) is not None


def has_sequence(pin: str) -> bool:
    """A canonical 4-digit run, or any ascending 3-digit run."""
    if any(seq in pin for seq in CANONICAL_SEQUENCES):
        return True
    for i in range(2, len(pin)):
        a, b, c = (int(d) for d in pin[i - 2:i + 1])
        if a + 1 == b and b + 1 == c:
            return True
    return False


def available_digits(request: PinRequest) -> str:
    digits = "".join(d for d in string.digits if d not in request.exclude_digits)
    if digits:
        return digits
    if request.strict:
        raise NoAvailableDigits()
    logger.warning("all digits excluded, falling back to 0-9")
    return string.digits


def _violates(pin: str, request: PinRequest) -> bool:
    if request.no_repeats and has_repeat(pin):
        return True
    if request.no_sequence and has_sequence(pin):
        return True
    return False


def _candidate(request: PinRequest, digits: str, source: RandomSource) -> str:
    pin = []
    for _ in range(request.length):
        digit = choice(source, digits)
        attempts = 1
        while (
            request.no_repeats
            and pin
            and digit == pin[-1]
            and len(digits) > 1
            and attempts < MAX_DIGIT_ATTEMPTS
        ):
            digit = choice(source, digits)
            attempts += 1
        pin.append(digit)
    return "".join(pin)


def generate_pin(request: PinRequest, source: RandomSource) -> str:
    """
    Build up to MAX_ATTEMPTS candidates and return the first that satisfies
    the request. When none does, return the last one (best-effort) or, for a
    strict request, raise ConstraintUnsatisfiable.
    """
    digits = available_digits(request)
    pin = ""
    for attempt in range(1, MAX_ATTEMPTS + 1):
        pin = _candidate(request, digits, source)
        if not _violates(pin, request):
            if attempt > 1:
                logger.debug("pin accepted after {} attempts", attempt)
            return pin

    if request.strict:
        raise ConstraintUnsatisfiable(
            f"no PIN satisfying the constraints found in {MAX_ATTEMPTS} attempts"
        )
    logger.warning("pin constraints not met after {} attempts, returning best effort", MAX_ATTEMPTS)
    return pin
