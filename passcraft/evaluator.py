"""
passcraft.evaluator

Type-aware strength heuristic:
- score_password(password, type): integer 0-100
- evaluate_password(password, type): score plus the detections behind it
- detect_*: the individual pattern checks (repeats, common sequences,
  smart-shape, separators, PIN sequences)
"""

import re
from typing import Dict, List, Tuple

from .errors import InvalidRequest
from .models import PasswordType, password_type_of
from .pin import CANONICAL_SEQUENCES

# per-type base: (points per character, cap)
BASE_SCALE: Dict[PasswordType, Tuple[int, int]] = {
    PasswordType.PIN: (8, 40),
    PasswordType.MEMORABLE: (3, 60),
    PasswordType.SMART: (4, 70),
    PasswordType.UNIFORM: (5, 80),
}

CLASS_POINTS = 5
# (minimum length, bonus), cumulative
LENGTH_TIERS = ((12, 10), (16, 10), (20, 5))

REPEAT_PENALTY = 10
COMMON_SEQUENCE_PENALTY = 5
SMART_SHAPE_BONUS = 15
SEPARATOR_BONUS = 10
PIN_REPEAT_PENALTY = 15
PIN_SEQUENCE_PENALTY = 20

_CLASS_PATTERNS = {
    "lower": re.compile(r"[a-z]"),
    "upper": re.compile(r"[A-Z]"),
    "digit": re.compile(r"[0-9]"),
    "symbol": re.compile(r"[^a-zA-Z0-9\s]"),
}
_REPEAT_RE = re.compile(r"(.)\1{2,}")
_DIGIT_REPEAT_RE = re.compile(r"(\d)\1{2,}")
_COMMON_RE = re.compile(r"123|abc|qwe", re.IGNORECASE)
_SMART_SHAPE_RE = re.compile(r"[A-Z][a-z]+[A-Z][a-z]+\d+[!@#$%^&*]")
# any separator a memorable password may be built with, not just the default "-"
_SEPARATOR_RE = re.compile(r"[^a-zA-Z0-9]")


def detect_classes(password: str) -> List[str]:
    return [name for name, pattern in _CLASS_PATTERNS.items() if pattern.search(password)]


def detect_repeated_run(password: str) -> List[str]:
    """Runs of 3+ identical adjacent characters."""
    return [m.group(0) for m in _REPEAT_RE.finditer(password)]


def detect_common_sequences(password: str) -> List[str]:
    return [m.group(0) for m in _COMMON_RE.finditer(password)]


def detect_smart_shape(password: str) -> bool:
    """CapitalizedWordCapitalizedWord + digits + symbol."""
    return _SMART_SHAPE_RE.search(password) is not None


def detect_separator(password: str) -> bool:
    """Any character other than an ASCII letter or digit."""
    return _SEPARATOR_RE.search(password) is not None


def detect_pin_sequences(password: str) -> List[str]:
    return [seq for seq in CANONICAL_SEQUENCES if seq in password]


def evaluate_password(password: str, password_type) -> Dict:
    """
    Score `password` as a `password_type` password.

    Returns a dict:
    {
        "score": int,  # 0..100
        "type": str,
        "base": int,
        "classes": [str],
        "explanations": [str]
    }
    """
    ptype = password_type_of(password_type)
    if not isinstance(password, str):
        raise InvalidRequest("password must be a string")
    explanations: List[str] = []
    if not password:
        return {"score": 0, "type": ptype.value, "base": 0, "classes": [], "explanations": ["Empty password."]}

    length = len(password)
    per_char, cap = BASE_SCALE[ptype]
    base = min(length * per_char, cap)
    score = base

    classes = detect_classes(password)
    score += len(classes) * CLASS_POINTS

    for min_length, bonus in LENGTH_TIERS:
        if length >= min_length:
            score += bonus
            explanations.append(f"Length {min_length}+ bonus (+{bonus}).")

    repeats = detect_repeated_run(password)
    if repeats:
        score -= REPEAT_PENALTY
        explanations.append(f"Repeated characters: {', '.join(repeats)}")

    common = detect_common_sequences(password)
    if common:
        score -= COMMON_SEQUENCE_PENALTY
        explanations.append(f"Common sequence(s): {', '.join(common)}")

    if ptype is PasswordType.SMART and detect_smart_shape(password):
        score += SMART_SHAPE_BONUS
        explanations.append("Follows the word-word-number-symbol pattern.")
    elif ptype is PasswordType.MEMORABLE and detect_separator(password):
        score += SEPARATOR_BONUS
        explanations.append("Words are separated.")
    elif ptype is PasswordType.PIN:
        if _DIGIT_REPEAT_RE.search(password):
            score -= PIN_REPEAT_PENALTY
            explanations.append("PIN repeats a digit three or more times in a row.")
        sequences = detect_pin_sequences(password)
        if sequences:
            score -= PIN_SEQUENCE_PENALTY
            explanations.append(f"PIN contains a digit sequence: {', '.join(sequences)}")

    return {
        "score": max(0, min(100, score)),
        "type": ptype.value,
        "base": base,
        "classes": classes,
        "explanations": explanations,
    }


def score_password(password: str, password_type) -> int:
    """0-100 strength for `password` judged as `password_type`. Empty scores 0."""
    return evaluate_password(password, password_type)["score"]
