"""
passcraft.suggestions

Turn a strength score into a per-type label and description, and produce
concrete suggestions plus example replacement passwords of the same type.
"""

from typing import Dict, List, Optional, Tuple

from .evaluator import evaluate_password
from .generator import generate
from .models import REQUEST_TYPES, PasswordType, password_type_of
from .random_source import RandomSource

# thresholds high -> low, each paired with (label, description); last entry is the floor
_TIERS: Dict[PasswordType, List[Tuple[int, str, str]]] = {
    PasswordType.PIN: [
        (35, "Strong PIN", "This PIN avoids common patterns and is sufficiently long"),
        (25, "Good PIN", "This PIN is reasonably secure for most uses"),
        (15, "Fair PIN", "Consider using a longer PIN or avoiding simple patterns"),
        (0, "Weak PIN", "This PIN may be easily guessed - use a longer, more random PIN"),
    ],
    PasswordType.MEMORABLE: [
        (70, "Very Memorable & Secure", "Great balance of memorability and security with good word variety"),
        (55, "Good & Memorable", "Good memorable password with decent complexity"),
        (40, "Fair & Memorable", "Memorable but could benefit from more words or numbers"),
        (0, "Weak but Memorable", "Easy to remember but consider adding more complexity"),
    ],
    PasswordType.SMART: [
        (75, "Excellent Smart Password", "Excellent pattern-based password with good entropy"),
        (60, "Good Smart Password", "Good smart password following secure patterns"),
        (45, "Fair Smart Password", "Decent smart password, could be more complex"),
        (0, "Weak Smart Password", "Smart pattern but needs more complexity"),
    ],
    PasswordType.UNIFORM: [
        (80, "Very Strong", "Excellent random password with high entropy"),
        (60, "Strong", "Strong random password suitable for sensitive accounts"),
        (40, "Fair", "Adequate for most purposes, consider longer length"),
        (0, "Weak", "Too weak - increase length or add more character types"),
    ],
}


def _tier(score: int, password_type) -> Tuple[int, str, str]:
    tiers = _TIERS[password_type_of(password_type)]
    for tier in tiers:
        if score >= tier[0]:
            return tier
    return tiers[-1]


def strength_label(score: int, password_type) -> str:
    return _tier(score, password_type)[1]


def strength_description(score: int, password_type) -> str:
    return _tier(score, password_type)[2]


def suggest_improvements(
    password: str,
    password_type,
    examples: int = 1,
    source: Optional[RandomSource] = None,
) -> Dict:
    """
    Return a suggestion object derived from the evaluator:
    {
        "score": int,
        "label": str,
        "description": str,
        "suggestions": [str],  # human-readable, most important first
        "examples": [str]      # freshly generated passwords of the same type
    }
    """
    ptype = password_type_of(password_type)
    result = evaluate_password(password, ptype)
    score = result["score"]
    suggestions: List[str] = []

    if any(e.startswith("Repeated") for e in result["explanations"]):
        suggestions.append("Break up runs of the same character.")
    if any(e.startswith("Common sequence") for e in result["explanations"]):
        suggestions.append("Avoid predictable sequences such as '123', 'abc' or 'qwe'.")
    if ptype is PasswordType.PIN:
        if any("digit sequence" in e for e in result["explanations"]):
            suggestions.append("Avoid ascending or descending digit runs like '1234'.")
        if len(password) < 8:
            suggestions.append("Use a PIN of 8 or more digits where the system allows it.")
    elif ptype is PasswordType.MEMORABLE and len(result["classes"]) < 3:
        suggestions.append("Add a number or capitalize some words.")
    elif ptype is PasswordType.SMART and "symbol" not in result["classes"]:
        suggestions.append("Include symbols or raise the complexity level.")
    elif ptype is PasswordType.UNIFORM:
        if len(password) < 16:
            suggestions.append("Use at least 16 characters.")
        if len(result["classes"]) < 4:
            suggestions.append("Mix lowercase, uppercase, digits and symbols.")

    if not suggestions:
        suggestions.append("No obvious weaknesses detected.")

    request = REQUEST_TYPES[ptype]()
    return {
        "score": score,
        "label": strength_label(score, ptype),
        "description": strength_description(score, ptype),
        "suggestions": suggestions,
        "examples": [generate(request, source) for _ in range(examples)],
    }
