import pytest

from passcraft.errors import InvalidRequest
from passcraft.evaluator import (
    detect_classes,
    detect_common_sequences,
    detect_pin_sequences,
    detect_repeated_run,
    detect_separator,
    detect_smart_shape,
    evaluate_password,
    score_password,
)
from passcraft.models import PasswordType

ALL_TYPES = [t.value for t in PasswordType]


@pytest.mark.parametrize("ptype", ALL_TYPES)
def test_empty_scores_zero(ptype):
    assert score_password("", ptype) == 0


@pytest.mark.parametrize("password,ptype,expected", [
    ("aB3$", "uniform", 40),
    ("1234", "pin", 12),
    ("0000", "pin", 12),
    ("Brave-tower-42", "memorable", 82),
    ("BraveTower123!", "smart", 96),
    ("X7f!9Lq@2Vb#tR4sYp&k", "uniform", 100),
])
def test_known_scores(password, ptype, expected):
    assert score_password(password, ptype) == expected


@pytest.mark.parametrize("ptype", ALL_TYPES)
def test_monotonic_in_length(ptype):
    source = "Xk9#mP2$vL5&wR8*tN4!"
    scores = [score_password(source[:n], ptype) for n in range(4, len(source) + 1)]
    assert scores == sorted(scores)


def test_type_caps_differ():
    pw = "Ab3$" * 3
    assert score_password(pw, PasswordType.UNIFORM) > score_password(pw, PasswordType.MEMORABLE)


def test_score_is_clamped():
    for pw in ("aaaa", "a", "!!!!!!", "1111", "x" * 500):
        for ptype in ALL_TYPES:
            assert 0 <= score_password(pw, ptype) <= 100


def test_detections():
    assert detect_classes("aB3$") == ["lower", "upper", "digit", "symbol"]
    assert detect_classes("ab cd") == ["lower"]
    assert detect_repeated_run("xaaay") == ["aaa"]
    assert detect_common_sequences("xxQWEyy") == ["QWE"]
    assert detect_smart_shape("BraveTower123!")
    assert not detect_smart_shape("bravetower123!")
    assert detect_separator("brave_tower")
    assert detect_pin_sequences("99876") == ["9876"]


def test_evaluate_explanations():
    result = evaluate_password("1111", "pin")
    assert result["type"] == "pin"
    assert result["classes"] == ["digit"]
    assert any("three or more" in e for e in result["explanations"])


def test_unknown_type():
    with pytest.raises(InvalidRequest):
        score_password("abc", "random")


@pytest.mark.parametrize("password", ["Brave-tower-42", "Brave+tower+42", "Brave/tower/42", "Brave~tower~42"])
def test_any_separator_gets_memorable_bonus(password):
    assert detect_separator(password)
    assert score_password(password, "memorable") == 82


def test_no_separator_in_plain_words():
    assert not detect_separator("BraveTower42")


def test_non_string_password():
    with pytest.raises(InvalidRequest):
        evaluate_password(123, "uniform")
