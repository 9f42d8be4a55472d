import pytest

from passcraft.random_source import FixedRandomSource
from passcraft.suggestions import strength_description, strength_label, suggest_improvements


@pytest.mark.parametrize("score,ptype,label", [
    (35, "pin", "Strong PIN"),
    (34, "pin", "Good PIN"),
    (14, "pin", "Weak PIN"),
    (70, "memorable", "Very Memorable & Secure"),
    (45, "smart", "Fair Smart Password"),
    (80, "uniform", "Very Strong"),
    (0, "uniform", "Weak"),
])
def test_labels(score, ptype, label):
    assert strength_label(score, ptype) == label


def test_description():
    assert "PIN" in strength_description(40, "pin")


def test_suggest_for_sequential_pin():
    s = suggest_improvements("1234", "pin")
    joined = " ".join(s["suggestions"]).lower()
    assert "digit runs" in joined
    assert s["label"] == "Weak PIN"
    assert len(s["examples"]) == 1
    assert s["examples"][0].isdigit() and len(s["examples"][0]) == 6


def test_suggest_for_repeats():
    s = suggest_improvements("aaa", "uniform")
    assert s["suggestions"][0].startswith("Break up runs")
    assert s["examples"][0] != "aaa"


def test_examples_use_given_source():
    a = suggest_improvements("weak", "smart", examples=2, source=FixedRandomSource([5, 2, 7]))
    b = suggest_improvements("weak", "smart", examples=2, source=FixedRandomSource([5, 2, 7]))
    assert a["examples"] == b["examples"]
    assert len(a["examples"]) == 2
