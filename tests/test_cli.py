import pytest

from passcraft.cli import main


def test_generate_pin(capsys):
    assert main(["generate", "--copies", "2", "pin", "--length", "8", "--no-repeats"]) == 0
    out = capsys.readouterr().out
    assert "Password #1:" in out
    assert "Password #2:" in out


def test_generate_memorable(capsys):
    assert main(["generate", "memorable", "--words", "2", "--separator", "_"]) == 0
    assert "Password #1:" in capsys.readouterr().out


def test_generate_error_exit_code(capsys):
    code = main(["generate", "uniform", "--no-lower", "--no-upper", "--no-digits", "--no-symbols"])
    assert code == 2
    assert "NoCharacterClassSelected" in capsys.readouterr().out


def test_invalid_length_exit_code(capsys):
    assert main(["generate", "pin", "--length", "2"]) == 2
    assert "InvalidRequest" in capsys.readouterr().out


def test_score(capsys):
    assert main(["score", "1234", "--type", "pin"]) == 0
    out = capsys.readouterr().out
    assert "Score:" in out
    assert "Weak PIN" in out


def test_config_reset_and_show(capsys, isolated_config):
    assert main(["config", "reset"]) == 0
    assert isolated_config.exists()
    assert main(["config", "show"]) == 0
    assert '"word_count": 3' in capsys.readouterr().out


def _first_password(out):
    return out.split("Password #1:")[1].split("  (")[0].strip()


def test_uniform_min_digits(capsys):
    assert main(["generate", "uniform", "--length", "10", "--min-digits", "6"]) == 0
    pw = _first_password(capsys.readouterr().out)
    assert len(pw) == 10
    assert sum(c.isdigit() for c in pw) >= 6


def test_uniform_negative_minimum(capsys):
    assert main(["generate", "uniform", "--min-symbols", "-1"]) == 2
    assert "InvalidRequest" in capsys.readouterr().out


@pytest.mark.parametrize("copies", ["0", "-3"])
def test_copies_must_be_positive(capsys, copies):
    with pytest.raises(SystemExit) as exc:
        main(["generate", "--copies", copies, "pin"])
    assert exc.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err
