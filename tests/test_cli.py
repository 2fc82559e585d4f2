from philo.cli import main
from philo.params import LIMITS_MESSAGE, USAGE


def test_wrong_argument_count_prints_usage(capsys):
    assert main([]) == 1
    assert USAGE in capsys.readouterr().out


def test_limits_violation(capsys):
    assert main(["0", "60", "60", "60"]) == 1
    assert LIMITS_MESSAGE in capsys.readouterr().out


def test_negative_value(capsys):
    assert main(["5", "-1", "60", "60"]) == 1
    assert "Only positive values allowed" in capsys.readouterr().out


def test_invalid_characters(capsys):
    assert main(["5", "60", "6x", "60"]) == 1
    assert "Invalid characters in input" in capsys.readouterr().out


def test_single_philosopher_run(capsys):
    assert main(["1", "60", "60", "60"]) == 0
    out = capsys.readouterr().out
    assert "0 died" in out
    assert "has taken a fork" in out


def test_meal_limit_run(capsys):
    assert main(["2", "400", "60", "60", "1"]) == 0
    out = capsys.readouterr().out
    assert "died" not in out
    assert out.count("is eating") >= 2