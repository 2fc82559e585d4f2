import io

import pytest

from philo.params import Params
from philo.table import Table


def make_table(num=2, die=400, eat=60, sleep=60, meals=-1):
    out = io.StringIO()
    return Table(Params(num, die, eat, sleep, meals), out), out


def test_forks_are_shared_between_neighbours():
    table, _ = make_table(num=5)
    for pos, phil in enumerate(table.philosophers):
        neighbour = table.philosophers[(pos + 1) % 5]
        assert phil.left is neighbour.right
        assert phil.right is table.forks[pos]


def test_single_philosopher_has_one_fork_on_both_sides():
    table, _ = make_table(num=1)
    phil = table.philosophers[0]
    assert phil.left is phil.right


def test_take_fork_marks_fork_used_and_reports():
    table, out = make_table()
    phil = table.philosophers[0]
    phil.take_fork("l")
    assert phil.taken["l"] is True
    assert phil.left.used is True
    assert "0 " in out.getvalue()
    assert "has taken a fork" in out.getvalue()


def test_take_fork_fails_when_neighbour_holds_it():
    table, out = make_table()
    first, second = table.philosophers
    first.take_fork("l")
    second.take_fork("r")
    assert second.taken["r"] is False
    assert out.getvalue().count("has taken a fork") == 1


def test_release_fork_frees_it():
    table, _ = make_table()
    phil = table.philosophers[0]
    phil.take_fork("r")
    phil.release_fork("r")
    assert phil.taken["r"] is False
    assert phil.right.used is False


def test_take_fork_does_nothing_when_stopped():
    table, out = make_table()
    table.stop()
    phil = table.philosophers[0]
    phil.take_fork("l")
    assert phil.taken["l"] is False
    assert out.getvalue() == ""


def test_unknown_side_rejected():
    table, _ = make_table()
    with pytest.raises(ValueError):
        table.philosophers[0].take_fork("x")


def test_write_state_format():
    table, out = make_table()
    table.write_state(table.philosophers[1], "is thinking")
    text = out.getvalue()
    assert text.endswith("\n")
    assert text.count("\n") == 1
    stamp, pos, message = text.rstrip("\n").split(" ", 2)
    assert stamp.isdigit()
    assert len(stamp) >= 3
    assert pos == "1"
    assert message == "is thinking"


def test_write_state_silent_after_stop():
    table, out = make_table()
    table.stop()
    table.write_state(table.philosophers[0], "is eating")
    assert out.getvalue() == ""


def test_check_death_threshold():
    table, out = make_table(die=400)
    phil = table.philosophers[0]
    assert table.check_death(phil, 400) is False
    assert table.is_dead() is False
    assert table.check_death(phil, 401) is True
    assert table.is_dead() is True
    assert "401 0 died" in out.getvalue()


def test_all_have_eaten_with_limit():
    table, _ = make_table(meals=2)
    first, second = table.philosophers
    first.meal_count = 2
    assert table.all_have_eaten() is False
    second.meal_count = 3
    assert table.all_have_eaten() is True


def test_all_have_eaten_without_limit():
    table, _ = make_table(meals=-1)
    assert table.all_have_eaten() is True


def test_run_single_philosopher_dies():
    table, out = make_table(num=1, die=60, eat=60, sleep=60)
    table.run()
    text = out.getvalue()
    assert table.is_dead() is True
    assert text.count("has taken a fork") == 1
    assert "0 died" in text
    assert "is eating" not in text


def test_run_stops_after_meal_limit():
    table, out = make_table(num=4, die=400, eat=60, sleep=60, meals=2)
    table.run()
    text = out.getvalue()
    assert "died" not in text
    assert table.is_dead() is True
    assert all(p.meal_count >= 2 for p in table.philosophers)
    assert text.count("is eating") >= 8


def test_run_releases_all_forks_when_done():
    table, _ = make_table(num=4, die=400, eat=60, sleep=60, meals=1)
    table.run()
    assert not any(fork.used for fork in table.forks)