import io
import time

import pytest

from dining.parser import Settings
from dining.table import Table, now_ms


def make_table(count=3):
    out = io.StringIO()
    return Table(Settings(count, 800, 200, 200), out), out


def test_now_ms_matches_wall_clock():
    before = time.time() * 1000
    value = now_ms()
    after = time.time() * 1000
    assert before - 1 <= value <= after + 1


def test_philosophers_numbered_from_one():
    table, _ = make_table(4)
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4]


def test_neighbours_share_forks():
    table, _ = make_table(5)
    philos = table.philosophers
    for current, following in zip(philos, philos[1:] + philos[:1]):
        assert current.right_fork is following.left_fork
    assert all(p.left_fork is table.forks[p.id - 1] for p in philos)


def test_single_philosopher_has_one_fork():
    table, _ = make_table(1)
    philo = table.philosophers[0]
    assert philo.left_fork is philo.right_fork


def test_initial_meal_state():
    table, _ = make_table()
    for philo in table.philosophers:
        assert philo.last_meal == table.start_time
        assert philo.meals() == 0
        assert philo.eating is False


def test_meal_cycle_counts():
    table, _ = make_table()
    philo = table.philosophers[0]
    philo.start_meal()
    assert philo.eating is True
    assert philo.last_meal >= table.start_time
    philo.finish_meal()
    philo.start_meal()
    philo.finish_meal()
    assert philo.meals() == 2
    assert philo.eating is False


def test_time_since_meal_grows():
    table, _ = make_table()
    philo = table.philosophers[0]
    philo.start_meal()
    first = philo.time_since_meal()
    time.sleep(0.02)
    assert philo.time_since_meal() >= first + 15


def test_stop_only_once():
    table, _ = make_table()
    assert table.is_over() is False
    assert table.stop() is True
    assert table.stop() is False
    assert table.is_over() is True


def test_print_action_format():
    table, out = make_table()
    table.print_action(table.philosophers[1], "is eating")
    stamp, ident, action = out.getvalue().rstrip("\n").split(" ", 2)
    assert ident == "2"
    assert action == "is eating"
    assert 0 <= int(stamp) <= table.elapsed()


def test_print_action_silent_after_stop():
    table, out = make_table()
    table.stop()
    table.print_action(table.philosophers[0], "is thinking")
    assert out.getvalue() == ""


def test_print_death_after_stop():
    table, out = make_table()
    table.stop()
    table.print_death(3)
    assert out.getvalue().endswith(" 3 died\n")


@pytest.mark.parametrize("count", [1, 2, 200])
def test_fork_count_matches(count):
    table, _ = make_table(count)
    assert len(table.forks) == count
    assert len(table.philosophers) == count


def test_elapsed_non_negative():
    table, _ = make_table()
    assert table.elapsed() >= 0