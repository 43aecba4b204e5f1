import io

from dinesim.config import Settings
from dinesim.table import Table, run_single


def _lines(out):
    return [line.split(" ", 2) for line in out.getvalue().splitlines()]


def test_run_single_output():
    out = io.StringIO()
    run_single(Settings(1, 10, 5, 5), out)
    assert out.getvalue() == "0 1 has taken a fork\n10 1 died\n"


def test_table_run_with_single_philosopher_reports_death():
    out = io.StringIO()
    table = Table(Settings(1, 10, 5, 5), out)
    victim = table.run()
    assert victim.id == 1
    assert out.getvalue().endswith("1 died\n")
    assert table.check_stop()


def test_fork_indices_wrap_around():
    table = Table(Settings(4, 100, 10, 10), io.StringIO())
    last = table.philosophers[-1]
    assert (last.left, last.right) == (3, 0)
    first = table.philosophers[0]
    assert (first.left, first.right) == (0, 1)


def test_take_and_release_forks():
    out = io.StringIO()
    table = Table(Settings(3, 1000, 10, 10), out)
    philosopher = table.philosophers[1]
    philosopher.take_forks()
    assert table.forks[1].locked() and table.forks[2].locked()
    assert not table.forks[0].locked()
    assert out.getvalue().count("2 has taken a fork") == 2
    philosopher.release_forks()
    assert not any(fork.locked() for fork in table.forks)


def test_eat_updates_meal_state():
    out = io.StringIO()
    table = Table(Settings(2, 1000, 5, 5), out)
    philosopher = table.philosophers[0]
    philosopher.eat()
    assert philosopher.meals_eaten == 1
    assert philosopher.last_meal_time >= table.start_time
    assert "1 is eating" in out.getvalue()
    assert not any(fork.locked() for fork in table.forks)


def test_think_and_sleep_print_status():
    out = io.StringIO()
    table = Table(Settings(2, 1000, 5, 5), out)
    philosopher = table.philosophers[1]
    philosopher.think()
    philosopher.sleep()
    actions = [parts[1:] for parts in _lines(out)]
    assert actions == [["2", "is thinking"], ["2", "is sleeping"]]


def test_print_status_is_silent_after_stop():
    out = io.StringIO()
    table = Table(Settings(2, 1000, 5, 5), out)
    table.set_stop()
    table.print_status(table.philosophers[0], "is thinking")
    assert out.getvalue() == ""


def test_check_all_done_sets_stop_only_when_everyone_ate():
    table = Table(Settings(3, 1000, 5, 5, 2), io.StringIO())
    for philosopher in table.philosophers[:-1]:
        philosopher.meals_eaten = 2
    table.check_all_done()
    assert not table.check_stop()
    table.philosophers[-1].meals_eaten = 2
    table.check_all_done()
    assert table.check_stop()


def test_check_all_done_without_target_never_stops():
    table = Table(Settings(2, 1000, 5, 5), io.StringIO())
    for philosopher in table.philosophers:
        philosopher.meals_eaten = 100
    table.check_all_done()
    assert not table.check_stop()


def test_run_until_meal_target():
    out = io.StringIO()
    table = Table(Settings(3, 1000, 10, 10, 2), out)
    victim = table.run()
    assert victim is None
    assert all(p.meals_eaten >= 2 for p in table.philosophers)
    assert "died" not in out.getvalue()
    assert not any(fork.locked() for fork in table.forks)


def test_run_reports_starvation():
    out = io.StringIO()
    table = Table(Settings(3, 60, 200, 50), out)
    victim = table.run()
    lines = _lines(out)
    deaths = [parts for parts in lines if parts[2] == "died"]
    assert len(deaths) == 1
    assert int(deaths[0][1]) == victim.id
    assert table.check_stop()


def test_timestamps_never_decrease():
    out = io.StringIO()
    Table(Settings(4, 1000, 10, 10, 3), out).run()
    stamps = [int(parts[0]) for parts in _lines(out)]
    assert stamps
    assert stamps == sorted(stamps)
    assert stamps[0] >= 0


def test_monitor_returns_none_when_already_stopped():
    table = Table(Settings(2, 1, 5, 5), io.StringIO())
    table.set_stop()
    assert table.monitor() is None