import io
import re

from dining.parsing import Settings
from dining.table import Table

LINE = re.compile(
    r"^(\d+) (\d+) (has taken a fork|is eating|is sleeping|is thinking|is dead)$"
)


def _lines(buffer):
    return buffer.getvalue().splitlines()


def test_forks_are_shared_between_neighbours():
    table = Table(Settings(4, 410, 200, 200), io.StringIO())
    philos = table.philosophers
    assert [p.id for p in philos] == [1, 2, 3, 4]
    assert philos[0].left_fork is table.forks[0]
    assert philos[0].right_fork is table.forks[1]
    assert philos[3].right_fork is table.forks[0]
    assert philos[1].left_fork is philos[0].right_fork


def test_single_philosopher_has_one_fork():
    table = Table(Settings(1, 100, 50, 50), io.StringIO())
    assert len(table.philosophers) == 1
    assert table.philosophers[0].right_fork is None


def test_single_philosopher_dies():
    out = io.StringIO()
    died = Table(Settings(1, 50, 20, 20), out).run()
    lines = _lines(out)
    assert died is True
    assert lines[0].endswith("1 has taken a fork")
    assert lines[-1].endswith("1 is dead")
    assert sum(line.endswith("is dead") for line in lines) == 1


def test_starvation_ends_simulation():
    out = io.StringIO()
    died = Table(Settings(4, 30, 100, 100), out).run()
    lines = _lines(out)
    assert died is True
    assert lines[-1].endswith("is dead")
    assert sum(line.endswith("is dead") for line in lines) == 1


def test_meal_limit_ends_without_death():
    out = io.StringIO()
    table = Table(Settings(4, 1000, 20, 20, 3), out)
    died = table.run()
    lines = _lines(out)
    assert died is False
    assert all(not line.endswith("is dead") for line in lines)
    assert all(p.meals_eaten >= 3 for p in table.philosophers)
    for philo_id in range(1, 5):
        eats = [l for l in lines if l.endswith(f" {philo_id} is eating")]
        assert len(eats) >= 3


def test_output_format_and_timestamps():
    out = io.StringIO()
    Table(Settings(3, 1000, 10, 10, 2), out).run()
    lines = _lines(out)
    assert lines
    stamps = []
    for line in lines:
        match = LINE.match(line)
        assert match is not None
        assert 1 <= int(match.group(2)) <= 3
        stamps.append(int(match.group(1)))
    assert stamps == sorted(stamps)


def test_eating_preceded_by_two_forks():
    out = io.StringIO()
    Table(Settings(2, 1000, 10, 10, 2), out).run()
    lines = _lines(out)
    for philo_id in (1, 2):
        own = [l.split(" ", 2)[2] for l in lines if l.split(" ")[1] == str(philo_id)]
        for index, action in enumerate(own):
            if action == "is eating":
                assert own[index - 2 : index] == ["has taken a fork"] * 2


def test_print_status_silent_after_finish():
    out = io.StringIO()
    table = Table(Settings(2, 100, 10, 10), out)
    assert table.print_status("is thinking", 1) is True
    table.finished.set()
    assert table.print_status("is thinking", 2) is False
    assert len(_lines(out)) == 1


def test_zero_meal_limit_finishes_immediately():
    out = io.StringIO()
    died = Table(Settings(2, 1000, 10, 10, 0), out).run()
    assert died is False
    assert "is dead" not in out.getvalue()