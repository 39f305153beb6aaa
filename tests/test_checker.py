import io

import pytest

from pushswap.checker import CommandError, main, read_lines, run_commands
from pushswap.sorting import solve


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("sa\n", ["sa"]),
        ("sa", ["sa"]),
        ("sa\npb\n", ["sa", "pb"]),
        ("sa\n\n", ["sa", ""]),
    ],
)
def test_read_lines(text, expected):
    assert list(read_lines(io.StringIO(text))) == expected


def test_run_commands_sorts():
    stacks = run_commands([2, 1], ["sa"])
    assert stacks.values() == [1, 2]


def test_run_commands_unknown_raises():
    with pytest.raises(CommandError) as info:
        run_commands([2, 1], ["sa", "xx"])
    assert info.value.line == "xx"


def test_run_commands_rejects_trailing_space():
    with pytest.raises(CommandError):
        run_commands([2, 1], ["sa "])


def test_paired_operation_acts_on_one_stack():
    stacks = run_commands([2, 1], ["ss"])
    assert stacks.values() == [1, 2]


def test_push_round_trip():
    stacks = run_commands([3, 1, 2], ["pb", "pb", "pa", "pa"])
    assert stacks.values() == [3, 1, 2]
    assert stacks.b == []


def test_solution_is_accepted():
    values = [8, 2, 6, 4, 0, 9, 1]
    lines = [op.value for op in solve(values)]
    assert run_commands(values, lines).is_sorted()


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "KO\n\n"


def test_main_bad_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nnope\n"))
    assert main(["2", "1"]) == -1
    assert capsys.readouterr().out == "Error\n"


def test_main_bad_argument(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2", "2"]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""