import io

import pytest

from gigiquant import markov, returns, stacks
from gigiquant.cli import main, run, task_for_path


@pytest.mark.parametrize(
    "path,task",
    [
        ("data1.in", 1),
        ("in/data5.in", 1),
        ("data6.in", 2),
        ("x/data10.in", 2),
        ("data11.in", 3),
        ("data16.in", 4),
        ("data20.in", 4),
    ],
)
def test_task_for_path(path, task):
    assert task_for_path(path) == task


def test_task_for_unknown_path():
    assert task_for_path("prices.txt") is None


def _expected(solver, text):
    sink = io.StringIO()
    solver(io.StringIO(text), sink)
    return sink.getvalue()


def test_run_task_one(tmp_path):
    text = "4\n100\n110\n99\n120\n"
    source = tmp_path / "data2.in"
    source.write_text(text)
    target = tmp_path / "out.txt"
    run(str(source), str(target))
    assert target.read_text() == _expected(returns.solve, text)


def test_run_task_two(tmp_path):
    text = "A\n1\n2\nB\n1\n3\nC\n1\n2\n"
    source = tmp_path / "data8.in"
    source.write_text(text)
    target = tmp_path / "out.txt"
    run(str(source), str(target))
    assert target.read_text() == _expected(stacks.solve, text)


def test_run_task_four(tmp_path):
    text = "4\n1\n3\n1\n2\n1 2 1 2\n"
    source = tmp_path / "data17.in"
    source.write_text(text)
    target = tmp_path / "out.txt"
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == _expected(markov.solve, text)


def test_run_unknown_task_writes_empty_file(tmp_path):
    source = tmp_path / "other.in"
    source.write_text("1 2 3\n")
    target = tmp_path / "out.txt"
    run(str(source), str(target))
    assert target.read_text() == ""


def test_main_needs_two_arguments():
    assert main([]) == 1
    assert main(["only.in"]) == 1


def test_main_missing_input(tmp_path, capsys):
    status = main([str(tmp_path / "data1.in"), str(tmp_path / "out.txt")])
    assert status == 1
    assert capsys.readouterr().out == "Eroare la deschiderea fisierelor!"