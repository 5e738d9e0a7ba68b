import io

import pytest

from pushswap.bench import Bench, compute_disorder, format_report, strategy_name
from pushswap.checker import check
from pushswap.cli import main, run_benchmark, split_flags
from pushswap.stacks import PushSwap


def test_split_flags_separates_bench_and_algorithm():
    assert split_flags(["--bench", "--simple", "3", "1"]) == (True, "--simple", ["3", "1"])


def test_split_flags_last_algorithm_wins():
    bench, flag, rest = split_flags(["--medium", "5", "--complex", "1"])
    assert bench is False
    assert flag == "--complex"
    assert rest == ["5", "1"]


def test_split_flags_without_flags_keeps_arguments():
    assert split_flags(["4", "2"]) == (False, None, ["4", "2"])


def test_main_without_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_blank_argument_prints_nothing(capsys):
    assert main(["   "]) == 0
    assert capsys.readouterr().out == ""


def test_main_two_elements_swaps(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [["1", "1"], ["abc"], ["+5"], ["2147483648"], ["1 2 2"]])
def test_main_rejects_bad_arguments(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize(
    "args",
    [
        ["3 1 2"],
        ["5", "4", "3", "2", "1"],
        ["--medium"] + [str(v) for v in (9, 3, 7, 1, 8, 2, 6, 0, 5, 4)],
        ["--complex"] + [str(v) for v in (9, 3, 7, 1, 8, 2, 6, 0, 5, 4)],
        [" ".join(str(v) for v in range(30, 0, -1))],
    ],
)
def test_main_output_sorts_the_input(capsys, args):
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines(keepends=True)
    numbers = [a for a in args if not a.startswith("--")]
    values = [int(word) for arg in numbers for word in arg.split()]
    assert check(values, lines) is True


def test_main_bench_reports_strategy(capsys):
    assert main(["--bench", "--simple", "3", "2", "1"]) == 0
    captured = capsys.readouterr()
    assert "[bench] strategy: Simple / selection\n" in captured.err
    ops = captured.out.splitlines(keepends=True)
    assert check([3, 2, 1], ops) is True
    assert f"[bench] total_ops:  {len(ops)}\n" in captured.err


def test_main_bench_on_sorted_input_reports_nothing(capsys):
    assert main(["--bench", "1", "2", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_run_benchmark_writes_report():
    ps = PushSwap([2, 1, 3], out=io.StringIO())
    err = io.StringIO()
    bench = run_benchmark(ps, None, err)
    assert bench == Bench.from_ops(ps.ops)
    expected = format_report(
        bench,
        compute_disorder([2, 1, 3]),
        strategy_name(None, compute_disorder([2, 1, 3]), 3),
    )
    assert err.getvalue() == expected
    assert "[bench] strategy: Adaptive / simple" in err.getvalue()
    assert ps.a.values() == [1, 2, 3]


def test_run_benchmark_counts_only_new_ops():
    ps = PushSwap([1, 3, 2, 5, 4, 6, 7], out=io.StringIO())
    ps.ra()
    err = io.StringIO()
    bench = run_benchmark(ps, "--complex", err)
    assert bench.total() == len(ps.ops) - 1
    assert "[bench] strategy: Complex / radix" in err.getvalue()
    assert ps.a.is_sorted()