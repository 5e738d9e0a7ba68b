"""Command line entry point that prints the instructions sorting its arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .args import ArgumentError, is_blank, parse_arguments
from .bench import Bench, compute_disorder, format_report, strategy_name
from .sorting import adaptive_sort, sort_with_flag
from .stacks import PushSwap

BENCH_FLAG = "--bench"
ALGORITHM_FLAGS = ("--simple", "--medium", "--complex", "--adaptive")


def split_flags(args: Sequence[str]) -> tuple[bool, Optional[str], list[str]]:
    """Separate ``--bench`` and the algorithm flag from the integer arguments.

    Returns whether benchmarking was asked for, the last algorithm flag given
    (or None), and the remaining arguments in their original order.
    """
    bench = False
    flag: Optional[str] = None
    rest: list[str] = []
    for arg in args:
        if arg == BENCH_FLAG:
            bench = True
        elif arg in ALGORITHM_FLAGS:
            flag = arg
        else:
            rest.append(arg)
    return bench, flag, rest


def run_benchmark(ps: PushSwap, flag: Optional[str], err: Optional[TextIO] = None) -> Bench:
    """Sort stack a, counting instructions, and write the report to ``err``."""
    stream = err if err is not None else sys.stderr
    disorder = compute_disorder(ps.a.values())
    strategy = strategy_name(flag, disorder, len(ps.a))
    start = len(ps.ops)
    if flag is None:
        adaptive_sort(ps)
    else:
        sort_with_flag(ps, flag)
    bench = Bench.from_ops(ps.ops[start:])
    stream.write(format_report(bench, disorder, strategy))
    return bench


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the instructions that sort the given integers; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    bench, flag, rest = split_flags(args)
    if not rest:
        return 0
    if len(rest) == 1 and is_blank(rest[0]):
        return 0
    try:
        values = parse_arguments(rest)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    ps = PushSwap(values, out=sys.stdout)
    if not ps.a.is_sorted():
        if bench:
            run_benchmark(ps, flag, sys.stderr)
        else:
            sort_with_flag(ps, flag)
    return 0


if __name__ == "__main__":
    sys.exit(main())