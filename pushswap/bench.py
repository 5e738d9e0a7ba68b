"""Operation counts, disorder measure and the benchmark report."""

from __future__ import annotations

from collections import Counter
from dataclasses import astuple, dataclass, fields
from itertools import combinations
from typing import Iterable, Optional

LOW_DISORDER = 0.08
HIGH_DISORDER = 0.65
SMALL_SIZE = 5
MEDIUM_SIZE = 200

_FLAG_STRATEGIES = {
    "--simple": "Simple / selection",
    "--medium": "Medium / chunks",
    "--complex": "Complex / radix",
    "--adaptive": "Adaptive / mixed",
}


@dataclass
class Bench:
    """How many times each instruction was performed."""

    sa: int = 0
    sb: int = 0
    ss: int = 0
    pa: int = 0
    pb: int = 0
    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0

    @classmethod
    def from_ops(cls, ops: Iterable[str]) -> "Bench":
        """Count the instructions named in ``ops``."""
        counts = Counter(ops)
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(counts) - known)
        if unknown:
            raise ValueError(f"unknown instruction: {unknown[0]!r}")
        return cls(**counts)

    def total(self) -> int:
        """Total number of instructions."""
        return sum(astuple(self))


def compute_disorder(values: Iterable[int]) -> float:
    """Fraction of pairs that are out of order, from 0.0 (sorted) to 1.0."""
    items = list(values)
    size = len(items)
    if size <= 1:
        return 0.0
    inversions = sum(1 for first, second in combinations(items, 2) if first > second)
    return inversions / (size * (size - 1) // 2)


def strategy_name(flag: Optional[str], disorder: float, size: int) -> str:
    """Describe the strategy that a flag, or the adaptive choice, selects."""
    if flag in _FLAG_STRATEGIES:
        return _FLAG_STRATEGIES[flag]
    if size <= SMALL_SIZE:
        return "Adaptive / simple"
    if disorder < LOW_DISORDER:
        return "Adaptive / low disorder"
    if size <= MEDIUM_SIZE or disorder < HIGH_DISORDER:
        return "Adaptive / chunks"
    return "Adaptive / radix"


def format_report(bench: Bench, disorder: float, strategy: str) -> str:
    """Render the benchmark report, one ``[bench]`` line per entry."""
    percent = disorder * 100
    int_part = int(percent)
    dec_part = int((percent - int_part) * 100)
    return (
        f"[bench] disorder: {int_part}.{dec_part:02d}%\n"
        f"[bench] strategy: {strategy}\n"
        f"[bench] total_ops:  {bench.total()}\n"
        f"[bench] sa: {bench.sa} sb: {bench.sb} ss: {bench.ss}"
        f" pa: {bench.pa} pb: {bench.pb}\n"
        f"[bench] ra: {bench.ra} rb: {bench.rb} rr: {bench.rr}"
        f" rra: {bench.rra} rrb: {bench.rrb} rrr: {bench.rrr}\n"
    )