"""Sorting strategies driven through the push_swap instruction set."""

from __future__ import annotations

from typing import Optional

from .bench import (
    HIGH_DISORDER,
    LOW_DISORDER,
    MEDIUM_SIZE,
    SMALL_SIZE,
    compute_disorder,
)
from .stacks import PushSwap, Stack

_SMALL_CHUNK_LIMIT = 100
_SMALL_CHUNK = 15
_LARGE_CHUNK = 35


def _min_rank(stack: Stack, excluded: int = -1) -> int:
    """Smallest rank below the top's, skipping ``excluded``; starts from the top's rank."""
    ranks = stack.indexes()
    result = ranks[0]
    for rank in ranks[1:]:
        if rank < result and rank != excluded:
            result = rank
    return result


def _sort_3(ps: PushSwap) -> None:
    if ps.a.is_sorted():
        return
    first, second = ps.a.indexes()[:2]
    lowest = _min_rank(ps.a)
    runner_up = _min_rank(ps.a, lowest)
    if first == lowest and second != runner_up:
        ps.ra()
        ps.sa()
        ps.rra()
    elif first == runner_up:
        if second == lowest:
            ps.sa()
        else:
            ps.rra()
    elif second == lowest:
        ps.ra()
    else:
        ps.sa()
        ps.rra()


def _sort_4(ps: PushSwap) -> None:
    if ps.a.is_sorted():
        return
    ps.make_top(ps.a.distance_to(_min_rank(ps.a)))
    if ps.a.is_sorted():
        return
    ps.pb()
    _sort_3(ps)
    ps.pa()


def _sort_5(ps: PushSwap) -> None:
    ps.make_top(ps.a.distance_to(_min_rank(ps.a)))
    if ps.a.is_sorted():
        return
    ps.pb()
    _sort_4(ps)
    ps.pa()


def simple_sort(ps: PushSwap) -> None:
    """Sort up to five elements by hand-picked moves; radix for more."""
    size = len(ps.a)
    if size <= 1 or ps.a.is_sorted():
        return
    if size == 2:
        ps.sa()
    elif size == 3:
        _sort_3(ps)
    elif size == 4:
        _sort_4(ps)
    elif size == 5:
        _sort_5(ps)
    else:
        radix_sort(ps)


def _push_chunks_to_b(ps: PushSwap, chunk: int) -> None:
    pushed = 0
    while len(ps.a):
        top = next(iter(ps.a)).index
        if top <= pushed:
            ps.pb()
            ps.rb()
            pushed += 1
        elif top <= pushed + chunk:
            ps.pb()
            pushed += 1
        else:
            ps.ra()


def _push_max_to_a(ps: PushSwap) -> None:
    highest = max(ps.b.indexes())
    distance = ps.b.distance_to(highest)
    size = len(ps.b)
    if distance <= size // 2:
        for _ in range(distance):
            ps.rb()
    else:
        for _ in range(size - distance):
            ps.rrb()
    ps.pa()


def medium_sort(ps: PushSwap) -> None:
    """Push ranked chunks to b, then bring the largest back one at a time."""
    size = len(ps.a)
    if size <= SMALL_SIZE:
        simple_sort(ps)
        return
    chunk = _SMALL_CHUNK if size <= _SMALL_CHUNK_LIMIT else _LARGE_CHUNK
    _push_chunks_to_b(ps, chunk)
    while len(ps.b):
        _push_max_to_a(ps)


def radix_sort(ps: PushSwap) -> None:
    """Binary LSD radix sort on the elements' ranks."""
    size = len(ps.a)
    if size == 0:
        return
    max_bits = max(ps.a.indexes()).bit_length()
    for bit in range(max_bits):
        for _ in range(size):
            top = next(iter(ps.a)).index
            if (top >> bit) & 1:
                ps.ra()
            else:
                ps.pb()
        while len(ps.b):
            ps.pa()


def _solve_low_disorder(ps: PushSwap) -> None:
    while len(ps.a):
        ps.make_top(ps.a.distance_to(min(ps.a.indexes())))
        ps.pb()
    while len(ps.b):
        ps.pa()


def adaptive_sort(ps: PushSwap) -> None:
    """Choose a strategy from the size and disorder of stack a."""
    size = len(ps.a)
    if size <= SMALL_SIZE:
        simple_sort(ps)
        return
    disorder = compute_disorder(ps.a.values())
    if disorder < LOW_DISORDER:
        _solve_low_disorder(ps)
    elif size <= MEDIUM_SIZE or disorder < HIGH_DISORDER:
        medium_sort(ps)
    else:
        radix_sort(ps)


_BY_FLAG = {
    "--simple": simple_sort,
    "--medium": medium_sort,
    "--complex": radix_sort,
    "--adaptive": adaptive_sort,
}


def sort_with_flag(ps: PushSwap, flag: Optional[str] = None) -> None:
    """Sort with the strategy a command-line flag names, adaptive when None."""
    if flag is None:
        if len(ps.a) <= SMALL_SIZE:
            simple_sort(ps)
        else:
            adaptive_sort(ps)
        return
    try:
        strategy = _BY_FLAG[flag]
    except KeyError:
        raise ValueError(f"unknown algorithm flag: {flag!r}") from None
    strategy(ps)