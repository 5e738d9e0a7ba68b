"""Check that a list of instructions read from standard input sorts the arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .args import ArgumentError, parse_arguments
from .stacks import Stack, build_stack


def execute_command(line: str, a: Stack, b: Stack) -> None:
    """Apply one instruction line to the stacks; ValueError if it is unknown."""
    command = line[:-1] if line.endswith("\n") else line
    if command == "sa":
        a.swap()
    elif command == "sb":
        b.swap()
    elif command == "ss":
        a.swap()
        b.swap()
    elif command == "pa":
        a.push_from(b)
    elif command == "pb":
        b.push_from(a)
    elif command == "ra":
        a.rotate()
    elif command == "rb":
        b.rotate()
    elif command == "rr":
        a.rotate()
        b.rotate()
    elif command == "rra":
        a.reverse_rotate()
    elif command == "rrb":
        b.reverse_rotate()
    elif command == "rrr":
        a.reverse_rotate()
        b.reverse_rotate()
    else:
        raise ValueError(f"unknown instruction: {command!r}")


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """True if the instructions leave stack a sorted and stack b empty."""
    a = build_stack(values)
    b = Stack()
    for line in lines:
        execute_command(line, a, b)
    return a.is_sorted() and len(b) == 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        result = check(values, sys.stdin)
    except ValueError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


__all__ = ["ArgumentError", "check", "execute_command", "main"]


if __name__ == "__main__":
    sys.exit(main())