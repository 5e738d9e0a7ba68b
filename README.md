# pushswap

pushswap sorts a list of distinct integers with two stacks, `a` and `b`,
and a fixed set of instructions:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | reverse rotate `a`, `b`, or both (the bottom goes to the top) |

The package installs two commands, `push-swap` and `push-swap-checker`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## push-swap

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

You can give the numbers as separate arguments or as one space-separated
argument. The first number is the top of stack `a`. The command prints the
instructions that sort the numbers, one per line. It prints nothing and
exits with status 0 in these cases:

- the input is already sorted
- no numbers are given
- the only argument is blank

These flags choose the strategy. They may appear anywhere among the
arguments. If more than one is given, the last one is used.

- `--simple`: hand-picked moves for up to five numbers, and radix sort for more.
- `--medium`: sends chunks of ranks to `b`, then brings the largest back one at a time.
- `--complex`: binary radix sort on the ranks of the values.
- `--adaptive`: chooses by size and disorder, as described below.
- no flag: `--simple` for five numbers or fewer, `--adaptive` otherwise.

The adaptive choice works like this. It uses the simple sort for up to five
numbers. Otherwise it looks at the disorder, which is the fraction of pairs
that are out of order:

- below 0.08: it uses a selection of the minimum each time.
- up to 200 numbers, or a disorder below 0.65: it uses the chunk sort.
- anything else: it uses radix sort.

`--bench` writes a report to standard error after sorting. The report gives:

- the disorder, as a percentage
- the name of the strategy
- the total number of instructions
- the count for each instruction

The instructions themselves are still printed on standard output.

The command writes `Error` to standard error and exits with status 1 in
these cases:

- an argument is not an integer. This includes an unrecognised `--` option.
- a number has a leading `+`.
- a value is outside the 32-bit signed range.
- a value appears more than once.

## push-swap-checker

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker takes the same numbers as `push-swap`. It reads instructions
from standard input, one per line, and applies them. It prints `OK` if
stack `a` ends up sorted and stack `b` ends up empty, and `KO` otherwise.

It writes `Error` to standard error and exits with status 1 in these cases:

- an instruction is unknown
- the numbers are invalid

An instruction that cannot act, such as `sa` on a stack with fewer than two
elements, is silently ignored.

## Library use

```python
import io

from pushswap.stacks import PushSwap, build_stack
from pushswap.sorting import adaptive_sort
from pushswap.bench import Bench, compute_disorder
from pushswap.checker import check

out = io.StringIO()
ps = PushSwap(build_stack([3, 2, 5, 1, 4]), out=out)
adaptive_sort(ps)

print(ps.a.values())          # [1, 2, 3, 4, 5]
print(ps.ops)                 # the instructions performed
print(Bench.from_ops(ps.ops).total())
print(compute_disorder([3, 2, 5, 1, 4]))
print(check([3, 2, 5, 1, 4], ps.ops))   # True
```

`PushSwap` writes each instruction it performs to `out`, or to standard
output when `out` is `None`. It also records the instruction in `ops`.

The modules are:

- `pushswap.stacks`: `Stack`, `Element`, `build_stack`, `index_stack` and `PushSwap`.
- `pushswap.sorting`: `simple_sort`, `medium_sort`, `radix_sort`, `adaptive_sort` and `sort_with_flag`.
- `pushswap.args`: parses and validates the arguments (`parse_arguments`). It raises `ArgumentError`.
- `pushswap.bench`: `Bench`, `compute_disorder`, `strategy_name` and `format_report`.
- `pushswap.checker`: `check`, `execute_command` and `main`.
- `pushswap.cli`: `split_flags`, `run_benchmark` and `main`.

## What it does not do

The package only prints and checks instruction sequences. It has no
visualiser that animates the stacks. It has no generator of random inputs.