# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small fixed set
of instructions. Check whether a list of instructions sorts a given input.

## Instructions

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up (the top goes to the bottom)     |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down (the bottom goes to the top)   |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

An instruction on a stack that has too few elements leaves it unchanged.

## Installation

```
pip install .
```

## Producing instructions

Pass the numbers as arguments, one per argument or several in one argument
separated by whitespace. The first number is the top of stack `a`.

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The instructions are printed one per line. Nothing is printed when the input
is already in ascending order, or when no arguments are given.

Two or three numbers are sorted directly, four or five by moving the smallest
to `b` first, and larger inputs by pushing them to `b` in a sliding window of
ranks and pulling the largest back to `a` each time.

If the input is not valid, `Error` is written to standard error and the exit
status is 1. Input is not valid when:

- an argument is empty or made only of whitespace;
- a number has anything but an optional leading `+` or `-` and digits;
- a number is outside the 32-bit signed range, or is `-1`;
- a number is written with more than eleven characters;
- a number occurs twice.

## Checking instructions

`push-swap-checker` takes the same arguments (without the eleven-character
limit) and reads instructions from standard input, one per line, each line
ending in a newline. It prints `OK` if they leave `a` in ascending order and
`b` empty, and `KO` otherwise. If `a` ends empty it prints nothing. An unknown
instruction, or a last line without its newline, writes `Error` to standard
error with exit status 1.

```
push-swap 5 1 4 2 3 | push-swap-checker 5 1 4 2 3
```

## As a library

```python
from pushswap.sorting import solve
from pushswap.checker import run

instructions = solve([5, 1, 4, 2, 3])
assert run([5, 1, 4, 2, 3], instructions)
```

- `pushswap.stacks.Stacks` holds the two stacks as `a` and `b` (top first),
  provides one method per instruction, records each one in `history`, and has
  `apply(operation)` and `is_solved()`. `pushswap.stacks.Operation` is the
  enum of instruction names.
- `pushswap.parsing.parse_arguments(args, limit_length=True)` turns
  command-line arguments into a list of integers and raises `InputError`
  when the input is not valid.
- `pushswap.sorting.solve(values)` returns the list of `Operation`s that
  sorts `values`.
- `pushswap.checker.read_instructions(stream)` reads operations from lines,
  and `pushswap.checker.run(values, instructions)` returns `True`, `False`,
  or `None` when `a` ends empty.