# pushswap

`pushswap` takes a list of distinct integers as stack `a`, with the first
number on top, and works out a sequence of stack operations that sorts it
using a second stack `b`. It prints the operations, one per line.

The operations are:

| Move  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the first two elements of `a`                |
| `sb`  | swap the first two elements of `b`                |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the first element becomes last     |
| `rb`  | rotate `b` up                                     |
| `rra` | rotate `a` down: the last element becomes first   |
| `rrb` | rotate `b` down                                   |

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments:

```
pushswap 2 1 3
```

or as one argument with the numbers separated by spaces:

```
pushswap "2 1 3"
```

When several arguments are given, each must hold exactly one number.

Nothing is printed and the exit status is 0 when no arguments are given,
when the first argument is empty, or when the numbers are already in
ascending order. On invalid input — a character other than digits, spaces
and signs, a badly placed sign, a number outside the 32-bit signed range,
or a repeated number — `Error` is printed on standard output and the exit
status is 255.

The strategy depends on how many numbers there are: fixed move sequences
for two to five numbers, a chunked insertion approach for fewer than 300,
and a binary radix sort on the numbers' ranks for 300 or more.

## Library use

```python
from pushswap.stacks import Stacks, describe
from pushswap.chunksort import sort

stacks = Stacks([3, 1, 2])
sort(stacks)
print(stacks.moves)       # the moves, as a list of strings
print(describe(stacks.a)) # size, values and ranks of stack a
```

- `pushswap.stacks`: `Stacks` holds stacks `a` and `b` as deques of
  `Element` (a value and its rank, 1 being the smallest) and records every
  move in `moves`. Its methods `swap`, `push`, `rotate` and
  `reverse_rotate` take the stack name `"a"` or `"b"`.
- `pushswap.chunksort`: `sort` picks the method by size; `sort_medium` and
  `radix_sort` can also be called directly.
- `pushswap.smallsort`: `sort_two`, `sort_three`, `sort_four`, `sort_five`.
- `pushswap.parsing`: `parse_arguments` turns command-line style arguments
  into a list of integers and a flag telling whether they are already
  sorted; it raises `PushSwapError` on invalid input.
- `pushswap.cli`: `main(argv=None)`, the command above; it returns the exit
  status.

`pushswap.libft` holds small C-style helpers: character classes (`chars`),
byte buffers (`memory`), stream output (`output`), string functions
(`strings`), a linked list (`linked`), a minimal `printf` (`printf`) and a
line reader for file descriptors (`nextline`).

## What it does not do

`pushswap` only produces moves. It does not read a list of moves and check
whether they sort a given input, and it has no visual display of the
stacks.

## Tests

```
pip install .[test]
pytest
```