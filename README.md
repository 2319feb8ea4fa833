# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of operations. The `push_swap` command prints the
operations it performs, one per line.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments:

```
push_swap 3 1 2
```

or as a single space-separated argument:

```
push_swap "3 1 2"
```

Each number may have leading whitespace and one `+` or `-` sign; what
follows the sign must be digits only, at most eleven of them.

Behaviour and exit status:

- Already sorted input: nothing is printed, status 0.
- No arguments, or a single empty argument: `Error` is printed, status 1.
- An invalid number or a repeated value given inside a single quoted
  argument: `Error` is printed, status 1.
- An invalid number or a repeated value given as separate arguments:
  nothing is printed, status 1.

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the first two elements of `a`                |
| `sb`  | swap the first two elements of `b`                |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up by one (first becomes last)         |
| `rb`  | rotate `b` up by one                              |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` down by one (last becomes first)       |
| `rrb` | rotate `b` down by one                            |
| `rrr` | `rra` and `rrb` together                          |

These are the methods of `pushswap.stacks.Stacks`. Each writes its name
to the stack's output stream: `pa`, `pb` and the rotations end the name
with a newline, while `sa` and `sb` write the name without one. Swaps and
pushes that cannot take effect write nothing; rotations always write
their name. The sort itself uses only `pb`, `ra`, `rra` and `pa`.

## Library use

```python
import io

from pushswap.parsing import check_args
from pushswap.stacks import Stacks
from pushswap.sorting import radix_sort

out = io.StringIO()
stacks = Stacks(check_args(["3", "-1", "2"]), out)
radix_sort(stacks)
print(stacks.a)          # [-1, 2, 3]
print(out.getvalue())
```

- `pushswap.parsing`: `parse_number`, `check_args` (also rejects
  duplicates), `parse_arguments`; errors raise `InputError`, a
  `ValueError`.
- `pushswap.stacks`: `Stacks`, plus `rotate`, `reverse_rotate` and
  `search_for_node` on plain lists.
- `pushswap.sorting`: `is_sorted`, `index_values` (each value's rank)
  and `radix_sort`, which sorts on the bits of the ranks.
- `pushswap.printf`: `sprintf` and `printf` for the `%c %s %p %d %i %u
  %x %X` conversions, and the `format_*` helpers behind them.
- `pushswap.libft`: small helpers in `chars`, `memory`, `strings`,
  `lists` (`LinkedList`) and `output`.

## What it does not do

There is no checker command: nothing here reads a list of operations and
verifies that they sort a stack. The sort is a plain radix sort and makes
no attempt to minimise the number of operations for small inputs.

## Tests

```
pip install ".[test]"
pytest
```