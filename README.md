# dsasteps

Small, dependable implementations of the algorithms that open most data
structures and algorithms courses: recursion exercises, frequency counting,
simple text patterns and the textbook sorts. There are no dependencies
outside the standard library.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsasteps.recursion`

- `factorial(n)` returns `n!`.
- `fibonacci(n)` returns the n-th Fibonacci number, with `fibonacci(0) == 0`
  and `fibonacci(1) == 1`.
- `fibonacci_terms(count)` returns a list of the first `count` Fibonacci
  numbers, starting from 0; a `count` of zero or less gives `[]`.
- `fibonacci_series(n)` returns the terms from index 0 up to and including
  index `n`, so `fibonacci_series(5) == [0, 1, 1, 2, 3, 5]`.
- `sum_first_n(n)` returns `1 + 2 + ... + n`.
- `is_palindrome(text)` tells whether `text` reads the same both ways,
  ignoring case and anything that is not a letter or a digit.
- `reverse_in_place(values)` reverses a mutable sequence in place and
  returns `None`.
- `count_up(n)` and `count_down(n)` are generators yielding `1..n` in
  ascending or descending order.
- `repeat(text, n)` is a generator yielding `text` `n` times (nothing when
  `n` is zero or negative).

`factorial`, `fibonacci`, `fibonacci_series` and `sum_first_n` raise
`ValueError` for a negative argument.

### `dsasteps.hashing`

Frequency tables that can be queried after they are built:

- `count_small_numbers(values, limit=13)` returns a list of `limit` counts,
  indexed by value. A value outside `0..limit-1` raises `FrequencyError`.
- `count_lowercase(text)` returns a dict with a count for every letter `a`
  to `z` (zero for letters that do not occur). Any other character raises
  `FrequencyError`.
- `count_characters(text)` returns a `Counter` of every character. A
  character whose code point is above 255 raises `FrequencyError`.
- `count_numbers(values)` returns a `Counter` of integers of any size.

`FrequencyError` is a subclass of `ValueError`.

### `dsasteps.patterns`

- `times_table(factor=2, upto=10)` returns lines of the form `2*3=6` for
  `i` from 1 to `upto`.
- `square_pattern(n, symbol="*")` returns `n` rows, each holding `symbol`
  repeated `n` times.

These return lists of strings; printing them is left to the caller.

### `dsasteps.sorting`

Each of these sorts the list it is given in place, in ascending order, and
returns `None`:

`bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`,
`quick_sort`, `recursive_bubble_sort`, `recursive_insertion_sort`.

`merge_sort` is stable. `quick_sort` uses the first item of each range as
its pivot. The recursive variants recurse once per item, so very long lists
can reach Python's recursion limit.

`move_zeros_to_end(values)` moves every zero to the end of the list in
place; the other values keep their order.

## Example

```python
from dsasteps.recursion import fibonacci_series, is_palindrome
from dsasteps.sorting import merge_sort

numbers = [5, 1, 4, 2]
merge_sort(numbers)
print(numbers)                                     # [1, 2, 4, 5]

is_palindrome("A man, a plan, a canal: Panama")    # True
fibonacci_series(5)                                # [0, 1, 1, 2, 3, 5]
```

## What it does not do

The package is a library only. It has no command-line program and does not
read input or print anything; callers pass values in and get results back.