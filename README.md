# drillbook

Classic programming exercises as plain, importable Python functions and
classes. Each exercise is a small piece of behaviour you can call, test and
read.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides one command:

```
drillbook
```

It prints `Hello, World!` (with no trailing newline) and exits with status 0.
It takes no options apart from `--help`.

## What is inside

### `drillbook.numbers`

Arithmetic and number-theory drills on integers:

- `add`, `larger` (returns `b` when the two are equal), `is_even`,
  `sign_label` (`"Positive"`, `"Negative"` or `"Zero"`), `circle_area`
  (uses 3.1416 for pi)
- three ways to exchange two values, each returning a tuple: `swap`,
  `arithmetic_swap`, `xor_swap`
- `is_leap_year`
- `calculate(op, a, b)` for `+`, `-`, `*` and `/`; returns a float, raises
  `ValueError` for an unknown operator and `ZeroDivisionError` when dividing
  by zero
- `sum_natural`, `factorial`, `multiplication_table` (ten lines of the form
  `"7 x 3 = 21"`), `fibonacci` (the first `n` terms, starting from 0)
- digit work: `reverse_number`, `is_palindrome_number`, `is_armstrong`,
  `count_digits` (zero has no digits), `sum_of_digits`; negative numbers
  keep their sign
- primes: `is_prime`, and `sieve(n)` for all primes up to `n`, which raises
  `ValueError` when `n` is below 2
- `to_binary` for the binary representation of a non-negative integer
  (raises `ValueError` for negatives)

```python
from drillbook.numbers import is_leap_year, sieve

is_leap_year(2000)   # True
is_leap_year(1900)   # False
sieve(10)            # [2, 3, 5, 7]
```

### `drillbook.arrays`

Working with sequences of values:

- `largest`, `smallest`, `sum_and_average` (returns `(sum, mean)`); each
  raises `ValueError` on an empty sequence
- searching: `linear_search` and `binary_search` return a bool;
  `binary_search_index` returns an index or `None` (the input must be sorted
  ascending for the binary searches)
- sorting, each returning a new list: `bubble_sort`, `quicksort`,
  `merge_sort`, and `sort_strings` (code-point order)

```python
from drillbook.arrays import merge_sort, binary_search_index

data = merge_sort([5, 2, 9, 1])   # [1, 2, 5, 9]
binary_search_index(data, 9)      # 3
```

### `drillbook.matrix`

Matrices as lists of rows:

- `add_matrices` and `multiply_matrices` return new matrices
- `transpose` returns a new matrix; `transpose_in_place` rewrites a square
  matrix
- `format_matrix` renders each row as space-terminated values followed by a
  newline

Ragged rows or mismatched shapes raise `ShapeError`, a subclass of
`ValueError`.

### `drillbook.text`

- `string_length`
- `is_palindrome`, which ignores one trailing newline
- `count_text`, returning a `TextCounts` with `words`, `lines` (newline
  characters) and `chars`; its `str()` reads
  `Words: 2 Lines: 1 Chars: 12`
- `replace_all(text, old, new)`; an empty `old` raises `ValueError`

### `drillbook.structures`

Hand-built data structures:

- `DoublyLinkedList`, grown with `push_front`, iterable forwards and with
  `reversed()`, and sized with `len()`
- `LinkedList`, grown with `push` at the front and reversed in place with
  `reverse`
- `Stack` with `push` and `pop`; popping an empty stack raises `IndexError`
- `CircularQueue(capacity)` with `push`, `pop` and `drain`; pushing onto a
  full queue raises `QueueFullError`, popping an empty one raises
  `IndexError`
- polynomials as lists of `Term(coeff, exp)` in descending exponent order,
  combined with `add_polynomials` and shown with `format_polynomial`
  (e.g. `"+3 x^4 +5 x^3 "`)
- binary trees built from `TreeNode`, walked with `inorder`, `preorder` and
  `postorder`, each returning a list of values

```python
from drillbook.structures import Stack

stack = Stack()
stack.push(5)
stack.push(10)
stack.pop()   # 10
```

### `drillbook.files`

- `append_and_read(path, line)` appends the line and a newline, then returns
  the whole file
- `copy_binary(src, dst)` copies a file byte for byte and returns the number
  of bytes copied
- `replace_in_file(src, dst, old, new)` writes `src` to `dst` with every
  `old` replaced and returns how many were replaced
- `format_local_time(timestamp)` renders a Unix timestamp as local
  `YYYY-MM-DD HH:MM:SS +hhmm`
- `current_time()` returns the current Unix timestamp and its local
  rendering

Missing input files raise the usual `OSError` subclasses such as
`FileNotFoundError`.

## What it does not do

The exercises are available as library functions only. There is no
interactive prompt that reads numbers or text from the terminal; the single
`drillbook` command only prints the greeting.