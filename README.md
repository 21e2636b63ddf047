# cbasics

A collection of small, self-contained building blocks and command-line
tools: a fixed-capacity circular buffer of floats, merge sort and
quicksort, a number-line parser, first-occurrence text replacement,
Fibonacci and GCD helpers, a file concatenator, breadth-first search over
an adjacency matrix, integer matrix multiplication, a few language
demonstrations, and some process and shared-memory tools.

It needs nothing outside the Python standard library (3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Circular buffer (`cbasics.circular`)

```python
from cbasics.circular import CircularBuffer, BufferFullError

buf = CircularBuffer(3)
buf.append(5.6)
buf.append(10.2)
len(buf)          # 2
buf.pop()         # 5.6, the oldest value
list(buf)         # [10.2]
buf.resize(6)     # change capacity, keeping the stored values in order
buf.max_len       # 6 (a property)
```

- Appending to a full buffer raises `BufferFullError`.
- `pop()` on an empty buffer returns `0.0`.
- `element(pos)`, `buf[pos]` and `buf[pos] = value` address any position
  below the capacity, counted from the oldest value; other positions raise
  `IndexError`.
- `set_start(start)` places element 0 at a given storage slot.
- `resize(n)` raises `ValueError` when `n` is smaller than the number of
  stored values.

### Sorting (`cbasics.sorting`)

```python
from cbasics.sorting import merge_sort, quick_sort, is_sorted, format_numbers

values = [5.0, 9.0, 2.3, -5.4, 2.9]
merge_sort(values)        # sorts in place (stable)
quick_sort(values)        # sorts in place, last element as pivot
is_sorted(values)         # True
format_numbers(values)    # "-5.4, 2.3, 2.9, 5, 9"
```

`partition(values, low, high)` is the quicksort partition step; it returns
the pivot's final index.

### Numbers (`cbasics.numberline`)

```python
from cbasics.numberline import parse_numbers, format_numbers

parse_numbers("1 2 0x10 010", 0)     # [1, 2, 16, 8]
format_numbers([1, 0, 255])          # "0X1,\t0,\t0XFF\n"
```

`parse_numbers` reads unsigned 64-bit numbers until the first text that is
not a number; base 0 picks the base from each prefix. `read_line` and
`process_stream` read lines of at most `size - 1` characters and raise or
report `LineTooLongError` for longer ones.

### Text (`cbasics.text`)

```python
from cbasics.text import find_word, replace_word

find_word("hello world", "world")                 # 6
replace_word("hello world", "world", "there")     # "hello there"
replace_word("hello world", "", "x")              # "x" (empty word replaces all)
```

`replace_word` raises `ValueError` when the word does not occur.

### Recursion (`cbasics.recursion`)

```python
from cbasics.recursion import fib, fib_cached, fib_iter, shifted_fib, gcd

fib(10)           # 55; also fib_cached(10) and fib_iter(10)
shifted_fib(10)   # 89, the sequence counted from index 0 as 1
gcd(5, 3)         # 1
```

Fibonacci results wrap around at 64 bits. `gcd` raises `ValueError` unless
both numbers are positive. `cat(paths, out, err)` copies files (or standard
input when none are named) to `out`.

### Graphs and matrices (`cbasics.graph`, `cbasics.linalg`)

```python
from cbasics.graph import bfs, BoundedQueue
from cbasics.linalg import matmul, format_matrix

bfs([[False, True], [True, False]], 0)    # [True, True]
matmul([[1, 2, 3]], [[4], [5], [6]])      # [[32]]
format_matrix([[1, 2], [3, 4]])           # "1 2 \n3 4 \n"
```

`BoundedQueue(size)` holds `size - 1` items and raises `QueueOverflowError`
when full; `dequeue()` on an empty queue resets it and raises `IndexError`.
`matmul` raises `ValueError` when the shapes do not fit.

### Demonstrations and processes

`cbasics.demos` has the `Corvid` enumeration, the `Flock` flag set and
helpers such as `square_lines`, `count_signs`, `counting_up_to_limit`,
`corvid_lines`, `fgoto_lines` and `zeroed_array_lines`, each returning the
lines it describes.

`cbasics.process` has `write_shared_message` / `read_shared_message` for a
named shared-memory segment (the writer stores `Hello_World!`; the reader
removes the segment), `run_listing` to run a command as a child process,
and `producer_consumer`, which passes `Item` values through a bounded ring
to a consumer thread and returns what the consumer received.

## Commands

| Command               | What it does                                                        |
|-----------------------|---------------------------------------------------------------------|
| `cbasics-circular`    | Walks through filling, popping and resizing a circular buffer       |
| `cbasics-sort`        | Sorts the numbers given as arguments and reports whether sorted     |
| `cbasics-numberline`  | Reads lines of numbers on stdin, prints them as hexadecimal         |
| `cbasics-replace`     | Replaces a word in a text (`[text] [word] [replacement]`)           |
| `cbasics-fib`         | Prints the Fibonacci number for the given index                     |
| `cbasics-shifted-fib` | Prints the Fibonacci number counted from index 0 as 1               |
| `cbasics-gcd`         | Prints the greatest common divisor of two numbers (5 and 3 default) |
| `cbasics-cat`         | Copies the named files, or stdin, to stdout                         |
| `cbasics-bfs`         | Runs a breadth-first search over a sample graph from vertex 3       |
| `cbasics-matmul`      | Multiplies sample row and column vectors                            |
| `cbasics-demos`       | Prints the named demonstrations                                     |
| `cbasics-producer`    | Writes the message into a shared-memory segment (`[name]`)          |
| `cbasics-consumer`    | Prints and removes that shared-memory message (`[name]`)            |
| `cbasics-listing`     | Runs a command (default `ls`) in a child process                    |
| `cbasics-ring`        | Passes fifteen items through a ten-slot ring to a consumer          |

The demonstrations for `cbasics-demos` are `squares`, `signs`, `counting`,
`corvids`, `fgoto`, `zeroed` and `program-name`.

Examples:

```
cbasics-sort 5 9 2.3 -5.4 2.9
cbasics-fib 10
cbasics-gcd 12 18
printf '1 2 3\n0x10 010\n' | cbasics-numberline
cbasics-replace "hello world" world there
cbasics-cat notes.txt
cbasics-demos squares corvids
cbasics-producer && cbasics-consumer
```

## Limitations

The ring of `cbasics-ring` runs its consumer as a thread inside one
process rather than in a separate process. The shared-memory and listing
tools are meant for Linux and other Unix-like systems.