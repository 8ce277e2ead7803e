# labstructs

A collection of small, self-contained data structures and operating-systems
exercises, each usable as a library and runnable as a command.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library

### Queues

`labstructs.bounded_queue.BoundedQueue` keeps its front element at index 0 and
shifts the remaining elements on every dequeue. `labstructs.circular_queue.CircularQueue`
lets the front index drift around a ring buffer instead. Both take an initial
`capacity` (default 3) and an optional `fill` value that creates a full queue,
grow by doubling their capacity when full, support `len()` and iteration, and
expose `capacity()`, `front()`, `back()`, `is_empty()` and `render()`.
Dequeuing an empty queue raises `IndexError`.

```python
from labstructs.circular_queue import CircularQueue

queue = CircularQueue(6)
queue.enqueue(3)
queue.enqueue(7)
print(queue.render())   # | 3 | 7 |
print(queue.dequeue())  # 3
print(queue.front())    # 1
```

`labstructs.queue_demo` has `format_state(queue)`, which returns the front,
back, size and capacity lines for a queue, and `parse_value(text)`, which
turns input into an integer (anything that is not a number gives 0).

### Treap

`labstructs.treap.Treap` is a treap of single characters with random min-heap
priorities drawn from `range(51)`. Pass your own `random.Random` for
reproducible trees. `search()` returns a character's priority, or `None` when
it is absent; iterating yields the characters in key order. `space_overhead()`,
`space_total()` and `overhead_fraction()` report the bytes the nodes would take.

```python
import random
from labstructs.treap import Treap

treap = Treap(random.Random(1))
for letter in "BCDEFG":
    treap.insert(letter)
print(list(treap))         # ['B', 'C', 'D', 'E', 'F', 'G']
print(treap.search("C"))   # the priority of "C"
print(treap.render())
```

### N-Queens

`labstructs.nqueens.Board` reads a square comma-separated board of `0`s with
exactly one given queen `1` (`Board.from_csv`), places the remaining queens by
backtracking (`solve()` returns whether it succeeded) and writes the result
back as CSV (`to_csv()`) or as space-separated rows (`render()`).
`find_n(text)` counts the digits on the first line.

```python
from labstructs.nqueens import Board

board = Board.from_csv("0,1,0,0\n0,0,0,0\n0,0,0,0\n0,0,0,0\n")
if board.solve():
    print(board.to_csv())
```

### Shell

`labstructs.shell` parses command lines with `parse_command(line)` into a
`Command`, maps one-letter commands to programs with `resolve(command)`
(`L` → `ls`, `C` → `cp`, `D` → `rm`, `P` → `more`, `M` → `nano`,
`W` → `clear`, `X program` runs `program`) and runs a read-eval loop with
`run_shell(stdin, stdout, runner)`. `E` echoes its first argument, `H` prints
help and `Q` quits. Programs are started with `subprocess` unless another
`runner` is given.

### Floppy file system

`labstructs.filesys.Disk` works on a disc image of 512-byte sectors with a
usage map at sector 256 and a directory at sector 257. `Disk.open(path)`
loads an image; `entries()`, `list_files()`, `find_printable(name)`,
`read_file(name)`, `make_file(name, text)` and `delete_file(name)` work on it,
and `save(path)` writes it back. Problems are raised as `DiskError`.
`comma_separate(n)` formats byte counts with thousands separators.

## Commands

```
labstructs-queues [--capacity N] [--value V]   # walk through both queues, reading values from stdin
labstructs-treap                               # insert B..G into a treap, draw it, report C's priority
labstructs-nqueens [input] [-o output]         # solve input.csv and write solution.csv
labstructs-shell                               # one-letter command shell (H for help, Q to quit)
labstructs-filesys L | P name | M name | D name [--image PATH]   # work on floppya.img
```

Examples:

```
labstructs-filesys L
labstructs-filesys M notes
labstructs-filesys P notes
labstructs-filesys D notes
```

## What this package does not do

It has no hash table structure and no command for one, and it has no
threaded or semaphore-based simulation. The structures here are the two
queues, the treap and the N-Queens board, alongside the shell and the floppy
file system.