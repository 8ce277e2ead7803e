"""Interactive demonstration comparing the shifting and circular queues."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO, Union

from labstructs.bounded_queue import BoundedQueue
from labstructs.circular_queue import CircularQueue

Queue = Union[BoundedQueue, CircularQueue]

_LABEL_WIDTH = 20


def format_state(queue: Queue) -> str:
    """Return the front, back, size and capacity lines for ``queue``."""
    rows = (
        ("Front Index: ", queue.front()),
        ("Back Index: ", queue.back()),
        ("Size: ", len(queue)),
        ("Capacity: ", queue.capacity()),
    )
    return "".join(f"{label:>{_LABEL_WIDTH}}{value}\n" for label, value in rows)


def parse_value(text: str) -> int:
    """Return ``text`` as an integer; input that is not a number gives 0."""
    try:
        return int(text)
    except ValueError:
        return 0


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_value(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    return None if token is None else parse_value(token)


def _show(queue: Queue, out: TextIO) -> None:
    out.write(queue.render() + "\n")
    out.write(format_state(queue) + "\n")


def _dequeue(queue: Queue) -> None:
    try:
        queue.dequeue()
    except IndexError:
        print("Queue is already empty", file=sys.stderr)


def _declare(title: str, name: str, queue: Queue, capacity: int, out: TextIO) -> None:
    out.write(f"{title}\n\n")
    out.write(f"Declare '{name}' with initial capacity {capacity} ...\n")
    out.write(format_state(queue) + "\n\n")


def _user_enqueue(name: str, queue: Queue, tokens: Iterator[str], out: TextIO) -> None:
    out.write(f"Get three enqueue values for '{name}' ...\n")
    out.write("(Invalid input defaults to 0)\n\n")
    for _ in range(3):
        out.write(f"{name}[{queue.back() + 1}] -> ")
        value = _next_value(tokens)
        queue.enqueue(0 if value is None else value)
        _show(queue, out)


def _loop_enqueue(name: str, queue: Queue, tokens: Iterator[str], out: TextIO) -> None:
    out.write(f"Loop input for '{name}' ...\n")
    out.write("(Invalid input defaults to 0)\n")
    out.write("Enter -1 to quit\n\n")
    while True:
        out.write(f"{name}[{queue.back() + 1}] -> ")
        value = _next_value(tokens)
        if value is None or value == -1:
            out.write("\n")
            break
        queue.enqueue(value)
        _show(queue, out)


def _loop_dequeue(name: str, queue: Queue, out: TextIO) -> None:
    out.write(f"Loop dequeue for '{name}' ...\n")
    while True:
        _dequeue(queue)
        _show(queue, out)
        if queue.front() == -1:
            break


def main(argv: list[str] | None = None) -> int:
    """Run the queue comparison, reading values from standard input."""
    parser = argparse.ArgumentParser(description="Compare a shifting queue with a circular queue.")
    parser.add_argument("--capacity", type=int, default=6, help="initial capacity of both queues")
    parser.add_argument("--value", type=int, default=3, help="value used for the first enqueue")
    args = parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)

    b_queue = BoundedQueue(args.capacity)
    _declare("B_O_U_N_D_E_D__Q_U_E_U_E", "bQueue", b_queue, args.capacity, out)

    c_queue = CircularQueue(args.capacity)
    _declare("C_I_R_C_U_L_A_R__Q_U_E_U_E", "cQueue", c_queue, args.capacity, out)

    b_queue.enqueue(args.value)
    out.write("T_E_S_T__A_N_D__C_O_M_P_A_R_E\n\n")
    out.write(f"Enqueue 'bQueue' with value {args.value} ...\n")
    _show(b_queue, out)

    c_queue.enqueue(args.value)
    out.write(f"Enqueue 'cQueue' with value {args.value} ...\n")
    _show(c_queue, out)

    _dequeue(b_queue)
    out.write("Dequeue 'bQueue' ...\n")
    _show(b_queue, out)

    _dequeue(c_queue)
    out.write("Dequeue 'cQueue' ...\n")
    _show(c_queue, out)

    _user_enqueue("bQueue", b_queue, tokens, out)
    out.write("Dequeue user enqueues for 'bQueue' ...\n")
    for _ in range(3):
        _dequeue(b_queue)
        _show(b_queue, out)

    _user_enqueue("cQueue", c_queue, tokens, out)
    out.write("Dequeue user enqueues for 'cQueue' ...\n")
    out.write(
        "(Dequeue on circular queue causes front index to drift. "
        "Empty queue resets Front and Back to -1)\n\n"
    )
    for _ in range(3):
        _dequeue(c_queue)
        _show(c_queue, out)

    _loop_enqueue("bQueue", b_queue, tokens, out)
    _loop_enqueue("cQueue", c_queue, tokens, out)

    _loop_dequeue("bQueue", b_queue, out)
    _loop_dequeue("cQueue", c_queue, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())