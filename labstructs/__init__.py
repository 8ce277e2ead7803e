"""Queues, a treap, an N-Queens solver, a mini shell and a toy floppy file system."""

__version__ = "0.1.0"

__all__ = [
    "bounded_queue",
    "circular_queue",
    "queue_demo",
    "treap",
    "nqueens",
    "shell",
    "filesys",
]