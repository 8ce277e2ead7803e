"""A minimal command shell with one-letter commands that run system programs."""

from __future__ import annotations

import re
import subprocess
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

PROMPT = "linux arl127|> "
SEPARATORS = re.compile(r"[ ,\t\n]+")

HELP_TEXT = (
    "\nOperating Systems Fall 2022 || Lab 01 - Linux Shell\n\n"
    "Commands:\n\n"
    "C file1 file2           Copy; create file2, copy all bytes of file1 to file2 without deleting file1.\n"
    "D file                  Delete; delete the named file.\n"
    "E comment               Echo; display comment on screen followed by a new line.\n"
    "H                       Help; display the user manual.\n"
    "L                       List; list the contents of the current directory.\n"
    "M file                  Make; create the named text file by launching text editor.\n"
    "P file                  Print; display the contents of the named file on screen.\n"
    "Q                       Quit; end execution of the shell.\n"
    "W                       Wipe; clear the screen.\n"
    "X program               Execute; executes the named program.\n\n"
)

UNRECOGNIZED = "Unrecognized command. Enter 'H' for help manual"
FAREWELL = "\n\n shell: Terminating successfully\n"

# One-letter commands that stand for a system program.
PROGRAMS = {
    "W": "clear",
    "M": "nano",
    "P": "more",
    "L": "ls",
    "D": "rm",
    "C": "cp",
}
BUILTINS = frozenset({"Q", "E", "H"})

Runner = Callable[[Sequence[str]], object]


@dataclass(frozen=True)
class Command:
    """A parsed command line: the command word and its arguments."""

    name: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> tuple[str, ...]:
        """Return the command word followed by its arguments."""
        return (self.name, *self.args)


def parse_command(line: str) -> Command:
    """Split ``line`` on spaces, commas, tabs and newlines into a command."""
    tokens = [token for token in SEPARATORS.split(line) if token]
    if not tokens:
        return Command("")
    return Command(tokens[0], tuple(tokens[1:]))


def resolve(command: Command) -> list[str] | None:
    """Return the program and arguments to run for ``command``.

    Built-in commands (Q, E, H) return None. An unknown command, or X
    without a program name, raises ValueError.
    """
    if command.name in BUILTINS:
        return None
    if command.name in PROGRAMS:
        return [PROGRAMS[command.name], *command.args]
    if command.name == "X":
        if not command.args:
            raise ValueError("X needs the name of a program to execute")
        return list(command.args)
    raise ValueError(UNRECOGNIZED)


def _run_program(argv: Sequence[str]) -> object:
    return subprocess.run(list(argv), check=False)


def run_shell(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    runner: Runner | None = None,
) -> None:
    """Read commands from ``stdin`` until Q or end of input, running each one."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    runner = _run_program if runner is None else runner

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        command = parse_command(line)

        if command.name == "Q":
            break
        if command.name == "E":
            if command.args:
                stdout.write(command.args[0] + "\n")
            continue
        if command.name == "H":
            stdout.write(HELP_TEXT)
            continue

        try:
            argv = resolve(command)
        except ValueError:
            stdout.write(UNRECOGNIZED + "\n")
            continue
        if argv is None:
            continue
        stdout.flush()
        try:
            runner(argv)
        except OSError as error:
            stdout.write(f"shell: {argv[0]}: {error.strerror or error}\n")

    stdout.write(FAREWELL)
    stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shell on standard input and output."""
    del argv
    run_shell(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())