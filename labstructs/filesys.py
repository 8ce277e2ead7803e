"""A tiny file system stored on a floppy disc image.

Sector 256 holds the usage map (one byte per sector, ``0xFF`` when taken)
and sector 257 the directory: 32 entries of 16 bytes each, holding an
8-byte name, a type byte (``t`` for text, ``x`` for executable), the
starting sector and the number of sectors the file spans.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

SECTOR_SIZE = 512
MAP_SECTOR = 256
DIRECTORY_SECTOR = 257
ENTRY_SIZE = 16
NAME_LENGTH = 8
MAP_SECTORS = 256
USED = 0xFF
TRACKED_BYTES = 261632  # bytes covered by the map, occupied or not
IMAGE_NAME = "floppya.img"

_MAP_OFFSET = SECTOR_SIZE * MAP_SECTOR
_DIR_OFFSET = SECTOR_SIZE * DIRECTORY_SECTOR
_MIN_IMAGE_SIZE = SECTOR_SIZE * (DIRECTORY_SECTOR + 1)

USAGE = (
    "Available commands: \n"
    "filesys D filename --> Delete the named file from the disc\n"
    "filesys L          --> List the files on the disc\n"
    "filesys M filename --> Create a text file, and store it to disc\n"
    "filesys P filename --> Read the named file, and print it to screen\n"
)


class DiskError(Exception):
    """Raised when a request on the disc image cannot be granted."""


@dataclass(frozen=True)
class DirEntry:
    """One file recorded in the directory sector."""

    offset: int
    name: str
    kind: str
    start: int
    count: int

    @property
    def is_executable(self) -> bool:
        """Return True when the entry is marked as an executable."""
        return self.kind in ("x", "X")

    @property
    def filename(self) -> str:
        """Return the name with its ``.t`` or ``.x`` extension."""
        return self.name + (".t" if self.kind in ("t", "T") else ".x")


def comma_separate(n: int) -> str:
    """Return ``n`` written with commas between groups of three digits."""
    return f"{n:,}"


class Disk:
    """A disc image held in memory, with its map and directory."""

    def __init__(self, image: bytes | bytearray) -> None:
        """Wrap ``image``; it must reach at least past the directory sector."""
        data = bytearray(image)
        if len(data) < _MIN_IMAGE_SIZE:
            raise DiskError(
                f"a disc image needs at least {_MIN_IMAGE_SIZE} bytes, got {len(data)}"
            )
        self._image = data

    @classmethod
    def open(cls, path: str) -> Disk:
        """Load the disc image stored at ``path``."""
        try:
            with open(path, "rb") as stream:
                return cls(stream.read())
        except FileNotFoundError:
            raise DiskError(f"{path} not found") from None

    @property
    def image(self) -> bytes:
        """Return a copy of the whole disc image."""
        return bytes(self._image)

    def entries(self) -> list[DirEntry]:
        """Return the directory entries up to the first empty one."""
        found: list[DirEntry] = []
        for offset in range(0, SECTOR_SIZE, ENTRY_SIZE):
            raw = self._image[_DIR_OFFSET + offset : _DIR_OFFSET + offset + ENTRY_SIZE]
            if raw[0] == 0:
                break
            name = bytes(b for b in raw[:NAME_LENGTH] if b).decode("latin-1")
            found.append(DirEntry(offset, name, chr(raw[8]), raw[9], raw[10]))
        return found

    def _lookup(self, name: str) -> DirEntry | None:
        return next((entry for entry in self.entries() if entry.name == name), None)

    def list_files(self) -> str:
        """Return the directory listing with the space used and remaining."""
        entries = self.entries()
        used = sum(SECTOR_SIZE * entry.count for entry in entries)
        names = "".join(f"{entry.filename} " for entry in entries)
        return (
            "\nDisk directory:\n"
            f"{names}"
            f"\n\nSpace Used (bytes): {comma_separate(used)}"
            f"\nSpace Remaining (bytes): {comma_separate(TRACKED_BYTES - used)}\n"
        )

    def find_printable(self, name: str) -> DirEntry:
        """Return the entry of the text file ``name``."""
        if len(name) > NAME_LENGTH:
            raise DiskError(
                "The filename passed is greater than the maximum length "
                f"permitted ({NAME_LENGTH} characters)"
            )
        entry = self._lookup(name)
        if entry is None:
            raise DiskError(
                f"Your request to print file '{name}' could not be granted "
                "because the file does not exist"
            )
        if entry.is_executable:
            raise DiskError(
                f"Your request to print file '{name}' could not be granted "
                "because it is an executable"
            )
        return entry

    def read_file(self, name: str) -> str:
        """Return the text of file ``name`` up to its first NUL byte."""
        entry = self.find_printable(name)
        start = SECTOR_SIZE * entry.start
        data = bytes(self._image[start : start + SECTOR_SIZE * entry.count])
        return data.split(b"\0", 1)[0].decode("latin-1")

    def make_file(self, name: str, text: str) -> DirEntry:
        """Store ``text`` as a one-sector text file called ``name``.

        Names longer than eight characters are cut to eight; text beyond
        511 bytes is dropped so the sector always ends in a NUL.
        """
        if not name:
            raise DiskError("A file name must be provided for the make operation")
        encoded_name = name.encode("latin-1")[:NAME_LENGTH]
        stored_name = encoded_name.decode("latin-1")
        if self._lookup(stored_name) is not None:
            raise DiskError(
                f"Your request to create file '{name}' could not be granted "
                "because it already exists"
            )
        offset = next(
            (
                off
                for off in range(0, SECTOR_SIZE, ENTRY_SIZE)
                if self._image[_DIR_OFFSET + off] == 0
            ),
            None,
        )
        if offset is None:
            raise DiskError("Insufficient disc space; no free directory entry was found")
        sector = next(
            (s for s in range(MAP_SECTORS) if self._image[_MAP_OFFSET + s] != USED),
            None,
        )
        if sector is None:
            raise DiskError("Insufficient free sectors to write the file")
        if SECTOR_SIZE * (sector + 1) > len(self._image):
            raise DiskError(f"sector {sector} lies beyond the end of the disc image")

        content = text.encode("latin-1")[: SECTOR_SIZE - 1].ljust(SECTOR_SIZE, b"\0")
        start = SECTOR_SIZE * sector
        self._image[start : start + SECTOR_SIZE] = content
        self._image[_MAP_OFFSET + sector] = USED

        base = _DIR_OFFSET + offset
        self._image[base : base + NAME_LENGTH] = encoded_name.ljust(NAME_LENGTH, b"\0")
        self._image[base + 8] = ord("t")
        self._image[base + 9] = sector
        self._image[base + 10] = 1
        return DirEntry(offset, stored_name, "t", sector, 1)

    def delete_file(self, name: str) -> DirEntry:
        """Remove ``name`` from the directory and free its sectors."""
        entry = self._lookup(name)
        if entry is None:
            raise DiskError(
                f"Your request to delete file '{name}' could not be granted "
                "because it does not exist"
            )
        self._image[_DIR_OFFSET + entry.offset] = 0
        for sector in range(entry.start, min(entry.start + entry.count, MAP_SECTORS)):
            self._image[_MAP_OFFSET + sector] = 0
        return entry

    def save(self, path: str) -> None:
        """Write the whole disc image to ``path``."""
        with open(path, "wb") as stream:
            stream.write(self._image)


def main(argv: list[str] | None = None) -> int:
    """List, print, make or delete files on the disc image."""
    parser = argparse.ArgumentParser(description="Work with files on a floppy disc image.")
    parser.add_argument("command", nargs="?", help="L, P, M or D")
    parser.add_argument("filename", nargs="?", help="file to print, make or delete")
    parser.add_argument("--image", default=IMAGE_NAME, help="path of the disc image")
    args = parser.parse_args(argv)

    if args.command is None:
        print(
            "The number of command line arguments received does not map "
            "to any of the available commands\n"
        )
        print(USAGE, end="")
        return 1
    if len(args.command) != 1 or args.command not in "LlDdMmPp":
        print(f"'{args.command}' is not one of the four available commands\n")
        print(USAGE, end="")
        return 1
    command = args.command.upper()

    try:
        disk = Disk.open(args.image)
    except DiskError as error:
        print(error)
        return 0

    operations = {"P": "print", "M": "make", "D": "delete"}
    if command in operations and args.filename is None:
        print(f"A filename must be provided for the {operations[command]} operation")
        return 1

    try:
        if command == "L":
            sys.stdout.write(disk.list_files())
        elif command == "P":
            entry = disk.find_printable(args.filename)
            print(f"file '{entry.name}' was found")
            print(f"the starting sector on disc is {entry.start}, ", end="")
            print(f"and it spans {entry.count} sector(s)")
            print("\nfile contents >>")
            sys.stdout.write(disk.read_file(args.filename))
        elif command == "M":
            sys.stdout.write("Enter text for the contents of the file >> ")
            sys.stdout.flush()
            disk.make_file(args.filename, sys.stdin.readline())
        else:
            disk.delete_file(args.filename)
            print(f"'{args.filename}' has been successfully deleted")
    except DiskError as error:
        print(error)
        return 1

    disk.save(args.image)
    return 0


if __name__ == "__main__":
    sys.exit(main())