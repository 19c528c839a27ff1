"""A file handle with character-level reading, writing and seeking."""

from __future__ import annotations

import argparse
import os
import sys
from enum import IntEnum
from typing import BinaryIO

_ENCODING = "latin-1"


class Whence(IntEnum):
    """Reference point for :meth:`TextFile.seek`."""

    SEEK_SET = os.SEEK_SET
    SEEK_CUR = os.SEEK_CUR
    SEEK_END = os.SEEK_END


def _binary_mode(mode: str) -> str:
    mode = mode.replace("t", "")
    return mode if "b" in mode else mode + "b"


class TextFile:
    """An optionally open file; each character is stored as one byte (Latin-1)."""

    def __init__(self) -> None:
        self._file: BinaryIO | None = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def _require(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("no file is open")
        return self._file

    def open(self, name: str, mode: str = "r", close_if_open: bool = True) -> None:
        """Open ``name`` with a C-style ``mode``, closing any file already open.

        With ``close_if_open`` false an already open file makes this fail.
        """
        if not close_if_open and self._file is not None:
            raise ValueError("a file is already open")
        self.close()
        self._file = open(name, _binary_mode(mode))

    def close(self) -> None:
        """Close the file if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def seek(self, offset: int, whence: Whence = Whence.SEEK_SET) -> int:
        """Move the position and return the new one."""
        return self._require().seek(offset, Whence(whence))

    def seek_start(self) -> int:
        """Move to the start of the file."""
        return self.seek(0, Whence.SEEK_SET)

    def seek_end(self) -> int:
        """Move to the end of the file."""
        return self.seek(0, Whence.SEEK_END)

    def read(self) -> str:
        """Return the next character, or an empty string at the end."""
        return self._require().read(1).decode(_ENCODING)

    def write(self, data: int | str) -> int:
        """Write a character code or a string.

        A character code is returned as given; for a string the number of
        characters written is returned.
        """
        f = self._require()
        if isinstance(data, int):
            f.write(bytes([data]))
            return data
        f.write(data.encode(_ENCODING))
        return len(data)

    def __lshift__(self, text: str) -> TextFile:
        self.write(text)
        return self

    def read_all(self) -> str:
        """Return everything from the current position to the end."""
        if self._file is None:
            return ""
        return self._file.read().decode(_ENCODING)

    def swap(self, other: TextFile) -> None:
        """Exchange the open files of two instances."""
        self._file, other._file = other._file, self._file

    def __enter__(self) -> TextFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def main(argv=None) -> int:
    """Print a file twice, rewinding between the two passes."""
    arg_parser = argparse.ArgumentParser(description="Print a file twice.")
    arg_parser.add_argument("path", nargs="?", default="test.dat")
    args = arg_parser.parse_args(argv)

    with TextFile() as f:
        try:
            f.open(args.path, "r")
        except OSError:
            print("Can not open file!...", file=sys.stderr)
            return 1
        print(f.read_all())
        f.seek_start()
        print(f.read_all())
    return 0