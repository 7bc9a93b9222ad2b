"""Byte-for-byte file copy used to place descriptors into the catalog."""

from __future__ import annotations

import os
from pathlib import Path

BUFFER_SIZE = 128 * 1024


class CopyError(OSError):
    """Raised when the source ends before its reported size was transferred."""

    def __init__(self, source: Path, destination: Path, transferred: int, expected: int) -> None:
        super().__init__(
            f"Copied {transferred} of {expected} bytes from {source} to {destination}"
        )
        self.source = source
        self.destination = destination
        self.transferred = transferred
        self.expected = expected


def copy_file(source: Path, destination: Path, *, buffer_size: int = BUFFER_SIZE) -> int:
    """Copy ``source`` over ``destination`` and return the number of bytes written."""
    with source.open("rb") as reader, destination.open("wb") as writer:
        size = os.fstat(reader.fileno()).st_size
        position = 0
        while position < size:
            chunk = reader.read(min(buffer_size, size - position))
            if not chunk:
                raise CopyError(source, destination, position, size)
            writer.write(chunk)
            position += len(chunk)
    return position


__all__ = ["BUFFER_SIZE", "CopyError", "copy_file"]
