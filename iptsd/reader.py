"""Sequential reading of binary data."""

from __future__ import annotations

import struct
from typing import Any

__all__ = ["ReadError", "Reader"]


class ReadError(EOFError):
    """Raised when more data is requested than the reader has left."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Tried to read more data than available! "
            f"(requested {requested}, available {available})"
        )
        self.requested = requested
        self.available = available


class Reader:
    """Reads chunks and packed values from a byte buffer, front to back."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        view = memoryview(data)
        self._data = view if view.format == "B" and view.ndim == 1 else view.cast("B")
        self._index = 0

    def __len__(self) -> int:
        """The number of bytes that have not been read yet."""
        return len(self._data) - self._index

    def _check(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Size must not be negative, got {size}")
        if size > len(self):
            raise ReadError(size, len(self))

    def skip(self, size: int) -> None:
        """Move the current position forward by ``size`` bytes."""
        self._check(size)
        self._index += size

    def subspan(self, size: int) -> memoryview:
        """Split off the next ``size`` bytes as a view into the data."""
        self._check(size)
        chunk = self._data[self._index : self._index + size]
        self._index += size
        return chunk

    def read(self, size: int) -> bytes:
        """Return a copy of the next ``size`` bytes."""
        return bytes(self.subspan(size))

    def sub(self, size: int) -> Reader:
        """Split off the next ``size`` bytes as a new reader."""
        return Reader(self.subspan(size))

    def unpack(self, fmt: str) -> Any:
        """Read a value packed with the given :mod:`struct` format.

        Returns the value itself if the format holds one field, else a tuple.
        """
        values = struct.unpack(fmt, self.subspan(struct.calcsize(fmt)))
        return values[0] if len(values) == 1 else values