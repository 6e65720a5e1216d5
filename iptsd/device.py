"""Information about the device that produced touch data."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

__all__ = ["DeviceInfo"]


@dataclass(frozen=True)
class DeviceInfo:
    """Vendor, product and buffer size of a device.

    The binary form is 16 bytes, little endian, with four bytes of padding
    after the product ID, as found in data dumps.
    """

    vendor: int
    product: int
    buffer_size: int

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<HH4xQ")
    SIZE: ClassVar[int] = _FORMAT.size

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> DeviceInfo:
        """Decode a device info block."""
        if len(data) != cls.SIZE:
            raise ValueError(
                f"DeviceInfo needs exactly {cls.SIZE} bytes, got {len(data)}"
            )
        vendor, product, buffer_size = cls._FORMAT.unpack(data)
        return cls(vendor, product, buffer_size)

    def to_bytes(self) -> bytes:
        """Encode the device info block."""
        try:
            return self._FORMAT.pack(self.vendor, self.product, self.buffer_size)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc