"""HID report descriptions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

__all__ = ["ReportType", "Usage", "Report"]


class ReportType(enum.Enum):
    """The direction and purpose of a HID report."""

    INPUT = enum.auto()
    """Data coming from the device."""
    OUTPUT = enum.auto()
    """Data sent to the device."""
    FEATURE = enum.auto()
    """Data that can be queried and modified."""


@dataclass(frozen=True)
class Usage:
    """A HID usage tag together with its usage page."""

    page: int
    value: int


class Report:
    """Type, ID, size and usages of a HID report."""

    def __init__(
        self,
        type: ReportType,
        report_id: int | None,
        report_count: int,
        report_size: int,
        usages: Iterable[Usage],
    ) -> None:
        self.type = type
        self.id = report_id
        self.size = report_count * report_size
        """The total size of the report in bits."""
        self.usages: set[Usage] = set(usages)

    def __repr__(self) -> str:
        return (
            f"Report(type={self.type}, id={self.id}, size={self.size}, "
            f"usages={self.usages!r})"
        )

    def find_usage(self, page: int | Usage, value: int | None = None) -> bool:
        """Whether the report carries the given usage page / usage combination.

        ``page`` may also be a :class:`Usage`, in which case ``value`` is omitted.
        """
        if isinstance(page, Usage):
            if value is not None:
                raise TypeError("value must be omitted when a Usage is given")
            usage = page
        else:
            if value is None:
                raise TypeError("value is required when page is an integer")
            usage = Usage(page, value)
        return usage in self.usages

    def merge(self, other: Report) -> None:
        """Combine another report with the same type and ID into this one."""
        if self.type != other.type:
            raise ValueError("Cannot merge two reports of different types")
        if self.id != other.id:
            raise ValueError("Cannot merge two reports with different IDs")
        self.size += other.size
        self.usages |= other.usages