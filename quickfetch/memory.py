"""Memory usage from ``/proc/meminfo``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .output import Printer

__all__ = ["MemoryInfo", "parse_meminfo", "read_memory", "format_memory", "print_memory"]

DEFAULT_PATH = "/proc/meminfo"

_FIELDS = {
    "MemTotal": "total",
    "Shmem": "shared",
    "MemFree": "free",
    "Buffers": "buffers",
    "Cached": "cached",
    "SReclaimable": "reclaimable",
}
_LINE = re.compile(r"^(\w+):\s*(\d+)")


@dataclass
class MemoryInfo:
    """Memory counters in kibibytes."""

    total: int = 0
    shared: int = 0
    free: int = 0
    buffers: int = 0
    cached: int = 0
    reclaimable: int = 0

    @property
    def used_mib(self) -> int:
        used = (
            self.total + self.shared - self.free - self.buffers - self.cached - self.reclaimable
        )
        return max(used, 0) // 1024

    @property
    def total_mib(self) -> int:
        return self.total // 1024

    @property
    def percentage(self) -> int:
        if self.total_mib == 0:
            return 0
        return int(self.used_mib / self.total_mib * 100)


def parse_meminfo(text: str) -> MemoryInfo:
    """Parse the contents of a meminfo file."""
    info = MemoryInfo()
    for line in text.splitlines():
        match = _LINE.match(line)
        if match and match.group(1) in _FIELDS:
            setattr(info, _FIELDS[match.group(1)], int(match.group(2)))
    return info


def read_memory(path: str = DEFAULT_PATH) -> MemoryInfo:
    """Read and parse a meminfo file; raise ValueError if nothing is found."""
    with open(path, encoding="ascii", errors="replace") as file:
        info = parse_meminfo(file.read())
    if info.used_mib == 0 and info.total_mib == 0:
        raise ValueError(f"{path} couldn't be parsed")
    return info


def format_memory(info: MemoryInfo) -> str:
    """Return ``used / total (percent)`` in MiB."""
    return f"{info.used_mib}MiB / {info.total_mib}MiB ({info.percentage}%)"


def print_memory(printer: Printer, path: str = DEFAULT_PATH) -> None:
    """Write the memory usage."""
    try:
        info = read_memory(path)
    except (OSError, ValueError) as exc:
        printer.print_error("Memory", str(exc))
        return
    printer.print_value("Memory", format_memory(info))