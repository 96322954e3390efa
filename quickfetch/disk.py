"""Disk usage of the root and home file systems or of chosen folders."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .output import Printer

__all__ = ["DiskUsage", "disk_usage_from_statvfs", "format_disk", "disk_key", "print_disk"]

MODULE_NAME = "Disk"
GIB = 1024 * 1024 * 1024


@dataclass(frozen=True)
class DiskUsage:
    """Used and total space in GiB, used inodes and percentage used."""

    used: int
    total: int
    files: int
    percentage: int


def disk_usage_from_statvfs(stat: Any) -> DiskUsage:
    """Build a DiskUsage from an ``os.statvfs`` result."""
    total = stat.f_blocks * stat.f_frsize // GIB
    available = stat.f_bfree * stat.f_frsize // GIB
    used = total - available
    percentage = int(used / total * 100) if total else 0
    return DiskUsage(used, total, stat.f_files - stat.f_ffree, percentage)


def format_disk(usage: DiskUsage) -> str:
    """Return ``used / total (percent)`` in GB."""
    return f"{usage.used}GB / {usage.total}GB ({usage.percentage}%)"


def disk_key(folder: str, show_folder: bool = True) -> str:
    """Return the key for a folder's line."""
    return f"{MODULE_NAME} ({folder})" if show_folder else MODULE_NAME


def _print_usage(printer: Printer, folder: str, stat: Any) -> None:
    printer.print_value(disk_key(folder), format_disk(disk_usage_from_statvfs(stat)))


def _print_folder(printer: Printer, folder: str) -> None:
    key = disk_key(folder)
    try:
        stat = os.statvfs(folder)
    except OSError as exc:
        printer.print_error(key, f"statvfs({folder!r}) failed: {exc.strerror or exc}")
        return
    _print_usage(printer, folder, stat)


def _statvfs_or_none(path: str) -> Any:
    try:
        return os.statvfs(path)
    except OSError:
        return None


def _print_default(printer: Printer) -> None:
    root = _statvfs_or_none("/")
    home = _statvfs_or_none("/home")
    if root is None and home is None:
        printer.print_error(disk_key("", False), "statvfs failed for both / and /home")
        return
    if root is not None:
        _print_usage(printer, "/", root)
    if home is not None and (root is None or root.f_fsid != home.f_fsid):
        _print_usage(printer, "/home", home)


def print_disk(printer: Printer, folders: str | Iterable[str] | None = None) -> None:
    """Write disk usage lines.

    Without ``folders`` the root and, if on another file system, ``/home``
    are shown. ``folders`` may be a colon separated string or a sequence.
    """
    if folders is None:
        _print_default(printer)
        return
    if isinstance(folders, str):
        stripped = folders.strip(":")
        names = stripped.split(":") if stripped else []
    else:
        names = list(folders)
    if not names:
        printer.print_error(
            disk_key("", False), "Custom disk folders string doesn't contain any folders"
        )
        return
    for folder in names:
        _print_folder(printer, folder)