"""Number of running processes."""

from __future__ import annotations

import os

import psutil

from .output import Printer

__all__ = ["count_processes", "print_processes"]


def count_processes(proc_dir: str | None = None) -> int:
    """Count processes, from ``proc_dir`` if given, else from the system."""
    if proc_dir is None:
        return len(psutil.pids())
    with os.scandir(proc_dir) as entries:
        return sum(1 for entry in entries if entry.name.isdigit() and entry.is_dir())


def print_processes(printer: Printer, proc_dir: str | None = None) -> None:
    """Write the process count."""
    try:
        count = count_processes(proc_dir)
    except (OSError, psutil.Error) as exc:
        printer.print_error("Processes", str(exc))
        return
    printer.print_value("Processes", str(count))