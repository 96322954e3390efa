"""Kernel name and release."""

from __future__ import annotations

import platform

from .output import Printer

__all__ = ["detect_kernel", "print_kernel"]


def detect_kernel() -> platform.uname_result:
    """Return the system name, kernel release and kernel version."""
    return platform.uname()


def print_kernel(printer: Printer) -> None:
    """Write the kernel release."""
    printer.print_value("Kernel", detect_kernel().release)