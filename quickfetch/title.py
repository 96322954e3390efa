"""The user@host title line and the separator beneath it."""

from __future__ import annotations

import functools
import getpass
import os
import socket
import sys
from dataclasses import dataclass
from typing import TextIO

from .output import BOLD, RESET, Printer

__all__ = [
    "TitleResult",
    "detect_title",
    "format_title",
    "format_separator",
    "print_title",
    "print_separator",
]


@dataclass(frozen=True)
class TitleResult:
    """The current user's name and the machine's host name."""

    user_name: str
    hostname: str


def _user_name() -> str:
    try:
        import pwd

        return pwd.getpwuid(os.getuid()).pw_name
    except (ImportError, KeyError, AttributeError):
        pass
    try:
        return getpass.getuser()
    except (OSError, KeyError, ImportError):
        return ""


@functools.lru_cache(maxsize=None)
def detect_title() -> TitleResult:
    """Detect the user and host names once and remember them."""
    return TitleResult(_user_name(), socket.gethostname())


def format_title(result: TitleResult, color: str = "") -> str:
    """Return ``user@host`` with both parts bold and coloured."""
    sequence = f"\033[{color}m" if color else ""

    def part(text: str) -> str:
        return f"{BOLD}{sequence}{text}{RESET}"

    return f"{part(result.user_name)}@{part(result.hostname)}"


def format_separator(result: TitleResult) -> str:
    """Return a row of dashes as long as the plain title."""
    return "-" * (len(result.user_name) + 1 + len(result.hostname))


def _stream(printer: Printer) -> TextIO:
    return printer.stream if printer.stream is not None else sys.stdout


def print_title(printer: Printer) -> None:
    """Write the title line."""
    _stream(printer).write(format_title(detect_title(), printer.color) + "\n")


def print_separator(printer: Printer) -> None:
    """Write the separator line."""
    _stream(printer).write(format_separator(detect_title()) + "\n")