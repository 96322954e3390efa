"""System uptime."""

from __future__ import annotations

from .output import Printer

__all__ = ["split_uptime", "format_uptime", "read_uptime", "print_uptime"]

DEFAULT_PATH = "/proc/uptime"


def split_uptime(seconds: int) -> tuple[int, int, int, int]:
    """Split seconds into days, hours, minutes and seconds."""
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)
    return days, hours, minutes, secs


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count <= 1 else 's'}"


def format_uptime(seconds: int) -> str:
    """Return a human readable uptime."""
    days, hours, minutes, secs = split_uptime(seconds)
    if days == 0 and hours == 0 and minutes == 0:
        return f"{secs} seconds"
    text = ""
    if days > 0:
        text += _plural(days, "day") + ", "
    if hours > 0:
        text += _plural(hours, "hour") + ", "
    if minutes > 0:
        text += _plural(minutes, "min")
    return text


def read_uptime(path: str = DEFAULT_PATH) -> int:
    """Read whole seconds of uptime from a ``/proc/uptime`` style file."""
    with open(path, encoding="ascii", errors="replace") as file:
        fields = file.read().split()
    if not fields:
        raise ValueError(f"{path} is empty")
    return int(float(fields[0]))


def print_uptime(printer: Printer, path: str = DEFAULT_PATH) -> None:
    """Write the uptime."""
    try:
        seconds = read_uptime(path)
    except (OSError, ValueError) as exc:
        printer.print_error("Uptime", str(exc))
        return
    printer.print_value("Uptime", format_uptime(seconds))