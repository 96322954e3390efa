"""Battery charge and status from the power-supply class directory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .output import Printer

__all__ = ["BatteryInfo", "read_battery", "format_battery", "find_batteries", "print_battery"]

MODULE_NAME = "Battery"
DEFAULT_DIR = "/sys/class/power_supply/"


@dataclass(frozen=True)
class BatteryInfo:
    """Attributes of one battery; empty strings where nothing was read."""

    manufacturer: str = ""
    model: str = ""
    technology: str = ""
    capacity: str = ""
    status: str = ""


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace").strip()
    except OSError:
        return ""


def read_battery(directory: str | os.PathLike[str]) -> BatteryInfo:
    """Read one battery directory.

    An ``Unknown`` status counts as no status. Raises LookupError when
    neither capacity nor status could be read.
    """
    path = Path(directory)
    status = _read(path / "status")
    if status.lower() == "unknown":
        status = ""
    info = BatteryInfo(
        manufacturer=_read(path / "manufacturer"),
        model=_read(path / "model_name"),
        technology=_read(path / "technology"),
        capacity=_read(path / "capacity"),
        status=status,
    )
    if not info.capacity and not info.status:
        raise LookupError(
            f"No file in {path} could be read or all battery options are disabled"
        )
    return info


def format_battery(info: BatteryInfo) -> str:
    """Return ``capacity% [status]``; a ``Full`` status is left out."""
    show_status = bool(info.status) and info.status.lower() != "full"
    text = ""
    if info.capacity:
        text += f"{info.capacity}%"
        if show_status:
            text += " ["
    if show_status:
        text += info.status
        if info.capacity:
            text += "]"
    return text


def find_batteries(base_dir: str = DEFAULT_DIR) -> list[Path]:
    """Return the sub-directories of ``base_dir`` that hold a capacity file.

    Raises ValueError for an empty path, OSError if the directory can't be
    opened and LookupError if it holds no battery.
    """
    if not base_dir:
        raise ValueError("custom battery dir is an empty string")
    with os.scandir(base_dir) as entries:
        found = sorted(
            Path(entry.path)
            for entry in entries
            if os.path.exists(os.path.join(entry.path, "capacity"))
        )
    if not found:
        shown = base_dir if base_dir.endswith("/") else base_dir + "/"
        raise LookupError(f"{shown} doesn't contain any battery folder")
    return found


def print_battery(printer: Printer, base_dir: str = DEFAULT_DIR) -> None:
    """Write a line for each battery, numbered when there are several."""
    try:
        directories = find_batteries(base_dir)
    except (ValueError, OSError, LookupError) as exc:
        printer.print_error(MODULE_NAME, str(exc))
        return
    for number, directory in enumerate(directories, 1):
        index = 0 if len(directories) == 1 else number
        try:
            info = read_battery(directory)
        except LookupError as exc:
            printer.print_error(MODULE_NAME, str(exc), index)
            continue
        printer.print_value(MODULE_NAME, format_battery(info), index)