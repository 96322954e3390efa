"""Display resolutions read from the DRM connector directories."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from .output import Printer

__all__ = [
    "Resolution",
    "parse_mode",
    "read_drm_modes",
    "round_refresh_rate",
    "format_resolution",
    "print_resolution",
]

MODULE_NAME = "Resolution"
DEFAULT_DRM_DIR = "/sys/class/drm/"

_MODE = re.compile(r"\s*([-+]?\d+)x\s*([-+]?\d+)")


@dataclass(frozen=True)
class Resolution:
    """Width and height in pixels and refresh rate in Hz (0 if unknown)."""

    width: int
    height: int
    refresh_rate: int = 0


def parse_mode(text: str) -> Resolution | None:
    """Parse a ``WIDTHxHEIGHT`` mode line; None if absent or zero-sized."""
    match = _MODE.match(text)
    if match is None:
        return None
    width, height = int(match.group(1)), int(match.group(2))
    if width == 0 or height == 0:
        return None
    return Resolution(width, height)


def read_drm_modes(drm_dir: str = DEFAULT_DRM_DIR) -> list[Resolution]:
    """Read the current mode of every connector below ``drm_dir``.

    Raises OSError if the directory can't be opened and LookupError when no
    connector reports a mode.
    """
    with os.scandir(drm_dir) as entries:
        names = sorted(entry.name for entry in entries)
    results = []
    for name in names:
        try:
            text = (Path(drm_dir) / name / "modes").read_text(
                encoding="ascii", errors="replace"
            )
        except OSError:
            continue
        mode = parse_mode(text)
        if mode is not None:
            results.append(mode)
    if not results:
        raise LookupError(
            f"Couldn't connect to a display server or find a resolution in {drm_dir}"
        )
    return results


def round_refresh_rate(rate: int) -> int:
    """Round a refresh rate to the nearest multiple of 5, with 145 as 144."""
    if rate <= 0:
        return 0
    remainder = rate % 5
    rate = rate + (5 - remainder) if remainder >= 3 else rate - remainder
    return 144 if rate == 145 else rate


def format_resolution(res: Resolution) -> str:
    """Return ``WxH`` with `` @ RHz`` when the refresh rate is known."""
    text = f"{res.width}x{res.height}"
    if res.refresh_rate > 0:
        text += f" @ {res.refresh_rate}Hz"
    return text


def print_resolution(printer: Printer, drm_dir: str = DEFAULT_DRM_DIR) -> None:
    """Write a line per display, numbered when there are several."""
    try:
        results = read_drm_modes(drm_dir)
    except OSError:
        printer.print_error(
            MODULE_NAME, f"Couldn't connect to a display server or open {drm_dir}"
        )
        return
    except LookupError as exc:
        printer.print_error(MODULE_NAME, str(exc))
        return
    for number, res in enumerate(results, 1):
        index = 0 if len(results) == 1 else number
        printer.print_value(MODULE_NAME, format_resolution(res), index)