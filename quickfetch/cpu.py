"""Processor model, core count and clock speed."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, replace
from pathlib import Path

from .output import Printer
from .text import remove_strings, substr_before_first

__all__ = ["CPUInfo", "parse_cpuinfo", "prettify_cpu_name", "detect_cpu", "format_cpu", "print_cpu"]

_REMOVE_STRINGS = (
    "(R)", "(r)", "(TM)", "(tm)",
    " CPU", " FPU", " APU", " Processor",
    " Dual-Core", " Quad-Core", " Six-Core", " Eight-Core", " Ten-Core",
    " 2-Core", " 4-Core", " 6-Core", " 8-Core", " 10-Core", " 12-Core", " 14-Core", " 16-Core",
)

_PROPS = {
    "model name": "name",
    "vendor_id": "vendor",
    "cpu cores": "cores",
    "cpu MHz": "mhz",
}

_FLOAT = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_INT = re.compile(r"\s*([-+]?\d+)")


def _parse_float(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _parse_int(text: str, default: int) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else default


def prettify_cpu_name(name: str) -> str:
    """Drop trademarks, core-count words and the clock suffix from a CPU name."""
    pretty = remove_strings(name, _REMOVE_STRINGS)
    pretty = substr_before_first(pretty, "@")
    return pretty.rstrip(" ")


@dataclass(frozen=True)
class CPUInfo:
    """What is known about the first processor; frequencies are in GHz."""

    name: str = ""
    vendor: str = ""
    physical_cores: int = 1
    procs_online: int = 1
    procs_available: int = 1
    bios_limit: float = 0.0
    scaling_max_freq: float = 0.0
    scaling_min_freq: float = 0.0
    info_max_freq: float = 0.0
    info_min_freq: float = 0.0
    proc_ghz: float = 0.0

    @property
    def pretty_name(self) -> str:
        return prettify_cpu_name(self.name)

    @property
    def num_procs(self) -> int:
        """Online processors, else configured ones, else physical cores."""
        if self.procs_online > 1:
            return self.procs_online
        if self.procs_available > 1:
            return self.procs_available
        return self.physical_cores

    @property
    def ghz(self) -> float:
        """The most trustworthy non-zero clock speed."""
        for value in (
            self.bios_limit,
            self.scaling_max_freq,
            self.info_max_freq,
            self.proc_ghz,
            self.scaling_min_freq,
            self.info_min_freq,
        ):
            if value != 0:
                return value
        return 0.0


def parse_cpuinfo(text: str) -> CPUInfo:
    """Parse the first processor block of a cpuinfo file."""
    fields: dict[str, str] = {}
    for line in text.splitlines():
        if fields.get("name") and not line:
            break
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        attr = _PROPS.get(key)
        if attr is None and key == "Hardware" and not fields.get("name"):
            attr = "name"
        if attr is not None and not fields.get(attr):
            fields[attr] = value.strip()
    return CPUInfo(
        name=fields.get("name", ""),
        vendor=fields.get("vendor", ""),
        physical_cores=_parse_int(fields.get("cores", ""), 1),
        proc_ghz=_parse_float(fields.get("mhz", "")) / 1000.0,
    )


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="ascii", errors="replace").strip()
    except OSError:
        return ""


def _count_cpu_list(text: str) -> int:
    text = text.strip()
    if not text:
        return 0
    total = 0
    try:
        for part in text.split(","):
            if "-" in part:
                first, last = part.split("-", 1)
                total += int(last) - int(first) + 1
            else:
                int(part)
                total += 1
    except ValueError:
        return 0
    return total


def detect_cpu(root: str = "/") -> CPUInfo:
    """Read processor information below ``root``.

    Raises OSError if the cpuinfo file can't be read and LookupError if it
    holds nothing useful.
    """
    base = Path(root)
    info = parse_cpuinfo(
        (base / "proc/cpuinfo").read_text(encoding="utf-8", errors="replace")
    )
    cpu_dir = base / "sys/devices/system/cpu"

    def freq(name: str) -> float:
        content = _read(cpu_dir / "cpufreq/policy0" / name) or _read(
            cpu_dir / "cpu0/cpufreq" / name
        )
        return _parse_float(content) / 1000.0 / 1000.0

    fallback = os.cpu_count() or 1
    info = replace(
        info,
        procs_online=_count_cpu_list(_read(cpu_dir / "online")) or fallback,
        procs_available=_count_cpu_list(_read(cpu_dir / "present")) or fallback,
        bios_limit=freq("bios_limit"),
        scaling_max_freq=freq("scaling_max_freq"),
        scaling_min_freq=freq("scaling_min_freq"),
        info_max_freq=freq("cpuinfo_max_freq"),
        info_min_freq=freq("cpuinfo_min_freq"),
    )
    if not info.name and not info.vendor and info.num_procs <= 1 and info.ghz <= 0:
        raise LookupError("No CPU info found in /proc/cpuinfo")
    return info


def format_cpu(info: CPUInfo) -> str:
    """Return the processor name with its thread count and clock speed."""
    if info.pretty_name:
        text = info.pretty_name
    elif info.name:
        text = info.name
    elif info.vendor:
        text = f"{info.vendor} unknown processor"
    else:
        text = "unknown processor"
    if info.num_procs > 1:
        text += f" ({info.num_procs})"
    if info.ghz > 0:
        text += f" @ {info.ghz:.9g}GHz"
    return text


def print_cpu(printer: Printer, root: str = "/") -> None:
    """Write the processor line."""
    try:
        info = detect_cpu(root)
    except (OSError, LookupError) as exc:
        printer.print_error("CPU", str(exc))
        return
    printer.print_value("CPU", format_cpu(info))