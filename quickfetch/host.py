"""Host model name from DMI or the device tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .output import Printer

__all__ = ["HostInfo", "is_meaningful_host_value", "detect_host", "format_host", "print_host"]

_PLACEHOLDER_PREFIXES = ("to be filled", "to be set", "oem", "o.e.m.")
_PLACEHOLDER_VALUES = frozenset(
    value.lower()
    for value in (
        "None",
        "System Product",
        "System Product Name",
        "System Product Version",
        "System Name",
        "System Version",
        "Default string",
        "Undefined",
        "Not Specified",
        "Not Applicable",
        "INVALID",
        "Type1ProductConfigId",
        "All Series",
    )
)


@dataclass(frozen=True)
class HostInfo:
    """Product family, name and version as reported by the firmware."""

    family: str = ""
    name: str = ""
    version: str = ""


def _clean(value: str) -> str:
    return value.rstrip("\n").strip(" ")


def is_meaningful_host_value(value: str) -> bool:
    """Return False for empty values and vendor placeholders."""
    value = _clean(value)
    lowered = value.lower()
    return (
        bool(value)
        and not lowered.startswith(_PLACEHOLDER_PREFIXES)
        and lowered not in _PLACEHOLDER_VALUES
    )


def _read(root: Path, relative: str) -> str:
    try:
        text = (root / relative).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return ""
    return text.split("\x00", 1)[0]


def _dmi(root: Path, name: str) -> str:
    return _read(root, f"sys/devices/virtual/dmi/id/{name}") or _read(
        root, f"sys/class/dmi/id/{name}"
    )


def detect_host(root: str = "/") -> HostInfo:
    """Read host information below ``root``.

    Raises LookupError when neither family nor name is usable.
    """
    base = Path(root)
    family = _clean(_dmi(base, "product_family"))
    name = (
        _dmi(base, "product_name")
        or _read(base, "sys/firmware/devicetree/base/model")
        or _read(base, "tmp/sysinfo/model")
    )
    name = _clean(name)
    family_set = is_meaningful_host_value(family)
    name_set = is_meaningful_host_value(name)
    if name.startswith("Standard PC"):
        name = "KVM/QEMU " + name
    version = _clean(_dmi(base, "product_version"))
    if not family_set and not name_set:
        raise LookupError("neither family nor name is set by O.E.M.")
    return HostInfo(family, name, version)


def format_host(info: HostInfo) -> str:
    """Return the name (or family) followed by the version, if meaningful."""
    host = info.name if is_meaningful_host_value(info.name) else info.family
    if is_meaningful_host_value(info.version):
        host += " " + info.version
    return host


def print_host(printer: Printer, root: str = "/") -> None:
    """Write the host model."""
    try:
        info = detect_host(root)
    except LookupError as exc:
        printer.print_error("Host", str(exc))
        return
    printer.print_value("Host", format_host(info))