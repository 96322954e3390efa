"""Operating system name and version from os-release."""

from __future__ import annotations

import platform
from collections.abc import Sequence
from dataclasses import dataclass, replace

from .output import Printer

__all__ = ["OSRelease", "parse_os_release", "detect_os", "format_os", "print_os"]

DEFAULT_PATHS = ("/etc/os-release", "/usr/lib/os-release")


@dataclass(frozen=True)
class OSRelease:
    """Fields of an os-release file plus the kernel's system name and machine."""

    system_name: str = ""
    name: str = ""
    pretty_name: str = ""
    id: str = ""
    id_like: str = ""
    variant: str = ""
    variant_id: str = ""
    version: str = ""
    version_id: str = ""
    codename: str = ""
    build_id: str = ""
    architecture: str = ""


_KEYS = {
    "NAME": "name",
    "PRETTY_NAME": "pretty_name",
    "ID": "id",
    "ID_LIKE": "id_like",
    "VARIANT": "variant",
    "VARIANT_ID": "variant_id",
    "VERSION": "version",
    "VERSION_ID": "version_id",
    "VERSION_CODENAME": "codename",
    "BUILD_ID": "build_id",
}


def parse_os_release(text: str) -> OSRelease:
    """Parse the contents of an os-release file."""
    values: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        field = _KEYS.get(key.strip())
        if sep and field:
            values[field] = value.strip().strip("\"'")
    return OSRelease(**values)


def detect_os(
    paths: Sequence[str] = DEFAULT_PATHS,
    system_name: str | None = None,
    architecture: str | None = None,
) -> OSRelease:
    """Read the first readable os-release file of ``paths``.

    Raises OSError when none can be read.
    """
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="replace") as file:
                text = file.read()
        except OSError:
            continue
        return replace(
            parse_os_release(text),
            system_name=platform.system() if system_name is None else system_name,
            architecture=platform.machine() if architecture is None else architecture,
        )
    raise OSError("couldn't read " + " nor ".join(paths))


def format_os(release: OSRelease) -> str:
    """Return the name with version, variant and architecture added if missing."""
    text = (
        release.name
        or release.pretty_name
        or release.id
        or release.system_name
        or "Linux"
    )

    if release.version_id:
        if release.version_id not in text:
            text += " " + release.version_id
    elif release.version and release.version not in text:
        text += " " + release.version

    if release.variant:
        if release.variant not in text:
            text += f" ({release.variant})"
    elif release.variant_id and release.variant_id not in text:
        text += f" ({release.variant_id})"

    if release.architecture not in text:
        text += f" [{release.architecture}]"

    return text


def print_os(printer: Printer) -> None:
    """Write the operating system line."""
    try:
        release = detect_os()
    except OSError as exc:
        printer.print_error("OS", str(exc))
        return
    printer.print_value("OS", format_os(release))