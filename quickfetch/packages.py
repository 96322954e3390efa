"""Counts of installed packages for common package managers."""

from __future__ import annotations

import os
import sqlite3
from contextlib import closing
from dataclasses import dataclass, fields
from pathlib import Path

from .output import Printer

__all__ = [
    "PackageCounts",
    "count_entries",
    "count_lines_containing",
    "count_sqlite_rows",
    "detect_packages",
    "format_packages",
    "print_packages",
]

MODULE_NAME = "Packages"


@dataclass(frozen=True)
class PackageCounts:
    """Installed packages per manager, plus the Manjaro branch if any."""

    pacman: int = 0
    dpkg: int = 0
    rpm: int = 0
    xbps: int = 0
    flatpak: int = 0
    snap: int = 0
    manjaro_branch: str = ""

    @property
    def total(self) -> int:
        return sum(
            getattr(self, field.name) for field in fields(self) if field.type in (int, "int")
        )


def count_entries(path: str | os.PathLike[str], want_dirs: bool) -> int:
    """Count directories (or regular files) in ``path``; 0 if unreadable."""
    try:
        with os.scandir(path) as entries:
            if want_dirs:
                return sum(1 for entry in entries if entry.is_dir(follow_symlinks=False))
            return sum(1 for entry in entries if entry.is_file(follow_symlinks=False))
    except OSError:
        return 0


def count_lines_containing(path: str | os.PathLike[str], needle: str) -> int:
    """Count lines of a file that contain ``needle``; 0 if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as file:
            return sum(1 for line in file if needle in line)
    except OSError:
        return 0


def count_sqlite_rows(path: str | os.PathLike[str], table: str) -> int:
    """Count the rows of ``table`` in an SQLite file; 0 on any failure."""
    if not os.path.isfile(path):
        return 0
    quoted = table.replace('"', '""')
    try:
        uri = Path(path).resolve().as_uri() + "?mode=ro"
        with closing(sqlite3.connect(uri, uri=True)) as connection:
            row = connection.execute(f'SELECT COUNT(*) FROM "{quoted}"').fetchone()
    except (sqlite3.Error, OSError, ValueError):
        return 0
    return int(row[0]) if row else 0


def _read_prop(path: Path, key: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as file:
            for line in file:
                name, sep, value = line.partition("=")
                if sep and name.strip() == key:
                    return value.strip().strip("\"'")
    except OSError:
        return None
    return ""


def detect_packages(root: str = "/") -> PackageCounts:
    """Count packages below ``root``.

    Raises LookupError when no package manager reports any package.
    """
    base = Path(root)
    snap = count_entries(base / "snap", True)
    branch = _read_prop(base / "etc/pacman-mirrors.conf", "Branch")
    if branch is None:
        branch = ""
    elif not branch:
        branch = "stable"
    counts = PackageCounts(
        pacman=count_entries(base / "var/lib/pacman/local", True),
        dpkg=count_lines_containing(base / "var/lib/dpkg/status", "Status: "),
        rpm=count_sqlite_rows(base / "var/lib/rpm/rpmdb.sqlite", "Packages"),
        xbps=count_entries(base / "var/db/xbps", False),
        flatpak=count_entries(base / "var/lib/flatpak/app", True),
        snap=max(snap - 1, 0),
        manjaro_branch=branch,
    )
    if counts.total == 0:
        raise LookupError("No packages from known package managers found")
    return counts


def format_packages(counts: PackageCounts) -> str:
    """Return the non-zero counts as ``n (manager)`` joined by commas."""
    parts = []
    if counts.pacman:
        part = f"{counts.pacman} (pacman)"
        if counts.manjaro_branch:
            part += f"[{counts.manjaro_branch}]"
        parts.append(part)
    for name in ("dpkg", "rpm", "xbps", "flatpak", "snap"):
        number = getattr(counts, name)
        if number:
            parts.append(f"{number} ({name})")
    return ", ".join(parts)


def print_packages(printer: Printer, root: str = "/") -> None:
    """Write the package counts."""
    try:
        counts = detect_packages(root)
    except LookupError as exc:
        printer.print_error(MODULE_NAME, str(exc))
        return
    printer.print_value(MODULE_NAME, format_packages(counts))