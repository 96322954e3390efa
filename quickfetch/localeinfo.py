"""The system locale."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .output import Printer

__all__ = ["detect_locale", "print_locale"]

DEFAULT_CONF = "/etc/locale.conf"
_ENV_VARS = ("LANG", "LC_ALL", "LC_CTYPE", "LC_MESSAGES")


def _read_prop(path: str, key: str) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace") as file:
            for line in file:
                name, sep, value = line.partition("=")
                if sep and name.strip() == key:
                    return value.strip().strip("\"'")
    except OSError:
        pass
    return ""


def detect_locale(
    conf_path: str | None = DEFAULT_CONF,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the locale from the config file or the environment.

    Raises LookupError if none is set.
    """
    env = os.environ if environ is None else environ
    locale = _read_prop(conf_path, "LANG") if conf_path else ""
    if not locale:
        locale = next((env[name] for name in _ENV_VARS if env.get(name)), "")
    if not locale:
        raise LookupError("No locale found")
    return locale


def print_locale(
    printer: Printer,
    conf_path: str | None = DEFAULT_CONF,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Write the locale."""
    try:
        locale = detect_locale(conf_path, environ)
    except LookupError as exc:
        printer.print_error("Locale", str(exc))
        return
    printer.print_value("Locale", locale)