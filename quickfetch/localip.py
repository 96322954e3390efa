"""Local IP addresses of the network interfaces."""

from __future__ import annotations

import socket
from collections.abc import Iterable, Mapping
from typing import Any

import psutil

from .output import Printer

__all__ = ["filter_addresses", "collect_addresses", "print_local_ip"]

MODULE_NAME = "Local Ip"
LOOPBACK_NAME = "lo"


def _plain_address(address: str) -> str:
    """Drop an IPv6 zone suffix such as ``%eth0``."""
    return address.split("%", 1)[0]


def filter_addresses(
    interfaces: Mapping[str, Iterable[Any]],
    show_loopback: bool = False,
    show_ipv4: bool = True,
    show_ipv6: bool = False,
) -> list[tuple[str, str]]:
    """Select the addresses to show from ``{name: [address, ...]}``.

    Each address needs ``family`` and ``address`` attributes, as the entries
    of ``psutil.net_if_addrs()`` have. Returns ``(interface, address)``
    pairs in the order given; families other than IPv4 and IPv6 are skipped.
    """
    selected: list[tuple[str, str]] = []
    for name, addresses in interfaces.items():
        if name == LOOPBACK_NAME and not show_loopback:
            continue
        for entry in addresses:
            if not entry.address:
                continue
            if entry.family == socket.AF_INET:
                if show_ipv4:
                    selected.append((name, entry.address))
            elif entry.family == socket.AF_INET6:
                if show_ipv6:
                    selected.append((name, _plain_address(entry.address)))
    return selected


def collect_addresses(
    show_loopback: bool = False,
    show_ipv4: bool = True,
    show_ipv6: bool = False,
) -> list[tuple[str, str]]:
    """Return the selected addresses of this machine's interfaces."""
    return filter_addresses(psutil.net_if_addrs(), show_loopback, show_ipv4, show_ipv6)


def print_local_ip(
    printer: Printer,
    show_loopback: bool = False,
    show_ipv4: bool = True,
    show_ipv6: bool = False,
) -> None:
    """Write one line per selected interface address."""
    try:
        addresses = collect_addresses(show_loopback, show_ipv4, show_ipv6)
    except (OSError, psutil.Error) as exc:
        printer.print_error(MODULE_NAME, f"getting interface addresses failed: {exc}")
        return
    for name, address in addresses:
        printer.print_value(f"{MODULE_NAME} ({name})", address)