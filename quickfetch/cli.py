"""Command line entry point that prints every module in turn."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .battery import print_battery
from .cpu import print_cpu
from .disk import print_disk
from .host import print_host
from .kernel import print_kernel
from .localeinfo import print_locale
from .localip import print_local_ip
from .memory import print_memory
from .osinfo import print_os
from .output import Printer
from .packages import print_packages
from .processes import print_processes
from .resolution import print_resolution
from .title import print_separator, print_title
from .uptime import print_uptime

__all__ = ["main"]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quickfetch", description="Show information about this system."
    )
    parser.add_argument(
        "--color", default="", help="SGR parameters for keys, for example 34 or 1;36"
    )
    parser.add_argument(
        "--show-errors", action="store_true", help="print modules that failed"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print all modules and return the exit status."""
    args = _parser().parse_args(argv)
    printer = Printer(color=args.color, show_errors=args.show_errors)

    print_title(printer)
    print_separator(printer)
    print_os(printer)
    print_host(printer)
    print_kernel(printer)
    print_uptime(printer)
    print_processes(printer)
    print_packages(printer)
    print_resolution(printer)
    print_cpu(printer)
    print_memory(printer)
    print_disk(printer)
    print_battery(printer)
    print_local_ip(printer)
    print_locale(printer)
    printer.print_break()
    printer.print_colors()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())