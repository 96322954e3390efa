"""Writing keys, values and errors to the terminal."""

from __future__ import annotations

import sys
from typing import TextIO

BOLD = "\033[1m"
RESET = "\033[0m"
ERROR_COLOR = "\033[31m"
BLOCK = "   "


class Printer:
    """Writes module lines as a coloured key followed by a value.

    ``color`` holds SGR parameters such as ``"34"`` or ``"1;36"``; an empty
    string leaves the key uncoloured apart from bold.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        color: str = "",
        show_errors: bool = False,
    ) -> None:
        self.stream = stream
        self.color = color
        self.show_errors = show_errors

    def _write(self, text: str) -> None:
        (self.stream if self.stream is not None else sys.stdout).write(text)

    def _color_sequence(self) -> str:
        return f"\033[{self.color}m" if self.color else ""

    def print_key(self, key: str, index: int = 0) -> None:
        """Write the key, numbered when ``index`` is positive, and ': '."""
        label = f"{key} {index}" if index > 0 else key
        self._write(f"{BOLD}{self._color_sequence()}{label}{RESET}: ")

    def print_value(self, key: str, value: str, index: int = 0) -> None:
        """Write a full line: the key followed by ``value``."""
        self.print_key(key, index)
        self._write(f"{value}\n")

    def print_error(self, key: str, message: str, index: int = 0) -> None:
        """Write an error line for ``key`` if errors are shown."""
        if not self.show_errors:
            return
        self.print_key(key, index)
        self._write(f"{ERROR_COLOR}{message}{RESET}\n")

    def print_break(self) -> None:
        """Write an empty line."""
        self._write("\n")

    def print_colors(self) -> None:
        """Write the two rows of the 16-colour palette."""
        normal = "".join(f"\033[4{i}m{BLOCK}" for i in range(8))
        bright = "".join(f"\033[48;5;{i}m{BLOCK}" for i in range(8, 16))
        self._write(f"{normal}{RESET}\n")
        self._write(f"{bright}{RESET}\n")

    def print_custom(self, key: str, value: str) -> None:
        """Write a user-defined key and value."""
        self.print_value(key, value)