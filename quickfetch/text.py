"""Small string helpers used when cleaning up detected values."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "remove_strings",
    "remove_suffix_ignore_case",
    "starts_with_ignore_case",
    "substr_before_first",
    "substr_before_last",
    "substr_after_first",
    "substr_after_last",
]


def remove_strings(text: str, strings: Iterable[str]) -> str:
    """Remove every occurrence of each string, one string after another.

    Empty strings are ignored.
    """
    for needle in strings:
        if needle:
            text = text.replace(needle, "")
    return text


def remove_suffix_ignore_case(text: str, suffix: str) -> str:
    """Strip ``suffix`` from the end of ``text`` if it matches, ignoring case."""
    if not suffix or len(suffix) > len(text):
        return text
    if text[-len(suffix):].lower() == suffix.lower():
        return text[: -len(suffix)]
    return text


def starts_with_ignore_case(text: str, prefix: str) -> bool:
    """Return True if ``text`` starts with ``prefix``, ignoring case."""
    return text[: len(prefix)].lower() == prefix.lower()


def substr_before_first(text: str, char: str) -> str:
    """Return the part before the first ``char``, or ``text`` if absent."""
    index = text.find(char)
    return text if index < 0 else text[:index]


def substr_before_last(text: str, char: str) -> str:
    """Return the part before the last ``char``, or ``text`` if absent."""
    index = text.rfind(char)
    return text if index < 0 else text[:index]


def substr_after_first(text: str, char: str) -> str:
    """Return the part after the first ``char``, or ``text`` if absent."""
    index = text.find(char)
    return text if index < 0 else text[index + len(char):]


def substr_after_last(text: str, char: str) -> str:
    """Return the part after the last ``char``, or ``text`` if absent."""
    index = text.rfind(char)
    return text if index < 0 else text[index + len(char):]