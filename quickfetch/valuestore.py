"""A small case-insensitive name/value store."""

from __future__ import annotations


class ValueStore:
    """Maps names to string values; names compare without regard to case.

    Replacing a value keeps the name as it was first given.
    """

    def __init__(self) -> None:
        self._pairs: dict[str, tuple[str, str]] = {}

    def set(self, name: str, value: str) -> None:
        """Store ``value`` under ``name``, replacing any earlier value."""
        folded = name.lower()
        existing = self._pairs.get(folded)
        stored_name = existing[0] if existing is not None else name
        self._pairs[folded] = (stored_name, value)

    def get(self, name: str) -> str | None:
        """Return the value stored under ``name``, or None."""
        pair = self._pairs.get(name.lower())
        return None if pair is None else pair[1]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._pairs

    def __len__(self) -> int:
        return len(self._pairs)