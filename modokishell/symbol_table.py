"""Table of shell variables, which hold integers only."""

from __future__ import annotations

from collections.abc import Iterator

MAX_RECORDS = 1024
MAX_NAME_LENGTH = 49


class SymbolTable:
    """Variables in the order they were first defined."""

    def __init__(self) -> None:
        self._values: dict[str, int] = {}

    def store(self, name: str, value: int) -> None:
        """Set a variable, defining it if it is new."""
        if name not in self._values:
            if len(name) > MAX_NAME_LENGTH:
                raise ValueError(
                    f"variable name longer than {MAX_NAME_LENGTH} characters"
                )
            if len(self._values) >= MAX_RECORDS:
                raise OverflowError(f"more than {MAX_RECORDS} variables")
        self._values[name] = int(value)

    def get(self, name: str) -> int | None:
        """Return a variable's value, or None if it is not defined."""
        return self._values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)