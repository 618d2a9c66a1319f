"""Splitting of input lines into shell tokens."""

from __future__ import annotations

MAX_TOKENS = 50
MAX_COMMAND_TOKENS = 10

_OPERATORS = {"&&", "||"}


class TokenizeError(ValueError):
    """Raised when a line cannot be split into tokens."""


def tokenize_line(line: str) -> list[str]:
    """Split a line into words and the separators ``&&``, ``||``, ``;`` and ``=``.

    Words are separated by single spaces; runs of spaces yield no empty words.
    """
    tokens: list[str] = []
    cursor = 0

    def add_word(position: int) -> int:
        size = position - cursor
        if size < 0:
            raise TokenizeError(f"malformed operator near position {position}")
        if size:
            tokens.append(line[cursor:position])
        return position + 1

    length = len(line)
    for position in range(length + 1):
        char = line[position] if position < length else ""
        pair = line[position:position + 2]
        if char in (" ", ""):
            cursor = add_word(position)
        elif pair in _OPERATORS:
            add_word(position)
            tokens.append(pair)
            cursor = position + 2
        elif char in (";", "="):
            add_word(position)
            tokens.append(char)
            cursor = position + 1
        if len(tokens) > MAX_TOKENS:
            raise TokenizeError(f"more than {MAX_TOKENS} tokens in one line")
    return tokens


def tokenize_command(command: str) -> list[str]:
    """Split a command on spaces, dropping empty pieces."""
    tokens = [piece for piece in command.split(" ") if piece]
    if len(tokens) >= MAX_COMMAND_TOKENS:
        raise TokenizeError(
            f"a command takes fewer than {MAX_COMMAND_TOKENS} tokens"
        )
    return tokens