"""The interactive loop: prompt, read, record and tokenize user input."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum, auto
from typing import TextIO

from .debug import dump_tokens
from .history import History
from .prompt import PromptError, format_prompt
from .tokenizer import TokenizeError, tokenize_line

MAX_LINE_LENGTH = 99
MAX_PENDING_TOKENS = 100


class _Indicator(Enum):
    WHILE = auto()
    IF = auto()


_OPENERS = {"while": _Indicator.WHILE, "if": _Indicator.IF}
_CLOSERS = {"done": _Indicator.WHILE, "fi": _Indicator.IF}


def is_prompt_ended(tokens: Sequence[str]) -> bool:
    """Tell whether every ``while``/``if`` has its ``done``/``fi``.

    A closer that does not match the innermost opener prints a syntax
    error and counts as unfinished input.
    """
    pending: list[_Indicator] = []
    for token in tokens:
        if token in _OPENERS:
            pending.append(_OPENERS[token])
        elif token in _CLOSERS:
            if pending and pending[-1] is _CLOSERS[token]:
                pending.pop()
            else:
                sys.stdout.write("Syntax Error!!")
                return False
    return not pending


def read_input_line(stream: TextIO | None = None) -> str:
    """Read up to 99 characters of one line, without its newline.

    Raises EOFError at the end of input.
    """
    line = (stream or sys.stdin).readline(MAX_LINE_LENGTH)
    if not line:
        raise EOFError("end of input")
    return line[:-1] if line.endswith("\n") else line


def _read_statement(history: History) -> list[str]:
    tokens: list[str] = []
    while True:
        line = read_input_line()
        history.record(line)
        tokens.extend(tokenize_line(line))
        if len(tokens) > MAX_PENDING_TOKENS:
            raise TokenizeError(f"more than {MAX_PENDING_TOKENS} pending tokens")
        sys.stdout.write(dump_tokens(tokens))
        if is_prompt_ended(tokens):
            print("user's input is ended")
            return tokens
        print("user's input is not ended. continue ... ")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive loop until end of input."""
    history = History()
    while True:
        try:
            prompt = format_prompt()
        except PromptError as error:
            print(error, file=sys.stderr)
            return 1
        sys.stdout.write(prompt)
        sys.stdout.flush()
        try:
            _read_statement(history)
        except EOFError:
            return 0
        except TokenizeError as error:
            print(error, file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())