"""Building a syntax tree from shell tokens."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .nodes import (
    BinaryOperatorNode,
    CommandNode,
    Node,
    ReadMode,
    RootNode,
    VariableDefinitionNode,
)
from .symbol_table import SymbolTable

MAX_CHILDREN = 100
MAX_ARGS = 50

_SEPARATORS = frozenset({";", "&&", "||"})
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ParseError(ValueError):
    """Raised when a token sequence cannot be turned into a tree."""


def decide_next_mode(tokens: Sequence[str], cursor: int) -> ReadMode:
    """Decide what kind of construct starts at ``tokens[cursor]``."""
    token = tokens[cursor]
    if token == ";":
        return ReadMode.PARSE_SEMICOLON
    if token == "&&":
        return ReadMode.PARSE_AND
    if token == "||":
        return ReadMode.PARSE_OR
    if cursor < len(tokens) - 1 and tokens[cursor + 1] == "=":
        return ReadMode.PARSE_VARIABLE_DEFINITION
    if token.startswith("$"):
        return ReadMode.PARSE_VARIABLE
    return ReadMode.PARSE_COMMAND


def substitute_variable(token: str, symbol_table: SymbolTable) -> str:
    """Replace a token holding ``$name`` by the variable's value.

    The name is whatever follows the first ``$``; the whole token is
    replaced when the variable is defined and left alone otherwise.
    """
    _, dollar, name = token.partition("$")
    if not dollar:
        return token
    value = symbol_table.get(name)
    return token if value is None else str(value)


def _leading_int(text: str) -> int:
    """Read a leading decimal integer, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class _Parser:
    def __init__(self, tokens: Sequence[str], symbol_table: SymbolTable) -> None:
        self.tokens = list(tokens)
        self.symbol_table = symbol_table
        self.cursor = 0
        self.root = RootNode()

    def parse(self) -> RootNode:
        while self.cursor < len(self.tokens):
            mode = decide_next_mode(self.tokens, self.cursor)
            if mode is ReadMode.PARSE_COMMAND:
                self._command(self.root)
            elif mode is ReadMode.PARSE_SEMICOLON:
                self.cursor += 1
            elif mode is ReadMode.PARSE_AND:
                self._binary("&&")
            elif mode is ReadMode.PARSE_OR:
                self._binary("||")
            elif mode is ReadMode.PARSE_VARIABLE_DEFINITION:
                self._definition(self.root)
            else:
                self._substitute_current()
                self._command(self.root)
        return self.root

    def _substitute_current(self) -> None:
        self.tokens[self.cursor] = substitute_variable(
            self.tokens[self.cursor], self.symbol_table
        )

    def _attach(self, parent: RootNode | BinaryOperatorNode, node: Node) -> None:
        if isinstance(parent, BinaryOperatorNode):
            parent.right = node
            return
        if len(parent.children) >= MAX_CHILDREN:
            raise ParseError(f"more than {MAX_CHILDREN} statements")
        parent.add(node)

    def _command(self, parent: RootNode | BinaryOperatorNode) -> None:
        node = CommandNode(self.tokens[self.cursor])
        self._attach(parent, node)
        self.cursor += 1
        while (
            self.cursor < len(self.tokens)
            and self.tokens[self.cursor] not in _SEPARATORS
        ):
            if len(node.args) >= MAX_ARGS:
                raise ParseError(f"more than {MAX_ARGS} arguments to {node.command}")
            self._substitute_current()
            node.args.append(self.tokens[self.cursor])
            self.cursor += 1

    def _binary(self, operation: str) -> None:
        if not self.root.children:
            raise ParseError(f"missing left operand for {operation}")
        node = BinaryOperatorNode(operation, left=self.root.children[-1])
        self.root.children[-1] = node
        self.cursor += 1
        if self.cursor >= len(self.tokens):
            raise ParseError(f"missing right operand for {operation}")
        mode = decide_next_mode(self.tokens, self.cursor)
        if mode is ReadMode.PARSE_COMMAND:
            self._command(node)
        elif mode is ReadMode.PARSE_VARIABLE_DEFINITION:
            self._definition(node)
        elif mode is ReadMode.PARSE_VARIABLE:
            self._substitute_current()
            self._command(node)
        else:
            raise ParseError(
                f"unexpected {self.tokens[self.cursor]!r} after {operation}"
            )

    def _definition(self, parent: RootNode | BinaryOperatorNode) -> None:
        if self.cursor + 2 >= len(self.tokens):
            raise ParseError(f"missing value for variable {self.tokens[self.cursor]}")
        node = VariableDefinitionNode(
            self.tokens[self.cursor], _leading_int(self.tokens[self.cursor + 2])
        )
        self._attach(parent, node)
        self.cursor += 3


def build_parse_tree(tokens: Sequence[str], symbol_table: SymbolTable) -> RootNode:
    """Parse tokens into a tree; ``&&`` and ``||`` group to the left.

    Variable references in arguments are replaced by their current values.
    The given token sequence is not modified.
    """
    return _Parser(tokens, symbol_table).parse()