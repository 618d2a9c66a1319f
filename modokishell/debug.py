"""Readable dumps of tokens, variables and parse trees."""

from __future__ import annotations

from collections.abc import Sequence

from .nodes import BinaryOperatorNode, CommandNode, RootNode, VariableDefinitionNode
from .symbol_table import SymbolTable

_TABLE_HEADER = "--------------symbol table--------------------\n"
_TABLE_FOOTER = "-----------------------------------------------\n"


def dump_tokens(tokens: Sequence[str]) -> str:
    """Return the token count followed by one token per line."""
    lines = [f"there are {len(tokens)} tokens.\n"]
    lines.extend(f"{token}\n" for token in tokens)
    return "".join(lines)


def dump_symbol_table(symbol_table: SymbolTable) -> str:
    """Return every variable as ``name : value`` between two rules."""
    body = "".join(f"{name} : {symbol_table.get(name)}\n" for name in symbol_table)
    return f"{_TABLE_HEADER}{body}{_TABLE_FOOTER}"


def dump_parse_tree(node: object, level: int = 0) -> str:
    """Return an indented outline of a parse tree, one tab per level."""
    indent = "\t" * level
    if isinstance(node, RootNode):
        parts = ["root\n"]
        # Each further top-level statement is shown one level deeper.
        for depth, child in enumerate(node.children, start=level + 1):
            parts.append(dump_parse_tree(child, depth))
        return "".join(parts)
    if isinstance(node, CommandNode):
        parts = [f"{indent}command name : {node.command}\n"]
        parts.extend(f"{indent}arg : {arg}\n" for arg in node.args)
        return "".join(parts)
    if isinstance(node, BinaryOperatorNode):
        return (
            f"{indent}operator name : {node.operation}\n"
            + dump_parse_tree(node.left, level + 1)
            + dump_parse_tree(node.right, level + 1)
        )
    if isinstance(node, VariableDefinitionNode):
        return f"{indent}variable name : {node.name}\n{indent}value : {node.value}\n"
    return "unknown type\n"