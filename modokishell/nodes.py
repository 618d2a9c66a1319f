"""Syntax tree nodes produced by the parser and consumed by the executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Union


class NodeType(Enum):
    """Kind of a syntax tree node."""

    ROOT = auto()
    COMMAND = auto()
    BINARY_OPERATION = auto()
    VARIABLE_DEFINITION = auto()


class ReadMode(Enum):
    """What the parser should read next at a given token."""

    PARSE_COMMAND = auto()
    PARSE_SEMICOLON = auto()
    PARSE_AND = auto()
    PARSE_OR = auto()
    PARSE_VARIABLE_DEFINITION = auto()
    PARSE_VARIABLE = auto()


@dataclass
class CommandNode:
    """A command name with its arguments; a leaf of the tree."""

    command: str
    args: list[str] = field(default_factory=list)
    type: ClassVar[NodeType] = NodeType.COMMAND

    def argv(self) -> list[str]:
        """Return the full argument vector, command name first."""
        return [self.command, *self.args]


@dataclass
class VariableDefinitionNode:
    """An integer variable assignment such as ``x = 3``."""

    name: str
    value: int
    type: ClassVar[NodeType] = NodeType.VARIABLE_DEFINITION


@dataclass
class BinaryOperatorNode:
    """A ``&&`` or ``||`` joining two sub-trees."""

    operation: str
    left: Node | None = None
    right: Node | None = None
    type: ClassVar[NodeType] = NodeType.BINARY_OPERATION


Node = Union[CommandNode, VariableDefinitionNode, BinaryOperatorNode]


@dataclass
class RootNode:
    """Top of a parse tree; holds the top-level statements in order."""

    children: list[Node] = field(default_factory=list)
    type: ClassVar[NodeType] = NodeType.ROOT

    def add(self, child: Node) -> Node:
        """Append a statement and return it."""
        self.children.append(child)
        return child