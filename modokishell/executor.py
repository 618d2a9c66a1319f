"""Running parse trees: built-in commands, external programs and variables."""

from __future__ import annotations

import os
import subprocess
import sys

from .history import History
from .nodes import BinaryOperatorNode, CommandNode, RootNode, VariableDefinitionNode
from .symbol_table import SymbolTable

HOME_EXP_ENV = "/2024/v24e3026"
MAX_ARGV = 9


class ShellExit(SystemExit):
    """Raised when the user runs ``exit``."""


class Executor:
    """Walks a parse tree and carries out what it describes."""

    def __init__(
        self,
        symbol_table: SymbolTable | None = None,
        history: History | None = None,
        home: str = HOME_EXP_ENV,
    ) -> None:
        self.symbol_table = symbol_table if symbol_table is not None else SymbolTable()
        self.history = history if history is not None else History()
        self.home = home

    def execute(self, node: object) -> None:
        """Run a tree, or any node of one, in order."""
        if isinstance(node, RootNode):
            for child in node.children:
                self.execute(child)
        elif isinstance(node, CommandNode):
            self.run_command(node)
        elif isinstance(node, BinaryOperatorNode):
            self.run_binary(node)
        elif isinstance(node, VariableDefinitionNode):
            self.symbol_table.store(node.name, node.value)
        else:
            raise TypeError(f"cannot execute {type(node).__name__}")

    def _succeeded(self, node: object) -> bool:
        if isinstance(node, CommandNode):
            return self.run_command(node) == 0
        if isinstance(node, BinaryOperatorNode):
            return self.run_binary(node)
        if isinstance(node, VariableDefinitionNode):
            self.symbol_table.store(node.name, node.value)
            return True
        return False

    def run_binary(self, node: BinaryOperatorNode) -> bool:
        """Run ``left && right`` or ``left || right`` with short-circuiting."""
        left_ok = self._succeeded(node.left)
        if left_ok and node.operation == "||":
            return True
        if not left_ok and node.operation == "&&":
            return False
        return self._succeeded(node.right)

    def run_command(self, node: CommandNode) -> int:
        """Run one command and return its exit status."""
        argv = node.argv()
        if len(argv) > MAX_ARGV:
            raise ValueError(f"a command takes at most {MAX_ARGV} words")
        name = argv[0]
        if name == "exit":
            raise ShellExit(0)
        if name == "history":
            self.history.show(sys.stdout)
            return 0
        if name == "cd":
            target = argv[1] if len(argv) > 1 else self.home
            try:
                os.chdir(target)
            except OSError as error:
                print(f"cd: {target}: {error.strerror}", file=sys.stderr)
                return 1
            return 0
        try:
            completed = subprocess.run(argv, check=False)
        except OSError:
            print(f"{name} is not found ", file=sys.stderr)
            return 1
        return completed.returncode