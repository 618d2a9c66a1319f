from modokishell.debug import dump_parse_tree, dump_symbol_table, dump_tokens
from modokishell.nodes import (
    BinaryOperatorNode,
    CommandNode,
    RootNode,
    VariableDefinitionNode,
)
from modokishell.symbol_table import SymbolTable

HEADER = "--------------symbol table--------------------\n"
FOOTER = "-----------------------------------------------\n"


def test_dump_tokens():
    assert dump_tokens(["ls", "-l"]) == "there are 2 tokens.\nls\n-l\n"


def test_dump_no_tokens():
    assert dump_tokens([]) == "there are 0 tokens.\n"


def test_dump_symbol_table_in_definition_order():
    table = SymbolTable()
    table.store("b", 2)
    table.store("a", 1)
    assert dump_symbol_table(table) == HEADER + "b : 2\na : 1\n" + FOOTER


def test_dump_empty_symbol_table():
    assert dump_symbol_table(SymbolTable()) == HEADER + FOOTER


def test_dump_command():
    node = CommandNode("ls", ["-l"])
    assert dump_parse_tree(node, 0) == "command name : ls\narg : -l\n"


def test_dump_command_indented():
    text = dump_parse_tree(CommandNode("ls", ["-l"]), 2)
    assert text.splitlines() == ["\t\tcommand name : ls", "\t\targ : -l"]


def test_dump_variable_definition():
    node = VariableDefinitionNode("x", 3)
    assert dump_parse_tree(node, 1) == "\tvariable name : x\n\tvalue : 3\n"


def test_dump_binary():
    node = BinaryOperatorNode("&&", CommandNode("a"), CommandNode("b"))
    assert dump_parse_tree(node, 0) == (
        "operator name : &&\n\tcommand name : a\n\tcommand name : b\n"
    )


def test_dump_root_children_go_deeper_each_time():
    root = RootNode([CommandNode("a"), CommandNode("b")])
    assert dump_parse_tree(root, 0) == (
        "root\n\tcommand name : a\n\t\tcommand name : b\n"
    )


def test_dump_missing_operand_is_unknown():
    node = BinaryOperatorNode("||", CommandNode("a"), None)
    assert dump_parse_tree(node, 0).endswith("unknown type\n")