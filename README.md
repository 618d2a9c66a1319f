# modokishell

A small Unix-style shell toolkit. It splits input lines into words and
operators, builds a syntax tree from them, keeps integer variables and a
command history, and can run a parsed tree: built-in commands and
external programs, chained with `&&`, `||` and `;`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## The `modokishell` command

```
modokishell
```

The command shows a prompt of the form

```
[alice@ myhost /home/alice ]$ 
```

and then reads input line by line (at most 99 characters are taken from
each line). Every line is appended to the history file
`../logs/history.log`, relative to the working directory; that
directory must exist. After each line the tokens collected so far are
printed, as in:

```
there are 3 tokens.
echo
&&
ls
user's input is ended
```

Input that opens `if` or `while` without the closing `fi` or `done` is
continued on the next line until the blocks are balanced. A closing
word that does not match the innermost opening one prints
`Syntax Error!!` and the input counts as unfinished. The command ends at
end of input (Ctrl-D). If the user name, host name or working
directory cannot be found it prints an error and exits with status 1.

## What the command does not do

The interactive loop only reads, records and tokenizes input. It does
not parse the tokens or run any command: nothing typed at the prompt is
executed, and `exit`, `cd` and `history` have no effect there. Running
commands is available only through the library, by passing tokens to
`build_parse_tree` and the resulting tree to `Executor.execute`, as
shown below.

## Library use

```python
from modokishell.tokenizer import tokenize_line
from modokishell.parser import build_parse_tree
from modokishell.symbol_table import SymbolTable
from modokishell.executor import Executor
from modokishell.history import History

table = SymbolTable()
executor = Executor(table, History("history.log"), home="/tmp")

executor.execute(build_parse_tree(tokenize_line("x = 3"), table))
tree = build_parse_tree(tokenize_line("echo $x && echo ok || echo failed"), table)
executor.execute(tree)
```

### Tokenizer (`modokishell.tokenizer`)

- `tokenize_line(line)` splits a line into words and the separators
  `&&`, `||`, `;` and `=`. Spaces separate words; runs of spaces give no
  empty words. More than 50 tokens in a line raise `TokenizeError`.
- `tokenize_command(command)` splits on spaces only, dropping empty
  pieces; ten or more pieces raise `TokenizeError`.

### Parser (`modokishell.parser`)

- `build_parse_tree(tokens, symbol_table)` returns a `RootNode`.
  `name = value` becomes a `VariableDefinitionNode` whose value is the
  leading integer of the value token (0 if there is none). `&&` and `||`
  take the previous statement as their left side and group to the left;
  `;` separates statements. A token of the form `$name`, as a command
  name or argument, is replaced by the variable's current value when it
  is defined. The token sequence passed in is not changed. Malformed
  input (an operator without an operand, a definition without a value,
  more than 100 statements or 50 arguments) raises `ParseError`.
- `decide_next_mode(tokens, cursor)` returns the `ReadMode` for the
  token at `cursor`.
- `substitute_variable(token, symbol_table)` returns the value of the
  variable named after the first `$` in `token`, or `token` unchanged.

### Nodes (`modokishell.nodes`)

`RootNode`, `CommandNode`, `BinaryOperatorNode` and
`VariableDefinitionNode` are dataclasses, each with a `type` of
`NodeType`. `CommandNode.argv()` gives the command name followed by its
arguments; `RootNode.add(child)` appends a statement.

### Executor (`modokishell.executor`)

`Executor(symbol_table=None, history=None, home="/2024/v24e3026")`:

- `execute(node)` runs a tree or any node of it; variable definitions
  are stored in the symbol table.
- `run_binary(node)` runs `&&` and `||` with short-circuiting and
  returns whether it succeeded.
- `run_command(node)` returns the exit status. Built-ins: `exit` raises
  `ShellExit` (a `SystemExit` with status 0); `history` writes the
  numbered history to standard output; `cd [dir]` changes directory,
  to `home` when no directory is given. Anything else is started as an
  external program found on `PATH`; a program that cannot be started
  prints `<name> is not found ` to standard error and gives status 1.
  More than nine words raise `ValueError`.

### Symbol table (`modokishell.symbol_table`)

`SymbolTable` holds integer variables in the order they were first
defined: `store(name, value)`, `get(name)` (None when undefined),
`in`, `len()` and iteration over names. At most 1024 variables, with
names of at most 49 characters.

### History (`modokishell.history`)

`History(path="../logs/history.log")` appends commands with
`record(command)`; `format()` returns the listing with right-aligned
line numbers and `show(stream=None)` writes it, to standard output by
default.

### Prompt and shell helpers

- `modokishell.prompt.format_prompt()` returns the prompt string or
  raises `PromptError`.
- `modokishell.shell.is_prompt_ended(tokens)` tells whether all
  `if`/`while` blocks are closed.
- `modokishell.shell.read_input_line(stream=None)` reads one line
  without its newline and raises `EOFError` at end of input.

### Debug dumps (`modokishell.debug`)

`dump_tokens(tokens)`, `dump_symbol_table(symbol_table)` and
`dump_parse_tree(node, level=0)` return readable text outlines.