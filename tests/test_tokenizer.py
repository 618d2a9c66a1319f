import pytest

from modokishell.tokenizer import (
    MAX_TOKENS,
    TokenizeError,
    tokenize_command,
    tokenize_line,
)


def test_simple_words():
    assert tokenize_line("ls -l") == ["ls", "-l"]


def test_multiple_spaces_produce_no_empty_tokens():
    assert tokenize_line("  ls    -a  ") == ["ls", "-a"]


def test_empty_line():
    assert tokenize_line("") == []


def test_and_operator_without_spaces():
    assert tokenize_line("true&&echo") == ["true", "&&", "echo"]


def test_or_operator_with_spaces():
    assert tokenize_line("false || echo hi") == ["false", "||", "echo", "hi"]


def test_semicolon_separates():
    assert tokenize_line("cd /tmp;ls") == ["cd", "/tmp", ";", "ls"]


def test_assignment():
    assert tokenize_line("x=10") == ["x", "=", "10"]
    assert tokenize_line("x = 10") == ["x", "=", "10"]


def test_single_pipe_and_ampersand_stay_in_words():
    assert tokenize_line("a|b c&d") == ["a|b", "c&d"]


def test_operator_at_end():
    assert tokenize_line("echo a &&") == ["echo", "a", "&&"]


def test_tripled_operator_is_an_error():
    with pytest.raises(TokenizeError):
        tokenize_line("a &&& b")


def test_too_many_tokens():
    line = " ".join(["w"] * (MAX_TOKENS + 1))
    with pytest.raises(TokenizeError):
        tokenize_line(line)


def test_max_tokens_allowed():
    line = " ".join(["w"] * MAX_TOKENS)
    assert len(tokenize_line(line)) == MAX_TOKENS


def test_tokens_rejoin_to_spaceless_line():
    line = "echo a&&b||c;d=1"
    assert "".join(tokenize_line(line)) == line.replace(" ", "")


def test_tokenize_command_splits_on_spaces():
    assert tokenize_command("ls  -l /tmp") == ["ls", "-l", "/tmp"]


def test_tokenize_command_limit():
    with pytest.raises(TokenizeError):
        tokenize_command(" ".join(["x"] * 10))