import io
import sys
from unittest import mock

import pytest

from modokishell.shell import is_prompt_ended, main, read_input_line


@pytest.mark.parametrize(
    "tokens",
    [[], ["ls", "-l"], ["while", "x", "done"], ["if", "while", "done", "fi"]],
)
def test_balanced_input_is_ended(tokens):
    assert is_prompt_ended(tokens) is True


@pytest.mark.parametrize("tokens", [["while"], ["if", "x"], ["if", "while", "done"]])
def test_open_block_is_not_ended(tokens):
    assert is_prompt_ended(tokens) is False


@pytest.mark.parametrize("tokens", [["if", "while", "fi"], ["fi"], ["while", "fi"]])
def test_mismatch_reports_syntax_error(tokens, capsys):
    assert is_prompt_ended(tokens) is False
    assert capsys.readouterr().out == "Syntax Error!!"


def test_read_line_strips_newline():
    stream = io.StringIO("ls -l\npwd\n")
    assert read_input_line(stream) == "ls -l"
    assert read_input_line(stream) == "pwd"


def test_read_empty_line():
    assert read_input_line(io.StringIO("\n")) == ""


def test_read_at_end_raises():
    with pytest.raises(EOFError):
        read_input_line(io.StringIO(""))


def test_read_long_line_is_split():
    text = "a" * 150
    stream = io.StringIO(text + "\n")
    first = read_input_line(stream)
    second = read_input_line(stream)
    assert len(first) == 99
    assert first + second == text


@pytest.fixture
def session(tmp_path, monkeypatch):
    (tmp_path / "logs").mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    with mock.patch("os.getlogin", return_value="alice"), mock.patch(
        "socket.gethostname", return_value="box"
    ):
        yield tmp_path


def test_main_tokenizes_and_records(session, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ls -l\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "[alice@ box " in out
    assert "there are 2 tokens.\nls\n-l\n" in out
    assert "user's input is ended" in out
    assert (session / "logs" / "history.log").read_text() == "ls -l\n"


def test_main_continues_open_block(session, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("while x\ndone\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "user's input is not ended. continue ... " in out
    assert "there are 3 tokens.\nwhile\nx\ndone\n" in out
    assert out.count("]$ ") == 2


def test_main_fails_without_login(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ls\n"))
    with mock.patch("os.getlogin", side_effect=OSError("no tty")):
        assert main() == 1
    assert "getlogin() error" in capsys.readouterr().err