import pytest

from mshparse.commands import (
    Command,
    build_commands,
    count_commands,
    is_arg,
    split_commands,
)
from mshparse.tokens import Token, TokenType, tokenize


def test_is_arg_plain_word():
    assert is_arg(Token(TokenType.WORD, "ls"), None) is True


@pytest.mark.parametrize("kind", [TokenType.QUOTE, TokenType.DOLLAR])
def test_is_arg_expanded_kinds(kind):
    assert is_arg(Token(kind, "x"), Token(TokenType.WORD, "echo")) is True


def test_is_arg_redirection_target_is_not_arg():
    assert is_arg(Token(TokenType.WORD, "out"), Token(TokenType.REDIR, ">")) is False


def test_is_arg_operators_are_not_args():
    assert is_arg(Token(TokenType.PIPE, "|"), None) is False
    assert is_arg(Token(TokenType.REDIR, "<"), None) is False


def test_count_commands():
    assert count_commands(tokenize("ls")) == 1
    assert count_commands(tokenize("a | b | c")) == 3
    assert count_commands([]) == 1


def test_split_commands_drops_pipes():
    segments = split_commands(tokenize("a b | c"))
    assert [[t.text for t in seg] for seg in segments] == [["a", "b"], ["c"]]


def test_split_matches_count():
    tokens = tokenize("a | b > f | c << end")
    assert len(split_commands(tokens)) == count_commands(tokens)


def test_build_commands_pipeline():
    commands = build_commands(tokenize("echo hi | wc -l"))
    assert [c.args for c in commands] == [["echo", "hi"], ["wc", "-l"]]
    assert commands[1].name == "wc"


def test_build_commands_skips_redirections():
    commands = build_commands(tokenize("cat < in.txt extra > out.txt"))
    assert commands[0].args == ["cat", "extra"]
    assert [t.text for t in commands[0].tokens] == [
        "cat", "<", "in.txt", "extra", ">", "out.txt",
    ]


def test_build_commands_redirection_only():
    commands = build_commands(tokenize("> out.txt"))
    assert commands == [Command(args=[], tokens=commands[0].tokens)]
    assert commands[0].name is None


def test_build_commands_empty_text_argument():
    commands = build_commands([Token(TokenType.WORD, "echo"), Token(TokenType.QUOTE, "")])
    assert commands[0].args == ["echo", ""]