import pytest

from mshparse.syntax import ShellSyntaxError, check_syntax
from mshparse.tokens import tokenize


@pytest.mark.parametrize(
    "line",
    [
        "ls",
        "ls -l | wc",
        "> out",
        "cat < in | wc > out",
        "ls | > out",
        "cat << EOF",
        "a | b | c",
    ],
)
def test_valid_lines_pass_through(line):
    tokens = tokenize(line)
    assert check_syntax(tokens) is tokens


@pytest.mark.parametrize(
    "line",
    [
        "| ls",
        "ls |",
        "ls | | wc",
        "ls >",
        "ls > | wc",
        "ls >> <",
        "< > out",
        "cat < in > | wc",
    ],
)
def test_invalid_lines_raise(line):
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(tokenize(line))
    assert info.value.message == "syntax error"
    assert str(info.value) == "syntax error"


def test_empty_token_list_is_rejected_silently():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax([])
    assert not info.value.message


def test_syntax_error_is_value_error():
    with pytest.raises(ValueError):
        check_syntax(tokenize("|"))