"""The parsing front end of the shell: from a raw line to commands."""

from __future__ import annotations

import sys
from typing import Iterable, Mapping, Sequence

from .commands import Command, build_commands
from .expander import Expander
from .syntax import check_syntax
from .tokens import tokenize


def check_main_args(argv: Sequence[str]) -> None:
    """Exit with status 0 if the program was given any arguments."""
    if len(argv) != 1:
        print("do not add parameters to executable")
        raise SystemExit(0)


class Shell:
    """Holds the environment and exit status and parses command lines."""

    def __init__(
        self,
        environ: Mapping[str, str] | Iterable[str] | None = None,
        last_exit_code: int = 0,
    ) -> None:
        self.env: dict[str, str] = Expander(environ).env
        self.last_exit_code = last_exit_code
        self.default_path: str | None = None

    def parse(self, line: str) -> list[Command]:
        """Tokenize, check, expand and group ``line`` into commands.

        Raises LexError for unclosed quotes and ShellSyntaxError for a
        misplaced operator or an empty line. On success the last exit
        code is reset to 0, ready for execution.
        """
        tokens = check_syntax(tokenize(line))
        expanded = Expander(self.env, self.last_exit_code).expand_tokens(tokens)
        commands = build_commands(expanded)
        self.last_exit_code = 0
        return commands