# mshparse

`mshparse` turns a line of shell input into a list of commands. It covers the
parsing half of a small interactive shell: it checks quotes, splits the line
into tokens, rejects misplaced pipes and redirections, expands `$NAME` and
`$?`, removes quotes, and groups the result into one command per pipeline
stage.

The package has no dependencies outside the standard library.

## What it understands

- Words, single quotes (`'...'`, taken literally) and double quotes
  (`"..."`, where `$` is still expanded). Quoted text stays part of the word
  it appears in.
- Pipes: `|`.
- Redirections: `<`, `>`, `<<`, `>>`.
- `$NAME` expansion from the environment you supply, and `$?` expansion to the
  last exit status. An unset variable expands to nothing. A `$` followed by a
  blank or at the end of the text stays as written; a `$` followed by a digit
  or another character that cannot start a name is removed together with that
  character.
- A word whose last expansion was an unquoted `$` and which expands to the
  empty string is dropped; a word that ends up empty after quote removal is
  kept as an empty argument.

## Parsing a line in one call

`mshparse.shell.Shell` holds the environment and the last exit status and runs
all the stages:

```python
from mshparse.shell import Shell

shell = Shell({"HOME": "/home/user", "USER": "user"}, 0)
commands = shell.parse('echo "$USER" | grep -v x > out.txt')
for command in commands:
    print(command.name, command.args)
```

The environment may be a mapping or an iterable of `NAME=value` strings (such
as the lines of an `environ` listing); with strings, the first entry for a
name wins and entries without `=` are ignored.

`parse` raises `mshparse.tokens.LexError` for an unclosed quote and
`mshparse.syntax.ShellSyntaxError` for a misplaced operator or a line with no
tokens at all (the latter with an empty message). After a successful parse
`shell.last_exit_code` is reset to 0.

## Working with the stages yourself

```python
from mshparse.tokens import tokenize
from mshparse.syntax import check_syntax
from mshparse.expander import Expander
from mshparse.commands import build_commands

tokens = check_syntax(tokenize("cat < in.txt | wc -l"))
tokens = Expander({"PATH": "/usr/bin"}, 0).expand_tokens(tokens)
commands = build_commands(tokens)
```

- `tokenize(line)` returns a list of `Token` objects, each with a `type`
  (`TokenType.WORD`, `PIPE`, `REDIR`, `QUOTE` or `DOLLAR`) and its `text`.
  `check_quotes(line)` checks quoting alone and raises `LexError`.
- `check_syntax(tokens)` returns the tokens unchanged or raises
  `ShellSyntaxError`: for an empty list, for a pipe at the start or end, a
  pipe not preceded by a word, two pipes in a row, or a redirection not
  followed by a word.
- `Expander(env, last_exit_code)` offers:
  - `expand_word(text)`: expand variables and remove quotes;
  - `expand_tokens(tokens)`: expand every word token into a new list, marking
    words as `QUOTE` or `DOLLAR` by the last kind of expansion seen in them
    and dropping empty `DOLLAR` words; the input list is not changed;
  - `expand_heredoc_line(line)`: expand `$` but leave quotes as they are;
  - `get_value(name)`: the variable's value, or `None` if unset.
- `build_commands(tokens)` returns one `Command` per pipe-separated part.
  A `Command` has `args` (the argument strings, leaving out the word right
  after each redirection), `tokens` (all of that part's tokens, redirections
  included) and `name` (the first argument, or `None`). `split_commands`,
  `count_commands` and `is_arg(token, previous)` expose the pieces it is
  built from.

`mshparse.textutil` holds small string helpers: `atoi`, `split`, `strtrim`,
`strnstr`, `strncmp`, `is_name_start` and `is_name_char`.

## What it does not do

`mshparse` only parses. It has no command-line program and no prompt loop,
does not run commands or built-ins, does not open files for redirections or
read here-documents (it only offers `expand_heredoc_line` for their lines),
and does not handle signals. `mshparse.shell.check_main_args(argv)` prints a
message and exits with status 0 when `argv` holds more than the program name;
it is there for a front end that reads lines and passes them to
`Shell.parse`.