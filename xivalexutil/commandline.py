"""Building and trimming Windows-style command lines."""

from __future__ import annotations

from typing import Iterable

_NEEDS_QUOTING = frozenset('" ')
_ESCAPED = frozenset('\\"')


def _quote(arg: str) -> str:
    if not any(ch in _NEEDS_QUOTING for ch in arg):
        return arg
    body = "".join("\\" + ch if ch in _ESCAPED else ch for ch in arg)
    return f'"{body}"'


def join_windows_args(argv: Iterable[str]) -> str:
    """Join arguments into one command line.

    Arguments holding a space or a double quote are wrapped in double quotes,
    and every backslash and double quote inside them is escaped with a
    backslash. A separating space is written only once the line is non-empty.
    """
    line = ""
    for arg in argv:
        if line:
            line += " "
        line += _quote(arg)
    return line


def strip_program_name(command_line: str) -> str:
    """Drop the leading program name and the single separator that follows it.

    The program name ends at the first space or tab outside double quotes.
    """
    in_quote = False
    end = len(command_line)
    for pos, ch in enumerate(command_line):
        if ch in " \t" and not in_quote:
            end = pos
            break
        if ch == '"':
            in_quote = not in_quote
    if end < len(command_line):
        end += 1
    return command_line[end:]