"""Small string helpers: splitting, trimming and replacing."""

from __future__ import annotations

_SPACE = " \t\n\v\f\r"


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``; an empty delimiter splits into characters.

    A non-empty delimiter always yields at least one item, keeping empty
    pieces between adjacent delimiters.
    """
    if not delimiter:
        return list(text)
    return text.split(delimiter)


def trim(text: str, left: bool = True, right: bool = True) -> str:
    """Remove ASCII whitespace from the chosen ends of ``text``."""
    if left:
        text = text.lstrip(_SPACE)
    if right:
        text = text.rstrip(_SPACE)
    return text


def replace_all(source: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``, scanning left to right."""
    if not old:
        raise ValueError("search string must not be empty")
    return source.replace(old, new)