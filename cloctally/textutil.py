"""Small text helpers used while counting and reporting."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

_RE_SPACES = re.compile(r"[\t\n\f\r ]+")

_BOM = "\ufeff"


def insert_pipes_in_the_middle(text: str) -> str:
    """Replace each run of whitespace between words by a centred ``|``.

    The last word is followed by ``" |"``. A whitespace run shorter than
    two characters cannot hold a centred pipe and raises ``ValueError``.
    """
    words = text.split()
    spaces = _RE_SPACES.findall(text)
    parts = []
    for i, word in enumerate(words):
        if i < len(spaces):
            middle = len(spaces[i]) // 2 - 1
            if middle < 0:
                raise ValueError("whitespace run too short to hold a pipe")
            pad = " " * middle
            parts.append(f"{word}{pad}|{pad}")
        else:
            parts.append(f"{word} |")
    return "".join(parts)


def trim_bom(line: str) -> str:
    """Remove a leading UTF-8 byte order mark."""
    if line.startswith(_BOM):
        return line[len(_BOM):]
    return line


def contains_comment(line: str, multi_lines: Iterable[Sequence[str]]) -> bool:
    """Whether ``line`` contains any begin or end marker of a block comment.

    An empty marker is contained in every line.
    """
    return any(marker in line for pair in multi_lines for marker in pair)