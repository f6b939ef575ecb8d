"""Counting code, comment and blank lines of a single file."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import IO, Iterator, Sequence, Union

from cloctally.language import Language, SortTag
from cloctally.options import ClocOptions
from cloctally.textutil import contains_comment, trim_bom

# Lines at least this long (in bytes) end the scan, as an over-long token would.
_MAX_LINE_BYTES = 1024 * 1024

_SPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass
class ClocFile:
    """Line counts of one file."""

    code: int = 0
    comments: int = 0
    blanks: int = 0
    name: str = ""
    lang: str = ""

    def to_dict(self) -> dict[str, Union[str, int]]:
        """JSON form of the counts."""
        return {
            "code": self.code,
            "comment": self.comments,
            "blank": self.blanks,
            "name": self.name,
            "language": self.lang,
        }


def sort_files(files: Sequence[ClocFile], tag: Union[str, SortTag]) -> list[ClocFile]:
    """Return the files ordered by the given column.

    Name sorts ascending; comment and blank sort descending with ties broken
    by code, also descending; anything else sorts by code, descending.
    """
    tag = SortTag.parse(tag)
    if tag is SortTag.NAME:
        return sorted(files, key=lambda f: f.name)
    if tag is SortTag.COMMENT:
        return sorted(files, key=lambda f: (-f.comments, -f.code))
    if tag is SortTag.BLANK:
        return sorted(files, key=lambda f: (-f.blanks, -f.code))
    return sorted(files, key=lambda f: -f.code)


class _Kind(enum.Enum):
    CODE = "CODE"
    COMMENT = "COMM"
    BLANK = "BLNK"


def _trim_space(text: str) -> str:
    return text.strip(_SPACE)


class _LineClassifier:
    """Tracks open block comments across the lines of one file."""

    def __init__(self, language: Language) -> None:
        self.language = language
        self.stack: list[tuple[str, str]] = []
        self.first_line = True

    @property
    def in_comments(self) -> bool:
        return bool(self.stack)

    def classify(self, line: str) -> tuple[_Kind, str]:
        """Return the kind of a stripped line and the line as reported."""
        if not line:
            return _Kind.BLANK, line

        # A shebang counts as code.
        if self.first_line and line.startswith("#!"):
            self.first_line = False
            return _Kind.CODE, line

        multi = self.language.multi_lines
        if not self.stack:
            if self.first_line:
                line = trim_bom(line)
            if self._is_line_comment(line):
                return _Kind.COMMENT, line
            if not multi:
                return _Kind.CODE, line
            if not contains_comment(line, multi):
                return _Kind.CODE, line

        if len(multi) == 1 and multi[0][0] == "":
            return _Kind.CODE, line
        return (_Kind.CODE if self._scan_blocks(line) else _Kind.COMMENT), line

    def _is_line_comment(self, line: str) -> bool:
        language = self.language
        if language.regex_line_comments:
            hit = any(p.search(line) for p in language.regex_line_comments)
        else:
            hit = any(line.startswith(prefix) for prefix in language.line_comments)
        if not hit:
            return False
        # A line comment marker that opens a block comment is not a line comment.
        return not any(begin and line.startswith(begin) for begin, _ in language.multi_lines)

    def _scan_blocks(self, line: str) -> bool:
        multi = self.language.multi_lines
        stack = self.stack
        size = len(line)
        code_flags = [False] * len(multi)
        pos = 0
        while pos < size:
            for idx, (begin, end) in enumerate(multi):
                if (
                    pos + len(begin) <= size
                    and line.startswith(begin, pos)
                    and (begin != end or not stack)
                ):
                    pos += len(begin)
                    stack.append((begin, end))
                    continue
                if stack:
                    closing = stack[-1][1]
                    if pos + len(closing) <= size and line.startswith(closing, pos):
                        stack.pop()
                        pos += len(closing)
                elif pos < size and line[pos] not in _SPACE:
                    code_flags[idx] = True
            pos += 1
        return all(code_flags)


def _scan_lines(stream: IO) -> Iterator[str]:
    data = stream.read()
    if isinstance(data, str):
        data = data.encode("utf-8", "surrogateescape")
    if not data:
        return
    chunks = data.split(b"\n")
    if chunks[-1] == b"":
        chunks.pop()
    for raw in chunks:
        if len(raw) >= _MAX_LINE_BYTES:
            return
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        yield raw.decode("utf-8", "surrogateescape")


def _record(
    kind: _Kind,
    result: ClocFile,
    options: ClocOptions,
    in_comments: bool,
    line: str,
    original: str,
) -> None:
    if kind is _Kind.CODE:
        result.code += 1
        callback = options.on_code
    elif kind is _Kind.COMMENT:
        result.comments += 1
        callback = options.on_comment
    else:
        result.blanks += 1
        callback = options.on_blank
    if callback is not None:
        callback(line)
    if options.debug:
        print(
            f"[{kind.value}, cd:{result.code}, cm:{result.comments}, "
            f"bk:{result.blanks}, iscm:{str(in_comments).lower()}] {original}"
        )


def analyze_reader(
    filename: str, language: Language, stream: IO, options: ClocOptions
) -> ClocFile:
    """Count the lines read from a text or binary stream."""
    if options.debug:
        print(f"filename={filename}")

    result = ClocFile(name=filename, lang=language.name)
    classifier = _LineClassifier(language)
    for original in _scan_lines(stream):
        kind, line = classifier.classify(_trim_space(original))
        _record(kind, result, options, classifier.in_comments, line, original)
    return result


def analyze_file(filename: str, language: Language, options: ClocOptions) -> ClocFile:
    """Count the lines of a file; an unreadable file gives empty counts."""
    try:
        stream = open(filename, "rb")
    except OSError:
        return ClocFile(name=filename)
    with stream:
        return analyze_reader(filename, language, stream, options)