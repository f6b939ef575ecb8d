"""Language definitions, per-language statistics and their orderings."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union


@dataclass
class Language:
    """Comment syntax of one language together with its collected counts."""

    name: str
    line_comments: list[str] = field(default_factory=list)
    multi_lines: list[tuple[str, str]] = field(default_factory=list)
    regex_line_comments: list[re.Pattern[str]] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    code: int = 0
    comments: int = 0
    blanks: int = 0
    total: int = 0

    def __post_init__(self) -> None:
        self.line_comments = list(self.line_comments)
        self.multi_lines = [tuple(pair) for pair in self.multi_lines]

    def with_regex_line_comments(self, patterns: Iterable[str]) -> "Language":
        """Use regular expressions instead of prefixes to spot line comments."""
        self.regex_line_comments = [re.compile(p) for p in patterns]
        return self

    def copy_definition(self) -> "Language":
        """Return a fresh language with this syntax and no files or counts."""
        return Language(
            name=self.name,
            line_comments=list(self.line_comments),
            multi_lines=list(self.multi_lines),
            regex_line_comments=list(self.regex_line_comments),
        )


@dataclass
class ClocLanguage:
    """Summary row of one language, as written to JSON and XML reports."""

    name: str = ""
    files_count: int = 0
    code: int = 0
    comments: int = 0
    blanks: int = 0

    @classmethod
    def from_language(cls, language: Language) -> "ClocLanguage":
        return cls(
            name=language.name,
            files_count=len(language.files),
            code=language.code,
            comments=language.comments,
            blanks=language.blanks,
        )

    def to_dict(self) -> dict[str, Union[str, int]]:
        """JSON form; an empty name is left out."""
        data: dict[str, Union[str, int]] = {}
        if self.name:
            data["name"] = self.name
        data["files"] = self.files_count
        data["code"] = self.code
        data["comment"] = self.comments
        data["blank"] = self.blanks
        return data


class SortTag(str, enum.Enum):
    """Column a report is ordered by."""

    NAME = "name"
    FILES = "files"
    BLANK = "blank"
    COMMENT = "comment"
    CODE = "code"

    @classmethod
    def parse(cls, tag: Union[str, "SortTag"]) -> "SortTag":
        """Turn a tag name into a member; unknown names mean ``CODE``."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return cls.CODE


def sort_languages(
    languages: Sequence[Language], tag: Union[str, SortTag]
) -> list[Language]:
    """Return the languages ordered by the given column.

    Name sorts ascending; every other column sorts descending, with ties
    broken by the code count, also descending.
    """
    tag = SortTag.parse(tag)
    if tag is SortTag.NAME:
        return sorted(languages, key=lambda lang: lang.name)
    if tag is SortTag.FILES:
        return sorted(languages, key=lambda lang: (-len(lang.files), -lang.code))
    if tag is SortTag.COMMENT:
        return sorted(languages, key=lambda lang: (-lang.comments, -lang.code))
    if tag is SortTag.BLANK:
        return sorted(languages, key=lambda lang: (-lang.blanks, -lang.code))
    return sorted(languages, key=lambda lang: -lang.code)