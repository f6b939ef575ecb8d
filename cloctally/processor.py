"""Running the analysis over a set of paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from cloctally.analyzer import ClocFile, analyze_file
from cloctally.definitions import DefinedLanguages
from cloctally.files import get_all_files
from cloctally.language import Language
from cloctally.options import ClocOptions


@dataclass
class Result:
    """Outcome of an analysis run."""

    total: Language
    files: dict[str, ClocFile] = field(default_factory=dict)
    languages: dict[str, Language] = field(default_factory=dict)
    max_path_length: int = 0


class Processor:
    """Counts lines of every recognised file below the given paths."""

    def __init__(
        self, langs: DefinedLanguages, options: Optional[ClocOptions] = None
    ) -> None:
        self.langs = langs
        self.options = options if options is not None else ClocOptions()

    def analyze(self, paths: Iterable[str]) -> Result:
        """Analyse every file below ``paths`` and return per-file and total counts."""
        total = Language("TOTAL", [], [("", "")])
        languages = get_all_files(paths, self.langs, self.options)

        max_path_length = max(
            (
                len(path.encode("utf-8", "surrogateescape"))
                for language in languages.values()
                for path in language.files
            ),
            default=0,
        )

        files: dict[str, ClocFile] = {}
        for language in languages.values():
            for path in language.files:
                cf = analyze_file(path, language, self.options)
                cf.lang = language.name
                language.code += cf.code
                language.comments += cf.comments
                language.blanks += cf.blanks
                files[path] = cf

            if not language.files:
                continue
            total.total += len(language.files)
            total.blanks += language.blanks
            total.comments += language.comments
            total.code += language.code

        return Result(
            total=total,
            files=files,
            languages=languages,
            max_path_length=max_path_length,
        )