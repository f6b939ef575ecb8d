"""Command line front end: count lines below paths and print a report."""

from __future__ import annotations

import argparse
import json
import os
import re
import sys
from typing import IO, Any, Optional, Sequence

from cloctally.analyzer import sort_files
from cloctally.definitions import EXTS, defined_languages
from cloctally.language import sort_languages
from cloctally.options import ClocOptions
from cloctally.processor import Processor, Result
from cloctally.report import (
    encode_xml,
    json_files_result,
    json_languages_result,
    xml_files_result,
    xml_languages_result,
)
from cloctally.textutil import insert_pipes_in_the_middle

OUTPUT_DEFAULT = "default"
OUTPUT_CLOC_XML = "cloc-xml"
OUTPUT_SLOCCOUNT = "sloccount"
OUTPUT_JSON = "json"
OUTPUT_MARKDOWN = "markdown"

FILE_HEADER = "File"
LANGUAGE_HEADER = "Language"
COMMON_HEADER = "files          blank        comment           code"
_SEPARATOR = "-" * (73 * 3)
_DEFAULT_ROW_LEN = 79
_GIT_COMMIT = ""

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _to_json(data: Any) -> str:
    text = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return text.translate(_JSON_ESCAPES)


class OutputBuilder:
    """Writes a result in the format selected by the command line options."""

    def __init__(
        self, result: Result, options: argparse.Namespace, stream: Optional[IO[str]] = None
    ) -> None:
        self.result = result
        self.options = options
        self.stream = stream if stream is not None else sys.stdout
        self.row_len = _DEFAULT_ROW_LEN

    def _emit(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def _separator(self) -> None:
        self._emit(_SEPARATOR[: self.row_len])

    def write_header(self) -> None:
        """Write the column titles for text and markdown output."""
        max_path_len = self.result.max_path_length
        header_len = 28
        header = LANGUAGE_HEADER
        if self.options.by_file:
            header_len = max_path_len + 1
            self.row_len = max_path_len + len(COMMON_HEADER) + 2
            header = FILE_HEADER

        output_type = self.options.output_type
        if output_type == OUTPUT_DEFAULT:
            self._separator()
            self._emit(f"{header:<{header_len}} {COMMON_HEADER}")
            self._separator()

        if output_type == OUTPUT_MARKDOWN:
            all_headers = f"{header}{' ' * header_len}{COMMON_HEADER}"
            header_line = "| " + insert_pipes_in_the_middle(all_headers)
            self._emit(header_line)
            self._emit("".join(
                self._rule_char(header_line, i, header_len)
                for i in range(len(header_line))
            ))

    @staticmethod
    def _rule_char(header_line: str, i: int, header_len: int) -> str:
        if header_line[i] == "|":
            return "|"
        if i == 1:
            return ":"
        if header_line[i + 1] == "|" and i > header_len:
            return ":"
        return "-"

    def write_footer(self) -> None:
        """Write the totals row for text and markdown output."""
        total = self.result.total
        width = self.result.max_path_length
        output_type = self.options.output_type

        if output_type == OUTPUT_DEFAULT:
            self._separator()
            label = f"{'TOTAL':<{width}}" if self.options.by_file else f"{'TOTAL':<27}"
            self._emit(
                f"{label} {total.total:>6} {total.blanks:>14} "
                f"{total.comments:>14} {total.code:>14}"
            )
            self._separator()

        if output_type == OUTPUT_MARKDOWN:
            if self.options.by_file:
                self._emit(f"| {'':<{width}} |{'':>10}|{'':>12}|{'':>14}|{'':>8} |")
                self._emit(
                    f"| {'TOTAL':<{width}} |{total.total:>9} |{total.blanks:>11} "
                    f"|{total.comments:>13} |{total.code:>8} |"
                )
            else:
                self._emit(f"| {'':>21}|{'':>22}|{'':>12}|{'':>14}|{'':>8} |")
                self._emit(
                    f"| {'TOTAL':>20} |{total.total:>21} |{total.blanks:>11} "
                    f"|{total.comments:>13} |{total.code:>8} |"
                )

    def _write_files(self) -> None:
        result = self.result
        width = result.max_path_length
        files = sort_files(list(result.files.values()), self.options.sort)
        output_type = self.options.output_type

        if output_type == OUTPUT_CLOC_XML:
            self.stream.write(encode_xml(xml_files_result(result.total, files)))
        elif output_type == OUTPUT_SLOCCOUNT:
            for f in files:
                project = ""
                if f.name.startswith("./") or f.name.startswith("/"):
                    parts = f.name.split(os.sep)
                    if len(parts) >= 3:
                        project = parts[1]
                self._emit(f"{f.code}\t{f.lang}\t{project}\t{f.name}")
        elif output_type == OUTPUT_JSON:
            self.stream.write(_to_json(json_files_result(result.total, files)))
        elif output_type == OUTPUT_MARKDOWN:
            for f in files:
                self._emit(
                    f"| {f.name:<{width}} |{1:>8}  |{f.blanks:>11} "
                    f"|{f.comments:>13} |{f.code:>8} |"
                )
        else:
            for f in files:
                self._emit(
                    f"{f.name:<{width}} {f.blanks:>21} {f.comments:>14} {f.code:>14}"
                )

    def _write_languages(self) -> None:
        result = self.result
        languages = sort_languages(
            [lang for lang in result.languages.values() if lang.files],
            self.options.sort,
        )
        output_type = self.options.output_type

        if output_type == OUTPUT_CLOC_XML:
            self.stream.write(encode_xml(xml_languages_result(result.total, languages)))
        elif output_type == OUTPUT_JSON:
            self.stream.write(_to_json(json_languages_result(result.total, languages)))
        elif output_type == OUTPUT_MARKDOWN:
            for lang in languages:
                self._emit(
                    f"| {lang.name:<20} |{len(lang.files):>21} |{lang.blanks:>11} "
                    f"|{lang.comments:>13} |{lang.code:>8} |"
                )
        else:
            for lang in languages:
                self._emit(
                    f"{lang.name:<27} {len(lang.files):>6} {lang.blanks:>14} "
                    f"{lang.comments:>14} {lang.code:>14}"
                )

    def write_result(self) -> None:
        """Write header, body rows and footer."""
        self.write_header()
        if self.options.by_file:
            self._write_files()
        else:
            self._write_languages()
        self.write_footer()


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the command."""
    parser = argparse.ArgumentParser(
        prog="cloctally", usage="%(prog)s [OPTIONS] PATH[...]"
    )
    parser.add_argument("paths", nargs="*", metavar="PATH")
    parser.add_argument(
        "--by-file", action="store_true",
        help="report results for every encountered source file",
    )
    parser.add_argument(
        "--sort", default="code",
        choices=["name", "files", "blank", "comment", "code"],
        help="sort based on a certain column",
    )
    parser.add_argument(
        "--output-type", default=OUTPUT_DEFAULT,
        help="output type [values: default,markdown,cloc-xml,sloccount,json]",
    )
    parser.add_argument(
        "--exclude-ext", default="",
        help="exclude file name extensions (separated commas)",
    )
    parser.add_argument(
        "--include-lang", default="", help="include language name (separated commas)"
    )
    parser.add_argument("--match", default="", help="include file name (regex)")
    parser.add_argument("--not-match", default="", help="exclude file name (regex)")
    parser.add_argument("--match-d", default="", help="include dir name (regex)")
    parser.add_argument("--not-match-d", default="", help="exclude dir name (regex)")
    parser.add_argument(
        "--fullpath", action="store_true",
        help="apply match/not-match options to full file paths instead of base names",
    )
    parser.add_argument("--debug", action="store_true", help="dump debug log for developer")
    parser.add_argument("--skip-duplicated", action="store_true", help="skip duplicated files")
    parser.add_argument(
        "--show-lang", action="store_true", help="print about all languages and extensions"
    )
    parser.add_argument(
        "--version", dest="show_version", action="store_true", help="print version info"
    )
    return parser


def _version() -> str:
    try:
        from cloctally import __version__
    except ImportError:
        return ""
    return __version__


def _compile(parser: argparse.ArgumentParser, pattern: str) -> Optional[re.Pattern[str]]:
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        parser.error(f"invalid regular expression {pattern!r}: {exc}")
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    languages = defined_languages()

    if args.show_version:
        print(f"{_version()} ({_GIT_COMMIT})")
        return 0
    if args.show_lang:
        print(languages.formatted())
        return 0
    if not args.paths:
        parser.print_help(sys.stdout)
        return 0
    if args.by_file and args.sort == "files":
        print("`--sort files` option cannot be used in conjunction with the `--by-file` option")
        return 1

    options = ClocOptions()
    for ext in args.exclude_ext.split(","):
        options.exclude_exts.add(EXTS.get(ext, ext))
    options.re_match = _compile(parser, args.match)
    options.re_not_match = _compile(parser, args.not_match)
    options.re_match_dir = _compile(parser, args.match_d)
    options.re_not_match_dir = _compile(parser, args.not_match_d)
    for lang in args.include_lang.split(","):
        if lang in languages:
            options.include_langs.add(lang)
    options.debug = args.debug
    options.skip_duplicated = args.skip_duplicated
    options.fullpath = args.fullpath

    result = Processor(languages, options).analyze(args.paths)
    OutputBuilder(result, args).write_result()
    return 0


if __name__ == "__main__":
    sys.exit(main())