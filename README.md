# cloctally

Count the blank, comment and code lines in a source tree, grouped by
language or by file. Well over a hundred languages are recognised: by
file extension, by well-known file names such as `Makefile`,
`CMakeLists.txt`, `meson.build` or `pom.xml`, and by the shebang line of
scripts.

## Installation

```
pip install .
```

## Command line

```
cloctally [OPTIONS] PATH [PATH ...]
```

The same command can be run as `python -m cloctally.cli`.

For example:

```
cloctally .
cloctally --by-file --sort name src
cloctally --output-type json --exclude-ext js,css .
cloctally --include-lang Python,Go --not-match-d vendor .
cloctally --show-lang
```

Options:

| Option | Meaning |
| --- | --- |
| `--by-file` | report results for every source file found |
| `--sort {name,files,blank,comment,code}` | column to sort by (default `code`); `files` cannot be combined with `--by-file` |
| `--output-type TYPE` | `default` (plain table), `markdown`, `cloc-xml`, `sloccount` or `json`; any other value gives the plain table |
| `--exclude-ext EXTS` | extensions (or language names) to leave out, separated by commas |
| `--include-lang LANGS` | only count these language names, separated by commas |
| `--match REGEX` / `--not-match REGEX` | include / exclude by file name |
| `--match-d REGEX` / `--not-match-d REGEX` | include / exclude by directory name |
| `--fullpath` | apply `--match` and `--not-match` to the full path instead of the base name |
| `--skip-duplicated` | turn off the check for files with identical content |
| `--debug` | print a line-by-line classification trace |
| `--show-lang` | list every known language with its extensions |
| `--version` | print the version |

Without `--skip-duplicated`, files whose content is identical (by MD5
digest) are counted only once. Paths containing a version-control
directory name (`.git`, `.hg`, `.svn`, `.bzr`, `.cvs`) are skipped unless
the starting path itself is one. Symbolic links are not followed.

The `sloccount` output type only applies together with `--by-file`.

## Library

```python
from cloctally.definitions import defined_languages
from cloctally.options import ClocOptions
from cloctally.processor import Processor

result = Processor(defined_languages(), ClocOptions()).analyze(["."])

for name, language in result.languages.items():
    print(name, len(language.files), language.code, language.comments, language.blanks)
print("total code lines:", result.total.code)
```

`Result` also holds `files` (a `ClocFile` per path) and
`max_path_length`.

A single file or stream can be counted directly with `analyze_file` or
`analyze_reader`:

```python
import io

from cloctally.analyzer import analyze_reader
from cloctally.definitions import defined_languages
from cloctally.options import ClocOptions

python = defined_languages().langs["Python"]
counts = analyze_reader("example.py", python, io.StringIO("x = 1\n# note\n"), ClocOptions())
print(counts.code, counts.comments, counts.blanks)
```

`ClocOptions` also takes callbacks (`on_code`, `on_comment`, `on_blank`)
that receive each stripped line as it is classified.

Other pieces:

- `cloctally.language`: `Language`, `ClocLanguage`, `SortTag` and
  `sort_languages`; `cloctally.analyzer.sort_files` orders `ClocFile`s.
- `cloctally.definitions`: `EXTS` (extension to language name),
  `defined_languages()`, `lang_to_exts()` and `DefinedLanguages.formatted()`.
- `cloctally.filetype`: `get_file_type`, `get_shebang`,
  `file_type_by_shebang`, `guess_ambiguous_language`.
- `cloctally.report`: `json_languages_result`, `json_files_result`,
  `xml_languages_result`, `xml_files_result` and `encode_xml`.

## Limitations

Files ending in `.m`, `.v`, `.fs`, `.r` and `.ts`, which several
languages share, are told apart by a few simple content patterns only,
with a fixed fallback per extension; there is no full language-detection
engine. Block comments are recognised by their markers alone, so markers
inside string literals are taken as comments.