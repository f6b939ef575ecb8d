"""Working out the language key of a file from its name, shebang or content."""

from __future__ import annotations

import os
import re
from typing import Optional

from cloctally.options import ClocOptions

_RE_SHEBANG_ENV = re.compile(r"^#! *(\S+/env) ([a-zA-Z]+)")
_RE_SHEBANG_LANG = re.compile(r"^#! *[.a-zA-Z/]+/([a-zA-Z]+)")

_SHEBANG_TO_EXT = {
    "gosh": "scm",
    "make": "make",
    "perl": "pl",
    "rc": "plan9sh",
    "python": "py",
    "ruby": "rb",
    "escript": "erl",
}

# Extensions shared by several languages; the content decides.
_AMBIGUOUS_EXTS = {".m", ".v", ".fs", ".r", ".ts"}

_HEURISTICS: dict[str, list[tuple[str, re.Pattern[str]]]] = {
    ".m": [
        (
            "Objective-C",
            re.compile(
                r"^\s*(?:@(?:interface|class|protocol|property|end|synthesize"
                r"|selector|implementation|import)\b|#import\s+.+\.h[\">])",
                re.M,
            ),
        ),
        ("Mercury", re.compile(r":-\s*module\b")),
        ("Matlab", re.compile(r"^\s*(?:%|function\b)", re.M)),
    ],
    ".v": [
        (
            "Coq",
            re.compile(
                r"^\s*(?:Require|Import|Theorem|Lemma|Proof|Qed|Definition"
                r"|Inductive|Fixpoint)\b",
                re.M,
            ),
        ),
    ],
    ".fs": [
        (
            "GLSL",
            re.compile(
                r"^\s*(?:#version|precision\s|uniform\s|varying\s|attribute\s"
                r"|(?:in|out)\s+vec[234])|gl_FragColor|\bvoid\s+main\s*\(",
                re.M,
            ),
        ),
        ("F#", re.compile(r"^\s*(?:#light|let|module|namespace|open|type)\b", re.M)),
    ],
    ".r": [
        ("Rebol", re.compile(r"\bREBOL\s*\[", re.I)),
    ],
    ".ts": [
        ("XML", re.compile(r"<TS\b")),
    ],
}

_FALLBACK = {
    ".m": "Objective-C",
    ".v": "Verilog",
    ".fs": "F#",
    ".r": "R",
    ".ts": "TypeScript",
}

_SPECIAL_NAMES = {
    "meson.build": "meson",
    "meson_options.txt": "meson",
    "CMakeLists.txt": "cmake",
    "configure.ac": "m4",
    "Makefile.am": "makefile",
    "build.xml": "Ant",
    "pom.xml": "maven",
}

_SPECIAL_NAMES_NOCASE = {
    "justfile": "just",
    "makefile": "makefile",
    "nukefile": "nu",
    "dune": "dune",
}


def get_shebang(line: str) -> Optional[str]:
    """Return the language key named by a shebang line, or ``None``."""
    match = _RE_SHEBANG_ENV.match(line)
    if match is None:
        match = _RE_SHEBANG_LANG.match(line)
        if match is None:
            return None
        lang = match.group(1)
    else:
        lang = match.group(2)
    return _SHEBANG_TO_EXT.get(lang, lang)


def file_type_by_shebang(path: str) -> Optional[str]:
    """Read the first line of ``path`` and interpret it as a shebang."""
    try:
        with open(path, "rb") as fp:
            first = fp.readline()
    except OSError:
        return None
    if not first.endswith(b"\n"):
        return None
    line = first.decode("utf-8", errors="replace").lstrip()
    if len(line) > 2 and line.startswith("#!"):
        return get_shebang(line)
    return None


def guess_ambiguous_language(path: str, content: bytes) -> str:
    """Pick a language key for a file whose extension several languages share.

    Returns a key of the extension table, or an empty string when the
    content is binary or the extension is not a shared one.
    """
    if b"\x00" in content[:8000]:
        return ""
    ext = _go_ext(path)
    if ext == ".mo":
        return "Motoko" if content else ""
    if ext not in _FALLBACK:
        return ""
    text = content.decode("utf-8", errors="replace")
    for lang, pattern in _HEURISTICS.get(ext, []):
        if pattern.search(text):
            return lang
    return _FALLBACK[ext]


def get_file_type(path: str, options: ClocOptions) -> Optional[str]:
    """Return the key used to look ``path`` up in the extension table.

    ``None`` means the file has no recognisable type.
    """
    ext = _go_ext(path)
    base = os.path.basename(path.rstrip(os.sep)) or path

    if ext in _AMBIGUOUS_EXTS or ext == ".mo":
        try:
            with open(path, "rb") as fp:
                content = fp.read()
        except OSError:
            return None
        lang = guess_ambiguous_language(path, content)
        if options.debug:
            print(f"path={path}, lang={lang}")
        return lang

    if base in _SPECIAL_NAMES:
        return _SPECIAL_NAMES[base]

    lowered = base.lower()
    if lowered == "rebar":
        return None
    if lowered in _SPECIAL_NAMES_NOCASE:
        return _SPECIAL_NAMES_NOCASE[lowered]

    shebang = file_type_by_shebang(path)
    if shebang is not None:
        return shebang

    if len(ext) >= 2:
        return ext[1:]
    return None


def _go_ext(path: str) -> str:
    """Extension including the dot, taken from the last path element."""
    for i in range(len(path) - 1, -1, -1):
        char = path[i]
        if char == os.sep or char == "/":
            break
        if char == ".":
            return path[i:]
    return ""