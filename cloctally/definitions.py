"""Built-in language table and the extension-to-language mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from cloctally.language import Language

# Extensions (or pseudo-extensions) claimed by each language, space separated.
_EXTENSIONS_BY_LANGUAGE: dict[str, str] = {
    "ActionScript": "as",
    "Ada": "ada adb ads",
    "Alda": "alda",
    "Ant": "Ant",
    "AsciiDoc": "adoc asciidoc",
    "Assembly": "asm S s",
    "ATS": "dats sats hats",
    "AutoHotkey": "ahk",
    "Awk": "awk",
    "Ballerina": "bal",
    "Batch": "bat btm cmd",
    "Bicep": "bicep",
    "BitBake": "bb",
    "Berry": "be",
    "Cairo": "cairo",
    "Carbon": "carbon",
    "COBOL": "cbl",
    "BASH": "bash",
    "Bourne Shell": "sh",
    "C": "c ec pgc",
    "Carp": "carp",
    "C Shell": "csh",
    "Erlang": "erl hrl",
    "Cap'n Proto": "capnp",
    "Chapel": "chpl",
    "Circom": "circom",
    "C#": "cs",
    "Clojure": "clj",
    "CoffeeScript": "coffee",
    "ColdFusion": "cfm",
    "ColdFusion CFScript": "cfc",
    "CMake": "cmake",
    "C++": "cc cpp cxx pcc c++",
    "Crystal": "cr",
    "CSS": "css",
    "CUDA": "cu",
    "D": "d",
    "Dart": "dart",
    "Dhall": "dhall",
    "DTrace": "dtrace",
    "Device Tree": "dts dtsi",
    "Dune": "dune",
    "Eiffel": "e",
    "Elm": "elm",
    "LISP": "el lisp lsp sc",
    "Expect": "exp",
    "Elixir": "ex exs",
    "Gherkin": "feature",
    "Factor": "factor",
    "Fish": "fish",
    "Frege": "fr",
    "F*": "fst",
    # F# and GLSL share '.fs'; content decides between them.
    "F#": "F#",
    "GLSL": "GLSL vs",
    "HLSL": "shader cg cginc hlsl",
    "Lean": "lean hlean",
    "Logtalk": "lgt",
    "Lua": "lua",
    "LiveScript": "ls",
    "FORTRAN Legacy": "f F f77 for ftn pfo",
    "FORTRAN Modern": "f90 F90 f95 f03 f08",
    "Gleam": "gleam",
    "ANTLR": "g4",
    "Go": "go go2",
    "Groovy": "groovy gradle",
    "C Header": "h",
    "Handlebars": "hbs",
    "Haskell": "hs",
    "C++ Header": "hpp hh hxx",
    "HTML": "html",
    "Hare": "ha",
    "Hurl": "hurl",
    "Haxe": "hx",
    "Hy": "hy",
    "Idris": "idr",
    "Imba": "imba",
    "SKILL": "il",
    "Arduino Sketch": "ino",
    "Io": "io",
    "Inno Setup": "iss",
    "Jupyter Notebook": "ipynb",
    "JAI": "jai",
    "Java": "java",
    "JSP": "jsp",
    "JavaScript": "js",
    "Julia": "jl",
    "Janet": "janet",
    "JSON": "json",
    "JSX": "jsx",
    "Just": "just",
    "KakouneScript": "kak",
    "Koka": "kk",
    "Kotlin": "kt kts",
    "LD Script": "lds",
    "LESS": "less",
    "Lilypond": "ly",
    # Objective-C, MATLAB and Mercury share '.m'.
    "Objective-C": "Objective-C",
    "MATLAB": "Matlab",
    "Mercury": "Mercury",
    "Markdown": "md markdown",
    "Motoko": "mo Motoko",
    "Nearley": "ne",
    "Nix": "nix",
    "NSIS": "nsi nsh",
    "Nu": "nu",
    "OCaml": "ML ml mli mll mly",
    "Objective-C++": "mm",
    "Maven": "maven",
    "Makefile": "makefile",
    "Meson": "meson",
    "Mustache": "mustache",
    "M4": "m4",
    "Mojo": "mojo \U0001F525",
    "Move": "move",
    "lex": "l",
    "Nim": "nim",
    "Nunjucks": "njk",
    "Odin": "odin",
    "Ohm": "ohm",
    "PHP": "php",
    "Pascal": "pas",
    "Perl": "PL pl pm",
    "Plan9 Shell": "plan9sh",
    "Pony": "pony",
    "PowerShell": "ps1",
    "Plain Text": "text txt",
    "Polly": "polly",
    "Protocol Buffers": "proto",
    "PRQL": "prql",
    "Python": "py",
    "Cython": "pxd pyx",
    "Q": "q",
    "QML": "qml",
    "R": "r R",
    "RAML": "raml",
    "Reason": "re rei",
    "Rebol": "Rebol",
    "Red": "red",
    "Rego": "rego",
    "RMarkdown": "Rmd",
    "Ruby": "rake rb",
    "XML resource": "resx",
    "Ring": "ring",
    "Racket": "rkt",
    "Ruby HTML": "rhtml",
    "Rust": "rs",
    "ReStructuredText": "rst",
    "Sass": "sass scss",
    "Scala": "scala",
    "Scheme": "scm",
    "sed": "sed",
    "Stan": "stan",
    "Starlark": "star",
    "Standard ML": "sml",
    "Solidity": "sol",
    "SQL": "sql",
    "Svelte": "svelte",
    "Swift": "swift",
    "Terra": "t",
    "TeX": "tex sty",
    "Isabelle": "thy",
    "TLA": "tla",
    "Tcl/Tk": "tcl",
    "TOML": "toml",
    "TypeScript": "TypeScript tsx",
    "HCL": "tf",
    "Umka": "um",
    "Unity-Prefab": "mat prefab",
    "Coq": "Coq",
    "Vala": "vala",
    "Verilog": "Verilog",
    "MSBuild script": "csproj vbproj vcproj",
    "Visual Basic": "vb",
    "VimL": "vim",
    "Vue": "vue",
    "Vyper": "vy",
    "XML": "xml XML",
    "XSD": "xsd",
    "XSLT": "xsl xslt",
    "WiX": "wxs",
    "YAML": "yaml yml",
    "Yacc": "y",
    "Yul": "yul",
    "Zephir": "zep",
    "Zig": "zig",
    "Zsh": "zsh",
}

EXTS: dict[str, str] = {
    ext: lang
    for lang, exts in _EXTENSIONS_BY_LANGUAGE.items()
    for ext in exts.split()
}
"""Language name keyed by file extension (or by a pseudo-extension)."""

_NO_BLOCK = (("", ""),)
_C_BLOCK = (("/*", "*/"),)
_ML_BLOCK = (("(*", "*)"),)
_XML_BLOCK = (("<!--", "-->"),)

# Comment syntax shared by groups of languages:
# (line comment prefixes, block comment pairs, language names).
_STYLES: list[tuple[tuple[str, ...], tuple[tuple[str, str], ...], tuple[str, ...]]] = [
    (("//",), _C_BLOCK, (
        "ActionScript", "ANTLR", "Arduino Sketch", "Bicep", "C", "C Header",
        "C#", "Chapel", "Circom", "ColdFusion CFScript", "C++", "C++ Header",
        "CSS", "CUDA", "D", "Device Tree", "GLSL", "Go", "Groovy", "Haxe",
        "HLSL", "JAI", "Java", "JSP", "JavaScript", "JSX", "Koka", "Kotlin",
        "LD Script", "LESS", "Objective-C", "Motoko", "Objective-C++", "Odin",
        "Ohm", "Pony", "QML", "Reason", "Scala", "Sass", "Stan", "Solidity",
        "Swift", "TypeScript", "Umka", "Vala", "Verilog", "Yacc", "Yul",
        "Zephir",
    )),
    (("#",), _NO_BLOCK, (
        "Alda", "Awk", "BASH", "BitBake", "C Shell", "Cap'n Proto", "CMake",
        "Crystal", "Elixir", "Expect", "Fish", "Gherkin", "Hurl", "Janet",
        "Jupyter Notebook", "Just", "KakouneScript", "Nearley", "Makefile",
        "Meson", "Mojo", "M4", "Plan9 Shell", "PRQL", "R", "Rego", "RAML",
        "sed", "Starlark", "Bourne Shell", "Tcl/Tk", "TOML", "YAML", "Zsh",
    )),
    (("//",), _NO_BLOCK, (
        "Ballerina", "Cairo", "Carbon", "Gleam", "Hare", "Move",
        "Protocol Buffers",
    )),
    ((";",), _NO_BLOCK, (
        "AutoHotkey", "Carp", "Dune", "Hy", "Rebol", "Red", "Inno Setup",
    )),
    (("--",), _NO_BLOCK, ("Ada", "Eiffel")),
    (("%",), _NO_BLOCK, ("Erlang", "Logtalk", "Lilypond", "TeX")),
    (("!",), _NO_BLOCK, ("FORTRAN Modern",)),
    (("<!--",), _XML_BLOCK, (
        "Ant", "Markdown", "Maven", "Polly", "Ruby HTML", "MSBuild script",
        "Vue", "WiX", "XML", "XML resource", "XSLT", "XSD",
    )),
    ((), _NO_BLOCK, (
        "AsciiDoc", "JSON", "Plain Text", "RMarkdown", "ReStructuredText",
        "Unity-Prefab",
    )),
    (("--",), (("{-", "-}"),), ("Dhall", "Elm", "Frege", "Haskell", "Idris")),
    ((), _ML_BLOCK, ("OCaml", "Standard ML", "Isabelle")),
    (("#",), (('"""', '"""'),), ("Cython", "Python", "Vyper")),
    ((";",), (("#|", "|#"),), ("Racket", "Scheme")),
    ((), _C_BLOCK, ("DTrace", "lex")),
    (("#",), _C_BLOCK, ("LiveScript", "Nix")),
    (("#", "//"), _C_BLOCK, ("PHP", "HCL", "Ring")),
    (("#",), (("###", "###"),), ("CoffeeScript", "Imba")),
    (("--",), (("--[[", "]]"),), ("Lua", "Terra")),
    (("(*",), _ML_BLOCK, ("Coq", "F#")),
    (("--",), _C_BLOCK, ("SQL",)),
    (("//", ";", "#", "@", "|", "!"), _C_BLOCK, ("Assembly",)),
    (("//",), (("/*", "*/"), ("(*", "*)")), ("ATS",)),
    (("REM", "rem"), _NO_BLOCK, ("Batch",)),
    (("#",), (("#-", "-#"),), ("Berry",)),
    (("#", "#_"), _NO_BLOCK, ("Clojure",)),
    (("*", "/"), _NO_BLOCK, ("COBOL",)),
    ((), (("<!---", "--->"),), ("ColdFusion",)),
    (("//", "///"), _C_BLOCK, ("Dart",)),
    (("(*", "//"), _ML_BLOCK, ("F*",)),
    (("--",), (("/-", "-/"),), ("Lean",)),
    ((";;",), (("#|", "|#"),), ("LISP",)),
    (("! ",), _NO_BLOCK, ("Factor",)),
    (("c", "C", "!", "*"), _NO_BLOCK, ("FORTRAN Legacy",)),
    ((), (("<!--", "-->"), ("{{!", "}}")), ("Handlebars",)),
    (("//", "<!--"), _XML_BLOCK, ("HTML",)),
    (("//", "#"), _C_BLOCK, ("Io",)),
    ((";",), _C_BLOCK, ("SKILL",)),
    (("#",), (("#:=", ":=#"),), ("Julia",)),
    (("#", ";"), _C_BLOCK, ("NSIS",)),
    ((";", "#"), _NO_BLOCK, ("Nu",)),
    (("%",), (("%{", "}%"),), ("MATLAB",)),
    (("%",), _C_BLOCK, ("Mercury",)),
    ((), (("{{!", "}}"),), ("Mustache",)),
    (("#",), (("#[", "]#"),), ("Nim",)),
    ((), (("{#", "#}"), ("<!--", "-->")), ("Nunjucks",)),
    (("//",), (("{", ")"),), ("Pascal",)),
    (("#",), ((":=", ":=cut"),), ("Perl",)),
    (("#",), (("<#", "#>"),), ("PowerShell",)),
    (("/ ",), (("\\", "/"), ("/", "\\")), ("Q",)),
    (("#",), ((":=begin", ":=end"),), ("Ruby",)),
    (("//", "///", "//!"), _C_BLOCK, ("Rust",)),
    (("//",), (("/*", "*/"), ("<!--", "-->")), ("Svelte",)),
    (("\\*",), _ML_BLOCK, ("TLA",)),
    (('"',), _NO_BLOCK, ("VimL",)),
    (("'",), _NO_BLOCK, ("Visual Basic",)),
    (("//", "///"), _NO_BLOCK, ("Zig",)),
]

_REGEX_LINE_COMMENTS: dict[str, list[str]] = {
    "Just": [r"^#[^!].*"],
}

# Languages whose pseudo-extensions in EXTS stand for a real, shared extension.
_SHARED_EXT = {"Objective-C": "m", "MATLAB": "m", "Mercury": "m", "F#": "fs",
               "TypeScript": "ts", "Motoko": "mo"}


def lang_to_exts(lang: str) -> str:
    """Return the extensions mapped to ``lang``, joined by ``", "``."""
    exts = []
    for ext, name in EXTS.items():
        if name != lang:
            continue
        if lang in _SHARED_EXT:
            ext = _SHARED_EXT[lang]
        elif lang == "GLSL" and ext == "GLSL":
            ext = "fs"
        exts.append(ext)
    return ", ".join(exts)


@dataclass
class DefinedLanguages:
    """Known languages keyed by their name."""

    langs: dict[str, Language] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Language:
        return self.langs[name]

    def __contains__(self, name: object) -> bool:
        return name in self.langs

    def __iter__(self) -> Iterator[str]:
        return iter(self.langs)

    def __len__(self) -> int:
        return len(self.langs)

    def formatted(self) -> str:
        """List every language name with its extensions, one per line."""
        names = sorted(lang.name for lang in self.langs.values())
        return "".join(f"{name:<30} ({lang_to_exts(name)})\n" for name in names)


def defined_languages() -> DefinedLanguages:
    """Build a fresh table of every built-in language."""
    langs: dict[str, Language] = {}
    for line_comments, multi_lines, names in _STYLES:
        for name in names:
            language = Language(name, list(line_comments), list(multi_lines))
            patterns = _REGEX_LINE_COMMENTS.get(name)
            if patterns:
                language.with_regex_line_comments(patterns)
            langs[name] = language
    return DefinedLanguages(langs)