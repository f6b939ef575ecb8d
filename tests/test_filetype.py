import pytest

from cloctally.filetype import (
    file_type_by_shebang,
    get_file_type,
    get_shebang,
    guess_ambiguous_language,
)
from cloctally.options import ClocOptions


@pytest.mark.parametrize(
    "line, expected",
    [
        ("#!/usr/bin/env python", "py"),
        ("#! /usr/bin/env python", "py"),
        ("#!/usr/bin/env bash", "bash"),
        ("#!/usr/bin/bash", "bash"),
        ("#! /usr/bin/bash", "bash"),
        ("#!/usr/rc", "plan9sh"),
        ("#!./perl -o", "pl"),
    ],
)
def test_get_shebang(line, expected):
    assert get_shebang(line) == expected


def test_get_shebang_not_a_shebang():
    assert get_shebang("print('hello')") is None


def test_file_type_by_shebang(tmp_path):
    script = tmp_path / "tool"
    script.write_text("  #!/usr/bin/env ruby\nputs 1\n")
    assert file_type_by_shebang(str(script)) == "rb"


def test_file_type_by_shebang_needs_newline(tmp_path):
    script = tmp_path / "tool"
    script.write_text("#!/usr/bin/env ruby")
    assert file_type_by_shebang(str(script)) is None


def test_file_type_by_shebang_missing_file(tmp_path):
    assert file_type_by_shebang(str(tmp_path / "missing")) is None


def test_get_file_type_plain_extension(tmp_path):
    path = tmp_path / "main.go"
    path.write_text("package main\n")
    assert get_file_type(str(path), ClocOptions()) == "go"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("CMakeLists.txt", "cmake"),
        ("meson.build", "meson"),
        ("configure.ac", "m4"),
        ("Makefile.am", "makefile"),
        ("pom.xml", "maven"),
        ("build.xml", "Ant"),
        ("Makefile", "makefile"),
        ("Justfile", "just"),
        ("dune", "dune"),
    ],
)
def test_get_file_type_special_names(tmp_path, name, expected):
    path = tmp_path / name
    path.write_text("x\n")
    assert get_file_type(str(path), ClocOptions()) == expected


def test_get_file_type_rebar_is_skipped(tmp_path):
    path = tmp_path / "rebar"
    path.write_text("x\n")
    assert get_file_type(str(path), ClocOptions()) is None


def test_get_file_type_shebang_without_extension(tmp_path):
    path = tmp_path / "run"
    path.write_text("#!/usr/bin/env python\nprint(1)\n")
    assert get_file_type(str(path), ClocOptions()) == "py"


def test_get_file_type_no_extension(tmp_path):
    path = tmp_path / "README"
    path.write_text("hello\n")
    assert get_file_type(str(path), ClocOptions()) is None


def test_get_file_type_typescript(tmp_path):
    path = tmp_path / "app.ts"
    path.write_text("const x: number = 1;\n")
    assert get_file_type(str(path), ClocOptions()) == "TypeScript"


def test_get_file_type_unreadable_ambiguous(tmp_path):
    assert get_file_type(str(tmp_path / "gone.m"), ClocOptions()) is None


def test_guess_objective_c():
    content = b'#import "Foo.h"\n@interface Foo\n@end\n'
    assert guess_ambiguous_language("Foo.m", content) == "Objective-C"


def test_guess_matlab():
    content = b"% compute\nfunction y = f(x)\n  y = x;\nend\n"
    assert guess_ambiguous_language("f.m", content) == "Matlab"


def test_guess_rebol_and_r():
    assert guess_ambiguous_language("a.r", b"REBOL [Title: \"x\"]\n") == "Rebol"
    assert guess_ambiguous_language("a.r", b"x <- c(1, 2)\n") == "R"


def test_guess_coq_and_verilog():
    assert guess_ambiguous_language("a.v", b"Theorem t : True.\nProof.\nQed.\n") == "Coq"
    assert guess_ambiguous_language("a.v", b"module m;\nendmodule\n") == "Verilog"


def test_guess_glsl():
    content = b"#version 330\nvoid main() { }\n"
    assert guess_ambiguous_language("a.fs", content) == "GLSL"


def test_guess_binary_is_empty():
    assert guess_ambiguous_language("a.mo", b"\xde\x12\x04\x95\x00\x00") == ""


def test_guess_motoko():
    assert guess_ambiguous_language("a.mo", b"actor { };\n") == "Motoko"