import pytest

from cloctally.definitions import EXTS, DefinedLanguages, defined_languages, lang_to_exts
from cloctally.language import Language


@pytest.fixture
def table():
    return defined_languages()


def test_every_language_is_keyed_by_its_name(table):
    assert len(table) > 0
    for key, lang in table.langs.items():
        assert lang.name == key


def test_every_extension_maps_to_a_defined_language(table):
    missing = {name for name in EXTS.values() if name not in table}
    assert missing == set()


def test_python_definition(table):
    python = table["Python"]
    assert python.line_comments == ["#"]
    assert python.multi_lines == [('"""', '"""')]
    assert python.files == []
    assert python.code == 0


def test_ats_has_two_block_comment_pairs(table):
    assert table["ATS"].multi_lines == [("/*", "*/"), ("(*", "*)")]


def test_just_uses_regex_line_comments(table):
    just = table["Just"]
    assert len(just.regex_line_comments) == 1
    pattern = just.regex_line_comments[0]
    assert pattern.match("# this is comment")
    assert pattern.match("#!/usr/bin/env python3") is None


def test_only_just_has_regex_line_comments(table):
    with_regex = {name for name, lang in table.langs.items() if lang.regex_line_comments}
    assert with_regex == {"Just"}


def test_tables_are_independent():
    first = defined_languages()
    second = defined_languages()
    first["Go"].files.append("main.go")
    first["Go"].line_comments.append("#")
    assert second["Go"].files == []
    assert second["Go"].line_comments == ["//"]


def test_lang_to_exts_go():
    assert set(lang_to_exts("Go").split(", ")) == {"go", "go2"}


def test_lang_to_exts_shared_m_extension():
    assert lang_to_exts("Objective-C") == "m"
    assert lang_to_exts("MATLAB") == "m"
    assert lang_to_exts("Mercury") == "m"


def test_lang_to_exts_motoko_all_mo():
    parts = lang_to_exts("Motoko").split(", ")
    assert set(parts) == {"mo"}
    assert len(parts) == sum(1 for name in EXTS.values() if name == "Motoko")


def test_lang_to_exts_glsl_maps_pseudo_ext():
    assert set(lang_to_exts("GLSL").split(", ")) == {"fs", "vs"}


def test_lang_to_exts_unknown_is_empty():
    assert lang_to_exts("NoSuchLanguage") == ""


def test_formatted_lists_all_sorted(table):
    text = table.formatted()
    lines = text.splitlines()
    assert text.endswith("\n")
    assert len(lines) == len(table)
    names = [line[:30].rstrip() for line in lines]
    assert names == sorted(table.langs)


def test_formatted_line_layout(table):
    lines = table.formatted().splitlines()
    go_line = next(line for line in lines if line.startswith("Go "))
    assert go_line == "Go".ljust(30) + " (" + lang_to_exts("Go") + ")"


def test_contains_and_getitem():
    lang = Language("Foo", ["#"], [("", "")])
    table = DefinedLanguages({"Foo": lang})
    assert "Foo" in table
    assert "Bar" not in table
    assert table["Foo"] is lang
    assert list(table) == ["Foo"]
    with pytest.raises(KeyError):
        table["Bar"]