import re

import pytest

from cloctally.language import ClocLanguage, Language, SortTag, sort_languages


def _lang(name, files=0, code=0, comments=0, blanks=0):
    return Language(
        name,
        files=[f"{name}{i}" for i in range(files)],
        code=code,
        comments=comments,
        blanks=blanks,
    )


def test_new_language_starts_empty():
    lang = Language("Go", ["//"], [["/*", "*/"]])
    assert lang.files == []
    assert (lang.code, lang.comments, lang.blanks, lang.total) == (0, 0, 0, 0)
    assert lang.multi_lines == [("/*", "*/")]
    assert lang.line_comments == ["//"]


def test_with_regex_line_comments_compiles_and_returns_self():
    lang = Language("Just", ["#"], [("", "")])
    result = lang.with_regex_line_comments([r"^#[^!].*"])
    assert result is lang
    assert len(lang.regex_line_comments) == 1
    assert lang.regex_line_comments[0].search("# this is comment")
    assert not lang.regex_line_comments[0].search("#!/usr/bin/env node")


def test_with_regex_line_comments_rejects_bad_pattern():
    with pytest.raises(re.error):
        Language("X").with_regex_line_comments(["("])


def test_copy_definition_keeps_syntax_and_drops_counts():
    lang = Language("Just", ["#"], [("", "")]).with_regex_line_comments([r"^#[^!].*"])
    lang.files.append("a.just")
    lang.code = 5
    copy = lang.copy_definition()
    assert copy.name == lang.name
    assert copy.line_comments == lang.line_comments
    assert copy.multi_lines == lang.multi_lines
    assert copy.regex_line_comments == lang.regex_line_comments
    assert copy.files == []
    assert copy.code == 0
    copy.files.append("b.just")
    assert lang.files == ["a.just"]


def test_cloc_language_from_language():
    lang = _lang("Go", files=2, code=7, comments=3, blanks=1)
    row = ClocLanguage.from_language(lang)
    assert row == ClocLanguage("Go", 2, 7, 3, 1)


def test_cloc_language_to_dict_omits_empty_name():
    assert ClocLanguage().to_dict() == {"files": 0, "code": 0, "comment": 0, "blank": 0}
    assert ClocLanguage(name="Go").to_dict()["name"] == "Go"


def test_sort_by_name():
    langs = [_lang("Python"), _lang("C"), _lang("Go")]
    assert [x.name for x in sort_languages(langs, "name")] == ["C", "Go", "Python"]


def test_sort_by_code_descending():
    langs = [_lang("A", code=1), _lang("B", code=9), _lang("C", code=4)]
    result = sort_languages(langs, SortTag.CODE)
    codes = [x.code for x in result]
    assert codes == sorted(codes, reverse=True)


def test_sort_by_files_ties_broken_by_code():
    langs = [_lang("A", files=1, code=5), _lang("B", files=2, code=1), _lang("C", files=1, code=8)]
    assert [x.name for x in sort_languages(langs, "files")] == ["B", "C", "A"]


def test_sort_by_comments_ties_broken_by_code():
    langs = [_lang("A", comments=2, code=1), _lang("B", comments=2, code=3), _lang("C", comments=5)]
    assert [x.name for x in sort_languages(langs, "comment")] == ["C", "B", "A"]


def test_sort_by_blanks_ties_broken_by_code():
    langs = [_lang("A", blanks=0, code=9), _lang("B", blanks=4, code=1), _lang("C", blanks=4, code=2)]
    assert [x.name for x in sort_languages(langs, "blank")] == ["C", "B", "A"]


def test_unknown_tag_sorts_by_code():
    langs = [_lang("A", code=1), _lang("B", code=2)]
    assert sort_languages(langs, "bogus") == sort_languages(langs, SortTag.CODE)


def test_sort_does_not_modify_input():
    langs = [_lang("B"), _lang("A")]
    sort_languages(langs, "name")
    assert [x.name for x in langs] == ["B", "A"]


def test_sort_tag_parse():
    assert SortTag.parse("files") is SortTag.FILES
    assert SortTag.parse(SortTag.NAME) is SortTag.NAME
    assert SortTag.parse("unknown") is SortTag.CODE