import json
import xml.etree.ElementTree as ET

from cloctally.analyzer import ClocFile
from cloctally.language import Language
from cloctally.report import (
    encode_xml,
    json_files_result,
    json_languages_result,
    xml_files_result,
    xml_languages_result,
)


def _compact(data):
    return json.dumps(data, separators=(",", ":"))


def test_json_files_result_matches_expected_text():
    total = Language("")
    files = [ClocFile(name="one.go", lang="Go"), ClocFile(name="two.go", lang="Go")]
    result = json_files_result(total, files)
    assert result["files"][0]["name"] == "one.go"
    assert result["files"][1]["name"] == "two.go"
    assert result["files"][1]["language"] == "Go"
    expected = (
        '{"files":[{"code":0,"comment":0,"blank":0,"name":"one.go","language":"Go"},'
        '{"code":0,"comment":0,"blank":0,"name":"two.go","language":"Go"}],'
        '"total":{"files":0,"code":0,"comment":0,"blank":0}}'
    )
    assert _compact(result) == expected


def test_json_files_result_empty_is_null():
    result = json_files_result(Language(""), [])
    assert result["files"] is None


def test_json_languages_result_rows_and_total():
    go = Language("Go", files=["a.go", "b.go"], code=10, comments=3, blanks=2)
    total = Language("TOTAL", code=10, comments=3, blanks=2, total=2)
    result = json_languages_result(total, [go])
    assert result["languages"] == [
        {"name": "Go", "files": 2, "code": 10, "comment": 3, "blank": 2}
    ]
    assert result["total"] == {"files": 2, "code": 10, "comment": 3, "blank": 2}


def test_json_languages_result_empty_is_null():
    result = json_languages_result(Language("TOTAL"), [])
    assert result["languages"] is None
    assert "name" not in result["total"]


def test_xml_languages_round_trip():
    go = Language("Go", files=["a.go"], code=7, comments=1, blanks=4)
    total = Language("TOTAL", code=7, comments=1, blanks=4, total=1)
    text = encode_xml(xml_languages_result(total, [go]))
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
    assert text.endswith("\n")
    root = ET.fromstring(text.split("\n", 1)[1])
    assert root.tag == "results"
    language = root.find("languages/language")
    assert language.attrib == {
        "name": "Go",
        "files_count": "1",
        "code": "7",
        "comment": "1",
        "blank": "4",
    }
    assert root.find("languages/total").attrib["sum_files"] == "1"


def test_xml_layout_uses_indentation_and_explicit_close_tags():
    total = Language("TOTAL")
    text = encode_xml(xml_languages_result(total, []))
    lines = text.splitlines()
    assert lines[1] == "<results>"
    assert lines[2] == "  <languages>"
    assert lines[3].startswith("    <total ")
    assert lines[3].endswith("></total>")
    assert lines[-1] == "</results>"


def test_xml_files_escapes_attributes():
    name = 'we"ird&<name>.go'
    files = [ClocFile(code=2, comments=0, blanks=1, name=name, lang="Go")]
    text = encode_xml(xml_files_result(Language("TOTAL", code=2, blanks=1), files))
    assert "&#34;" in text and "&amp;" in text and "&lt;" in text
    root = ET.fromstring(text.split("\n", 1)[1])
    file_elem = root.find("files/file")
    assert file_elem.attrib["name"] == name
    assert list(file_elem.attrib) == ["code", "comment", "blank", "name", "language"]
    assert root.find("files/total").attrib == {"code": "2", "comment": "0", "blank": "1"}