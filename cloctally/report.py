"""JSON and XML report structures for analysis results."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Optional, Sequence

from cloctally.analyzer import ClocFile
from cloctally.language import ClocLanguage, Language

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

_XML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&#34;",
        "'": "&#39;",
        "\t": "&#x9;",
        "\n": "&#xA;",
        "\r": "&#xD;",
    }
)


def _total_row(total: Language) -> ClocLanguage:
    return ClocLanguage(
        files_count=total.total,
        code=total.code,
        comments=total.comments,
        blanks=total.blanks,
    )


def json_languages_result(
    total: Language, languages: Sequence[Language]
) -> dict[str, Any]:
    """JSON-ready summary of every language and the total.

    The language list is ``None`` when there are no languages.
    """
    rows: Optional[list[dict[str, Any]]] = [
        ClocLanguage.from_language(language).to_dict() for language in languages
    ] or None
    return {"languages": rows, "total": _total_row(total).to_dict()}


def json_files_result(total: Language, files: Sequence[ClocFile]) -> dict[str, Any]:
    """JSON-ready summary of every file and the total.

    The file list is ``None`` when there are no files.
    """
    rows: Optional[list[dict[str, Any]]] = [f.to_dict() for f in files] or None
    return {"files": rows, "total": _total_row(total).to_dict()}


def _element(tag: str, attrs: Sequence[tuple[str, Any]]) -> ET.Element:
    return ET.Element(tag, {key: str(value) for key, value in attrs})


def xml_languages_result(
    total: Language, languages: Sequence[Language]
) -> ET.Element:
    """Build the ``<results>`` tree with one element per language."""
    root = ET.Element("results")
    container = ET.SubElement(root, "languages")
    for language in languages:
        row = ClocLanguage.from_language(language)
        container.append(
            _element(
                "language",
                [
                    ("name", row.name),
                    ("files_count", row.files_count),
                    ("code", row.code),
                    ("comment", row.comments),
                    ("blank", row.blanks),
                ],
            )
        )
    container.append(
        _element(
            "total",
            [
                ("sum_files", total.total),
                ("code", total.code),
                ("comment", total.comments),
                ("blank", total.blanks),
            ],
        )
    )
    return root


def xml_files_result(total: Language, files: Sequence[ClocFile]) -> ET.Element:
    """Build the ``<results>`` tree with one element per file."""
    root = ET.Element("results")
    container = ET.SubElement(root, "files")
    for f in files:
        container.append(
            _element(
                "file",
                [
                    ("code", f.code),
                    ("comment", f.comments),
                    ("blank", f.blanks),
                    ("name", f.name),
                    ("language", f.lang),
                ],
            )
        )
    container.append(
        _element(
            "total",
            [
                ("code", total.code),
                ("comment", total.comments),
                ("blank", total.blanks),
            ],
        )
    )
    return root


def _serialize(element: ET.Element, depth: int, lines: list[str]) -> None:
    indent = "  " * depth
    attrs = "".join(
        f' {key}="{str(value).translate(_XML_ESCAPES)}"'
        for key, value in element.attrib.items()
    )
    children = list(element)
    if not children:
        lines.append(f"{indent}<{element.tag}{attrs}></{element.tag}>")
        return
    lines.append(f"{indent}<{element.tag}{attrs}>")
    for child in children:
        _serialize(child, depth + 1, lines)
    lines.append(f"{indent}</{element.tag}>")


def encode_xml(root: ET.Element) -> str:
    """Render a result tree as an indented XML document ending in a newline."""
    lines: list[str] = []
    _serialize(root, 0, lines)
    return XML_HEADER + "\n".join(lines) + "\n"