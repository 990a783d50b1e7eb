from __future__ import annotations

import pytest

from text_compare.inline import render_character_diff


@pytest.mark.parametrize(
    ("original", "revised", "expected"),
    [
        ("foo", "bar", "[-f-][+b+][-o-][+a+][-o-][+r+]"),
        ("    <p>Hello</p>", "   <p>Hello</p>", "   [- -]<p>Hello</p>"),
        ("Line with one space ", "Line with one space", "Line with one space[- -]"),
        ("Line with two spaces  ", "Line with two spaces", "Line with two spaces[- -][- -]"),
        ("This is a paragraph", "This is paragraph", "This is [-a-][- -]paragraph"),
        ("with two lines.", "with 2 lines.", "with [-t-][+2+][-w-][-o-] lines."),
        ("* List item 2", "* List item three", "* List item [-2-][+t+][+h+][+r+][+e+][+e+]"),
        ("> with multiple lines", "> with multiple lines.", "> with multiple lines[+.+]"),
        (
            "This line will change",
            "This line has changed",
            "This line [-w-][+h+][-i-][+a+][-l-][+s+][-l-] change[+d+]",
        ),
        (
            '    println("Hello")',
            '  println("Hello");',
            '  [- -][- -]println("Hello")[+;+]',
        ),
    ],
)
def test_render_character_diff(original: str, revised: str, expected: str) -> None:
    assert render_character_diff(original, revised) == expected


def test_render_character_diff_returns_identical_line_verbatim() -> None:
    assert render_character_diff("same", "same") == "same"


def test_render_character_diff_handles_empty_sides() -> None:
    assert render_character_diff("", "ab") == "[+a+][+b+]"
    assert render_character_diff("ab", "") == "[-a-][-b-]"


def test_render_character_diff_works_on_code_points() -> None:
    assert render_character_diff("café", "cafe") == "caf[-é-][+e+]"
