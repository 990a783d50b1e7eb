"""Package surface tests."""

from __future__ import annotations

import text_compare
from text_compare import aggregator, alignment, classifier, inline, lines, models, report


def test_package_modules_are_importable() -> None:
    assert alignment is not None
    assert lines is not None
    assert models is not None
    assert classifier is not None
    assert inline is not None
    assert aggregator is not None
    assert report is not None


def test_package_exposes_compare_text() -> None:
    assert text_compare.compare_text is report.compare_text
