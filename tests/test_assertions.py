from __future__ import annotations

import pytest

from text_compare import compare_text
from text_compare.assertions import TextMismatchError, assert_same_text


def test_assert_same_text_passes_for_equal_text() -> None:
    assert assert_same_text("same\ntext", "same\ntext") is None


def test_assert_same_text_raises_with_report() -> None:
    with pytest.raises(TextMismatchError) as excinfo:
        assert_same_text("bar", "foo")

    assert excinfo.value.report == compare_text("foo", "bar")
    assert str(excinfo.value) == excinfo.value.report
    assert "| [-f-][+b+][-o-][+a+][-o-][+r+]" in excinfo.value.report


def test_text_mismatch_is_an_assertion_error() -> None:
    with pytest.raises(AssertionError, match="Text comparison failed:"):
        assert_same_text("actual", "expected")
