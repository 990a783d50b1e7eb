"""Test assertion helper that fails with a text comparison report."""

from __future__ import annotations

from text_compare.report import compare_text


class TextMismatchError(AssertionError):
    """Assertion failure whose message is the full comparison report."""

    def __init__(self, report: str) -> None:
        super().__init__(report)
        self.report = report


def assert_same_text(actual: str, expected: str) -> None:
    """Fail with a report of how `actual` differs from `expected`."""
    report = compare_text(expected, actual)
    if report:
        raise TextMismatchError(report)
