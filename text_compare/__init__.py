"""Checkout shim that resolves `text_compare` to the src-layout package."""

from __future__ import annotations

from pathlib import Path
from pkgutil import extend_path

__path__ = extend_path(__path__, __name__)  # type: ignore[name-defined]

_src_pkg = Path(__file__).resolve().parent.parent / "src" / __name__
if _src_pkg.is_dir():
    __path__.append(str(_src_pkg))

from text_compare.report import compare_text  # noqa: E402

__all__ = [
    "compare_text",
    "alignment",
    "lines",
    "models",
    "classifier",
    "inline",
    "aggregator",
    "report",
    "assertions",
    "comparison_status",
    "config",
]
