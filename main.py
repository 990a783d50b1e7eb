"""NiceGUI entrypoint for the Text Compare viewer."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from nicegui import ui
from nicegui.events import UploadEventArguments

from text_compare.comparison_status import describe_comparison
from text_compare.config import ConfigError, ViewerConfig, get_config

LOGGER = logging.getLogger("text_compare.ui")
PROJECT_LOGGERS = ("text_compare.ui", "text_compare.report")


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target_path = path.resolve()
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            continue
        handler_path = Path(getattr(handler, "baseFilename", "")).resolve()
        if handler_path == target_path:
            return True
    return False


def _configure_logging(config: ViewerConfig) -> None:
    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    level = logging.DEBUG if config.verbose_logging else logging.INFO

    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        if not _has_file_handler(logger, config.log_file):
            file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        logger.setLevel(level)
        logger.propagate = False


def build_ui() -> None:
    """Render the comparison page with both text inputs and the report panel."""
    ui.add_css(
        """
        .tc-field,
        .tc-field .q-field {
            width: 100%;
        }
        .tc-report textarea {
            font-family: monospace;
        }
        """
    )

    ui.label("Text Compare").classes("text-3xl font-bold")
    ui.label("Line and character level differences between two texts").classes("text-sm text-gray-600")

    with ui.row().classes("w-full items-start gap-6"):
        with ui.card().classes("w-full lg:w-1/2"):
            ui.label("Original").classes("text-xl font-semibold")
            original_input = ui.textarea(label="Original text", placeholder="Expected text").props(
                "autogrow"
            ).classes("tc-field")
            ui.upload(
                label="Load original from file",
                on_upload=lambda event: load_upload_action(event, original_input, "original"),
                auto_upload=True,
            ).classes("w-full")

        with ui.card().classes("w-full lg:w-1/2"):
            ui.label("Revised").classes("text-xl font-semibold")
            revised_input = ui.textarea(label="Revised text", placeholder="Actual text").props(
                "autogrow"
            ).classes("tc-field")
            ui.upload(
                label="Load revised from file",
                on_upload=lambda event: load_upload_action(event, revised_input, "revised"),
                auto_upload=True,
            ).classes("w-full")

    with ui.card().classes("w-full"):
        ui.label("Report").classes("text-xl font-semibold")
        status_label = ui.label("Comparison status: (not compared yet)").classes("font-medium")
        error_label = ui.label("Error: None").classes("text-sm text-red-700")
        report_output = ui.textarea(label="Comparison report").props("readonly autogrow").classes(
            "tc-field tc-report"
        )

        def set_error(message: str) -> None:
            error_label.set_text(f"Error: {message}")

        def compare_action() -> None:
            try:
                status_text, report_text = describe_comparison(
                    str(original_input.value or ""),
                    str(revised_input.value or ""),
                )
                status_label.set_text(status_text)
                report_output.value = report_text
                set_error("None")
                LOGGER.info("%s", status_text)
            except Exception as exc:
                LOGGER.exception("Comparison failed unexpectedly.")
                status_label.set_text("Comparison status: Error")
                set_error(f"Comparison failed: {exc}")
                ui.notify("Comparison failed.", type="negative")

        def swap_action() -> None:
            original_value = original_input.value
            original_input.value = revised_input.value
            revised_input.value = original_value
            compare_action()

        def clear_action() -> None:
            original_input.value = ""
            revised_input.value = ""
            report_output.value = ""
            status_label.set_text("Comparison status: (not compared yet)")
            set_error("None")

        async def copy_report_action() -> None:
            content = str(report_output.value or "")
            try:
                await ui.run_javascript(f"navigator.clipboard.writeText({json.dumps(content)});")
                ui.notify("Report copied to clipboard.", type="positive")
            except Exception as exc:
                LOGGER.exception("Copy to clipboard failed.")
                set_error(f"Copy failed: {exc}")
                ui.notify("Copy to clipboard failed.", type="negative")

        with ui.row().classes("w-full gap-2"):
            ui.button("Compare", on_click=compare_action)
            ui.button("Swap sides", on_click=swap_action)
            ui.button("Clear", on_click=clear_action)
            ui.button("Copy report", on_click=copy_report_action).props("size=sm")

    def load_upload_action(event: UploadEventArguments, target, side: str) -> None:
        try:
            target.value = event.content.read().decode("utf-8")
            set_error("None")
            ui.notify(f"Loaded {side} text from {event.name}", type="positive")
        except UnicodeDecodeError:
            LOGGER.exception("Upload for %s side is not valid UTF-8.", side)
            set_error(f"Load failed: {event.name} is not UTF-8 text.")
            ui.notify("Load failed: file is not UTF-8 text.", type="negative")
        except Exception as exc:
            LOGGER.exception("Upload for %s side failed unexpectedly.", side)
            set_error(f"Load failed: {exc}")
            ui.notify("Load from file picker failed.", type="negative")


def main() -> None:
    try:
        config = get_config()
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc
    _configure_logging(config)
    print(f"Starting Text Compare at http://{config.host}:{config.port}")
    build_ui()
    ui.run(host=config.host, port=config.port, title="Text Compare", show=False, reload=False)


if __name__ == "__main__":
    main()
