"""Rich console handler for structured processing events.

Where: platform/logging/handlers.py
What: Render ``processing_event`` log records with icons, colours and compact paths.
Why: Keep console formatting separate from logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that styles processing events and shortens file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "processing.run.start": ("🚀", "cyan"),
        "processing.run.complete": ("✅", "green"),
        "processing.run.no_files": ("ℹ️", "yellow"),
        "processing.file.start": ("🎧", "blue"),
        "processing.file.tagged": ("🏷️", "green"),
        "processing.file.move": ("📦", "magenta"),
        "processing.file.skip": ("↪️", "yellow"),
        "processing.file.conflict": ("⚠️", "yellow"),
        "processing.file.error": ("⛔", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "processing.file.start": "Processing ",
        "processing.file.tagged": "Tagged ",
        "processing.file.move": "Moving ",
        "processing.file.skip": "Skipped ",
        "processing.file.conflict": "Conflict ",
        "processing.file.error": "Failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Render ``path`` relative to ``base`` when possible, keeping the last segments."""

        pure_path = self._to_pure_path(path)
        if base:
            try:
                relative = pure_path.relative_to(self._to_pure_path(base))
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                pure_path = relative

        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT :]

        text = Text()
        if truncated:
            _ = text.append("…" + separator, style=Style(color="magenta"))
        elif pure_path.anchor:
            _ = text.append(pure_path.anchor, style=Style(color="magenta"))
        for index, part in enumerate(parts):
            if index:
                _ = text.append(separator, style=Style(color="magenta"))
            _ = text.append(part, style=Style(color="white"))
        return text

    def _render_run(self, record: logging.LogRecord, event: str, body: Text) -> None:
        step = getattr(record, "step", None)
        label = f"{step.capitalize()} " if isinstance(step, str) else ""
        if event == "processing.run.start":
            _ = body.append(f"{label}start")
            total_files = getattr(record, "total_files", None)
            if isinstance(total_files, int):
                _ = body.append(f" [total={total_files}]")
        elif event == "processing.run.complete":
            _ = body.append(f"{label}complete")
            metrics: list[str] = []
            for key in ("processed", "skipped", "failed"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        else:
            _ = body.append("No files to process")

        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory)))

    def _render_file(self, record: logging.LogRecord, event: str, body: Text) -> None:
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(
                self._format_path(str(source_path), base=getattr(record, "source_base_path", None))
            )

        target_path = getattr(record, "target_path", None)
        if target_path and event in {
            "processing.file.tagged",
            "processing.file.move",
            "processing.file.conflict",
        }:
            _ = body.append(" → ")
            _ = body.append_text(
                self._format_path(str(target_path), base=getattr(record, "target_base_path", None))
            )

        detail = getattr(record, "error_message", None) or getattr(record, "reason", None)
        if detail:
            _ = body.append(f" ({detail})")

    def _render_processing_message(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event.startswith("processing.run"):
            self._render_run(record, event, body)
        else:
            self._render_file(record, event, body)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        processing_text = self._render_processing_message(record)
        if processing_text is not None:
            return processing_text
        return super().render_message(record, message)


__all__ = ["EventRichHandler"]
