"""Rich console handler that renders drive paths with styled separators.

Where: platform/logging/handlers.py
What: Format ``path_event`` records with icons and compact, coloured paths.
Why: Keep diagnostic output about rejected or clamped paths readable.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Custom Rich handler that displays drive paths with coloured separators."""

    _PATH_EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "path.normalize.clamped": ("↩️", "yellow"),
        "path.parse.rejected": ("⛔", "red"),
        "path.config.loaded": ("⚙️", "cyan"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4
    _SEPARATORS: ClassVar[frozenset[str]] = frozenset({"/", ":"})

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a drive path keeping its root and at most the last few segments."""

        root, separator, rest = path.partition("/")
        if not separator:
            return self._style_path_string(path)

        # A share root ("//label") leaves its label at the front of ``rest``.
        if root == "" and rest.startswith("/"):
            label, _, rest = rest[1:].partition("/")
            root = f"//{label}"

        trailing = "/" if rest.endswith("/") else ""
        body_parts = [part for part in rest.split("/") if part]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = f"{root}/"
        if truncated:
            display_string += "…/"
        display_string += "/".join(body_parts)
        if body_parts:
            display_string += trailing
        return self._style_path_string(display_string)

    @classmethod
    def _style_path_string(cls, path_string: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char in cls._SEPARATORS or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured path events with dedicated styling."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PATH_EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        drive_path = getattr(record, "drive_path", None)
        if drive_path:
            _ = text.append(" @ ")
            _ = text.append_text(self._format_path(str(drive_path)))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        path_text = self._render_path_message(record, message)
        if path_text is not None:
            return path_text

        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
