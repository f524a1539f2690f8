"""Log entry presentation."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Iterable, TextIO

from flyview.ansi import Color, colorize, faint, green
from flyview.models import LogEntry

_NEWLINE_MARK = "↩︎"


def level_color(level: str) -> Color:
    """Colour for a log level; only "warning" (not "warn") is yellow."""
    if level == "debug":
        return Color.CYAN
    if level == "info":
        return Color.BLUE
    if level == "warning":
        return Color.YELLOW
    return Color.RED


def _field(name: str, value) -> str:
    if isinstance(value, str):
        return f'{faint(name + "=")}"{value}" ' if value else ""
    if isinstance(value, int) and value > 0:
        return f"{faint(name + '=')}{value} "
    return ""


@dataclass
class LogPresenter:
    remove_newlines: bool = False
    hide_region: bool = False
    hide_alloc_id: bool = False

    def fprint(self, out: TextIO, as_json: bool, entries: Iterable[LogEntry]) -> None:
        """Write each entry to ``out``, one per line or as indented JSON."""
        for entry in entries:
            out.write(self._format(entry, as_json))

    def _format(self, entry: LogEntry, as_json: bool) -> str:
        if as_json:
            return json.dumps(dataclasses.asdict(entry), indent=4) + "\n"

        parts = [f"{faint(entry.timestamp)} "]

        if not self.hide_alloc_id:
            if entry.provider:
                if entry.instance:
                    parts.append(f"{entry.provider}[{entry.instance}]")
                else:
                    parts.append(entry.provider)
            elif entry.instance:
                parts.append(entry.instance)
            parts.append(" ")

        if not self.hide_region:
            parts.append(f"{green(entry.region)} ")

        parts.append(f"[{colorize(entry.level, level_color(entry.level))}] ")

        parts.append(_field("error.code", entry.error_code))
        error_message = _field("error.message", entry.error_message)
        parts.append(error_message)
        parts.append(_field("request.method", entry.request_method))
        parts.append(_field("request.url", entry.url))
        parts.append(_field("request.id", entry.request_id))
        parts.append(_field("response.status", entry.response_status))

        if not error_message:
            message = entry.message
            if self.remove_newlines:
                mark = faint(_NEWLINE_MARK)
                message = message.replace("\r\n", mark).replace("\n", mark)
            parts.append(message)

        parts.append("\n")
        return "".join(parts)