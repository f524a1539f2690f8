import io
import json

import pytest

from flyview.ansi import Color, colorize, faint, green
from flyview.logs import LogPresenter, level_color
from flyview.models import LogEntry


def show(entries, as_json=False, **opts):
    out = io.StringIO()
    LogPresenter(**opts).fprint(out, as_json, entries)
    return out.getvalue()


@pytest.mark.parametrize(
    "level, color",
    [
        ("debug", Color.CYAN),
        ("info", Color.BLUE),
        ("warning", Color.YELLOW),
        ("warn", Color.RED),
        ("error", Color.RED),
    ],
)
def test_level_color(level, color):
    assert level_color(level) is color


def test_basic_line_contents():
    entry = LogEntry(
        timestamp="2021-01-01T00:00:00Z", message="hello", level="info",
        instance="abc123", region="ams", provider="web",
    )
    output = show([entry])
    assert output.startswith(faint("2021-01-01T00:00:00Z") + " ")
    assert "web[abc123] " in output
    assert green("ams") + " " in output
    assert "[" + colorize("info", Color.BLUE) + "] " in output
    assert output.endswith("hello\n")


def test_provider_without_instance():
    output = show([LogEntry(message="m", provider="web", level="info")])
    assert "web " in output
    assert "web[" not in output


def test_instance_without_provider():
    output = show([LogEntry(message="m", instance="abc123", level="info")])
    assert "abc123 " in output


def test_hide_alloc_id_and_region():
    entry = LogEntry(message="m", instance="abc123", provider="web", region="ams")
    output = show([entry], hide_alloc_id=True, hide_region=True)
    assert "abc123" not in output
    assert "web" not in output
    assert green("ams") not in output


def test_remove_newlines_replaces_breaks():
    entry = LogEntry(message="one\r\ntwo\nthree", level="info")
    output = show([entry], remove_newlines=True)
    assert "\n" not in output[:-1]
    assert "\r" not in output
    assert output.count(faint("↩︎")) == 2


def test_newlines_kept_by_default():
    entry = LogEntry(message="one\ntwo", level="info")
    assert "one\ntwo\n" in show([entry])


def test_error_fields_and_message_suppressed():
    entry = LogEntry(
        message="should not appear", level="error",
        error_code=500, error_message="failure",
        request_method="GET", url="/path", request_id="rid",
    )
    output = show([entry])
    assert faint("error.code=") + "500 " in output
    assert faint("error.message=") + '"failure" ' in output
    assert faint("request.method=") + '"GET" ' in output
    assert faint("request.url=") + '"/path" ' in output
    assert faint("request.id=") + '"rid" ' in output
    assert "should not appear" not in output


def test_zero_status_not_printed():
    output = show([LogEntry(message="m", level="info", response_status=0)])
    assert "response.status" not in output


def test_response_status_printed():
    output = show([LogEntry(message="m", level="info", response_status=404)])
    assert faint("response.status=") + "404 " in output
    assert output.endswith("m\n")


def test_json_output_round_trip():
    entry = LogEntry(message="hello", level="info", region="ams")
    decoded = json.loads(show([entry], as_json=True))
    assert decoded["message"] == "hello"
    assert decoded["region"] == "ams"


def test_one_line_per_entry():
    entries = [LogEntry(message=f"m{i}", level="info") for i in range(3)]
    assert show(entries).count("\n") == 3