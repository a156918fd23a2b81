from __future__ import annotations

import json
import logging

import pytest

from simple_ui.logging import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="simple_ui.events",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="unknown simple output %r",
        args=("garbage",),
        exc_info=None,
    )
    record.output = "garbage"
    payload = json.loads(formatter.format(record))

    assert payload["message"] == "unknown simple output 'garbage'"
    assert payload["output"] == "garbage"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "simple_ui.events"
    assert "args" not in payload


def test_json_formatter_falls_back_to_repr() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", (), None)
    record.pid = object()
    payload = json.loads(JsonFormatter().format(record))

    assert payload["pid"].startswith("<object object")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    root.handlers.clear()
    root.setLevel(level)


def test_configure_logging_json(restore_root_logger, capsys: pytest.CaptureFixture[str]) -> None:
    logger = configure_logging("DEBUG", fmt="json", name="test-simple")
    logger.info("structured", extra={"event": "test"})

    captured = capsys.readouterr()
    payload = json.loads(captured.err.splitlines()[0])
    assert payload["message"] == "structured"
    assert payload["event"] == "test"
    assert payload["logger"] == "test-simple"
    assert captured.out == ""


def test_configure_logging_text(restore_root_logger, capsys: pytest.CaptureFixture[str]) -> None:
    logger = configure_logging("info")
    logger.debug("hidden")
    logger.info("shown")

    output = capsys.readouterr().err
    assert "hidden" not in output
    assert " - simple_ui - INFO - shown" in output
