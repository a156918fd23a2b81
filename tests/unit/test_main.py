"""Unit tests for the python -m simple_ui runner."""

import asyncio
import logging
from unittest.mock import AsyncMock, patch

import orjson
import pytest

from simple_ui.__main__ import EXIT_CONFIG_ERROR, EXIT_EXECUTION_ERROR, main
from simple_ui.config import SimpleConfig
from simple_ui.errors import SimpleExecutionError
from simple_ui.events import SelectionEvent
from simple_ui.executor import SimpleExecutor

SCRIPT = [
    {"type": "fontsize", "fontSize": 32},
    {"type": "button", "id": "ok", "rect": {"x": 0, "y": 0, "width": 200, "height": 80}, "value": "OK"},
]


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    for name in (
        "SIMPLE_PATH",
        "SIMPLE_RESPONSE_TIMEOUT_SEC",
        "SIMPLE_ACCUMULATE_OUTPUT",
        "SIMPLE_READ_CHUNK_SIZE",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def script_file(tmp_path):
    path = tmp_path / "script.json"
    path.write_bytes(orjson.dumps(SCRIPT))
    return path


@pytest.mark.asyncio
async def test_main_prints_event(script_file, capsys):
    run = AsyncMock(return_value=SelectionEvent(id="ok"))

    with patch("simple_ui.__main__.SimpleExecutor.run", run):
        code = await main([str(script_file)])

    assert code == 0
    assert orjson.loads(capsys.readouterr().out) == {"id": "ok", "type": "selection"}

    commands = run.call_args[0][0]
    assert [c.type for c in commands] == ["fontsize", "button"]


@pytest.mark.asyncio
async def test_main_no_event_prints_nothing(script_file, capsys):
    with patch("simple_ui.__main__.SimpleExecutor.run", AsyncMock(return_value=None)):
        code = await main([str(script_file)])

    assert code == 0
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_main_invalid_script(tmp_path):
    path = tmp_path / "bad.json"
    path.write_bytes(b'[{"type": "slider"}]')

    assert await main([str(path)]) == EXIT_CONFIG_ERROR


@pytest.mark.asyncio
async def test_main_missing_script(tmp_path):
    assert await main([str(tmp_path / "missing.json")]) == EXIT_CONFIG_ERROR


@pytest.mark.asyncio
async def test_main_bad_config(script_file, monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    assert await main([str(script_file)]) == EXIT_CONFIG_ERROR
    assert "Configuration error" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_main_execution_error(script_file):
    run = AsyncMock(side_effect=SimpleExecutionError("Failed to start /opt/bin/simple"))

    with patch("simple_ui.__main__.SimpleExecutor.run", run):
        assert await main([str(script_file)]) == EXIT_EXECUTION_ERROR


@pytest.mark.asyncio
async def test_main_cancelled(script_file):
    run = AsyncMock(side_effect=asyncio.CancelledError())

    with patch("simple_ui.__main__.SimpleExecutor.run", run):
        assert await main([str(script_file)]) == EXIT_EXECUTION_ERROR


@pytest.mark.asyncio
async def test_main_uses_default_config_in_clean_env(script_file):
    with patch("simple_ui.__main__.SimpleExecutor", wraps=SimpleExecutor) as executor_cls, patch.object(
        SimpleExecutor, "run", AsyncMock(return_value=None)
    ):
        assert await main([str(script_file)]) == 0

    assert executor_cls.call_args[0][0] == SimpleConfig()
