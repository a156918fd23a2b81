"""Fixtures providing fake renderer executables."""

import stat
import sys

import pytest


@pytest.fixture
def fake_simple(tmp_path):
    """
    Create an executable standing in for /opt/bin/simple.

    The returned factory takes a Python snippet run with the received script
    bound to ``script``; it also stores the script in ``received.txt``.
    """

    def factory(body: str):
        received = tmp_path / "received.txt"
        path = tmp_path / "simple"
        path.write_text(
            f"#!{sys.executable}\n"
            "import sys\n"
            "script = sys.stdin.buffer.read().decode('utf-8')\n"
            f"open({str(received)!r}, 'wb').write(script.encode('utf-8'))\n"
            f"{body}\n",
            encoding="utf-8",
        )
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
        return path, received

    return factory
