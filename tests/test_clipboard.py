from __future__ import annotations

import os
import subprocess
import sys
import time
import typing as typ
from pathlib import Path

import pytest

from boilerplate_forge import clipboard
from boilerplate_forge.clipboard import ClipboardError, SystemClipboard


def test_write_pipes_text_to_first_available_command(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[tuple[list[str], str]] = []

    def fake_which(name: str) -> str | None:
        return f"/usr/bin/{name}" if name in {"xclip", "clip"} else None

    def fake_run(cmd: list[str], **kwargs: typ.Any) -> subprocess.CompletedProcess[str]:
        calls.append((cmd, kwargs["input"]))
        return subprocess.CompletedProcess(cmd, 0, "", "")

    monkeypatch.setattr(clipboard.shutil, "which", fake_which)
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)

    SystemClipboard().write("body { color: red; }")
    assert calls == [
        (["/usr/bin/xclip", "-selection", "clipboard"], "body { color: red; }")
    ]


def test_missing_commands_raise(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(clipboard.shutil, "which", lambda _name: None)
    with pytest.raises(ClipboardError, match="No clipboard command available"):
        SystemClipboard().write("text")


def test_failing_command_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **_kwargs: typ.Any) -> None:
        raise subprocess.CalledProcessError(returncode=1, cmd=cmd)

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: f"/bin/{name}")
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    with pytest.raises(ClipboardError, match="Please copy manually"):
        SystemClipboard(commands=[("pbcopy",)]).write("text")


def test_failing_command_timeout_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **kwargs: typ.Any) -> None:
        raise subprocess.TimeoutExpired(cmd=cmd, timeout=kwargs["timeout"])

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: f"/bin/{name}")
    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    with pytest.raises(ClipboardError, match="Please copy manually"):
        SystemClipboard(commands=[("xsel",)], timeout=0.5).write("text")


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell")
def test_write_returns_while_tool_keeps_serving_selection(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    received = tmp_path / "received.txt"
    tool = tmp_path / "xclip"
    tool.write_text(
        "#!/bin/sh\n"
        f'cat > "{received}"\n'
        "(sleep 6) &\n"
        "exit 0\n",
        encoding="utf-8",
    )
    tool.chmod(0o755)
    monkeypatch.setenv("PATH", f"{tmp_path}{os.pathsep}{os.environ.get('PATH', '')}")

    started = time.monotonic()
    SystemClipboard([("xclip", "-selection", "clipboard")]).write("hello")
    elapsed = time.monotonic() - started

    assert elapsed < 3
    assert received.read_text(encoding="utf-8") == "hello"
