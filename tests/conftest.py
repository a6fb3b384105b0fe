"""Shared fixtures for toolbelt tests."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from pathlib import Path


class RecordingLogger:
    """Stand-in for a structlog bound logger that keeps every call."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kw: Any) -> None:
        self.events.append((level, event, kw))

    def debug(self, event: str, **kw: Any) -> None:
        self._record("debug", event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._record("info", event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._record("error", event, **kw)

    def levels(self, level: str) -> list[tuple[str, dict[str, Any]]]:
        return [(event, kw) for lvl, event, kw in self.events if lvl == level]


@pytest.fixture()
def log() -> RecordingLogger:
    return RecordingLogger()


def write_files(root: Path, files: dict[str, str]) -> None:
    """Create files (and parent directories) below root."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Map every file below root (relative, posix style) to its content."""
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


@pytest.fixture()
def my_files(tmp_path: Path) -> Path:
    """Source tree with a mix of extensions and one nested directory."""
    source = tmp_path / "my_files"
    write_files(
        source,
        {
            "file1.txt": "one",
            "file2.csv": "a,b\n1,2\n",
            "more_files/file3.md": "# three",
            "file4.png": "not really a png",
        },
    )
    return source


class FakeRun:
    """Replacement for subprocess.run that records argv and returns canned results."""

    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "", exc: Exception | None = None) -> None:
        self.calls: list[list[str]] = []
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.exc = exc

    def __call__(self, args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(args))
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


@pytest.fixture()
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    runner = FakeRun()
    monkeypatch.setattr(subprocess, "run", runner)
    return runner
