"""Shared pytest fixtures for snapshot analyzer tests."""

from pathlib import Path
from typing import Callable

import pytest


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create files (relative path -> content) under root; bytes are written raw."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
    return root


@pytest.fixture
def make_tree(tmp_path) -> Callable[[dict[str, str | bytes]], Path]:
    """Build a file tree under a fresh directory and return its root."""
    root = tmp_path / "tree"
    root.mkdir()

    def _make(files: dict[str, str | bytes]) -> Path:
        return write_tree(root, files)

    return _make


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Snapshot root handed to RepositoryAnalyzer."""
    path = tmp_path / "analysis_temp"
    path.mkdir()
    return path


class FakeClone:
    """Stand-in for clone_snapshot that materializes a fixed tree and records calls."""

    def __init__(self, files: dict[str, str | bytes], *, error: Exception | None = None):
        self.files = files
        self.error = error
        self.calls: list[dict[str, object]] = []

    def __call__(self, repo_url: str, target: Path, **kwargs: object) -> Path:
        self.calls.append({"repo_url": repo_url, "target": Path(target), **kwargs})
        target = Path(target)
        target.mkdir(parents=True)
        write_tree(target, self.files)
        if self.error is not None:
            raise self.error
        return target


@pytest.fixture
def fake_clone() -> Callable[..., FakeClone]:
    def _make(files: dict[str, str | bytes], *, error: Exception | None = None) -> FakeClone:
        return FakeClone(files, error=error)

    return _make
