"""Git operations for repository snapshots.

Clones run either through the ``git`` executable (as an argument vector,
never a shell string) or through dulwich porcelain.
"""

import logging
import os
import subprocess
from pathlib import Path

from dulwich import porcelain

from snapshot_analyzer.errors import CloneError

logger = logging.getLogger(__name__)

CLONE_BACKENDS: frozenset[str] = frozenset({"git", "dulwich"})

_FALLBACK_REPO_NAME = "repo"


def repo_local_name(repo_url: str) -> str:
    """
    Derive a directory name from a repo URL: the last path segment minus ".git".

    Falls back to "repo" when the URL has no usable segment.
    """
    name = repo_url.strip().rstrip("/").split("/")[-1].removesuffix(".git")
    if name in ("", ".", ".."):
        return _FALLBACK_REPO_NAME
    return name


def git_clone_command(repo_url: str, target: Path | str, *, branch: str, depth: int = 1) -> list[str]:
    """Argument vector for a shallow single-branch clone."""
    return [
        "git",
        "clone",
        "--depth",
        str(depth),
        "--branch",
        branch,
        "--",
        repo_url,
        str(target),
    ]


def clone_snapshot(
    repo_url: str,
    target: Path | str,
    *,
    branch: str = "main",
    depth: int = 1,
    backend: str = "git",
    timeout: float | None = None,
) -> Path:
    """
    Shallow-clone one branch of a repository into target.

    Args:
        repo_url: Git clone URL (e.g. https://github.com/axios/axios.git).
        target: Directory to clone into; must not exist yet.
        branch: Branch or tag to check out.
        depth: Clone depth; 1 for shallow clone.
        backend: "git" runs the git executable; "dulwich" clones in-process.
        timeout: Seconds before the git process is killed (git backend only).

    Returns:
        Path to the cloned working tree.

    Raises:
        CloneError: The clone could not start, timed out, or failed.
    """
    if backend not in CLONE_BACKENDS:
        raise ValueError(f"Unknown clone backend: {backend!r}")

    target = Path(target)
    logger.info("Cloning %s branch=%s into %s (backend=%s)", repo_url, branch, target, backend)
    if backend == "dulwich":
        _clone_with_dulwich(repo_url, target, branch=branch, depth=depth)
    else:
        _clone_with_git(repo_url, target, branch=branch, depth=depth, timeout=timeout)
    logger.info("Clone finished: %s", target)
    return target


def _clone_with_git(
    repo_url: str,
    target: Path,
    *,
    branch: str,
    depth: int,
    timeout: float | None,
) -> None:
    cmd = git_clone_command(repo_url, target, branch=branch, depth=depth)
    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=timeout,
            env={**os.environ, "GIT_TERMINAL_PROMPT": "0"},
        )
    except FileNotFoundError as exc:
        raise CloneError(f"git executable not found: {exc}", cause=exc) from exc
    except subprocess.TimeoutExpired as exc:
        raise CloneError(f"git clone timed out after {timeout}s: {repo_url}", cause=exc) from exc
    except OSError as exc:
        raise CloneError(f"Failed to start git clone: {exc}", cause=exc) from exc

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        error = subprocess.CalledProcessError(result.returncode, cmd, result.stdout, result.stderr)
        raise CloneError(
            f"git clone failed (exit {result.returncode}) for {repo_url} branch={branch}: {stderr}",
            cause=error,
        ) from error


def _clone_with_dulwich(repo_url: str, target: Path, *, branch: str, depth: int) -> None:
    try:
        repo = porcelain.clone(
            repo_url,
            str(target),
            depth=depth,
            branch=branch,
        )
    except Exception as exc:
        raise CloneError(f"dulwich clone failed for {repo_url} branch={branch}: {exc}", cause=exc) from exc
    repo.close()
