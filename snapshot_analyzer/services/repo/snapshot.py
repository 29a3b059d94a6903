"""Per-call snapshot directories that are always removed afterwards."""

import logging
import shutil
import time
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from snapshot_analyzer.errors import CleanupError, SnapshotError

logger = logging.getLogger(__name__)


def snapshot_path(temp_dir: Path | str, repo_name: str, *, now_ms: int | None = None) -> Path:
    """
    Return <temp_dir>/<unix_millis>-<token>/<repo_name>.

    The random token keeps calls started in the same millisecond apart.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return Path(temp_dir) / f"{now_ms}-{uuid.uuid4().hex[:8]}" / repo_name


def remove_snapshot(path: Path | str) -> None:
    """Recursively delete a snapshot directory. A missing path is not an error."""
    path = Path(path)
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        raise CleanupError(f"Failed to remove snapshot {path}: {exc}", path=path, cause=exc) from exc
    logger.debug("Removed snapshot %s", path)


@contextmanager
def snapshot_workspace(temp_dir: Path | str, repo_name: str) -> Generator[Path, None, None]:
    """
    Reserve a fresh snapshot path and remove it when the block exits.

    Yields the (not yet existing) clone target; its parent is created.
    On normal exit a removal failure raises CleanupError. If the block raised,
    removal is still attempted but its failure is only logged, so the
    original error is the one that propagates.
    """
    target = snapshot_path(temp_dir, repo_name)
    call_dir = target.parent
    try:
        call_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SnapshotError(f"Cannot create snapshot directory {call_dir}: {exc}", cause=exc) from exc

    try:
        yield target
    except BaseException:
        try:
            remove_snapshot(call_dir)
        except CleanupError as cleanup_exc:
            logger.warning("Discarding cleanup failure after error: %s", cleanup_exc)
        raise
    remove_snapshot(call_dir)
