"""Walk a cloned repository snapshot and aggregate file/line statistics."""

import logging
import os
from pathlib import Path

from .errors import TraversalError
from .models import TreeStats
from .utils import classify_file

logger = logging.getLogger(__name__)

EXCLUDED_FOLDERS: frozenset[str] = frozenset({
    ".git",
    "node_modules",
})


def count_lines(path: Path | str, *, decode_errors: str = "replace") -> int:
    """
    Return the number of "\\n"-delimited segments in a file's UTF-8 text.

    A trailing newline yields one extra empty segment ("x\\ny\\n" is 3) and an
    empty file is 1. The raw bytes are decoded without newline translation.
    """
    data = Path(path).read_bytes()
    text = data.decode("utf-8", errors=decode_errors)
    return text.count("\n") + 1


def scan_snapshot(clone_path: Path | str, *, decode_errors: str = "replace") -> TreeStats:
    """
    Walk a snapshot directory and sum the statistics of every regular file.

    Directories named in EXCLUDED_FOLDERS are skipped with their subtrees.
    Symlinks and other special entries are neither followed nor counted.

    Args:
        clone_path: Root of the cloned working tree.
        decode_errors: Codec error handler for file contents ("strict" or "replace").

    Returns:
        Aggregated TreeStats for the whole tree.

    Raises:
        TraversalError: A listing or read failed, or a file is not valid UTF-8
            under strict decoding.
    """
    root = Path(clone_path)
    total = TreeStats()
    pending: list[Path] = [root]

    while pending:
        dir_path = pending.pop()
        for entry in _list_dir(dir_path):
            entry_path = Path(entry.path)
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as exc:
                raise TraversalError(f"Cannot stat {entry_path}: {exc}", path=entry_path, cause=exc) from exc

            if is_dir:
                if entry.name in EXCLUDED_FOLDERS:
                    logger.debug("Skipping excluded folder %s", entry_path)
                    continue
                pending.append(entry_path)
            elif is_file:
                total = total + _scan_file(entry_path, decode_errors=decode_errors)
            else:
                logger.debug("Skipping non-regular entry %s", entry_path)

    logger.debug(
        "Scanned %s files=%d lines=%d",
        root,
        total.file_count,
        total.total_lines,
    )
    return total


def _list_dir(dir_path: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(dir_path) as it:
            return list(it)
    except OSError as exc:
        raise TraversalError(f"Cannot list {dir_path}: {exc}", path=dir_path, cause=exc) from exc


def _scan_file(path: Path, *, decode_errors: str) -> TreeStats:
    try:
        line_count = count_lines(path, decode_errors=decode_errors)
    except UnicodeDecodeError as exc:
        raise TraversalError(f"Cannot decode {path} as UTF-8: {exc}", path=path, cause=exc) from exc
    except OSError as exc:
        raise TraversalError(f"Cannot read {path}: {exc}", path=path, cause=exc) from exc
    return TreeStats.for_file(line_count, classify_file(path.name))
