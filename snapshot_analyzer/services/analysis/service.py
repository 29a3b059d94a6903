"""Service that clones a repository snapshot and reports file/line statistics."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from snapshot_analyzer.file_scanner import scan_snapshot
from snapshot_analyzer.models import AnalysisResult
from snapshot_analyzer.services.repo.repo_git_utils import CLONE_BACKENDS, clone_snapshot, repo_local_name
from snapshot_analyzer.services.repo.snapshot import snapshot_workspace

logger = logging.getLogger(__name__)

CloneRepoFn = Callable[..., Path]

_DECODE_ERROR_MODES: frozenset[str] = frozenset({"strict", "replace"})


class RepositoryAnalyzer:
    """
    Clone a repository into a throwaway snapshot, walk it, and delete it.

    Each analyze() call owns its own snapshot directory under temp_dir, so
    concurrent calls sharing one analyzer do not interfere.
    """

    def __init__(
        self,
        temp_dir: Path | str,
        *,
        clone_repo_fn: CloneRepoFn = clone_snapshot,
        clone_timeout: float | None = None,
        clone_backend: str = "git",
        decode_errors: str = "replace",
    ):
        if clone_backend not in CLONE_BACKENDS:
            raise ValueError(f"Unknown clone backend: {clone_backend!r}")
        if decode_errors not in _DECODE_ERROR_MODES:
            raise ValueError(f"Unknown decode_errors mode: {decode_errors!r}")
        self._temp_dir = Path(temp_dir)
        self._clone_repo_fn = clone_repo_fn
        self._clone_timeout = clone_timeout
        self._clone_backend = clone_backend
        self._decode_errors = decode_errors

    @property
    def temp_dir(self) -> Path:
        return self._temp_dir

    def analyze(self, repository_url: str, branch: str = "main") -> AnalysisResult:
        """
        Shallow-clone one branch and return aggregate file/line statistics.

        Raises:
            CloneError: The clone failed; nothing is left on disk.
            TraversalError: Listing or reading the snapshot failed.
            CleanupError: The snapshot could not be removed after a successful walk.
        """
        if not repository_url or not repository_url.strip():
            raise ValueError("repository_url is required")
        if not branch or not branch.strip():
            raise ValueError("branch is required")

        repo_url = repository_url.strip()
        repo_name = repo_local_name(repo_url)
        logger.info("Analyzing %s branch=%s", repo_url, branch)

        with snapshot_workspace(self._temp_dir, repo_name) as target:
            self._clone_repo_fn(
                repo_url,
                target,
                branch=branch,
                backend=self._clone_backend,
                timeout=self._clone_timeout,
            )
            tree = scan_snapshot(target, decode_errors=self._decode_errors)

        result = AnalysisResult.from_tree_stats(tree, analysis_date=datetime.now(timezone.utc))
        logger.info(
            "Analysis complete %s files=%d lines=%d script=%d data=%d documentation=%d",
            repo_url,
            result.file_count,
            result.total_lines,
            result.stats.script_files,
            result.stats.data_files,
            result.stats.documentation_files,
        )
        return result
