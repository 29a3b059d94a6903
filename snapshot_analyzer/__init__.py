"""Snapshot analyzer module: clone a Git repository and count its files and lines."""

from .errors import CleanupError, CloneError, SnapshotError, TraversalError
from .file_scanner import count_lines, scan_snapshot
from .models import AnalysisResult, ProjectStats
from .services.analysis.service import RepositoryAnalyzer
from .services.repo.repo_git_utils import clone_snapshot, repo_local_name
from .utils import FileCategory, classify_file

__all__ = [
    "AnalysisResult",
    "CleanupError",
    "CloneError",
    "FileCategory",
    "ProjectStats",
    "RepositoryAnalyzer",
    "SnapshotError",
    "TraversalError",
    "classify_file",
    "clone_snapshot",
    "count_lines",
    "repo_local_name",
    "scan_snapshot",
]
